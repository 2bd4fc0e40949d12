"""Tests for GitwrapConfig."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gitwrap.core.config import GitwrapConfig
from gitwrap.git.operations import OMIT, Operation


class TestGitwrapConfig:
    def test_default_values(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = GitwrapConfig()
        assert config.git_binary == "git"
        assert config.repository_path == tmp_path.resolve()
        assert config.option_overrides == {}
        assert config.summary_log_limit == 10
        assert config.log_level == "INFO"
        assert config.log_dir is None
        assert config.log_max_bytes == 10_485_760
        assert config.log_backup_count == 5

    def test_repository_path_resolved(self, tmp_path):
        config = GitwrapConfig(repository_path=tmp_path / "." / "")
        assert config.repository_path == tmp_path.resolve()
        assert config.repository_path.is_absolute()

    def test_repository_path_must_exist(self):
        with pytest.raises(ValueError, match="does not exist"):
            GitwrapConfig(repository_path=Path("/nonexistent/directory/xyz"))

    def test_log_level_normalized(self, tmp_path):
        config = GitwrapConfig(repository_path=tmp_path, log_level="debug")
        assert config.log_level == "DEBUG"

    def test_log_level_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="unknown log level"):
            GitwrapConfig(repository_path=tmp_path, log_level="chatty")

    def test_summary_log_limit_positive(self, tmp_path):
        with pytest.raises(ValueError):
            GitwrapConfig(repository_path=tmp_path, summary_log_limit=0)


class TestOptionOverrides:
    def test_from_kwargs(self, tmp_path):
        config = GitwrapConfig(
            repository_path=tmp_path,
            option_overrides={"log": {"limit": "-n25"}},
        )
        assert config.option_overrides == {Operation.LOG: {"limit": "-n25"}}

    def test_unknown_operation_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            GitwrapConfig(
                repository_path=tmp_path,
                option_overrides={"rebase": {"x": "-i"}},
            )

    def test_from_env_json(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITWRAP_REPOSITORY_PATH", str(tmp_path))
        monkeypatch.setenv(
            "GITWRAP_OPTION_OVERRIDES",
            json.dumps({"merge": {"commit": None, "ff": "--ff-only"}}),
        )
        config = GitwrapConfig()
        assert config.option_overrides[Operation.MERGE] == {
            "commit": None,
            "ff": "--ff-only",
        }

    def test_defaults_for_maps_null_to_omit(self, tmp_path):
        config = GitwrapConfig(
            repository_path=tmp_path,
            option_overrides={"status": {"output": None, "branch": "-b"}},
        )
        assert config.defaults_for(Operation.STATUS) == {"output": OMIT, "branch": "-b"}

    def test_defaults_for_missing_operation(self, tmp_path):
        config = GitwrapConfig(repository_path=tmp_path)
        assert config.defaults_for(Operation.PUSH) == {}

    def test_env_prefix(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITWRAP_GIT_BINARY", "/usr/local/bin/git")
        config = GitwrapConfig(repository_path=tmp_path)
        assert config.git_binary == "/usr/local/bin/git"
