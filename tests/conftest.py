"""Shared fixtures and a recording runner for testing."""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from pathlib import Path

import pytest

from gitwrap.core.config import GitwrapConfig
from gitwrap.exceptions import GitProcessError
from gitwrap.git.repository import GitRepository


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Prevent .env file and shell env from leaking into tests."""
    monkeypatch.setitem(GitwrapConfig.model_config, "env_file", None)
    for key in list(os.environ):
        if key.startswith("GITWRAP_"):
            monkeypatch.delenv(key, raising=False)


class RecordingRunner:
    """In-memory runner: records every call and replays queued responses.

    Queued strings are returned as stdout, queued exceptions are raised.
    With nothing queued, commands succeed with empty output.
    """

    def __init__(self, *responses: str | Exception) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self._responses: list[str | Exception] = list(responses)

    def queue(self, *responses: str | Exception) -> None:
        self._responses.extend(responses)

    def fail(self, stderr: str = "fatal: error", returncode: int = 128) -> None:
        self._responses.append(GitProcessError(stderr, returncode=returncode))

    @property
    def last_args(self) -> list[str]:
        return self.calls[-1][0]

    def run(self, args: Sequence[str], cwd: Path) -> str:
        self.calls.append((list(args), cwd))
        if not self._responses:
            return ""
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def repo(tmp_path, runner):
    return GitRepository(tmp_path, runner=runner)


@pytest.fixture
def real_repo(tmp_path, monkeypatch):
    """An initialized repository on disk driven by the real git binary."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    work = tmp_path / "work"
    work.mkdir()
    repo = GitRepository.create(work).init()
    repo.run(["symbolic-ref", "HEAD", "refs/heads/main"])
    repo.config("user.email", "dev@example.com")
    repo.config("user.name", "Dev Example")
    repo.config("commit.gpgsign", "false")
    return repo
