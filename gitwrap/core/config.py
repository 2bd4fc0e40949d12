"""Unified configuration via pydantic-settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitwrap.git.operations import OMIT, Operation, Token


class GitwrapConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GITWRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Git
    git_binary: str = "git"
    repository_path: Path = Field(default=Path("."), validate_default=True)

    # Per-operation default options, e.g. {"log": {"limit": "-n25"}}.
    # A null token declares the option without emitting it.
    option_overrides: dict[Operation, dict[str, str | None]] = {}

    # Summary
    summary_log_limit: int = Field(default=10, ge=1)

    # Logging
    log_level: str = "INFO"
    log_dir: Path | None = None
    log_max_bytes: int = 10_485_760
    log_backup_count: int = 5

    @field_validator("repository_path")
    @classmethod
    def resolve_repository_path(cls, v: Path) -> Path:
        resolved = v.expanduser().resolve()
        if not resolved.is_dir():
            raise ValueError(f"repository path does not exist: {resolved}")
        return resolved

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    def defaults_for(self, operation: Operation) -> dict[str, Token]:
        """Option overrides for *operation* with nulls mapped to ``OMIT``."""
        return {
            label: OMIT if token is None else token
            for label, token in self.option_overrides.get(operation, {}).items()
        }
