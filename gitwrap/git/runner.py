"""Executes git as an external process."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from gitwrap.exceptions import GitProcessError

logger = structlog.get_logger()

GIT_BIN = "git"


@runtime_checkable
class CommandRunner(Protocol):
    """Runs git with *args* in *cwd*, returning stdout or raising GitProcessError."""

    def run(self, args: Sequence[str], cwd: Path) -> str: ...


class GitRunner:
    """Blocking subprocess runner; no timeout is imposed."""

    def __init__(self, git_binary: str = GIT_BIN) -> None:
        self.git_binary = git_binary

    def run(self, args: Sequence[str], cwd: Path) -> str:
        cmd = (self.git_binary, *args)
        logger.debug("git_exec", command=cmd, cwd=str(cwd))

        try:
            completed = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as e:
            logger.error("git_exec_error", command=cmd, error=str(e))
            raise GitProcessError(
                f"{self.git_binary} is not installed or {cwd} does not exist",
                command=cmd,
            ) from e
        except OSError as e:
            logger.error("git_exec_error", command=cmd, error=str(e))
            raise GitProcessError(str(e), command=cmd) from e

        if completed.returncode != 0:
            logger.warning(
                "git_exec_failed",
                command=cmd,
                returncode=completed.returncode,
                stderr=completed.stderr.strip(),
            )
            raise GitProcessError(
                completed.stderr or "",
                command=cmd,
                returncode=completed.returncode,
            )
        return completed.stdout or ""
