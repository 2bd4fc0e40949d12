"""Shared exception types for gitwrap."""

from __future__ import annotations

from collections.abc import Sequence


class GitwrapError(Exception):
    """Base exception for all gitwrap errors."""


class GitProcessError(GitwrapError):
    """The git process exited unsuccessfully or could not be started."""

    def __init__(
        self,
        stderr: str,
        *,
        command: str | Sequence[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        super().__init__(stderr.strip() or f"git exited with status {returncode}")
        self.stderr = stderr
        self.command = command
        self.returncode = returncode


class GitParseError(GitwrapError):
    """A line of git output did not match the expected shape."""

    def __init__(self, kind: str, line: str, output: str) -> None:
        super().__init__(f'Unable to parse {kind} "{line}" from output "{output}".')
        self.kind = kind
        self.line = line
        self.output = output


class UnknownOperationError(GitwrapError, LookupError):
    """An operation identifier has no registered sub-command."""
