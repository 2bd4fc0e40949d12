"""Append-only record of executed git commands."""

from __future__ import annotations

from collections.abc import Sequence

from gitwrap.git.models import HistoryEntry


class InvocationHistory:
    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def record(self, command: str | Sequence[str], output: str) -> str:
        """Append *command* and its *output*; returns *output* unchanged."""
        if not isinstance(command, str):
            command = tuple(command)
        self._entries.append(HistoryEntry(command=command, output=output))
        return output

    @property
    def last_output(self) -> str | None:
        return self._entries[-1].output if self._entries else None

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
