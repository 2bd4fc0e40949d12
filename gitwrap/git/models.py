"""Data models for parsed git output and command history."""

from pydantic import BaseModel, ConfigDict


class BranchInfo(BaseModel):
    """Tip of a branch as listed by ``git branch -vv``."""

    model_config = ConfigDict(frozen=True)

    hash: str
    message: str = ""


class HistoryEntry(BaseModel):
    """One successful git invocation and its captured stdout."""

    model_config = ConfigDict(frozen=True)

    command: str | tuple[str, ...]
    output: str
