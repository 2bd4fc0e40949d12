"""Pure functions to format parsed git data for terminal display."""

from collections.abc import Mapping, Sequence

from gitwrap.git.models import BranchInfo, HistoryEntry

_STATUS_LABELS = {
    "M": "modified",
    "T": "modified",
    "A": "added",
    "D": "deleted",
    "R": "renamed",
    "C": "copied",
    "U": "conflicted",
    "?": "untracked",
    "!": "ignored",
}


def describe_status(code: str) -> str:
    """Human-readable label for a two-column porcelain status code."""
    for column in code:
        if column != " ":
            return _STATUS_LABELS.get(column, "modified")
    return "unmodified"


def format_statuses(statuses: Mapping[str, str]) -> str:
    if not statuses:
        return "Working tree clean"

    lines: list[str] = ["Changes:"]
    for path, code in statuses.items():
        lines.append(f"  {code:<2} {path} ({describe_status(code)})")
    return "\n".join(lines)


def format_branches(branches: Mapping[str, BranchInfo], max_display: int = 10) -> str:
    if not branches:
        return "No branches found."

    lines: list[str] = ["Branches:"]
    names = list(branches)
    for name in names[:max_display]:
        info = branches[name]
        line = f"  {name} {info.hash[:7]}"
        if info.message:
            line += f" {info.message}"
        lines.append(line)

    if len(names) > max_display:
        lines.append(f"  ... and {len(names) - max_display} more")
    return "\n".join(lines)


def format_logs(logs: Mapping[str, str], max_entries: int = 10) -> str:
    if not logs:
        return "No commits found."

    lines: list[str] = ["Recent commits:"]
    for commit_hash, message in list(logs.items())[:max_entries]:
        lines.append(f"  {commit_hash[:7]} {message}")
    return "\n".join(lines)


def format_configuration(configuration: Mapping[str, str]) -> str:
    if not configuration:
        return "No configuration variables set."
    return "\n".join(f"{name} = {value}" for name, value in configuration.items())


def format_history(entries: Sequence[HistoryEntry]) -> str:
    """One line per executed command, most recent last."""
    lines: list[str] = []
    for i, entry in enumerate(entries, start=1):
        command = (
            entry.command if isinstance(entry.command, str) else " ".join(entry.command)
        )
        lines.append(f"{i:>3}. git {command}")
    return "\n".join(lines)


def format_summary(
    statuses: Mapping[str, str],
    branches: Mapping[str, BranchInfo],
    logs: Mapping[str, str],
    max_entries: int = 10,
) -> str:
    return "\n\n".join(
        [
            format_statuses(statuses),
            format_branches(branches),
            format_logs(logs, max_entries=max_entries),
        ]
    )
