"""Line-oriented parsers for git's textual output.

Every parser strips the raw output, returns an empty result for empty text,
and otherwise requires each non-empty line to match its pattern. A line that
does not match raises ``GitParseError`` carrying the line and the full output.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

import structlog

from gitwrap.exceptions import GitParseError
from gitwrap.git.models import BranchInfo

logger = structlog.get_logger()

_CONFIG_RE = re.compile(r"^(?P<name>[^=]+)=(?P<value>.*)$")
_BRANCH_RE = re.compile(
    r"^(?P<branch>\S+)\s+(?:->\s+)?(?P<hash>\S+)\s*(?P<message>.*)$"
)
# "M  file" keeps its blank worktree column: "M ".
_STATUS_RE = re.compile(r"^(?P<status>\S{2,}|\S ?)\s+(?P<file>.+)$")
_LOG_RE = re.compile(r"^(?P<hash>\S+)(?:\s+(?P<message>.*))?$")

_QUOTED_RE = re.compile(r'^".*"$', re.DOTALL)
_ESCAPE_RE = re.compile(r"\\(?:(?P<octal>[0-7]{1,3})|(?P<char>.))", re.DOTALL)
_C_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "\\": "\\",
}


def _matches(
    kind: str, output: str, pattern: re.Pattern[str], strip_chars: str | None = None
) -> Iterator[tuple[str, re.Match[str]]]:
    text = output.strip()
    for raw in text.split("\n"):
        raw = raw.removesuffix("\r")
        if not raw.strip():
            continue
        line = raw.lstrip(strip_chars)
        match = pattern.match(line)
        if match is None:
            logger.warning("git_parse_failed", kind=kind, line=raw)
            raise GitParseError(kind, raw, text)
        yield raw, match


def parse_configuration(output: str) -> dict[str, str]:
    """Parse ``git config -l`` output into ``{name: value}``."""
    return {
        m["name"]: m["value"]
        for _, m in _matches("configuration", output, _CONFIG_RE, strip_chars="")
    }


def parse_branches(output: str) -> dict[str, BranchInfo]:
    """Parse ``git branch -vv --no-abbrev`` output keyed by branch name.

    The current-branch asterisk is dropped, and so is the ``->`` marker of
    symbolic refs such as ``remotes/origin/HEAD -> origin/main``.
    """
    branches: dict[str, BranchInfo] = {}
    for _, m in _matches("branch description", output, _BRANCH_RE, " *\n"):
        branches[m["branch"]] = BranchInfo(hash=m["hash"], message=m["message"])
    return branches


def parse_statuses(output: str) -> dict[str, str]:
    """Parse ``git status --porcelain`` output into ``{path: status}``."""
    statuses: dict[str, str] = {}
    for raw, m in _matches("status description", output, _STATUS_RE):
        path = m["file"]
        if _QUOTED_RE.match(path):
            try:
                path = unquote_path(path)
            except ValueError as e:
                logger.warning("git_parse_failed", kind="status path", line=raw)
                raise GitParseError("status path", raw, output.strip()) from e
        statuses[path] = m["status"]
    return statuses


def parse_logs(output: str) -> dict[str, str]:
    """Parse ``git log --oneline --no-abbrev`` output into ``{hash: subject}``."""
    return {
        m["hash"]: m["message"] or ""
        for _, m in _matches("log", output, _LOG_RE)
    }


def unquote_path(quoted: str) -> str:
    """Undo git's C-style path quoting.

    Handles the backslash escapes git emits for quotes, backslashes, control
    whitespace and octal-escaped bytes. Bytes are decoded as UTF-8 with
    ``surrogateescape``, so non-UTF-8 names keep distinct keys. Raises
    ``ValueError`` on an escape git would never produce.
    """
    if not _QUOTED_RE.match(quoted):
        return quoted
    inner = quoted[1:-1]
    buf = bytearray()
    pos = 0
    for match in _ESCAPE_RE.finditer(inner):
        buf += inner[pos : match.start()].encode()
        if match["octal"] is not None:
            value = int(match["octal"], 8)
            if value > 0xFF:
                raise ValueError(f"octal escape out of range in {quoted}")
            buf.append(value)
        elif match["char"] in _C_ESCAPES:
            buf += _C_ESCAPES[match["char"]].encode()
        else:
            raise ValueError(f"invalid escape \\{match['char']} in {quoted}")
        pos = match.end()
    rest = inner[pos:]
    if "\\" in rest:
        raise ValueError(f"dangling backslash in {quoted}")
    buf += rest.encode()
    return buf.decode("utf-8", errors="surrogateescape")
