"""Fluent façade over the git command line for a single working directory."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

import structlog

from gitwrap.exceptions import GitProcessError
from gitwrap.git import parsers
from gitwrap.git.assembler import Options, assemble
from gitwrap.git.history import InvocationHistory
from gitwrap.git.models import BranchInfo, HistoryEntry
from gitwrap.git.operations import (
    BUILTIN_DEFAULTS,
    OMIT,
    Operation,
    Token,
)
from gitwrap.git.overlay import OptionOverlay
from gitwrap.git.runner import GIT_BIN, CommandRunner, GitRunner

logger = structlog.get_logger()

_BRANCH_LISTING = dict(BUILTIN_DEFAULTS[Operation.BRANCH_LIST])


class GitRepository:
    """Runs git commands in one directory and keeps their history.

    Mutating operations return the repository so calls can be chained::

        repo.add("README.md").commit("Initial commit").push()

    Query operations (``status``, ``log``, ``diff``, ...) return git's stdout.
    Each operation takes optional caller options: a mapping of label to token
    overrides the default with the same label, a sequence of tokens is
    appended after the defaults.

    Not safe for concurrent use; create one instance per caller.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        git_binary: str = GIT_BIN,
        runner: CommandRunner | None = None,
    ) -> None:
        self._path = Path(path)
        self._runner = runner or GitRunner(git_binary)
        self._overlay = OptionOverlay()
        self._history = InvocationHistory()

    @classmethod
    def create(
        cls,
        path: Path | str,
        git_binary: str = GIT_BIN,
        *,
        runner: CommandRunner | None = None,
    ) -> GitRepository:
        return cls(path, git_binary=git_binary, runner=runner)

    @classmethod
    def clone_remote(
        cls,
        remote: str,
        path: Path | str,
        git_binary: str = GIT_BIN,
        *,
        runner: CommandRunner | None = None,
    ) -> GitRepository:
        """Clone *remote* into *path* and return a repository bound to it."""
        repo = cls(path, git_binary=git_binary, runner=runner)
        repo.run(["clone", remote, "."])
        return repo

    @staticmethod
    def is_initialized(path: Path | str) -> bool:
        """Check whether *path* already holds a ``.git`` directory."""
        return (Path(path) / ".git").is_dir()

    @property
    def path(self) -> Path:
        return self._path

    # -- defaults ---------------------------------------------------------

    def get_defaults(self, operation: Operation | str) -> dict[str, Token]:
        return self._overlay.get(operation)

    def set_defaults(
        self, operation: Operation | str, defaults: Mapping[str, Token]
    ) -> GitRepository:
        self._overlay.set(operation, defaults)
        return self

    # -- execution --------------------------------------------------------

    def run(self, command: str | Sequence[Token]) -> str:
        """Run a raw git command, bypassing default options.

        A string is passed as a single argument. Successful runs are recorded
        in the history; failures raise ``GitProcessError`` and are not.
        """
        if isinstance(command, str):
            args = [command]
            issued: str | list[str] = command
        else:
            args = [t for t in command if t is not OMIT]
            issued = args
        output = self._runner.run(args, self._path)
        return self._history.record(issued, output)

    def _run_with_defaults(
        self,
        operation: Operation,
        options: Options | None = None,
        argument: str | Sequence[str] | None = None,
        trailing: Sequence[Token] = (),
        leading: Sequence[Token] = (),
    ) -> str:
        args = assemble(
            operation,
            options,
            argument,
            overlay=self._overlay,
            leading=leading,
            trailing=trailing,
        )
        return self.run(args)

    def output(self) -> str | None:
        """Output of the last successful command, if any."""
        return self._history.last_output

    def history(self) -> tuple[HistoryEntry, ...]:
        return self._history.entries

    # -- repository -------------------------------------------------------

    def init(self) -> GitRepository:
        """Initialize the repository unless it already exists."""
        if self.is_initialized(self._path):
            logger.debug("git_init_skipped", path=str(self._path))
        else:
            self.run("init")
        return self

    def config(
        self,
        var: str,
        val: str | None = None,
        global_: bool = False,
        options: Options | None = None,
    ) -> GitRepository:
        """Set *var* to *val*, or read it when *val* is None (see ``output()``)."""
        trailing: list[Token] = ["--global"] if global_ else []
        trailing.append(var)
        if val is not None:
            trailing.append(val)
        self._run_with_defaults(Operation.CONFIG, options, trailing=trailing)
        return self

    def get_configuration(self) -> dict[str, str]:
        return parsers.parse_configuration(self.config("-l").output() or "")

    # -- index ------------------------------------------------------------

    def add(self, match: str, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.ADD, options, match)
        return self

    def rm(self, match: str, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.REMOVE, options, match)
        return self

    def mv(
        self, origin: str, destination: str, options: Options | None = None
    ) -> GitRepository:
        self._run_with_defaults(
            Operation.MOVE, options, trailing=[origin, destination]
        )
        return self

    def commit(self, message: str, options: Options | None = None) -> GitRepository:
        """Commit with *message*; caller options follow ``-m message``."""
        self._run_with_defaults(Operation.COMMIT, options, leading=["-m", message])
        return self

    def status(self, options: Options | None = None) -> str:
        return self._run_with_defaults(Operation.STATUS, options)

    def get_statuses(self) -> dict[str, str]:
        """Map each changed path to its two-column porcelain status code."""
        return parsers.parse_statuses(self.status({"output": "--porcelain"}))

    def diff(self, match: str | None = None, options: Options | None = None) -> str:
        trailing = [match] if match is not None else []
        return self._run_with_defaults(Operation.DIFF, options, trailing=trailing)

    # -- branches ---------------------------------------------------------

    def branch_add(self, branch: str, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.BRANCH_ADD, options, branch)
        return self

    def branch_delete(
        self, branch: str, options: Options | None = None
    ) -> GitRepository:
        self._run_with_defaults(Operation.BRANCH_DELETE, options, branch)
        return self

    def branch_list(self, options: Options | None = None) -> str:
        return self._run_with_defaults(Operation.BRANCH_LIST, options)

    def get_branches(self) -> dict[str, BranchInfo]:
        """Branches (local and remote) with their tip hash and subject."""
        return parsers.parse_branches(self.branch_list(_BRANCH_LISTING))

    def checkout(self, ref: str, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.CHECKOUT, options, ref)
        return self

    def merge(self, branch: str, options: Options | None = None) -> GitRepository:
        """Merge *branch*; by default without committing (see defaults)."""
        self._run_with_defaults(Operation.MERGE, options, branch)
        return self

    # -- history ----------------------------------------------------------

    def log(self, options: Options | None = None) -> str:
        """Recent commits; the ``limit`` default is ``-n10``."""
        return self._run_with_defaults(Operation.LOG, options)

    def get_logs(self, limit: int = 10) -> dict[str, str]:
        """Map the last *limit* commit hashes to their subjects.

        A repository without commits yields an empty mapping. Failing to launch
        git at all still raises ``GitProcessError``.
        """
        try:
            output = self.log(
                {
                    "limit": f"-n{int(limit)}",
                    "oneline": "--oneline",
                    "abbreviation": "--no-abbrev",
                }
            )
        except GitProcessError as e:
            if e.returncode is None:
                logger.warning("git_log_failed", path=str(self._path), error=str(e))
                raise
            logger.debug("git_log_empty_repository", path=str(self._path), error=str(e))
            return {}
        return parsers.parse_logs(output)

    def show(self, what: str | Sequence[str], options: Options | None = None) -> str:
        trailing = [what] if isinstance(what, str) else list(what)
        return self._run_with_defaults(Operation.SHOW, options, trailing=trailing)

    # -- remotes ----------------------------------------------------------

    def pull(self, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.PULL, options)
        return self

    def push(self, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.PUSH, options)
        return self

    def fetch(self, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.FETCH, options)
        return self

    def remote_add(
        self, name: str, url: str, options: Options | None = None
    ) -> GitRepository:
        self._run_with_defaults(Operation.REMOTE_ADD, options, ["add", name, url])
        return self

    def remote_rename(
        self, old_name: str, new_name: str, options: Options | None = None
    ) -> GitRepository:
        self._run_with_defaults(
            Operation.REMOTE_RENAME, options, ["rename", old_name, new_name]
        )
        return self

    def remote_remove(self, name: str, options: Options | None = None) -> GitRepository:
        self._run_with_defaults(Operation.REMOTE_REMOVE, options, ["remove", name])
        return self

    def remote_set_head(
        self, remote_name: str, options: Options | None = None
    ) -> GitRepository:
        """Set the remote's default branch; ``--auto`` by default."""
        self._run_with_defaults(
            Operation.REMOTE_SET_HEAD, options, ["set-head", remote_name]
        )
        return self

    def remote_set_branches(
        self, name: str, branch: str | Sequence[str], add: bool = False
    ) -> GitRepository:
        """Replace the tracked branches of *name*, or append them with *add*."""
        trailing = ["--add"] if add else []
        trailing.extend([branch] if isinstance(branch, str) else branch)
        self._run_with_defaults(
            Operation.REMOTE_SET_BRANCHES,
            argument=["set-branches", name],
            trailing=trailing,
        )
        return self

    def remote_get_url(self, name: str, push: bool = False, all_: bool = False) -> str:
        flags: list[Token] = []
        if push:
            flags.append("--push")
        if all_:
            flags.append("--all")
        return self._run_with_defaults(
            Operation.REMOTE_GET_URL, argument=["get-url", name], trailing=flags
        )

    def remote_set_url(self, name: str, url: str, push: bool = False) -> GitRepository:
        self._run_with_defaults(
            Operation.REMOTE_SET_URL,
            argument=["set-url", name, url],
            trailing=["--push"] if push else [],
        )
        return self

    def remote_show(self, name: str | None = None, no_query: bool = False) -> str:
        """Describe all remotes, or *name*; ``no_query`` skips contacting it (``-n``)."""
        argument = ["show", name] if name else ["show"]
        return self._run_with_defaults(
            Operation.REMOTE_SHOW,
            argument=argument,
            trailing=["-n"] if no_query else [],
        )

    def remote_prune(self, name: str, dry_run: bool = False) -> GitRepository:
        self._run_with_defaults(
            Operation.REMOTE_PRUNE,
            argument=["prune", name],
            trailing=["--dry-run"] if dry_run else [],
        )
        return self
