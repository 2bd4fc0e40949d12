"""Operation identifiers, their git sub-commands and built-in default options."""

from __future__ import annotations

from enum import Enum, StrEnum
from types import MappingProxyType

from gitwrap.exceptions import UnknownOperationError


class Omit(Enum):
    """Marker for a default option that emits no token."""

    OMIT = "omit"

    def __repr__(self) -> str:
        return "OMIT"


OMIT = Omit.OMIT

Token = str | Omit


class Operation(StrEnum):
    ADD = "add"
    REMOVE = "rm"
    MOVE = "mv"
    COMMIT = "commit"
    BRANCH_ADD = "branch_add"
    BRANCH_DELETE = "branch_delete"
    BRANCH_LIST = "branch_list"
    CHECKOUT = "checkout"
    STATUS = "status"
    MERGE = "merge"
    LOG = "log"
    DIFF = "diff"
    PULL = "pull"
    PUSH = "push"
    FETCH = "fetch"
    SHOW = "show"
    CONFIG = "config"
    REMOTE_ADD = "remote_add"
    REMOTE_RENAME = "remote_rename"
    REMOTE_REMOVE = "remote_remove"
    REMOTE_SET_HEAD = "remote_set_head"
    REMOTE_SET_BRANCHES = "remote_set_branches"
    REMOTE_GET_URL = "remote_get_url"
    REMOTE_SET_URL = "remote_set_url"
    REMOTE_SHOW = "remote_show"
    REMOTE_PRUNE = "remote_prune"


SUBCOMMANDS: MappingProxyType[Operation, str] = MappingProxyType(
    {
        Operation.ADD: "add",
        Operation.REMOVE: "rm",
        Operation.MOVE: "mv",
        Operation.COMMIT: "commit",
        Operation.BRANCH_ADD: "branch",
        Operation.BRANCH_DELETE: "branch",
        Operation.BRANCH_LIST: "branch",
        Operation.CHECKOUT: "checkout",
        Operation.STATUS: "status",
        Operation.MERGE: "merge",
        Operation.LOG: "log",
        Operation.DIFF: "diff",
        Operation.PULL: "pull",
        Operation.PUSH: "push",
        Operation.FETCH: "fetch",
        Operation.SHOW: "show",
        Operation.CONFIG: "config",
        Operation.REMOTE_ADD: "remote",
        Operation.REMOTE_RENAME: "remote",
        Operation.REMOTE_REMOVE: "remote",
        Operation.REMOTE_SET_HEAD: "remote",
        Operation.REMOTE_SET_BRANCHES: "remote",
        Operation.REMOTE_GET_URL: "remote",
        Operation.REMOTE_SET_URL: "remote",
        Operation.REMOTE_SHOW: "remote",
        Operation.REMOTE_PRUNE: "remote",
    }
)

# Declaration order is emission order.
BUILTIN_DEFAULTS: MappingProxyType[Operation, MappingProxyType[str, Token]] = (
    MappingProxyType(
        {
            Operation.ADD: MappingProxyType({"strategy": OMIT}),
            Operation.REMOVE: MappingProxyType(
                {"strategy": "--cached", "recursive": "-r"}
            ),
            Operation.BRANCH_DELETE: MappingProxyType({"strategy": "-D"}),
            Operation.BRANCH_LIST: MappingProxyType(
                {
                    "verbosity": "-vv",
                    "color": "--no-color",
                    "abbreviation": "--no-abbrev",
                    "type": "--all",
                }
            ),
            Operation.STATUS: MappingProxyType({"output": OMIT}),
            Operation.MERGE: MappingProxyType(
                {"commit": "--no-commit", "strategy": "--strategy=ours"}
            ),
            Operation.LOG: MappingProxyType({"limit": "-n10"}),
            Operation.FETCH: MappingProxyType({"remotes": "--all"}),
            Operation.DIFF: MappingProxyType({"color": "--no-color"}),
            Operation.SHOW: MappingProxyType(
                {
                    "format": "--format=raw",
                    "color": "--no-color",
                    "abbreviation": "--no-abbrev-commit",
                }
            ),
            Operation.REMOTE_SET_HEAD: MappingProxyType({"auto": "--auto"}),
        }
    )
)


def resolve_operation(operation: Operation | str) -> Operation:
    """Coerce *operation* to an ``Operation``, raising on unknown identifiers."""
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        raise UnknownOperationError(f"Unknown git operation: {operation!r}") from None


def subcommand_for(operation: Operation | str) -> str:
    return SUBCOMMANDS[resolve_operation(operation)]
