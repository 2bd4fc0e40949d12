"""Per-operation default options layered under caller options."""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from gitwrap.git.operations import BUILTIN_DEFAULTS, Operation, Token, resolve_operation

logger = structlog.get_logger()


class OptionOverlay:
    """Holds the default option set of every operation.

    Each set maps a free-form label to a token (or ``OMIT``). Labels let callers
    override a single default without knowing the rest of the set.
    """

    def __init__(self) -> None:
        self._defaults: dict[Operation, dict[str, Token]] = {
            op: dict(defaults) for op, defaults in BUILTIN_DEFAULTS.items()
        }

    def get(self, operation: Operation | str) -> dict[str, Token]:
        """Return a copy of the defaults for *operation* (empty if none)."""
        return dict(self._defaults.get(resolve_operation(operation), {}))

    def set(self, operation: Operation | str, defaults: Mapping[str, Token]) -> None:
        """Replace the whole default set for *operation*."""
        op = resolve_operation(operation)
        self._defaults[op] = dict(defaults)
        logger.debug("git_defaults_set", operation=op.value, defaults=list(defaults))
