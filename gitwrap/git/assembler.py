"""Builds git argument vectors from operation, defaults and caller options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from gitwrap.git.operations import OMIT, Operation, Token, subcommand_for
from gitwrap.git.overlay import OptionOverlay

Options = Mapping[str, Token] | Sequence[Token]


def _labelled(options: Options | None) -> tuple[dict[str, Token], list[Token]]:
    """Split caller options into labelled overrides and plain appended tokens."""
    if options is None:
        return {}, []
    if isinstance(options, Mapping):
        return dict(options), []
    if isinstance(options, str):
        return {}, [options]
    return {}, list(options)


def assemble(
    operation: Operation | str,
    options: Options | None = None,
    argument: str | Sequence[str] | None = None,
    *,
    overlay: OptionOverlay,
    leading: Iterable[Token] = (),
    trailing: Iterable[Token] = (),
) -> list[str]:
    """Return the argument vector for *operation*.

    Order: sub-command, positional argument(s), defaults (with same-label caller
    overrides applied in place), *leading* tokens, remaining caller options,
    *trailing* tokens.
    Only ``OMIT`` is dropped; empty strings are kept.
    """
    tokens: list[Token] = [subcommand_for(operation)]

    if isinstance(argument, str):
        tokens.append(argument)
    elif argument is not None:
        tokens.extend(argument)

    overrides, extra = _labelled(options)
    defaults = overlay.get(operation)
    for label in defaults.keys() & overrides.keys():
        defaults[label] = overrides.pop(label)
    tokens.extend(defaults.values())
    tokens.extend(leading)
    tokens.extend(overrides.values())
    tokens.extend(extra)
    tokens.extend(trailing)

    return [t for t in tokens if t is not OMIT]
