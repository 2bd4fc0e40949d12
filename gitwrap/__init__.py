"""Git command-line façade with layered default options and output parsers."""

from gitwrap.exceptions import (
    GitParseError,
    GitProcessError,
    GitwrapError,
    UnknownOperationError,
)
from gitwrap.git.operations import OMIT, Operation
from gitwrap.git.repository import GitRepository

__all__ = [
    "OMIT",
    "GitParseError",
    "GitProcessError",
    "GitRepository",
    "GitwrapError",
    "Operation",
    "UnknownOperationError",
]
