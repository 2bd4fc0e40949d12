"""Tests for the gitwrap exception hierarchy."""

import pytest

from gitwrap.exceptions import (
    GitParseError,
    GitProcessError,
    GitwrapError,
    UnknownOperationError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type", [GitParseError, GitProcessError, UnknownOperationError]
    )
    def test_all_derive_from_base(self, exc_type):
        assert issubclass(exc_type, GitwrapError)

    def test_unknown_operation_is_lookup_error(self):
        assert issubclass(UnknownOperationError, LookupError)

    def test_process_and_parse_are_distinct(self):
        assert not issubclass(GitProcessError, GitParseError)
        assert not issubclass(GitParseError, GitProcessError)


class TestGitProcessError:
    def test_carries_details(self):
        err = GitProcessError("fatal: boom\n", command=("git", "log"), returncode=128)
        assert err.stderr == "fatal: boom\n"
        assert err.command == ("git", "log")
        assert err.returncode == 128
        assert str(err) == "fatal: boom"

    def test_message_without_stderr(self):
        assert str(GitProcessError("", returncode=2)) == "git exited with status 2"


class TestGitParseError:
    def test_carries_line_and_output(self):
        err = GitParseError("log", "???", "abc ok\n???")
        assert err.kind == "log"
        assert err.line == "???"
        assert err.output == "abc ok\n???"
        assert str(err) == 'Unable to parse log "???" from output "abc ok\n???".'
