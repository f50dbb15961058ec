"""Unit tests for the invalid-path error taxonomy."""

from pathlib import Path

import pytest

from jailfs.fs.errors import (
    CanonicalizationError,
    InvalidPathError,
    InvalidPathKind,
    PathEscapeError,
)


class TestPathEscapeError:
    """Tests for PathEscapeError."""

    def test_message_includes_path_and_root(self) -> None:
        error = PathEscapeError("../etc/passwd", Path("/tmp/jail"))

        assert "../etc/passwd" in str(error)
        assert "/tmp/jail" in str(error)

    def test_kind_and_attributes(self) -> None:
        error = PathEscapeError("../x", Path("/tmp/jail"))

        assert error.kind is InvalidPathKind.CONFINEMENT_VIOLATION
        assert error.path == "../x"
        assert error.root == Path("/tmp/jail")

    def test_caught_as_invalid_path_not_os_error(self) -> None:
        with pytest.raises(InvalidPathError):
            raise PathEscapeError("../x", Path("/tmp/jail"))
        assert not issubclass(PathEscapeError, OSError)


class TestCanonicalizationError:
    """Tests for CanonicalizationError."""

    def test_message_includes_reason(self) -> None:
        error = CanonicalizationError("loop/file", Path("/tmp/jail"), "Too many levels of symbolic links")

        assert "loop/file" in str(error)
        assert "symbolic links" in str(error)
        assert error.kind == "canonicalization_failure"

    def test_is_invalid_path_error(self) -> None:
        assert issubclass(CanonicalizationError, InvalidPathError)
        assert not issubclass(CanonicalizationError, OSError)
