from enum import StrEnum
from pathlib import Path


class InvalidPathKind(StrEnum):
    CONFINEMENT_VIOLATION = "confinement_violation"
    CANONICALIZATION_FAILURE = "canonicalization_failure"


class InvalidPathError(Exception):
    """
    A path was rejected before any filesystem operation ran.

    Not an OSError subclass, so `except OSError` handlers for native
    conditions such as a missing file never catch a rejection.
    """

    def __init__(
        self,
        kind: InvalidPathKind,
        message: str,
        path: Path | str | None = None,
        root: Path | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.root = root


class PathEscapeError(InvalidPathError):
    def __init__(self, path: Path | str, root: Path):
        super().__init__(
            InvalidPathKind.CONFINEMENT_VIOLATION,
            f"Path {str(path)} resolves outside sandbox root: {str(root)}",
            path=path,
            root=root,
        )


class CanonicalizationError(InvalidPathError):
    def __init__(self, path: Path | str, root: Path | None, reason: str):
        super().__init__(
            InvalidPathKind.CANONICALIZATION_FAILURE,
            f"Cannot canonicalize {str(path)}: {reason}",
            path=path,
            root=root,
        )
