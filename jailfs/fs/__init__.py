"""Filesystem providers: native pass-through and the jailed TempFs."""

from .base import Fs
from .confine import confine, walk_depth
from .errors import (
    CanonicalizationError,
    InvalidPathError,
    InvalidPathKind,
    PathEscapeError,
)
from .native import NativeFs
from .options import OpenOptions
from .root import SandboxRoot
from .temp import TempFs

__all__ = [
    "Fs",
    "NativeFs",
    "TempFs",
    "SandboxRoot",
    "OpenOptions",
    "InvalidPathError",
    "InvalidPathKind",
    "PathEscapeError",
    "CanonicalizationError",
    "confine",
    "walk_depth",
]
