"""I/O providers for testable programs, including a jailed temporary filesystem."""

from jailfs.env import Env, NativeEnv, SimulatedEnv
from jailfs.fs import (
    CanonicalizationError,
    Fs,
    InvalidPathError,
    NativeFs,
    OpenOptions,
    PathEscapeError,
    TempFs,
)

__all__ = [
    "Env",
    "NativeEnv",
    "SimulatedEnv",
    "Fs",
    "NativeFs",
    "TempFs",
    "OpenOptions",
    "InvalidPathError",
    "PathEscapeError",
    "CanonicalizationError",
]
