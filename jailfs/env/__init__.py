"""Environment providers: the real process environment and a simulated one."""

from .base import Env
from .native import NativeEnv
from .simulated import SimulatedEnv

__all__ = [
    "Env",
    "NativeEnv",
    "SimulatedEnv",
]
