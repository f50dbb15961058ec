import os
import sys
from collections.abc import Iterator
from pathlib import Path

from jailfs.env.base import Env


class NativeEnv(Env):
    """Environment backed by the running process."""

    def args(self) -> list[str]:
        return list(sys.argv)

    def current_dir(self) -> Path:
        return Path.cwd()

    def set_current_dir(self, path: str | Path) -> None:
        os.chdir(path)

    def var(self, key: str) -> str:
        return os.environ[key]

    def vars(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(os.environ.items()))

    def set_var(self, key: str, value: str) -> None:
        os.environ[key] = value

    def remove_var(self, key: str) -> None:
        os.environ.pop(key, None)

    def home_dir(self) -> Path | None:
        home = os.path.expanduser("~")
        if home == "~":
            return None
        return Path(home)
