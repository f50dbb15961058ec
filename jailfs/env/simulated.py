import logging
from collections.abc import Iterator
from pathlib import Path

from jailfs.env.base import Env

logger = logging.getLogger(__name__)


class SimulatedEnv(Env):
    """
    In-memory environment for tests.

    Values start unset. Reading an unset argument list or working
    directory raises LookupError, so a test that forgot to configure
    something fails loudly instead of silently using the real process.
    """

    def __init__(
        self,
        args: list[str] | None = None,
        current_dir: str | Path | None = None,
        home_dir: str | Path | None = None,
        variables: dict[str, str] | None = None,
    ):
        self._args = list(args) if args is not None else None
        self._current_dir = Path(current_dir) if current_dir is not None else None
        self._home_dir = Path(home_dir) if home_dir is not None else None
        self._vars: dict[str, str] = dict(variables or {})

    def set_args(self, args: list[str]) -> None:
        self._args = list(args)

    def args(self) -> list[str]:
        if self._args is None:
            raise LookupError("args() was called before a simulated value was set")
        return list(self._args)

    def current_dir(self) -> Path:
        if self._current_dir is None:
            raise LookupError(
                "current_dir() was called before a simulated value was set"
            )
        return self._current_dir

    def set_current_dir(self, path: str | Path) -> None:
        logger.debug("Simulated cwd changed to %s", path)
        self._current_dir = Path(path)

    def var(self, key: str) -> str:
        return self._vars[key]

    def vars(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self._vars.items()))

    def set_var(self, key: str, value: str) -> None:
        self._vars[key] = value

    def remove_var(self, key: str) -> None:
        self._vars.pop(key, None)

    def set_home_dir(self, path: str | Path | None) -> None:
        self._home_dir = Path(path) if path is not None else None

    def home_dir(self) -> Path | None:
        return self._home_dir
