from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class Env(ABC):
    """Inspection and manipulation of a process environment."""

    @abstractmethod
    def args(self) -> list[str]:
        """Arguments the program was started with, program name first."""
        pass

    @abstractmethod
    def current_dir(self) -> Path:
        """
        Return the current working directory.

        Relative paths handed to a jailed filesystem are resolved against
        this value.
        """
        pass

    @abstractmethod
    def set_current_dir(self, path: str | Path) -> None:
        pass

    @abstractmethod
    def var(self, key: str) -> str:
        """
        Return the value of an environment variable.

        Raises:
            KeyError: If the variable is not set
        """
        pass

    @abstractmethod
    def vars(self) -> Iterator[tuple[str, str]]:
        pass

    @abstractmethod
    def set_var(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_var(self, key: str) -> None:
        pass

    @abstractmethod
    def home_dir(self) -> Path | None:
        pass
