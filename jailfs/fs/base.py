from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from jailfs.fs.options import OpenOptions

PathLike = str | os.PathLike[str]


class Fs(ABC):
    """
    File I/O operations.

    Each method mirrors the os/shutil primitive named in its docstring and
    raises the same OSError subclasses that primitive raises.
    """

    @abstractmethod
    def open(self, path: PathLike, options: OpenOptions) -> BinaryIO:
        """Open a file in binary mode as described by `options` (os.open)."""
        pass

    @abstractmethod
    def canonicalize(self, path: PathLike) -> Path:
        """Absolute form of an existing path with symlinks resolved."""
        pass

    @abstractmethod
    def copy(self, src: PathLike, dst: PathLike) -> int:
        """
        Copy file contents and permission bits from `src` to `dst`.

        Returns:
            Number of bytes copied
        """
        pass

    @abstractmethod
    def create_dir(self, path: PathLike) -> None:
        pass

    @abstractmethod
    def create_dir_all(self, path: PathLike) -> None:
        """Create a directory and any missing parents (os.makedirs)."""
        pass

    @abstractmethod
    def hard_link(self, src: PathLike, dst: PathLike) -> None:
        """Create `dst` as a hard link to `src`."""
        pass

    @abstractmethod
    def metadata(self, path: PathLike) -> os.stat_result:
        """Metadata of the file a path points at, following symlinks."""
        pass

    @abstractmethod
    def symlink_metadata(self, path: PathLike) -> os.stat_result:
        """Metadata of the path itself, without following a final symlink."""
        pass

    @abstractmethod
    def read(self, path: PathLike) -> bytes:
        pass

    @abstractmethod
    def read_to_string(self, path: PathLike, encoding: str = "utf-8") -> str:
        pass

    @abstractmethod
    def read_dir(self, path: PathLike) -> list[Path]:
        """Entries of a directory in deterministic sorted order."""
        pass

    @abstractmethod
    def read_link(self, path: PathLike) -> Path:
        pass

    @abstractmethod
    def remove_file(self, path: PathLike) -> None:
        pass

    @abstractmethod
    def remove_dir(self, path: PathLike) -> None:
        """Remove an existing, empty directory."""
        pass

    @abstractmethod
    def remove_dir_all(self, path: PathLike) -> None:
        """Remove a directory after removing its contents. Use carefully!"""
        pass

    @abstractmethod
    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Rename `src` to `dst`, replacing `dst` if it exists."""
        pass

    @abstractmethod
    def set_permissions(self, path: PathLike, mode: int) -> None:
        pass

    @abstractmethod
    def write(self, path: PathLike, contents: bytes | str) -> None:
        """
        Write `contents` as the entire contents of a file.

        Creates the file if needed and replaces existing contents. Strings
        are encoded as UTF-8.
        """
        pass

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """
        Whether the path points at an existing entity.

        Follows symlinks; a broken link, or a path that cannot be inspected,
        reports False.
        """
        pass
