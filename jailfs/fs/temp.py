import errno
import logging
import os
import stat
from pathlib import Path
from typing import BinaryIO

from jailfs.config import JailSettings
from jailfs.env import Env, SimulatedEnv
from jailfs.fs.base import Fs, PathLike
from jailfs.fs.confine import confine
from jailfs.fs.errors import CanonicalizationError, InvalidPathError
from jailfs.fs.native import NativeFs
from jailfs.fs.options import OpenOptions
from jailfs.fs.root import SandboxRoot

logger = logging.getLogger(__name__)


class TempFs(Fs):
    """
    File I/O inside a chroot-like temporary directory.

    The directory acts as the filesystem root: absolute paths are taken
    relative to it, relative paths are resolved against the session's
    working directory (initially "/"), and any path that would lead out
    of it is rejected with an InvalidPathError before the host filesystem
    is touched.

    NOTE: this is NOT a secure sandbox. It handles traversals and symbolic
    links under ordinary use, but makes no attempt to defend against races
    or deliberately crafted links.
    """

    def __init__(
        self,
        env: Env | None = None,
        settings: JailSettings | None = None,
        native: Fs | None = None,
    ):
        settings = settings or JailSettings()
        env = env if env is not None else SimulatedEnv(current_dir=os.sep)
        self._native = native if native is not None else NativeFs()
        self._root = SandboxRoot.create(
            temp_dir=settings.temp_dir,
            prefix=settings.prefix,
        )
        # Virtual cwd; read from the env once and never written back to it
        try:
            self._cwd: Path | None = env.current_dir()
        except LookupError:
            self._cwd = None

    @property
    def path(self) -> Path:
        return self._root.path

    @property
    def session_id(self) -> str:
        return self._root.session_id

    @property
    def closed(self) -> bool:
        return self._root.closed

    def root_path(self) -> Path:
        return self._root.path

    def close(self) -> None:
        """Remove the sandbox directory and everything in it."""
        self._root.teardown()

    def __enter__(self) -> "TempFs":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def current_dir(self) -> Path:
        """Virtual working directory, as seen from inside the sandbox."""
        if self._cwd is None:
            raise LookupError("no working directory is set for this sandbox")
        return self._cwd

    def set_current_dir(self, path: PathLike) -> None:
        """
        Change the virtual working directory.

        The target must be an existing directory inside the sandbox. The
        stored value keeps the virtual form ("/home/user"), not the host
        location.
        """
        target = self.confine(path)
        if not stat.S_ISDIR(self._native.metadata(target).st_mode):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
        virtual = Path(os.sep).joinpath(target.relative_to(self._root.path))
        logger.debug("Sandbox %s cwd -> %s", self._root.session_id, virtual)
        self._cwd = virtual

    def confine(self, path: PathLike, follow_symlinks: bool = True) -> Path:
        """
        Map a sandbox path onto its host location.

        Raises:
            InvalidPathError: If the path leads outside the sandbox, or is
                relative while no working directory is set
            FileNotFoundError: If the sandbox has already been torn down
        """
        if self._root.closed:
            raise FileNotFoundError(
                errno.ENOENT, "sandbox root has been torn down", str(self._root.path)
            )
        cwd = self._cwd
        if cwd is None:
            if not Path(os.fsdecode(path)).is_absolute():
                raise CanonicalizationError(path, self._root.path, "no working directory is set")
            cwd = Path(os.sep)
        return confine(
            path,
            cwd=cwd,
            root=self._root.path,
            follow_symlinks=follow_symlinks,
        )

    def open(self, path: PathLike, options: OpenOptions) -> BinaryIO:
        return self._native.open(self.confine(path), options)

    def canonicalize(self, path: PathLike) -> Path:
        return self._native.canonicalize(self.confine(path))

    def copy(self, src: PathLike, dst: PathLike) -> int:
        return self._native.copy(self.confine(src), self.confine(dst))

    def create_dir(self, path: PathLike) -> None:
        self._native.create_dir(self.confine(path))

    def create_dir_all(self, path: PathLike) -> None:
        self._native.create_dir_all(self.confine(path))

    def hard_link(self, src: PathLike, dst: PathLike) -> None:
        self._native.hard_link(self.confine(src), self.confine(dst))

    def metadata(self, path: PathLike) -> os.stat_result:
        return self._native.metadata(self.confine(path))

    def symlink_metadata(self, path: PathLike) -> os.stat_result:
        return self._native.symlink_metadata(self.confine(path, follow_symlinks=False))

    def read(self, path: PathLike) -> bytes:
        return self._native.read(self.confine(path))

    def read_to_string(self, path: PathLike, encoding: str = "utf-8") -> str:
        return self._native.read_to_string(self.confine(path), encoding=encoding)

    def read_dir(self, path: PathLike) -> list[Path]:
        return self._native.read_dir(self.confine(path))

    def read_link(self, path: PathLike) -> Path:
        return self._native.read_link(self.confine(path, follow_symlinks=False))

    def remove_file(self, path: PathLike) -> None:
        self._native.remove_file(self.confine(path, follow_symlinks=False))

    def remove_dir(self, path: PathLike) -> None:
        self._native.remove_dir(self.confine(path))

    def remove_dir_all(self, path: PathLike) -> None:
        self._native.remove_dir_all(self.confine(path, follow_symlinks=False))

    def rename(self, src: PathLike, dst: PathLike) -> None:
        self._native.rename(
            self.confine(src, follow_symlinks=False),
            self.confine(dst, follow_symlinks=False),
        )

    def set_permissions(self, path: PathLike, mode: int) -> None:
        self._native.set_permissions(self.confine(path), mode)

    def write(self, path: PathLike, contents: bytes | str) -> None:
        self._native.write(self.confine(path), contents)

    def exists(self, path: PathLike) -> bool:
        try:
            target = self.confine(path)
        except (InvalidPathError, FileNotFoundError):
            return False
        return self._native.exists(target)

    def __repr__(self) -> str:
        return f"TempFs(root={str(self._root.path)!r})"
