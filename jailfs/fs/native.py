import os
import shutil
from pathlib import Path
from typing import BinaryIO

from jailfs.fs.base import Fs, PathLike
from jailfs.fs.options import OpenOptions


class NativeFs(Fs):
    """Unconfined access to the host filesystem."""

    def open(self, path: PathLike, options: OpenOptions) -> BinaryIO:
        flags = options.os_flags()
        mode = options.file_mode()
        fd = os.open(path, flags, 0o666)
        try:
            return os.fdopen(fd, mode)
        except Exception:
            os.close(fd)
            raise

    def canonicalize(self, path: PathLike) -> Path:
        return Path(path).resolve(strict=True)

    def copy(self, src: PathLike, dst: PathLike) -> int:
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)
        return os.stat(dst).st_size

    def create_dir(self, path: PathLike) -> None:
        os.mkdir(path)

    def create_dir_all(self, path: PathLike) -> None:
        os.makedirs(path, exist_ok=True)

    def hard_link(self, src: PathLike, dst: PathLike) -> None:
        os.link(src, dst)

    def metadata(self, path: PathLike) -> os.stat_result:
        return os.stat(path)

    def symlink_metadata(self, path: PathLike) -> os.stat_result:
        return os.lstat(path)

    def read(self, path: PathLike) -> bytes:
        return Path(path).read_bytes()

    def read_to_string(self, path: PathLike, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def read_dir(self, path: PathLike) -> list[Path]:
        return sorted(Path(path).iterdir())

    def read_link(self, path: PathLike) -> Path:
        return Path(os.readlink(path))

    def remove_file(self, path: PathLike) -> None:
        os.remove(path)

    def remove_dir(self, path: PathLike) -> None:
        os.rmdir(path)

    def remove_dir_all(self, path: PathLike) -> None:
        shutil.rmtree(path)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        os.replace(src, dst)

    def set_permissions(self, path: PathLike, mode: int) -> None:
        os.chmod(path, mode)

    def write(self, path: PathLike, contents: bytes | str) -> None:
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        Path(path).write_bytes(contents)

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)
