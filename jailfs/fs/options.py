import os
from dataclasses import dataclass


@dataclass
class OpenOptions:
    """
    Flags controlling how a file is opened.

    Setters return the instance so calls chain:

        OpenOptions().write(True).create(True).truncate(True)

    Every flag starts out False.
    """

    read_flag: bool = False
    write_flag: bool = False
    append_flag: bool = False
    truncate_flag: bool = False
    create_flag: bool = False
    create_new_flag: bool = False

    def read(self, value: bool = True) -> "OpenOptions":
        self.read_flag = value
        return self

    def write(self, value: bool = True) -> "OpenOptions":
        self.write_flag = value
        return self

    def append(self, value: bool = True) -> "OpenOptions":
        """Writes go to the end of the file; implies write access."""
        self.append_flag = value
        return self

    def truncate(self, value: bool = True) -> "OpenOptions":
        self.truncate_flag = value
        return self

    def create(self, value: bool = True) -> "OpenOptions":
        self.create_flag = value
        return self

    def create_new(self, value: bool = True) -> "OpenOptions":
        """Always create; fail if anything, even a dangling symlink, is there."""
        self.create_new_flag = value
        return self

    def _writable(self) -> bool:
        return self.write_flag or self.append_flag

    def validate_flags(self) -> None:
        if not (self.read_flag or self._writable()):
            raise ValueError("OpenOptions requests neither read nor write access")
        if self.truncate_flag and self.append_flag:
            raise ValueError("OpenOptions cannot combine truncate with append")
        if (self.truncate_flag or self.create_flag or self.create_new_flag) and not self._writable():
            raise ValueError("OpenOptions create/truncate require write access")

    def os_flags(self) -> int:
        """Translate the options into flags for os.open."""
        self.validate_flags()

        if self.read_flag and self._writable():
            flags = os.O_RDWR
        elif self._writable():
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY

        if self.append_flag:
            flags |= os.O_APPEND
        if self.truncate_flag:
            flags |= os.O_TRUNC
        if self.create_new_flag:
            flags |= os.O_CREAT | os.O_EXCL
        elif self.create_flag:
            flags |= os.O_CREAT

        return flags | getattr(os, "O_BINARY", 0)

    def file_mode(self) -> str:
        """Binary mode string for os.fdopen matching os_flags()."""
        self.validate_flags()

        if self.append_flag:
            return "a+b" if self.read_flag else "ab"
        if self.read_flag and self.write_flag:
            return "r+b"
        if self.write_flag:
            return "wb"
        return "rb"
