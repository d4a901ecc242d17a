"""File system abstraction layer over the host operating system."""

from __future__ import annotations

import os
import stat as _stat
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import BinaryIO, Iterator, Union

from portkit.date_time import DateTime, unix_time_to_date

PathLike = Union[str, "os.PathLike[str]"]


class FileMode(IntFlag):
    """Requested access when opening a file."""

    READ = 1
    WRITE = 2
    CREATE = 4
    TRUNC = 8


class SeekOrigin(IntEnum):
    """Reference point for a seek offset."""

    SET = 0
    CUR = 1
    END = 2


class FileAttributes(IntFlag):
    """Attributes of a file system entry."""

    NONE = 0
    DIRECTORY = 0x10


class FileSystemError(OSError):
    """A file system operation failed."""


def _epoch() -> DateTime:
    return DateTime(year=1970, month=1, day=1)


@dataclass
class FileStat:
    """Attributes, size and modification time of a file or directory."""

    attributes: FileAttributes = FileAttributes.NONE
    size: int = 0
    modified: DateTime = field(default_factory=_epoch)


@dataclass
class DirEntry:
    """One entry read from a directory stream."""

    name: str
    attributes: FileAttributes = FileAttributes.NONE
    size: int = 0
    modified: DateTime = field(default_factory=_epoch)


def _require_path(path: PathLike | None) -> str:
    if path is None:
        raise ValueError("path must not be None")
    return os.fspath(path)


def file_exists(path: PathLike | None) -> bool:
    """Return True if ``path`` names an existing regular file (not a directory)."""
    if path is None:
        return False
    try:
        info = get_file_stat(path)
    except FileSystemError:
        return False
    return not info.attributes & FileAttributes.DIRECTORY


def get_file_size(path: PathLike) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return get_file_stat(path).size


def get_file_stat(path: PathLike) -> FileStat:
    """Return the attributes of the file or directory at ``path``."""
    name = _require_path(path)
    try:
        status = os.stat(name)
    except OSError as exc:
        raise FileSystemError(f"file not found: {name}") from exc

    attributes = FileAttributes.NONE
    if _stat.S_ISDIR(status.st_mode):
        attributes = FileAttributes.DIRECTORY

    return FileStat(
        attributes=attributes,
        size=status.st_size,
        modified=unix_time_to_date(int(status.st_mtime)),
    )


def rename_file(old_path: PathLike, new_path: PathLike) -> None:
    """Rename ``old_path`` to ``new_path``."""
    old_name = _require_path(old_path)
    new_name = _require_path(new_path)
    try:
        os.rename(old_name, new_name)
    except OSError as exc:
        raise FileSystemError(f"cannot rename {old_name} to {new_name}") from exc


def delete_file(path: PathLike) -> None:
    """Delete a file (or an empty directory, as the C ``remove`` does)."""
    name = _require_path(path)
    try:
        if os.path.isdir(name) and not os.path.islink(name):
            os.rmdir(name)
        else:
            os.remove(name)
    except OSError as exc:
        raise FileSystemError(f"cannot delete {name}") from exc


def open_file(path: PathLike, mode: FileMode | int) -> BinaryIO:
    """Open a file in binary mode.

    With ``FileMode.WRITE`` the file is created or truncated for writing;
    otherwise it is opened for reading.
    """
    name = _require_path(path)
    access = "wb" if FileMode(mode) & FileMode.WRITE else "rb"
    try:
        return open(name, access)  # noqa: SIM115 - the caller owns the handle
    except OSError as exc:
        raise FileSystemError(f"cannot open {name}") from exc


_WHENCE = {
    SeekOrigin.CUR: os.SEEK_CUR,
    SeekOrigin.END: os.SEEK_END,
}


def seek_file(file: BinaryIO, offset: int, origin: SeekOrigin | int) -> None:
    """Move the read/write position of ``file``; unknown origins mean SET."""
    if file is None:
        raise ValueError("file must not be None")
    try:
        whence = _WHENCE.get(SeekOrigin(origin), os.SEEK_SET)
    except ValueError:
        whence = os.SEEK_SET
    try:
        file.seek(offset, whence)
    except (OSError, ValueError) as exc:
        raise FileSystemError(f"cannot seek to {offset}") from exc


def write_file(file: BinaryIO, data: bytes | bytearray | memoryview) -> None:
    """Write all of ``data`` to ``file``."""
    if file is None:
        raise ValueError("file must not be None")
    payload = bytes(data)
    try:
        written = file.write(payload)
    except (OSError, ValueError) as exc:
        raise FileSystemError("write failed") from exc
    if written != len(payload):
        raise FileSystemError(f"short write: {written} of {len(payload)} bytes")


def read_file(file: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes; raise EOFError when nothing is left."""
    if file is None:
        raise ValueError("file must not be None")
    try:
        data = file.read(size)
    except OSError:
        data = b""
    if not data:
        raise EOFError("end of file")
    return data


def dir_exists(path: PathLike | None) -> bool:
    """Return True if ``path`` names an existing directory."""
    if path is None:
        return False
    try:
        info = get_file_stat(path)
    except FileSystemError:
        return False
    return bool(info.attributes & FileAttributes.DIRECTORY)


def create_dir(path: PathLike) -> None:
    """Create a new directory."""
    name = _require_path(path)
    try:
        os.mkdir(name, 0o777)
    except OSError as exc:
        raise FileSystemError(f"cannot create directory {name}") from exc


def remove_dir(path: PathLike) -> None:
    """Remove an empty directory."""
    name = _require_path(path)
    try:
        os.rmdir(name)
    except OSError as exc:
        raise FileSystemError(f"cannot remove directory {name}") from exc


class Directory:
    """An open directory stream, including the ``.`` and ``..`` entries."""

    def __init__(self, path: PathLike) -> None:
        name = _require_path(path)
        try:
            scanner = os.scandir(name)
        except OSError as exc:
            raise FileSystemError(f"cannot open directory {name}") from exc
        self.path = os.path.normpath(name)
        self._scanner = scanner
        self._pending: list[tuple[str, bool]] = [(".", True), ("..", True)]
        self._closed = False

    def _next_raw(self) -> tuple[str, bool] | None:
        if self._pending:
            return self._pending.pop(0)
        try:
            entry = next(self._scanner)
        except StopIteration:
            return None
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        return entry.name, is_dir

    def read(self) -> DirEntry | None:
        """Return the next entry, or None at the end of the stream."""
        if self._closed:
            raise ValueError("directory is closed")
        raw = self._next_raw()
        if raw is None:
            return None
        name, is_dir = raw

        entry = DirEntry(name=name)
        if is_dir:
            entry.attributes |= FileAttributes.DIRECTORY

        full_path = os.path.normpath(os.path.join(self.path, name))
        try:
            status = os.stat(full_path)
        except OSError:
            return entry
        entry.size = status.st_size
        entry.modified = unix_time_to_date(int(status.st_mtime))
        return entry

    def close(self) -> None:
        """Close the directory stream."""
        if not self._closed:
            self._scanner.close()
            self._closed = True

    def __iter__(self) -> Iterator[DirEntry]:
        while (entry := self.read()) is not None:
            yield entry

    def __enter__(self) -> Directory:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_dir(path: PathLike) -> Directory:
    """Open a directory stream."""
    return Directory(path)