"""Byte streams over files and in-memory buffers, plus whole-file helpers."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional

SEEK_SET = os.SEEK_SET
SEEK_CUR = os.SEEK_CUR
SEEK_END = os.SEEK_END


class DataIO:
    """A stream that holds no data: reads return nothing and writes are dropped."""

    def __enter__(self) -> "DataIO":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes."""
        return b""

    def write(self, data) -> int:
        """Write ``data`` and return the number of bytes written."""
        return 0

    def seek(self, pos: int, whence: int = SEEK_SET) -> int:
        """Move the stream position and return the new one."""
        return 0

    def tell(self) -> int:
        """Return the current stream position."""
        return 0

    def close(self) -> None:
        """Release the underlying resource."""

    def read_ptr(self, size: int) -> Optional[memoryview]:
        """Return a view of the next ``size`` bytes, or None if not supported."""
        return None


class FileIO(DataIO):
    """A stream over a file on disk, always in binary mode."""

    def __init__(self) -> None:
        self._file: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self, path, mode: str = "rb") -> None:
        """Open ``path``; raises OSError if it cannot be opened."""
        self.close()
        if "b" not in mode:
            mode += "b"
        self._file = open(path, mode)

    def read(self, size: int) -> bytes:
        return self._file.read(size) if self._file else b""

    def write(self, data) -> int:
        return self._file.write(data) if self._file else 0

    def seek(self, pos: int, whence: int = SEEK_SET) -> int:
        if self._file is None:
            raise ValueError("seek on a closed file")
        return self._file.seek(pos, whence)

    def tell(self) -> int:
        return self._file.tell() if self._file else 0

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None


class MemFileIO(DataIO):
    """A stream over a caller-supplied buffer; reads and writes never grow it."""

    def __init__(self, buffer=None) -> None:
        self._mem: Optional[memoryview] = None
        self._pos = 0
        if buffer is not None:
            self.open(buffer)

    def open(self, buffer) -> None:
        self.close()
        view = memoryview(buffer)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self._mem = view
        self._pos = 0

    def _remaining(self) -> int:
        return len(self._mem) - self._pos

    def read(self, size: int) -> bytes:
        if self._mem is None:
            return b""
        count = max(0, min(size, self._remaining()))
        data = bytes(self._mem[self._pos:self._pos + count])
        self._pos += count
        return data

    def write(self, data) -> int:
        if self._mem is None:
            return 0
        src = memoryview(data).cast("B")
        count = max(0, min(len(src), self._remaining()))
        self._mem[self._pos:self._pos + count] = src[:count]
        self._pos += count
        return count

    def seek(self, pos: int, whence: int = SEEK_SET) -> int:
        size = len(self._mem) if self._mem is not None else 0
        new_pos = self._pos
        if whence == SEEK_CUR:
            new_pos = self._pos + pos
        elif whence == SEEK_SET:
            new_pos = pos
        elif whence == SEEK_END:
            new_pos = size - pos
        # positions are unsigned: anything outside the buffer lands on its end
        if new_pos < 0 or new_pos > size:
            new_pos = size
        self._pos = new_pos
        return new_pos

    def tell(self) -> int:
        return self._pos

    def close(self) -> None:
        self._mem = None
        self._pos = 0

    def read_ptr(self, size: int) -> Optional[memoryview]:
        """Return a view into the buffer and advance, or None if too few bytes remain."""
        if self._mem is None or size > self._remaining():
            return None
        view = self._mem[self._pos:self._pos + size]
        self._pos += size
        return view


def read_file(path, size: int) -> bytes:
    """Read exactly ``size`` bytes from the start of ``path``."""
    with open(path, "rb") as handle:
        data = handle.read(size)
    if len(data) != size:
        raise EOFError(f"{path}: expected {size} bytes, read {len(data)}")
    return data


def write_file(path, data) -> int:
    """Write ``data`` at the start of ``path``, creating it but not truncating it."""
    fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o666)
    with os.fdopen(fd, "wb") as handle:
        written = handle.write(data)
    if written != len(data):
        raise OSError(f"{path}: short write ({written} of {len(data)} bytes)")
    return written


def file_exists(path) -> bool:
    """Return True if ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False