"""A block of emulated memory that can be loaded, saved and snapshotted."""

from __future__ import annotations

from typing import Optional


class MemSpace:
    """A fixed-size byte region, owned or borrowed."""

    def __init__(self) -> None:
        self.buffer: Optional[memoryview] = None

    @property
    def size(self) -> int:
        return len(self.buffer) if self.buffer is not None else 0

    def clear(self, value: int = 0) -> None:
        """Fill the region with ``value``."""
        if self.buffer is not None:
            self.buffer[:] = bytes([value & 0xFF]) * self.size

    def set_mem(self, buffer) -> None:
        """Use an existing buffer as the region."""
        self.free()
        self.buffer = memoryview(buffer).cast("B")

    def alloc(self, size: int) -> None:
        """Allocate a zeroed region of ``size`` bytes."""
        self.free()
        if size > 0:
            self.buffer = memoryview(bytearray(size))

    def free(self) -> None:
        self.buffer = None

    def read_from(self, stream) -> None:
        """Fill the region from ``stream``; raises EOFError on a short read."""
        data = stream.read(self.size)
        if self.buffer is not None:
            self.buffer[:len(data)] = data
        if len(data) != self.size:
            raise EOFError(f"expected {self.size} bytes, read {len(data)}")

    def write_to(self, stream) -> None:
        """Write the whole region to ``stream``; raises OSError on a short write."""
        data = bytes(self.buffer) if self.buffer is not None else b""
        written = stream.write(data)
        if written is not None and written != len(data):
            raise OSError(f"short write ({written} of {len(data)} bytes)")

    def read_alloc(self, stream, size: int) -> None:
        """Take ``size`` bytes from ``stream``, sharing memory when the stream allows it."""
        self.free()
        read_ptr = getattr(stream, "read_ptr", None)
        view = read_ptr(size) if read_ptr is not None else None
        if view is not None:
            self.buffer = view
            return
        self.alloc(size)
        self.read_from(stream)

    def save_state(self, size: int) -> bytes:
        """Return up to ``size`` bytes from the start of the region."""
        if self.buffer is None:
            return b""
        return bytes(self.buffer[:min(size, self.size)])

    def restore_state(self, data) -> None:
        """Copy ``data`` into the start of the region, clipped to its size."""
        if self.buffer is None:
            return
        count = min(len(data), self.size)
        self.buffer[:count] = bytes(data[:count])