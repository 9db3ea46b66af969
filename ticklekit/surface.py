"""A 2-D pixel buffer addressed by lines."""

from __future__ import annotations

from typing import Optional

from .pixelformat import PixelFormat


class Surface:
    """Pixels stored line by line, ``pitch`` bytes apart."""

    def __init__(self) -> None:
        self.data: Optional[memoryview] = None
        self.width = 0
        self.height = 0
        self.pitch = 0
        self.line_offset = 0
        self.pixel_format: Optional[PixelFormat] = None
        self._owned = False

    def set(self, data, width: int, height: int, pitch: int, pixel_format: Optional[PixelFormat]) -> None:
        """Use ``data`` as the pixel store without copying it."""
        self.free()
        if pixel_format is not None:
            self.pixel_format = pixel_format
            self.width = width
            self.height = height
            self.pitch = pitch
            self.data = memoryview(data).cast("B") if data is not None else None

    def alloc(self, width: int, height: int, pixel_format: Optional[PixelFormat]) -> None:
        """Allocate a zeroed pixel store of the given size."""
        self.free()
        if pixel_format is not None:
            self.pixel_format = pixel_format
            self.width = width
            self.height = height
            self.pitch = width * pixel_format.bit_depth // 8
            self.data = memoryview(bytearray(height * self.pitch + 1))
            self._owned = True

    def free(self) -> None:
        if self._owned:
            self.pixel_format = None
            self._owned = False
        self.width = 0
        self.height = 0
        self.pitch = 0
        self.data = None

    def line(self, index: int) -> Optional[memoryview]:
        """Return a view of line ``index``, or None if it lies outside the surface."""
        if self.data is None or not 0 <= index < self.height:
            return None
        start = index * self.pitch
        return self.data[start:start + self.pitch]

    def clear_line(self, index: int) -> None:
        row = self.line(index)
        if row is None or self.pixel_format is None:
            return
        count = min(len(row), self.width * self.pixel_format.bit_depth // 8)
        row[:count] = bytes(count)

    def clear(self) -> None:
        for index in range(self.height):
            self.clear_line(index)