"""Pixel format descriptions: bit depth and channel layout."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class PixelFormatKind(enum.Enum):
    CI8 = enum.auto()
    BGRA8 = enum.auto()
    RGBA8 = enum.auto()
    BGR8 = enum.auto()
    BGR555 = enum.auto()
    BGR565 = enum.auto()
    RGB555 = enum.auto()
    RGBA5551 = enum.auto()


@dataclass(frozen=True)
class PixelFormat:
    """Layout of one pixel: each channel has a bit shift and a bit count."""

    kind: PixelFormatKind
    color_index: bool
    bit_depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int
    alpha_shift: int
    alpha_bits: int

    @property
    def bytes_per_pixel(self) -> int:
        return self.bit_depth // 8


_K = PixelFormatKind

_FORMATS = {
    f.kind: f
    for f in (
        PixelFormat(_K.CI8, True, 8, 0, 8, 8, 8, 16, 8, 24, 8),
        PixelFormat(_K.BGRA8, False, 32, 16, 8, 8, 8, 0, 8, 24, 8),
        PixelFormat(_K.RGBA8, False, 32, 0, 8, 8, 8, 16, 8, 24, 8),
        PixelFormat(_K.BGR8, False, 24, 16, 8, 8, 8, 0, 8, 0, 0),
        PixelFormat(_K.BGR555, False, 16, 10, 5, 5, 5, 0, 5, 15, 1),
        PixelFormat(_K.BGR565, False, 16, 11, 5, 5, 6, 0, 5, 0, 0),
        PixelFormat(_K.RGB555, False, 16, 0, 5, 5, 5, 10, 5, 0, 0),
        PixelFormat(_K.RGBA5551, False, 16, 0, 5, 5, 5, 10, 5, 15, 1),
    )
}


def get_pixel_format(kind) -> PixelFormat:
    """Return the description of ``kind``; raises ValueError for unknown kinds."""
    return _FORMATS[PixelFormatKind(kind)]