"""A surface that emulated video lines are rendered into through a colour table."""

from __future__ import annotations

import struct
from typing import Sequence

from .pixelformat import PixelFormat
from .surface import Surface

PALETTE_SIZE = 256
MAX_PALETTES = 8


def _component_shift(value: int, bits: int, shift: int) -> int:
    return ((value & 0xFF) >> (8 - bits)) << shift


def convert_palette(colors: Sequence[Sequence[int]], pixel_format: PixelFormat) -> list[int]:
    """Pack (r, g, b[, a]) colours into pixel values of ``pixel_format``."""
    f = pixel_format
    out = []
    for color in colors:
        r, g, b = color[:3]
        a = color[3] if len(color) > 3 else 0
        out.append(
            _component_shift(r, f.red_bits, f.red_shift)
            | _component_shift(g, f.green_bits, f.green_shift)
            | _component_shift(b, f.blue_bits, f.blue_shift)
            | _component_shift(a, f.alpha_bits, f.alpha_shift)
        )
    return out


class RenderSurface(Surface):
    """Renders 8-bit indexed lines by looking each index up in a colour table."""

    def __init__(self) -> None:
        super().__init__()
        self.palette_index = 0
        self.palettes = [[0] * PALETTE_SIZE for _ in range(MAX_PALETTES)]
        self.clut: list[int] = []
        self.reset_clut()

    def reset_clut(self) -> None:
        self.clut = [0] * PALETTE_SIZE

    def set_clut_entries(self, entries: Sequence[int], start: int = 0) -> None:
        """Fill colour table slots from ``start`` with indices or palette colours."""
        if self.palette_index >= MAX_PALETTES:
            return
        indexed = self.pixel_format is not None and self.pixel_format.color_index
        palette = self.palettes[self.palette_index]
        for offset, entry in enumerate(entries):
            self.clut[start + offset] = entry if indexed else palette[entry]

    def set_palette_entries(self, index: int, colors: Sequence[Sequence[int]]) -> None:
        """Convert ``colors`` to this surface's format and store them in palette ``index``."""
        if index >= MAX_PALETTES:
            return
        if self.pixel_format is None:
            raise ValueError("surface has no pixel format")
        converted = convert_palette(colors, self.pixel_format)
        self.palettes[index][:len(converted)] = converted

    @staticmethod
    def _store(row: memoryview, data: bytes) -> None:
        count = min(len(row), len(data))
        row[:count] = data[:count]

    def render_line(self, line: int, pixels: Sequence[int]) -> None:
        """Write indexed ``pixels`` to ``line`` through the colour table."""
        row = self.line(line - self.line_offset)
        if row is None or self.pixel_format is None:
            return
        depth = self.pixel_format.bit_depth
        if depth not in (8, 16, 24, 32):
            return
        size = depth // 8
        mask = (1 << depth) - 1
        data = b"".join((self.clut[p] & mask).to_bytes(size, "little") for p in pixels)
        self._store(row, data)

    def render_line32(self, line: int, pixels: Sequence[int]) -> None:
        """Copy 32-bit pixels to ``line`` in groups of four; other depths are left alone."""
        row = self.line(line - self.line_offset)
        if row is None or self.pixel_format is None or self.pixel_format.bit_depth != 32:
            return
        count = len(pixels) & ~3
        data = struct.pack(f"<{count}I", *(p & 0xFFFFFFFF for p in pixels[:count]))
        self._store(row, data)