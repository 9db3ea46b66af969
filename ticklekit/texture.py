"""Texture descriptions sized for power-of-two video memory."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TexFormat(enum.IntEnum):
    PSMCT32 = 0x00
    PSMCT16 = 0x02
    PSMT8 = 0x13
    PSMT4 = 0x14


def texture_log2(value: int) -> int:
    """Return the smallest n with 2**n >= value."""
    n = 0
    while value > (1 << n):
        n += 1
    return n


def texture_bytes(width: int, height: int, tex_format) -> int:
    """Bytes needed for a width x height texture; 0 for unknown formats."""
    pixels = width * height
    if tex_format == TexFormat.PSMCT32:
        return pixels * 4
    if tex_format == TexFormat.PSMCT16:
        return pixels * 2
    if tex_format == TexFormat.PSMT8:
        return pixels
    if tex_format == TexFormat.PSMT4:
        return (pixels + 1) >> 1
    return 0


@dataclass
class Texture:
    width: int
    height: int
    width_log2: int
    height_log2: int
    tex_format: int
    inv_width: float
    inv_height: float
    pitch: int
    nbytes: int
    filter: int = 0
    vram_addr: int = 0

    @classmethod
    def create(cls, width: int, height: int, tex_format) -> "Texture":
        """Describe a texture, padding its storage to power-of-two sides."""
        width_log2 = texture_log2(width)
        height_log2 = texture_log2(height)
        width_pow2 = 1 << width_log2
        height_pow2 = 1 << height_log2
        try:
            tex_format = TexFormat(tex_format)
        except ValueError:
            pass
        return cls(
            width=width,
            height=height,
            width_log2=width_log2,
            height_log2=height_log2,
            tex_format=tex_format,
            inv_width=1.0 / width_pow2,
            inv_height=1.0 / height_pow2,
            pitch=width_pow2,
            nbytes=texture_bytes(width_pow2, height_pow2, tex_format),
        )