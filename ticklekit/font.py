"""Bitmap fonts cut out of a glyph sheet, with string measuring and layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from .surface import Surface

SPACE_WIDTH = 5
CHAR_COUNT = 256


@dataclass(frozen=True)
class FontChar:
    """Texture rectangle of one glyph: ``u0, v0`` inclusive, ``u1, v1`` exclusive."""

    u0: int = 0
    v0: int = 0
    u1: int = 0
    v1: int = 0

    @property
    def width(self) -> int:
        return self.u1 - self.u0

    @property
    def height(self) -> int:
        return self.v1 - self.v0


_EMPTY = FontChar()


class GlyphPlacement(NamedTuple):
    char: str
    x: float
    y: float
    glyph: FontChar


def _pixel_opaque(row: Optional[memoryview], x: int) -> bool:
    # pixels are little-endian 32-bit words; the top byte holds alpha
    return row[x * 4 + 3] != 0


def _row_white(surface: Surface, y: int) -> bool:
    row = surface.line(y)
    if row is None:
        return True
    return not any(_pixel_opaque(row, x) for x in range(surface.width))


def _column_white(surface: Surface, start_y: int, end_y: int, x: int) -> bool:
    for y in range(start_y, end_y):
        row = surface.line(y)
        if row is None:
            return True
        if _pixel_opaque(row, x):
            return False
    return True


@dataclass
class Font:
    """A proportional (or, with ``fixed_width``, fixed-pitch) bitmap font."""

    char_x: int = 0
    char_y: int = 0
    fixed_width: int = 0
    chars: dict[int, FontChar] = field(default_factory=dict)

    def glyph(self, char: str) -> FontChar:
        """Rectangle of ``char``; unmapped characters have an empty one."""
        code = ord(char)
        if code >= CHAR_COUNT:
            return _EMPTY
        return self.chars.get(code, _EMPTY)

    @classmethod
    def from_surface(cls, surface: Surface, char_list: str) -> "Font":
        """Cut glyphs out of a 32-bit sheet, assigning ``char_list`` in reading order.

        Glyphs are runs of columns holding a non-transparent pixel within a
        band of non-transparent rows. Glyphs beyond ``char_list`` are skipped.
        """
        if surface.pixel_format is not None and surface.pixel_format.bit_depth != 32:
            raise ValueError("font sheets must be 32 bits per pixel")
        font = cls()
        pending = iter(char_list)
        font_height = 0
        width, height = surface.width, surface.height

        y = 0
        while y < height:
            while y < height and _row_white(surface, y):
                y += 1
            if y >= height:
                break
            start_y = y
            while y < height and not _row_white(surface, y):
                y += 1
            end_y = y
            if font_height == 0:
                font_height = end_y - start_y
            font._parse_band(surface, pending, start_y, end_y)
            y += 1

        font.char_x = SPACE_WIDTH
        font.char_y = font_height
        return font

    def _parse_band(self, surface: Surface, pending, start_y: int, end_y: int) -> None:
        width = surface.width
        x = 0
        while x < width:
            while x < width and _column_white(surface, start_y, end_y, x):
                x += 1
            if x >= width:
                break
            start_x = x
            while x < width and not _column_white(surface, start_y, end_y, x):
                x += 1
            char = next(pending, None)
            if char is not None and ord(char) < CHAR_COUNT:
                self.chars[ord(char)] = FontChar(start_x, start_y, x, end_y)
            x += 1

    def string_width(self, text: str) -> int:
        """Width of ``text``: glyph width plus one per character, ``char_x`` per space."""
        total = 0
        for char in text:
            if char == " ":
                total += self.char_x
            else:
                total += self.glyph(char).width + 1
        return total

    def glyph_positions(self, x: float, y: float, text: str) -> list[GlyphPlacement]:
        """Where each non-space character of ``text`` is drawn, starting at ``x, y``."""
        placements = []
        for char in text:
            if char == " ":
                x += self.char_x
                continue
            glyph = self.glyph(char)
            placements.append(GlyphPlacement(char, x, y, glyph))
            x += self.fixed_width if self.fixed_width else glyph.width + 1
        return placements