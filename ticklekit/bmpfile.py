"""Reading and writing uncompressed BMP images to and from surfaces."""

from __future__ import annotations

import struct
from typing import Optional, Sequence

from .pixelformat import PixelFormatKind, get_pixel_format
from .surface import Surface

BMP_MAGIC = 0x4D42
BI_RGB = 0
PALETTE_ENTRIES = 256

_FILE_HEADER = struct.Struct("<7H")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")

_FORMAT_BY_DEPTH = {
    8: PixelFormatKind.CI8,
    16: PixelFormatKind.BGR565,
    24: PixelFormatKind.BGR8,
    32: PixelFormatKind.BGRA8,
}


class BmpError(ValueError):
    """Raised when a BMP file cannot be read or written."""


def _palette_bytes(palette: Sequence) -> bytes:
    out = bytearray()
    for index in range(PALETTE_ENTRIES):
        color = palette[index] if index < len(palette) else (0, 0, 0)
        r, g, b = color[:3]
        out += bytes((b & 0xFF, g & 0xFF, r & 0xFF, 0))
    return bytes(out)


def write_bmp(path, surface: Surface, palette: Optional[Sequence] = None) -> None:
    """Write ``surface`` bottom-up; ``palette`` of (r, g, b) is used for indexed formats."""
    fmt = surface.pixel_format
    if fmt is None:
        raise BmpError("surface has no pixel format")
    if not fmt.color_index:
        palette = None

    width, height, depth = surface.width, surface.height, fmt.bit_depth
    row_bytes = width * depth // 8
    info = _INFO_HEADER.pack(
        _INFO_HEADER.size, width, height, 1, depth, BI_RGB,
        width * height * depth // 8, 0, 0,
        PALETTE_ENTRIES if palette is not None else 0, 0,
    )
    colors = _palette_bytes(palette) if palette is not None else b""
    offset = _FILE_HEADER.size + _INFO_HEADER.size + len(colors)
    pixels = b"".join(bytes(surface.line(i)[:row_bytes]) for i in reversed(range(height)))
    size = offset + len(pixels)
    header = _FILE_HEADER.pack(
        BMP_MAGIC, size & 0xFFFF, (size >> 16) & 0xFFFF, 0, 0,
        offset & 0xFFFF, (offset >> 16) & 0xFFFF,
    )
    with open(path, "wb") as handle:
        handle.write(header + info + colors + pixels)


def read_bmp(path) -> Surface:
    """Read an uncompressed 8, 16, 24 or 32-bit BMP into a new surface."""
    with open(path, "rb") as handle:
        data = handle.read()

    if len(data) < _FILE_HEADER.size:
        raise BmpError("invalid file header")
    magic, _, _, _, _, off_lo, off_hi = _FILE_HEADER.unpack_from(data, 0)
    if magic != BMP_MAGIC:
        raise BmpError("invalid file header")

    if len(data) < _FILE_HEADER.size + _INFO_HEADER.size:
        raise BmpError("invalid file size")
    (info_size, width, height, _, depth, compression,
     *_rest) = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    if info_size != _INFO_HEADER.size:
        raise BmpError("invalid file size")
    if compression != BI_RGB:
        raise BmpError("unsupported compression")
    kind = _FORMAT_BY_DEPTH.get(depth)
    if kind is None:
        raise BmpError("unsupported bitdepth")
    if width < 0 or height < 0:
        raise BmpError("unsupported image dimensions")

    surface = Surface()
    surface.alloc(width, height, get_pixel_format(kind))

    pos = (off_hi << 16) | off_lo
    row_bytes = width * depth // 8
    for index in reversed(range(height)):
        chunk = data[pos:pos + row_bytes]
        row = surface.line(index)
        row[:len(chunk)] = chunk
        # rows on disk are padded to a multiple of four bytes
        pos += (row_bytes + 3) & ~3
    return surface