"""Choosing an emulated system for a cartridge file and loading it."""

from __future__ import annotations

import gzip
import logging
from dataclasses import dataclass
from typing import Optional

from .dataio import MemFileIO
from .emurom import LoadError, Rom, RomLoadError
from .emusys import System

log = logging.getLogger(__name__)

MAX_SYSTEMS = 8
DEFAULT_MAX_SAVE_CHARS = 32


def rom_display_name(path: str) -> str:
    """Return the file name of ``path`` without its extension (``.x.gz`` counts as one)."""

    def at(index: int) -> str:
        return path[index] if 0 <= index < len(path) else "\0"

    end = len(path)
    i = len(path)
    while i > 0 and at(i) not in "./":
        i -= 1
    if at(i) == "." and at(i + 1) == "g" and at(i + 2) == "z":
        i -= 1
        while i > 0 and at(i) not in "./":
            i -= 1
    if at(i) == ".":
        end = i
    while i > 0 and at(i) != "/":
        i -= 1
    if at(i) == "/":
        i += 1
    return path[i:end]


def name_hash(text: str) -> int:
    """A 32-bit multiply-by-33 hash of the characters of ``text``."""
    value = 0
    for byte in text.encode("latin-1", errors="replace"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & 0xFFFFFFFF
    return value


def truncate_save_name(text: str, max_chars: int) -> str:
    """Clip ``text`` to ``max_chars``; a clipped name ends in three hash digits."""
    if max_chars < 3:
        raise ValueError("max_chars must be at least 3")
    if len(text) < max_chars:
        return text
    return text[: max_chars - 3] + f"{name_hash(text) % 1000:03d}"


def read_file_data(path: Optional[str], size: int, compressed: bool = False) -> bytes:
    """Read at most ``size`` bytes of ``path``, gunzipping if ``compressed``."""
    if path is None:
        return b""
    opener = gzip.open if compressed else open
    with opener(path, "rb") as handle:
        data = handle.read(size)
    log.debug("%s rom data read: %s (%d bytes)",
              "gz" if compressed else "uncompressed", path, len(data))
    return data


@dataclass
class ShellSystem:
    system: Optional[System]
    rom: Optional[Rom]
    bios: Optional[Rom] = None


class EmuShell:
    """Holds the registered systems and the one currently running."""

    def __init__(self, max_systems: int = MAX_SYSTEMS,
                 max_save_chars: int = DEFAULT_MAX_SAVE_CHARS) -> None:
        self.max_systems = max_systems
        self.max_save_chars = max_save_chars
        self.systems: list[ShellSystem] = []
        self.system: Optional[System] = None
        self.rom: Optional[Rom] = None
        self.bios: Optional[Rom] = None
        self.rom_name = ""
        self.save_name = ""

    def register_system(self, system, rom, bios=None) -> ShellSystem:
        """Add a system with its cartridge and optional BIOS handlers."""
        if len(self.systems) >= self.max_systems:
            raise OverflowError("too many systems registered")
        entry = ShellSystem(system, rom, bios)
        self.systems.append(entry)
        return entry

    def find_system_by_ext(self, ext: str) -> Optional[ShellSystem]:
        """Return the first system whose cartridge format uses ``ext`` (case-sensitive)."""
        for entry in self.systems:
            if entry.rom is not None and ext in entry.rom.extensions():
                return entry
        return None

    def unload_rom(self) -> None:
        if self.system is not None:
            self.system.set_rom(None)
        if self.rom is not None:
            self.rom.unload()

    def set_rom_file_name(self, path: str) -> None:
        """Derive the display name and the save file name from ``path``."""
        self.rom_name = rom_display_name(path)
        self.save_name = truncate_save_name(path, self.max_save_chars)

    def load_rom(self, path: str, buffer_size: int) -> None:
        """Load ``path`` into the first registered system and reset it.

        Raises OSError if the file cannot be read and RomLoadError if it is
        empty or not a valid image.
        """
        self.unload_rom()
        self.system = None
        self.rom = None
        if not self.systems:
            raise LookupError("no system registered")
        entry = self.systems[0]
        self.system = entry.system
        self.rom = entry.rom

        if self.rom is not None:
            data = read_file_data(path, buffer_size, False)
            if not data:
                raise RomLoadError(LoadError.INVALID, f"no rom data in {path}")
            with MemFileIO(bytearray(data)) as stream:
                self.rom.load_rom(stream)
            self.set_rom_file_name(path)

        if self.system is not None:
            self.system.set_rom(self.rom)
            self.system.reset()