"""The base interface of a loadable cartridge image."""

from __future__ import annotations

import enum


class LoadError(enum.Enum):
    NONE = enum.auto()
    INVALID = enum.auto()


class RomLoadError(Exception):
    """Raised when a cartridge image cannot be loaded."""

    def __init__(self, error: LoadError, message: str = "") -> None:
        super().__init__(message or error.name.lower())
        self.error = error


class Rom:
    """A cartridge image. The base class recognises no format at all."""

    def __init__(self) -> None:
        self.loaded = False
        self._regions: dict[str, int] = {}

    def load_rom(self, stream) -> None:
        """Load the image from ``stream``; raises RomLoadError if it is not valid."""
        raise RomLoadError(LoadError.INVALID, "unsupported rom format")

    def unload(self) -> None:
        """Release the loaded image and forget its memory regions."""
        self._regions.clear()
        self.loaded = False

    def region_names(self) -> list[str]:
        """Names of the memory regions the image holds."""
        return list(self._regions)

    def region_size(self, region) -> int:
        """Size in bytes of memory region ``region``; 0 if there is no such region."""
        return self._regions.get(region, 0)

    def extensions(self) -> list[str]:
        """File extensions, without the dot, that this format uses."""
        return []