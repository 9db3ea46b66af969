"""The base interface of an emulated system."""

from __future__ import annotations

from typing import Any, Optional


class System:
    """An emulated machine: a frame and scanline counter plus the cartridge in use.

    Concrete systems override the state methods. The base class has no
    state to save.
    """

    def __init__(self) -> None:
        self.frame = 0
        self.line = 0
        self.rom: Optional[Any] = None

    def get_state_size(self) -> int:
        """Number of bytes that ``save_state`` produces."""
        return 0

    def save_state(self) -> bytes:
        """Return a snapshot of the machine state."""
        return b""

    def restore_state(self, data) -> None:
        """Return the machine to a snapshot made by ``save_state``."""
        if len(data) > self.get_state_size():
            raise ValueError(
                f"state of {len(data)} bytes exceeds {self.get_state_size()} bytes"
            )

    def set_rom(self, rom) -> None:
        """Insert ``rom``, or remove the current one with None."""
        self.rom = rom

    def reset(self) -> None:
        """Restart the machine from the first frame."""
        self.frame = 0
        self.line = 0