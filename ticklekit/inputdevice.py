"""Input device state and button remapping."""

from __future__ import annotations

import enum
from typing import Optional, Sequence


class InputStatus(enum.Enum):
    READY = enum.auto()
    BADDEVICE = enum.auto()


class InputDevice:
    """Button and axis state of one controller."""

    def __init__(self, num_buttons: int = 0, num_axes: int = 0) -> None:
        self.buttons: list[int] = [0] * num_buttons
        self.axes: list[int] = [0] * num_axes
        self.status = InputStatus.READY

    def reset_state(self) -> None:
        """Release every button and centre every axis."""
        self.buttons = [0] * len(self.buttons)
        self.axes = [0] * len(self.axes)

    def button_state(self, index: int) -> int:
        return self.buttons[index] if 0 <= index < len(self.buttons) else 0

    def bits(self) -> int:
        """Pack the first 32 buttons into a bit mask, button 0 in bit 0."""
        result = 0
        for i, state in enumerate(self.buttons[:32]):
            result |= int(state) << i
        return result & 0xFFFFFFFF

    def poll(self) -> None:
        """Refresh state from the hardware; a plain device holds its state as set."""


class InputMap(InputDevice):
    """A device view that reorders the buttons of another device."""

    def __init__(self, device: Optional[InputDevice] = None) -> None:
        super().__init__()
        self.device = device
        self.mapping: list[int] = []

    def set_mapping(self, mapping: Sequence[int]) -> None:
        """Button i of this map reads button ``mapping[i]`` of the device."""
        self.mapping = list(mapping)

    def poll(self) -> None:
        if self.device is None:
            self.axes = []
            self.buttons = []
            self.status = InputStatus.BADDEVICE
            return
        self.status = self.device.status
        self.axes = list(self.device.axes)
        self.buttons = [self.device.button_state(src) for src in self.mapping]