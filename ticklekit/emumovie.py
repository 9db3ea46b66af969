"""Recording and replaying controller input from a saved starting state."""

from __future__ import annotations

from typing import Any, Optional


class MovieClip:
    """A starting snapshot plus one input record per frame."""

    def __init__(self, state_size: int, max_frames: int) -> None:
        self.max_state_size = state_size
        self.max_frames = max_frames
        self.state = b""
        self.frames: list[Any] = []
        self.recording = False
        self.playing = False
        self.play_frame_index = 0

    def record_begin(self, system) -> None:
        """Snapshot ``system`` and start collecting frames."""
        if self.recording or self.playing:
            raise RuntimeError("movie clip is busy")
        size = system.get_state_size()
        if size > self.max_state_size:
            raise ValueError(f"state of {size} bytes exceeds {self.max_state_size} bytes")
        self.state = bytes(system.save_state())
        self.frames = []
        self.recording = True

    def record_end(self) -> None:
        if not self.recording:
            raise RuntimeError("movie clip is not recording")
        self.recording = False

    def record_frame(self, frame_input) -> bool:
        """Append one frame of input; False once the clip is full."""
        if len(self.frames) < self.max_frames:
            self.frames.append(frame_input)
            return True
        return False

    def play_begin(self, system) -> None:
        """Restore the recorded snapshot into ``system`` and rewind."""
        if self.recording or self.playing:
            raise RuntimeError("movie clip is busy")
        if not self.state:
            raise RuntimeError("movie clip holds no recording")
        system.restore_state(self.state)
        self.play_frame_index = 0
        self.playing = True

    def play_end(self) -> None:
        if not self.playing:
            raise RuntimeError("movie clip is not playing")
        self.playing = False

    def play_frame(self) -> Optional[Any]:
        """Return the next recorded input, or None once all have been played."""
        if self.play_frame_index < len(self.frames):
            frame_input = self.frames[self.play_frame_index]
            self.play_frame_index += 1
            return frame_input
        return None