"""Writing PCM samples to a RIFF WAVE file."""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional, Sequence

from .mixbuffer import MixBuffer

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = _HEADER.size
FORMAT_SIZE = 16
FORMAT_PCM = 1


def interleave_stereo(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Return left and right samples alternated, left first."""
    out: list[int] = []
    for l_sample, r_sample in zip(left, right):
        out.append(l_sample)
        out.append(r_sample)
    return out


class WavFile(MixBuffer):
    """A sound sink that records 16-bit samples into a WAVE file."""

    def __init__(self) -> None:
        self._file: Optional[BinaryIO] = None
        self.sample_rate = 0
        self.sample_bits = 0
        self.channels = 0
        self._pos = 0

    def __enter__(self) -> "WavFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _header(self) -> bytes:
        block_align = self.channels * self.sample_bits // 8
        return _HEADER.pack(
            b"RIFF", self._pos + HEADER_SIZE, b"WAVE", b"fmt ", FORMAT_SIZE,
            FORMAT_PCM, self.channels, self.sample_rate,
            self.sample_rate * block_align, block_align, self.sample_bits,
            b"data", self._pos,
        )

    def open(self, path, sample_rate: int, sample_bits: int, channels: int) -> None:
        """Create ``path`` and write a provisional header."""
        if self.is_open:
            raise RuntimeError("wave file is already open")
        handle = open(path, "wb")
        self._file = handle
        self.sample_rate = sample_rate
        self.sample_bits = sample_bits
        self.channels = channels
        self._pos = 0
        handle.write(self._header())

    def close(self) -> None:
        """Rewrite the header with the final lengths and close the file."""
        if self._file is None:
            return
        self._file.seek(0)
        self._file.write(self._header())
        self._file.close()
        self._file = None

    def _output(self, data: bytes) -> None:
        if self._file is None:
            return
        self._file.write(data)
        self._pos += len(data)

    def output_samples_mono(self, samples: Sequence[int]) -> None:
        """Write samples; ignored unless the file has one channel."""
        if self.channels == 1:
            self._output(struct.pack(f"<{len(samples)}h", *samples))

    def output_samples_stereo(self, left: Sequence[int], right: Sequence[int]) -> None:
        """Write interleaved samples; ignored unless the file has two channels."""
        if len(left) != len(right):
            raise ValueError("left and right channels differ in length")
        if self.channels == 2:
            frames = interleave_stereo(left, right)
            self._output(struct.pack(f"<{len(frames)}h", *frames))

    def get_output_samples(self) -> int:
        """Samples per 60 Hz frame."""
        return self.sample_rate // 60

    def get_format(self) -> tuple[int, int, int]:
        return (self.sample_rate, self.sample_bits, self.channels)