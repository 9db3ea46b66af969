"""The audio output interface that emulated sound is mixed into."""

from __future__ import annotations

from typing import Sequence


class MixBuffer:
    """An audio sink with no output: it wants no samples and discards what it gets."""

    def get_format(self) -> tuple[int, int, int]:
        """Return ``(sample_rate, sample_bits, channels)``."""
        return (0, 0, 0)

    def get_output_samples(self) -> int:
        """Number of samples the sink wants for the next frame."""
        return 0

    def output_samples_mono(self, samples: Sequence[int]) -> None:
        """Accept one channel of 16-bit samples."""

    def output_samples_stereo(self, left: Sequence[int], right: Sequence[int]) -> None:
        """Accept two channels of 16-bit samples."""

    def flush(self) -> None:
        """Push buffered samples to the output."""