"""A mix buffer that resamples to the console's 48 kHz PCM output queue."""

from __future__ import annotations

from typing import Sequence

from .mixbuffer import MixBuffer

MAX_ENQUEUE = 4 * 800
TARGET_BUFFERED = 4 * 800
_TWO_THIRD = 0x10000 * 2 // 3
_ONE_THIRD = 0x10000 - _TWO_THIRD


class PcmSink:
    """An in-memory 48 kHz stereo output queue with a play-out position."""

    def __init__(self, initialized: bool = True) -> None:
        self.initialized = initialized
        self.left: list[int] = []
        self.right: list[int] = []
        self.calls: list[tuple[str, int]] = []
        self._played = 0

    def buffered(self) -> int:
        """Samples queued but not yet played."""
        if not self.initialized:
            return 0
        return len(self.left) - self._played

    def buffered_async(self) -> int:
        return self.buffered()

    def play(self, count: int) -> None:
        """Consume up to ``count`` queued samples."""
        self._played = min(len(self.left), self._played + count)

    def _append(self, tag: str, left: Sequence[int], right: Sequence[int]) -> None:
        if not self.initialized:
            return
        self.left.extend(left)
        self.right.extend(right)
        self.calls.append((tag, len(left)))

    def enqueue(self, left: Sequence[int], right: Sequence[int], wait: bool = True) -> None:
        self._append("sync", left, right)

    def enqueue_async(self, left: Sequence[int], right: Sequence[int]) -> None:
        self._append("async", left, right)


def convert_samples_2to3(samples: Sequence[int], prev_sample: int) -> tuple[list[int], int]:
    """Turn every two input samples into three output ones.

    Returns the output samples and the last input sample, which is carried
    over as ``prev_sample`` into the next call.
    """
    if len(samples) % 2:
        raise ValueError("sample count must be even")
    out: list[int] = []
    s0 = prev_sample
    for s1, s2 in zip(samples[0::2], samples[1::2]):
        out.append(s0)
        out.append((s0 * _ONE_THIRD + s1 * _TWO_THIRD) >> 16)
        out.append((s1 * _TWO_THIRD + s2 * _ONE_THIRD) >> 16)
        s0 = s2
    return out, s0


class SjpcmMixBuffer(MixBuffer):
    """Collects stereo samples per frame and enqueues them on a ``PcmSink``."""

    def __init__(self, sink: PcmSink, sample_rate: int = 48000, async_mode: bool = False,
                 max_enqueue: int = MAX_ENQUEUE) -> None:
        self.sink = sink
        self.sample_rate = sample_rate
        self.async_mode = async_mode
        self.max_enqueue = max_enqueue
        self.last_output = 0
        self._prev = [0, 0]
        self._out_left: list[int] = []
        self._out_right: list[int] = []

    def get_format(self) -> tuple[int, int, int]:
        return (self.sample_rate, 16, 2)

    def get_output_samples(self) -> int:
        """Input samples needed to keep the output queue topped up."""
        if not self.sink.initialized:
            return 0
        buffered = self.sink.buffered_async() if self.async_mode else self.sink.buffered()
        count = (TARGET_BUFFERED - buffered) & ~3
        count = max(count, 0)
        if self.sample_rate == 48000:
            pass
        elif self.sample_rate == 32000:
            count = (count // 6) * 4
        elif self.sample_rate == 24000:
            count = (count // 8) * 4
        else:
            count = 0
        self.last_output = count
        return count

    def output_samples_stereo(self, left: Sequence[int], right: Sequence[int]) -> None:
        """Buffer one frame; the frame is dropped if it would overflow the queue."""
        count = len(left)
        if self.sample_rate == 24000:
            estimate = count * 2
        elif self.sample_rate == 32000:
            estimate = count * 6 // 4
        else:
            estimate = count
        if len(self._out_left) + estimate > self.max_enqueue:
            return

        if self.sample_rate == 32000:
            limit = self.max_enqueue * 2 // 3
            out_l, self._prev[0] = convert_samples_2to3(left[:limit], self._prev[0])
            out_r, self._prev[1] = convert_samples_2to3(right[:limit], self._prev[1])
            self._out_left.extend(out_l)
            self._out_right.extend(out_r)
        else:
            self._out_left.extend(left)
            self._out_right.extend(right[:count])

    def output_samples_mono(self, samples: Sequence[int]) -> None:
        self.output_samples_stereo(samples, samples)

    def flush(self) -> None:
        """Enqueue an even number of buffered samples, then empty the buffer."""
        count = len(self._out_left)
        if count > 0:
            count &= ~1
            count = min(count, self.max_enqueue)
            left, right = self._out_left[:count], self._out_right[:count]
            if self.async_mode:
                self.sink.enqueue_async(left, right)
            else:
                self.sink.enqueue(left, right, wait=True)
        self._out_left = []
        self._out_right = []