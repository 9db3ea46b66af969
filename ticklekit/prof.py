"""Frame-based profiler built on a mark log."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

from .proflog import BEGIN_MARK, END_MARK, ProfLog, ProfLogEntry, ProfReport

CounterSource = Callable[[], tuple[int, int, int]]


def _default_counters() -> tuple[int, int, int]:
    return (time.perf_counter_ns(), 0, 0)


class Profiler:
    """Records section marks each frame and reports after a requested number of frames."""

    def __init__(self, max_entries: int, counters: Optional[CounterSource] = None,
                 output: Optional[TextIO] = None, cycle_multiply: int = 1) -> None:
        self.log = ProfLog(max_entries, cycle_multiply)
        self._counters = counters or _default_counters
        self._output = output
        self._frames = 0
        self.last_report: Optional[ProfReport] = None

    def _mark(self, name: str) -> None:
        cycle, c0, c1 = self._counters()
        self.log.add(ProfLogEntry(name, cycle, c0, c1))

    def enter(self, name: str) -> None:
        self._mark(BEGIN_MARK + name)

    def leave(self, name: str) -> None:
        self._mark(END_MARK + name)

    def start_profile(self, frames: int) -> None:
        """Accumulate the next ``frames`` frames, then report on them."""
        self._frames = frames

    def process(self) -> Optional[ProfReport]:
        """End a frame; returns the report when a profile run completes."""
        if self._frames > 0:
            self._frames -= 1
            if self._frames == 0:
                report = self.log.report(include_log=False, include_summary=True)
                stream = self._output or sys.stdout
                stream.write(report.text)
                for error in report.errors:
                    stream.write(error)
                self.last_report = report
                self.log.clear()
                return report
            return None
        self.log.clear()
        return None