"""A ring-buffer debug terminal that keeps the last log lines and a phase marker."""

from __future__ import annotations

import sys
import traceback
from collections import deque
from typing import Optional, TextIO

MAX_LINES = 64
LINE_LEN = 120


class DebugPanic(RuntimeError):
    """Raised when the program halts on a fatal error."""


class DebugTerminal:
    """Keeps recent messages and the last phase reached, and renders them as text."""

    def __init__(self, stream: Optional[TextIO] = None, max_lines: int = MAX_LINES,
                 line_len: int = LINE_LEN) -> None:
        self._stream = stream
        self._line_len = line_len
        self._lines: deque[str] = deque(maxlen=max_lines)
        self.last_phase = ""
        self._write("[dbgterm] init\n")
        self._store("dbgterm: init")

    def _write(self, text: str) -> None:
        (self._stream or sys.stdout).write(text)

    def _clip(self, text: str) -> str:
        return text[: self._line_len - 1]

    def _store(self, msg: Optional[str]) -> None:
        self._lines.append(self._clip("(null)" if msg is None else msg))

    def set_phase(self, func: Optional[str], msg: Optional[str]) -> None:
        """Record the phase the program has reached."""
        self.last_phase = self._clip(f"{func or '(func)'}: {msg or '(msg)'}")
        self._store(self.last_phase)

    def log(self, fmt: Optional[str], *args) -> None:
        """Store a printf-style message."""
        if fmt is None:
            fmt = "(null)"
        self._store(fmt % args if args else fmt)

    def ok(self, func: Optional[str], msg: Optional[str]) -> None:
        self.log("%s: OK %s", func or "(func)", msg or "(msg)")

    def err(self, func: Optional[str], msg: Optional[str]) -> None:
        self.log("%s: ERROR %s", func or "(func)", msg or "(msg)")

    def lines(self) -> list[str]:
        """Stored lines, oldest first."""
        return list(self._lines)

    def dump_stack(self) -> None:
        """Log the current call stack, innermost frame first."""
        self.log("stack trace:")
        frames = list(reversed(traceback.extract_stack()[:-1]))[:16]
        for index, frame in enumerate(frames):
            self.log("  #%02d %s:%d %s", index, frame.filename, frame.lineno, frame.name)

    def render(self, title: Optional[str] = None) -> str:
        """Write the title, the last phase and every stored line; return the text."""
        out = [f"=== {title or 'DBG'} ===\n", f"LAST: {self.last_phase or '(none)'}\n"]
        out.extend(f"{index:02d} {line}\n" for index, line in enumerate(self._lines) if line)
        text = "".join(out)
        self._write(text)
        return text

    def panic(self, func: Optional[str], msg: Optional[str]) -> None:
        """Log the error and the stack, show everything, then halt by raising."""
        self.err(func, msg)
        self.dump_stack()
        self.render("PANIC")
        raise DebugPanic(f"{func or '(func)'}: {msg or '(msg)'}")