"""A log of profiling section begin/end marks and the report built from it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

MAX_DEPTH = 16
MAX_SECTIONS = 64
UNKNOWN_SECTION = "<unknown>"
BEGIN_MARK = "!"
END_MARK = "~"


class ProfCounter(enum.IntEnum):
    CYCLE = 0
    COUNTER0 = 1
    COUNTER1 = 2
    USER = 3


@dataclass(frozen=True)
class ProfLogEntry:
    """One mark: ``name`` starts with ``!`` for a begin, any other mark for an end."""

    name: str
    cycle: int = 0
    counter0: int = 0
    counter1: int = 0
    user: int = 0

    @property
    def is_begin(self) -> bool:
        return self.name[:1] == BEGIN_MARK

    @property
    def section_name(self) -> str:
        return self.name[1:]


def _cdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class ProfSection:
    """Totals for all visits of one named section."""

    name: str
    entries: int = 0
    cycle: int = 0
    counter0: int = 0
    counter1: int = 0

    def averages(self) -> tuple[int, int, int]:
        """Per-visit ``(counter0, counter1, cycle)``."""
        if self.entries <= 0:
            return (0, 0, 0)
        return (_cdiv(self.counter0, self.entries), _cdiv(self.counter1, self.entries),
                _cdiv(self.cycle, self.entries))


@dataclass
class ProfReport:
    lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    sections: list[ProfSection] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.lines)

    def section(self, name: str) -> Optional[ProfSection]:
        return next((s for s in self.sections if s.name == name), None)


class ProfLog:
    """A bounded list of marks recorded during one or more frames."""

    def __init__(self, max_entries: int, cycle_multiply: int = 1) -> None:
        self.max_entries = max_entries
        self.cycle_multiply = cycle_multiply
        self.entries: list[ProfLogEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, entry: ProfLogEntry) -> None:
        if len(self.entries) >= self.max_entries:
            raise OverflowError("profile log is full")
        self.entries.append(entry)

    def clear(self) -> None:
        self.entries = []

    def report(self, include_log: bool = False, include_summary: bool = True) -> ProfReport:
        """Pair begins with ends, total the sections and describe them as text."""
        rep = ProfReport()
        sections: dict[str, ProfSection] = {}

        def add_section(name: str) -> Optional[ProfSection]:
            if name not in sections and len(sections) < MAX_SECTIONS:
                sections[name] = ProfSection(name)
            return sections.get(name)

        def record(tabs: int, name: str, begin: ProfLogEntry, end: ProfLogEntry) -> None:
            cycle = (end.cycle - begin.cycle) * self.cycle_multiply
            c0 = end.counter0 - begin.counter0
            c1 = end.counter1 - begin.counter1
            section = add_section(name)
            if section is not None:
                section.entries += 1
                section.cycle += cycle
                section.counter0 += c0
                section.counter1 += c1
            if include_log:
                rep.lines.append("\t" * max(tabs, 0) + f"{name:<16} {c0:7d} {c1} {cycle} {end.user}\n")

        add_section(UNKNOWN_SECTION)
        stack: list[ProfLogEntry] = []
        last: Optional[ProfLogEntry] = None
        entries = self.entries

        for index, entry in enumerate(entries):
            if entry.is_begin:
                if last is not None and include_log:
                    rep.lines.append("\t" * max(len(stack) - 1, 0) + f"{last.section_name}\n")
                if index > 0:
                    record(len(stack), UNKNOWN_SECTION, entries[index - 1], entry)
                if len(stack) >= MAX_DEPTH:
                    rep.errors.append("ERROR: Section stack overflow\n")
                    break
                stack.append(entry)
                last = entry
                continue

            if not stack:
                rep.errors.append("ERROR: Section stack underflow\n")
                break
            begin = stack.pop()
            if begin.section_name != entry.section_name:
                rep.errors.append(f"ERROR: Unbalanced enter/leave pair: {begin.name} {entry.name}\n")
                break
            if begin is last:
                record(len(stack), entry.section_name, begin, entry)
            else:
                record(len(stack) + 1, UNKNOWN_SECTION, entries[index - 1], entry)
                if last is not None:
                    rep.errors.append(f"ERROR: End without matching begin {entry.name}\n")
                    break
                record(len(stack), entry.section_name, begin, entry)
            last = None

        if last is not None:
            rep.errors.append(f"ERROR: Begin without matching end {last.name}\n")
        if stack:
            rep.errors.append("ERROR: Stack not empty\n")

        rep.sections = list(sections.values())
        if include_summary:
            rep.lines.append("\n")
            rep.lines.append("Section summary: \n")
            for s in rep.sections:
                if s.entries > 0:
                    a0, a1, ac = s.averages()
                    rep.lines.append(
                        f"{s.name:<24} {s.entries:4d} {s.counter0:7d} {s.counter1:7d} "
                        f"{s.cycle:7d} {a0:7d} {a1:7d} {ac:7d}\n"
                    )
        return rep