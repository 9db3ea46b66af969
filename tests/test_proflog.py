import pytest

from ticklekit.proflog import (
    MAX_DEPTH,
    UNKNOWN_SECTION,
    ProfLog,
    ProfLogEntry,
    ProfSection,
)


def B(name, cycle=0, c0=0, c1=0):
    return ProfLogEntry("!" + name, cycle, c0, c1)


def E(name, cycle=0, c0=0, c1=0, user=0):
    return ProfLogEntry("~" + name, cycle, c0, c1, user)


def _log(*entries, mult=1):
    log = ProfLog(64, cycle_multiply=mult)
    for e in entries:
        log.add(e)
    return log


def test_single_section_totals():
    rep = _log(B("a", 100, 5, 7), E("a", 150, 9, 10)).report()
    sec = rep.section("a")
    assert sec.entries == 1
    assert sec.cycle == 150 - 100
    assert (sec.counter0, sec.counter1) == (9 - 5, 10 - 7)
    assert rep.errors == []


def test_cycle_multiply():
    rep = _log(B("a", 10), E("a", 13), mult=4).report()
    assert rep.section("a").cycle == (13 - 10) * 4


def test_nested_sections():
    rep = _log(B("outer", 0), B("inner", 10), E("inner", 20), E("outer", 40)).report()
    assert rep.section("inner").cycle == 20 - 10
    assert rep.section("outer").cycle == 40 - 0
    assert rep.section(UNKNOWN_SECTION).entries == 2
    assert rep.sections[0].name == UNKNOWN_SECTION
    assert rep.errors == []


def test_repeated_section_accumulates():
    rep = _log(B("a", 0), E("a", 4), B("a", 10), E("a", 16)).report()
    sec = rep.section("a")
    assert sec.entries == 2
    assert sec.cycle == 4 + 6
    assert sec.averages()[2] == (4 + 6) // 2


def test_unbalanced_pair():
    rep = _log(B("a"), E("b")).report()
    assert any("Unbalanced" in e for e in rep.errors)


def test_underflow():
    rep = _log(E("a")).report()
    assert any("underflow" in e for e in rep.errors)


def test_begin_without_end():
    rep = _log(B("a")).report()
    assert any("Begin without matching end !a" in e for e in rep.errors)
    assert any("Stack not empty" in e for e in rep.errors)


def test_stack_overflow():
    rep = _log(*[B(f"s{i}") for i in range(MAX_DEPTH + 1)]).report()
    assert any("overflow" in e for e in rep.errors)


def test_log_lines():
    rep = _log(B("a", 0), E("a", 3, user=2)).report(include_log=True, include_summary=False)
    assert rep.lines[0].startswith(f"{'a':<16} ")
    assert rep.lines[0].endswith(" 2\n")


def test_summary_text():
    rep = _log(B("a"), E("a")).report(include_log=False, include_summary=True)
    assert "Section summary: \n" in rep.text
    assert any(line.startswith(f"{'a':<24}") for line in rep.lines)


def test_no_summary_no_lines():
    rep = _log(B("a"), E("a")).report(include_log=False, include_summary=False)
    assert rep.text == ""


def test_add_beyond_capacity():
    log = ProfLog(1)
    log.add(B("a"))
    with pytest.raises(OverflowError):
        log.add(E("a"))


def test_clear():
    log = _log(B("a"), E("a"))
    log.clear()
    assert len(log) == 0


def test_empty_section_averages():
    assert ProfSection("x").averages() == (0, 0, 0)