import io
import itertools

import pytest

from ticklekit.prof import Profiler


def _profiler(max_entries=32):
    ticks = itertools.count(0, 10)
    out = io.StringIO()
    prof = Profiler(max_entries, counters=lambda: (next(ticks), 0, 0), output=out)
    return prof, out


def test_idle_frame_clears_log():
    prof, _ = _profiler()
    prof.enter("a")
    prof.leave("a")
    assert prof.process() is None
    assert len(prof.log) == 0


def test_single_frame_profile():
    prof, out = _profiler()
    prof.start_profile(1)
    prof.enter("a")
    prof.leave("a")
    report = prof.process()
    assert report.section("a").entries == 1
    assert report.section("a").cycle == 10
    assert "Section summary" in out.getvalue()
    assert prof.last_report is report
    assert len(prof.log) == 0


def test_profile_accumulates_frames():
    prof, _ = _profiler()
    prof.start_profile(2)
    prof.enter("a")
    prof.leave("a")
    assert prof.process() is None
    assert len(prof.log) == 2
    prof.enter("a")
    prof.leave("a")
    report = prof.process()
    assert report.section("a").entries == 2


def test_after_profile_returns_to_idle():
    prof, _ = _profiler()
    prof.start_profile(1)
    prof.process()
    prof.enter("a")
    prof.leave("a")
    assert prof.process() is None
    assert len(prof.log) == 0


def test_errors_are_written():
    prof, out = _profiler()
    prof.start_profile(1)
    prof.enter("a")
    report = prof.process()
    assert any("Begin without matching end" in e for e in report.errors)
    assert "Begin without matching end" in out.getvalue()


def test_log_overflow():
    prof, _ = _profiler(max_entries=1)
    prof.enter("a")
    with pytest.raises(OverflowError):
        prof.leave("a")