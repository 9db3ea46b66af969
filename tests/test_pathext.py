import pytest

from ticklekit.pathext import (
    MAX_EXTENSIONS,
    PathExtError,
    PathExtRegistry,
    get_extension,
)


def test_get_extension_basic():
    assert get_extension("roms/game.smc") == ".smc"


def test_get_extension_stops_at_separator():
    assert get_extension("dir.d/file") is None
    assert get_extension("dir.d\\file") is None


def test_get_extension_leading_dot_is_not_extension():
    assert get_extension(".hidden") is None
    assert get_extension("") is None


def test_resolve_is_case_insensitive():
    reg = PathExtRegistry()
    reg.add("rom", "smc")
    assert reg.resolve("GAME.SMC") == ("rom", "GAME")


def test_resolve_unknown_returns_none():
    reg = PathExtRegistry()
    reg.add("rom", "smc")
    assert reg.resolve("game.zip") is None
    assert reg.resolve("noext") is None


def test_first_registration_wins():
    reg = PathExtRegistry()
    reg.add("a", "gz")
    reg.add("b", "GZ")
    assert reg.resolve("x.gz")[0] == "a"


def test_table_full_raises():
    reg = PathExtRegistry()
    for i in range(MAX_EXTENSIONS):
        reg.add(i, f"e{i}")
    assert len(reg) == MAX_EXTENSIONS
    with pytest.raises(PathExtError):
        reg.add("x", "more")


def test_bad_extensions_rejected():
    reg = PathExtRegistry()
    with pytest.raises(ValueError):
        reg.add("x", None)
    with pytest.raises(PathExtError):
        reg.add("x", "toolongext")