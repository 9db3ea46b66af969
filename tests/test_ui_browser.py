import pytest

from ticklekit.ui_browser import (
    DRIVES,
    ENTRY_MAX_CHARS,
    BrowserEntryType,
    BrowserScreen,
    split_dest_name,
)
from ticklekit.ui_screen import PadButton


class FakeFS:
    def __init__(self, tree):
        self.tree = tree
        self.copies = []

    def listdir(self, path):
        if path not in self.tree:
            raise OSError(path)
        return iter(self.tree[path])

    def remove(self, path):
        raise OSError(path)

    def rmdir(self, path):
        raise OSError(path)

    def copy(self, dest, src):
        self.copies.append((dest, src))

    def max_name_length(self, directory):
        return 255

    def truncate_name(self, name, max_chars):
        return name[:max_chars]


def test_split_dest_name():
    assert split_dest_name("game.smc") == ("game", ".smc")
    assert split_dest_name("game.smc.gz") == ("game", ".smc.gz")
    assert split_dest_name("game.gz") == ("game", ".gz")
    assert split_dest_name("noext") == ("noext", "")


def test_root_lists_drives():
    b = BrowserScreen(16, FakeFS({}))
    b.set_dir("")
    assert [e.name for e in b.entries] == sorted(DRIVES)
    assert all(e.entry_type == BrowserEntryType.DRIVE for e in b.entries)


def test_chdir_into_drive_and_back():
    b = BrowserScreen(16, FakeFS({"mc0:/": [("saves", 0, True)], "mc0:/saves/": []}))
    b.set_dir("")
    b.chdir("mc0:")
    assert b.dir == "mc0:/"
    b.chdir("saves")
    assert b.dir == "mc0:/saves/"
    b.chdir("..")
    assert b.dir == "mc0:/"
    b.chdir("..")
    assert b.dir == ""
    assert len(b.entries) == len(DRIVES)


def test_sort_dirs_first_case_insensitive():
    fs = FakeFS({"d/": [("b.txt", 10, False), ("Zeta", 0, True), ("A.txt", 5, False),
                        ("alpha", 0, True), (".", 0, True), ("..", 0, True)]})
    b = BrowserScreen(16, fs)
    b.set_dir("d/")
    assert [e.name for e in b.entries] == ["alpha", "Zeta", "A.txt", "b.txt"]
    assert b.entries[2].entry_type == BrowserEntryType.OTHER


def test_resolve_uses_message_callback():
    def msg(kind, parm1, parm2):
        return int(BrowserEntryType.EXECUTABLE) if kind == 2 else 0

    b = BrowserScreen(16, FakeFS({"d/": [("x.elf", 1, False)]}), msg_func=msg)
    b.set_dir("d/")
    assert b.entry_type() == BrowserEntryType.EXECUTABLE


def test_max_entries_and_name_length():
    b = BrowserScreen(2, FakeFS({}))
    b.add_entry("n" * 100, BrowserEntryType.OTHER, 0)
    b.add_entry("b", BrowserEntryType.OTHER, 0)
    b.add_entry("c", BrowserEntryType.OTHER, 0)
    assert len(b.entries) == 2
    assert len(b.entries[0].name) == ENTRY_MAX_CHARS - 1


def test_no_selection():
    b = BrowserScreen(4, FakeFS({}))
    b.set_dir("missing/")
    assert b.entries == []
    assert b.entry_path() is None
    assert b.entry_name() is None
    assert b.entry_type() == BrowserEntryType.OTHER
    assert b.menu_event(1, 2) == 0


def test_navigation_keeps_selection_in_view():
    files = [(f"f{i:02d}", 1, False) for i in range(30)]
    b = BrowserScreen(64, FakeFS({"d/": files}))
    b.set_dir("d/")
    b.handle_input(0, PadButton.UP)
    assert b.select == 0
    for _ in range(40):
        b.handle_input(0, PadButton.DOWN)
        assert 0 <= b.select <= len(b.entries) - 1
        assert b.scroll <= b.select < b.scroll + b.max_lines
    assert b.select == len(b.entries) - 1
    before = b.select
    b.handle_input(0, PadButton.SQUARE)
    assert b.select == before - (b.max_lines - 1)
    b.handle_input(0, PadButton.CIRCLE)
    assert b.select == before


def test_cross_on_file_sends_exec():
    calls = []

    def msg(kind, parm1, parm2):
        calls.append((kind, parm1, parm2))
        return int(BrowserEntryType.OTHER)

    b = BrowserScreen(8, FakeFS({"d/": [("rom.smc", 1, False)]}), msg_func=msg)
    b.set_dir("d/")
    assert b.entry_path() == "d/rom.smc"
    b.handle_input(0, PadButton.CROSS)
    assert calls[-1] == (1, int(BrowserEntryType.OTHER), "d/rom.smc")
    assert b.dir == "d/"
    assert b.entry_name() == "rom.smc"


def test_cross_on_dir_enters_and_triangle_leaves():
    b = BrowserScreen(8, FakeFS({"d/": [("sub", 0, True)], "d/sub/": []}))
    b.set_dir("d/")
    b.handle_input(0, PadButton.CROSS)
    assert b.dir == "d/sub/"
    b.handle_input(0, PadButton.TRIANGLE)
    assert b.dir == "d/"


def test_select_toggles_sub_menu_and_routes_input():
    b = BrowserScreen(8, FakeFS({"d/": [("a", 1, False), ("b", 1, False)]}))
    b.set_dir("d/")
    b.handle_input(0, PadButton.SELECT)
    assert b.sub_menu_active
    b.handle_input(0, PadButton.DOWN)
    assert b.sub_menu.select == 1
    assert b.select == 0
    b.handle_input(0, PadButton.SELECT)
    assert not b.sub_menu_active


def test_copy_then_paste_local(tmp_path):
    src_dir = tmp_path / "src"
    dst_dir = tmp_path / "dst"
    src_dir.mkdir()
    dst_dir.mkdir()
    (src_dir / "Game.smc").write_bytes(b"romdata")
    (dst_dir / "dummy").write_bytes(b"")

    b = BrowserScreen(16)
    b.set_dir(f"{src_dir}/")
    b.menu_event(1, 0)
    assert b.sub_menu.texts[0] == f"{src_dir}/Game.smc"
    assert b.sub_menu.texts[1] == "Game.smc"

    b.set_dir(f"{dst_dir}/")
    b.sub_menu_active = True
    b.menu_event(1, 1)
    assert (dst_dir / "Game.smc").read_bytes() == b"romdata"
    assert "Game.smc" in [e.name for e in b.entries]
    assert not b.sub_menu_active


def test_copy_ignores_directories():
    b = BrowserScreen(8, FakeFS({"d/": [("sub", 0, True)]}))
    b.set_dir("d/")
    b.menu_event(1, 0)
    assert b.sub_menu.texts[:2] == ["", ""]


def test_delete_local_file(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"x")
    b = BrowserScreen(16)
    b.set_dir(f"{tmp_path}/")
    assert [e.name for e in b.entries] == ["a.txt"]
    b.menu_event(1, 2)
    assert not (tmp_path / "a.txt").exists()
    assert b.entries == []


def test_paste_copy_error_propagates():
    b = BrowserScreen(8, FakeFS({"d/": [("a", 1, False)]}))
    b.set_dir("d/")
    b.filesystem = None
    with pytest.raises(AttributeError):
        b.menu_event(1, 1)