"""A file browser screen with a small copy, paste and delete menu."""

from __future__ import annotations

import contextlib
import enum
import logging
import os
import shutil
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol

from .ui_menu import MENU_SELECT, MenuScreen
from .ui_screen import MessageFunc, PadButton, Screen

log = logging.getLogger(__name__)

ENTRY_MAX_CHARS = 64
PATH_MAX_CHARS = 256
DEFAULT_MAX_LINES = 209 // 11 - 1
DRIVES = ("cdfs:", "host:", "mc0:", "mc1:")
MENU_ENTRIES = ("Copy File", "Paste File", "Delete file")

MSG_EXEC = 1
MSG_RESOLVE = 2

MENU_COPY = 0
MENU_PASTE = 1
MENU_DELETE = 2


class BrowserEntryType(enum.IntEnum):
    DIR = 0
    DRIVE = 1
    EXECUTABLE = 2
    OTHER = 3


@dataclass
class BrowserEntry:
    name: str
    entry_type: BrowserEntryType
    size: int = 0


class FileSystem(Protocol):
    def listdir(self, path: str) -> Iterable[tuple[str, int, bool]]: ...
    def remove(self, path: str) -> None: ...
    def rmdir(self, path: str) -> None: ...
    def copy(self, dest: str, src: str) -> None: ...
    def max_name_length(self, directory: str) -> int: ...
    def truncate_name(self, name: str, max_chars: int) -> str: ...


class LocalFileSystem:
    """The host file system, as seen by the browser."""

    def listdir(self, path: str) -> Iterator[tuple[str, int, bool]]:
        """Yield ``(name, size, is_dir)``; raises OSError if ``path`` cannot be opened."""
        with os.scandir(path) as entries:
            for entry in entries:
                is_dir = entry.is_dir()
                size = 0 if is_dir else entry.stat().st_size
                yield entry.name, size, is_dir

    def remove(self, path: str) -> None:
        os.remove(path)

    def rmdir(self, path: str) -> None:
        os.rmdir(path)

    def copy(self, dest: str, src: str) -> None:
        shutil.copyfile(src, dest)

    def max_name_length(self, directory: str) -> int:
        return 255

    def truncate_name(self, name: str, max_chars: int) -> str:
        return name[:max(max_chars, 0)]


def split_dest_name(name: str) -> tuple[str, str]:
    """Split ``name`` into base and extension; ``.x.gz`` counts as one extension."""
    dot = name.rfind(".")
    if dot < 0:
        return name, ""
    if name[dot:] == ".gz":
        base = name[:dot]
        inner = base.rfind(".")
        if inner < 0:
            return base, ".gz"
        return base[:inner], base[inner:] + ".gz"
    return name[:dot], name[dot:]


class BrowserScreen(Screen):
    """Lists a directory; entering a file reports it with message ``MSG_EXEC``.

    With a message callback set, files are given the type the callback
    returns for ``MSG_RESOLVE``; without one they are ``OTHER``.
    """

    def __init__(self, max_entries: int, filesystem: Optional[FileSystem] = None,
                 msg_func: Optional[MessageFunc] = None, render=None) -> None:
        super().__init__(msg_func, render)
        self.filesystem: FileSystem = filesystem if filesystem is not None else LocalFileSystem()
        self.max_entries = max_entries
        self.entries: list[BrowserEntry] = []
        self.dir = ""
        self.select = 0
        self.scroll = 0
        self.max_lines = DEFAULT_MAX_LINES
        self.sub_menu_active = False
        self.sub_menu = MenuScreen(lambda kind, parm1, parm2: self.menu_event(kind, parm1))
        self.sub_menu.title = "File Menu"
        self.sub_menu.set_entries(MENU_ENTRIES)
        self.sub_menu.user_data = self

    def reset_entries(self) -> None:
        self.select = 0
        self.scroll = 0
        self.entries = []

    def sort_entries(self) -> None:
        """Order by entry type, then by name ignoring case."""
        self.entries.sort(key=lambda e: (int(e.entry_type), e.name.lower()))

    def add_entry(self, name: str, entry_type, size: int = 0) -> None:
        """Append an entry; ignored once ``max_entries`` are listed."""
        if len(self.entries) < self.max_entries:
            self.entries.append(
                BrowserEntry(name[:ENTRY_MAX_CHARS - 1], BrowserEntryType(entry_type), size)
            )

    def _selected(self) -> Optional[BrowserEntry]:
        if 0 <= self.select < len(self.entries):
            return self.entries[self.select]
        return None

    def entry_path(self) -> Optional[str]:
        """Full path of the selected entry, or None if nothing is selected."""
        entry = self._selected()
        if entry is None:
            return None
        return f"{self.dir}{entry.name}"[:PATH_MAX_CHARS - 1]

    def entry_name(self) -> Optional[str]:
        entry = self._selected()
        return entry.name if entry is not None else None

    def entry_type(self) -> BrowserEntryType:
        entry = self._selected()
        return entry.entry_type if entry is not None else BrowserEntryType.OTHER

    def _file_type(self, name: str) -> BrowserEntryType:
        if self.msg_func is None:
            return BrowserEntryType.OTHER
        return BrowserEntryType(self.send_message(MSG_RESOLVE, 0, name))

    def set_dir(self, path: str) -> None:
        """List ``path``; the empty path lists the drives."""
        log.debug("browser dir: %s", path)
        self.reset_entries()
        self.dir = path
        self.force_draw()

        if path:
            try:
                for name, size, is_dir in self.filesystem.listdir(path):
                    if name in (".", ".."):
                        continue
                    entry_type = BrowserEntryType.DIR if is_dir else self._file_type(name)
                    self.add_entry(name, entry_type, size)
            except OSError as exc:
                log.debug("cannot list %s: %s", path, exc)
        else:
            for drive in DRIVES:
                self.add_entry(drive, BrowserEntryType.DRIVE, 0)

        self.sort_entries()
        log.debug("browser entries: %d", len(self.entries))

    def chdir(self, subdir: str) -> None:
        """Enter ``subdir``; ``.`` relists and ``..`` goes up one level."""
        path = self.dir
        if subdir == ".":
            pass
        elif subdir == "..":
            if path != "/":
                i = len(path) - 2
                while i >= 0 and path[i] != "/":
                    i -= 1
                path = path[:max(i + 1, 0)]
        else:
            path = f"{path}{subdir}/"
        self.set_dir(path)

    def handle_input(self, buttons: int, trigger: int) -> None:
        if trigger & PadButton.SELECT:
            self.sub_menu_active = not self.sub_menu_active

        if self.sub_menu_active:
            self.sub_menu.handle_input(buttons, trigger)
            return

        if trigger & PadButton.UP:
            self.select -= 1
        if trigger & PadButton.DOWN:
            self.select += 1
        if trigger & PadButton.SQUARE:
            self.select -= self.max_lines - 1
        if trigger & PadButton.CIRCLE:
            self.select += self.max_lines - 1

        if self.select < 0:
            self.select = 0
        if self.select > len(self.entries) - 1:
            self.select = len(self.entries) - 1

        if self.select < self.scroll:
            self.scroll = self.select
        if self.select >= self.scroll + self.max_lines - 1:
            self.scroll = self.select - self.max_lines + 1

        if trigger & PadButton.TRIANGLE:
            self.chdir("..")

        if trigger & (PadButton.CROSS | PadButton.START):
            path = self.entry_path()
            entry = self._selected()
            if path is not None and entry is not None:
                if entry.entry_type in (BrowserEntryType.DIR, BrowserEntryType.DRIVE):
                    self.chdir(entry.name)
                else:
                    log.debug("exec: %s", path)
                    self.send_message(MSG_EXEC, int(entry.entry_type), path)

    def _paste(self) -> None:
        base, ext = split_dest_name(self.sub_menu.texts[1])
        limit = self.filesystem.max_name_length(self.dir) - len(ext)
        short = self.filesystem.truncate_name(base, limit)
        dest = f"{self.dir}{short}{ext}"[:1023]
        src = self.sub_menu.texts[0][:511]
        log.debug("copy %s -> %s", src, dest)
        self.filesystem.copy(dest, src)
        self.chdir(".")

    def _delete(self, path: str) -> None:
        log.debug("deleting %s", path)
        entry_type = self.entry_type()
        if entry_type == BrowserEntryType.DIR:
            with contextlib.suppress(OSError):
                self.filesystem.rmdir(path)
        elif entry_type != BrowserEntryType.DRIVE:
            with contextlib.suppress(OSError):
                self.filesystem.remove(path)
            with contextlib.suppress(OSError):
                self.filesystem.rmdir(path)
        self.chdir(".")

    def menu_event(self, kind: int, parm1: int) -> int:
        """Carry out file menu choice ``parm1``; needs a selected entry."""
        path = self.entry_path()
        if path is None:
            return 0
        if kind == MENU_SELECT:
            if parm1 == MENU_COPY:
                if self.entry_type() not in (BrowserEntryType.DIR, BrowserEntryType.DRIVE):
                    self.sub_menu.set_text(0, path)
                    self.sub_menu.set_text(1, self.entry_name() or "")
            elif parm1 == MENU_PASTE:
                self._paste()
            elif parm1 == MENU_DELETE:
                self._delete(path)
            self.sub_menu_active = False
        return 0