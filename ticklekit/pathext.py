"""File extension lookup for paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

MAX_EXTENSIONS = 16
MAX_EXTENSION_CHARS = 7


class PathExtError(Exception):
    """Raised when an extension cannot be registered."""


def get_extension(path: str) -> Optional[str]:
    """Return the extension of ``path`` including the dot, or None."""
    i = len(path) - 1
    while i >= 0 and path[i] not in "./\\":
        i -= 1
    if i > 0 and path[i] == ".":
        return path[i:]
    return None


@dataclass(frozen=True)
class _Entry:
    ext: str
    kind: Any


class PathExtRegistry:
    """A small table mapping extensions, case-insensitively, to a kind."""

    def __init__(self) -> None:
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, kind: Any, ext: str) -> None:
        """Register ``ext`` (without the dot) as meaning ``kind``."""
        if ext is None:
            raise ValueError("extension must not be None")
        if len(ext) > MAX_EXTENSION_CHARS:
            raise PathExtError(f"extension too long: {ext!r}")
        if len(self._entries) >= MAX_EXTENSIONS:
            raise PathExtError("extension table is full")
        self._entries.append(_Entry(ext, kind))

    def _find(self, ext: str) -> Optional[_Entry]:
        folded = ext.lower()
        return next((e for e in self._entries if e.ext.lower() == folded), None)

    def resolve(self, path: str) -> Optional[tuple[Any, str]]:
        """Return ``(kind, path_without_extension)`` or None if unknown."""
        ext = get_extension(path)
        if ext is None:
            return None
        entry = self._find(ext[1:])
        if entry is None:
            return None
        return entry.kind, path[: len(path) - len(ext)]