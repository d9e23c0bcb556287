"""Incremental file-name search over a single directory."""

from __future__ import annotations

import os
from collections.abc import Callable

from .files import FoundFile

DEFAULT_ROOT = "C:"

MIN_WINDOW_HEIGHT = 300
MAX_WINDOW_HEIGHT = 600

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_lower(text: str) -> str:
    """Lower-case only the ASCII letters A-Z, leaving everything else alone."""
    return text.translate(_ASCII_LOWER)


def window_height_for(list_height: int) -> int:
    """Window height for a result list of the given pixel height, capped at the maximum."""
    height = MIN_WINDOW_HEIGHT + list_height
    # The height is unsigned on screen: anything below zero wraps past the cap.
    if height < 0 or height > MAX_WINDOW_HEIGHT:
        return MAX_WINDOW_HEIGHT
    return height


def _ignore(name: str) -> None:
    pass


class SearchSession:
    """Keeps the current result set for a query typed character by character.

    ``on_create`` and ``on_delete`` are told the name of each result as it is
    added to or removed from the list shown to the user.
    """

    def __init__(
        self,
        root: str | os.PathLike[str] = DEFAULT_ROOT,
        on_create: Callable[[str], None] = _ignore,
        on_delete: Callable[[str], None] = _ignore,
        opener: Callable[[FoundFile], None] = FoundFile.open,
    ) -> None:
        self.root = root
        self.results: list[FoundFile] = []
        self._on_create = on_create
        self._on_delete = on_delete
        self._opener = opener

    def search(self, query: str) -> list[FoundFile]:
        """Update the results for a new query and return them."""
        needle = ascii_lower(query)
        if not needle.replace(" ", ""):
            self.clear()
            return list(self.results)

        kept = []
        for found in self.results:
            if needle in ascii_lower(found.name):
                kept.append(found)
            else:
                self._on_delete(found.name)
        self.results = kept

        known = {found.name for found in self.results}
        try:
            with os.scandir(self.root) as entries:
                for entry in entries:
                    name = ascii_lower(entry.name)
                    if needle not in name or name in known:
                        continue
                    self.results.append(FoundFile(name, entry.path))
                    known.add(name)
                    self._on_create(name)
        except OSError:
            pass
        return list(self.results)

    def click(self, name: str) -> FoundFile | None:
        """Open the result with this name, returning it, or None if there is none."""
        for found in self.results:
            if found.name == name:
                self._opener(found)
                return found
        return None

    def clear(self) -> None:
        """Remove every result."""
        for found in self.results:
            self._on_delete(found.name)
        self.results.clear()