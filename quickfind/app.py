"""Line-driven launcher: type to search a directory, then open a result."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .files import FoundFile
from .search import DEFAULT_ROOT, SearchSession, window_height_for

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 400
ROW_HEIGHT = 50

COMMAND_PREFIX = ":"


class Launcher:
    """Reads queries and commands line by line and reports result changes.

    A plain line is a search query. Lines starting with ``:`` are commands:
    ``:open NAME`` opens a result, ``:toggle`` hides or shows the window and
    ``:quit`` stops the launcher. Added results are reported as ``+ name``,
    removed ones as ``- name``.
    """

    def __init__(
        self,
        root: str | os.PathLike[str] = DEFAULT_ROOT,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        opener: Callable[[FoundFile], None] = FoundFile.open,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.session = SearchSession(
            root,
            on_create=lambda name: self._emit(f"+ {name}"),
            on_delete=lambda name: self._emit(f"- {name}"),
            opener=opener,
        )
        self.visible = True
        self._height = WINDOW_HEIGHT

    @property
    def size(self) -> tuple[int, int]:
        """Current window size; a hidden window has no area."""
        if not self.visible:
            return (0, 0)
        return (WINDOW_WIDTH, self._height)

    def _emit(self, text: str) -> None:
        print(text, file=self._stdout)

    def run(self) -> None:
        """Handle lines from the input until it ends or a quit command arrives."""
        for line in self._stdin:
            if not self.handle(line.rstrip("\r\n")):
                break

    def handle(self, line: str) -> bool:
        """Handle one line; return False when the launcher should stop."""
        if not line.startswith(COMMAND_PREFIX):
            results = self.session.search(line)
            self._height = window_height_for(len(results) * ROW_HEIGHT)
            return True

        command, _, argument = line[len(COMMAND_PREFIX):].partition(" ")
        if command == "quit":
            return False
        if command == "toggle":
            self.visible = not self.visible
            return True
        if command == "open":
            if self.session.click(argument) is None:
                self._emit(f"no such result: {argument}")
            return True
        raise ValueError(f"unknown command: {command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the launcher on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="quickfind", description="Search a directory by file name."
    )
    parser.add_argument(
        "--root", default=DEFAULT_ROOT, help="directory to search (default: %(default)s)"
    )
    args = parser.parse_args(argv)
    Launcher(args.root).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())