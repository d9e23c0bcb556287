"""Files found by a search and how they are handed to the desktop."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class FoundFile:
    """A directory entry matched by a search: its display name and full path."""

    name: str
    path: str

    def open(self) -> None:
        """Open the file with the desktop's default handler for it."""
        if sys.platform.startswith("win"):
            os.startfile(self.path)
            return
        opener = "open" if sys.platform == "darwin" else "xdg-open"
        subprocess.Popen(
            [opener, self.path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )