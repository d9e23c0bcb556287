"""Search a folder by file name, keep the matches as you type, and open them."""

__version__ = "0.1.0"