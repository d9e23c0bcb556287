"""An in-memory file system for assets bundled with the application."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_CHARSET = "utf-8"

_MIME_TYPES: dict[str, str] = {
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "json": "application/json",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "ico": "image/x-icon",
    "txt": "text/plain",
    "csv": "text/csv",
    "xml": "text/xml",
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "flv": "video/x-flv",
    "webm": "video/webm",
    "zip": "application/zip",
    "rar": "application/x-rar-compressed",
    "7z": "application/x-7z-compressed",
    "tar": "application/x-tar",
    "gz": "application/gzip",
    "mpg": "video/mpeg",
    "mpeg": "video/mpeg",
    "ogg": "application/ogg",
    "ogv": "video/ogg",
    "oga": "audio/ogg",
    "otf": "font/otf",
    "ttf": "font/ttf",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "eot": "application/vnd.ms-fontobject",
    "sfnt": "font/sfnt",
    "bin": "application/octet-stream",
    "exe": "application/octet-stream",
    "dll": "application/octet-stream",
    "psd": "image/vnd.adobe.photoshop",
    "ai": "application/postscript",
    "eps": "application/postscript",
    "ps": "application/postscript",
    "m4a": "audio/m4a",
    "m4v": "video/x-m4v",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "mkv": "video/x-matroska",
    "mpa": "video/mpeg",
    "mpe": "video/mpeg",
    "mid": "audio/midi",
    "midi": "audio/midi",
    "3gp": "video/3gpp",
    "3g2": "video/3gpp2",
    "aif": "audio/aiff",
    "aiff": "audio/aiff",
    "aac": "audio/aac",
    "au": "audio/basic",
    "wasm": "application/wasm",
    "xhtml": "application/xhtml+xml",
    "qt": "video/quicktime",
}


def mime_type_for_extension(ext: str) -> str:
    """Return the MIME type for a file extension (without the dot, case-sensitive)."""
    return _MIME_TYPES.get(ext, DEFAULT_MIME_TYPE)


class EmbeddedFileSystem:
    """Serves files from a mapping of path to contents held in memory."""

    def __init__(self, files: Mapping[str, bytes], charset: str = DEFAULT_CHARSET) -> None:
        self._files = dict(files)
        self._charset = charset

    def file_exists(self, file_path: str) -> bool:
        """Whether a file is held under exactly this path."""
        return file_path in self._files

    def file_mime_type(self, file_path: str) -> str:
        """MIME type guessed from the text after the path's last dot."""
        _, dot, ext = file_path.rpartition(".")
        return mime_type_for_extension(ext if dot else "")

    def file_charset(self, file_path: str) -> str:
        """Character set of the held files; the same for every path."""
        return self._charset

    def open_file(self, file_path: str) -> bytes:
        """Return the contents of a held file."""
        try:
            return self._files[file_path]
        except KeyError:
            raise FileNotFoundError(file_path) from None