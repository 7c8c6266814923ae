"""
Line sources for plain and compressed log files.
"""

import bz2
import gzip
import lzma
import os
import zlib
from typing import IO, Callable, Dict, Iterator, Optional

from .exceptions import LogReadError
from .patterns import COMPRESSED_SUFFIXES

# Encoding used by every log reader in this package
LOG_ENCODING = "utf-8-sig"

_OPENERS: Dict[str, Callable[..., IO[str]]] = {
    ".gz": gzip.open,
    ".bz2": bz2.open,
    ".xz": lzma.open,
}

# Raised by the decompressors on truncated or corrupt input
_READ_ERRORS = (OSError, EOFError, zlib.error, lzma.LZMAError)


def is_compressed(path: str) -> bool:
    """Check whether a path carries a recognized compressed suffix."""
    return os.path.splitext(path)[1].lower() in COMPRESSED_SUFFIXES


class FileSource:
    """Lazy, forward-only line reader over one log file.

    Use as a context manager; the file (and decompressor) are released on
    exit whether or not the lines were fully consumed.

        with FileSource(path) as lines:
            for line in lines:
                ...
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._handle: Optional[IO[str]] = None

    def open(self) -> "FileSource":
        opener = _OPENERS.get(os.path.splitext(self.path)[1].lower())
        # Lines end at "\n" only; a bare "\r" stays inside its line
        try:
            if opener is not None:
                self._handle = opener(
                    self.path, "rt", encoding=LOG_ENCODING, errors="replace", newline="\n"
                )
            else:
                self._handle = open(
                    self.path, "r", encoding=LOG_ENCODING, errors="replace", newline="\n"
                )
        except _READ_ERRORS as e:
            raise LogReadError(f"Cannot open log file: {e}", file_path=self.path) from e
        return self

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "FileSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        return self.lines()

    def lines(self) -> Iterator[str]:
        """Yield lines without their trailing newline."""
        if self._handle is None:
            raise LogReadError("Log file is not open", file_path=self.path)
        try:
            for line in self._handle:
                yield line.rstrip("\r\n")
        except _READ_ERRORS as e:
            # gzip.BadGzipFile is an OSError subclass
            raise LogReadError(f"Cannot read log file: {e}", file_path=self.path) from e
