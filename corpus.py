from __future__ import annotations

import pathlib
from typing import Iterator, Optional, Protocol, TextIO, Union


class CharReader(Protocol):
    """Sequential character source consumed by training."""

    def is_empty(self) -> bool: ...

    def read_char(self) -> str: ...


class TextCharReader:
    """Reads an in-memory string one character at a time."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def is_empty(self) -> bool:
        return self._pos >= len(self._text)

    def read_char(self) -> str:
        if self.is_empty():
            raise EOFError("no more characters to read")
        char = self._text[self._pos]
        self._pos += 1
        return char


class FileCharReader:
    """Reads a text file one character at a time.

    The file is opened on construction, so a missing corpus fails right away.
    """

    def __init__(self, path: Union[str, pathlib.Path], encoding: str = "utf-8") -> None:
        self.path = pathlib.Path(path)
        fh = open(self.path, "r", encoding=encoding, newline="")
        try:
            self._next: str = fh.read(1)
        except BaseException:
            fh.close()
            raise
        self._fh: Optional[TextIO] = fh

    def is_empty(self) -> bool:
        return self._next == ""

    def read_char(self) -> str:
        if self.is_empty() or self._fh is None:
            raise EOFError(f"no more characters to read from {self.path}")
        char = self._next
        self._next = self._fh.read(1)
        return char

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None
            self._next = ""

    def __enter__(self) -> "FileCharReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def read_chars(reader: CharReader) -> Iterator[str]:
    """Drain `reader` in order."""
    while not reader.is_empty():
        yield reader.read_char()
