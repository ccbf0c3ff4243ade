"""Character stream over PGN text with a one-character rewind."""

from __future__ import annotations

import io
from typing import TextIO

_LINE_ENDS = "\r\n"


class PgnStream:
    """Reads a text source one character at a time.

    ``unread`` steps back over the last character read, which is how the
    reader hands the opening ``[`` of the next game back to the caller.
    """

    __slots__ = ("_source", "_pending", "_last", "_position")

    def __init__(self, source: str | TextIO) -> None:
        self._source: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._pending: list[str] = []
        self._last = ""
        self._position = 0

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._position

    @property
    def at_end(self) -> bool:
        return self.peek() == ""

    def peek(self) -> str:
        if not self._pending:
            ch = self._source.read(1)
            if not ch:
                return ""
            self._pending.append(ch)
        return self._pending[-1]

    def read(self) -> str:
        """Next character, or ``""`` once the source is exhausted."""
        ch = self._pending.pop() if self._pending else self._source.read(1)
        if ch:
            self._last = ch
            self._position += 1
        return ch

    def unread(self) -> None:
        if not self._last:
            raise ValueError("Nothing to unread")
        self._pending.append(self._last)
        self._last = ""
        self._position -= 1

    def read_line(self) -> str:
        """Rest of the current line; the line terminator is consumed."""
        chars: list[str] = []
        while True:
            ch = self.read()
            if not ch:
                break
            if ch in _LINE_ENDS:
                if ch == "\r" and self.peek() == "\n":
                    self.read()
                break
            chars.append(ch)
        return "".join(chars)

    def skip_whitespace(self) -> None:
        while self.peek().isspace():
            self.read()
