"""Forward-only cursor over a code-unit sequence.

The cursor never rewinds. Callers read with current()/peek(), move with
consume(), and jump ahead with scan_to() or after an anchored match().

The source handed to a Cursor by the codec is surrogate-expanded (see
entitas.text), so every index is one UTF-16 code unit.

Thread Safety:
Cursor instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import re


class Cursor:
    """Sequential read access over a fixed string.

    Usage:
            >>> cursor = Cursor("**bold**")
            >>> cursor.peek(2)
            '**'
            >>> cursor.consume(2)
            >>> cursor.scan_to("**")
            'bold'
            >>> cursor.position
            6

    """

    __slots__ = ("_pos", "_source", "_source_len")

    def __init__(self, source: str) -> None:
        """Initialize cursor at the start of source.

        Args:
            source: Text to scan
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    @property
    def position(self) -> int:
        """Current index into the source."""
        return self._pos

    @property
    def source(self) -> str:
        """The full source being scanned."""
        return self._source

    def at_end(self) -> bool:
        """True once the position has reached or passed the end."""
        return self._pos >= self._source_len

    def current(self) -> str:
        """Return the unit at the position, or empty string at end of input."""
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def peek(self, n: int = 1) -> str:
        """Return the next n units without advancing.

        May return fewer than n units near the end.
        """
        return self._source[self._pos : self._pos + n]

    def consume(self, n: int = 1) -> None:
        """Advance the position by n.

        Advancing past the end is allowed; the cursor then reports end of input.
        """
        self._pos += n

    def remaining(self) -> str:
        """Return everything from the position to the end."""
        return self._source[self._pos :]

    def scan_to(self, delimiter: str) -> str:
        """Scan forward to the next literal occurrence of delimiter.

        On a hit the position moves to the start of the delimiter (not past it)
        and the text in between is returned. On a miss nothing moves and the
        empty string is returned.

        Uses str.find, so the delimiter is matched literally.

        Args:
            delimiter: Literal text to look for

        Returns:
            Text between the position and the delimiter, or "" if not found.
        """
        idx = self._source.find(delimiter, self._pos)
        if idx == -1:
            return ""
        content = self._source[self._pos : idx]
        self._pos = idx
        return content

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match pattern anchored at the position without advancing.

        A match that would only start later in the source does not count.
        """
        if self._pos >= self._source_len:
            return None
        return pattern.match(self._source, self._pos)
