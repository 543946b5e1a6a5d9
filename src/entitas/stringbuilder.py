"""StringBuilder for O(n) plain-text accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Also keeps a running length so the parser
can read the current end of the output as the offset of the next entity.

Thread Safety:
StringBuilder instances are local to each parse() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with a running length.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("bo")
            >>> sb.append("ld")
            >>> len(sb)
            4
            >>> sb.build()
            'bold'

    Thread Safety:
        Instance is local to each parse() call.
        No shared mutable state.

    """

    __slots__ = ("_length", "_parts")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return total length of the accumulated text."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any text has been appended."""
        return self._length > 0
