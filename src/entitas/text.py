"""UTF-16 code unit helpers.

Python strings index by code point, while entity offsets count UTF-16 code
units: every character outside the Basic Multilingual Plane (most emoji)
occupies two units. The codec works on a "surrogate-expanded" string in which
each such character is replaced by its two surrogate code points, so that one
str index equals one UTF-16 code unit.

Example:
    >>> add_surrogate("a😀")
    'a\\ud83d\\ude00'
    >>> utf16_len("a😀")
    3
"""

from __future__ import annotations

import struct

from entitas.entities import Entity


def add_surrogate(text: str) -> str:
    """Expand astral characters into UTF-16 surrogate pairs.

    Args:
        text: Regular Python string

    Returns:
        String whose length equals its UTF-16 length
    """
    return "".join(
        "".join(chr(unit) for unit in struct.unpack("<HH", char.encode("utf-16le")))
        if 0x10000 <= ord(char) <= 0x10FFFF
        else char
        for char in text
    )


def del_surrogate(text: str) -> str:
    """Join surrogate pairs back into single characters.

    Lone surrogates are kept as they are.
    """
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return len(text) + sum(1 for char in text if ord(char) > 0xFFFF)


def utf16_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 offset into a Python string index.

    An offset that falls between the two halves of a surrogate pair is
    rounded up to the index after that character. Offsets past the end
    clamp to len(text).

    Args:
        text: Regular Python string
        offset: Position in UTF-16 code units

    Returns:
        Index into text
    """
    units = 0
    for index, char in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


def entity_text(text: str, entity: Entity) -> str:
    """Return the part of the plain text covered by an entity.

    Example:
        >>> from entitas.entities import Bold
        >>> entity_text("hi 😀 there", Bold(3, 2))
        '😀'
    """
    return text[utf16_to_index(text, entity.offset) : utf16_to_index(text, entity.end)]
