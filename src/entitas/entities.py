"""Typed style entities for Entitas.

An entity marks a span of plain text as styled. Positions are counted in
UTF-16 code units of the plain text, the unit messaging protocols use to
address message bodies.

All entities are frozen dataclasses with slots for:
- Immutability: safe to share across threads
- Equality by kind and fields: Bold(0, 4) != Italic(0, 4)
- Pattern matching: match statements dispatch on the entity class

Entity Hierarchy:
Entity (base)
├── Bold          **text**
├── Italic        __text__
├── Strike        ~~text~~
├── Code          `text`
├── Pre           ```text```
├── TextLink      [text](url)
└── MentionLink   [text](tg://user?id=N)

"""

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class EntityKind(StrEnum):
    """Kind tag carried by every entity class."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKE = "strike"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    MENTION_LINK = "mention_link"


# =============================================================================
# Base Entity
# =============================================================================


@dataclass(frozen=True, slots=True)
class Entity:
    """Base class for all style entities.

    Attributes:
        offset: Start of the span in UTF-16 code units of the plain text
        length: Length of the span in UTF-16 code units

    """

    kind: ClassVar[EntityKind]

    offset: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end of the span (offset + length)."""
        return self.offset + self.length


# =============================================================================
# Delimited Entities
# =============================================================================


@dataclass(frozen=True, slots=True)
class Bold(Entity):
    """Bold text.

    Markup: **text**

    """

    kind: ClassVar[EntityKind] = EntityKind.BOLD


@dataclass(frozen=True, slots=True)
class Italic(Entity):
    """Italic text.

    Markup: __text__

    """

    kind: ClassVar[EntityKind] = EntityKind.ITALIC


@dataclass(frozen=True, slots=True)
class Strike(Entity):
    """Strikethrough text.

    Markup: ~~text~~

    """

    kind: ClassVar[EntityKind] = EntityKind.STRIKE


@dataclass(frozen=True, slots=True)
class Code(Entity):
    """Inline code.

    Markup: `text`

    """

    kind: ClassVar[EntityKind] = EntityKind.CODE


@dataclass(frozen=True, slots=True)
class Pre(Entity):
    """Preformatted block.

    Markup: ```text```

    """

    kind: ClassVar[EntityKind] = EntityKind.PRE


# =============================================================================
# Link Entities
# =============================================================================


@dataclass(frozen=True, slots=True)
class TextLink(Entity):
    """Text with a hyperlink.

    Markup: [text](url)

    """

    kind: ClassVar[EntityKind] = EntityKind.TEXT_LINK

    url: str


@dataclass(frozen=True, slots=True)
class MentionLink(Entity):
    """Text that mentions a user by id.

    Markup: [text](tg://user?id=N)

    """

    kind: ClassVar[EntityKind] = EntityKind.MENTION_LINK

    user_id: int


# Fixed delimiter per delimited kind. Links have no single delimiter.
DELIMITERS: dict[type[Entity], str] = {
    Bold: "**",
    Italic: "__",
    Strike: "~~",
    Code: "`",
    Pre: "```",
}

MENTION_URL_PREFIX = "tg://user?id="


__all__ = [
    "DELIMITERS",
    "MENTION_URL_PREFIX",
    "Bold",
    "Code",
    "Entity",
    "EntityKind",
    "Italic",
    "MentionLink",
    "Pre",
    "Strike",
    "TextLink",
]
