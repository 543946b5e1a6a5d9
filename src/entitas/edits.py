"""Insertion edits used to rebuild markup from (text, entities).

Each entity contributes two edits: an opening literal at its offset and a
closing literal at its end. Edits are applied from the highest position to
the lowest, so positions measured against the original text stay valid while
the text grows behind them.

Thread Safety:
All functions are pure. Edit tuples are immutable.

"""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter
from typing import NamedTuple

from entitas.entities import (
    DELIMITERS,
    MENTION_URL_PREFIX,
    Bold,
    Code,
    Entity,
    Italic,
    MentionLink,
    Pre,
    Strike,
    TextLink,
)
from entitas.errors import InvalidEntityError
from entitas.utils.logger import get_logger

logger = get_logger(__name__)

_LOW_SURROGATE_FIRST = "\udc00"
_LOW_SURROGATE_LAST = "\udfff"


class Edit(NamedTuple):
    """Literal to splice into the text at a code-unit position.

    Attributes:
        position: Insertion point in UTF-16 code units of the plain text.
        literal: Markup to insert.

    """

    position: int
    literal: str


def entity_edits(entity: Entity) -> tuple[Edit, Edit] | None:
    """Build the opening and closing edits for one entity.

    Returns:
        (opening, closing) edits, or None for unsupported entity types.
    """
    match entity:
        case Bold() | Italic() | Strike() | Code() | Pre():
            delimiter = DELIMITERS[type(entity)]
            return Edit(entity.offset, delimiter), Edit(entity.end, delimiter)
        case TextLink(url=url):
            return Edit(entity.offset, "["), Edit(entity.end, f"]({url})")
        case MentionLink(user_id=user_id):
            return (
                Edit(entity.offset, "["),
                Edit(entity.end, f"]({MENTION_URL_PREFIX}{user_id})"),
            )
        case _:
            return None


def collect_edits(
    entities: Iterable[Entity],
    *,
    text_length: int | None = None,
) -> list[Edit]:
    """Collect edits for all entities, sorted ascending by position.

    The sort is stable: edits at the same position keep the order of the
    entities that produced them, opening before closing.

    Args:
        entities: Entities to convert
        text_length: Length of the plain text in code units. When given,
            every entity is validated against it and unsupported entity
            types raise instead of being skipped.

    Returns:
        Edits sorted by position

    Raises:
        InvalidEntityError: If validating and an entity is out of bounds
            or unsupported.
    """
    validate = text_length is not None
    edits: list[Edit] = []
    for entity in entities:
        if validate:
            _check_bounds(entity, text_length)
        pair = entity_edits(entity)
        if pair is None:
            if validate:
                raise InvalidEntityError(entity, "unsupported entity type")
            logger.debug("Skipping unsupported entity %r", entity)
            continue
        edits.extend(pair)
    edits.sort(key=attrgetter("position"))
    return edits


def apply_edits(text: str, edits: list[Edit]) -> str:
    """Splice edits into surrogate-expanded text, highest position first.

    Consumes the edit list. A position that points at a low surrogate would
    split a surrogate pair, so it is moved forward until it does not.

    Args:
        text: Surrogate-expanded plain text
        edits: Edits sorted ascending by position

    Returns:
        Surrogate-expanded markup
    """
    while edits:
        at, literal = edits.pop()
        requested = at
        while at < len(text) and _LOW_SURROGATE_FIRST <= text[at] <= _LOW_SURROGATE_LAST:
            at += 1
        if at != requested:
            logger.debug(
                "Moved edit %r from %d to %d to keep a surrogate pair", literal, requested, at
            )
        text = text[:at] + literal + text[at:]
    return text


def _check_bounds(entity: Entity, text_length: int) -> None:
    offset = getattr(entity, "offset", None)
    length = getattr(entity, "length", None)
    if not isinstance(offset, int) or not isinstance(length, int):
        raise InvalidEntityError(entity, "offset and length must be integers")
    if offset < 0:
        raise InvalidEntityError(entity, f"negative offset {offset}")
    if length < 0:
        raise InvalidEntityError(entity, f"negative length {length}")
    if offset + length > text_length:
        raise InvalidEntityError(
            entity,
            f"span {offset}..{offset + length} exceeds text length {text_length}",
        )
