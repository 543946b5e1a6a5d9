"""Markup codec: inline markup ⇄ (plain text, entities).

Parsing is a single forward pass over a Cursor. At each position an ordered
tuple of rules is tried (bold, italic, strike, code/pre, link); the first rule
that produces an entity wins. A delimiter rule that fails has already consumed
its opener, and the remaining rules are tried at the moved position. When no
rule produces an entity the current code unit is copied to the output as text.

Unparsing turns every entity into a pair of insertion edits and splices them
into the text from right to left (see entitas.edits).

All offsets are UTF-16 code units. Both directions work on surrogate-expanded
strings internally and return regular Python strings.

Thread Safety:
MarkupCodec holds only an immutable config. Every call builds its own Cursor,
output buffer and entity list, so one instance can serve many threads.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TypeAlias

from entitas.config import CodecConfig, codec_config_context, get_codec_config
from entitas.cursor import Cursor
from entitas.edits import apply_edits, collect_edits
from entitas.entities import (
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
from entitas.stringbuilder import StringBuilder
from entitas.text import add_surrogate, del_surrogate
from entitas.utils.logger import get_logger

logger = get_logger(__name__)

# Shortest non-empty label, then shortest target on one line
LINK_RE = re.compile(r"\[([\s\S]+?)\]\((.+?)\)")
MENTION_URL_RE = re.compile(re.escape(MENTION_URL_PREFIX) + r"([0-9]+)")

Rule: TypeAlias = Callable[[Cursor, StringBuilder, CodecConfig], Entity | None]
EntityInput: TypeAlias = Entity | Iterable[Entity] | None


# =============================================================================
# Parse rules
# =============================================================================


def _parse_delimited(
    entity_type: type[Entity],
    delimiter: str,
    cursor: Cursor,
    out: StringBuilder,
    config: CodecConfig,
) -> Entity | None:
    """Parse delimiter-content-delimiter at the cursor.

    The opener is consumed before the closer is looked for. On failure the
    cursor stays just past the opener.
    """
    offset = len(out)
    cursor.consume(len(delimiter))

    content = cursor.scan_to(delimiter)
    if not content:
        logger.debug("Unclosed or empty %r at offset %d kept as text", delimiter, offset)
        if not config.drop_unclosed_delimiters:
            out.append(delimiter)
        return None

    cursor.consume(len(delimiter))
    out.append(content)
    return entity_type(offset, len(content))


def _delimited_rule(entity_type: type[Entity], delimiter: str) -> Rule:
    """Rule that fires when the cursor sits on delimiter."""
    width = len(delimiter)

    def rule(cursor: Cursor, out: StringBuilder, config: CodecConfig) -> Entity | None:
        if cursor.peek(width) != delimiter:
            return None
        return _parse_delimited(entity_type, delimiter, cursor, out, config)

    rule.__name__ = f"parse_{entity_type.kind}"
    return rule


def _parse_code(cursor: Cursor, out: StringBuilder, config: CodecConfig) -> Entity | None:
    """Pre when three backticks open, otherwise Code for a single one.

    Only one of the two is attempted per position.
    """
    if cursor.peek(3) == "```":
        return _parse_delimited(Pre, "```", cursor, out, config)
    if cursor.peek(1) == "`":
        return _parse_delimited(Code, "`", cursor, out, config)
    return None


def _parse_link(cursor: Cursor, out: StringBuilder, config: CodecConfig) -> Entity | None:
    """Parse [label](target) anchored at the cursor."""
    match = cursor.match(LINK_RE)
    if match is None:
        return None

    label, target = match.group(1), match.group(2)
    offset = len(out)
    out.append(label)
    cursor.consume(match.end() - match.start())

    if config.mention_links_enabled:
        mention = MENTION_URL_RE.fullmatch(target)
        if mention is not None:
            return MentionLink(offset, len(label), user_id=int(mention.group(1)))
    return TextLink(offset, len(label), url=del_surrogate(target))


# Priority order. The first character of each opener differs, so at most one
# family can match at any position.
PARSE_RULES: tuple[Rule, ...] = (
    _delimited_rule(Bold, "**"),
    _delimited_rule(Italic, "__"),
    _delimited_rule(Strike, "~~"),
    _parse_code,
    _parse_link,
)


# =============================================================================
# Codec
# =============================================================================


class MarkupCodec:
    """Bidirectional converter between markup and (text, entities).

    Usage:
        >>> codec = MarkupCodec()
        >>> codec.parse("**a** __b__")
        ('a b', [Bold(offset=0, length=1), Italic(offset=2, length=1)])
        >>> codec.unparse("a b", [Bold(0, 1), Italic(2, 1)])
        '**a** __b__'

        >>> # Pin a configuration
        >>> codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
        >>> codec.parse("[Ann](tg://user?id=42)")
        ('Ann', [MentionLink(offset=0, length=3, user_id=42)])

    Thread Safety:
        Without an explicit config, each call reads the active config from
        the ContextVar. With one, the config is set for the duration of the
        call and the previous one restored afterwards.

    """

    __slots__ = ("_config",)

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize codec.

        Args:
            config: Configuration to use for every call. When None, the
                config active in the calling context is used.
        """
        self._config = config

    @property
    def config(self) -> CodecConfig:
        """Configuration in effect for the next call."""
        return self._config if self._config is not None else get_codec_config()

    def parse(self, markup: str) -> tuple[str, list[Entity]]:
        """Strip markup, returning plain text and the entities it described.

        Never raises. Malformed markup degrades to plain text.

        Args:
            markup: Text with inline markup

        Returns:
            (plain text, entities ordered by offset)
        """
        if self._config is None:
            return self._parse(markup, get_codec_config())

        with codec_config_context(self._config):
            return self._parse(markup, self._config)

    def parse_many(self, sources: Iterable[str]) -> list[tuple[str, list[Entity]]]:
        """Parse several markup strings with one config lookup.

        Example:
            >>> MarkupCodec().parse_many(["**a**", "b"])
            [('a', [Bold(offset=0, length=1)]), ('b', [])]
        """
        if self._config is None:
            config = get_codec_config()
            return [self._parse(source, config) for source in sources]

        with codec_config_context(self._config):
            return [self._parse(source, self._config) for source in sources]

    def unparse(self, text: str, entities: EntityInput) -> str:
        """Insert markup for entities back into plain text.

        Args:
            text: Plain text
            entities: One entity, an iterable of entities, or None

        Returns:
            Markup text. Identical to text when there are no entities.

        Raises:
            InvalidEntityError: If validation is enabled and an entity does
                not fit the text or is of an unsupported type.
        """
        if self._config is None:
            return self._unparse(text, entities, get_codec_config())

        with codec_config_context(self._config):
            return self._unparse(text, entities, self._config)

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _parse(markup: str, config: CodecConfig) -> tuple[str, list[Entity]]:
        if not markup:
            return "", []

        cursor = Cursor(add_surrogate(markup))
        out = StringBuilder()
        entities: list[Entity] = []

        while not cursor.at_end():
            for rule in PARSE_RULES:
                entity = rule(cursor, out, config)
                if entity is not None:
                    entities.append(entity)
                    break
            else:
                # A failed opener may have left the cursor at end of input
                if not cursor.at_end():
                    out.append(cursor.current())
                    cursor.consume(1)

        return del_surrogate(out.build()), entities

    @staticmethod
    def _unparse(text: str, entities: EntityInput, config: CodecConfig) -> str:
        if not text or not entities:
            return text
        if isinstance(entities, Entity):
            entities = (entities,)

        units = add_surrogate(text)
        edits = collect_edits(
            entities,
            text_length=len(units) if config.validate_entities else None,
        )
        if not edits:
            return text
        return del_surrogate(apply_edits(units, edits))


_default_codec = MarkupCodec()


def parse(markup: str) -> tuple[str, list[Entity]]:
    """Parse markup with the active config. See MarkupCodec.parse."""
    return _default_codec.parse(markup)


def unparse(text: str, entities: EntityInput) -> str:
    """Unparse with the active config. See MarkupCodec.unparse."""
    return _default_codec.unparse(text, entities)
