"""
Entitas — inline markup ⇄ plain text plus style entities

Converts lightweight markup (**bold**, __italic__, ~~strike~~, `code`,
```pre```, [label](url)) into plain text and a list of style entities whose
offsets and lengths count UTF-16 code units, the way messaging protocols
carry rich text. Converts back the other way too.

Quick Start:
    >>> from entitas import parse, unparse
    >>> text, entities = parse("Hello **World**")
    >>> text
    'Hello World'
    >>> entities
    [Bold(offset=6, length=5)]
    >>> unparse(text, entities)
    'Hello **World**'

    >>> # Or pin a configuration on a codec
    >>> from entitas import CodecConfig, MarkupCodec
    >>> codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
    >>> codec.parse("hi [Ann](tg://user?id=42)")
    ('hi Ann', [MentionLink(offset=3, length=3, user_id=42)])

Installation:
    pip install entitas              # zero runtime deps
"""

from entitas.codec import LINK_RE, PARSE_RULES, MarkupCodec, parse, unparse
from entitas.config import (
    CodecConfig,
    codec_config_context,
    get_codec_config,
    reset_codec_config,
    set_codec_config,
)
from entitas.cursor import Cursor
from entitas.edits import Edit, apply_edits, collect_edits, entity_edits
from entitas.entities import (
    DELIMITERS,
    Bold,
    Code,
    Entity,
    EntityKind,
    Italic,
    MentionLink,
    Pre,
    Strike,
    TextLink,
)
from entitas.errors import EntitasError, InvalidEntityError
from entitas.text import add_surrogate, del_surrogate, entity_text, utf16_len, utf16_to_index

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "unparse",
    "MarkupCodec",
    "PARSE_RULES",
    "LINK_RE",
    # Entities
    "Entity",
    "EntityKind",
    "Bold",
    "Italic",
    "Strike",
    "Code",
    "Pre",
    "TextLink",
    "MentionLink",
    "DELIMITERS",
    # Scanning
    "Cursor",
    # Edits
    "Edit",
    "entity_edits",
    "collect_edits",
    "apply_edits",
    # UTF-16 helpers
    "add_surrogate",
    "del_surrogate",
    "utf16_len",
    "utf16_to_index",
    "entity_text",
    # Configuration (ContextVar-based)
    "CodecConfig",
    "get_codec_config",
    "set_codec_config",
    "reset_codec_config",
    "codec_config_context",
    # Errors
    "EntitasError",
    "InvalidEntityError",
]
