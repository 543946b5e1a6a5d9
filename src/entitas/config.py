"""ContextVar-based codec configuration for Entitas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per MarkupCodec call, read by the parse rules and the
unparse edit builder in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # In MarkupCodec
    codec = MarkupCodec(CodecConfig(mention_links_enabled=True))
    text, entities = codec.parse("[Ann](tg://user?id=42)")

    # Module-level functions read the active config
    from entitas.config import codec_config_context, CodecConfig

    with codec_config_context(CodecConfig(validate_entities=False)):
        markup = unparse(text, entities)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        drop_unclosed_delimiters: When a delimiter has no closing match (or
            encloses nothing) its opening characters are dropped from the
            plain text. Set False to keep them as literal text instead.
        mention_links_enabled: Parse [label](tg://user?id=N) as a MentionLink
            rather than a TextLink.
        validate_entities: Raise InvalidEntityError from unparse for entities
            that fall outside the text or are of an unsupported type.

    """

    drop_unclosed_delimiters: bool = True
    mention_links_enabled: bool = False
    validate_entities: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CodecConfig":
        """Create CodecConfig from dictionary.

        Only includes keys that are valid CodecConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = CodecConfig.from_dict({
            ...     "mention_links_enabled": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.mention_links_enabled
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CodecConfig = CodecConfig()

_codec_config: ContextVar[CodecConfig] = ContextVar(
    "codec_config",
    default=_DEFAULT_CONFIG,
)


def get_codec_config() -> CodecConfig:
    """Get current codec configuration (thread-local)."""
    return _codec_config.get()


def set_codec_config(config: CodecConfig) -> None:
    """Set codec configuration for current context.

    Args:
        config: CodecConfig instance to use for this context.

    """
    _codec_config.set(config)


def reset_codec_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _codec_config.set(_DEFAULT_CONFIG)


@contextmanager
def codec_config_context(config: CodecConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with codec_config_context(CodecConfig(mention_links_enabled=True)):
        ...     text, entities = parse("[Ann](tg://user?id=42)")
        >>> entities
        [MentionLink(offset=0, length=3, user_id=42)]

    """
    previous = _codec_config.get()
    _codec_config.set(config)
    try:
        yield
    finally:
        _codec_config.set(previous)


__all__ = [
    "CodecConfig",
    "codec_config_context",
    "get_codec_config",
    "reset_codec_config",
    "set_codec_config",
]
