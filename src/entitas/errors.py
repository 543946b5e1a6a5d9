"""Exception classes for Entitas.

Parsing is total and never raises. Unparsing validates the entities it is
handed and raises InvalidEntityError when one cannot be applied to the text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from entitas.entities import Entity


class EntitasError(Exception):
    """Base exception for all Entitas errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidEntityError(EntitasError):
    """Entity that cannot be applied to the given text.

    Raised by unparse when an entity has a negative offset or length,
    spans past the end of the text, or is not a supported kind.
    """

    def __init__(self, entity: Entity | object, message: str) -> None:
        """Initialize invalid entity error.

        Args:
            entity: The offending entity
            message: Description of what is wrong with it
        """
        self.entity = entity
        self.message = message
        super().__init__(f"{entity!r}: {message}")
