"""Exceptions raised by the identifier registry.

Construction errors surface bad type definitions, lookup errors surface
unknown entity types, and generator errors surface an injected generator
that broke its contract.  ``get_type`` and ``is_valid`` never raise.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any


class HumanIdError(Exception):
    """Base class for every error raised by ``humanid``."""


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class EmptyDefinitions(HumanIdError, ValueError):
    """Raised when a registry is built from zero type definitions."""

    def __init__(self) -> None:
        super().__init__("Cannot create an ID context with no type definitions.")


class InvalidPrefix(HumanIdError, ValueError):
    """Raised when a prefix is empty, not a string, or holds the separator."""

    def __init__(self, entity_type: Hashable, prefix: Any) -> None:
        super().__init__(
            f'Invalid prefix for type "{entity_type}": Prefixes must be '
            "non-empty strings and cannot contain underscores."
        )
        self.entity_type = entity_type
        self.prefix = prefix


class InvalidLength(HumanIdError, ValueError):
    """Raised when a resolved length is not a positive integer."""

    def __init__(self, entity_type: Hashable, length: Any) -> None:
        super().__init__(
            f'Invalid length for type "{entity_type}": Length must be a '
            f"positive integer, got {length!r}."
        )
        self.entity_type = entity_type
        self.length = length


class DuplicatePrefix(HumanIdError, ValueError):
    """Raised when two entity types claim the same prefix."""

    def __init__(self, prefix: str) -> None:
        super().__init__(
            f'Duplicate prefix "{prefix}" detected. Prefixes must be unique.'
        )
        self.prefix = prefix


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class UnknownType(HumanIdError, LookupError):
    """Raised when an entity type was not part of the registry definitions."""

    def __init__(self, message: str, *, entity_type: Hashable) -> None:
        super().__init__(message)
        self.entity_type = entity_type


# ---------------------------------------------------------------------------
# Generator contract
# ---------------------------------------------------------------------------


class GeneratorError(HumanIdError):
    """Base class for output of an injected generator failing validation."""


class GeneratorReturnedNonString(GeneratorError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__(
            "The provided 'generator' function must return a string, but it "
            f"returned a value of type {type(value).__name__}."
        )
        self.value = value


class GeneratorReturnedWrongLength(GeneratorError, ValueError):
    def __init__(self, actual: int, expected: int) -> None:
        super().__init__(
            "The provided 'generator' function returned a string with length "
            f"{actual} but expected length {expected}."
        )
        self.actual = actual
        self.expected = expected


class GeneratorReturnedInvalidCharacters(GeneratorError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(
            "The provided 'generator' function returned a string with invalid "
            "characters. Only alphanumeric characters (a-z, A-Z, 0-9) are allowed."
        )
        self.value = value
