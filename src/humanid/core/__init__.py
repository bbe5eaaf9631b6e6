"""Identifier registry core.

``build`` validates type definitions once and returns an immutable
``IdRegistry`` exposing ``create``, ``get_type``, ``get_prefix``,
``is_valid``, ``is_type`` and ``find_all``.
"""

from .errors import (
    DuplicatePrefix,
    EmptyDefinitions,
    GeneratorError,
    GeneratorReturnedInvalidCharacters,
    GeneratorReturnedNonString,
    GeneratorReturnedWrongLength,
    HumanIdError,
    InvalidLength,
    InvalidPrefix,
    UnknownType,
)
from .fields import id_field, id_pattern
from .models import DEFAULT_LENGTH, SEPARATOR, IdConfig, TypeSpec
from .registry import IdRegistry, build

__all__ = [
    "DEFAULT_LENGTH",
    "DuplicatePrefix",
    "EmptyDefinitions",
    "GeneratorError",
    "GeneratorReturnedInvalidCharacters",
    "GeneratorReturnedNonString",
    "GeneratorReturnedWrongLength",
    "HumanIdError",
    "IdConfig",
    "IdRegistry",
    "InvalidLength",
    "InvalidPrefix",
    "SEPARATOR",
    "TypeSpec",
    "UnknownType",
    "build",
    "id_field",
    "id_pattern",
]
