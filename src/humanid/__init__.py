"""Prefixed, human-readable identifiers such as ``user_a1b2c3d4``."""

from humanid.core import (  # noqa: F401
    DuplicatePrefix,
    EmptyDefinitions,
    GeneratorError,
    GeneratorReturnedInvalidCharacters,
    GeneratorReturnedNonString,
    GeneratorReturnedWrongLength,
    HumanIdError,
    IdConfig,
    IdRegistry,
    InvalidLength,
    InvalidPrefix,
    TypeSpec,
    UnknownType,
    build,
    id_field,
)
from humanid.infra.generator import generate_id  # noqa: F401
