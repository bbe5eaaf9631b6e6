"""Definition and configuration models for an identifier registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from humanid.infra.generator import generate_id

SEPARATOR = "_"  # reserved, never allowed inside a prefix
DEFAULT_LENGTH = 12  # ~71 bits of entropy over [A-Za-z0-9]


class TypeSpec(BaseModel):
    """Structured definition of one entity type.

    ``length`` may be left out, in which case the registry falls back to
    ``IdConfig.default_length``.  Values are checked by the registry, not
    here, so that every definition style fails with the same errors.
    """

    model_config = ConfigDict(frozen=True)

    prefix: Any = Field(description="Prefix placed before the separator")
    length: Any = Field(
        default=None, description="Length of the unique part"
    )


class IdConfig(BaseModel):
    """Global settings shared by every type of a registry."""

    model_config = ConfigDict(frozen=True)

    generator: Callable[[int], str] = Field(
        default=generate_id,
        description="Returns a unique alphanumeric string of the requested length",
    )
    default_length: Any = Field(
        default=DEFAULT_LENGTH,
        description="Unique-part length for types defined by a bare prefix",
    )
