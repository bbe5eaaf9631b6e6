"""Pydantic field types for identifiers of one entity type.

Usage::

    ids = build({"user": "u", "post": "p"})
    UserId = id_field(ids, "user")

    class Post(BaseModel):
        author: UserId
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Annotated, Any

from pydantic import StringConstraints

from .models import SEPARATOR
from .registry import IdRegistry


def id_pattern(registry: IdRegistry[Any], entity_type: Hashable) -> str:
    """Anchored regex matching exactly the valid identifiers of one type."""
    prefix = registry.get_prefix(entity_type)
    length = registry.get_length(entity_type)
    return rf"^{re.escape(prefix)}{SEPARATOR}[A-Za-z0-9]{{{length}}}$"


def id_field(registry: IdRegistry[Any], entity_type: Hashable) -> Any:
    """Return ``Annotated[str, ...]`` accepting only ``entity_type`` IDs.

    Raises:
        UnknownType: ``entity_type`` is not defined in ``registry``.
    """
    return Annotated[str, StringConstraints(pattern=id_pattern(registry, entity_type))]
