"""Identifier registry: create, validate, and parse prefixed IDs.

A registry is built once from a mapping of entity type to definition::

    ids = build(
        {"user": "u", "post": TypeSpec(prefix="p", length=12)},
        IdConfig(default_length=8),
    )
    ids.create("user")            # "u_3kP9aZ1q"
    ids.get_type("p_aB3dE5gH7jK9")  # "post"

Identifiers have the form ``{prefix}_{unique part}`` where the unique
part is ASCII alphanumeric with a fixed length per type.  All tables are
derived during construction and never change afterwards, so a registry
can be shared freely.

Entity types can be any hashable value (strings, enum members,
``object()`` sentinels); they are only ever used as dict keys and
compared with ``==``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Hashable, Mapping
from typing import Any, Generic, TypeVar, Union

from .errors import (
    DuplicatePrefix,
    EmptyDefinitions,
    GeneratorReturnedInvalidCharacters,
    GeneratorReturnedNonString,
    GeneratorReturnedWrongLength,
    InvalidLength,
    InvalidPrefix,
    UnknownType,
)
from .models import SEPARATOR, IdConfig, TypeSpec

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

Definition = Union[str, TypeSpec, Mapping[str, Any], tuple[str, int]]

_UNIQUE_CHARS = "[A-Za-z0-9]"
_UNIQUE_PART_RE = re.compile(f"{_UNIQUE_CHARS}+")


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; True must not pass as length 1
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _resolve(entity_type: Hashable, spec: Any, default_length: int) -> tuple[Any, Any]:
    """Return the ``(prefix, length)`` pair a definition stands for."""
    if isinstance(spec, str):
        return spec, default_length

    if isinstance(spec, TypeSpec):
        prefix, length = spec.prefix, spec.length
    elif isinstance(spec, Mapping):
        prefix, length = spec.get("prefix"), spec.get("length")
    elif isinstance(spec, tuple) and len(spec) == 2:
        prefix, length = spec
    else:
        raise InvalidPrefix(entity_type, spec)

    if length is None:
        length = default_length
    return prefix, length


class IdRegistry(Generic[T]):
    """Immutable lookup tables between entity types, prefixes and lengths."""

    def __init__(
        self,
        definitions: Mapping[T, Definition],
        config: IdConfig | None = None,
    ) -> None:
        if config is None:
            config = IdConfig()

        if len(definitions) == 0:
            raise EmptyDefinitions()

        self._generator = config.generator
        self._type_to_prefix: dict[T, str] = {}
        self._type_to_length: dict[T, int] = {}
        self._prefix_to_type: dict[str, T] = {}

        for entity_type, spec in definitions.items():
            prefix, length = _resolve(entity_type, spec, config.default_length)

            if not isinstance(prefix, str) or not prefix or SEPARATOR in prefix:
                raise InvalidPrefix(entity_type, prefix)

            if not _is_positive_int(length):
                raise InvalidLength(entity_type, length)

            if prefix in self._prefix_to_type:
                raise DuplicatePrefix(prefix)

            self._type_to_prefix[entity_type] = prefix
            self._type_to_length[entity_type] = length
            self._prefix_to_type[prefix] = entity_type

        lengths = self._type_to_length.values()
        self._min_length = min(lengths)
        self._max_length = max(lengths)

        # One arm per (prefix, length) pair, so a match is always exact.
        arms = "|".join(
            f"{re.escape(prefix)}{SEPARATOR}{_UNIQUE_CHARS}{{{self._type_to_length[t]}}}"
            for t, prefix in self._type_to_prefix.items()
        )
        self._find_all_re = re.compile(rf"(?<!\w)(?:{arms})(?!\w)")
        self._validation_re = re.compile(f"(?:{arms})")

        logger.debug(
            "Built ID registry with %d type(s), unique-part length %d..%d",
            len(self._type_to_prefix),
            self._min_length,
            self._max_length,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def entity_types(self) -> tuple[T, ...]:
        """Entity types in definition order."""
        return tuple(self._type_to_prefix)

    @property
    def find_all_pattern(self) -> re.Pattern[str]:
        """Pattern used by ``find_all`` to locate identifiers in text."""
        return self._find_all_re

    @property
    def validation_pattern(self) -> re.Pattern[str]:
        """Pattern whose ``fullmatch`` agrees with ``is_valid``."""
        return self._validation_re

    def __contains__(self, entity_type: object) -> bool:
        try:
            return entity_type in self._type_to_prefix
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._type_to_prefix)

    def __repr__(self) -> str:
        types = ", ".join(
            f"{t!r}: {p!r}/{self._type_to_length[t]}"
            for t, p in self._type_to_prefix.items()
        )
        return f"{type(self).__name__}({{{types}}})"

    def _lookup(self, table: dict[T, Any], entity_type: T, message: str) -> Any:
        try:
            return table[entity_type]
        except (KeyError, TypeError):
            raise UnknownType(message, entity_type=entity_type) from None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create(self, entity_type: T) -> str:
        """Create a fresh identifier for ``entity_type``.

        Raises:
            UnknownType: the type was not defined.
            GeneratorError: the generator returned something that is not
                an alphanumeric string of the requested length.
        """
        prefix = self._lookup(
            self._type_to_prefix, entity_type, f"Unknown type: {entity_type}"
        )
        length = self._type_to_length[entity_type]
        unique_part = self._generator(length)

        if not isinstance(unique_part, str):
            raise GeneratorReturnedNonString(unique_part)

        if len(unique_part) != length:
            raise GeneratorReturnedWrongLength(len(unique_part), length)

        if not _UNIQUE_PART_RE.fullmatch(unique_part):
            raise GeneratorReturnedInvalidCharacters(unique_part)

        return f"{prefix}{SEPARATOR}{unique_part}"

    def get_type(self, identifier: str | None) -> T | None:
        """Return the entity type named by the prefix of ``identifier``.

        Only the prefix is inspected; use ``is_valid`` to check the rest.
        """
        if not isinstance(identifier, str) or not identifier:
            return None
        prefix = identifier.partition(SEPARATOR)[0]
        return self._prefix_to_type.get(prefix)

    def get_prefix(self, entity_type: T) -> str:
        return self._lookup(
            self._type_to_prefix,
            entity_type,
            f"Unknown type provided to get_prefix: {entity_type}",
        )

    def get_length(self, entity_type: T) -> int:
        return self._lookup(
            self._type_to_length,
            entity_type,
            f"Unknown type provided to get_length: {entity_type}",
        )

    def is_valid(self, identifier: str | None) -> bool:
        """Strictly check prefix, unique-part length and character set."""
        if not isinstance(identifier, str) or SEPARATOR not in identifier:
            return False

        prefix, _, unique_part = identifier.partition(SEPARATOR)
        if prefix not in self._prefix_to_type:
            return False

        entity_type = self._prefix_to_type[prefix]
        if len(unique_part) != self._type_to_length[entity_type]:
            return False

        return _UNIQUE_PART_RE.fullmatch(unique_part) is not None

    def is_type(self, entity_type: T) -> Callable[[str | None], bool]:
        """Return a predicate matching identifiers of ``entity_type``."""

        def predicate(identifier: str | None) -> bool:
            found = self.get_type(identifier)
            return found is not None and found == entity_type

        return predicate

    def find_all(self, text: str) -> list[str]:
        """Return every identifier in ``text``, left to right.

        Repeated identifiers are kept.  Tokens glued to surrounding word
        characters are ignored.
        """
        return [
            match.group(0)
            for match in self._find_all_re.finditer(text)
            if self.is_valid(match.group(0))
        ]


def build(
    definitions: Mapping[T, Definition],
    config: IdConfig | None = None,
) -> IdRegistry[T]:
    """Build an ``IdRegistry`` from type definitions.

    Args:
        definitions: Entity type -> bare prefix, ``TypeSpec``, mapping with
            ``prefix``/``length`` keys, or ``(prefix, length)`` tuple.
        config: Generator and default length; ``IdConfig()`` when omitted.

    Raises:
        EmptyDefinitions, InvalidPrefix, InvalidLength, DuplicatePrefix
    """
    return IdRegistry(definitions, config)
