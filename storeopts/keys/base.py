"""Key schema plumbing shared by every provider key enum."""

from __future__ import annotations

import string
from enum import Enum
from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

from ..capabilities import Provider
from ..errors import SchemaDefinitionError, UnknownConfigurationKey

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

K = TypeVar("K", bound=Enum)


def ascii_lower(text: str) -> str:
    """Lowercase ``A-Z`` only; every other character is left untouched."""
    return text.translate(_ASCII_LOWER)


class KeySchema(Generic[K]):
    """Closed set of configuration keys recognized by one provider.

    The lookup table maps each canonical lowercase name to its enum member.
    It is checked when the schema is built: names must be non-empty,
    already lowercase and unique.
    """

    def __init__(self, provider: Provider, key_type: type[K]) -> None:
        table: dict[str, K] = {}
        for variant, member in key_type.__members__.items():
            name = member.value
            if not isinstance(name, str) or not name:
                raise SchemaDefinitionError(
                    f"{key_type.__name__}.{variant} must have a non-empty string name"
                )
            if ascii_lower(name) != name:
                raise SchemaDefinitionError(
                    f"{key_type.__name__}.{variant} name '{name}' is not lowercase"
                )
            if name in table:
                raise SchemaDefinitionError(
                    f"{key_type.__name__} maps '{name}' to both "
                    f"{table[name].name} and {variant}"
                )
            table[name] = member
        self.provider = provider
        self.key_type = key_type
        self._table: Mapping[str, K] = MappingProxyType(table)

    def __repr__(self) -> str:
        return f"KeySchema({self.provider.value}, {self.key_type.__name__})"

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and ascii_lower(name) in self._table

    def __len__(self) -> int:
        return len(self._table)

    def parse(self, name: str) -> K:
        """Return the key whose canonical name matches ``name`` ignoring case."""
        normalized = ascii_lower(name)
        try:
            return self._table[normalized]
        except KeyError:
            raise UnknownConfigurationKey(normalized, self.provider.value) from None

    def names(self) -> list[str]:
        return list(self._table)
