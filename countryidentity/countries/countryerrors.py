"""Country lookup outcomes and errors.

Lookups never raise: a miss is returned as a falsy ``NotFound`` value carrying
the caller's input and the key space that was searched. Exceptions are kept
for reference-data defects found while building the registry, and for the
strict helpers (``get_country``, ``deserialize_country``).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class IndexSpace(str, Enum):
    """Key spaces the registry can be searched by."""

    NUMERIC_VALUE = "numeric_value"
    NUMERIC_CODE = "numeric_code"
    ALPHA2 = "alpha2"
    ALPHA3 = "alpha3"
    NAME = "name"
    IDENTIFIER = "identifier"
    ALIAS = "alias"
    ANY = "any"


@dataclass(frozen=True)
class NotFound:
    """Result of a lookup that matched nothing.

    Always falsy, so callers can write ``if not result: ...``.

    Examples:
        >>> miss = NotFound("zz", IndexSpace.ALPHA2)
        >>> bool(miss)
        False
        >>> miss.message
        "No country matches 'zz' in the alpha2 index"
    """

    input: Any
    index_space: IndexSpace

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"No country matches {self.input!r} in the {self.index_space.value} index"

    def __str__(self) -> str:
        return self.message


class ReferenceDataError(ValueError):
    """The bundled country table is inconsistent."""


class DuplicateKeyError(ReferenceDataError):
    """Two records claim the same key in a unique index."""

    def __init__(self, index_space: IndexSpace, key: Any, first: Any, second: Any):
        self.index_space = index_space
        self.key = key
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate {index_space.value} key {key!r}: "
            f"{first.canonical_name!r} and {second.canonical_name!r}"
        )


class CountryDecodeError(ValueError):
    """A wire value (alpha-2 code) does not name a known country."""

    def __init__(self, not_found: NotFound):
        self.not_found = not_found
        super().__init__(f"Cannot decode country: {not_found.message}")


class CountryNotFoundError(LookupError):
    """Raised by the strict lookup helper instead of returning NotFound."""

    def __init__(self, not_found: NotFound):
        self.not_found = not_found
        super().__init__(not_found.message)


__all__ = [
    "IndexSpace",
    "NotFound",
    "ReferenceDataError",
    "DuplicateKeyError",
    "CountryDecodeError",
    "CountryNotFoundError",
]
