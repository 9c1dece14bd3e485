"""
Country Records
---------------

Immutable value types for ISO 3166-1 countries:
  - CountryAlias: one alternate name, tagged current or deprecated
  - CountryRecord: numeric code, alpha-2, alpha-3, canonical name, aliases

Equality means "same country": every field of one record is compared with the
same field of the other. Records order by their lowercased canonical name and
hash on the canonical name alone.

Examples:
  >>> us = CountryRecord("the_united_states_of_america", "840", "US", "USA",
  ...                    "The United States Of America",
  ...                    (CountryAlias("America"), CountryAlias("UnitedStates")))
  >>> us.value
  840
  >>> str(us)
  'TheUnitedStatesOfAmerica'
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple
import re

from countryidentity.countries.countrynormalize import compact_name, normalize_key

_NUMERIC_CODE = re.compile(r"^[0-9]{3}$")
_ALPHA2 = re.compile(r"^[A-Z]{2}$")
_ALPHA3 = re.compile(r"^[A-Z]{3}$")
_IDENTIFIER = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class CountryAlias:
    """Alternate name for a country.

    ``deprecated`` marks a former official designation (e.g. "Swaziland").
    It is documentation only: deprecated aliases resolve like current ones.
    """

    text: str
    deprecated: bool = False
    note: Optional[str] = None

    @property
    def key(self) -> str:
        """Compact lookup form of the alias."""
        return compact_name(self.text)

    @property
    def status(self) -> str:
        return "deprecated" if self.deprecated else "current"


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class CountryRecord:
    """Canonical country record.

    Construct records through the registry (``load_registry``) rather than by
    hand; the registry hands out one shared instance per country.
    """

    identifier: str
    numeric_code: str
    alpha2: str
    alpha3: str
    canonical_name: str
    aliases: Tuple[CountryAlias, ...] = ()

    def __post_init__(self):
        if not isinstance(self.numeric_code, str) or not _NUMERIC_CODE.match(self.numeric_code):
            raise ValueError(f"numeric_code must be 3 digits, got {self.numeric_code!r}")
        if not isinstance(self.alpha2, str) or not _ALPHA2.match(self.alpha2):
            raise ValueError(f"alpha2 must be 2 uppercase letters, got {self.alpha2!r}")
        if not isinstance(self.alpha3, str) or not _ALPHA3.match(self.alpha3):
            raise ValueError(f"alpha3 must be 3 uppercase letters, got {self.alpha3!r}")
        if not isinstance(self.identifier, str) or not _IDENTIFIER.match(self.identifier):
            raise ValueError(f"identifier must be snake_case, got {self.identifier!r}")
        if not isinstance(self.canonical_name, str) or not self.canonical_name.strip():
            raise ValueError(f"canonical_name must be a non-empty string ({self.alpha2})")
        # frozen: normalize list input to a tuple
        object.__setattr__(self, "aliases", tuple(self.aliases))

    # ---- Derived fields ----

    @property
    def value(self) -> int:
        """Numeric code as an integer (leading zeros dropped)."""
        return int(self.numeric_code)

    @property
    def display_name(self) -> str:
        """Canonical name without spaces, e.g. 'TheUnitedStatesOfAmerica'."""
        return self.canonical_name.replace(" ", "")

    @property
    def name_key(self) -> str:
        return compact_name(self.canonical_name)

    @property
    def current_aliases(self) -> Tuple[CountryAlias, ...]:
        return tuple(a for a in self.aliases if not a.deprecated)

    @property
    def deprecated_aliases(self) -> Tuple[CountryAlias, ...]:
        return tuple(a for a in self.aliases if a.deprecated)

    # ---- Equality, ordering, hashing ----

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, CountryRecord):
            return NotImplemented
        return (
            self.numeric_code == other.numeric_code
            and self.alpha2 == other.alpha2
            and self.alpha3 == other.alpha3
            and self.canonical_name == other.canonical_name
            and self.identifier == other.identifier
            and self.aliases == other.aliases
        )

    def __lt__(self, other):
        if not isinstance(other, CountryRecord):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self.canonical_name)

    def _sort_key(self) -> Tuple[str, str]:
        return (normalize_key(self.canonical_name), self.canonical_name)

    # ---- Display and wire form ----

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return (
            f"CountryRecord(numeric_code={self.numeric_code!r}, alpha2={self.alpha2!r}, "
            f"alpha3={self.alpha3!r}, canonical_name={self.canonical_name!r}, "
            f"aliases={[a.text for a in self.aliases]!r})"
        )

    def __reduce__(self):
        # Bundled records pickle through the alpha-2 wire form so the registry
        # instance comes back; records from other registries pickle by field.
        from countryidentity.countries.countryapi import resolve_by_alpha2

        if resolve_by_alpha2(self.alpha2) == self:
            return (_unpickle_country, (self.alpha2,))
        return (
            CountryRecord,
            (self.identifier, self.numeric_code, self.alpha2, self.alpha3,
             self.canonical_name, self.aliases),
        )

    def to_dict(self) -> dict:
        """Plain dict view, aliases as a list of texts."""
        return {
            "numeric_code": self.numeric_code,
            "value": self.value,
            "alpha2": self.alpha2,
            "alpha3": self.alpha3,
            "name": self.canonical_name,
            "display_name": self.display_name,
            "identifier": self.identifier,
            "aliases": [a.text for a in self.aliases],
        }


def _unpickle_country(alpha2: str) -> CountryRecord:
    from countryidentity.countries.countryapi import deserialize_country

    return deserialize_country(alpha2)


__all__ = [
    "CountryAlias",
    "CountryRecord",
]
