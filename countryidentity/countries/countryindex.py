"""
Country Index Construction
--------------------------

Folds country records into parallel read-only maps:

  numeric_code  "004"                        -> Afghanistan
  alpha2        "af"                         -> Afghanistan
  alpha3        "afg"                        -> Afghanistan
  name          "afghanistan"                -> Afghanistan
  alias         "holland"                    -> The Netherlands
  identifier    "aland_islands"              -> Aland Islands
  unified       all of the above, plus the numeric value 4 as an int key

Numeric code, alpha-2, alpha-3, name and identifier are unique indices: a
repeated key is a defect in the reference data and raises DuplicateKeyError.
Aliases are first-registered-wins. In the unified map a key claimed by an
earlier key space is never overwritten by a later one, in the order listed
above.

The bundled registry is built on the first call to load_registry() and shared
for the life of the process.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple
import logging
import threading

from countryidentity.countries.countryaliases import AliasCatalog, attach_aliases
from countryidentity.countries.countrydata import (
    COUNTRY_ALIASES,
    COUNTRY_ROWS,
    RENAMED_ALIASES,
)
from countryidentity.countries.countryerrors import DuplicateKeyError, IndexSpace
from countryidentity.countries.countrynormalize import normalize_key
from countryidentity.countries.countryrecord import CountryRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountryRegistry:
    """Immutable set of indices over one collection of country records."""

    records: Tuple[CountryRecord, ...]
    numeric_code: Mapping[str, CountryRecord]
    alpha2: Mapping[str, CountryRecord]
    alpha3: Mapping[str, CountryRecord]
    name: Mapping[str, CountryRecord]
    identifier: Mapping[str, CountryRecord]
    alias: Mapping[str, CountryRecord]
    unified: Mapping[Hashable, CountryRecord]
    unified_spaces: Mapping[Hashable, IndexSpace]
    aliases: AliasCatalog

    def __len__(self) -> int:
        return len(self.records)

    def index(self, space: IndexSpace) -> Mapping:
        """Map for one key space; IndexSpace.ANY is the unified map.

        Numeric values have no map of their own: they are looked up in the
        numeric_code map after zero-padding.
        """
        if space is IndexSpace.ANY:
            return self.unified
        if space is IndexSpace.NUMERIC_VALUE:
            return self.numeric_code
        return getattr(self, space.value)


# ---- Helpers ----

def _unique_index(
    records: Iterable[CountryRecord],
    space: IndexSpace,
    key_fn: Callable[[CountryRecord], str],
) -> Dict[str, CountryRecord]:
    index: Dict[str, CountryRecord] = {}
    for record in records:
        key = key_fn(record)
        if key in index:
            raise DuplicateKeyError(space, key, index[key], record)
        index[key] = record
    return index


def _claim(
    unified: Dict[Hashable, CountryRecord],
    spaces: Dict[Hashable, IndexSpace],
    key: Hashable,
    record: CountryRecord,
    space: IndexSpace,
) -> None:
    existing = unified.get(key)
    if existing is None:
        unified[key] = record
        spaces[key] = space
    elif existing is not record:
        logger.warning(
            f"Unified key {key!r} ({space.value}) of {record.canonical_name!r} is already "
            f"taken by {existing.canonical_name!r} ({spaces[key].value}); keeping the first"
        )


# ---- Construction ----

def build_registry(records: Iterable[CountryRecord]) -> CountryRegistry:
    """Build every index over ``records``.

    Args:
        records: Country records in registration order

    Returns:
        CountryRegistry whose maps are read-only views

    Raises:
        DuplicateKeyError: If two records share a numeric code, alpha-2,
            alpha-3, canonical name or identifier
    """
    records = list(records)

    numeric_code = _unique_index(records, IndexSpace.NUMERIC_CODE, lambda r: r.numeric_code)
    alpha2 = _unique_index(records, IndexSpace.ALPHA2, lambda r: normalize_key(r.alpha2))
    alpha3 = _unique_index(records, IndexSpace.ALPHA3, lambda r: normalize_key(r.alpha3))
    name = _unique_index(records, IndexSpace.NAME, lambda r: r.name_key)
    identifier = _unique_index(records, IndexSpace.IDENTIFIER, lambda r: r.identifier)

    catalog = AliasCatalog(records)
    alias = dict(catalog.items())

    unified: Dict[Hashable, CountryRecord] = {}
    spaces: Dict[Hashable, IndexSpace] = {}
    for space, index in (
        (IndexSpace.NUMERIC_CODE, numeric_code),
        (IndexSpace.ALPHA2, alpha2),
        (IndexSpace.ALPHA3, alpha3),
        (IndexSpace.NAME, name),
        (IndexSpace.ALIAS, alias),
        (IndexSpace.IDENTIFIER, identifier),
    ):
        for key, record in index.items():
            _claim(unified, spaces, key, record, space)
    for record in records:
        _claim(unified, spaces, record.value, record, IndexSpace.NUMERIC_VALUE)

    registry = CountryRegistry(
        records=tuple(sorted(records)),
        numeric_code=MappingProxyType(numeric_code),
        alpha2=MappingProxyType(alpha2),
        alpha3=MappingProxyType(alpha3),
        name=MappingProxyType(name),
        identifier=MappingProxyType(identifier),
        alias=MappingProxyType(alias),
        unified=MappingProxyType(unified),
        unified_spaces=MappingProxyType(spaces),
        aliases=catalog,
    )
    logger.info(
        f"Built country registry: {len(records)} records, {len(alias)} aliases, "
        f"{len(unified)} unified keys"
    )
    return registry


def bundled_records() -> List[CountryRecord]:
    """Records for the reference data shipped with the package."""
    return attach_aliases(COUNTRY_ROWS, COUNTRY_ALIASES, RENAMED_ALIASES)


_REGISTRY: Optional[CountryRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def load_registry() -> CountryRegistry:
    """Return the process-wide registry, building it on first use.

    The build runs exactly once even when several threads race on the first
    call; afterwards no lock is taken.

    Examples:
        >>> registry = load_registry()
        >>> registry.alpha2["af"].canonical_name
        'Afghanistan'
        >>> load_registry() is registry
        True
    """
    global _REGISTRY
    registry = _REGISTRY
    if registry is None:
        with _REGISTRY_LOCK:
            if _REGISTRY is None:
                _REGISTRY = build_registry(bundled_records())
            registry = _REGISTRY
    return registry


__all__ = [
    "CountryRegistry",
    "build_registry",
    "bundled_records",
    "load_registry",
]
