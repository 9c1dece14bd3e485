"""Country entity resolution API.

Exact, case-insensitive lookups of ISO 3166-1 countries by numeric code,
alpha-2, alpha-3, canonical name, snake_case identifier or alias. Every
resolver returns the canonical CountryRecord or a falsy NotFound; none of them
raise on bad input.

If you are unsure which resolver to use, use resolve_any: it accepts any of
the key forms above, plus the numeric code as an int.

Examples:
    >>> resolve_any("USA").alpha2
    'US'
    >>> resolve_any("England").alpha2
    'GB'
    >>> resolve_by_numeric_code("4")
    NotFound(input='4', index_space=<IndexSpace.NUMERIC_CODE: 'numeric_code'>)
    >>> resolve_by_numeric_value(4).alpha2
    'AF'
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional, Tuple, Union
import logging

import pandas as pd

from countryidentity.countries.countryaliases import AliasCatalog
from countryidentity.countries.countryerrors import (
    CountryDecodeError,
    CountryNotFoundError,
    IndexSpace,
    NotFound,
)
from countryidentity.countries.countryindex import load_registry
from countryidentity.countries.countrynormalize import normalize_key
from countryidentity.countries.countryrecord import CountryRecord
from countryidentity.utils.build_utils import expand_aliases

logger = logging.getLogger(__name__)

Resolution = Union[CountryRecord, NotFound]


# ---- Helpers ----

def _lookup(space: IndexSpace, key: Any) -> Resolution:
    if not isinstance(key, str):
        return NotFound(key, space)
    record = load_registry().index(space).get(normalize_key(key))
    if record is None:
        logger.debug(f"Country lookup miss: {key!r} ({space.value})")
        return NotFound(key, space)
    return record


def _is_int(n: Any) -> bool:
    return isinstance(n, int) and not isinstance(n, bool)


# ---- Resolvers ----

def resolve_by_numeric_value(n: int) -> Resolution:
    """Resolve the numeric code given as an integer; padding is irrelevant.

    Examples:
        >>> resolve_by_numeric_value(8).canonical_name
        'Albania'
        >>> bool(resolve_by_numeric_value(1))
        False
    """
    if not _is_int(n) or not 0 <= n <= 999:
        return NotFound(n, IndexSpace.NUMERIC_VALUE)
    record = load_registry().numeric_code.get(f"{n:03d}")
    return record if record is not None else NotFound(n, IndexSpace.NUMERIC_VALUE)


def resolve_by_numeric_code(code: str) -> Resolution:
    """Resolve the zero-padded three digit code; "8" and "08" do not match "008"."""
    return _lookup(IndexSpace.NUMERIC_CODE, code)


def resolve_by_alpha2(code: str) -> Resolution:
    """Resolve a two letter code, any case ("us", "Us", "US")."""
    return _lookup(IndexSpace.ALPHA2, code)


def resolve_by_alpha3(code: str) -> Resolution:
    """Resolve a three letter code, any case ("usa", "USA")."""
    return _lookup(IndexSpace.ALPHA3, code)


def resolve_by_alias(alias: str) -> Resolution:
    """Resolve an alias only, current or deprecated, with no fallback to names or codes.

    Aliases are stored without spaces: "UnitedKingdom", "holland", "swaziland".

    Examples:
        >>> resolve_by_alias("russia").alpha2
        'RU'
        >>> bool(resolve_by_alias("RU"))
        False
    """
    result = _lookup(IndexSpace.ALIAS, alias)
    if result:
        catalog = load_registry().aliases
        if catalog.is_deprecated(alias):
            logger.debug(f"Deprecated alias {alias!r} resolved: {catalog.note(alias)}")
    return result


def resolve_by_name(name: str) -> Resolution:
    """Resolve the canonical name with spaces removed, any case.

    Examples:
        >>> resolve_by_name("theunitedstatesofamerica").alpha2
        'US'
        >>> bool(resolve_by_name("unitedstatesofamerica"))  # an alias, not the name
        False
    """
    return _lookup(IndexSpace.NAME, name)


def resolve_by_identifier(identifier: str) -> Resolution:
    """Resolve a snake_case identifier such as 'the_united_states_of_america'."""
    return _lookup(IndexSpace.IDENTIFIER, identifier)


def resolve_any(key: Union[str, int]) -> Resolution:
    """Resolve any supported form: numeric code (str or int), alpha-2, alpha-3,
    compact canonical name, identifier or alias.

    Examples:
        >>> [resolve_any(k).alpha2 for k in ("840", 840, "us", "USA", "America")]
        ['US', 'US', 'US', 'US', 'US']
        >>> bool(resolve_any("zzzznotacountry"))
        False
    """
    registry = load_registry()
    if _is_int(key):
        record = registry.unified.get(key)
        return record if record is not None else NotFound(key, IndexSpace.ANY)
    result = _lookup(IndexSpace.ANY, key)
    if result and _matched_deprecated_alias(key):
        logger.debug(f"Deprecated alias {key!r} resolved: {registry.aliases.note(key)}")
    return result


def _matched_deprecated_alias(key: str) -> bool:
    registry = load_registry()
    space = registry.unified_spaces.get(normalize_key(key))
    return space is IndexSpace.ALIAS and registry.aliases.is_deprecated(key)


def get_country(key: Union[str, int]) -> CountryRecord:
    """Strict form of resolve_any.

    Raises:
        CountryNotFoundError: If ``key`` does not resolve
    """
    result = resolve_any(key)
    if not result:
        raise CountryNotFoundError(result)
    return result


# ---- Enumeration ----

def get_countries() -> Tuple[CountryRecord, ...]:
    """All countries in canonical order (lowercased canonical name).

    Examples:
        >>> countries = get_countries()
        >>> len(countries)
        250
        >>> [c.alpha2 for c in countries if c.value < 20]
        ['AF', 'AL', 'DZ', 'AS', 'AQ']
    """
    return load_registry().records


def alias_catalog() -> AliasCatalog:
    """Alias catalog of the bundled registry."""
    return load_registry().aliases


def list_countries(include_deprecated: bool = True) -> pd.DataFrame:
    """List countries as a DataFrame, one row per record in canonical order.

    Columns: numeric_code, value, alpha2, alpha3, name, display_name,
    identifier, alias1...alias10.

    Args:
        include_deprecated: Include former designations in the alias columns

    Examples:
        >>> df = list_countries()
        >>> df.loc[df["alpha2"] == "SZ", ["alias1", "alias2"]].values
        array([['Eswatini', 'Swaziland']], dtype=object)
    """
    rows = []
    for record in get_countries():
        aliases = record.aliases if include_deprecated else record.current_aliases
        row = {k: v for k, v in record.to_dict().items() if k != "aliases"}
        row.update(expand_aliases(aliases))
        rows.append(row)
    return pd.DataFrame(rows)


# ---- Code conversion ----

_CODE_SYSTEMS = {
    "ISO2": "alpha2",
    "ISO3": "alpha3",
    "NUMERIC": "numeric_code",
    "NUM": "numeric_code",
    "NAME": "canonical_name",
}


def _code_attribute(to: str) -> str:
    try:
        return _CODE_SYSTEMS[to.upper()]
    except KeyError:
        raise ValueError(f"Unknown code system: {to}. Use 'ISO2', 'ISO3', 'numeric' or 'name'") from None


def country_identifier(name: Union[str, int], to: str = "ISO2") -> Optional[str]:
    """Get canonical ISO identifier for a country.

    Exact lookup through resolve_any; there is no fuzzy fallback.

    Args:
        name: Country code, compact name, identifier or alias (e.g., "USA",
              "UnitedStates", "America", 840)
        to: 'ISO2' (default), 'ISO3', 'numeric' or 'name'

    Returns:
        Code in the requested system, or None if not recognized

    Raises:
        ValueError: If ``to`` is not a known code system

    Examples:
        >>> country_identifier("USA")
        'US'

        >>> country_identifier("Holland", to="ISO3")
        'NLD'

        >>> country_identifier("Swaziland", to="name")
        'Eswatini'

        >>> country_identifier("Untied States") is None
        True
    """
    attribute = _code_attribute(to)
    result = resolve_any(name)
    return getattr(result, attribute) if result else None


def country_identifiers(names: Iterable[Union[str, int]], to: str = "ISO2") -> List[Optional[str]]:
    """Batch version of country_identifier.

    Examples:
        >>> country_identifiers(["USA", "Holland", "England"])
        ['US', 'NL', 'GB']
    """
    return [country_identifier(n, to=to) for n in names]


def match_country(key: Union[str, int]) -> Optional[dict]:
    """Resolve ``key`` and report how it matched (for review UIs and logs).

    Returns:
        Dict of record fields plus matched_key, index_space and deprecated,
        or None if ``key`` does not resolve

    Examples:
        >>> m = match_country("Burma")
        >>> m["alpha2"], m["index_space"], m["deprecated"]
        ('MM', 'alias', True)
    """
    result = resolve_any(key)
    if not result:
        return None
    matched_key = key if _is_int(key) else normalize_key(key)
    space = load_registry().unified_spaces[matched_key]
    deprecated = not _is_int(key) and _matched_deprecated_alias(key)
    return {
        **result.to_dict(),
        "matched_key": matched_key,
        "index_space": space.value,
        "deprecated": deprecated,
    }


# ---- Wire form ----

def serialize_country(record: CountryRecord) -> str:
    """Wire form of a record: its alpha-2 code."""
    return record.alpha2


def deserialize_country(value: str) -> CountryRecord:
    """Decode an alpha-2 wire value.

    Raises:
        CountryDecodeError: If ``value`` is not a known alpha-2 code

    Examples:
        >>> deserialize_country("gb").alpha3
        'GBR'
    """
    result = resolve_by_alpha2(value)
    if not result:
        raise CountryDecodeError(result)
    return result


__all__ = [
    "resolve_by_numeric_value",
    "resolve_by_numeric_code",
    "resolve_by_alpha2",
    "resolve_by_alpha3",
    "resolve_by_alias",
    "resolve_by_name",
    "resolve_by_identifier",
    "resolve_any",
    "get_country",
    "get_countries",
    "alias_catalog",
    "list_countries",
    "country_identifier",
    "country_identifiers",
    "match_country",
    "serialize_country",
    "deserialize_country",
]
