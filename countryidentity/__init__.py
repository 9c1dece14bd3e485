"""Country Identity - ISO 3166-1 Country Resolution

Public API for resolving country codes, names and aliases to one canonical record.

Usage:
    from countryidentity import resolve_any, country_identifier

    # Any key form: numeric code, alpha-2, alpha-3, compact name, identifier, alias
    us = resolve_any("America")           # CountryRecord for The United States Of America
    us.alpha2, us.alpha3, us.numeric_code # ('US', 'USA', '840')
    str(us)                               # 'TheUnitedStatesOfAmerica'

    # Former names keep resolving to the current record
    resolve_any("Swaziland") == resolve_any("Eswatini")  # True

    # Misses are falsy NotFound values, never exceptions
    miss = resolve_any("zzzznotacountry")
    bool(miss), miss.index_space          # (False, IndexSpace.ANY)

    # Code conversion
    country_identifier("Holland", to="ISO3")  # 'NLD'
"""

__version__ = "0.0.1"

# ============================================================================
# Resolvers
# ============================================================================

from .countries.countryapi import (
    resolve_by_numeric_value,  # int numeric code, padding irrelevant
    resolve_by_numeric_code,   # "004" exact, zero-padded
    resolve_by_alpha2,         # "AF"
    resolve_by_alpha3,         # "AFG"
    resolve_by_alias,          # "Holland", "Swaziland"
    resolve_by_name,           # "theunitedstatesofamerica"
    resolve_by_identifier,     # "the_united_states_of_america"
    resolve_any,               # Primary API - any of the above
    get_country,               # Strict resolve_any, raises CountryNotFoundError
)

# ============================================================================
# Enumeration, conversion and wire form
# ============================================================================

from .countries.countryapi import (
    get_countries,          # All records in canonical order
    list_countries,         # DataFrame view
    alias_catalog,          # Alias metadata (current / deprecated)
    country_identifier,     # Resolve to ISO2 / ISO3 / numeric / name
    country_identifiers,    # Batch country_identifier
    match_country,          # Resolution with matched key space
    serialize_country,      # Record -> alpha-2
    deserialize_country,    # alpha-2 -> record, raises CountryDecodeError
)

# ============================================================================
# Types and errors
# ============================================================================

from .countries.countryrecord import CountryRecord, CountryAlias
from .countries.countryerrors import (
    IndexSpace,
    NotFound,
    ReferenceDataError,
    DuplicateKeyError,
    CountryDecodeError,
    CountryNotFoundError,
)

# ============================================================================
# Registry and normalization
# ============================================================================

from .countries.countryindex import load_registry, build_registry
from .countries.countrynormalize import normalize_key, compact_name
from .utils.validation import validate_countries

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY API - Start here!
    # ========================================================================
    "resolve_any",          # Resolve any key form -> CountryRecord | NotFound
    "country_identifier",   # Resolve -> ISO code

    # ========================================================================
    # Resolvers by key space
    # ========================================================================
    "resolve_by_numeric_value",
    "resolve_by_numeric_code",
    "resolve_by_alpha2",
    "resolve_by_alpha3",
    "resolve_by_alias",
    "resolve_by_name",
    "resolve_by_identifier",
    "get_country",

    # ========================================================================
    # Enumeration, conversion and wire form
    # ========================================================================
    "get_countries",
    "list_countries",
    "alias_catalog",
    "country_identifiers",
    "match_country",
    "serialize_country",
    "deserialize_country",

    # ========================================================================
    # Types and errors
    # ========================================================================
    "CountryRecord",
    "CountryAlias",
    "IndexSpace",
    "NotFound",
    "ReferenceDataError",
    "DuplicateKeyError",
    "CountryDecodeError",
    "CountryNotFoundError",

    # ========================================================================
    # Registry and normalization
    # ========================================================================
    "load_registry",
    "build_registry",
    "normalize_key",
    "compact_name",
    "validate_countries",
]
