"""Country entity resolution and identification."""

from countryidentity.countries.countryapi import (
    resolve_by_numeric_value,
    resolve_by_numeric_code,
    resolve_by_alpha2,
    resolve_by_alpha3,
    resolve_by_alias,
    resolve_by_name,
    resolve_by_identifier,
    resolve_any,
    get_country,
    get_countries,
    alias_catalog,
    list_countries,
    country_identifier,
    country_identifiers,
    match_country,
    serialize_country,
    deserialize_country,
)
from countryidentity.countries.countryerrors import (
    IndexSpace,
    NotFound,
    ReferenceDataError,
    DuplicateKeyError,
    CountryDecodeError,
    CountryNotFoundError,
)
from countryidentity.countries.countryindex import (
    CountryRegistry,
    build_registry,
    load_registry,
)
from countryidentity.countries.countrynormalize import normalize_key, compact_name
from countryidentity.countries.countryrecord import CountryAlias, CountryRecord

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
    "IndexSpace",
    "NotFound",
    "ReferenceDataError",
    "DuplicateKeyError",
    "CountryDecodeError",
    "CountryNotFoundError",
    "CountryRegistry",
    "build_registry",
    "load_registry",
    "normalize_key",
    "compact_name",
    "CountryAlias",
    "CountryRecord",
]
