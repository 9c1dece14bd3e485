"""
Reference Data Validation
-------------------------

Checks a collection of country records without building a registry, and
reports every problem at once instead of failing on the first. Used by the
test suite over the bundled table; build_registry() remains the fail-fast
guard at runtime.
"""

from typing import Iterable, List

import pandas as pd

from countryidentity.countries.countrynormalize import compact_name, normalize_key
from countryidentity.countries.countryrecord import CountryRecord


def validate_duplicate_keys(df: pd.DataFrame, key_field: str) -> List[str]:
    """Check for duplicate keys."""
    issues = []
    dup_keys = df[df.duplicated(subset=[key_field], keep=False)]
    if not dup_keys.empty:
        dup_key_names = dup_keys[['name', key_field]].to_dict('records')
        issues.append(f"Duplicate {key_field}s found: {dup_key_names}")
    return issues


def validate_required_fields(df: pd.DataFrame, required_fields: List[str]) -> List[str]:
    """Check for missing required fields."""
    issues = []
    for field in required_fields:
        missing = df[df[field].isna() | (df[field] == "")]
        if not missing.empty:
            missing_names = missing['name'].tolist()
            issues.append(f"Missing {field} for entities: {missing_names}")
    return issues


def validate_alias_overlaps(records: Iterable[CountryRecord]) -> List[str]:
    """Check that no alias of one record is a key of another record.

    Covers alias/alias clashes as well as aliases that shadow another
    country's code, name or identifier in the unified index.
    """
    rows = []
    for record in records:
        keys = {
            normalize_key(record.numeric_code),
            normalize_key(record.alpha2),
            normalize_key(record.alpha3),
            record.name_key,
            record.identifier,
        }
        keys.update(alias.key for alias in record.aliases)
        rows.extend({"key": key, "name": record.canonical_name} for key in keys)
    if not rows:
        return []

    df = pd.DataFrame(rows)
    clashes = df[df.duplicated(subset=["key"], keep=False)]
    issues = []
    for key, group in clashes.groupby("key", sort=True):
        issues.append(f"Key {key!r} is shared by: {sorted(group['name'].tolist())}")
    return issues


def validate_countries(records: Iterable[CountryRecord]) -> List[str]:
    """Run every check over ``records``.

    Returns:
        List of human-readable issues; empty when the data is consistent

    Examples:
        >>> from countryidentity import get_countries
        >>> validate_countries(get_countries())
        []
    """
    records = list(records)
    if not records:
        return ["No country records"]

    df = pd.DataFrame([
        {
            "numeric_code": r.numeric_code,
            "alpha2": r.alpha2.lower(),
            "alpha3": r.alpha3.lower(),
            "name": r.canonical_name,
            "name_key": compact_name(r.canonical_name),
            "identifier": r.identifier,
        }
        for r in records
    ])

    issues = validate_required_fields(df, ["numeric_code", "alpha2", "alpha3", "name", "identifier"])
    for key_field in ["numeric_code", "alpha2", "alpha3", "name_key", "identifier"]:
        issues.extend(validate_duplicate_keys(df, key_field))
    issues.extend(validate_alias_overlaps(records))
    return issues


__all__ = [
    "validate_duplicate_keys",
    "validate_required_fields",
    "validate_alias_overlaps",
    "validate_countries",
]
