"""Shared utilities for CountryIdentity package.

Only the text helpers are re-exported here; build_utils and validation depend
on the countries package and are imported from their own modules.
"""

from countryidentity.utils.normalize import (
    fold_case,
    remove_separators,
)

__all__ = [
    # Normalization
    "fold_case",
    "remove_separators",
]
