"""Shared test fixtures for countryidentity tests."""

import pytest

from countryidentity.countries.countryaliases import attach_aliases
from countryidentity.countries.countryindex import build_registry, load_registry


@pytest.fixture
def registry():
    """The process-wide registry over the bundled reference data."""
    return load_registry()


@pytest.fixture
def sample_countries():
    """Fixture providing sample country keys for testing.

    Returns a dict of keys (any supported form) and their ISO2 codes.
    """
    return {
        "USA": "US",
        "us": "US",
        "840": "US",
        "UnitedStates": "US",
        "America": "US",
        "England": "GB",
        "UnitedKingdom": "GB",
        "Australia": "AU",
        "Germany": "DE",
        "france": "FR",
        "Holland": "NL",
        "aland_islands": "AX",
    }


@pytest.fixture
def renamed_countries():
    """Former designations and the alpha-2 of the current record."""
    return {
        "Swaziland": "SZ",
        "Burma": "MM",
        "Macedonia": "MK",
        "IvoryCoast": "CI",
        "CapeVerde": "CV",
        "Turkey": "TR",
    }


@pytest.fixture
def small_rows():
    """A handful of raw rows for building private registries."""
    return [
        ("afghanistan", "004", "AF", "AFG", "Afghanistan"),
        ("albania", "008", "AL", "ALB", "Albania"),
        ("myanmar", "104", "MM", "MMR", "Myanmar"),
    ]


@pytest.fixture
def small_registry(small_rows):
    """Private registry over ``small_rows`` with one current and one former alias."""
    records = attach_aliases(
        small_rows,
        {"AL": ["Shqiperia"]},
        {"MM": [("Burma", "Burma was renamed to Myanmar in 1989")]},
    )
    return build_registry(records)
