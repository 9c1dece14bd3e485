"""Integration tests for the public API.

These tests verify that the main public API (countryidentity/__init__.py)
works end to end on the bundled reference data.

Tests focus on:
- Code conversion (country_identifier, country_identifiers)
- Tabular views (list_countries)
- Match diagnostics (match_country)

For unit tests of specific modules, see:
- test_resolution.py - Resolvers and the unified index
- test_aliases.py - Aliases and renamed countries
- test_records.py - CountryRecord value semantics

Run with: pytest tests/test_api.py
"""

import pandas as pd
import pytest

from countryidentity import (
    country_identifier,
    country_identifiers,
    list_countries,
    match_country,
)


class TestCountryIdentifier:
    """Test country_identifier function"""

    def test_country_identifier_iso2_code(self):
        """Test resolution of ISO2 codes"""
        assert country_identifier("US") == "US"
        assert country_identifier("GB") == "GB"
        assert country_identifier("au") == "AU"

    def test_country_identifier_iso3_code(self):
        """Test resolution of ISO3 codes"""
        assert country_identifier("USA") == "US"
        assert country_identifier("GBR") == "GB"

    def test_country_identifier_aliases(self):
        """Test resolution of aliases"""
        assert country_identifier("England") == "GB"
        assert country_identifier("Holland") == "NL"
        assert country_identifier("UnitedStates") == "US"

    def test_country_identifier_numeric_input(self):
        """Test numeric codes as strings and ints"""
        assert country_identifier("276") == "DE"
        assert country_identifier(276) == "DE"

    @pytest.mark.parametrize("to,expected", [
        ("ISO2", "NL"),
        ("iso2", "NL"),
        ("ISO3", "NLD"),
        ("numeric", "528"),
        ("num", "528"),
        ("name", "The Netherlands"),
    ])
    def test_country_identifier_code_systems(self, to, expected):
        """Test each output code system"""
        assert country_identifier("Holland", to=to) == expected

    def test_country_identifier_renamed(self):
        """Test former names convert to current codes"""
        assert country_identifier("Swaziland", to="name") == "Eswatini"
        assert country_identifier("Burma", to="ISO3") == "MMR"

    def test_country_identifier_unknown(self):
        """Test that unknown countries return None"""
        assert country_identifier("Untied States") is None
        assert country_identifier("XYZ_INVALID_COUNTRY") is None
        assert country_identifier("") is None

    def test_country_identifier_bad_system(self):
        """Test that an unknown code system raises"""
        with pytest.raises(ValueError, match="Unknown code system"):
            country_identifier("US", to="FIPS")

    def test_bad_system_raises_even_on_miss(self):
        """Test the code system is checked before lookup"""
        with pytest.raises(ValueError):
            country_identifier("Atlantis", to="FIPS")


class TestCountryIdentifiers:
    """Test batch country_identifiers function"""

    def test_batch(self):
        """Test batch resolution keeps order"""
        assert country_identifiers(["USA", "Holland", "England"]) == ["US", "NL", "GB"]

    def test_batch_with_misses(self):
        """Test misses come back as None in place"""
        assert country_identifiers(["FR", "Atlantis", 392], to="ISO3") == ["FRA", None, "JPN"]

    def test_empty_batch(self):
        """Test empty input"""
        assert country_identifiers([]) == []


class TestListCountries:
    """Test list_countries DataFrame"""

    def test_columns(self):
        """Test the DataFrame shape"""
        df = list_countries()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 250
        for column in ["numeric_code", "value", "alpha2", "alpha3", "name", "display_name", "identifier"]:
            assert column in df.columns
        assert [f"alias{i}" for i in range(1, 11)] == [c for c in df.columns if c.startswith("alias")]

    def test_row_order(self):
        """Test rows follow canonical order"""
        df = list_countries()
        assert df["alpha2"].iloc[0] == "AF"
        assert df["alpha2"].is_unique

    def test_alias_columns(self):
        """Test aliases spread over alias columns"""
        df = list_countries()
        row = df[df["alpha2"] == "NL"].iloc[0]
        assert row["alias1"] == "Netherlands"
        assert row["alias2"] == "Holland"
        assert row["alias3"] == ""

    def test_exclude_deprecated(self):
        """Test former names can be left out"""
        df = list_countries(include_deprecated=False)
        row = df[df["alpha2"] == "SZ"].iloc[0]
        assert row["alias1"] == "Eswatini"
        assert row["alias2"] == ""
        full = list_countries()
        assert full[full["alpha2"] == "SZ"].iloc[0]["alias2"] == "Swaziland"


class TestMatchCountry:
    """Test match_country diagnostics"""

    @pytest.mark.parametrize("key,space", [
        ("840", "numeric_code"),
        (840, "numeric_value"),
        ("US", "alpha2"),
        ("usa", "alpha3"),
        ("TheUnitedStatesOfAmerica", "name"),
        ("America", "alias"),
        ("the_united_states_of_america", "identifier"),
    ])
    def test_index_space(self, key, space):
        """Test the key space that matched is reported"""
        m = match_country(key)
        assert m["alpha2"] == "US"
        assert m["index_space"] == space
        assert m["deprecated"] is False

    def test_matched_key_is_normalized(self):
        """Test the matched key is the lookup form"""
        assert match_country("USA")["matched_key"] == "usa"
        assert match_country(840)["matched_key"] == 840

    def test_miss(self):
        """Test a miss returns None"""
        assert match_country("Atlantis") is None
        assert match_country(None) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
