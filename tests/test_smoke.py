"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import pytest


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from countryidentity import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import countryidentity
        assert countryidentity is not None

    def test_all_names_exist(self):
        """Test that every name in __all__ is importable"""
        import countryidentity

        for name in countryidentity.__all__:
            assert hasattr(countryidentity, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_resolver_imports(self):
        """Test resolver imports"""
        from countryidentity import (
            resolve_any,
            resolve_by_numeric_value,
            resolve_by_numeric_code,
            resolve_by_alpha2,
            resolve_by_alpha3,
            resolve_by_alias,
            resolve_by_name,
            resolve_by_identifier,
            get_country,
        )

        for fn in (
            resolve_any,
            resolve_by_numeric_value,
            resolve_by_numeric_code,
            resolve_by_alpha2,
            resolve_by_alpha3,
            resolve_by_alias,
            resolve_by_name,
            resolve_by_identifier,
            get_country,
        ):
            assert callable(fn)

    def test_conversion_imports(self):
        """Test code conversion imports"""
        from countryidentity import (
            country_identifier,
            country_identifiers,
            match_country,
            list_countries,
        )

        assert callable(country_identifier)
        assert callable(country_identifiers)
        assert callable(match_country)
        assert callable(list_countries)


class TestBasicFunctionality:
    """Quick tests of core functionality"""

    def test_resolve_any_basic(self):
        """Test basic resolution"""
        from countryidentity import resolve_any

        assert resolve_any("US").alpha3 == "USA"

    def test_country_identifier_basic(self):
        """Test basic code conversion"""
        from countryidentity import country_identifier

        assert country_identifier("USA") == "US"

    def test_miss_is_falsy(self):
        """Test that a miss does not raise"""
        from countryidentity import resolve_any

        assert not resolve_any("zzzznotacountry")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
