"""Tests for registry construction and reference data consistency.

Run with: pytest tests/test_registry.py
"""

import logging
import threading
from types import MappingProxyType

import pytest

from countryidentity import (
    DuplicateKeyError,
    IndexSpace,
    ReferenceDataError,
    build_registry,
    get_countries,
    load_registry,
    validate_countries,
)
from countryidentity.countries import countryindex
from countryidentity.countries.countryaliases import attach_aliases
from countryidentity.countries.countryrecord import CountryAlias, CountryRecord
from countryidentity.utils.validation import validate_alias_overlaps


class TestBundledData:
    """The shipped table is consistent"""

    def test_validate_countries_clean(self):
        """Test no duplicate keys and no cross-record alias clashes"""
        assert validate_countries(get_countries()) == []

    def test_unique_counts(self, registry):
        """Test each unique index has one key per record"""
        n = len(registry)
        assert n == 250
        for space in (
            IndexSpace.NUMERIC_CODE,
            IndexSpace.ALPHA2,
            IndexSpace.ALPHA3,
            IndexSpace.NAME,
            IndexSpace.IDENTIFIER,
        ):
            assert len(registry.index(space)) == n, space

    def test_maps_are_read_only(self, registry):
        """Test index maps cannot be mutated"""
        assert isinstance(registry.alpha2, MappingProxyType)
        with pytest.raises(TypeError):
            registry.alpha2["xx"] = registry.alpha2["us"]

    def test_index_any_is_unified(self, registry):
        """Test IndexSpace.ANY selects the unified map"""
        assert registry.index(IndexSpace.ANY) is registry.unified
        assert registry.index(IndexSpace.NUMERIC_VALUE) is registry.numeric_code
        assert registry.index(IndexSpace.ALIAS) is registry.alias

    def test_unified_spaces(self, registry):
        """Test the unified map records which space claimed each key"""
        assert registry.unified_spaces["840"] == IndexSpace.NUMERIC_CODE
        assert registry.unified_spaces[840] == IndexSpace.NUMERIC_VALUE
        assert registry.unified_spaces["us"] == IndexSpace.ALPHA2
        assert registry.unified_spaces["usa"] == IndexSpace.ALPHA3
        assert registry.unified_spaces["holland"] == IndexSpace.ALIAS
        assert registry.unified_spaces["aland_islands"] == IndexSpace.IDENTIFIER
        assert set(registry.unified_spaces) == set(registry.unified)


class TestBuildRegistry:
    """Building private registries"""

    def test_small_registry(self, small_registry):
        """Test a registry over a few rows"""
        assert len(small_registry) == 3
        assert small_registry.numeric_code["008"].alpha2 == "AL"
        assert small_registry.unified[104].alpha2 == "MM"
        assert small_registry.unified["burma"].alpha2 == "MM"

    @pytest.mark.parametrize("row,space", [
        (("afghanistan2", "004", "XA", "XAA", "Afghanistan Two"), IndexSpace.NUMERIC_CODE),
        (("afghanistan2", "900", "AF", "XAA", "Afghanistan Two"), IndexSpace.ALPHA2),
        (("afghanistan2", "900", "XA", "AFG", "Afghanistan Two"), IndexSpace.ALPHA3),
        (("afghanistan2", "900", "XA", "XAA", "Afghan istan"), IndexSpace.NAME),
        (("afghanistan", "900", "XA", "XAA", "Afghanistan Two"), IndexSpace.IDENTIFIER),
    ])
    def test_duplicate_key_is_fatal(self, small_rows, row, space):
        """Test a repeated unique key raises DuplicateKeyError"""
        records = attach_aliases(small_rows + [row])
        with pytest.raises(DuplicateKeyError) as exc_info:
            build_registry(records)
        error = exc_info.value
        assert error.index_space == space
        assert error.first.alpha2 == "AF"
        assert isinstance(error, ReferenceDataError)
        assert isinstance(error, ValueError)

    def test_cross_space_collision_keeps_first(self, caplog):
        """Test an alias equal to another record's alpha-3 does not take the key"""
        records = [
            CountryRecord("albania", "008", "AL", "ALB", "Albania"),
            CountryRecord("afghanistan", "004", "AF", "AFG", "Afghanistan", (CountryAlias("ALB"),)),
        ]
        with caplog.at_level(logging.WARNING):
            registry = build_registry(records)
        assert registry.unified["alb"].alpha2 == "AL"
        assert registry.alias["alb"].alpha2 == "AF"
        assert any("'alb'" in r.getMessage() for r in caplog.records)

    def test_build_logs_summary(self, small_rows, caplog):
        """Test the build is logged at INFO"""
        with caplog.at_level(logging.INFO, logger="countryidentity"):
            build_registry(attach_aliases(small_rows))
        assert any("3 records" in r.getMessage() for r in caplog.records)

    def test_records_sorted(self):
        """Test registry records are in canonical order regardless of input"""
        rows = [
            ("zambia", "894", "ZM", "ZMB", "Zambia"),
            ("albania", "008", "AL", "ALB", "Albania"),
        ]
        registry = build_registry(attach_aliases(rows))
        assert [r.alpha2 for r in registry.records] == ["AL", "ZM"]


class TestLoadRegistry:
    """The process-wide registry"""

    def test_same_object(self):
        """Test repeated calls return the same registry"""
        assert load_registry() is load_registry()

    def test_concurrent_first_use(self, monkeypatch):
        """Test racing threads build the registry once"""
        monkeypatch.setattr(countryindex, "_REGISTRY", None)
        builds = []
        real_build = countryindex.build_registry

        def counting_build(records):
            builds.append(1)
            return real_build(records)

        monkeypatch.setattr(countryindex, "build_registry", counting_build)

        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(countryindex.load_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(builds) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestValidation:
    """validate_countries reports problems without raising"""

    def test_empty(self):
        """Test empty input is reported"""
        assert validate_countries([]) == ["No country records"]

    def test_duplicate_alpha2_reported(self, small_rows):
        """Test duplicates are listed"""
        records = attach_aliases(small_rows + [("other", "900", "AF", "XAA", "Other")])
        issues = validate_countries(records)
        assert any("alpha2" in issue for issue in issues)

    def test_alias_overlap_reported(self, small_rows):
        """Test an alias shadowing another record's key is listed"""
        records = attach_aliases(small_rows, {"MM": ["Albania"]})
        issues = validate_alias_overlaps(records)
        assert len(issues) == 1
        assert "albania" in issues[0]
        assert "Myanmar" in issues[0]

    def test_own_keys_do_not_overlap(self, small_rows):
        """Test an alias equal to the record's own name is not a clash"""
        records = attach_aliases(small_rows, {"MM": ["Myanmar"]})
        assert validate_alias_overlaps(records) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
