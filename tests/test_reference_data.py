"""Cross-check the bundled country table against pycountry's ISO 3166-1 data.

Run with: pytest tests/test_reference_data.py
"""

import pytest

from countryidentity import get_countries, resolve_by_alpha2

pycountry = pytest.importorskip("pycountry")

# User-assigned codes that ISO 3166-1 does not list
USER_ASSIGNED = {"XK"}


class TestAgainstPycountry:
    """Bundled codes agree with the ISO catalogue"""

    def test_every_iso_country_present(self):
        """Test each ISO 3166-1 alpha-2 is in the bundle"""
        missing = [c.alpha_2 for c in pycountry.countries if not resolve_by_alpha2(c.alpha_2)]
        assert missing == []

    def test_codes_agree(self):
        """Test alpha-3 and numeric codes match for every ISO record"""
        mismatches = []
        for record in get_countries():
            if record.alpha2 in USER_ASSIGNED:
                continue
            iso = pycountry.countries.get(alpha_2=record.alpha2)
            if iso is None or (iso.alpha_3, iso.numeric) != (record.alpha3, record.numeric_code):
                mismatches.append(record.alpha2)
        assert mismatches == []

    def test_user_assigned_only_extras(self):
        """Test the bundle adds nothing beyond ISO apart from user-assigned codes"""
        iso_codes = {c.alpha_2 for c in pycountry.countries}
        extras = {r.alpha2 for r in get_countries()} - iso_codes
        assert extras == USER_ASSIGNED


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
