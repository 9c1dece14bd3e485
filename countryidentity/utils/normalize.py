"""Shared text normalization utilities.

Lookup keys in this package are compared after plain lowercasing. Unlike
slug or display normalization there is no Unicode decomposition and no ASCII
transliteration: "Türkiye" and "Turkiye" stay different keys.
"""

import re

_SEPARATORS = re.compile(r"[\s_]+")


def fold_case(s: str) -> str:
    """Lowercase a string without any other transformation.

    Uses ``str.lower`` rather than ``str.casefold`` so that characters such as
    "ß" are kept as they are.

    Examples:
        >>> fold_case("UnitedKingdom")
        'unitedkingdom'

        >>> fold_case("Türkiye")
        'türkiye'
    """
    return s.lower()


def remove_separators(s: str) -> str:
    """Remove whitespace and underscores.

    Examples:
        >>> remove_separators("United Kingdom")
        'UnitedKingdom'

        >>> remove_separators("the_united_states_of_america")
        'theunitedstatesofamerica'

        >>> remove_separators("Taiwan, Republic Of China")
        'Taiwan,RepublicOfChina'
    """
    return _SEPARATORS.sub("", s)


__all__ = [
    "fold_case",
    "remove_separators",
]
