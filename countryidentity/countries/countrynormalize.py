"""
Country Key Normalization
-------------------------

Two functions with different jobs:
  1. normalize_key: applied to every caller input before a lookup (lowercase only)
  2. compact_name: applied to stored names and aliases when the registry is built

Callers are expected to pass names already in compact form
("TheUnitedStatesOfAmerica"); the resolvers never strip input themselves.

Examples:
  >>> normalize_key("GB")
  'gb'

  >>> normalize_key("The United Kingdom")
  'the united kingdom'

  >>> compact_name("The United Kingdom Of Great Britain And Northern Ireland")
  'theunitedkingdomofgreatbritainandnorthernireland'
"""

from countryidentity.utils.normalize import fold_case, remove_separators


def normalize_key(s: str) -> str:
    """Lookup key for raw input: lowercase, nothing else.

    Every string produces a key; whether it matches is decided by the index.
    """
    return fold_case(s)


def compact_name(s: str) -> str:
    """Storage key for names and aliases: separators removed, then lowercased.

    Examples:
        >>> compact_name("Coted Ivoire")
        'cotedivoire'

        >>> compact_name("Türkiye")
        'türkiye'
    """
    return normalize_key(remove_separators(s))


__all__ = [
    "normalize_key",
    "compact_name",
]
