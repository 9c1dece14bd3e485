"""
Build Utility Functions
-----------------------

Helpers for turning country records into flat tabular rows.

Functions:
  - expand_aliases: Expand an alias list into alias1...alias10 columns
"""

from typing import Dict, Optional, Sequence, Union

from countryidentity.countries.countryrecord import CountryAlias


def expand_aliases(
    aliases: Optional[Sequence[Union[str, CountryAlias]]],
    max_columns: int = 10,
) -> Dict[str, str]:
    """
    Expand aliases list into alias1...alias10 columns.

    Args:
        aliases: Alias strings or CountryAlias entries
        max_columns: Maximum number of alias columns to generate (default: 10)

    Returns:
        Dictionary mapping alias1...alias{max_columns} to values

    Examples:
        >>> expand_aliases(['Netherlands', 'Holland'])
        {'alias1': 'Netherlands', 'alias2': 'Holland', 'alias3': '', ...}

        >>> expand_aliases(None)
        {'alias1': '', 'alias2': '', ...}
    """
    result = {}
    if not aliases:
        aliases = []

    for i in range(1, max_columns + 1):
        col_name = f"alias{i}"
        if i <= len(aliases):
            alias = aliases[i - 1]
            result[col_name] = alias.text if isinstance(alias, CountryAlias) else str(alias)
        else:
            result[col_name] = ""

    return result


__all__ = [
    "expand_aliases",
]
