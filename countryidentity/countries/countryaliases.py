"""
Country Alias Catalog
---------------------

Attaches alternate names to country records and answers questions about them.

Renamed countries keep their former designation as a deprecated alias on the
current record, so "Swaziland" still resolves to Eswatini. Deprecation is
metadata for documentation and log messages; it never changes resolution.
A country renamed twice simply carries two deprecated aliases.

API:
  attach_aliases(rows, alias_table, renamed_table) -> list[CountryRecord]
  AliasCatalog(records)
    .aliases_for(record, include_deprecated=True)
    .record_for(alias)
    .status(alias)           -> "current" | "deprecated" | None
    .is_deprecated(alias)
    .note(alias)
    .deprecated_aliases()    -> list[(CountryAlias, CountryRecord)]
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging

from countryidentity.countries.countryerrors import ReferenceDataError
from countryidentity.countries.countrynormalize import normalize_key
from countryidentity.countries.countryrecord import CountryAlias, CountryRecord

logger = logging.getLogger(__name__)


def attach_aliases(
    rows: Iterable[Sequence[str]],
    alias_table: Optional[Mapping[str, Sequence[str]]] = None,
    renamed_table: Optional[Mapping[str, Sequence[Tuple[str, str]]]] = None,
) -> List[CountryRecord]:
    """Build CountryRecords from raw rows, attaching their aliases.

    Current aliases come first, then former designations, each group in
    table order.

    Args:
        rows: (identifier, numeric_code, alpha2, alpha3, canonical_name) tuples
        alias_table: alpha2 -> current alias texts
        renamed_table: alpha2 -> (former name, rename note) pairs

    Returns:
        Records in row order

    Raises:
        ReferenceDataError: If an alias table names an alpha2 with no row

    Examples:
        >>> rows = [("myanmar", "104", "MM", "MMR", "Myanmar")]
        >>> [r] = attach_aliases(rows, {}, {"MM": [("Burma", "Renamed in 1989")]})
        >>> r.aliases
        (CountryAlias(text='Burma', deprecated=True, note='Renamed in 1989'),)
    """
    alias_table = alias_table or {}
    renamed_table = renamed_table or {}

    rows = list(rows)
    known = {row[2] for row in rows}
    for table_name, table in (("alias", alias_table), ("renamed", renamed_table)):
        unknown = sorted(set(table) - known)
        if unknown:
            raise ReferenceDataError(f"{table_name} table references unknown alpha2 codes: {unknown}")

    records = []
    for identifier, numeric_code, alpha2, alpha3, canonical_name in rows:
        aliases = [CountryAlias(text) for text in alias_table.get(alpha2, ())]
        aliases.extend(
            CountryAlias(text, deprecated=True, note=note)
            for text, note in renamed_table.get(alpha2, ())
        )
        records.append(
            CountryRecord(
                identifier=identifier,
                numeric_code=numeric_code,
                alpha2=alpha2,
                alpha3=alpha3,
                canonical_name=canonical_name,
                aliases=tuple(aliases),
            )
        )
    return records


class AliasCatalog:
    """Read-only view over every alias of a set of records.

    When two records share an alias key, the first record registered keeps it
    and the collision is logged.

    Queries are keyed like resolve_by_alias: lowercased only, so "Ivory Coast"
    is not an alias while "IvoryCoast" is.
    """

    def __init__(self, records: Iterable[CountryRecord]):
        entries: Dict[str, Tuple[CountryAlias, CountryRecord]] = {}
        for record in records:
            for alias in record.aliases:
                key = alias.key
                existing = entries.get(key)
                if existing is None:
                    entries[key] = (alias, record)
                elif existing[1] is not record:
                    logger.warning(
                        f"Alias {alias.text!r} of {record.canonical_name!r} already belongs to "
                        f"{existing[1].canonical_name!r}; keeping the first"
                    )
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and normalize_key(alias) in self._entries

    def items(self) -> List[Tuple[str, CountryRecord]]:
        """(alias key, record) pairs in registration order."""
        return [(key, record) for key, (_, record) in self._entries.items()]

    def _lookup(self, alias: object) -> Optional[Tuple[CountryAlias, CountryRecord]]:
        if not isinstance(alias, str):
            return None
        return self._entries.get(normalize_key(alias))

    def aliases_for(self, record: CountryRecord, include_deprecated: bool = True) -> List[CountryAlias]:
        """Aliases of ``record``, optionally without former designations."""
        if include_deprecated:
            return list(record.aliases)
        return list(record.current_aliases)

    def record_for(self, alias: str) -> Optional[CountryRecord]:
        hit = self._lookup(alias)
        return hit[1] if hit else None

    def status(self, alias: str) -> Optional[str]:
        """'current', 'deprecated', or None for an unknown alias.

        Examples:
            >>> catalog.status("Swaziland")
            'deprecated'
            >>> catalog.status("holland")
            'current'
        """
        hit = self._lookup(alias)
        return hit[0].status if hit else None

    def is_deprecated(self, alias: str) -> bool:
        hit = self._lookup(alias)
        return bool(hit and hit[0].deprecated)

    def note(self, alias: str) -> Optional[str]:
        hit = self._lookup(alias)
        return hit[0].note if hit else None

    def deprecated_aliases(self) -> List[Tuple[CountryAlias, CountryRecord]]:
        return [(alias, record) for alias, record in self._entries.values() if alias.deprecated]


__all__ = [
    "attach_aliases",
    "AliasCatalog",
]
