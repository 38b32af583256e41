"""Row and column transformations that build new tables from existing ones."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Mapping, Optional

from colstore.table import Table


def _rebuilt(
    table: Table,
    name: str,
    rows: Iterable[tuple[Any, ...]],
    renames: Optional[Mapping[str, str]] = None,
) -> Table:
    """Build a table with ``table``'s columns (optionally renamed) holding ``rows``."""
    renames = renames or {}
    old_keys = table.keys()
    new_keys = [renames.get(key, key) for key in old_keys]
    result = Table(name)
    for old_key, new_key in zip(old_keys, new_keys):
        result.setup_column(new_key, table.get(old_key).default_value)
    for row in rows:
        result.insert_record(new_keys, *row)
    return result


def limit(table: Table, count: int) -> Table:
    """Return a table holding at most the first ``count`` records."""
    if count >= len(table):
        return table.copy()
    return _rebuilt(table, table.name, islice(table.rows(), max(count, 0)))


def skip(table: Table, count: int) -> Table:
    """Return a table without its first ``count`` records.

    Skipping every record gives a table with no columns at all.
    """
    if count >= len(table):
        return Table(table.name)
    return _rebuilt(table, table.name, islice(table.rows(), max(count, 0), None))


def select(table: Table, keys: Iterable[str]) -> Table:
    """Return a table with only the columns ``keys``, in that order."""
    keys = list(keys)
    columns = [table.get(key) for key in keys]
    result = Table(table.name)
    for key, column in zip(keys, columns):
        result.setup_column(key, column.default_value)
    if columns:
        for row in zip(*columns):
            result.insert_record(keys, *row)
    return result


def alias(table: Table, new_name: str) -> Table:
    """Return a copy of ``table`` under the name ``new_name``."""
    return _rebuilt(table, new_name, table.rows())


def rename_columns(
    table: Table, original: Iterable[str], renamed: Iterable[str]
) -> Table:
    """Return a copy of ``table`` with each key in ``original`` replaced by its
    counterpart in ``renamed``; keys not listed keep their names."""
    original = list(original)
    renamed = list(renamed)
    if len(original) != len(renamed):
        raise ValueError(
            f"Got {len(original)} original keys but {len(renamed)} new keys"
        )
    mapping: dict[str, str] = {}
    for old_key, new_key in zip(original, renamed):
        mapping.setdefault(old_key, new_key)
    return _rebuilt(table, table.name, table.rows(), mapping)