"""Relational operations on tables: union, sorting, difference and product."""

from __future__ import annotations

from typing import Any, Iterable

from colstore.column import Column
from colstore.table import Table


def _empty_like(table: Table, name: str) -> Table:
    """Return a table named ``name`` with ``table``'s columns and no records."""
    result = Table(name)
    for key in table.keys():
        result.setup_column(key, table.get(key).default_value)
    return result


def _with_rows(table: Table, rows: Iterable[tuple[Any, ...]]) -> Table:
    """Return a table shaped like ``table`` holding ``rows`` in key order."""
    result = _empty_like(table, table.name)
    keys = table.keys()
    for row in rows:
        result.insert_record(keys, *row)
    return result


def _flat_columns(table: Table) -> list[Column[Any]]:
    """Return the columns grouped by type: str, then int, float and bool."""
    return [column for group in table.typed_columns().values() for column in group]


def is_compatible(table: Table, other: Table) -> bool:
    """Return whether both tables hold columns with the same keys for every type."""
    mine = table.typed_columns()
    theirs = other.typed_columns()
    return all(
        sorted(column.key for column in mine[kind])
        == sorted(column.key for column in theirs[kind])
        for kind in mine
    )


def concat(table: Table, other: Table) -> Table:
    """Return ``table``'s records followed by ``other``'s, under ``table``'s name."""
    if not is_compatible(table, other):
        raise ValueError("Table not compatible during concatenation!")
    result = _with_rows(table, table.rows())
    other_keys = other.keys()
    for row in other.rows():
        result.insert_record(other_keys, *row)
    return result


def _quicksort(order: list[int], values: list[Any], descending: bool) -> None:
    """Sort record positions in place by ``values`` with a Lomuto-partition quicksort."""

    def before(a: int, b: int) -> bool:
        return values[a] > values[b] if descending else values[a] <= values[b]

    pending = [(0, len(order) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = order[high]
        boundary = low
        for position in range(low, high):
            if before(order[position], pivot):
                order[boundary], order[position] = order[position], order[boundary]
                boundary += 1
        order[boundary], order[high] = order[high], order[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))


def sort_by(table: Table, key: str, descending: bool = False) -> Table:
    """Return the records ordered by the column ``key``.

    The ordering is not stable. An unknown key gives an unchanged copy.
    """
    column = table.column(key)
    if column is None:
        return table.copy()
    order = list(range(len(table)))
    _quicksort(order, list(column), descending)
    rows = list(table.rows())
    return _with_rows(table, (rows[position] for position in order))


def difference(table: Table, other: Table) -> Table:
    """Return the records of ``table`` that do not appear in ``other``.

    Records are compared column by column within each type, by the position
    of the column among those of its type.
    """
    if not is_compatible(table, other):
        raise ValueError("Table not compatible during difference!")
    mine = _flat_columns(table)
    theirs = _flat_columns(other)
    present = set(zip(*theirs)) if theirs else set()
    kept = (
        row
        for row, comparable in zip(table.rows(), zip(*mine))
        if comparable not in present
    )
    return _with_rows(table, kept)


def product(table: Table, other: Table) -> Table:
    """Return the Cartesian product of two tables with differently named tables.

    The result is named ``"<table>_<other>"`` and each key is prefixed with the
    name of the table it came from.
    """
    if table.name == other.name:
        raise ValueError("Tables having same name while product!")
    result = Table(f"{table.name}_{other.name}")
    left = _flat_columns(table)
    right = _flat_columns(other)
    keys = [f"{table.name}.{column.key}" for column in left]
    keys += [f"{other.name}.{column.key}" for column in right]
    for key, column in zip(keys, [*left, *right]):
        result.setup_column(key, column.default_value)

    left_rows = list(zip(*left))
    right_rows = list(zip(*right))
    for left_row in left_rows:
        for right_row in right_rows:
            result.insert_record(keys, *left_row, *right_row)
    return result