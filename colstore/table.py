"""A named table of typed columns that share a common number of records."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from colstore.column import Column

_KINDS: tuple[type, ...] = (str, int, float, bool)
_FILTER_MISMATCH = "Filter size does not match the number of records in the table."


def _kind(value: Any) -> type:
    """Return the column type a value belongs to: str, int, float or bool."""
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, str):
        return str
    raise TypeError(f"Unsupported column value type: {type(value).__name__}")


def _fits(column: Column[Any], value: Any) -> tuple[bool, Any]:
    """Check whether ``value`` may be stored in ``column``; return it converted if so."""
    column_kind = _kind(column.default_value)
    value_kind = _kind(value)
    if value_kind is column_kind:
        return True, value
    if column_kind is float and value_kind is int:
        return True, float(value)
    return False, value


class Table:
    """Columns of str, int, float or bool values, kept at the same length.

    Columns are listed in the order they were set up. Inserting a record fills
    every column that was not given a value with its default value.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._columns: dict[str, Column[Any]] = {}
        self._num_rows = 0

    def __repr__(self) -> str:
        return f"Table({self.name!r}, keys={self.keys()!r}, rows={self._num_rows})"

    def copy(self) -> Table:
        """Return an independent copy of this table."""
        duplicate = Table(self.name)
        for key, column in self._columns.items():
            duplicate._columns[key] = Column(column.key, column.default_value, column)
        duplicate._num_rows = self._num_rows
        return duplicate

    def setup_column(self, key: str, default_value: Any) -> None:
        """Add a column whose existing records take ``default_value``."""
        _kind(default_value)
        if key in self._columns:
            raise ValueError(f'Key "{key}" already exists in table!')
        column: Column[Any] = Column(key, default_value)
        column.add_default(self._num_rows)
        self._columns[key] = column

    def remove_column(self, key: str) -> None:
        """Drop the column named ``key``; an unknown key is ignored."""
        self._columns.pop(key, None)

    def get(self, key: str) -> Column[Any]:
        """Return the column named ``key``, raising KeyError if there is none."""
        column = self._columns.get(key)
        if column is None:
            raise KeyError(f'Key "{key}" not found in table!')
        return column

    def column(self, key: str) -> Optional[Column[Any]]:
        """Return the column named ``key``, or None."""
        return self._columns.get(key)

    def keys(self) -> list[str]:
        """Return the column keys in display order."""
        return list(self._columns)

    def typed_columns(self) -> dict[type, list[Column[Any]]]:
        """Return the columns grouped by type, in the order str, int, float, bool."""
        groups: dict[type, list[Column[Any]]] = {kind: [] for kind in _KINDS}
        for column in self._columns.values():
            groups[_kind(column.default_value)].append(column)
        return groups

    def insert_record(self, keys: Iterable[str], *args: Any) -> int:
        """Add one record from ``keys`` paired with ``args``; return the record count.

        Columns not named in ``keys`` receive their default value.
        """
        keys = list(keys)
        if len(keys) != len(args):
            raise ValueError(
                f"Got {len(keys)} keys but {len(args)} values for the record"
            )
        entries = []
        for key, value in zip(keys, args):
            column = self.get(key)
            ok, converted = _fits(column, value)
            if not ok:
                raise TypeError(f'Value {value!r} does not fit column "{key}"')
            entries.append((column, converted))

        for column, value in entries:
            column.add_entry(value)
            self._num_rows = max(self._num_rows, len(column))
        for column in self._columns.values():
            column.add_default(self._num_rows - len(column))
        return self._num_rows

    def _check_mask(self, mask: Column[Any]) -> None:
        if len(mask) != self._num_rows:
            raise ValueError(_FILTER_MISMATCH)

    def __getitem__(self, mask: Column[Any]) -> Table:
        """Return a new table holding the records where ``mask`` is true."""
        self._check_mask(mask)
        result = Table(self.name)
        for key, column in self._columns.items():
            result._columns[key] = column[mask]
        result._num_rows = sum(1 for keep in mask if keep)
        return result

    def update_records(self, mask: Column[Any], key: str, new_value: Any) -> None:
        """Set ``key`` to ``new_value`` in the records where ``mask`` is true.

        Nothing changes if there is no column ``key`` of the value's type.
        """
        self._check_mask(mask)
        column = self._columns.get(key)
        if column is None:
            return
        ok, value = _fits(column, new_value)
        if not ok:
            return
        for position, selected in enumerate(mask):
            if selected:
                column.update_entry(position, value)

    def remove_records(self, mask: Column[Any]) -> None:
        """Delete the records where ``mask`` is true."""
        self._check_mask(mask)
        doomed = [position for position, selected in enumerate(mask) if selected]
        for position in reversed(doomed):
            for column in self._columns.values():
                column.remove_entry(position)
        self._num_rows -= len(doomed)

    def rows(self) -> Iterator[tuple[Any, ...]]:
        """Yield each record as a tuple of values in key order."""
        return zip(*self._columns.values()) if self._columns else iter(())

    def __len__(self) -> int:
        return self._num_rows