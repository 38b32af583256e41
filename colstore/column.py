"""A named, typed sequence of values with element-wise comparison and filtering."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_RESULT_KEY = "Temp Column"
_SIZE_MISMATCH = "Different column size while doing indexing!"


class Column(Generic[T]):
    """An ordered list of values identified by a key, with a default value.

    Comparison and logical operators work element by element and return a new
    boolean column, which can then be used as a mask with ``column[mask]``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, key: str, default_value: T, values: Iterable[T] = ()) -> None:
        self.key = key
        self.default_value = default_value
        self._data: list[T] = list(values)

    def __repr__(self) -> str:
        return f"Column({self.key!r}, {self.default_value!r}, {self._data!r})"

    def add_entry(self, value: T) -> None:
        """Append a value."""
        self._data.append(value)

    def add_default(self, count: int = 1) -> None:
        """Append the default value ``count`` times."""
        self._data.extend(self.default_value for _ in range(count))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __getitem__(self, index):
        """Return the value at ``index``, or the entries selected by a boolean column."""
        if isinstance(index, Column):
            return self._filter(index)
        position = operator.index(index)
        if not -len(self._data) <= position < len(self._data):
            raise IndexError("Index out of range")
        return self._data[position]

    def __setitem__(self, index: int, value: T) -> None:
        position = operator.index(index)
        if not -len(self._data) <= position < len(self._data):
            raise IndexError("Index out of range")
        self._data[position] = value

    def _in_range(self, index: int) -> bool:
        return -len(self._data) <= index < len(self._data)

    def remove_entry(self, index: int) -> None:
        """Remove the entry at ``index``; an index out of range is ignored."""
        if self._in_range(index):
            del self._data[index]

    def update_entry(self, index: int, value: T) -> None:
        """Replace the entry at ``index``; an index out of range is ignored."""
        if self._in_range(index):
            self._data[index] = value

    def concat(self, other: Column[T]) -> Column[T]:
        """Return a new column holding this column's entries followed by ``other``'s."""
        return Column(self.key, self.default_value, [*self._data, *other._data])

    def rename(self, new_key: str) -> None:
        """Change the key of this column."""
        self.key = new_key

    def _filter(self, mask: Column[Any]) -> Column[T]:
        if len(mask) != len(self._data):
            raise ValueError(_SIZE_MISMATCH)
        return Column(
            self.key,
            self.default_value,
            (value for value, keep in zip(self._data, mask) if keep),
        )

    def _elementwise(self, other: Any, func: Callable[[Any, Any], Any]) -> Column[bool]:
        if isinstance(other, Column):
            if len(other) != len(self._data):
                raise ValueError(_SIZE_MISMATCH)
            results = (bool(func(a, b)) for a, b in zip(self._data, other))
        else:
            results = (bool(func(a, other)) for a in self._data)
        return Column(_RESULT_KEY, False, results)

    def __eq__(self, other: Any) -> Column[bool]:  # type: ignore[override]
        return self._elementwise(other, operator.eq)

    def __ne__(self, other: Any) -> Column[bool]:  # type: ignore[override]
        return self._elementwise(other, operator.ne)

    def __lt__(self, other: Any) -> Column[bool]:
        return self._elementwise(other, operator.lt)

    def __le__(self, other: Any) -> Column[bool]:
        return self._elementwise(other, operator.le)

    def __gt__(self, other: Any) -> Column[bool]:
        return self._elementwise(other, operator.gt)

    def __ge__(self, other: Any) -> Column[bool]:
        return self._elementwise(other, operator.ge)

    def __invert__(self) -> Column[bool]:
        return Column(_RESULT_KEY, False, (not value for value in self._data))

    def __or__(self, other: Column[Any]) -> Column[bool]:
        if not isinstance(other, Column):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a or b)

    def __and__(self, other: Column[Any]) -> Column[bool]:
        if not isinstance(other, Column):
            return NotImplemented
        return self._elementwise(other, lambda a, b: a and b)