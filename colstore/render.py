"""Text rendering of tables as boxed grids."""

from __future__ import annotations

from typing import Any

from colstore.column import Column
from colstore.table import Table

_BOOL_WIDTH = 5


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _width(column: Column[Any]) -> int:
    if isinstance(column.default_value, bool):
        return max(len(column.key), _BOOL_WIDTH)
    return max([len(column.key), *(len(_format(value)) for value in column)])


def _line(cells: list[str], widths: list[int]) -> str:
    parts = (f" {text}{' ' * (width + 1 - len(text))}|" for text, width in zip(cells, widths))
    return "|" + "".join(parts)


def render(table: Table) -> str:
    """Return the table as text: its name, a header row and one row per record."""
    lines = [f"Table: {table.name}"]
    keys = table.keys()
    if not keys:
        lines += ["+--+", "|  |", "+--+"]
        return "\n".join(lines) + "\n"

    widths = [_width(table.get(key)) for key in keys]
    bar = "+" + "-" * (sum(widths) + 3 * len(widths) - 1) + "+"
    lines += [bar, _line(keys, widths), bar]
    for row in table.rows():
        lines.append(_line([_format(value) for value in row], widths))
        lines.append(bar)
    return "\n".join(lines) + "\n"


def print_table(table: Table) -> None:
    """Write the rendered table to standard output."""
    print(render(table), end="")