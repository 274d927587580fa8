"""A data set of named, typed columns with rendering, sorting and reshaping."""

from __future__ import annotations

import csv
import dataclasses
import functools
import io
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, TextIO

from paperscore.dataframe.column import (
    Column,
    ColumnType,
    SummaryType,
    format_value,
    round_to_format,
)
from paperscore.dataframe.index import Index
from paperscore.dataframe.select import Selection

_ZERO = {ColumnType.INT: 0, ColumnType.FLOAT: 0.0, ColumnType.STRING: ""}


def _cell(column: Column, row: int) -> Any:
    """The value at ``row``, or the zero of the column's type past its end."""
    value = column.value(row)
    if value is None:
        return _ZERO.get(column.kind)
    return value


def _center(text: str, width: int) -> str:
    if len(text) >= width:
        return text
    left = (width - len(text)) // 2
    return " " * left + text + " " * (width - len(text) - left)


def _as_mapping(obj: Any) -> dict[str, Any]:
    if isinstance(obj, Mapping):
        return dict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: getattr(obj, f.name)
            for f in dataclasses.fields(obj)
            if not f.name.startswith("_")
        }
    return {k: v for k, v in vars(obj).items() if not k.startswith("_")}


def _is_storable(value: Any) -> bool:
    return isinstance(value, (bool, int, float, str))


@dataclass(eq=False)
class Data:
    """A named list of columns, read row by row."""

    name: str = ""
    columns: list[Column] = field(default_factory=list)

    def append_struct(self, index: Index | None, obj: Any) -> Index:
        """Append one row from the public fields of an object."""
        if not isinstance(obj, Mapping):
            update = getattr(obj, "update", None)
            if callable(update):
                update()
        return self.append_map(index, _as_mapping(obj))

    def append_map(self, index: Index | None, mapping: Mapping[str, Any]) -> Index:
        """Append one row from a mapping; unknown keys add columns on the first call.

        Booleans are stored as 1 or 0; values of other types are ignored.
        """
        if index is None:
            index = self.index()
            for key, value in mapping.items():
                if index.column(key) is None and _is_storable(value):
                    self.columns.append(Column(name=key))
            index = self.index()
        for key, value in mapping.items():
            column = index.column(key)
            if column is None or not _is_storable(value):
                continue
            if isinstance(value, bool):
                column.append(1 if value else 0)
            else:
                column.append(value)
        return index

    def arrange(self, *names: str) -> None:
        """Move the named columns to the front, in the order given."""
        index = self.index()
        front = []
        for name in names:
            column = index.column(name)
            if column is None:
                raise KeyError(name)
            front.append(column)
        placed = set(names)
        rest = []
        for column in self.columns:
            if column.name not in placed:
                placed.add(column.name)
                rest.append(column)
        self.columns = front + rest

    def remove_column(self, name: str) -> None:
        self.columns = [c for c in self.columns if c.name != name]

    def index(self) -> Index:
        return Index(self)

    def column(self, name: str) -> Column | None:
        return next((c for c in self.columns if c.name == name), None)

    def row(self, row: int) -> list[Any]:
        """The values of one row, zero-filled where a column is short."""
        return [_cell(c, row) for c in self.columns]

    def filter_rows(self, predicate: Callable[[int], bool]) -> Data:
        """A new data set holding the rows for which ``predicate`` is true."""
        result = Data(name=self.name, columns=[c.empty_copy() for c in self.columns])
        for row in range(self.row_count()):
            if predicate(row):
                for source, target in zip(self.columns, result.columns):
                    if source.kind is not ColumnType.INVALID:
                        target.append(_cell(source, row))
        return result

    def row_count(self) -> int:
        return max((len(c) for c in self.columns), default=0)

    def sort_rows(self, less: Callable[[int, int], bool]) -> Data:
        """A new data set with rows ordered by ``less`` on row numbers."""

        def compare(a: int, b: int) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        order = sorted(range(self.row_count()), key=functools.cmp_to_key(compare))
        columns = []
        for source in self.columns:
            values = []
            if source.kind is not ColumnType.INVALID:
                values = [_cell(source, order[row]) for row in range(len(source))]
            columns.append(
                Column(
                    name=source.name,
                    format=source.format,
                    summary=source.summary,
                    summary_format=source.summary_format,
                    values=values,
                    kind=source.kind,
                )
            )
        return Data(name=self.name, columns=columns)

    def extend(self, other: Data) -> None:
        """Append the rows of ``other`` to the columns of the same name."""
        index = other.index()
        for column in self.columns:
            source = index.column(column.name)
            if source is not None and column.kind is not ColumnType.INVALID:
                column.append(*source.values)

    def has_summary(self) -> bool:
        return any(c.summary is not SummaryType.NONE for c in self.columns)

    def __str__(self) -> str:
        lines = []
        if self.name:
            width = len(self.columns) + sum(c.width() for c in self.columns)
            lines.append(_center(self.name, width))
        lines.append(" ".join(_center(c.name, c.width()) for c in self.columns))
        rows = self.row_count()
        for row in range(rows):
            lines.append(
                " ".join(
                    format_value(c.effective_format(), v)
                    for c, v in zip(self.columns, self.row(row))
                )
            )
        if self.has_summary() and rows > 0:
            lines.append(
                " ".join(
                    ("-" * c.width() if c.summary is not SummaryType.NONE else "").rjust(c.width())
                    for c in self.columns
                )
            )
            lines.append(
                " ".join(
                    format_value(c.summary_format_spec(), c.summary_value())
                    if c.summary is not SummaryType.NONE
                    else " ".rjust(c.width())
                    for c in self.columns
                )
            )
        return "\n".join(lines) + "\n"

    def render_csv(self, stream: TextIO, with_header: bool) -> None:
        """Write the rows as CSV, each value formatted and trimmed."""
        writer = csv.writer(stream, lineterminator="\n")
        if with_header:
            writer.writerow([c.name for c in self.columns])
        for row in range(self.row_count()):
            writer.writerow(
                [format_value(c.effective_format(), c.value(row)).strip() for c in self.columns]
            )

    def render_markdown(self, stream: TextIO) -> None:
        """Write the data as a markdown table."""
        if self.name:
            stream.write(f"# {self.name}\n")
        stream.write("".join(f"| {c.name:>{c.width()}} " for c in self.columns) + "|\n")
        stream.write("".join(f"| {'-' * max(c.width(), 3)} " for c in self.columns) + "|\n")
        for row in range(self.row_count()):
            stream.write(
                "".join(
                    f"| {format_value(c.effective_format(), c.value(row))} " for c in self.columns
                )
                + "|\n"
            )
        if self.has_summary():
            cells = []
            for c in self.columns:
                if c.summary is not SummaryType.NONE:
                    text = format_value(c.summary_format_spec(), c.summary_value())
                else:
                    text = "".rjust(c.width())
                cells.append(f"| {text} ")
            stream.write("".join(cells) + "|\n")

    def markdown(self) -> str:
        out = io.StringIO()
        self.render_markdown(out)
        return out.getvalue()

    def to_json(self) -> str:
        """JSON with column definitions, row objects and any summary row."""
        result: dict[str, Any] = {
            "columnDefs": [{"field": c.name, "type": str(c.kind)} for c in self.columns],
        }
        rows = []
        for row in range(self.row_count()):
            record: dict[str, Any] = {}
            for c in self.columns:
                if c.kind is ColumnType.FLOAT:
                    record[c.name] = round_to_format(c.effective_format(), _cell(c, row))
                elif c.kind in (ColumnType.INT, ColumnType.STRING):
                    record[c.name] = _cell(c, row)
            rows.append(record)
        result["rowData"] = rows
        if self.has_summary():
            summary: dict[str, Any] = {}
            for c in self.columns:
                if c.summary is not SummaryType.NONE:
                    value = c.summary_value()
                    if isinstance(value, float):
                        value = round_to_format(c.summary_format_spec(), value)
                    summary[c.name] = value
            result["summaryRow"] = summary
        return json.dumps(result, sort_keys=True)

    def rotate(self, fixed: Sequence[str], pivot: str) -> Data:
        """A limited pivot table.

        The result holds the fixed columns, then one column for each value of
        the pivot column crossed with each remaining column.
        """
        rotated = Data()
        index = self.index()
        fixed_columns = []
        for name in fixed:
            column = index.column(name)
            if column is None:
                raise KeyError(name)
            fixed_columns.append(column)
            rotated.columns.append(column.empty_copy())
        pivot_column = index.column(pivot)
        if pivot_column is None:
            raise KeyError(pivot)

        def pivot_key(row: int) -> str:
            return format_value(pivot_column.effective_format(), pivot_column.value(row)).strip()

        pivot_values = sorted({pivot_key(row) for row in range(len(pivot_column))})
        pivot_positions = {value: i for i, value in enumerate(pivot_values)}
        fixed_names = set(fixed)
        moving = [c for c in self.columns if c.name != pivot and c.name not in fixed_names]
        for value in pivot_values:
            for column in moving:
                copy = column.empty_copy()
                copy.name = f"{value}-{column.name}"
                rotated.columns.append(copy)

        previous: list[Any] = [None] * len(fixed_columns)
        for row in range(self.row_count()):
            current = [c.value(row) for c in fixed_columns]
            if current != previous:
                for target, value in zip(rotated.columns, current):
                    target.append(value)
            previous = current
            base = len(fixed_columns) + pivot_positions.get(pivot_key(row), 0) * len(moving)
            for i, column in enumerate(moving):
                rotated.columns[base + i].append(column.value(row))
        return rotated

    def select(self, *selections: Selection) -> Data:
        """A new data set made of the selected columns."""
        index = self.index()
        columns = []
        for selection in selections:
            column = selection(index)
            if column is None:
                raise ValueError("cannot select a column")
            columns.append(column)
        return Data(name=self.name, columns=columns)

    def add(self, *selections: Selection) -> None:
        """Add the selected columns to this data set."""
        index = self.index()
        for selection in selections:
            column = selection(index)
            if column is None:
                raise ValueError("cannot add nil column")
            if index.column(column.name) is not None:
                raise ValueError(f"cannot add duplicate column {column.name}")
            self.columns.append(column)


def from_structs(name: str, values: Sequence[Any]) -> Data:
    """A data set with one row for each object in ``values``."""
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"sequence required, not {type(values).__name__}")
    data = Data(name=name)
    index = None
    for value in values:
        index = data.append_struct(index, value)
    return data