"""Selections: functions that pick or derive a column from an index."""

from __future__ import annotations

from typing import Any, Callable

from paperscore.dataframe.column import Column, ColumnType, SummaryType
from paperscore.dataframe.index import Index


def _row_count(data: Any) -> int:
    return max((len(c) for c in data.columns), default=0)


class Selection:
    """A callable that produces a column from an index of a data set."""

    def __init__(self, func: Callable[[Index], Column | None]) -> None:
        self._func = func

    def __call__(self, index: Index) -> Column | None:
        return self._func(index)

    def _then(self, change: Callable[[Column], None]) -> Selection:
        def select(index: Index) -> Column | None:
            column = self(index)
            if column is not None:
                change(column)
            return column

        return Selection(select)

    def with_summary(self, summary: SummaryType) -> Selection:
        return self._then(lambda c: setattr(c, "summary", summary))

    def with_summary_format(self, spec: str) -> Selection:
        return self._then(lambda c: setattr(c, "summary_format", spec))

    def with_format(self, spec: str) -> Selection:
        return self._then(lambda c: setattr(c, "format", spec))

    def with_pct(self) -> Selection:
        """Format as a whole-number percentage, averaged in the summary row."""

        def change(column: Column) -> None:
            column.format = "%4d"
            column.summary = SummaryType.AVERAGE
            column.summary_format = "%4.0f"

        return self._then(change)


def col(name: str) -> Selection:
    """Select a column by name."""
    return Selection(lambda index: index.column(name))


def rename(name: str, new_name: str) -> Selection:
    """Select a column by name under a new name."""

    def select(index: Index) -> Column:
        column = index.column(name)
        if column is None:
            raise KeyError(name)
        return Column(
            name=new_name,
            format=column.format,
            summary=column.summary,
            summary_format=column.summary_format,
            values=column.values,
            kind=column.kind,
        )

    return Selection(select)


def _derive(name: str, kind: ColumnType, func: Callable[[Index, int], Any]) -> Selection:
    def select(index: Index) -> Column:
        values = [func(index, row) for row in range(_row_count(index.data))]
        return Column(name=name, values=values, kind=kind)

    return Selection(select)


def derive_ints(name: str, func: Callable[[Index, int], int]) -> Selection:
    return _derive(name, ColumnType.INT, func)


def derive_floats(name: str, func: Callable[[Index, int], float]) -> Selection:
    return _derive(name, ColumnType.FLOAT, lambda idx, i: float(func(idx, i)))


def derive_strings(name: str, func: Callable[[Index, int], str]) -> Selection:
    return _derive(name, ColumnType.STRING, func)