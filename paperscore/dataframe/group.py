"""Grouping rows by column values and aggregating each group."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from paperscore.dataframe.column import Column, ColumnType, SummaryType, new_empty_column
from paperscore.dataframe.data import Data


@dataclass
class Group:
    """The shared values of the grouping columns and the rows that hold them."""

    values: list[Any] = field(default_factory=list)
    rows: list[int] = field(default_factory=list)


@dataclass
class Aggregation:
    """Builds a result column and fills it with one value per group."""

    create_column: Callable[[], Column]
    aggregate_func: Callable[[Column, Group], None]

    def _with(self, change: Callable[[Column], None]) -> Aggregation:
        def create() -> Column:
            column = self.create_column()
            change(column)
            return column

        return Aggregation(create, self.aggregate_func)

    def with_format(self, spec: str) -> Aggregation:
        return self._with(lambda c: setattr(c, "format", spec))

    def with_summary(self, summary: SummaryType) -> Aggregation:
        return self._with(lambda c: setattr(c, "summary", summary))

    def with_summary_format(self, spec: str) -> Aggregation:
        return self._with(lambda c: setattr(c, "summary_format", spec))


@dataclass
class GroupBy:
    """Rows of a data set grouped by the values of some of its columns."""

    columns: list[Column] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)

    def aggregate(self, *aggregations: Aggregation) -> Data:
        """One row per group: the grouping values followed by each aggregate."""
        data = Data()
        for column in self.columns:
            copy = column.empty_copy()
            copy.summary = SummaryType.NONE
            copy.summary_format = ""
            data.columns.append(copy)
        data.columns.extend(agg.create_column() for agg in aggregations)
        count = len(self.columns)
        for group in self.groups:
            for target, value in zip(data.columns, group.values):
                target.append(value)
            for offset, agg in enumerate(aggregations):
                agg.aggregate_func(data.columns[count + offset], group)
        return data


def group_by(data: Data, *names: str) -> GroupBy:
    """Group the rows of ``data`` by the values of the named columns."""
    index = data.index()
    columns = []
    for name in names:
        column = index.column(name)
        if column is None:
            raise KeyError(name)
        columns.append(column)
    groups: dict[tuple, Group] = {}
    for row in range(data.row_count()):
        values = [c.value(row) for c in columns]
        group = groups.setdefault(tuple(values), Group(values=values))
        group.rows.append(row)
    return GroupBy(columns=columns, groups=list(groups.values()))


def a_func(
    name: str, column_type: ColumnType, func: Callable[[Column, Group], None]
) -> Aggregation:
    """An aggregation into a new column of ``column_type`` filled by ``func``."""
    return Aggregation(lambda: new_empty_column(name, column_type), func)


def a_count(name: str) -> Aggregation:
    """The number of rows in each group."""
    return Aggregation(
        lambda: new_empty_column(name, ColumnType.INT),
        lambda target, group: target.append(len(group.rows)),
    )


def a_sum(name: str, column: Column) -> Aggregation:
    """The sum of an int or float column over each group."""
    kind = column.column_type()
    if kind not in (ColumnType.INT, ColumnType.FLOAT):
        raise TypeError("can only sum int or floats")
    zero = 0 if kind is ColumnType.INT else 0.0

    def aggregate(target: Column, group: Group) -> None:
        total = zero
        for row in group.rows:
            value = column.value(row)
            if value is not None:
                total += value
        target.append(total)

    return Aggregation(lambda: new_empty_column(name, kind), aggregate)