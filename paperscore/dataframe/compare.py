"""Row comparisons over columns, for sorting data by row number."""

from __future__ import annotations

from typing import Callable

from paperscore.dataframe.column import Column

Comparison = Callable[[int, int], int]


def _sign(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _at(column: Column, row: int, default):
    value = column.value(row)
    return default if value is None else value


def descending(cmp: Comparison) -> Comparison:
    """Reverse a comparison."""
    return lambda r1, r2: -cmp(r1, r2)


def compare_string(column: Column) -> Comparison:
    return lambda r1, r2: _sign(_at(column, r1, ""), _at(column, r2, ""))


def compare_int(column: Column) -> Comparison:
    return lambda r1, r2: _sign(_at(column, r1, 0), _at(column, r2, 0))


def compare_float(column: Column) -> Comparison:
    return lambda r1, r2: _sign(_at(column, r1, 0.0), _at(column, r2, 0.0))


def less(*comparisons: Comparison) -> Callable[[int, int], bool]:
    """A less-than on rows: the first comparison that differs decides."""

    def is_less(i: int, j: int) -> bool:
        for cmp in comparisons:
            c = cmp(i, j)
            if c:
                return c < 0
        return False

    return is_less