from functools import cmp_to_key

from paperscore.dataframe.column import Column
from paperscore.dataframe.compare import (
    compare_float,
    compare_int,
    compare_string,
    descending,
    less,
)


def _sorted_rows(column, cmp):
    return sorted(range(len(column)), key=cmp_to_key(cmp))


def test_compare_int_orders_rows():
    col = Column(values=[5, 1, 4, 2])
    rows = _sorted_rows(col, compare_int(col))
    assert [col.values[r] for r in rows] == sorted(col.values)


def test_compare_int_signs():
    col = Column(values=[3, 9, 3])
    cmp = compare_int(col)
    assert cmp(0, 1) == -1
    assert cmp(1, 0) == 1
    assert cmp(0, 2) == 0


def test_compare_float_and_descending():
    col = Column(values=[2.5, 0.5, 9.25])
    rows = _sorted_rows(col, descending(compare_float(col)))
    assert [col.values[r] for r in rows] == sorted(col.values, reverse=True)


def test_compare_string():
    col = Column(values=["dogs", "cats", "fish"])
    rows = _sorted_rows(col, compare_string(col))
    assert [col.values[r] for r in rows] == sorted(col.values)


def test_missing_rows_compare_as_zero():
    col = Column(values=[0])
    assert compare_int(col)(0, 5) == 0


def test_less_breaks_ties_in_order():
    first = Column(values=["b", "a", "b", "a"])
    second = Column(values=[2, 9, 1, 3])
    is_less = less(compare_string(first), compare_int(second))

    def cmp(i, j):
        if is_less(i, j):
            return -1
        if is_less(j, i):
            return 1
        return 0

    rows = sorted(range(4), key=cmp_to_key(cmp))
    pairs = [(first.values[r], second.values[r]) for r in rows]
    assert pairs == sorted(zip(first.values, second.values))


def test_less_equal_rows_is_false():
    col = Column(values=[1, 1])
    is_less = less(compare_int(col))
    assert is_less(0, 1) is False
    assert is_less(1, 0) is False