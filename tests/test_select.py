from types import SimpleNamespace

import pytest

from paperscore.dataframe.column import Column, ColumnType, SummaryType
from paperscore.dataframe.index import Index
from paperscore.dataframe.select import (
    col,
    derive_floats,
    derive_ints,
    derive_strings,
    rename,
)

NAMES = ["George", "Thomas", "Henry"]
AGES = [52, 48, 57]


def _index():
    data = SimpleNamespace(
        columns=[
            Column(name="Name", values=NAMES, format="%-10s"),
            Column(name="Age", values=AGES, summary=SummaryType.SUM),
        ]
    )
    return Index(data)


def test_col_returns_the_column():
    idx = _index()
    assert col("Age")(idx) is idx.column("Age")
    assert col("Nope")(idx) is None


def test_rename_copies_column():
    idx = _index()
    renamed = rename("Name", "Who")(idx)
    assert renamed.name == "Who"
    assert renamed.values == NAMES
    assert renamed.format == "%-10s"
    renamed.append("Extra")
    assert idx.column("Name").values == NAMES


def test_rename_missing_raises():
    with pytest.raises(KeyError):
        rename("Nope", "X")(_index())


def test_with_modifiers():
    idx = _index()
    column = rename("Age", "A").with_format("%3d").with_summary(SummaryType.AVERAGE)(idx)
    assert column.format == "%3d"
    assert column.summary is SummaryType.AVERAGE
    column = rename("Age", "B").with_summary_format("%5.2f")(idx)
    assert column.summary_format == "%5.2f"


def test_with_pct():
    column = rename("Age", "Pct").with_pct()(_index())
    assert column.format == "%4d"
    assert column.summary is SummaryType.AVERAGE
    assert column.summary_format == "%4.0f"


def test_derive_ints_and_floats():
    idx = _index()
    ints = derive_ints("Row", lambda index, i: i)(idx)
    assert ints.values == list(range(len(AGES)))
    assert ints.column_type() is ColumnType.INT
    floats = derive_floats("AgeF", lambda index, i: index.int_at(i, "Age"))(idx)
    assert floats.values == [float(a) for a in AGES]
    assert floats.column_type() is ColumnType.FLOAT


def test_derive_strings():
    strings = derive_strings("Upper", lambda index, i: index.string_at(i, "Name").upper())(_index())
    assert strings.values == [n.upper() for n in NAMES]
    assert strings.name == "Upper"


def test_derive_on_empty_data():
    idx = Index(SimpleNamespace(columns=[]))
    column = derive_strings("S", lambda index, i: "x")(idx)
    assert len(column) == 0
    assert column.column_type() is ColumnType.STRING