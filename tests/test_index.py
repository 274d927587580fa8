from types import SimpleNamespace

import pytest

from paperscore.dataframe.column import Column
from paperscore.dataframe.index import Index


def _data():
    return SimpleNamespace(
        columns=[
            Column(name="Name", values=["George", "Thomas"]),
            Column(name="Age", values=[52, 48]),
            Column(name="Weight", values=[70.5, 80.25]),
        ]
    )


def test_column_lookup():
    data = _data()
    idx = Index(data)
    assert idx.column("Age") is data.columns[1]
    assert idx.column("Missing") is None


def test_typed_values():
    idx = Index(_data())
    assert idx.string_at(1, "Name") == "Thomas"
    assert idx.int_at(0, "Age") == 52
    assert idx.float_at(1, "Weight") == 80.25
    assert idx.value(0, "Name") == "George"


def test_defaults_past_end():
    idx = Index(_data())
    assert idx.int_at(9, "Age") == 0
    assert idx.float_at(9, "Weight") == 0.0
    assert idx.string_at(9, "Name") == ""


def test_missing_column_raises():
    idx = Index(_data())
    with pytest.raises(KeyError):
        idx.value(0, "Nope")


def test_update_sees_new_columns():
    data = _data()
    idx = Index(data)
    extra = Column(name="Extra", values=[1])
    data.columns.append(extra)
    assert idx.column("Extra") is None
    idx.update()
    assert idx.column("Extra") is extra