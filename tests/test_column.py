import pytest

from paperscore.dataframe.column import (
    Column,
    ColumnType,
    SummaryType,
    format_value,
    new_empty_column,
    round_to_format,
)


def test_get_width():
    col = Column(format="%-10s")
    assert col.width() == 10
    col.format = "% 6.2f"
    assert col.width() == 6
    assert format_value("% 6.2f", 10.48) == " 10.48"


def test_append():
    col = Column()
    col.append(1, 2, 3, 4, 5)
    assert col.values == [1, 2, 3, 4, 5]
    assert col.column_type() is ColumnType.INT


def test_default_width_uses_name():
    assert Column(name="Short").width() == 8
    assert Column(name="AVeryLongName").width() == len("AVeryLongName")
    assert Column(name="X", format="%d").width() == 8


def test_default_formats():
    assert Column(values=[1]).effective_format() == "%8d"
    assert Column(values=["a"]).effective_format() == "%-8s"
    assert Column(values=[1.0]).effective_format() == "%8.4f"
    assert Column().effective_format() == "%8v"


def test_format_value_verbs():
    assert format_value("%8v", 3) == "       3"
    assert format_value("%-8s", "ab") == "ab      "
    assert format_value("%2d", 7) == " 7"
    assert format_value("%4s", None) == "    "


def test_round_to_format():
    assert round_to_format("%5.1f", 3.14159) == 3.1
    assert round_to_format("%s", "abc") == 0.0


def test_summary_average_and_sum():
    col = Column(name="Age", summary=SummaryType.AVERAGE, values=[52, 48, 57])
    assert col.summary_value() == pytest.approx(157 / 3)
    assert col.summary_format_spec() == "%6.1f"
    col.summary = SummaryType.SUM
    assert col.summary_value() == 157
    col.summary = SummaryType.NONE
    assert col.summary_value() is None


def test_summary_of_strings_is_none():
    col = Column(summary=SummaryType.SUM, values=["a"])
    assert col.summary_value() is None


def test_empty_copy_keeps_type():
    col = Column(name="F", format="%5.1f", summary=SummaryType.SUM, summary_format="%3f", values=[1.5])
    copy = col.empty_copy()
    assert len(copy) == 0
    assert copy.column_type() is ColumnType.FLOAT
    assert copy.name == "F"
    assert copy.format == "%5.1f"
    assert copy.summary is SummaryType.SUM
    assert copy.summary_format == ""


def test_append_type_mismatch():
    col = Column(values=["x"])
    with pytest.raises(TypeError):
        col.append(3)
    with pytest.raises(TypeError):
        Column().append(True)


def test_append_int_into_float_column():
    col = new_empty_column("F", ColumnType.FLOAT)
    col.append(2)
    assert col.values == [2.0]
    assert isinstance(col.values[0], float)


def test_new_empty_column_invalid():
    with pytest.raises(ValueError):
        new_empty_column("x", ColumnType.INVALID)


def test_append_zero():
    col = new_empty_column("S", ColumnType.STRING)
    col.append_zero()
    assert col.values == [""]
    with pytest.raises(ValueError):
        Column().append_zero()


def test_value_out_of_range():
    col = Column(values=[10, 20])
    assert col.value(1) == 20
    assert col.value(2) is None
    with pytest.raises(IndexError):
        col.value(-1)


def test_type_names():
    assert str(new_empty_column("i", ColumnType.INT).column_type()) == "Int"
    assert str(new_empty_column("s", ColumnType.STRING).column_type()) == "String"