import pytest

from paperscore.dataframe.column import Column, ColumnType, SummaryType
from paperscore.dataframe.data import Data
from paperscore.dataframe.group import a_count, a_func, a_sum, group_by

TEAMS = ["a", "b", "a", "c", "b", "a"]
RUNS = [1, 2, 3, 4, 5, 6]
AVGS = [0.5, 1.5, 2.5, 3.5, 4.5, 5.5]


def _data():
    return Data(
        columns=[
            Column(name="Team", values=TEAMS),
            Column(name="Runs", values=RUNS, format="%3d", summary=SummaryType.SUM),
            Column(name="Avg", values=AVGS),
        ]
    )


def test_group_by_orders_groups_by_first_appearance():
    grouped = group_by(_data(), "Team")
    assert [g.values[0] for g in grouped.groups] == list(dict.fromkeys(TEAMS))
    for group in grouped.groups:
        team = group.values[0]
        assert all(TEAMS[row] == team for row in group.rows)
    assert sorted(r for g in grouped.groups for r in g.rows) == list(range(len(TEAMS)))


def test_aggregate_count_and_sum():
    dat = _data()
    out = group_by(dat, "Team").aggregate(a_count("N"), a_sum("Total", dat.column("Runs")))
    assert [c.name for c in out.columns] == ["Team", "N", "Total"]
    assert out.column("Team").values == list(dict.fromkeys(TEAMS))
    assert sum(out.column("N").values) == len(TEAMS)
    assert sum(out.column("Total").values) == sum(RUNS)
    for team, n in zip(out.column("Team").values, out.column("N").values):
        assert n == TEAMS.count(team)


def test_aggregate_float_sum_keeps_type():
    dat = _data()
    out = group_by(dat, "Team").aggregate(a_sum("W", dat.column("Avg")))
    column = out.column("W")
    assert column.column_type() is ColumnType.FLOAT
    assert sum(column.values) == pytest.approx(sum(AVGS))


def test_group_columns_drop_summary_keep_format():
    out = group_by(_data(), "Runs").aggregate(a_count("N"))
    runs = out.column("Runs")
    assert runs.format == "%3d"
    assert runs.summary is SummaryType.NONE
    assert runs.values == RUNS
    assert out.column("N").values == [1] * len(RUNS)


def test_group_by_several_columns():
    grouped = group_by(_data(), "Team", "Runs")
    assert len(grouped.groups) == len(RUNS)
    assert [g.values for g in grouped.groups] == [list(p) for p in zip(TEAMS, RUNS)]


def test_aggregation_modifiers():
    agg = a_count("N").with_format("%3d").with_summary(SummaryType.SUM).with_summary_format("%4d")
    out = group_by(_data(), "Team").aggregate(agg)
    column = out.column("N")
    assert column.format == "%3d"
    assert column.summary is SummaryType.SUM
    assert column.summary_format == "%4d"
    assert column.summary_value() == len(TEAMS)


def test_a_func_custom_aggregation():
    def rows(target, group):
        target.append(",".join(str(r) for r in group.rows))

    out = group_by(_data(), "Team").aggregate(a_func("Rows", ColumnType.STRING, rows))
    column = out.column("Rows")
    assert column.column_type() is ColumnType.STRING
    first_rows = [i for i, t in enumerate(TEAMS) if t == TEAMS[0]]
    assert column.values[0] == ",".join(str(r) for r in first_rows)


def test_a_sum_rejects_strings():
    with pytest.raises(TypeError):
        a_sum("Bad", _data().column("Team"))


def test_group_by_unknown_column():
    with pytest.raises(KeyError):
        group_by(_data(), "Missing")