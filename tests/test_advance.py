import pytest

from paperscore.game.advance import Advances, parse_advance, parse_advances
from paperscore.game.errors import GameError, Position

POS = Position("t.gm", 4)


def test_advance_from_source():
    a = parse_advance("B-1", POS)
    assert a.from_base == "B"
    a = parse_advance("1X2(64)", POS)
    assert a.out
    assert a.fielders == [6, 4]
    a = parse_advance("3-H(E2/TH)", POS)
    assert not a.out
    assert a.fielding_error.fielder == 2


def test_advances_from_source():
    advs = parse_advances(["B-1", "1-2", "2-3"], POS, "b1", ["r1", "r2", ""])
    assert len(advs) == 3
    assert advs.from_base("B") is not None
    assert advs.from_base("B").runner == "b1"
    assert advs.from_base("2").runner == "r2"


def test_advance_details():
    assert parse_advance("1-2(WP)", POS).wild_pitch
    assert parse_advance("1-2(PB)", POS).passed_ball
    assert parse_advance("1X2(RINT)", POS).runner_interference
    plain = parse_advance("2-3", POS)
    assert (plain.from_base, plain.to_base, plain.out) == ("2", "3", False)


@pytest.mark.parametrize("code", ["B-4", "H-1", "1X2", "1X2()", "1X2(6a)", "1-2(X)", "B1"])
def test_bad_advances(code):
    with pytest.raises(GameError):
        parse_advance(code, POS)


def test_no_fielders_message():
    with pytest.raises(GameError, match="no fielders for put out"):
        parse_advance("1X2", POS)


def test_duplicate_advance():
    with pytest.raises(GameError, match="twice"):
        parse_advances(["1-2", "1-3"], POS, "b", ["r1", "", ""])


def test_missing_runner():
    with pytest.raises(GameError, match="no runner to advance from 3"):
        parse_advances(["3-H"], POS, "b", ["r1", "", ""])


def test_from_base_missing():
    assert Advances().from_base("1") is None