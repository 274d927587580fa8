import pytest

from paperscore.game.pitches import Pitches


@pytest.mark.parametrize(
    "seq,balls,strikes,count",
    [
        ("", 0, 0, "0-0"),
        ("B", 1, 0, "1-0"),
        ("CSBB", 2, 2, "2-2"),
        ("C.X", 0, 1, "0-1"),
        ("BCCFBX", 2, 2, "2-2"),
        ("TLBB", 2, 2, "2-2"),
        ("MM", 0, 2, "0-2"),
        ("MCL", 0, 3, "0-3"),
    ],
)
def test_count(seq, balls, strikes, count):
    assert Pitches(seq).count() == (count, balls, strikes)


def test_last():
    assert Pitches("CX").last() == "X"
    assert Pitches("").last() == ""


def test_count_up():
    ps = Pitches("LLMBL")
    assert ps.count_up("L") == 3
    assert ps.count_up("M") == 1
    assert ps.count_up("L", "M") == 4
    assert ps.count_up() == 0


def test_fouls_stop_at_two_strikes():
    _, _, strikes = Pitches("FFFFF").count()
    assert strikes == 2