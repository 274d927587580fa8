"""Runner advances such as ``1-2``, ``B-1`` or ``2X3(64)``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from paperscore.game.errors import GameError, Position
from paperscore.game.fielding import FieldingError, parse_fielding_error

BASE_NUMBER = {"1": 0, "2": 1, "3": 2, "H": 3}
PREVIOUS_BASE = {"H": "3", "3": "2", "2": "1"}
NEXT_BASE = {"1": "2", "2": "3", "3": "H"}
RUNNER_NUMBER = {"1": 0, "2": 1, "3": 2}

_ADVANCE = re.compile(r"([B123])([X-])([123H])(?:\(([^)]+)\))?")


@dataclass(eq=False)
class Advance:
    """A runner moving, or being put out, between two bases."""

    code: str
    from_base: str
    to_base: str
    out: bool = False
    fielders: list[int] = field(default_factory=list)
    runner_interference: bool = False
    implied: bool = False
    runner: str = ""
    wild_pitch: bool = False
    passed_ball: bool = False
    steal: bool = False
    fielding_error: FieldingError = field(default_factory=FieldingError)


class Advances(list):
    """The advances on a play."""

    def from_base(self, base: str) -> Advance | None:
        return next((adv for adv in self if adv.from_base == base), None)


def parse_advance(code: str, pos: Position) -> Advance:
    """Parse one advance code; raise GameError if it is malformed."""
    match = _ADVANCE.fullmatch(code)
    if match is None:
        raise GameError("illegal advance code %s", pos, code)
    detail = match.group(4) or ""
    advance = Advance(
        code=code,
        from_base=match.group(1),
        to_base=match.group(3),
        out=match.group(2) == "X",
    )
    if advance.out:
        if detail == "RINT":
            advance.runner_interference = True
        else:
            for ch in detail:
                if not "1" <= ch <= "9":
                    raise GameError(
                        "illegal fielder %c for put out in advance code %s", pos, ch, code
                    )
                advance.fielders.append(int(ch))
            if not advance.fielders:
                raise GameError("no fielders for put out in advance code %s", pos, code)
    elif detail == "WP":
        advance.wild_pitch = True
    elif detail == "PB":
        advance.passed_ball = True
    elif detail:
        advance.fielding_error = parse_fielding_error(detail, pos)
    return advance


def parse_advances(
    codes: Iterable[str], pos: Position, batter: str, runners: Sequence[str]
) -> Advances:
    """Parse advance codes, naming the runner of each from the batter and runners."""
    advances = Advances()
    for code in codes:
        advance = parse_advance(code, pos)
        if advances.from_base(advance.from_base) is not None:
            raise GameError("cannot advance %s twice in %s", pos, advance.from_base, code)
        if advance.from_base == "B":
            advance.runner = batter
        else:
            advance.runner = runners[RUNNER_NUMBER[advance.from_base]]
            if not advance.runner:
                raise GameError(
                    "no runner to advance from %s in %s", pos, advance.from_base, code
                )
        advances.append(advance)
    return advances