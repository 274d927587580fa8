"""The game state after each play."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from paperscore.game.advance import RUNNER_NUMBER, Advances
from paperscore.game.errors import GameError, Position
from paperscore.game.modifiers import OBSTRUCTION, SACRIFICE_FLY, SACRIFICE_HIT, Modifiers
from paperscore.game.pitches import Pitches
from paperscore.game.play import Play, PlayType


class Half(str, Enum):
    TOP = "Top"
    BOTTOM = "Bottom"

    def __str__(self) -> str:
        return self.value


_NOT_AT_BAT = (
    PlayType.WALK,
    PlayType.WALK_PICKED_OFF,
    PlayType.HIT_BY_PITCH,
    PlayType.WALK_WILD_PITCH,
    PlayType.WALK_PASSED_BALL,
    PlayType.CATCHER_INTERFERENCE,
)


@dataclass(eq=False)
class PlateAppearance:
    """A batter's turn, or the part of it recorded by one play."""

    number: int = 0
    play_code: str = ""
    advances_codes: list[str] = field(default_factory=list)
    advances: Advances = field(default_factory=Advances)
    play: Play = field(default_factory=Play)
    batter: str = ""
    pitches: Pitches = Pitches("")
    complete: bool = False
    incomplete: bool = False
    modifiers: Modifiers = field(default_factory=Modifiers)

    def play_advances_code(self) -> str:
        return " ".join([self.play_code, *self.advances_codes])


@dataclass(eq=False)
class State(PlateAppearance):
    """The situation after a play: inning, outs, score and runners."""

    pos: Position = Position()
    inning_number: int = 0
    half: Half = Half.TOP
    outs: int = 0
    score: int = 0
    pitcher: str = ""
    runners: list[str] = field(default_factory=lambda: ["", "", ""])
    comment: str = ""
    last_state: State | None = None
    alternative_for: State | None = None

    def top(self) -> bool:
        return self.half is Half.TOP

    def record_out(self) -> None:
        self.outs += 1
        self.play.outs_on_play += 1

    def runs_scored(self) -> int:
        return len(self.play.scoring_runners)

    def base_runner(self, base: str) -> str:
        """The runner on ``base`` before this play; raise GameError if there is none."""
        if base == "H":
            raise GameError("a runner cannot be at H", self.pos)
        last = self.last_state
        if last is None or last.inning_number != self.inning_number:
            raise GameError("no runners are on base at the start of a half-inning", self.pos)
        runner = last.runners[RUNNER_NUMBER.get(base, 0)]
        if not runner:
            raise GameError("no runner on %s", self.pos, base)
        return runner

    def is_ab(self) -> bool:
        """Whether the completed plate appearance counts as an at bat."""
        return self.complete and not (
            self.play.is_type(*_NOT_AT_BAT)
            or (
                self.play.type is PlayType.REACHED_ON_ERROR
                and self.modifiers.contains(OBSTRUCTION)
            )
            or self.modifiers.contains(SACRIFICE_FLY, SACRIFICE_HIT)
        )


_PLAYER_ID = re.compile(r"[a-z]*\d+")


def is_player_id(s: str) -> bool:
    return _PLAYER_ID.fullmatch(s) is not None


def is_us(player_id: str) -> bool:
    """Player IDs of our team start with letters, not a bare number."""
    return bool(player_id) and not "0" <= player_id[0] <= "9"


def base_out_code(state: State) -> str:
    """Outs followed by the occupied bases, third to first, ``x`` when empty."""
    bases = "".join(
        "x" if state.outs == 3 or not state.runners[base - 1] else str(base)
        for base in (3, 2, 1)
    )
    return f"{state.outs}{bases}"