"""Play types and the outcome of a single play."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from paperscore.game.fielding import FieldingError


class PlayType(Enum):
    SINGLE = 0
    DOUBLE = 1
    GROUND_RULE_DOUBLE = 2
    TRIPLE = 3
    HOME_RUN = 4
    CAUGHT_STEALING = 5
    HIT_BY_PITCH = 6
    WALK = 7
    WALK_WILD_PITCH = 8
    WALK_PASSED_BALL = 9
    WALK_PICKED_OFF = 10
    STOLEN_BASE = 11
    PICKED_OFF = 12
    CATCHER_INTERFERENCE = 13
    REACHED_ON_ERROR = 14
    FIELDERS_CHOICE = 15
    WILD_PITCH = 16
    PASSED_BALL = 17
    GROUND_OUT = 18
    FLY_OUT = 19
    DOUBLE_PLAY = 20
    TRIPLE_PLAY = 21
    STRIKE_OUT = 22
    STRIKE_OUT_PASSED_BALL = 23
    STRIKE_OUT_WILD_PITCH = 24
    STRIKE_OUT_PICKED_OFF = 25
    STRIKE_OUT_STOLEN_BASE = 26
    STRIKE_OUT_CAUGHT_STEALING = 27
    FOUL_FLY_ERROR = 28
    NO_PLAY = 29

    def __str__(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


_HITS = frozenset(
    {PlayType.SINGLE, PlayType.DOUBLE, PlayType.TRIPLE, PlayType.HOME_RUN, PlayType.GROUND_RULE_DOUBLE}
)
_STRIKE_OUTS = frozenset(
    {
        PlayType.STRIKE_OUT,
        PlayType.STRIKE_OUT_PASSED_BALL,
        PlayType.STRIKE_OUT_PICKED_OFF,
        PlayType.STRIKE_OUT_WILD_PITCH,
        PlayType.STRIKE_OUT_STOLEN_BASE,
        PlayType.STRIKE_OUT_CAUGHT_STEALING,
    }
)
_WALKS = frozenset({PlayType.WALK, PlayType.WALK_PASSED_BALL, PlayType.WALK_PICKED_OFF})
_IN_PLAY = frozenset(
    {
        PlayType.REACHED_ON_ERROR,
        PlayType.FIELDERS_CHOICE,
        PlayType.GROUND_OUT,
        PlayType.FLY_OUT,
        PlayType.DOUBLE_PLAY,
        PlayType.TRIPLE_PLAY,
    }
)


@dataclass
class Play:
    """What happened on a play."""

    type: PlayType = PlayType.SINGLE
    fielding_error: FieldingError = field(default_factory=FieldingError)
    fielders: list[int] = field(default_factory=list)
    stolen_bases: list[str] = field(default_factory=list)
    scoring_runners: list[str] = field(default_factory=list)
    outs_on_play: int = 0
    picked_off_runner: str = ""
    caught_stealing_runner: str = ""
    caught_stealing_base: str = ""
    not_out_on_play: bool = False

    def is_type(self, *types: PlayType) -> bool:
        return self.type in types

    def is_hit(self) -> bool:
        return self.type in _HITS

    def is_strike_out(self) -> bool:
        return self.type in _STRIKE_OUTS

    def is_walk(self) -> bool:
        return self.type in _WALKS

    def is_ball_in_play(self) -> bool:
        return self.is_hit() or self.type in _IN_PLAY