"""Play modifiers: the slash-separated codes that follow a play."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

THROWING = "TH"
SACRIFICE_HIT = "SH"
SACRIFICE_FLY = "SF"
OBSTRUCTION = "OBS"
GROUNDED_INTO_DOUBLE_PLAY = "GDP"


class Trajectory(str, Enum):
    """The path of a batted ball."""

    NONE = ""
    BUNT = "B"
    BUNT_GROUNDER = "BG"
    BUNT_POPUP = "BP"
    FLY_BALL = "F"
    POP_UP = "P"
    GROUND_BALL = "G"
    LINE_DRIVE = "L"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    """Where a ball was fielded: the fielder and, optionally, short or deep."""

    fielder: int
    length: str = ""


_LOCATION = re.compile(r"[A-Z]+([1-9])(S|D)?")
_LEADING = {
    "F": Trajectory.FLY_BALL,
    "G": Trajectory.GROUND_BALL,
    "P": Trajectory.POP_UP,
    "L": Trajectory.LINE_DRIVE,
}


class Modifiers(list):
    """A list of modifier codes such as ``G6``, ``SF`` or ``E4``."""

    def trajectory(self) -> Trajectory:
        if "B" in self:
            return Trajectory.BUNT
        for mod in self:
            if mod == "":
                return Trajectory.GROUND_BALL
            if mod.startswith("BG"):
                return Trajectory.BUNT_GROUNDER
            if mod.startswith("BP"):
                return Trajectory.BUNT_POPUP
            if mod[0] in _LEADING:
                return _LEADING[mod[0]]
        return Trajectory.NONE

    def location(self) -> Location | None:
        """The first fielding location among the modifiers, e.g. F8S is short center."""
        for mod in self:
            if mod.startswith("E"):
                continue
            match = _LOCATION.search(mod)
            if match:
                length = {"D": "deep", "S": "short"}.get(match.group(2) or "", "")
                return Location(fielder=int(match.group(1)), length=length)
        return None

    def contains(self, *codes: str) -> bool:
        return any(mod in codes for mod in self)