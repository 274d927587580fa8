"""Fielding errors such as ``E6`` or ``E4/TH``."""

from __future__ import annotations

from dataclasses import dataclass, field

from paperscore.game.errors import GameError, Position
from paperscore.game.modifiers import Modifiers


@dataclass
class FieldingError:
    """An error charged to a fielder; fielder 0 means no error."""

    fielder: int = 0
    modifiers: Modifiers = field(default_factory=Modifiers)

    def is_error(self) -> bool:
        return self.fielder != 0

    def __str__(self) -> str:
        if not self.is_error():
            return ""
        return f"E{self.fielder}" + "".join(f"/{mod}" for mod in self.modifiers)


def parse_fielding_error(code: str, pos: Position) -> FieldingError:
    """Parse an error code; raise GameError if it is malformed."""
    if len(code) < 2 or code[0] != "E" or (len(code) > 2 and code[2] != "/"):
        raise GameError("illegal error code %s", pos, code)
    if not "1" <= code[1] <= "9":
        raise GameError("illegal fielder %c in error code %s", pos, code[1], code)
    error = FieldingError(fielder=int(code[1]))
    if len(code) > 2:
        if len(code) < 5:
            raise GameError("illegal error code %s", pos, code)
        error.modifiers = Modifiers(code[4 : len(code) - 1].split("/"))
    return error