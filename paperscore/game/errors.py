"""Positions in game files and the error raised for a bad play."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WRAP_VERBS = re.compile(r"%[wv]")


@dataclass(frozen=True)
class Position:
    """A location in a game file."""

    filename: str = ""
    line: int = 0

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}"
        return str(self.line)


class GameError(Exception):
    """An error in a game file, prefixed with where it was found."""

    def __init__(self, template: str, pos: Position, *args: object) -> None:
        self.pos = pos
        text = _WRAP_VERBS.sub("%s", template) % args
        self.message = f"{pos}: {text}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message