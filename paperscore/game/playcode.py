"""Matching play codes against patterns of fielders and bases."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field

from paperscore.game.modifiers import Modifiers

FIELDER_NUMBER = {str(n): n for n in range(1, 10)}


@functools.lru_cache(maxsize=None)
def _pattern(pattern: str) -> re.Pattern:
    text = pattern.replace("(", r"\(").replace("+", r"\+").replace(")", r"\)")
    text = text.replace("$", "([0123456789])").replace("%", "([B123H])")
    return re.compile(text)


@dataclass
class PlayCodeParser:
    """Splits a play code from its modifiers and matches it against patterns.

    In a pattern ``$`` stands for a fielder digit and ``%`` for a base.
    """

    play_code: str = ""
    play_matches: list[str] = field(default_factory=list)
    modifiers: Modifiers = field(default_factory=Modifiers)

    def parse(self, code: str) -> None:
        head, *rest = code.split("/")
        self.play_code = head
        self.modifiers = Modifiers(rest)
        self.play_matches = []

    def play_is(self, pattern: str) -> bool:
        match = _pattern(pattern).fullmatch(self.play_code)
        self.play_matches = list(match.groups()) if match else []
        return match is not None

    def fielder(self, field: int) -> int:
        return FIELDER_NUMBER.get(self.play_matches[field], 0)

    def fielders(self, *fields: int) -> list[int]:
        return [self.fielder(f) for f in fields]

    def all_fielders(self, start: int) -> list[int]:
        return [FIELDER_NUMBER.get(m, 0) for m in self.play_matches[start:]]