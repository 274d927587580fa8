"""Pitch sequences: one letter per pitch."""

from __future__ import annotations

_STRIKES = frozenset("CSTML")


class Pitches(str):
    """A pitch sequence such as ``BCFX``."""

    def count_up(self, *codes: str) -> int:
        return sum(1 for pitch in self if pitch in codes)

    def last(self) -> str:
        return self[-1:]

    def count(self) -> tuple[str, int, int]:  # type: ignore[override]
        """The count as ``balls-strikes`` with the balls and strikes.

        Fouls only count as strikes before the second strike.
        """
        balls = self.count_up("B")
        strikes = 0
        for pitch in self:
            if pitch in _STRIKES or (pitch == "F" and strikes < 2):
                strikes += 1
        return f"{balls}-{strikes}", balls, strikes