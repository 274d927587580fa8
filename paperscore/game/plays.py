"""Interpreting play codes into plays, outs and implied runner advances."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

from paperscore.game.advance import NEXT_BASE, PREVIOUS_BASE, Advance, parse_advance
from paperscore.game.errors import GameError, Position
from paperscore.game.fielding import FieldingError, parse_fielding_error
from paperscore.game.modifiers import SACRIFICE_FLY, Modifiers
from paperscore.game.play import Play, PlayType
from paperscore.game.playcode import FIELDER_NUMBER, PlayCodeParser
from paperscore.game.state import State

_ERROR_MODIFIER = re.compile(r"E([1-9])")
_RUNNER_BASES = ("1", "2", "3")


@dataclass
class PlayRecord:
    """A play as written in a game file."""

    pos: Position = field(default_factory=Position)
    code: str = ""
    advances: list[str] = field(default_factory=list)
    batter: str = ""
    pitch_sequence: str = ""
    plate_appearance: int = 0
    continued_plate_appearance: bool = False
    comment: str = ""


Handler = Callable[[PlayRecord, State, PlayCodeParser], None]


@dataclass
class PlayRules:
    """Applies a play code to a state, recording outs and bases put out on."""

    modifiers: Modifiers = field(default_factory=Modifiers)
    base_put_outs: set[str] = field(default_factory=set)

    def put_out(self, base: str) -> None:
        self.base_put_outs.add(base)

    def implied_advance(self, play: PlayRecord, state: State, code: str) -> Advance:
        """The advance from the code's base, added if the play did not give one."""
        implied = parse_advance(code, play.pos)
        advance = state.advances.from_base(implied.from_base)
        if advance is None:
            advance = implied
            state.advances.append(implied)
        if advance.to_base == implied.to_base:
            advance.implied = True
        return advance

    def handle_play_code(self, play: PlayRecord, state: State) -> None:
        """Set the state's play from the play code; raise GameError if it is invalid."""
        pp = PlayCodeParser()
        pp.parse(play.code)
        self.modifiers = pp.modifiers
        table: list[tuple[tuple[str, ...], Handler]] = [
            (("$",), self._fly_out),
            (("$$", "$$$"), self._ground_out),
            (("K",), self._strike_out),
            (("K+SB%",), self._strike_out_stolen_base),
            (("K+CS%($$)",), self._strike_out_caught_stealing),
            (("K+PO%($$)", "K+PO%(E$)"), self._strike_out_picked_off),
            (("W+WP",), self._walk_as(PlayType.WALK_WILD_PITCH)),
            (("W+PB",), self._walk_as(PlayType.WALK_PASSED_BALL)),
            (("W+PO%($$)",), self._walk_picked_off),
            (("W",), self._walk_as(PlayType.WALK)),
            (("W+SB%",), self._walk_stolen_base),
            (("SB%;SB%;SB%", "SB%;SB%", "SB%"), self._stolen_base),
            (("K2$", "K2"), self._strike_out_with_fielders),
            (("K+PB",), self._strike_out_reaching(PlayType.STRIKE_OUT_PASSED_BALL, 2)),
            (("K+WP",), self._strike_out_reaching(PlayType.STRIKE_OUT_WILD_PITCH, 1)),
            (("S$",), self._hit(PlayType.SINGLE, "B-1")),
            (("D$",), self._hit(PlayType.DOUBLE, "B-2")),
            (("DGR",), self._hit(PlayType.GROUND_RULE_DOUBLE, "B-2")),
            (("T$",), self._hit(PlayType.TRIPLE, "B-3")),
            (("H$", "H"), self._home_run),
            (("PB",), self._plain(PlayType.PASSED_BALL)),
            (("WP",), self._plain(PlayType.WILD_PITCH)),
            (("HP",), self._hit(PlayType.HIT_BY_PITCH, "B-1")),
            (("E$",), self._reached_on_error),
            (("C",), self._catcher_interference),
            (("PO%(E$)",), self._picked_off_error),
            (("PO%($$)", "PO%($$$)", "PO%($$$$)"), self._picked_off),
            (("FC$",), self._fielders_choice),
            (("$(%)$$",), self._ground_double_play(1)),
            (("$$(%)$", "$$(%)$$"), self._ground_double_play(2)),
            (("$(B)$(%)", "$(B)$$(%)", "$(B)$$$(%)"), self._line_double_play),
            (("CS%(E$)",), self._caught_stealing_error),
            (("CS%($$)", "CS%($$$)", "CS%($$$$)"), self._caught_stealing),
            (("FLE$",), self._foul_fly_error),
            (("NP",), self._plain(PlayType.NO_PLAY)),
        ]
        for patterns, handler in table:
            if any(pp.play_is(pattern) for pattern in patterns):
                handler(play, state, pp)
                return
        raise GameError("unknown play %s", play.pos, play.code)

    def _fly_out(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.FLY_OUT, fielders=pp.fielders(0))
        if self.modifiers.contains(SACRIFICE_FLY) and not any(
            adv.to_base == "H" and not adv.out for adv in state.advances
        ):
            raise GameError("cannot score SacrificeFly unless a runner scores", play.pos)
        state.record_out()
        state.complete = True

    def _ground_out(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.GROUND_OUT, fielders=pp.all_fielders(0))
        state.record_out()
        state.complete = True

    def _strike_out(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.STRIKE_OUT)
        state.record_out()
        state.complete = True

    def _strike_out_with_fielders(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        state.play = Play(type=PlayType.STRIKE_OUT, fielders=pp.all_fielders(0))
        state.record_out()
        state.complete = True

    def _strike_out_stolen_base(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        state.play = Play(type=PlayType.STRIKE_OUT_STOLEN_BASE)
        state.record_out()
        state.complete = True
        self._handle_stolen_base(play, state, pp.play_matches)

    def _strike_out_caught_stealing(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        state.play = Play(type=PlayType.STRIKE_OUT_CAUGHT_STEALING, fielders=pp.fielders(1, 2))
        state.complete = True
        state.record_out()
        self._handle_caught_stealing(play, state, pp, FieldingError())

    def _strike_out_picked_off(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        base = pp.play_matches[0]
        if base not in _RUNNER_BASES:
            raise GameError("illegal picked off base in %s", play.pos, pp.play_code)
        try:
            state.base_runner(base)
        except GameError as err:
            raise GameError("cannot pick off in %s - %w", play.pos, pp.play_code, err) from err
        state.play = Play(type=PlayType.STRIKE_OUT_PICKED_OFF)
        state.complete = True
        state.record_out()
        if "(E" in pp.play_code:
            state.play.not_out_on_play = True
            state.play.fielding_error = FieldingError(fielder=pp.fielder(1))
            return
        state.play.fielders = pp.fielders(1, 2)
        if state.advances.from_base(base) is not None:
            raise GameError("picked off runner on %s cannot advance", play.pos, base)
        state.record_out()
        self.put_out(base)

    def _strike_out_reaching(self, play_type: PlayType, fielder: int) -> Handler:
        def handle(play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
            state.play = Play(type=play_type, fielders=[fielder])
            state.complete = True
            self.implied_advance(play, state, "B-1")

        return handle

    def _walk_as(self, play_type: PlayType) -> Handler:
        def handle(play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
            state.play = Play(type=play_type)
            self.implied_advance(play, state, "B-1")
            state.complete = True

        return handle

    def _walk_picked_off(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        self._handle_picked_off(play, state, pp, PlayType.WALK_PICKED_OFF, FieldingError())
        self.implied_advance(play, state, "B-1")
        state.complete = True

    def _walk_stolen_base(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.WALK)
        self.implied_advance(play, state, "B-1")
        self._handle_stolen_base(play, state, pp.play_matches)
        state.complete = True

    def _stolen_base(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.STOLEN_BASE)
        self._handle_stolen_base(play, state, pp.play_matches)

    def _hit(self, play_type: PlayType, code: str) -> Handler:
        def handle(play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
            state.play = Play(type=play_type)
            self.implied_advance(play, state, code)
            state.complete = True

        return handle

    def _home_run(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.HOME_RUN, fielders=pp.all_fielders(0))
        self.implied_advance(play, state, "B-H")
        state.complete = True

    def _plain(self, play_type: PlayType) -> Handler:
        def handle(play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
            state.play = Play(type=play_type)

        return handle

    def _reached_on_error(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        try:
            error = parse_fielding_error(pp.play_code, play.pos)
        except GameError as err:
            raise GameError(
                "cannot parse fielding error in %s - %w", play.pos, pp.play_code, err
            ) from err
        state.play = Play(
            type=PlayType.REACHED_ON_ERROR, fielders=pp.fielders(0), fielding_error=error
        )
        self.implied_advance(play, state, "B-1")
        state.complete = True

    def _catcher_interference(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        fielder = 0
        for modifier in pp.modifiers:
            match = _ERROR_MODIFIER.search(modifier)
            if match:
                fielder = FIELDER_NUMBER[match.group(1)]
        if fielder == 0:
            raise GameError("no fielder in catcher's interference", play.pos)
        state.play = Play(
            type=PlayType.CATCHER_INTERFERENCE,
            fielding_error=FieldingError(fielder=fielder),
        )
        self.implied_advance(play, state, "B-1")
        state.complete = True

    def _picked_off_error(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        error = FieldingError(fielder=pp.fielder(1))
        self._handle_picked_off(play, state, pp, PlayType.PICKED_OFF, error)

    def _picked_off(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        self._handle_picked_off(play, state, pp, PlayType.PICKED_OFF, FieldingError())

    def _fielders_choice(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(type=PlayType.FIELDERS_CHOICE, fielders=pp.fielders(0))
        self.implied_advance(play, state, "B-1")
        state.complete = True

    def _ground_double_play(self, base_match: int) -> Handler:
        def handle(play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
            runner_base = pp.play_matches[base_match]
            if not self.modifiers.contains("GDP"):
                raise GameError("play should contain GDP modifier in %s", play.pos, pp.play_code)
            try:
                state.base_runner(runner_base)
            except GameError as err:
                raise GameError(
                    "no runner in double play %s - %w", play.pos, pp.play_code, err
                ) from err
            state.play = Play(type=PlayType.DOUBLE_PLAY)
            next_base = NEXT_BASE.get(runner_base, "")
            if not next_base:
                raise GameError("double play runner cannot be at %s", play.pos, runner_base)
            fielders = pp.play_code[: pp.play_code.index("(")]
            self.implied_advance(play, state, f"{runner_base}X{next_base}({fielders})")
            state.record_out()
            state.complete = True

        return handle

    def _line_double_play(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        if not self.modifiers.contains("LDP", "FDP"):
            raise GameError(
                "play should contain LDP or FDP modifier in %s (%v)",
                play.pos,
                pp.play_code,
                list(state.modifiers),
            )
        base = pp.play_matches[-1]
        try:
            state.base_runner(base)
        except GameError as err:
            raise GameError(
                "no runner in lineout double play %s - %w", play.pos, pp.play_code, err
            ) from err
        state.play = Play(type=PlayType.DOUBLE_PLAY)
        state.record_out()
        state.record_out()
        self.put_out(base)
        state.complete = True

    def _caught_stealing_error(
        self, play: PlayRecord, state: State, pp: PlayCodeParser
    ) -> None:
        error = FieldingError(fielder=pp.fielder(1))
        self._handle_caught_stealing(play, state, pp, error)

    def _caught_stealing(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        self._handle_caught_stealing(play, state, pp, FieldingError())

    def _foul_fly_error(self, play: PlayRecord, state: State, pp: PlayCodeParser) -> None:
        state.play = Play(
            type=PlayType.FOUL_FLY_ERROR,
            fielders=pp.fielders(0),
            fielding_error=FieldingError(fielder=pp.fielder(0)),
        )

    def _handle_caught_stealing(
        self, play: PlayRecord, state: State, pp: PlayCodeParser, error: FieldingError
    ) -> None:
        to_base = pp.play_matches[0]
        if to_base not in ("2", "3", "H"):
            raise GameError("illegal caught stealing base code %s", play.pos, pp.play_code)
        from_base = PREVIOUS_BASE[to_base]
        advance = state.advances.from_base(from_base)
        try:
            runner = state.base_runner(from_base)
        except GameError as err:
            raise GameError(
                "cannot catch stealing runner in %s - %w", play.pos, pp.play_code, err
            ) from err
        state.play = Play(
            type=PlayType.CAUGHT_STEALING,
            caught_stealing_runner=runner,
            caught_stealing_base=to_base,
            fielding_error=error,
        )
        if advance is None:
            state.record_out()
            self.put_out(from_base)
        else:
            state.play.not_out_on_play = advance.fielding_error.is_error() or error.is_error()

    def _handle_picked_off(
        self,
        play: PlayRecord,
        state: State,
        pp: PlayCodeParser,
        play_type: PlayType,
        error: FieldingError,
    ) -> None:
        base = pp.play_matches[0]
        if base not in _RUNNER_BASES:
            raise GameError("illegal picked off base %s", play.pos, base)
        try:
            runner = state.base_runner(base)
        except GameError as err:
            raise GameError("cannot pick off runner - %w", play.pos, err) from err
        state.play = Play(
            type=play_type,
            fielders=pp.all_fielders(1),
            picked_off_runner=runner,
            fielding_error=error,
        )
        advance = state.advances.from_base(base)
        state.play.not_out_on_play = (
            advance is not None and advance.fielding_error.is_error()
        ) or error.is_error()
        if not state.play.not_out_on_play:
            state.record_out()
            self.put_out(base)

    def _handle_stolen_base(self, play: PlayRecord, state: State, bases: list[str]) -> None:
        last = state.last_state
        if last is None:
            raise GameError("cannot steal bases at the start of a half-inning", play.pos)
        steals = {"2": ("1-2", 0), "3": ("2-3", 1), "H": ("3-H", 2)}
        for base in bases:
            if base not in steals:
                raise GameError("unknown stolen base code", play.pos)
            code, number = steals[base]
            advance = self.implied_advance(play, state, code)
            runner = last.runners[number]
            advance.runner = runner
            advance.steal = True
            state.play.stolen_bases.append(base)
            if not runner:
                raise GameError("no runner can steal %s", play.pos, base)