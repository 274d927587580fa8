"""Running the events of one half of a game into a sequence of states."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from paperscore.game.advance import BASE_NUMBER, RUNNER_NUMBER, parse_advances
from paperscore.game.errors import GameError, Position
from paperscore.game.pitches import Pitches
from paperscore.game.play import PlayType
from paperscore.game.plays import PlayRecord, PlayRules
from paperscore.game.state import Half, State
from paperscore.game.team import Team

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass
class EventRecord:
    """One line of a game file: a play, an alternative play or a special event."""

    pos: Position = field(default_factory=Position)
    play: PlayRecord | None = None
    alternative: PlayRecord | None = None
    comment: str = ""
    courtesy_runners: list[str] = field(default_factory=list)
    pitcher: str = ""
    score: str = ""
    final: str = ""
    radj_runner: str = ""
    radj_base: str = ""
    empty: bool = False


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text):
        return int(text)
    return None


def _is_fielders_choice_third_out(state: State) -> bool:
    return state.play.type is PlayType.FIELDERS_CHOICE and state.outs == 3


@dataclass(eq=False)
class GameMachine:
    """Applies plays for one batting team against one fielding team.

    Errors found while running events are collected in ``errors`` so that a
    whole half can be read even when some of its plays are wrong.
    """

    batting_team: Team
    fielding_team: Team
    pitcher: str = ""
    final: bool = False
    rules: PlayRules = field(default_factory=PlayRules)
    alternatives: dict[State, State] = field(default_factory=dict)
    errors: list[GameError] = field(default_factory=list)

    def new_state(self, pos: Position, last_state: State) -> State:
        """A state carried over from ``last_state``, starting a new inning after 3 outs."""
        state = State(
            pos=pos,
            inning_number=last_state.inning_number,
            outs=last_state.outs,
            half=last_state.half,
            score=last_state.score,
            pitcher=self.pitcher,
            last_state=last_state,
        )
        if state.outs == 3:
            state.outs = 0
            state.last_state = None
            state.inning_number += 1
        return state

    def _start_alternative(self, play: PlayRecord, last_state: State) -> State:
        real_last = last_state.last_state
        if real_last is None:
            # An alternative for the first play of an inning: stand in for the
            # end of the previous inning.
            real_last = State(
                inning_number=last_state.inning_number - 1,
                outs=3,
                half=last_state.half,
                pitcher=last_state.pitcher,
                batter=last_state.batter,
            )
        state = self.new_state(play.pos, real_last)
        state.batter = last_state.batter
        state.pitches = last_state.pitches
        state.alternative_for = last_state
        return state

    def handle_alternative(self, play: PlayRecord, last_state: State) -> State:
        """The state had ``play`` happened instead of the play that led to ``last_state``."""
        state = self._start_alternative(play, last_state)
        self.handle_play(play, state)
        return state

    def _start_actual(self, play: PlayRecord, last_state: State) -> State:
        state = self.new_state(play.pos, last_state)
        state.number = play.plate_appearance
        if play.continued_plate_appearance:
            if state.last_state is None:
                raise GameError("... can only be used to continue a plate appearance", play.pos)
            state.pitches = Pitches(state.last_state.pitches + play.pitch_sequence)
            state.batter = state.last_state.batter
        else:
            state.batter = self.batting_team.parse_player_id(play.batter)
            state.pitches = Pitches(play.pitch_sequence)
        if not state.batter:
            raise GameError("no batter for %s", play.pos, play.code)
        return state

    def handle_actual_play(self, play: PlayRecord, last_state: State) -> State:
        """The state after ``play``; raise GameError if the play is invalid."""
        state = self._start_actual(play, last_state)
        self.handle_play(play, state)
        return state

    def handle_play(self, play: PlayRecord, state: State) -> None:
        """Apply the play code, advances and pitch checks to ``state``."""
        state.play_code = play.code
        state.advances_codes = list(play.advances)
        if not state.play_code:
            raise GameError("empty event code in %s", play.pos, play.code)
        self.rules.base_put_outs = set()
        runners = state.last_state.runners if state.last_state is not None else ["", "", ""]
        state.advances = parse_advances(play.advances, play.pos, state.batter, runners)
        self.rules.handle_play_code(play, state)
        self.move_runners(play, state)
        if state.outs == 3 and not state.complete:
            state.incomplete = True
        if not state.complete:
            return
        _, balls, strikes = state.pitches.count()
        if state.play.is_ball_in_play():
            if strikes > 2:
                raise GameError(
                    "cannot put ball in play with %d strikes (%s)", state.pos, strikes, play.code
                )
            if balls > 3:
                raise GameError(
                    "cannot put ball in play with %d balls (%s)", state.pos, balls, play.code
                )
        if state.play.is_strike_out():
            if state.pitches.last() == "X":
                raise GameError("strike out pitch sequence should not end in X", state.pos)
            if strikes != 3:
                raise GameError("must strike out with 3 strikes", state.pos)
            if balls > 3:
                raise GameError("cannot strike out with more than 3 balls", state.pos)
        if state.play.is_walk():
            if state.pitches.last() == "X":
                raise GameError("walk pitch sequence should not end in X", state.pos)
            if strikes > 2:
                raise GameError("cannot walk with more than 2 strikes", state.pos)
            if balls != 4:
                raise GameError("must walk with 4 balls", state.pos)
        if not state.pitches.endswith("X") and state.play.is_ball_in_play():
            state.pitches = Pitches(state.pitches + "X")
        state.modifiers = self.rules.modifiers

    def handle_special_event(self, event: EventRecord, state: State) -> State | None:
        """Apply a pitcher change, score check, final score or runner adjustment.

        Returns the new starting state for a runner adjustment, otherwise None.
        """
        if event.pitcher:
            self.pitcher = self.fielding_team.parse_player_id(event.pitcher)
        if event.score:
            if state.outs != 3:
                raise GameError(
                    "the inning with %d outs has not ended after %s",
                    event.pos,
                    state.outs,
                    state.play_code,
                )
            if _parse_int(event.score) != state.score:
                raise GameError(
                    "in inning %d # runs is %d not %s",
                    event.pos,
                    state.inning_number,
                    state.score,
                    event.score,
                )
        if event.final:
            if _parse_int(event.final) != state.score:
                raise GameError(
                    "in inning %d final score is %d not %s",
                    event.pos,
                    state.inning_number,
                    state.score,
                    event.final,
                )
            self.final = True
        if event.radj_runner:
            runner = self.batting_team.parse_player_id(event.radj_runner)
            base = event.radj_base
            if not runner or base not in RUNNER_NUMBER:
                raise GameError("invalid base %s for radj", event.pos, base)
            if state.outs != 3:
                raise GameError("radj must be at the inning start", event.pos)
            start = State(
                inning_number=state.inning_number + 1,
                half=state.half,
                outs=0,
                score=state.score,
            )
            start.runners[BASE_NUMBER[base]] = runner
            return start
        return None

    def move_runners(self, play: PlayRecord, state: State) -> None:
        """Place the runners after the play's advances and put outs."""
        last = state.last_state
        for base in ("3", "2", "1", "B"):
            advance = state.advances.from_base(base)
            if advance is None:
                if base not in self.rules.base_put_outs and base != "B" and last is not None:
                    number = BASE_NUMBER[base]
                    state.runners[number] = last.runners[number]
                continue
            source = BASE_NUMBER.get(advance.from_base, 0)
            target = BASE_NUMBER[advance.to_base]
            from_batter = advance.from_base == "B"
            if last is None and not from_batter:
                raise GameError(
                    "cannot advance a runner from %s to %s at start of half-inning",
                    play.pos,
                    advance.from_base,
                    advance.to_base,
                )
            if not from_batter and not last.runners[source]:
                raise GameError(
                    "cannot advance non-existent runner from %s", play.pos, advance.from_base
                )
            if advance.out:
                state.record_out()
                if not from_batter:
                    state.runners[source] = ""
            elif advance.to_base == "H":
                self.score_run(state, state.batter if from_batter else last.runners[source])
            elif from_batter:
                if state.runners[target] and not _is_fielders_choice_third_out(state):
                    raise GameError(
                        "cannot advance batter-runner %s to %d because it's already occupied by %s",
                        play.pos,
                        state.batter,
                        target + 1,
                        state.runners[target],
                    )
                state.runners[target] = state.batter
            else:
                if state.runners[target] and not _is_fielders_choice_third_out(state):
                    raise GameError(
                        "cannot advance runner %s to %d because it's already occupied by %s",
                        play.pos,
                        last.runners[source],
                        target + 1,
                        state.runners[target],
                    )
                state.runners[target] = last.runners[source]

    def score_run(self, state: State, runner: str) -> None:
        state.score += 1
        state.play.scoring_runners.append(runner)

    def run(self, events: list[EventRecord] | None, half: Half) -> list[State]:
        """The states after each play of one team's half of the game.

        Errors are appended to ``errors``; alternatives go to ``alternatives``
        keyed by the state they stand in for.
        """
        states: list[State] = []
        if events is None:
            return states
        last = State(inning_number=1, half=half)
        for event in events:
            if event.empty:
                continue
            if self.final:
                self.errors.append(
                    GameError("cannot have more plays after final score", event.pos)
                )
                break
            if event.play is not None:
                try:
                    state = self._start_actual(event.play, last)
                except GameError as err:
                    self.errors.append(err)
                    continue
                try:
                    self.handle_play(event.play, state)
                except GameError as err:
                    self.errors.append(err)
                for courtesy in event.courtesy_runners:
                    # A courtesy runner is taken to run for the batter.
                    runner = self.batting_team.parse_player_id(courtesy)
                    if state.batter in state.runners:
                        state.runners[state.runners.index(state.batter)] = runner
                state.comment = event.comment
                states.append(state)
                last = state
            elif event.alternative is not None:
                try:
                    state = self._start_alternative(event.alternative, last)
                except GameError as err:
                    self.errors.append(err)
                    continue
                try:
                    self.handle_play(event.alternative, state)
                except GameError as err:
                    self.errors.append(err)
                state.comment = event.alternative.comment
                if last in self.alternatives:
                    self.errors.append(
                        GameError("only a single alternate state is allowed", event.pos)
                    )
                else:
                    self.alternatives[last] = state
            else:
                try:
                    start = self.handle_special_event(event, last)
                except GameError as err:
                    self.errors.append(err)
                    continue
                if start is not None:
                    last = start
        return states


def interleave_states(visitor_states: list[State], home_states: list[State]) -> list[State]:
    """Merge the two halves into game order, switching sides after each third out."""
    states: list[State] = []
    visitors = iter(visitor_states)
    home = iter(home_states)
    remaining = len(visitor_states) + len(home_states)
    top = True
    while remaining:
        state = next(visitors if top else home, None)
        if state is not None:
            states.append(state)
            remaining -= 1
        if state is None or state.outs == 3:
            top = not top
    return states