# paperscore

A library for keeping softball score and turning it into tables.

It has three parts:

- `paperscore.dataframe`: a small column-oriented table. `Data` holds
  `Column`s of ints, floats or strings. Columns are picked or derived with
  selections (`col`, `rename`, `derive_ints`, `derive_floats`,
  `derive_strings`); rows are filtered (`filter_rows`), sorted
  (`sort_rows` with `less`, `compare_string`, `compare_int`,
  `compare_float`, `descending`), grouped and aggregated (`group_by`,
  `a_count`, `a_sum`, `a_func`) and rotated into pivot-style tables
  (`rotate`). A table renders as fixed-width text (`str`), CSV
  (`render_csv`), Markdown (`render_markdown`, `markdown`) or JSON
  (`to_json`). `DataPackage` writes a set of resources to a directory
  together with a `dataset-metadata.json` file.
- `paperscore.game`: the scoring model. Play codes are matched with
  `PlayCodeParser`; runner advances are parsed with `parse_advance` and
  `parse_advances`; pitch sequences are `Pitches`; `PlayType` and `Play`
  describe outcomes; `Modifiers` give trajectory and location; fielding
  errors are `FieldingError`; teams and players come from `get_team`,
  `Team` and `Player`. `GameMachine` replays one batting team's events
  over a whole game into a list of `State`s, and `interleave_states` merges
  the two teams' states into game order. Invalid plays raise `GameError`,
  whose message starts with the file position.
- `paperscore.config` and `paperscore.textutil`: user configuration from
  `~/.softball/config.yaml` and `SOFTBALL_*` environment variables, and
  helpers for laying out plain-text reports (`first_word`, `paste`,
  `line_length`).

## Pitch sequences

```python
from paperscore.game.pitches import Pitches

count, balls, strikes = Pitches("BCCFBX").count()
assert (count, balls, strikes) == ("2-2", 2, 2)
assert Pitches("CX").last() == "X"
```

Balls are `B`; `C`, `S`, `T`, `M` and `L` are strikes; a foul `F` counts as
a strike only before two strikes.

## Play codes and advances

```python
from paperscore.game.advance import parse_advance
from paperscore.game.errors import Position
from paperscore.game.playcode import PlayCodeParser

parser = PlayCodeParser()
parser.parse("CSH(252)")
assert parser.play_is("CS%($$$)")

advance = parse_advance("1X2(64)", Position("game.gm", 12))
assert advance.out and advance.fielders == [6, 4]
```

In a pattern, `$` stands for a fielder digit and `%` for a base
(`B`, `1`, `2`, `3`, `H`). Anything after a `/` in a play code is a
modifier, for example `53/G5/B/SH`.

## Replaying plays

```python
from paperscore.game.errors import Position
from paperscore.game.machine import EventRecord, GameMachine
from paperscore.game.plays import PlayRecord
from paperscore.game.state import Half
from paperscore.game.team import Team

machine = GameMachine(batting_team=Team(name="Visitors"), fielding_team=Team(name="Home"))
events = [
    EventRecord(play=PlayRecord(pos=Position("g.gm", 1), code="S7", batter="12",
                                pitch_sequence="BX")),
    EventRecord(play=PlayRecord(pos=Position("g.gm", 2), code="K", batter="3",
                                pitch_sequence="CSS")),
]
states = machine.run(events, Half.TOP)
assert states[0].runners == ["12", "", ""]
assert states[1].outs == 1
assert machine.errors == []
```

`run` does not stop at a bad play: errors are collected in
`machine.errors`, and alternative plays are kept in `machine.alternatives`
keyed by the state they stand in for.

## Tables

```python
from paperscore.dataframe.column import Column, SummaryType
from paperscore.dataframe.data import Data
from paperscore.dataframe.select import col, rename

table = Data(columns=[
    Column(name="Name", values=["Ann", "Bea"]),
    Column(name="Hits", values=[2, 1], summary=SummaryType.SUM),
])
print(table.select(col("Name"), rename("Hits", "H")))
```

`str(table)` lays the table out in fixed-width columns, adding a summary
row for any column with a summary type; `render_csv(stream, with_header)`
and `render_markdown(stream)` write the same rows to a stream.

## Configuration

`get_config()` reads `~/.softball/config.yaml` once and then overlays every
environment variable that starts with `SOFTBALL_`, turning the rest of the
name into CamelCase: `SOFTBALL_SHEET_JSON_KEY` becomes `SheetJsonKey`.

```python
from paperscore.config import get_config

matrix_file = get_config().get_string("re_matrix")
```

## What it does not do

There is no command-line program and no reader for game files: plays reach
`GameMachine` as `EventRecord` and `PlayRecord` objects built by the
caller. Box scores, batting and pitching statistics and run expectancy
are not computed by this package.

## Running the tests

The tests use pytest, declared in the `test` extra:

```
pip install -e .[test]
pytest
```