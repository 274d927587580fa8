"""Teams and their players, optionally loaded from a team YAML file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

_PLAYER_NUMBER = re.compile(r"\d+")


def default_player_number(player_id: str) -> str:
    """The digits in a player ID, taken as the player's number."""
    match = _PLAYER_NUMBER.search(player_id)
    return match.group(0) if match else ""


@dataclass
class Player:
    """A player on a team roster."""

    player_id: str = ""
    name: str = ""
    number: str = ""
    inactive: bool = False

    def name_or_number(self) -> str:
        if self.name:
            return self.name
        if self.number:
            return f"#{self.number}"
        return "?"


@dataclass
class Team:
    """A team with a roster of players keyed by player ID."""

    id: str = ""
    name: str = ""
    players: dict[str, Player] = field(default_factory=dict)
    _player_ids: dict[str, str] = field(default_factory=dict, repr=False)

    def is_us(self, us: str) -> bool:
        return self.name.lower().startswith(us)

    def player(self, player_id: str) -> Player:
        """The rostered player, or one made up from the ID itself."""
        found = self.players.get(player_id)
        if found is not None:
            return found
        number = default_player_number(player_id)
        name = "" if player_id == number else player_id
        return Player(player_id=player_id, name=name, number=number)

    def parse_player_id(self, s: str) -> str:
        """Resolve a bare jersey number to a rostered player ID."""
        if s and s[0].isdigit():
            cached = self._player_ids.get(s)
            if cached:
                return cached
            for player_id, player in self.players.items():
                if player.number == s:
                    self._player_ids[s] = player_id
                    return player_id
        return s

    def _read_file(self, directory: str, team_id: str) -> None:
        path = os.path.join(directory, f"{team_id}.yaml")
        with open(path, encoding="utf-8") as source:
            doc = yaml.load(source, Loader=yaml.BaseLoader)
        if not isinstance(doc, dict):
            doc = {}
        if doc.get("id"):
            self.id = doc["id"]
        if "name" in doc:
            self.name = doc["name"] or ""
        players = doc.get("players")
        if isinstance(players, dict):
            for player_id, entry in players.items():
                self.players[player_id] = _player_from(player_id, entry)


def _player_from(player_id: str, entry: Any) -> Player:
    if not isinstance(entry, dict):
        entry = {}
    number = entry.get("number") or ""
    return Player(
        player_id=player_id,
        name=entry.get("name") or "",
        number=number or default_player_number(player_id),
        inactive=str(entry.get("inactive", "")).lower() == "true",
    )


def get_team(directory: str, name: str, team_id: str) -> Team:
    """A team by name, or loaded from ``<team_id>.yaml`` in or above ``directory``.

    The file is looked for in ``directory`` and up to two parent directories.
    """
    team = Team(id=team_id, name=name)
    if not team_id:
        team.id = name.replace(" ", "-")
        return team
    if not directory:
        raise ValueError(f"team {team_id} cannot be loaded without a directory")
    for _ in range(3):
        try:
            team._read_file(directory, team_id)
        except FileNotFoundError:
            directory = os.path.normpath(os.path.join(directory, ".."))
            continue
        return team
    raise FileNotFoundError(f"cannot find team file for {team_id}")