"""User configuration from ~/.softball/config.yaml and SOFTBALL_* variables."""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

_log = logging.getLogger(__name__)
_PREFIX = "SOFTBALL_"


@dataclass
class Config:
    """Configuration values keyed by name."""

    dir: str = ""
    values: dict[str, Any] = field(default_factory=dict)

    def set_from_environ(self, environ: Mapping[str, str]) -> None:
        """Add SOFTBALL_* variables, SOFTBALL_SHEET_JSON_KEY becoming SheetJsonKey."""
        for name, value in environ.items():
            if not name.startswith(_PREFIX):
                continue
            key = []
            capital = True
            for ch in name[len(_PREFIX):]:
                if capital:
                    key.append(ch.upper())
                    capital = False
                elif ch == "_":
                    capital = True
                else:
                    key.append(ch.lower())
            self.values["".join(key)] = value

    def get_string(self, key: str) -> str:
        value = self.values.get(key)
        return value if isinstance(value, str) else ""


@functools.lru_cache(maxsize=None)
def get_config() -> Config:
    """The configuration, read once from the home directory and the environment."""
    config = Config()
    home = os.path.expanduser("~")
    if not home or home == "~":
        return config
    config.dir = os.path.join(home, ".softball")
    path = os.path.join(config.dir, "config.yaml")
    try:
        with open(path, encoding="utf-8") as source:
            doc = yaml.safe_load(source)
    except FileNotFoundError:
        pass
    except (OSError, yaml.YAMLError) as err:
        _log.warning("Cannot read config %s - %s", path, err)
        return config
    else:
        if doc is not None and not isinstance(doc, dict):
            _log.warning("Cannot read config %s - not a mapping", path)
            return config
        config.values = dict(doc or {})
        _log.info("Loaded config from %s", path)
    config.set_from_environ(os.environ)
    return config