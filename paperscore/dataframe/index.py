"""Lookup of a data set's columns by name."""

from __future__ import annotations

from typing import Any

from paperscore.dataframe.column import Column


class Index:
    """Maps column names to the columns of a data set."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self._positions: dict[str, int] = {}
        self.update()

    def update(self) -> None:
        """Rebuild the name lookup after the data's columns change."""
        self._positions = {col.name: i for i, col in enumerate(self.data.columns)}

    def column(self, name: str) -> Column | None:
        position = self._positions.get(name)
        if position is None:
            return None
        return self.data.columns[position]

    def _require(self, name: str) -> Column:
        col = self.column(name)
        if col is None:
            raise KeyError(name)
        return col

    def value(self, row: int, name: str) -> Any:
        return self._require(name).value(row)

    def int_at(self, row: int, name: str) -> int:
        value = self.value(row, name)
        return 0 if value is None else value

    def float_at(self, row: int, name: str) -> float:
        value = self.value(row, name)
        return 0.0 if value is None else value

    def string_at(self, row: int, name: str) -> str:
        value = self.value(row, name)
        return "" if value is None else value