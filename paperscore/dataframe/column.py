"""Typed columns of values and printf-style formatting for them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ColumnType(Enum):
    """The type of the values held by a column."""

    INT = 0
    FLOAT = 1
    STRING = 2
    INVALID = 3

    def __str__(self) -> str:
        return self.name.capitalize()


class SummaryType(Enum):
    """How a column is summarised in a summary row."""

    NONE = 0
    SUM = 1
    AVERAGE = 2

    def __str__(self) -> str:
        return self.name.capitalize()


_VERB = re.compile(r"%([-+ #0]*)(\d*)(?:\.(\d+))?([a-zA-Z%])")
_PYTHON_VERBS = set("diouxXeEfFgGcs")
_WIDTH = re.compile(r"^%([-+ ])?(\d*)")


def _format_one(flags: str, width: str, precision: str | None, verb: str, value: Any) -> str:
    if value is None:
        verb, value, precision = "s", "", None
    elif verb not in _PYTHON_VERBS:
        verb = "s"
    spec = "%" + flags + width + ("." + precision if precision is not None else "") + verb
    return spec % (value,)


def format_value(spec: str, value: Any) -> str:
    """Format a single value with a printf-style spec such as ``%-8s`` or ``%5.1f``.

    ``%v`` prints the value's natural form; a missing value prints as blanks.
    """
    out = []
    pos = 0
    used = False
    for match in _VERB.finditer(spec):
        out.append(spec[pos:match.start()])
        pos = match.end()
        flags, width, precision, verb = match.groups()
        if verb == "%":
            out.append("%")
        elif used:
            out.append(match.group(0))
        else:
            used = True
            out.append(_format_one(flags, width, precision, verb, value))
    out.append(spec[pos:])
    return "".join(out)


def round_to_format(spec: str, value: float) -> float:
    """Round a float the way ``spec`` would print it."""
    try:
        return float(format_value(spec, value).strip())
    except ValueError:
        return 0.0


def _kind_of(value: Any) -> ColumnType:
    if isinstance(value, bool):
        raise TypeError(f"illegal value to append {value!r} ({type(value).__name__})")
    if isinstance(value, int):
        return ColumnType.INT
    if isinstance(value, float):
        return ColumnType.FLOAT
    if isinstance(value, str):
        return ColumnType.STRING
    raise TypeError(f"illegal value to append {value!r} ({type(value).__name__})")


_ZERO = {ColumnType.INT: 0, ColumnType.FLOAT: 0.0, ColumnType.STRING: ""}
_DEFAULT_FORMAT = {ColumnType.INT: "%8d", ColumnType.STRING: "%-8s", ColumnType.FLOAT: "%8.4f"}


@dataclass(eq=False)
class Column:
    """A named column of int, float or string values."""

    name: str = ""
    format: str = ""
    summary: SummaryType = SummaryType.NONE
    summary_format: str = ""
    values: list = field(default_factory=list)
    kind: ColumnType = ColumnType.INVALID

    def __post_init__(self) -> None:
        self.values = list(self.values)
        if self.kind is ColumnType.INVALID and self.values:
            self.kind = _kind_of(self.values[0])

    def column_type(self) -> ColumnType:
        return self.kind

    def empty_copy(self) -> Column:
        """A column with the same name, format, summary and type but no values."""
        return Column(name=self.name, format=self.format, summary=self.summary, kind=self.kind)

    def append(self, *values: Any) -> None:
        for value in values:
            kind = _kind_of(value)
            if self.kind is ColumnType.INVALID:
                self.kind = kind
            elif kind is not self.kind:
                if self.kind is ColumnType.FLOAT and kind is ColumnType.INT:
                    value = float(value)
                else:
                    raise TypeError(f"cannot append {value!r} to {self.kind} column {self.name!r}")
            self.values.append(value)

    def append_zero(self) -> None:
        if self.kind is ColumnType.INVALID:
            raise ValueError("illegal column type")
        self.values.append(_ZERO[self.kind])

    def summary_value(self) -> int | float | None:
        """The sum or average of the column, or None when it has no summary."""
        if self.summary is SummaryType.NONE or self.kind not in (ColumnType.INT, ColumnType.FLOAT):
            return None
        total = sum(self.values, 0 if self.kind is ColumnType.INT else 0.0)
        if self.summary is SummaryType.SUM:
            return total
        if self.values:
            return total / len(self.values)
        return 0.0

    def __len__(self) -> int:
        return len(self.values)

    def effective_format(self) -> str:
        if self.format:
            return self.format
        return _DEFAULT_FORMAT.get(self.kind, "%8v")

    def summary_format_spec(self) -> str:
        if self.summary_format:
            return self.summary_format
        if self.kind is ColumnType.INT and self.summary is SummaryType.AVERAGE:
            return f"%{self.width() - 2}.1f"
        return self.effective_format()

    def width(self) -> int:
        """The printed width, from the format or else the name (at least 8)."""
        if self.format:
            match = _WIDTH.match(self.format)
            if match and match.group(2):
                width = int(match.group(2))
                if width:
                    return width
        return max(8, len(self.name))

    def value(self, row: int) -> Any:
        """The value at ``row``, or None past the end of the column."""
        if row < 0:
            raise IndexError(f"negative row {row}")
        if row >= len(self.values):
            return None
        return self.values[row]


def new_empty_column(name: str, column_type: ColumnType) -> Column:
    """An empty column of the given type."""
    if column_type is ColumnType.INVALID:
        raise ValueError(f"unknown type {column_type}")
    return Column(name=name, kind=column_type)