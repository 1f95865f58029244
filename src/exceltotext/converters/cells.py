"""Tagged cell values surfaced by the sheet readers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union


@dataclass(frozen=True)
class Absent:
    """Missing cell or empty string."""


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: float | int


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class DateValue:
    value: datetime


Cell = Union[Absent, Text, Number, Boolean, DateValue]
Row = Sequence[Cell]
Grid = Sequence[Row]

ABSENT = Absent()


def to_cell(value: Any) -> Cell:
    """Classify a raw value coming out of a spreadsheet library."""
    if isinstance(value, (Absent, Text, Number, Boolean, DateValue)):
        return value
    if value is None or value == "":
        return ABSENT
    # bool is a subclass of int
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, datetime):
        return DateValue(value)
    if isinstance(value, date):
        return DateValue(datetime(value.year, value.month, value.day))
    return Text(str(value))


def to_row(values: Sequence[Any]) -> list[Cell]:
    return [to_cell(v) for v in values]


def number_text(value: float | int) -> str:
    """Render a number in its natural decimal form (``7.0`` -> ``7``)."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        sign = "-" if exponent.startswith("-") else "+"
        text = f"{mantissa}e{sign}{exponent.lstrip('+-').lstrip('0') or '0'}"
    return text


def cell_text(cell: Cell) -> str:
    """Plain textual form of a cell, used as pass-through and as fallback."""
    match cell:
        case Absent():
            return ""
        case Text(value=value):
            return value
        case Number(value=value):
            return number_text(value)
        case Boolean(value=value):
            return "true" if value else "false"
        case DateValue(value=value):
            return str(value)
    return str(cell)


def is_falsy(cell: Cell) -> bool:
    """Empty, zero, NaN or False."""
    match cell:
        case Absent():
            return True
        case Text(value=value):
            return value == ""
        case Number(value=value):
            return value == 0 or (isinstance(value, float) and math.isnan(value))
        case Boolean(value=value):
            return not value
    return False
