"""Per-column cell formatting rules.

Every rule takes a tagged cell and returns its text. Rules never raise: input
that cannot be parsed for the column's format comes back as its plain text.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Context, Decimal
from functools import partial

from .cells import Absent, Cell, DateValue, Number, Text, cell_text, is_falsy, number_text

CellRule = Callable[[Cell], str]

# Spreadsheet serial day 0. Includes the 1900 leap-year bug offset.
SERIAL_EPOCH = datetime(1899, 12, 30)
MS_PER_DAY = 86_400_000
TWO_DIGIT_YEAR_PIVOT = 50

# Date text layouts tried in order once "-" has been turned into "/".
DATE_FORMATS = [
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
]

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")
_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")

# Wide enough to quantize any finite double without InvalidOperation.
_DECIMAL_CONTEXT = Context(prec=400)


def parse_leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of ``text``, ignoring trailing junk."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def parse_leading_int(text: str) -> int | None:
    """Parse the integer prefix of ``text`` (decimal, or hex with ``0x``)."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def _numeric_value(cell: Cell) -> float | int | None:
    match cell:
        case Number(value=value):
            return value
        case Text(value=value):
            return parse_leading_float(value.replace(",", ".", 1))
    return None


def _finite(value: float | int) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


def format_integer(cell: Cell) -> str:
    if isinstance(cell, Absent):
        return ""
    value = _numeric_value(cell)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return cell_text(cell)
    if not _finite(value):
        return number_text(value)
    rounded = Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return str(int(rounded))


def format_decimal(cell: Cell, places: int = 2) -> str:
    if isinstance(cell, Absent):
        return ""
    value = _numeric_value(cell)
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return cell_text(cell)
    if not _finite(value):
        return number_text(value)
    if value == 0:
        value = 0
    exponent = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)
    return f"{rounded:f}"


def serial_to_datetime(serial: float | int) -> datetime:
    """Convert a spreadsheet serial day count to a local datetime."""
    return SERIAL_EPOCH + timedelta(milliseconds=math.trunc(serial * MS_PER_DAY))


def parse_date_text(text: str) -> datetime | None:
    candidate = text.replace("-", "/").strip()
    for fmt in DATE_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
        except ValueError:
            continue
        # two-digit years: 00-49 are 20xx, 50-99 are 19xx
        if "%y" in fmt and parsed.year >= 2000 + TWO_DIGIT_YEAR_PIVOT:
            parsed = parsed.replace(year=parsed.year - 100)
        return parsed
    return None


def format_date(cell: Cell) -> str:
    if is_falsy(cell):
        return ""
    match cell:
        case DateValue(value=value):
            moment: datetime | None = value
        case Number(value=value):
            try:
                moment = serial_to_datetime(value)
            except (OverflowError, ValueError):
                moment = None
        case Text(value=value):
            moment = parse_date_text(value)
        case _:
            moment = None
    if moment is None:
        return cell_text(cell)
    return f"{moment.day:02d}/{moment.month:02d}/{moment.year:04d}"


def format_identifier(cell: Cell, width: int) -> str:
    if is_falsy(cell):
        return ""
    match cell:
        case Number(value=value):
            digits = number_text(value)
        case Text(value=value):
            parsed = parse_leading_int(value)
            if parsed is None:
                return value
            digits = str(parsed)
        case _:
            return cell_text(cell)
    return digits.rjust(width, "0")


def format_default(cell: Cell) -> str:
    return cell_text(cell)


def decimal(places: int) -> CellRule:
    return partial(format_decimal, places=places)


def identifier(width: int) -> CellRule:
    return partial(format_identifier, width=width)


COLUMN_RULES: Mapping[int, CellRule] = {
    0: format_integer,
    1: decimal(2),
    5: format_date,
    6: identifier(13),
    8: decimal(2),
    9: format_date,
    10: identifier(12),
}
