"""Spreadsheet to fixed-format text conversion package."""

from .base import BaseReader, ConversionResult, SheetNotFoundError
from .cells import Absent, Boolean, Cell, DateValue, Number, Text, to_cell
from .row_formatter import RowFormatter, convert
from .universal_converter import UniversalConverter, UnsupportedFormatError

__all__ = [
    "Absent",
    "BaseReader",
    "Boolean",
    "Cell",
    "ConversionResult",
    "DateValue",
    "Number",
    "RowFormatter",
    "SheetNotFoundError",
    "Text",
    "UniversalConverter",
    "UnsupportedFormatError",
    "convert",
    "to_cell",
]
