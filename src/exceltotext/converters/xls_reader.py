"""Legacy XLS (BIFF) sheet reader."""

from __future__ import annotations

from typing import Any

import xlrd

from .base import BaseReader, SheetNotFoundError
from .cells import Cell, to_row


def _cell_value(cell: Any, datemode: int) -> Any:
    """Map an xlrd cell to a plain Python value."""
    if cell.ctype == xlrd.XL_CELL_DATE:
        try:
            return xlrd.xldate_as_datetime(cell.value, datemode)
        except (xlrd.XLDateError, ValueError, OverflowError):
            return cell.value
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
        return None
    return cell.value


class XlsReader(BaseReader):
    """Reads XLS workbooks through xlrd."""

    def sheet_names(self, path: str) -> list[str]:
        book = xlrd.open_workbook(path, on_demand=True)
        try:
            return list(book.sheet_names())
        finally:
            book.release_resources()

    def read_grid(self, path: str, sheet: str) -> list[list[Cell]]:
        book = xlrd.open_workbook(path, on_demand=True)
        try:
            if sheet not in book.sheet_names():
                raise SheetNotFoundError(sheet)
            ws = book.sheet_by_name(sheet)
            return [
                to_row([_cell_value(cell, book.datemode) for cell in ws.row(idx)])
                for idx in range(ws.nrows)
            ]
        finally:
            book.release_resources()
