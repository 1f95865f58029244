"""XLSX sheet reader."""

from __future__ import annotations

import openpyxl

from .base import BaseReader, SheetNotFoundError
from .cells import Cell, to_row


class XlsxReader(BaseReader):
    """Reads cached cell values from XLSX/XLSM workbooks."""

    def sheet_names(self, path: str) -> list[str]:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
        try:
            return list(wb.sheetnames)
        finally:
            wb.close()

    def read_grid(self, path: str, sheet: str) -> list[list[Cell]]:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
        try:
            if sheet not in wb.sheetnames:
                raise SheetNotFoundError(sheet)
            ws = wb[sheet]
            return [to_row(row) for row in ws.iter_rows(values_only=True)]
        finally:
            wb.close()
