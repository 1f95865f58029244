"""Base classes and data models for sheet readers."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .cells import Cell
from .row_formatter import RowFormatter


@dataclass
class ConversionResult:
    """Final result of converting one sheet to text."""

    source_path: str
    sheet: str
    text: str
    rows_read: int  # data rows below the header
    rows_written: int
    duration_seconds: float = 0.0


class SheetNotFoundError(Exception):
    """Raised when the requested sheet does not exist in the workbook."""

    def __init__(self, sheet: str) -> None:
        super().__init__(f"Sheet not found: {sheet}")
        self.sheet = sheet


class BaseReader(ABC):
    """Abstract base class for all spreadsheet readers."""

    @abstractmethod
    def sheet_names(self, path: str) -> list[str]:
        """Return the sheet names of the workbook in document order."""
        ...

    @abstractmethod
    def read_grid(self, path: str, sheet: str) -> list[list[Cell]]:
        """Read one sheet as a grid of tagged cells, header row included."""
        ...

    def run(self, path: str, sheet: str | None = None) -> ConversionResult:
        """Orchestrate read_grid -> RowFormatter.convert."""
        t0 = time.time()
        if sheet is None:
            names = self.sheet_names(path)
            if not names:
                raise SheetNotFoundError("<first sheet>")
            sheet = names[0]
        grid = self.read_grid(path, sheet)
        formatter = RowFormatter()
        text = formatter.convert(grid)
        duration = time.time() - t0
        return ConversionResult(
            source_path=path,
            sheet=sheet,
            text=text,
            rows_read=max(len(grid) - 1, 0),
            rows_written=len(formatter.data_rows(grid)),
            duration_seconds=round(duration, 3),
        )
