"""Universal sheet converter: dispatches to format-specific readers."""

from __future__ import annotations

from pathlib import Path

from .base import BaseReader, ConversionResult
from .csv_reader import CsvReader
from .xls_reader import XlsReader
from .xlsx_reader import XlsxReader


class UnsupportedFormatError(Exception):
    """Raised when no reader is registered for the file extension."""

    def __init__(self, ext: str) -> None:
        super().__init__(f"Unsupported format: {ext}")
        self.ext = ext


class UniversalConverter:
    """Orchestrator: selects the appropriate reader based on file extension."""

    _REGISTRY: dict[str, type[BaseReader]] = {
        ".xlsx": XlsxReader,
        ".xlsm": XlsxReader,
        ".xls": XlsReader,
        ".csv": CsvReader,
    }

    def supported_extensions(self) -> list[str]:
        """Return list of supported file extensions."""
        return list(self._REGISTRY.keys())

    def reader_for(self, path: str) -> BaseReader:
        ext = Path(path).suffix.lower()
        reader_cls = self._REGISTRY.get(ext)
        if reader_cls is None:
            raise UnsupportedFormatError(ext)
        return reader_cls()

    def sheet_names(self, path: str) -> list[str]:
        return self.reader_for(path).sheet_names(path)

    def convert(self, path: str, sheet: str | None = None) -> ConversionResult:
        """Convert one sheet (the first one by default) to delimited text."""
        return self.reader_for(path).run(path, sheet)
