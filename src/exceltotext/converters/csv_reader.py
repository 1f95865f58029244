"""CSV sheet reader."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

import chardet

from .base import BaseReader, SheetNotFoundError
from .cells import Cell, to_row

logger = logging.getLogger(__name__)

CANDIDATE_DELIMITERS = ",;\t"


def read_text(path: str) -> str:
    """Decode a text file, trying UTF-8 first and chardet detection after."""
    raw_bytes = Path(path).read_bytes()
    try:
        return raw_bytes.decode("utf-8-sig")
    except UnicodeDecodeError:
        encoding = chardet.detect(raw_bytes)["encoding"] or "latin-1"
        logger.debug("Decoding %s as %s", path, encoding)
        return raw_bytes.decode(encoding, errors="replace")


def sniff_delimiter(text: str) -> str:
    sample = "\n".join(text.splitlines()[:20])
    try:
        return csv.Sniffer().sniff(sample, delimiters=CANDIDATE_DELIMITERS).delimiter
    except csv.Error:
        return ","


class CsvReader(BaseReader):
    """Treats a CSV file as a workbook with a single sheet named after the file."""

    def sheet_names(self, path: str) -> list[str]:
        return [Path(path).stem]

    def read_grid(self, path: str, sheet: str) -> list[list[Cell]]:
        if sheet != Path(path).stem:
            raise SheetNotFoundError(sheet)
        text = read_text(path)
        # newline="" keeps line breaks inside quoted cells
        reader = csv.reader(io.StringIO(text, newline=""), delimiter=sniff_delimiter(text))
        return [to_row(row) for row in reader]
