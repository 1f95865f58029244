"""Tests for BaseReader ABC and ConversionResult."""

import pytest

from exceltotext.converters.base import BaseReader, ConversionResult, SheetNotFoundError
from exceltotext.converters.cells import to_row


class MemoryReader(BaseReader):
    def __init__(self, sheets: dict[str, list[list]]) -> None:
        self._sheets = sheets

    def sheet_names(self, path: str) -> list[str]:
        return list(self._sheets)

    def read_grid(self, path: str, sheet: str):
        return [to_row(row) for row in self._sheets[sheet]]


def test_base_reader_is_abstract():
    with pytest.raises(TypeError):
        BaseReader()


def test_run_counts_rows():
    reader = MemoryReader({"S": [["h"], ["1"], [None], ["2"]]})
    result = reader.run("mem", "S")
    assert isinstance(result, ConversionResult)
    assert result.text == "1\n2\n"
    assert result.rows_read == 3
    assert result.rows_written == 2
    assert result.source_path == "mem"
    assert result.duration_seconds >= 0


def test_run_uses_first_sheet_by_default():
    reader = MemoryReader({"A": [["h"], ["1"]], "B": [["h"], ["2"]]})
    assert reader.run("mem").sheet == "A"


def test_run_without_sheets_raises():
    with pytest.raises(SheetNotFoundError):
        MemoryReader({}).run("mem")


def test_empty_sheet_gives_newline():
    result = MemoryReader({"S": []}).run("mem", "S")
    assert result.text == "\n"
    assert result.rows_read == 0
