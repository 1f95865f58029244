"""Grid to delimited text: the fixed-format output writer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .cells import Absent, Cell, to_row
from .rules import COLUMN_RULES, CellRule, format_default

CELL_DELIMITER = ";"
ROW_DELIMITER = "\n"


class RowFormatter:
    """Formats data rows of a grid by column position.

    Row 0 is a header and is always dropped. Rows whose cells are all empty are
    skipped. Each remaining cell goes through the rule registered for its column
    index, or is passed through as plain text.
    """

    def __init__(self, rules: Mapping[int, CellRule] | None = None) -> None:
        self._rules = COLUMN_RULES if rules is None else rules

    @staticmethod
    def data_rows(grid: Sequence[Sequence[Any]]) -> list[list[Cell]]:
        """Tag every cell and return the non-empty rows below the header."""
        rows = (to_row(row) for row in grid[1:])
        return [row for row in rows if not all(isinstance(cell, Absent) for cell in row)]

    def format_cell(self, cell: Cell, column: int) -> str:
        rule = self._rules.get(column, format_default)
        return rule(cell)

    def format_row(self, row: Sequence[Cell]) -> str:
        return CELL_DELIMITER.join(self.format_cell(cell, idx) for idx, cell in enumerate(row))

    def convert(self, grid: Sequence[Sequence[Any]]) -> str:
        """Encode ``grid`` as text; always ends with exactly one newline."""
        lines = [self.format_row(row) for row in self.data_rows(grid)]
        return ROW_DELIMITER.join(lines) + ROW_DELIMITER


def convert(grid: Sequence[Sequence[Any]]) -> str:
    """Convert a grid using the fixed column rules."""
    return RowFormatter().convert(grid)
