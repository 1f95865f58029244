"""Conversion service: reads a workbook sheet and writes the text output."""

import logging
from pathlib import Path

from exceltotext.converters import ConversionResult, UniversalConverter
from exceltotext.models.config import AppConfig

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Raised when a workbook cannot be read or the output cannot be written."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to convert {filename}: {reason}")


class ConversionService:
    """Opens spreadsheets, converts a selected sheet and saves the result."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self._converter = UniversalConverter()

    @staticmethod
    def is_supported(path: Path) -> bool:
        """Check if a file has a registered spreadsheet reader."""
        return path.suffix.lower() in UniversalConverter().supported_extensions()

    def open_workbook(self, path: Path) -> list[str]:
        """Return the sheet names of a workbook."""
        if not self.is_supported(path):
            raise ConversionError(path.name, f"Unsupported format: {path.suffix.lower() or '(none)'}")
        try:
            sheets = self._converter.sheet_names(str(path))
        except Exception as e:
            raise ConversionError(path.name, str(e)) from e
        if not sheets:
            raise ConversionError(path.name, "Workbook contains no sheets")
        logger.debug("Opened %s with sheets %s", path.name, sheets)
        return sheets

    def convert_sheet(self, path: Path, sheet: str | None = None) -> ConversionResult:
        """Convert one sheet of the workbook to fixed-format text."""
        try:
            result = self._converter.convert(str(path), sheet)
        except Exception as e:
            raise ConversionError(path.name, str(e)) from e
        logger.info(
            "Converted %s [%s]: %d of %d row(s) written in %.3fs",
            path.name,
            result.sheet,
            result.rows_written,
            result.rows_read,
            result.duration_seconds,
        )
        return result

    def default_output_path(self, source: Path, output_dir: str | None = None) -> Path:
        """Where the output goes unless the user picks another location."""
        directory = Path(output_dir or self.config.last_output_dir or source.parent)
        return directory / self.config.output_filename

    def save_output(self, text: str, target: Path) -> Path:
        """Write the converted text to ``target`` with the configured encoding."""
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps "\n" line endings on every platform
            with open(target, "w", encoding=self.config.output_encoding, errors="replace", newline="") as f:
                f.write(text)
        except OSError as e:
            raise ConversionError(target.name, str(e)) from e
        logger.info("Saved output to %s", target)
        return target
