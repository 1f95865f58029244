"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

# Default config directory
CONFIG_DIR = Path.home() / ".exceltotext"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_OUTPUT_FILENAME = "salida.txt"


class AppConfig(BaseModel):
    """Configuration for the Excel to Text application."""

    last_source_dir: str = ""
    last_output_dir: str = ""
    output_filename: str = Field(default=DEFAULT_OUTPUT_FILENAME, pattern=r"^[^/\\]+\.txt$")
    output_encoding: str = Field(default="utf-8", pattern="^(utf-8|latin-1|cp1252)$")
    log_retention_days: int = Field(default=7, ge=1, le=365)
    open_after_save: bool = False
