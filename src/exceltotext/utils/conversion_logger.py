"""File-based conversion session logging with automatic cleanup."""

import logging
import os
import time
from datetime import datetime
from pathlib import Path

from exceltotext.models.config import CONFIG_DIR

logger = logging.getLogger(__name__)

LOG_DIR = CONFIG_DIR / "logs"
DEFAULT_RETENTION_DAYS = 7


def get_log_dir() -> Path:
    """Return the log directory, creating it if necessary."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR


def create_session_log() -> Path:
    """Create a new log file for the current conversion."""
    log_dir = get_log_dir()
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    log_file = log_dir / f"convert_{timestamp}.log"
    log_file.write_text(
        f"# Excel to Text Conversion Log\n# Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n# {'=' * 60}\n\n",
        encoding="utf-8",
    )
    return log_file


def append_log(log_file: Path, message: str) -> None:
    """Append a timestamped message to the log file."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"[{timestamp}] {message}\n")


def finalize_log(log_file: Path, result: dict) -> None:
    """Write summary to the log file."""
    rows_read = result.get("rows_read", 0)
    rows_written = result.get("rows_written", 0)
    skipped = rows_read - rows_written

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"\n# {'=' * 60}\n")
        f.write(f"# Completed: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        f.write(f"# Rows read: {rows_read} | Written: {rows_written} | Skipped empty: {skipped}\n")


def cleanup_old_logs(retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete log files older than retention_days. Returns count of deleted files."""
    log_dir = get_log_dir()
    cutoff = time.time() - (retention_days * 86400)
    deleted = 0

    for log_file in log_dir.glob("convert_*.log"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                deleted += 1
        except OSError as e:
            logger.warning("Failed to delete old log %s: %s", log_file, e)

    if deleted:
        logger.info("Cleaned up %d old log file(s)", deleted)
    return deleted


def get_latest_log() -> Path | None:
    """Return the most recent log file, or None if no logs exist."""
    log_dir = get_log_dir()
    logs = sorted(log_dir.glob("convert_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    return logs[0] if logs else None


def open_in_editor(path: Path) -> None:
    """Open a file in the system's default application."""
    import subprocess
    import sys

    try:
        if sys.platform == "darwin":
            subprocess.Popen(["open", str(path)])
        elif sys.platform == "win32":
            os.startfile(str(path))  # noqa: S606
        else:
            subprocess.Popen(["xdg-open", str(path)])
    except Exception as e:
        logger.error("Failed to open %s: %s", path, e)
