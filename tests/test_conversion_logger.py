"""Tests for file-based conversion logging."""

import os
import time
from unittest.mock import patch

from exceltotext.utils.conversion_logger import (
    append_log,
    cleanup_old_logs,
    create_session_log,
    finalize_log,
    get_latest_log,
)


class TestCreateSessionLog:
    def test_creates_log_file(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            log_file = create_session_log()
            assert log_file.exists()
            assert log_file.name.startswith("convert_")
            assert log_file.suffix == ".log"

    def test_log_file_has_header(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            content = create_session_log().read_text(encoding="utf-8")
            assert "Excel to Text Conversion Log" in content
            assert "Started:" in content

    def test_consecutive_sessions_get_distinct_files(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            assert create_session_log() != create_session_log()


class TestAppendLog:
    def test_append_messages(self, tmp_path):
        log_file = tmp_path / "test.log"
        log_file.write_text("", encoding="utf-8")
        append_log(log_file, "Source: libro.xlsx")
        append_log(log_file, "Sheet: Facturas")
        content = log_file.read_text(encoding="utf-8")
        assert "Source: libro.xlsx" in content
        assert "Sheet: Facturas" in content
        assert "] " in content  # timestamp bracket


class TestFinalizeLog:
    def test_writes_summary(self, tmp_path):
        log_file = tmp_path / "test.log"
        log_file.write_text("", encoding="utf-8")
        finalize_log(log_file, {"rows_read": 10, "rows_written": 8})
        content = log_file.read_text(encoding="utf-8")
        assert "Completed:" in content
        assert "Rows read: 10" in content
        assert "Written: 8" in content
        assert "Skipped empty: 2" in content

    def test_missing_counts_default_to_zero(self, tmp_path):
        log_file = tmp_path / "test.log"
        log_file.write_text("", encoding="utf-8")
        finalize_log(log_file, {})
        assert "Rows read: 0 | Written: 0 | Skipped empty: 0" in log_file.read_text(encoding="utf-8")


class TestCleanupOldLogs:
    def test_deletes_old_logs(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            old_log = tmp_path / "convert_20240101_120000_000000.log"
            old_log.write_text("old", encoding="utf-8")
            old_time = time.time() - (30 * 86400)
            os.utime(old_log, (old_time, old_time))

            assert cleanup_old_logs(retention_days=7) == 1
            assert not old_log.exists()

    def test_keeps_recent_and_foreign_files(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            recent_log = tmp_path / "convert_20260225_120000_000000.log"
            recent_log.write_text("recent", encoding="utf-8")
            other = tmp_path / "notes.log"
            other.write_text("keep", encoding="utf-8")
            old_time = time.time() - (30 * 86400)
            os.utime(other, (old_time, old_time))

            assert cleanup_old_logs(retention_days=7) == 0
            assert recent_log.exists()
            assert other.exists()


class TestGetLatestLog:
    def test_returns_latest(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            log1 = tmp_path / "convert_20260101_100000_000000.log"
            log2 = tmp_path / "convert_20260225_120000_000000.log"
            log1.write_text("old", encoding="utf-8")
            log2.write_text("new", encoding="utf-8")
            old_time = time.time() - 3600
            os.utime(log1, (old_time, old_time))

            assert get_latest_log() == log2

    def test_returns_none_when_empty(self, tmp_path):
        with patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path):
            assert get_latest_log() is None
