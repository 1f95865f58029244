"""Tests for ConvertView task guards (worker busy handling)."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from exceltotext.models.config import AppConfig
from exceltotext.views.convert_view import ConvertView


@pytest.fixture
def view(tmp_path):
    page = MagicMock()
    page.services = []
    with (
        patch("exceltotext.utils.conversion_logger.LOG_DIR", tmp_path / "logs"),
        patch("exceltotext.views.convert_view.ft.FilePicker"),
    ):
        view = ConvertView(config=AppConfig(), page=page, on_config_changed=MagicMock())
        view._file_picker = MagicMock()
        view._file_picker.pick_files = AsyncMock(return_value=[MagicMock(path=str(tmp_path / "nuevo.xlsx"))])
        view._worker = MagicMock(is_running=False)
        yield view


class TestPickFile:
    def test_ignored_while_task_running(self, view):
        view._worker.is_running = True
        asyncio.run(view._pick_file(None))
        view._file_picker.pick_files.assert_not_awaited()
        view._worker.run.assert_not_called()
        assert view._source is None

    def test_rejected_start_restores_state(self, view):
        view._worker.run.return_value = False
        asyncio.run(view._pick_file(None))
        assert view._source is None
        assert view._spinner.visible is False
        assert view._save_btn.disabled is True
        assert view._status_text.value.startswith("Busy")

    def test_started_sets_source(self, view, tmp_path):
        view._worker.run.return_value = True
        asyncio.run(view._pick_file(None))
        assert view._source == tmp_path / "nuevo.xlsx"
        view._worker.run.assert_called_once()


class TestStartConversion:
    def test_ignored_while_task_running(self, view, tmp_path):
        view._source = tmp_path / "libro.xlsx"
        view._sheet_dropdown.value = "Hoja1"
        view._worker.is_running = True
        view._start_conversion(None)
        view._worker.run.assert_not_called()
        assert view._current_log is None

    def test_rejected_start_restores_state(self, view, tmp_path):
        view._source = tmp_path / "libro.xlsx"
        view._sheet_dropdown.value = "Hoja1"
        view._worker.run.return_value = False
        view._start_conversion(None)
        assert view._status_text.value.startswith("Busy")
        assert view._spinner.visible is False
        assert view._convert_btn.disabled is False
        assert view._save_btn.disabled is True
        assert "[SKIPPED]" in view._current_log.read_text(encoding="utf-8")
