"""Convert view: pick a spreadsheet, choose a sheet, preview and save the text."""

import logging
from collections.abc import Callable
from pathlib import Path

import flet as ft

from exceltotext.converters import ConversionResult
from exceltotext.models.config import AppConfig
from exceltotext.services.converter import ConversionService
from exceltotext.utils.conversion_logger import (
    append_log,
    cleanup_old_logs,
    create_session_log,
    finalize_log,
    get_latest_log,
    open_in_editor,
)
from exceltotext.utils.worker import BackgroundWorker

logger = logging.getLogger(__name__)

PICKER_EXTENSIONS = ["xlsx", "xlsm", "xls", "csv"]


class ConvertView:
    """Main screen with file selection, sheet dropdown, preview and download."""

    def __init__(
        self,
        config: AppConfig,
        page: ft.Page,
        on_config_changed: Callable[[AppConfig], None],
    ) -> None:
        self.config = config
        self.page = page
        self._on_config_changed = on_config_changed
        self._worker = BackgroundWorker()
        self._service = ConversionService(config)
        self._source: Path | None = None
        self._result: ConversionResult | None = None
        self._current_log: Path | None = None

        # File picker is a service in Flet 0.80+, registered via page.services
        self._file_picker = ft.FilePicker()
        page.services.append(self._file_picker)

        cleanup_old_logs(config.log_retention_days)

        # Controls
        self._source_text = ft.Text("No file selected", size=14, expand=True)
        self._sheet_dropdown = ft.Dropdown(label="Sheet", width=400, options=[], disabled=True)
        self._spinner = ft.ProgressRing(width=20, height=20, stroke_width=2, visible=False)
        self._status_text = ft.Text("Ready", size=14, weight=ft.FontWeight.W_600)
        self._stats_text = ft.Text("", size=13)
        self._preview = ft.TextField(
            label="Converted Output",
            multiline=True,
            read_only=True,
            min_lines=12,
            max_lines=12,
            text_style=ft.TextStyle(font_family="monospace", size=13),
            expand=True,
        )

        self._convert_btn = ft.ElevatedButton(
            "Convert to Text",
            icon=ft.Icons.TRANSFORM,
            on_click=self._start_conversion,
            disabled=True,
            style=ft.ButtonStyle(
                bgcolor=ft.Colors.PRIMARY,
                color=ft.Colors.ON_PRIMARY,
            ),
        )
        self._save_btn = ft.ElevatedButton(
            "Download TXT",
            icon=ft.Icons.DOWNLOAD,
            on_click=self._save_output,
            disabled=True,
        )
        self._clear_btn = ft.OutlinedButton(
            "Clear",
            icon=ft.Icons.CLEAR,
            on_click=self._clear,
            visible=False,
        )
        self._view_log_btn = ft.TextButton(
            "View Log",
            icon=ft.Icons.DESCRIPTION,
            on_click=self._view_log,
            visible=get_latest_log() is not None,
        )

    def build(self) -> ft.Control:
        """Build and return the convert view layout."""
        return ft.Column(
            controls=[
                ft.Text("Excel to Text Converter", size=24, weight=ft.FontWeight.BOLD),
                ft.Text("Upload an Excel file, select a sheet, and convert it to formatted text", size=13),
                ft.Divider(),
                ft.Text("Excel File", size=16, weight=ft.FontWeight.W_600),
                ft.Row(
                    controls=[
                        ft.Icon(ft.Icons.TABLE_CHART, size=20),
                        self._source_text,
                        ft.ElevatedButton(
                            "Choose File",
                            icon=ft.Icons.UPLOAD_FILE,
                            on_click=self._pick_file,
                        ),
                        self._clear_btn,
                    ],
                    alignment=ft.MainAxisAlignment.START,
                ),
                self._sheet_dropdown,
                ft.Divider(),
                ft.Row(
                    controls=[
                        self._convert_btn,
                        self._spinner,
                        self._status_text,
                    ],
                    spacing=15,
                    alignment=ft.MainAxisAlignment.START,
                ),
                self._stats_text,
                self._preview,
                ft.Row(
                    controls=[self._save_btn, self._view_log_btn],
                    alignment=ft.MainAxisAlignment.END,
                ),
            ],
            spacing=10,
            scroll=ft.ScrollMode.AUTO,
            expand=True,
        )

    def refresh_config(self, config: AppConfig) -> None:
        """Pick up settings changes (output name, encoding)."""
        self.config = config
        self._service.config = config

    def _set_status(self, message: str, color: str | None = None) -> None:
        self._status_text.value = message
        self._status_text.color = color

    def _set_busy(self, busy: bool) -> None:
        self._spinner.visible = busy
        self._convert_btn.disabled = busy or not self._sheet_dropdown.value
        self._save_btn.disabled = busy or self._result is None

    async def _pick_file(self, _e: ft.ControlEvent) -> None:
        if self._worker.is_running:
            return
        files = await self._file_picker.pick_files(
            dialog_title="Select Excel file",
            initial_directory=self.config.last_source_dir or None,
            allowed_extensions=PICKER_EXTENSIONS,
            allow_multiple=False,
        )
        if not files or not files[0].path:
            return

        path = Path(files[0].path)
        self._reset_state()
        self._source = path
        self._source_text.value = path.name
        self._clear_btn.visible = True
        self._set_status("Reading workbook...", ft.Colors.PRIMARY)
        self._set_busy(True)
        self.page.update()

        self.config.last_source_dir = str(path.parent)
        self._on_config_changed(self.config)

        started = self._worker.run(
            fn=lambda: self._service.open_workbook(path),
            on_complete=self._on_workbook_opened,
            on_error=self._on_error,
        )
        if not started:
            self._reset_state()
            self._set_busy(False)
            self._set_status("Busy: try again when the current task finishes", ft.Colors.AMBER)
            self.page.update()

    def _on_workbook_opened(self, sheets: list[str]) -> None:
        """Called from background thread; delegates UI update to Flet event loop."""

        async def _update():
            self._sheet_dropdown.options = [ft.dropdown.Option(name, name) for name in sheets]
            self._sheet_dropdown.value = sheets[0]
            self._sheet_dropdown.disabled = False
            self._set_status(f"{len(sheets)} sheet(s) found")
            self._set_busy(False)
            self.page.update()

        self.page.run_task(_update)

    def _start_conversion(self, _e: ft.ControlEvent) -> None:
        if self._worker.is_running:
            return
        source = self._source
        sheet = self._sheet_dropdown.value
        if source is None or not sheet:
            self._set_status("Select a file and a sheet first", ft.Colors.ERROR)
            self.page.update()
            return

        self._current_log = create_session_log()
        append_log(self._current_log, f"Source: {source}")
        append_log(self._current_log, f"Sheet: {sheet}")

        self._result = None
        self._preview.value = ""
        self._stats_text.value = ""
        self._set_status("Processing...", ft.Colors.PRIMARY)
        self._set_busy(True)
        self.page.update()

        started = self._worker.run(
            fn=lambda: self._service.convert_sheet(source, sheet),
            on_complete=self._on_conversion_complete,
            on_error=self._on_error,
        )
        if not started:
            append_log(self._current_log, "[SKIPPED] Another task is still running")
            self._set_status("Busy: try again when the current task finishes", ft.Colors.AMBER)
            self._set_busy(False)
            self.page.update()

    def _on_conversion_complete(self, result: ConversionResult) -> None:
        """Called from background thread; delegates UI update to Flet event loop."""
        if self._current_log:
            finalize_log(
                self._current_log,
                {"rows_read": result.rows_read, "rows_written": result.rows_written},
            )

        async def _update():
            self._result = result
            self._preview.value = result.text
            self._stats_text.value = (
                f"Rows read: {result.rows_read} | Written: {result.rows_written} | "
                f"Skipped empty: {result.rows_read - result.rows_written}"
            )
            self._set_status("Complete", ft.Colors.GREEN)
            self._set_busy(False)
            self._view_log_btn.visible = True
            self.page.update()

        self.page.run_task(_update)

    def _on_error(self, error: Exception) -> None:
        """Called from background thread; delegates UI update to Flet event loop."""
        if self._current_log:
            append_log(self._current_log, f"[ERROR] {error}")

        async def _update():
            self._set_status(f"Error: {error}", ft.Colors.ERROR)
            self._set_busy(False)
            self.page.update()

        self.page.run_task(_update)

    async def _save_output(self, _e: ft.ControlEvent) -> None:
        if self._result is None or self._source is None:
            return

        default = self._service.default_output_path(self._source)
        target = await self._file_picker.save_file(
            dialog_title="Save converted text",
            file_name=default.name,
            initial_directory=str(default.parent),
            allowed_extensions=["txt"],
        )
        if not target:
            return

        try:
            saved = self._service.save_output(self._result.text, Path(target))
        except Exception as e:
            logger.error("Save failed: %s", e)
            if self._current_log:
                append_log(self._current_log, f"[ERROR] {e}")
            self._set_status(f"Save failed: {e}", ft.Colors.ERROR)
            self.page.update()
            return

        if self._current_log:
            append_log(self._current_log, f"[SAVED] {saved}")
        self.config.last_output_dir = str(saved.parent)
        self._on_config_changed(self.config)
        self._set_status(f"Saved {saved.name}", ft.Colors.GREEN)
        self.page.update()

        if self.config.open_after_save:
            open_in_editor(saved)

    def _reset_state(self) -> None:
        self._source = None
        self._result = None
        self._source_text.value = "No file selected"
        self._sheet_dropdown.options = []
        self._sheet_dropdown.value = None
        self._sheet_dropdown.disabled = True
        self._preview.value = ""
        self._stats_text.value = ""
        self._clear_btn.visible = False
        self._convert_btn.disabled = True
        self._save_btn.disabled = True
        self._set_status("Ready")

    def _clear(self, _e: ft.ControlEvent) -> None:
        if self._worker.is_running:
            return
        self._reset_state()
        self.page.update()

    def _view_log(self, _e: ft.ControlEvent) -> None:
        """Open the most recent log file in the system editor."""
        log_file = self._current_log or get_latest_log()
        if log_file and log_file.exists():
            open_in_editor(log_file)
        else:
            self._set_status("No log file available", ft.Colors.AMBER)
            self.page.update()
