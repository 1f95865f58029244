"""Settings view for output file and logging preferences."""

import logging
from collections.abc import Callable

import flet as ft
from pydantic import ValidationError

from exceltotext.models.config import DEFAULT_OUTPUT_FILENAME, AppConfig

logger = logging.getLogger(__name__)

ENCODINGS = [
    ("utf-8", "UTF-8"),
    ("latin-1", "Latin-1 (ISO-8859-1)"),
    ("cp1252", "Windows-1252"),
]


class SettingsView:
    """Settings screen for the output file name, encoding and log retention."""

    def __init__(
        self,
        config: AppConfig,
        page: ft.Page,
        on_config_saved: Callable[[AppConfig], None],
    ) -> None:
        self.config = config
        self.page = page
        self._on_config_saved = on_config_saved

        # Controls
        self._filename_field = ft.TextField(
            label="Output File Name",
            value=config.output_filename,
            width=300,
            hint_text=DEFAULT_OUTPUT_FILENAME,
        )
        self._encoding_dropdown = ft.Dropdown(
            label="Output Encoding",
            value=config.output_encoding,
            width=300,
            options=[ft.dropdown.Option(key, text) for key, text in ENCODINGS],
        )
        self._retention_field = ft.TextField(
            label="Keep Logs (days)",
            value=str(config.log_retention_days),
            width=200,
            keyboard_type=ft.KeyboardType.NUMBER,
        )
        self._open_after_save_checkbox = ft.Checkbox(
            label="Open the text file after saving",
            value=config.open_after_save,
        )
        self._validation_text = ft.Text("", size=13)

    def build(self) -> ft.Control:
        """Build and return the settings view layout."""
        return ft.Column(
            controls=[
                ft.Text("Settings", size=24, weight=ft.FontWeight.BOLD),
                ft.Divider(),
                ft.Text("Output", size=16, weight=ft.FontWeight.W_600),
                self._filename_field,
                self._encoding_dropdown,
                self._open_after_save_checkbox,
                ft.Divider(),
                ft.Text("Logging", size=16, weight=ft.FontWeight.W_600),
                self._retention_field,
                self._validation_text,
                ft.Divider(),
                ft.Row(
                    controls=[
                        ft.ElevatedButton(
                            "Save",
                            icon=ft.Icons.SAVE,
                            on_click=self._save_settings,
                            style=ft.ButtonStyle(
                                bgcolor=ft.Colors.PRIMARY,
                                color=ft.Colors.ON_PRIMARY,
                            ),
                        ),
                        ft.OutlinedButton(
                            "Reset",
                            icon=ft.Icons.RESTORE,
                            on_click=self._reset_settings,
                        ),
                    ],
                    spacing=10,
                ),
            ],
            spacing=12,
            scroll=ft.ScrollMode.AUTO,
            expand=True,
        )

    def _build_config_from_fields(self) -> AppConfig:
        """Create an AppConfig from the current field values."""
        filename = (self._filename_field.value or "").strip() or DEFAULT_OUTPUT_FILENAME
        if not filename.lower().endswith(".txt"):
            filename += ".txt"

        return AppConfig(
            last_source_dir=self.config.last_source_dir,
            last_output_dir=self.config.last_output_dir,
            output_filename=filename,
            output_encoding=self._encoding_dropdown.value or "utf-8",
            log_retention_days=int(self._retention_field.value or 7),
            open_after_save=self._open_after_save_checkbox.value or False,
        )

    def _save_settings(self, _e: ft.ControlEvent) -> None:
        try:
            config = self._build_config_from_fields()
        except (ValidationError, ValueError) as e:
            logger.warning("Invalid settings: %s", e)
            self._validation_text.value = "Invalid settings: check file name and retention days"
            self._validation_text.color = ft.Colors.ERROR
            self.page.update()
            return

        self._validation_text.value = ""
        self._on_config_saved(config)
        self.config = config
        self.page.update()

    def _reset_settings(self, _e: ft.ControlEvent) -> None:
        self._filename_field.value = self.config.output_filename
        self._encoding_dropdown.value = self.config.output_encoding
        self._retention_field.value = str(self.config.log_retention_days)
        self._open_after_save_checkbox.value = self.config.open_after_save
        self._validation_text.value = ""
        self.page.update()
