"""Main application class with navigation between views."""

import logging

import flet as ft

from exceltotext.models.config import AppConfig
from exceltotext.utils.storage import load_config, save_config
from exceltotext.views.convert_view import ConvertView
from exceltotext.views.settings_view import SettingsView

logger = logging.getLogger(__name__)


class ExcelToTextApp:
    """Root application managing navigation and shared state."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.config = AppConfig()
        self._convert_view: ConvertView | None = None
        self._settings_view: SettingsView | None = None

    async def initialize(self) -> None:
        """Set up the page, load config, and build UI."""
        await self._configure_page()
        self._load_config()
        self._build_ui()

    async def _configure_page(self) -> None:
        self.page.title = "Excel to Text Converter"
        self.page.theme_mode = ft.ThemeMode.SYSTEM
        self.page.window.width = 1000
        self.page.window.height = 760
        self.page.window.min_width = 800
        self.page.window.min_height = 600
        await self.page.window.center()
        self.page.padding = 20

    def _load_config(self) -> None:
        self.config = load_config()
        logger.info("Config loaded")

    def _build_ui(self) -> None:
        self._convert_view = ConvertView(
            config=self.config,
            page=self.page,
            on_config_changed=self._on_config_changed,
        )
        self._settings_view = SettingsView(
            config=self.config,
            page=self.page,
            on_config_saved=self._on_config_saved,
        )

        self._content_area = ft.Container(
            content=self._convert_view.build(),
            expand=True,
        )

        self.page.navigation_bar = ft.NavigationBar(
            selected_index=0,
            on_change=self._on_nav_change,
            destinations=[
                ft.NavigationBarDestination(
                    icon=ft.Icons.TRANSFORM_OUTLINED,
                    selected_icon=ft.Icons.TRANSFORM,
                    label="Convert",
                ),
                ft.NavigationBarDestination(
                    icon=ft.Icons.SETTINGS_OUTLINED,
                    selected_icon=ft.Icons.SETTINGS,
                    label="Settings",
                ),
            ],
        )

        self.page.add(self._content_area)

    def _on_nav_change(self, e: ft.ControlEvent) -> None:
        idx = e.control.selected_index
        if idx == 0:
            self._content_area.content = self._convert_view.build()
        elif idx == 1:
            self._content_area.content = self._settings_view.build()
        self._content_area.update()

    def _on_config_saved(self, config: AppConfig) -> None:
        """Called when settings are saved."""
        self.config = config
        try:
            save_config(config)
            self.page.show_dialog(ft.SnackBar(content=ft.Text("Settings saved")))
        except OSError as e:
            logger.error("Failed to save config: %s", e)
            self.page.show_dialog(ft.SnackBar(content=ft.Text(f"Save failed: {e}")))

        if self._convert_view:
            self._convert_view.refresh_config(config)

    def _on_config_changed(self, config: AppConfig) -> None:
        """Called when config changes from the convert view (last used folders)."""
        self.config = config
        if self._settings_view:
            self._settings_view.config = config
        try:
            save_config(config)
        except OSError as e:
            logger.warning("Failed to auto-save config: %s", e)
