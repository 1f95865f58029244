"""Entry point for the Excel to Text Flet application."""

import logging
from pathlib import Path

import flet as ft

from exceltotext.app import ExcelToTextApp


async def main(page: ft.Page) -> None:
    """Initialize and run the application."""
    app = ExcelToTextApp(page)
    await app.initialize()


def run() -> None:
    """CLI entry point for the exceltotext command."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ft.app(target=main, assets_dir=str(Path(__file__).parent))


if __name__ == "__main__":
    run()
