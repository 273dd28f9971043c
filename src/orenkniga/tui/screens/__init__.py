"""TUI screens for the reader."""

from orenkniga.tui.screens.catalog import CatalogScreen
from orenkniga.tui.screens.reader import ReaderScreen
from orenkniga.tui.screens.settings import SettingsScreen

__all__ = [
    "CatalogScreen",
    "ReaderScreen",
    "SettingsScreen",
]
