"""Shared state and presentation helpers for the reader TUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from orenkniga.config import AppConfig
from orenkniga.models.settings import (
    FONT_SIZE_RANGE,
    FONT_SIZE_STEP,
    LINE_HEIGHT_RANGE,
    LINE_HEIGHT_STEP,
    MARGINS_RANGE,
    MARGINS_STEP,
    FontFamily,
    ReaderSettings,
    Theme,
)
from orenkniga.storage import JsonFileStore, KeyValueStore
from orenkniga.stores.bookmarks import BookmarkStore
from orenkniga.stores.books import BookStore
from orenkniga.stores.settings import SettingsStore

SettingName = Literal["font_size", "line_height", "margins", "font_family", "theme"]


@dataclass
class ReaderState:
    """Stores shared by every screen."""

    config: AppConfig
    store: KeyValueStore
    books: BookStore = field(init=False)
    settings: SettingsStore = field(init=False)
    bookmarks: BookmarkStore = field(init=False)

    def __post_init__(self) -> None:
        self.books = BookStore(self.store)
        self.settings = SettingsStore(self.store)
        self.bookmarks = BookmarkStore(self.store)


def open_state(config: AppConfig) -> ReaderState:
    """Build reader state backed by the on-disk store."""
    return ReaderState(config=config, store=JsonFileStore(config.store_file))


# ============================================================================
# Settings panel helpers
# ============================================================================


@dataclass(frozen=True)
class SettingRow:
    """One adjustable field of the settings panel."""

    name: SettingName
    label: str
    value: str
    hint: str


SETTING_ORDER: list[SettingName] = [
    "font_size",
    "line_height",
    "margins",
    "font_family",
    "theme",
]

THEME_CYCLE = [Theme.LIGHT, Theme.DARK, Theme.SEPIA]
FONT_CYCLE = [FontFamily.DEFAULT, FontFamily.SERIF]


def _cycle(options: list, current, step: int):
    return options[(options.index(current) + step) % len(options)]


def setting_rows(settings: ReaderSettings) -> list[SettingRow]:
    """Display rows for the settings panel and `settings show`."""
    return [
        SettingRow(
            "font_size",
            "Font size",
            f"{settings.font_size}px",
            f"{FONT_SIZE_RANGE[0]}-{FONT_SIZE_RANGE[1]}",
        ),
        SettingRow(
            "line_height",
            "Line height",
            f"{settings.line_height:g}x",
            f"{LINE_HEIGHT_RANGE[0]}-{LINE_HEIGHT_RANGE[1]}",
        ),
        SettingRow(
            "margins",
            "Margins",
            f"{settings.margins}px",
            f"{MARGINS_RANGE[0]}-{MARGINS_RANGE[1]}",
        ),
        SettingRow("font_family", "Font", settings.font_family.value, "default | serif"),
        SettingRow("theme", "Theme", settings.theme.value, "light | dark | sepia"),
    ]


def stepped_value(settings: ReaderSettings, name: SettingName, step: int) -> object:
    """Next value of a field after moving `step` notches on its control.

    Numeric fields are left for the model to clamp.
    """
    if name == "font_size":
        return settings.font_size + step * FONT_SIZE_STEP
    if name == "line_height":
        return round(settings.line_height + step * LINE_HEIGHT_STEP, 1)
    if name == "margins":
        return settings.margins + step * MARGINS_STEP
    if name == "font_family":
        return _cycle(FONT_CYCLE, settings.font_family, step)
    return _cycle(THEME_CYCLE, settings.theme, step)


# ============================================================================
# Page presentation helpers
# ============================================================================


def theme_class(settings: ReaderSettings) -> str:
    return f"theme-{settings.theme.value}"


def paragraph_gap(settings: ReaderSettings) -> str:
    """Separator between paragraphs; looser line height adds a blank line."""
    return "\n\n\n" if settings.line_height >= 1.8 else "\n\n"


def horizontal_padding(settings: ReaderSettings) -> int:
    """Terminal columns of side padding for a margin in pixels."""
    return max(1, settings.margins // 4)
