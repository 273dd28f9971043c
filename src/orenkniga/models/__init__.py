"""Data models."""

from orenkniga.models.book import AuthorRef, BookRecord
from orenkniga.models.bookmark import Bookmark
from orenkniga.models.settings import (
    FONT_SIZE_RANGE,
    LINE_HEIGHT_RANGE,
    MARGINS_RANGE,
    FontFamily,
    ReaderSettings,
    Theme,
)

__all__ = [
    # Book models
    "AuthorRef",
    "BookRecord",
    "Bookmark",
    # Settings models
    "FontFamily",
    "Theme",
    "ReaderSettings",
    "FONT_SIZE_RANGE",
    "LINE_HEIGHT_RANGE",
    "MARGINS_RANGE",
]
