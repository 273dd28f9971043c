"""Reading sessions.

A ``Reader`` opens a ``ReaderSession`` for one book: it resolves the book,
paginates its text, puts a cursor on page 1 and loads the reader's display
settings. The session is the only owner of its cursor and transition guard.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orenkniga.core.cursor import PageCursor
from orenkniga.core.paginator import CHARS_PER_PAGE, Pagination, paginate
from orenkniga.core.transition import (
    SETTLE_INTERVAL,
    FlipDirection,
    Scheduler,
    TransitionGuard,
)
from orenkniga.errors import BookNotFoundError

if TYPE_CHECKING:
    from orenkniga.models.book import BookRecord
    from orenkniga.models.bookmark import Bookmark
    from orenkniga.models.settings import ReaderSettings
    from orenkniga.stores.bookmarks import BookmarkStore
    from orenkniga.stores.books import BookStore
    from orenkniga.stores.settings import SettingsStore

log = logging.getLogger(__name__)

BOOKMARK_SNIPPET_LENGTH = 80


@dataclass(frozen=True)
class ReadingPosition:
    """Where a reader is in a book."""

    book_id: str
    current_page: int


@dataclass(frozen=True)
class RenderedPage:
    """One page of text plus the parameters to present it with."""

    title: str
    author: str
    page: int
    total_pages: int
    settings: "ReaderSettings"
    paragraphs: list[str] = field(default_factory=list)
    flip_direction: FlipDirection | None = None

    @property
    def label(self) -> str:
        return f"Page {self.page} of {self.total_pages}"


class ReaderSession:
    """An open book."""

    def __init__(
        self,
        book: "BookRecord",
        pagination: Pagination,
        settings_store: "SettingsStore",
        bookmarks: "BookmarkStore",
        scheduler: Scheduler | None = None,
        settle_interval: float = SETTLE_INTERVAL,
    ):
        self.book = book
        self.pagination = pagination
        self.cursor = PageCursor(pagination.total_pages)
        self.guard = TransitionGuard(self.cursor, scheduler, settle_interval)
        self._settings_store = settings_store
        self._bookmarks = bookmarks
        self._settings = settings_store.load()
        self.closed = False

    @property
    def current_page(self) -> int:
        return self.cursor.current_page

    @property
    def total_pages(self) -> int:
        return self.cursor.total_pages

    @property
    def position(self) -> ReadingPosition:
        return ReadingPosition(book_id=self.book.id, current_page=self.current_page)

    @property
    def progress(self) -> float:
        """Fraction of the book reached, from 1/total_pages to 1.0."""
        return self.current_page / self.total_pages

    @property
    def settings(self) -> "ReaderSettings":
        return self._settings

    def update_settings(self, **changes: object) -> "ReaderSettings":
        """Change display settings. Pagination is left untouched."""
        self._settings = self._settings_store.update(**changes)
        return self._settings

    def current_page_text(self) -> RenderedPage:
        """Render the current page with the current settings."""
        return RenderedPage(
            title=self.book.title,
            author=self.book.author.name,
            page=self.current_page,
            total_pages=self.total_pages,
            settings=self._settings,
            paragraphs=self.pagination.page_paragraphs(self.current_page),
            flip_direction=self.guard.direction,
        )

    def flip(self, direction: FlipDirection | str) -> bool:
        """Request a page turn. Returns False if it was dropped."""
        return self.guard.request_flip(direction)

    def next_page(self) -> bool:
        return self.flip(FlipDirection.FORWARD)

    def previous_page(self) -> bool:
        return self.flip(FlipDirection.BACKWARD)

    def jump(self, page: int) -> int:
        """Go straight to a page, clamped into range."""
        return self.cursor.jump(page)

    def bookmark_here(self) -> "Bookmark":
        """Bookmark the current page."""
        paragraphs = self.pagination.page_paragraphs(self.current_page)
        snippet = paragraphs[0].strip()[:BOOKMARK_SNIPPET_LENGTH] if paragraphs else None
        return self._bookmarks.add(self.book.id, self.current_page, text=snippet)

    def close(self) -> None:
        """End the session and cancel any pending page-turn timer."""
        if self.closed:
            return
        self.guard.close()
        self.closed = True
        log.info("Closed %s at page %d/%d", self.book.id, self.current_page, self.total_pages)


class Reader:
    """Opens reading sessions against the book, settings and bookmark stores."""

    def __init__(
        self,
        books: "BookStore",
        settings: "SettingsStore",
        bookmarks: "BookmarkStore",
        scheduler: Scheduler | None = None,
        chars_per_page: int = CHARS_PER_PAGE,
        settle_interval: float = SETTLE_INTERVAL,
    ):
        self.books = books
        self.settings = settings
        self.bookmarks = bookmarks
        self.scheduler = scheduler
        self.chars_per_page = chars_per_page
        self.settle_interval = settle_interval

    def open(self, book_id: str) -> ReaderSession:
        """Open a book on page 1.

        Raises:
            BookNotFoundError: If no book matches book_id
        """
        book = self.books.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)

        pagination = paginate(book.content, self.chars_per_page)
        session = ReaderSession(
            book,
            pagination,
            self.settings,
            self.bookmarks,
            self.scheduler,
            settle_interval=self.settle_interval,
        )
        log.info("Opened %s (%s), %d pages", book.id, book.title, pagination.total_pages)
        return session
