"""Persisted bookmarks."""

import logging
import uuid

from pydantic import TypeAdapter

from orenkniga.models.bookmark import Bookmark
from orenkniga.storage import KeyValueStore, load_entries

log = logging.getLogger(__name__)

_bookmark = TypeAdapter(Bookmark)
_bookmark_list = TypeAdapter(list[Bookmark])


class BookmarkStore:
    """Bookmarks for all books, kept as one list under a fixed key."""

    BOOKMARKS_KEY = "orenkniga-bookmarks"

    def __init__(self, store: KeyValueStore, key: str = BOOKMARKS_KEY):
        self.store = store
        self.key = key

    def _load(self) -> list[Bookmark]:
        return load_entries(self.store.get(self.key), _bookmark, "bookmarks")

    def _save(self, bookmarks: list[Bookmark]) -> None:
        self.store.set(self.key, _bookmark_list.dump_json(bookmarks, by_alias=True).decode())

    def add(self, book_id: str, page: int, text: str | None = None) -> Bookmark:
        """Bookmark a page of a book."""
        bookmark = Bookmark(id=uuid.uuid4().hex, book_id=book_id, page=page, text=text)
        bookmarks = self._load()
        bookmarks.append(bookmark)
        self._save(bookmarks)
        log.info("Bookmarked page %d of book %s", page, book_id)
        return bookmark

    def list_bookmarks(self, book_id: str | None = None) -> list[Bookmark]:
        """Bookmarks in creation order, optionally for a single book."""
        bookmarks = self._load()
        if book_id is None:
            return bookmarks
        return [b for b in bookmarks if b.book_id == book_id]

    def clear(self, book_id: str | None = None) -> int:
        """Remove bookmarks. Returns number removed."""
        bookmarks = self._load()
        if book_id is None:
            kept: list[Bookmark] = []
        else:
            kept = [b for b in bookmarks if b.book_id != book_id]

        removed = len(bookmarks) - len(kept)
        if removed:
            self._save(kept)
        return removed
