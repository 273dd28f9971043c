"""Book lookup across the built-in catalog and author uploads."""

import logging

from pydantic import TypeAdapter

from orenkniga.models.book import BookRecord
from orenkniga.storage import KeyValueStore, load_entries
from orenkniga.stores.catalog import BUILTIN_BOOKS

log = logging.getLogger(__name__)

_book = TypeAdapter(BookRecord)
_book_list = TypeAdapter(list[BookRecord])


class BookStore:
    """Resolves book identifiers to book records.

    Built-in books take precedence over author uploads with the same id.
    """

    AUTHOR_BOOKS_KEY = "orenkniga-author-books"

    def __init__(
        self,
        store: KeyValueStore,
        builtin: list[BookRecord] | None = None,
        key: str = AUTHOR_BOOKS_KEY,
    ):
        self.store = store
        self.builtin = list(BUILTIN_BOOKS if builtin is None else builtin)
        self.key = key

    def _load_author_books(self) -> list[BookRecord]:
        return load_entries(self.store.get(self.key), _book, "author books")

    def find_by_id(self, book_id: str) -> BookRecord | None:
        """Find a book by id, or None if no book matches."""
        for book in self.builtin:
            if book.id == book_id:
                return book
        for book in self._load_author_books():
            if book.id == book_id:
                return book
        return None

    def list_books(self) -> list[BookRecord]:
        """All books: built-in first, then author uploads."""
        builtin_ids = {b.id for b in self.builtin}
        uploads = [b for b in self._load_author_books() if b.id not in builtin_ids]
        return self.builtin + uploads

    def add_author_book(self, book: BookRecord) -> None:
        """Store an author upload, replacing any upload with the same id."""
        books = [b for b in self._load_author_books() if b.id != book.id]
        books.append(book)
        self.store.set(self.key, _book_list.dump_json(books, by_alias=True).decode())
        log.info("Stored author book %s (%s)", book.id, book.title)
