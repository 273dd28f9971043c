"""Tests for the book catalog and bookmark stores."""

from orenkniga.models.book import AuthorRef, BookRecord
from orenkniga.storage import MemoryStore
from orenkniga.stores.bookmarks import BookmarkStore
from orenkniga.stores.books import BookStore
from orenkniga.stores.catalog import BUILTIN_BOOKS


def upload(book_id: str, title: str = "Upload", content: str | None = "Text") -> BookRecord:
    return BookRecord(
        id=book_id, title=title, author=AuthorRef(id="u", name="Uploader"), content=content
    )


class TestBookStore:
    def test_builtin_catalog_by_default(self):
        books = BookStore(MemoryStore())
        assert books.find_by_id("1") == BUILTIN_BOOKS[0]
        assert books.find_by_id("nope") is None

    def test_finds_author_uploads(self, book_store):
        book_store.add_author_book(upload("mine"))
        found = book_store.find_by_id("mine")
        assert found is not None and found.title == "Upload"

    def test_upload_with_same_id_replaces(self, book_store):
        book_store.add_author_book(upload("mine", title="Draft"))
        book_store.add_author_book(upload("mine", title="Final"))

        assert book_store.find_by_id("mine").title == "Final"
        assert [b.id for b in book_store.list_books()].count("mine") == 1

    def test_builtin_wins_over_upload(self, book_store):
        book_store.add_author_book(upload("short", title="Impostor"))
        assert book_store.find_by_id("short").title == "Short Book"
        assert [b.title for b in book_store.list_books()].count("Impostor") == 0

    def test_reads_web_client_upload(self):
        raw = (
            '[{"id": "42", "title": "Web", "author": {"id": "9", "name": "W"},'
            ' "description": "", "genres": [], "rating": 0, "reviewCount": 3,'
            ' "publishedDate": "2024-01-01"}]'
        )
        books = BookStore(MemoryStore({BookStore.AUTHOR_BOOKS_KEY: raw}), builtin=[])

        book = books.find_by_id("42")
        assert book.review_count == 3
        assert book.content is None
        assert book.text == ""

    def test_corrupt_uploads_ignored(self):
        books = BookStore(MemoryStore({BookStore.AUTHOR_BOOKS_KEY: "[{]"}), builtin=[])
        assert books.list_books() == []

    def test_malformed_upload_does_not_hide_the_rest(self):
        raw = '[{"id": "bad"}, {"id": "7", "title": "Kept", "author": {"id": "u", "name": "U"}}]'
        store = MemoryStore({BookStore.AUTHOR_BOOKS_KEY: raw})
        books = BookStore(store, builtin=[])

        assert [b.id for b in books.list_books()] == ["7"]

        books.add_author_book(upload("8"))
        reloaded = BookStore(store, builtin=[])
        assert [b.id for b in reloaded.list_books()] == ["7", "8"]

    def test_non_list_uploads_ignored(self):
        books = BookStore(MemoryStore({BookStore.AUTHOR_BOOKS_KEY: '{"id": "7"}'}), builtin=[])
        assert books.list_books() == []


class TestBookmarkStore:
    def test_add_and_list(self, bookmark_store):
        first = bookmark_store.add("long", 2, text="snippet")
        bookmark_store.add("short", 1)

        assert bookmark_store.list_bookmarks("long") == [first]
        assert len(bookmark_store.list_bookmarks()) == 2

    def test_survives_reload(self, store):
        BookmarkStore(store).add("long", 3)
        reloaded = BookmarkStore(store).list_bookmarks()
        assert [(b.book_id, b.page) for b in reloaded] == [("long", 3)]

    def test_clear_one_book(self, bookmark_store):
        bookmark_store.add("long", 1)
        bookmark_store.add("long", 2)
        bookmark_store.add("short", 1)

        assert bookmark_store.clear("long") == 2
        assert [b.book_id for b in bookmark_store.list_bookmarks()] == ["short"]

    def test_clear_all(self, bookmark_store):
        bookmark_store.add("long", 1)
        assert bookmark_store.clear() == 1
        assert bookmark_store.clear() == 0

    def test_malformed_entry_does_not_drop_valid_ones(self):
        raw = (
            '[{"id": "a", "bookId": "long", "page": 0},'
            ' {"id": "b", "bookId": "long", "page": 2, "createdAt": "2024-05-01T10:00:00"}]'
        )
        store = MemoryStore({BookmarkStore.BOOKMARKS_KEY: raw})
        bookmarks = BookmarkStore(store)

        assert [b.id for b in bookmarks.list_bookmarks()] == ["b"]

        bookmarks.add("short", 1)
        reloaded = BookmarkStore(store).list_bookmarks()
        assert [(b.book_id, b.page) for b in reloaded] == [("long", 2), ("short", 1)]

    def test_unreadable_blob_yields_no_bookmarks(self):
        bookmarks = BookmarkStore(MemoryStore({BookmarkStore.BOOKMARKS_KEY: "not json"}))
        assert bookmarks.list_bookmarks() == []
