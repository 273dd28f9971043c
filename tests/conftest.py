import pytest

from orenkniga.core.session import Reader
from orenkniga.models.book import AuthorRef, BookRecord
from orenkniga.storage import MemoryStore
from orenkniga.stores.bookmarks import BookmarkStore
from orenkniga.stores.books import BookStore
from orenkniga.stores.settings import SettingsStore


class FakeTimer:
    """Timer handle driven by FakeScheduler."""

    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Scheduler with a manual clock, so tests control when timers fire."""

    def __init__(self):
        self.now = 0.0
        self.timers: list[FakeTimer] = []

    def __call__(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        """Move the clock forward and fire every timer that came due."""
        self.now += seconds
        for timer in sorted(self.pending, key=lambda t: t.due):
            if timer.due <= self.now:
                timer.fired = True
                timer.callback()


def make_text(length: int) -> str:
    """Text of exactly `length` characters with a paragraph break every 300."""
    chunks = []
    size = 0
    while size < length:
        chunk = "x" * 298 + "\n\n"
        chunks.append(chunk)
        size += len(chunk)
    return "".join(chunks)[:length]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def sample_books():
    """Small catalog: a three-page book, a one-page book and one with no content."""
    author = AuthorRef(id="a1", name="Test Author")
    return [
        BookRecord(id="long", title="Long Book", author=author, content=make_text(5000)),
        BookRecord(
            id="short",
            title="Short Book",
            author=author,
            content="First paragraph.\n\nSecond paragraph.\n\n   \n\nThird.",
        ),
        BookRecord(id="empty", title="Empty Book", author=author, content=None),
    ]


@pytest.fixture
def book_store(store, sample_books):
    return BookStore(store, builtin=sample_books)


@pytest.fixture
def settings_store(store):
    return SettingsStore(store)


@pytest.fixture
def bookmark_store(store):
    return BookmarkStore(store)


@pytest.fixture
def reader(book_store, settings_store, bookmark_store, scheduler):
    return Reader(book_store, settings_store, bookmark_store, scheduler)
