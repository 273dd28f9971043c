"""Catalog screen: pick a book to read."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from orenkniga.core.paginator import paginate
from orenkniga.models.book import BookRecord


class CatalogScreen(Screen):
    """Screen listing every book in the catalog."""

    BINDINGS = [
        Binding("enter", "open_book", "Read", show=True),
        Binding("r", "reload", "Refresh", show=True),
        Binding("q", "quit", "Quit", show=True),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.books: list[BookRecord] = []

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        with Container(id="main"):
            yield Static("Select a book to read:", id="prompt")
            yield DataTable(id="book-table", cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the book table when mounted."""
        self._fill_table()

    def on_screen_resume(self) -> None:
        """Bookmark counts may have changed while reading."""
        self._fill_table()

    def _fill_table(self) -> None:
        state = self.app.state
        self.books = state.books.list_books()

        table = self.query_one("#book-table", DataTable)
        if not table.columns:
            table.add_columns("Title", "Author", "Pages", "Bookmarks")
        table.clear()

        if not self.books:
            self.query_one("#prompt", Static).update("[red]The catalog is empty.[/]")
            table.display = False
            return

        table.display = True
        for book in self.books:
            pages = paginate(book.content, state.config.chars_per_page).total_pages
            marks = len(state.bookmarks.list_bookmarks(book.id))
            table.add_row(book.title, book.author.name, str(pages), str(marks))

    def _selected_book(self) -> BookRecord | None:
        table = self.query_one("#book-table", DataTable)
        row_index = table.cursor_row
        if row_index is not None and 0 <= row_index < len(self.books):
            return self.books[row_index]
        return None

    def action_open_book(self) -> None:
        """Open the highlighted book."""
        book = self._selected_book()
        if book is not None:
            self.app.open_book(book.id)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle double-click or enter on a row."""
        self.action_open_book()

    def action_reload(self) -> None:
        self._fill_table()

    def action_quit(self) -> None:
        """Quit the application."""
        self.app.exit(0)
