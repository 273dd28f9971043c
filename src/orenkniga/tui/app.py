"""Main Textual application for the reader."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from orenkniga.tui.state import ReaderState


class ReaderApp(App):
    """Main application: catalog plus reader."""

    TITLE = "orenkniga"

    CSS = """
    #main {
        padding: 1 2;
    }
    #prompt {
        margin-bottom: 1;
    }
    PageView {
        height: 1fr;
        max-width: 100;
    }
    #book-title {
        margin-bottom: 1;
    }
    #book-author {
        margin-bottom: 2;
        text-style: italic;
    }
    #page-status {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }
    .theme-light {
        background: #fafafa;
        color: #1a1a1a;
    }
    .theme-dark {
        background: #121212;
        color: #e6e6e6;
    }
    .theme-sepia {
        background: #fbf0d9;
        color: #44403c;
    }
    .font-serif #page-body {
        text-style: italic;
    }
    SettingsScreen, BookNotFoundDialog {
        align: center middle;
    }
    #settings-panel, #not-found-dialog {
        width: 60;
        height: auto;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }
    .setting-row.selected {
        background: $boost;
        text-style: bold;
    }
    #not-found-actions {
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        state: ReaderState,
        book_id: str | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.state = state
        self.initial_book_id = book_id

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Start on the catalog, or go straight to a book."""
        from orenkniga.tui.screens import CatalogScreen

        self.push_screen(CatalogScreen())
        if self.initial_book_id:
            self.open_book(self.initial_book_id)

    def open_book(self, book_id: str) -> None:
        """Open a book on top of the catalog."""
        from orenkniga.tui.screens import ReaderScreen

        self.push_screen(ReaderScreen(book_id))

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit(0)
