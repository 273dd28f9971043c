"""Reader screen: one page at a time."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from orenkniga.core.session import Reader, ReaderSession
from orenkniga.errors import BookNotFoundError
from orenkniga.tui.state import stepped_value
from orenkniga.tui.timers import TextualScheduler
from orenkniga.tui.widgets import BookNotFoundDialog, PageView


class ReaderScreen(Screen):
    """Screen showing the current page of an open book."""

    BINDINGS = [
        Binding("right", "flip('forward')", "Next", show=True, priority=True),
        Binding("space", "flip('forward')", "Next", show=False, priority=True),
        Binding("l", "flip('forward')", "Next", show=False, priority=True),
        Binding("left", "flip('backward')", "Prev", show=True, priority=True),
        Binding("h", "flip('backward')", "Prev", show=False, priority=True),
        Binding("b", "bookmark", "Bookmark", show=True),
        Binding("s", "settings", "Settings", show=True),
        Binding("t", "cycle_theme", "Theme", show=True),
        Binding("plus", "font_size(1)", "Font +", show=False),
        Binding("minus", "font_size(-1)", "Font -", show=False),
        Binding("escape", "close_book", "Catalog", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, book_id: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.book_id = book_id
        self.session: ReaderSession | None = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        yield PageView(id="page")
        yield Static(id="page-status")
        yield Footer()

    def on_mount(self) -> None:
        """Open the book, or offer a way back if it does not exist."""
        state = self.app.state
        reader = Reader(
            state.books,
            state.settings,
            state.bookmarks,
            TextualScheduler(self, after=self.render_page),
            chars_per_page=state.config.chars_per_page,
            settle_interval=state.config.settle_interval,
        )

        try:
            self.session = reader.open(self.book_id)
        except BookNotFoundError:
            self.app.push_screen(
                BookNotFoundDialog(self.book_id),
                self._on_not_found_choice,
            )
            return

        self.title = self.session.book.title
        self.render_page()

    def _on_not_found_choice(self, choice: str | None) -> None:
        if choice == "quit":
            self.app.exit(1)
        else:
            self.app.pop_screen()

    def render_page(self) -> None:
        """Redraw the page and status bar from the session."""
        if self.session is None or self.session.closed:
            return

        page = self.session.current_page_text()
        self.query_one("#page", PageView).show(page)

        settings = page.settings
        self.query_one("#page-status", Static).update(
            f"{page.label}  |  {settings.font_size}px, {settings.line_height:g}x, "
            f"{settings.font_family.value}, {settings.theme.value}"
        )

    def action_flip(self, direction: str) -> None:
        """Turn the page; ignored while a turn is settling."""
        if self.session is not None and self.session.flip(direction):
            self.render_page()

    def action_bookmark(self) -> None:
        if self.session is None:
            return
        bookmark = self.session.bookmark_here()
        self.notify(f"Bookmark added on page {bookmark.page}")

    def action_settings(self) -> None:
        from orenkniga.tui.screens.settings import SettingsScreen

        if self.session is not None:
            self.app.push_screen(SettingsScreen(self.session), lambda _: self.render_page())

    def action_cycle_theme(self) -> None:
        if self.session is None:
            return
        self.session.update_settings(theme=stepped_value(self.session.settings, "theme", 1))
        self.render_page()

    def action_font_size(self, step: int) -> None:
        if self.session is None:
            return
        self.session.update_settings(
            font_size=stepped_value(self.session.settings, "font_size", step)
        )
        self.render_page()

    def action_close_book(self) -> None:
        """Go back to the catalog."""
        self._close_session()
        self.app.pop_screen()

    def on_unmount(self) -> None:
        self._close_session()

    def _close_session(self) -> None:
        if self.session is not None:
            self.session.close()

    def action_quit(self) -> None:
        """Quit the application."""
        self._close_session()
        self.app.exit(0)
