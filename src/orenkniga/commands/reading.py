"""Page and read command implementations."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from orenkniga.core.session import Reader, RenderedPage
from orenkniga.models.settings import FontFamily, Theme
from orenkniga.tui.state import ReaderState, horizontal_padding, paragraph_gap

_PANEL_STYLES = {
    Theme.LIGHT: "black on grey93",
    Theme.DARK: "grey85 on grey11",
    Theme.SEPIA: "grey23 on wheat1",
}


def render_page_panel(page: RenderedPage) -> Panel:
    """Render a page as a rich panel using its display settings."""
    settings = page.settings
    body = Text(paragraph_gap(settings).join(p.strip() for p in page.paragraphs))
    if settings.font_family is FontFamily.SERIF:
        body.stylize("italic")

    return Panel(
        Group(
            Text(page.title, style="bold"),
            Text(page.author, style="italic"),
            Text(""),
            body,
        ),
        title=page.label,
        padding=(1, horizontal_padding(settings)),
        style=_PANEL_STYLES[settings.theme],
        width=100,
    )


def execute_page(state: ReaderState, book_id: str, page: int, console: Console) -> None:
    """Print one page of a book.

    Raises:
        BookNotFoundError: If no book matches book_id
    """
    reader = Reader(
        state.books,
        state.settings,
        state.bookmarks,
        chars_per_page=state.config.chars_per_page,
        settle_interval=state.config.settle_interval,
    )
    session = reader.open(book_id)
    try:
        session.jump(page)
        console.print(render_page_panel(session.current_page_text()))
    finally:
        session.close()


def execute_read(state: ReaderState, book_id: str | None) -> int:
    """Run the interactive reader. Returns the app's exit code."""
    from orenkniga.tui.app import ReaderApp

    app = ReaderApp(state, book_id=book_id)
    result = app.run()
    return result if isinstance(result, int) else 0
