"""Settings and bookmarks command implementations."""

from rich.console import Console
from rich.table import Table

from orenkniga.models.settings import ReaderSettings
from orenkniga.tui.state import ReaderState, setting_rows


def print_settings(settings: ReaderSettings, console: Console, title: str = "Reader Settings") -> None:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")
    table.add_column("Range", style="dim")

    for row in setting_rows(settings):
        table.add_row(row.label, row.value, row.hint)

    console.print(table)


def execute_settings_show(state: ReaderState, console: Console) -> None:
    print_settings(state.settings.load(), console)


def execute_settings_set(state: ReaderState, changes: dict[str, object], console: Console) -> None:
    """Apply changes; values outside a range are clamped to it."""
    changes = {k: v for k, v in changes.items() if v is not None}
    if not changes:
        console.print("[yellow]Nothing to change[/]")
        return

    updated = state.settings.update(**changes)
    print_settings(updated, console, title="Updated Settings")


def execute_settings_reset(state: ReaderState, console: Console) -> None:
    print_settings(state.settings.reset(), console, title="Default Settings")


def execute_bookmarks_list(state: ReaderState, book_id: str | None, console: Console) -> None:
    """Print bookmarks, newest last."""
    bookmarks = state.bookmarks.list_bookmarks(book_id)
    if not bookmarks:
        console.print("[dim]No bookmarks[/]")
        return

    titles = {b.id: b.title for b in state.books.list_books()}

    table = Table(title="Bookmarks", show_header=True, header_style="bold cyan")
    table.add_column("Book", style="white")
    table.add_column("Page", justify="right", style="green")
    table.add_column("Text", style="dim")
    table.add_column("Added", style="dim")

    for bookmark in bookmarks:
        table.add_row(
            titles.get(bookmark.book_id, bookmark.book_id),
            str(bookmark.page),
            bookmark.text or "",
            bookmark.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def execute_bookmarks_clear(state: ReaderState, book_id: str | None, console: Console) -> None:
    count = state.bookmarks.clear(book_id)
    if count > 0:
        console.print(f"[green]Removed {count} bookmark(s)[/]")
    else:
        console.print("[dim]No bookmarks to remove[/]")
