"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from orenkniga.config import load_config
from orenkniga.errors import BookImportError, BookNotFoundError
from orenkniga.models.settings import FontFamily, Theme
from orenkniga.tui.state import ReaderState, open_state

app = typer.Typer(
    name="orenkniga",
    help="Read books in the terminal, one page at a time.",
    add_completion=False,
)

console = Console()

settings_app = typer.Typer(help="Reader display settings")
app.add_typer(settings_app, name="settings")

bookmarks_app = typer.Typer(help="Bookmark management commands")
app.add_typer(bookmarks_app, name="bookmarks")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _state(ctx: typer.Context) -> ReaderState:
    return ctx.obj


def _not_found(e: BookNotFoundError) -> typer.Exit:
    console.print(f"[red]Book not found: {e.book_id}[/]")
    console.print("[dim]Run 'orenkniga catalog' to see available books[/]")
    return typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    data_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--data-dir",
            help="Directory holding reader data (default: $ORENKNIGA_HOME or ~/.orenkniga)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Read books in the terminal, one page at a time.

    Run without arguments to open the catalog.
    """
    _configure_logging(verbose)
    config = load_config(data_dir)
    ctx.obj = open_state(config)

    if ctx.invoked_subcommand is None:
        from orenkniga.commands.reading import execute_read

        raise typer.Exit(execute_read(ctx.obj, book_id=None))


@app.command()
def catalog(ctx: typer.Context) -> None:
    """List the books in the catalog."""
    from orenkniga.commands.library import execute_catalog

    execute_catalog(_state(ctx), console)


@app.command()
def info(
    ctx: typer.Context,
    book_id: Annotated[str, typer.Argument(help="Book identifier (see 'catalog')")],
) -> None:
    """Display book metadata and page count."""
    from orenkniga.commands.library import execute_info

    try:
        execute_info(_state(ctx), book_id, console)
    except BookNotFoundError as e:
        raise _not_found(e)


@app.command()
def page(
    ctx: typer.Context,
    book_id: Annotated[str, typer.Argument(help="Book identifier (see 'catalog')")],
    number: Annotated[
        int,
        typer.Option("--page", "-p", help="Page to print; clamped to the book's pages"),
    ] = 1,
) -> None:
    """Print a single page of a book."""
    from orenkniga.commands.reading import execute_page

    try:
        execute_page(_state(ctx), book_id, number, console)
    except BookNotFoundError as e:
        raise _not_found(e)


@app.command()
def read(
    ctx: typer.Context,
    book_id: Annotated[
        Optional[str],
        typer.Argument(help="Book identifier. If omitted, opens the catalog."),
    ] = None,
) -> None:
    """Open the interactive reader."""
    from orenkniga.commands.reading import execute_read

    state = _state(ctx)
    if book_id is not None and state.books.find_by_id(book_id) is None:
        raise _not_found(BookNotFoundError(book_id))

    raise typer.Exit(execute_read(state, book_id))


@app.command("import")
def import_book(
    ctx: typer.Context,
    path: Annotated[
        Path,
        typer.Argument(
            help="Plain-text file; paragraphs separated by blank lines",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    title: Annotated[str, typer.Option("--title", "-t", help="Book title")],
    author: Annotated[str, typer.Option("--author", "-a", help="Author name")],
    book_id: Annotated[
        Optional[str],
        typer.Option("--id", help="Book identifier (default: derived from title)"),
    ] = None,
    description: Annotated[
        str, typer.Option("--description", "-d", help="Short description")
    ] = "",
    genres: Annotated[
        Optional[list[str]],
        typer.Option("--genre", "-g", help="Genre (can be used multiple times)"),
    ] = None,
) -> None:
    """Add a plain-text book to the catalog."""
    from orenkniga.commands.library import execute_import

    try:
        execute_import(
            _state(ctx),
            path,
            title,
            author,
            console,
            book_id=book_id,
            description=description,
            genres=genres,
        )
    except (BookImportError, OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@settings_app.command("show")
def settings_show(ctx: typer.Context) -> None:
    """Show the current display settings."""
    from orenkniga.commands.preferences import execute_settings_show

    execute_settings_show(_state(ctx), console)


@settings_app.command("set")
def settings_set(
    ctx: typer.Context,
    font_size: Annotated[
        Optional[int], typer.Option("--font-size", help="Font size in px (12-28)")
    ] = None,
    line_height: Annotated[
        Optional[float], typer.Option("--line-height", help="Line height (1.2-2.2)")
    ] = None,
    margins: Annotated[
        Optional[int], typer.Option("--margins", help="Side margins in px (8-32)")
    ] = None,
    font_family: Annotated[
        Optional[FontFamily], typer.Option("--font-family", help="Typeface")
    ] = None,
    theme: Annotated[Optional[Theme], typer.Option("--theme", help="Colour theme")] = None,
) -> None:
    """Change display settings. Out-of-range values are clamped."""
    from orenkniga.commands.preferences import execute_settings_set

    try:
        execute_settings_set(
            _state(ctx),
            {
                "font_size": font_size,
                "line_height": line_height,
                "margins": margins,
                "font_family": font_family,
                "theme": theme,
            },
            console,
        )
    except OSError as e:
        console.print(f"[red]Error saving settings: {e}[/]")
        raise typer.Exit(1)


@settings_app.command("reset")
def settings_reset(ctx: typer.Context) -> None:
    """Restore the default display settings."""
    from orenkniga.commands.preferences import execute_settings_reset

    execute_settings_reset(_state(ctx), console)


@bookmarks_app.command("list")
def bookmarks_list(
    ctx: typer.Context,
    book_id: Annotated[
        Optional[str], typer.Argument(help="Only show bookmarks for this book")
    ] = None,
) -> None:
    """List bookmarks."""
    from orenkniga.commands.preferences import execute_bookmarks_list

    execute_bookmarks_list(_state(ctx), book_id, console)


@bookmarks_app.command("clear")
def bookmarks_clear(
    ctx: typer.Context,
    book_id: Annotated[
        Optional[str], typer.Argument(help="Only remove bookmarks for this book")
    ] = None,
) -> None:
    """Remove bookmarks."""
    from orenkniga.commands.preferences import execute_bookmarks_clear

    execute_bookmarks_clear(_state(ctx), book_id, console)


if __name__ == "__main__":
    app()
