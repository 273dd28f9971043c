"""Catalog, info and import command implementations."""

import re
import uuid
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from orenkniga.core.paginator import paginate
from orenkniga.errors import BookImportError, BookNotFoundError
from orenkniga.models.book import AuthorRef, BookRecord
from orenkniga.tui.state import ReaderState


def execute_catalog(state: ReaderState, console: Console) -> None:
    """Print every book in the catalog."""
    books = state.books.list_books()
    if not books:
        console.print("[dim]The catalog is empty[/]")
        return

    table = Table(title="Catalog", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="white")
    table.add_column("Author")
    table.add_column("Pages", justify="right", style="green")
    table.add_column("Rating", justify="right")

    for book in books:
        pages = paginate(book.content, state.config.chars_per_page).total_pages
        table.add_row(
            book.id,
            book.title,
            book.author.name,
            str(pages),
            f"{book.rating:.1f}" if book.rating else "-",
        )

    console.print(table)


def execute_info(state: ReaderState, book_id: str, console: Console) -> None:
    """Print book metadata, page count and bookmarks."""
    book = state.books.find_by_id(book_id)
    if book is None:
        raise BookNotFoundError(book_id)

    pagination = paginate(book.content, state.config.chars_per_page)
    bookmarks = state.bookmarks.list_bookmarks(book.id)

    info_lines = [
        f"[bold]{book.title}[/]",
        "",
        f"[dim]Author:[/] {book.author.name}",
        f"[dim]Genres:[/] {', '.join(book.genres) or 'Unknown'}",
        f"[dim]Published:[/] {book.published_date or 'Unknown'}",
        f"[dim]Characters:[/] {len(book.text):,}",
        f"[dim]Pages:[/] {pagination.total_pages}",
        f"[dim]Bookmarks:[/] {len(bookmarks)}",
    ]
    if book.description:
        info_lines += ["", book.description]

    console.print()
    console.print(Panel("\n".join(info_lines), title="Book Information", border_style="green"))
    console.print()


def _slugify(title: str) -> str:
    slug = re.sub(r"[^\w]+", "-", title.lower()).strip("-")
    return slug or uuid.uuid4().hex[:8]


def execute_import(
    state: ReaderState,
    path: Path,
    title: str,
    author: str,
    console: Console,
    book_id: str | None = None,
    description: str = "",
    genres: list[str] | None = None,
) -> BookRecord:
    """Add a plain-text file to the catalog as an author upload.

    Raises:
        BookImportError: If the file is empty or the id is taken by a built-in book
    """
    content = path.read_text(encoding="utf-8").replace("\r\n", "\n")
    if not content.strip():
        raise BookImportError(f"{path} is empty")

    book_id = book_id or _slugify(title)
    if any(b.id == book_id for b in state.books.builtin):
        raise BookImportError(f"Book id {book_id!r} belongs to a built-in book")

    book = BookRecord(
        id=book_id,
        title=title,
        author=AuthorRef(id=_slugify(author), name=author),
        description=description,
        genres=genres or [],
        content=content,
    )
    state.books.add_author_book(book)

    pages = paginate(content, state.config.chars_per_page).total_pages
    console.print(f"[green]Added {title!r} as {book_id} ({pages} pages)[/]")
    return book
