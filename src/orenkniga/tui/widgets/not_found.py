"""Modal shown when the requested book cannot be opened."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class BookNotFoundDialog(ModalScreen[str]):
    """Offers a way back to the catalog or out of the app.

    Dismisses with ``"catalog"`` or ``"quit"``; escape counts as ``"catalog"``.
    """

    BINDINGS = [
        Binding("c", "choose('catalog')", "Catalog"),
        Binding("q", "choose('quit')", "Quit"),
        Binding("escape", "choose('catalog')", show=False),
    ]

    def __init__(self, book_id: str):
        super().__init__()
        self.book_id = book_id

    def compose(self) -> ComposeResult:
        with Vertical(id="not-found-dialog"):
            yield Static("[bold red]Book not found[/]")
            yield Static(
                f"No book with id {self.book_id!r}. It may have been removed.",
                id="not-found-message",
                markup=False,
            )
            with Horizontal(id="not-found-actions"):
                yield Button("Back to catalog (c)", name="catalog", variant="primary")
                yield Button("Quit (q)", name="quit")

    def action_choose(self, choice: str) -> None:
        self.dismiss(choice)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.name)
