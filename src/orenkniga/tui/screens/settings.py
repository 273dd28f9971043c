"""Settings panel for display preferences."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from orenkniga.core.session import ReaderSession
from orenkniga.tui.state import SETTING_ORDER, setting_rows, stepped_value


class SettingsScreen(ModalScreen[None]):
    """Adjust font size, line height, margins, font and theme."""

    BINDINGS = [
        Binding("up,k", "move(-1)", "Up", show=True),
        Binding("down,j", "move(1)", "Down", show=True),
        Binding("left,minus", "adjust(-1)", "Less", show=True),
        Binding("right,plus", "adjust(1)", "More", show=True),
        Binding("escape,s,enter", "close", "Close", show=True),
    ]

    selected = reactive(0)

    def __init__(self, session: ReaderSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Container(id="settings-panel"):
            yield Static("[bold]Reading settings[/]", id="settings-title")
            with Vertical(id="settings-rows"):
                for name in SETTING_ORDER:
                    yield Static(id=f"setting-{name}", classes="setting-row")
            yield Static(
                "[dim]Up/Down to choose, Left/Right to change[/]", classes="instruction"
            )

    def on_mount(self) -> None:
        self._refresh_rows()

    def watch_selected(self, new_value: int) -> None:
        self._refresh_rows()

    def _refresh_rows(self) -> None:
        if not self.is_mounted:
            return
        for index, row in enumerate(setting_rows(self.session.settings)):
            marker = ">" if index == self.selected else " "
            widget = self.query_one(f"#setting-{row.name}", Static)
            widget.update(f"{marker} {row.label:<12} {row.value:<8} [dim]{row.hint}[/]")
            widget.set_class(index == self.selected, "selected")

    def action_move(self, step: int) -> None:
        self.selected = (self.selected + step) % len(SETTING_ORDER)

    def action_adjust(self, step: int) -> None:
        """Move the selected control one notch."""
        name = SETTING_ORDER[self.selected]
        self.session.update_settings(**{name: stepped_value(self.session.settings, name, step)})
        self._refresh_rows()

    def action_close(self) -> None:
        self.dismiss(None)
