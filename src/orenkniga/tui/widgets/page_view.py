"""Widget that renders one book page."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from orenkniga.core.session import RenderedPage
from orenkniga.core.transition import FlipDirection
from orenkniga.models.settings import FontFamily, Theme
from orenkniga.tui.state import horizontal_padding, paragraph_gap, theme_class

_FLIP_CLASSES = {
    FlipDirection.FORWARD: "flip-forward",
    FlipDirection.BACKWARD: "flip-backward",
}


class PageView(VerticalScroll):
    """Title, author and paragraphs of the current page."""

    can_focus = False

    def compose(self) -> ComposeResult:
        yield Static(id="book-title")
        yield Static(id="book-author")
        yield Static(id="page-body")

    def show(self, page: RenderedPage) -> None:
        """Render a page with its display settings."""
        settings = page.settings

        for theme in Theme:
            self.remove_class(f"theme-{theme.value}")
        self.add_class(theme_class(settings))
        self.set_class(settings.font_family is FontFamily.SERIF, "font-serif")
        for direction, css_class in _FLIP_CLASSES.items():
            self.set_class(page.flip_direction is direction, css_class)
        self.styles.padding = (1, horizontal_padding(settings))

        self.query_one("#book-title", Static).update(Text(page.title, style="bold"))
        self.query_one("#book-author", Static).update(Text(page.author))
        self.query_one("#page-body", Static).update(
            Text(paragraph_gap(settings).join(p.strip() for p in page.paragraphs))
        )
        self.scroll_home(animate=False)
