"""Custom widgets for the reader TUI."""

from orenkniga.tui.widgets.not_found import BookNotFoundDialog
from orenkniga.tui.widgets.page_view import PageView

__all__ = ["PageView", "BookNotFoundDialog"]
