"""Textual TUI for reading books."""

from orenkniga.tui.app import ReaderApp
from orenkniga.tui.state import ReaderState

__all__ = ["ReaderApp", "ReaderState"]
