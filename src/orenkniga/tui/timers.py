"""Adapts Textual timers to the page-turn scheduler interface."""

from __future__ import annotations

from typing import Callable

from textual.message_pump import MessagePump
from textual.timer import Timer


class TextualTimerHandle:
    """Cancellable handle around a Textual timer."""

    def __init__(self, timer: Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class TextualScheduler:
    """Schedules callbacks on a widget's or screen's event loop.

    ``after`` runs once each scheduled callback has fired, so the caller can
    refresh the display.
    """

    def __init__(self, node: MessagePump, after: Callable[[], None] | None = None):
        self.node = node
        self.after = after

    def __call__(self, delay: float, callback: Callable[[], None]) -> TextualTimerHandle:
        def fire() -> None:
            callback()
            if self.after is not None:
                self.after()

        return TextualTimerHandle(self.node.set_timer(delay, fire))
