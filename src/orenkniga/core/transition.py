"""Page-turn state machine.

A flip moves the cursor immediately and then holds the guard in the
``FLIPPING`` state for a fixed settle interval. Flip requests that arrive
during that interval are dropped, not queued.

With a scheduler (a Textual timer, an event loop's ``call_later``) the return
to ``IDLE`` is a scheduled callback; the guard owns its handle and cancels it
on close so a discarded session is never touched again. Without one, the
guard compares a clock against the settle deadline whenever it is asked.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Protocol

from orenkniga.core.cursor import PageCursor

log = logging.getLogger(__name__)

SETTLE_INTERVAL = 0.5  # seconds


class FlipDirection(str, Enum):
    """Direction of a page turn."""

    FORWARD = "forward"
    BACKWARD = "backward"


class TransitionState(str, Enum):
    """Whether a page turn is in flight."""

    IDLE = "idle"
    FLIPPING = "flipping"


class TimerHandle(Protocol):
    """Handle of a scheduled callback."""

    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


class TransitionGuard:
    """Serializes page turns so only one is in flight at a time."""

    def __init__(
        self,
        cursor: PageCursor,
        scheduler: Scheduler | None = None,
        settle_interval: float = SETTLE_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cursor = cursor
        self.settle_interval = settle_interval
        self._scheduler = scheduler
        self._clock = clock
        self._state = TransitionState.IDLE
        self._direction: FlipDirection | None = None
        self._timer: TimerHandle | None = None
        self._deadline: float | None = None

    def _check_deadline(self) -> None:
        if self._deadline is not None and self._clock() >= self._deadline:
            self._settle()

    @property
    def state(self) -> TransitionState:
        self._check_deadline()
        return self._state

    @property
    def direction(self) -> FlipDirection | None:
        """Direction of the flip in flight, for animation only."""
        self._check_deadline()
        return self._direction

    @property
    def is_flipping(self) -> bool:
        return self.state is TransitionState.FLIPPING

    def request_flip(self, direction: FlipDirection | str) -> bool:
        """Start a page turn unless one is already in flight.

        A turn at the first or last page still counts as a turn.

        Returns:
            True if the flip started, False if it was dropped
        """
        direction = FlipDirection(direction)

        if self.is_flipping:
            log.debug(
                "Dropped %s flip: %s flip still settling",
                direction.value,
                self._direction.value if self._direction else "?",
            )
            return False

        self._state = TransitionState.FLIPPING
        self._direction = direction

        if direction is FlipDirection.FORWARD:
            self.cursor.advance()
        else:
            self.cursor.retreat()

        if self._scheduler is not None:
            self._timer = self._scheduler(self.settle_interval, self._settle)
        else:
            self._deadline = self._clock() + self.settle_interval
        return True

    def _settle(self) -> None:
        """Return to idle once the settle interval has elapsed."""
        self._timer = None
        self._deadline = None
        self._state = TransitionState.IDLE
        self._direction = None

    def close(self) -> None:
        """Cancel any pending settle callback and go idle."""
        if self._timer is not None:
            self._timer.cancel()
        self._settle()
