"""Unit tests for the page-turn guard."""

from orenkniga.core.cursor import PageCursor
from orenkniga.core.transition import (
    SETTLE_INTERVAL,
    FlipDirection,
    TransitionGuard,
    TransitionState,
)


def make_guard(scheduler, total_pages=5):
    cursor = PageCursor(total_pages)
    return cursor, TransitionGuard(cursor, scheduler)


class TestScheduledSettle:
    def test_flip_moves_cursor_immediately(self, scheduler):
        cursor, guard = make_guard(scheduler)

        assert guard.request_flip(FlipDirection.FORWARD) is True
        assert cursor.current_page == 2
        assert guard.state is TransitionState.FLIPPING
        assert guard.direction is FlipDirection.FORWARD

    def test_second_flip_within_interval_is_dropped(self, scheduler):
        cursor, guard = make_guard(scheduler)

        guard.request_flip("forward")
        scheduler.advance(0.2)
        assert guard.request_flip("forward") is False
        assert cursor.current_page == 2

    def test_dropped_flip_does_not_extend_interval(self, scheduler):
        """The guard reopens one settle interval after the flip started."""
        _, guard = make_guard(scheduler)

        guard.request_flip("forward")
        scheduler.advance(0.4)
        guard.request_flip("backward")
        scheduler.advance(0.1)

        assert guard.state is TransitionState.IDLE
        assert len(scheduler.timers) == 1

    def test_flip_allowed_after_settle(self, scheduler):
        cursor, guard = make_guard(scheduler)

        guard.request_flip("forward")
        scheduler.advance(SETTLE_INTERVAL)
        assert guard.state is TransitionState.IDLE
        assert guard.direction is None

        assert guard.request_flip("forward") is True
        assert cursor.current_page == 3

    def test_backward_flip_retreats(self, scheduler):
        cursor, guard = make_guard(scheduler)
        cursor.jump(4)

        guard.request_flip(FlipDirection.BACKWARD)
        assert cursor.current_page == 3

    def test_flip_at_boundary_still_occupies_guard(self, scheduler):
        cursor, guard = make_guard(scheduler, total_pages=1)

        assert guard.request_flip("forward") is True
        assert cursor.current_page == 1
        assert guard.is_flipping
        assert guard.request_flip("backward") is False

    def test_rapid_requests_advance_once(self, scheduler):
        cursor, guard = make_guard(scheduler)

        for _ in range(10):
            guard.request_flip("forward")
            scheduler.advance(0.01)

        assert cursor.current_page == 2

    def test_close_cancels_pending_timer(self, scheduler):
        _, guard = make_guard(scheduler)

        guard.request_flip("forward")
        timer = scheduler.timers[0]
        guard.close()

        assert timer.cancelled
        assert guard.state is TransitionState.IDLE
        assert scheduler.pending == []


class TestClockSettle:
    """Without a scheduler the guard checks the clock against a deadline."""

    def test_deadline_reopens_guard(self):
        now = [10.0]
        cursor = PageCursor(5)
        guard = TransitionGuard(cursor, clock=lambda: now[0])

        assert guard.request_flip("forward") is True
        now[0] += 0.3
        assert guard.request_flip("forward") is False
        assert cursor.current_page == 2

        now[0] += 0.2
        assert guard.state is TransitionState.IDLE
        assert guard.request_flip("forward") is True
        assert cursor.current_page == 3

    def test_close_clears_deadline(self):
        guard = TransitionGuard(PageCursor(3), clock=lambda: 0.0)
        guard.request_flip("forward")
        guard.close()
        assert not guard.is_flipping
