"""Bounded reading position within a paginated book."""


class PageCursor:
    """Current page of a book, always within ``[1, total_pages]``.

    Moving past either end is a no-op, not an error.
    """

    def __init__(self, total_pages: int):
        self._total_pages = max(1, total_pages)
        self._current_page = 1

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def at_start(self) -> bool:
        return self._current_page == 1

    @property
    def at_end(self) -> bool:
        return self._current_page == self._total_pages

    def advance(self) -> int:
        """Move to the next page if there is one. Returns the current page."""
        if self._current_page < self._total_pages:
            self._current_page += 1
        return self._current_page

    def retreat(self) -> int:
        """Move to the previous page if there is one. Returns the current page."""
        if self._current_page > 1:
            self._current_page -= 1
        return self._current_page

    def jump(self, page: int) -> int:
        """Move to a page, clamped into range. Returns the current page."""
        self._current_page = max(1, min(self._total_pages, page))
        return self._current_page

    def __repr__(self) -> str:
        return f"PageCursor({self._current_page}/{self._total_pages})"
