"""Split book text into fixed-size pages.

Pages are fixed character ranges: page ``n`` covers
``[(n - 1) * chars_per_page, min(n * chars_per_page, len(text)))``. A page
break can fall in the middle of a paragraph, or a word. Page boundaries
depend only on the length of the text, never on display settings, so page
numbers (and bookmarks pointing at them) stay stable when the reader
changes font size or line height.
"""

from dataclasses import dataclass

CHARS_PER_PAGE = 2000
PARAGRAPH_DELIMITER = "\n\n"


@dataclass(frozen=True)
class Pagination:
    """Page layout of one text."""

    text: str
    chars_per_page: int = CHARS_PER_PAGE

    @property
    def total_pages(self) -> int:
        """Number of pages; at least 1, even for empty text."""
        return max(1, -(-len(self.text) // self.chars_per_page))

    def contains(self, page: int) -> bool:
        return 1 <= page <= self.total_pages

    def page_range(self, page: int) -> tuple[int, int]:
        """Character offsets ``(start, end)`` covered by a page.

        Raises:
            IndexError: If page is outside ``[1, total_pages]``
        """
        if not self.contains(page):
            raise IndexError(f"Page {page} out of range 1-{self.total_pages}")
        start = (page - 1) * self.chars_per_page
        end = min(start + self.chars_per_page, len(self.text))
        return start, end

    def page_text(self, page: int) -> str:
        """Raw text of a page, or an empty string when out of range."""
        if not self.contains(page):
            return ""
        start, end = self.page_range(page)
        return self.text[start:end]

    def page_paragraphs(self, page: int) -> list[str]:
        """Non-blank paragraphs of a page, in order."""
        return [
            paragraph
            for paragraph in self.page_text(page).split(PARAGRAPH_DELIMITER)
            if paragraph.strip()
        ]


def paginate(text: str | None, chars_per_page: int = CHARS_PER_PAGE) -> Pagination:
    """Paginate book text.

    Args:
        text: Full book content; None is read as empty text
        chars_per_page: Character budget per page

    Returns:
        Pagination for the text

    Raises:
        ValueError: If chars_per_page is not positive
    """
    if chars_per_page < 1:
        raise ValueError(f"chars_per_page must be positive, got {chars_per_page}")
    return Pagination(text=text or "", chars_per_page=chars_per_page)
