"""Unit tests for fixed-size text pagination."""

import math

import pytest

from conftest import make_text
from orenkniga.core.paginator import CHARS_PER_PAGE, paginate


class TestPageCount:
    @pytest.mark.parametrize("length", [0, 1, 1999, 2000, 2001, 4000, 5000, 12345])
    def test_total_pages_follows_character_budget(self, length):
        pagination = paginate("a" * length)
        assert pagination.total_pages == max(1, math.ceil(length / CHARS_PER_PAGE))

    def test_empty_text_has_one_blank_page(self):
        pagination = paginate("")
        assert pagination.total_pages == 1
        assert pagination.page_paragraphs(1) == []

    def test_missing_text_reads_as_empty(self):
        pagination = paginate(None)
        assert pagination.total_pages == 1
        assert pagination.page_paragraphs(1) == []
        assert pagination.page_range(1) == (0, 0)

    def test_custom_budget(self):
        assert paginate("a" * 25, chars_per_page=10).total_pages == 3

    def test_rejects_non_positive_budget(self):
        with pytest.raises(ValueError):
            paginate("text", chars_per_page=0)


class TestPageRanges:
    def test_five_thousand_characters(self):
        """5000 characters give three pages; the last one is short."""
        pagination = paginate(make_text(5000))

        assert pagination.total_pages == 3
        assert pagination.page_range(1) == (0, 2000)
        assert pagination.page_range(2) == (2000, 4000)
        assert pagination.page_range(3) == (4000, 5000)

    def test_ranges_cover_text_without_gaps(self):
        text = make_text(7321)
        pagination = paginate(text)

        joined = "".join(pagination.page_text(n) for n in range(1, pagination.total_pages + 1))
        assert joined == text

    def test_out_of_range_page_range_raises(self):
        pagination = paginate("abc")
        with pytest.raises(IndexError):
            pagination.page_range(2)
        with pytest.raises(IndexError):
            pagination.page_range(0)


class TestPageParagraphs:
    def test_splits_on_blank_lines_and_drops_empty(self):
        pagination = paginate("One.\n\nTwo.\n\n  \n\n\n\nThree.")
        assert pagination.page_paragraphs(1) == ["One.", "Two.", "Three."]

    def test_single_newlines_stay_inside_paragraph(self):
        pagination = paginate("Line one\nline two\n\nNext")
        assert pagination.page_paragraphs(1) == ["Line one\nline two", "Next"]

    def test_paragraph_split_across_page_boundary(self):
        """Page breaks are character offsets, so a paragraph can straddle two pages."""
        text = "a" * 1990 + "\n\n" + "b" * 20
        pagination = paginate(text)

        assert pagination.page_paragraphs(1) == ["a" * 1990, "b" * 8]
        assert pagination.page_paragraphs(2) == ["b" * 12]

    def test_idempotent(self):
        pagination = paginate(make_text(4500))
        for page in range(1, pagination.total_pages + 1):
            assert pagination.page_paragraphs(page) == pagination.page_paragraphs(page)

    def test_repaginating_same_text_gives_same_pages(self):
        text = make_text(6100)
        first, second = paginate(text), paginate(text)

        assert first.total_pages == second.total_pages
        for page in range(1, first.total_pages + 1):
            assert first.page_range(page) == second.page_range(page)

    def test_out_of_range_page_is_empty(self):
        pagination = paginate("Some text")
        assert pagination.page_paragraphs(0) == []
        assert pagination.page_paragraphs(2) == []
