"""Exceptions raised by the reader."""


class OrenknigaError(Exception):
    """Base class for reader errors."""


class BookNotFoundError(OrenknigaError, LookupError):
    """No book in the catalog matches the requested identifier."""

    def __init__(self, book_id: str):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


class BookImportError(OrenknigaError):
    """An author upload could not be added to the catalog."""
