"""Data models for reader bookmarks."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Bookmark(BaseModel):
    """A saved page in a book."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    book_id: str = Field(alias="bookId")
    page: int = Field(ge=1)
    text: str | None = None  # Snippet of the page's first paragraph
    note: str | None = None
    created_at: datetime = Field(default_factory=datetime.now, alias="createdAt")
