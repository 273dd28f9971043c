"""Data models for catalog books."""

from pydantic import BaseModel, ConfigDict, Field


class AuthorRef(BaseModel):
    """Author reference embedded in a book record."""

    id: str
    name: str


class BookRecord(BaseModel):
    """A book as stored in the catalog or uploaded by an author."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    author: AuthorRef
    cover: str | None = None
    description: str = ""
    genres: list[str] = Field(default_factory=list)
    rating: float = 0.0
    review_count: int = Field(default=0, alias="reviewCount")
    published_date: str | None = Field(default=None, alias="publishedDate")
    content: str | None = None

    @property
    def text(self) -> str:
        """Book content, with missing content read as empty text."""
        return self.content or ""
