"""
Book model for the library-shelf catalog.

A Book is an immutable value object: it is validated once on construction and
never mutated afterwards. Pydantic's frozen models give us:
1. Field validation with clear error messages
2. Value equality and hashing over all four fields
3. Cheap field-for-field copies
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Genre(str, Enum):
    """The three genres a catalog book may belong to.

    Values match exactly; "fiction" or "Non-Fiction" are not genres.
    """

    FICTION = "Fiction"
    NONFICTION = "NonFiction"
    REFERENCE = "Reference"


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    Year and page count are stored as given; only the title and genre are
    validated.
    """

    title: str = Field(
        ...,
        description="The title of the book",
        examples=["The Great Gatsby", "Clean Code"],
    )

    genre: Genre = Field(
        ...,
        description="Genre of the book",
        examples=["Fiction", "NonFiction", "Reference"],
    )

    year_published: int = Field(
        ...,
        description="Year the book was published",
        examples=[1925, 2008],
    )

    page_count: int = Field(
        ...,
        description="Number of pages",
        examples=[180, 431],
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "The Great Gatsby",
                "genre": "Fiction",
                "year_published": 1925,
                "page_count": 180,
            }
        },
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject empty or whitespace-only titles."""
        if not v.strip():
            raise ValueError("Title must not be blank")
        return v

    @classmethod
    def copy_of(cls, source: "Book | None") -> "Book":
        """
        Create a field-for-field duplicate of another book.

        Raises:
            InvalidArgumentError: If source is None or not a Book
        """
        if source is None:
            raise InvalidArgumentError("Source book must not be None")
        if not isinstance(source, Book):
            raise InvalidArgumentError(f"Expected a Book, got {type(source).__name__}")
        logger.debug("Copying book %r", source.title)
        return source.model_copy()

    def as_row(self) -> str:
        """Render the book as a pipe-separated listing row."""
        return f"{self.title} | {self.genre.value} | {self.year_published} | {self.page_count} pages"

    def __str__(self) -> str:
        return f"{self.title} [{self.genre.value}, {self.year_published}, {self.page_count} pages]"
