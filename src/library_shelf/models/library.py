"""
Library aggregate and its bound Librarian helper.

A Library owns a name and an ordered catalog of books. The catalog list is
handed out live: callers may append, remove or sort it in place, and the
Library does not re-validate what they put there. Insertion order matters
because "first book" queries read index 0.

A Librarian is permanently bound to one Library at construction time and
only ever reads that library's name and catalog.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import CatalogIndexError, InvalidArgumentError
from .book import Book

logger = logging.getLogger(__name__)


def _require_non_blank(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{label} must not be blank")
    return value


class Library(BaseModel):
    """
    Represents a named library holding a catalog of books.

    The initial books are copied into a fresh list on construction, so later
    changes to the caller's list are not seen by the library.
    """

    name: str = Field(
        ...,
        description="Display name of the library",
        examples=["BCIT Digital Library"],
    )

    catalog: list[Book] = Field(
        ...,
        description="Ordered catalog; duplicates allowed, index 0 is the first book",
    )

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def __init__(self, name: str, initial_books: list[Book]):
        super().__init__(name=name, catalog=initial_books)
        logger.debug("Library %r created with %d books", self.name, len(self.catalog))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject empty or whitespace-only names."""
        if not v.strip():
            raise ValueError("Library name must not be blank")
        return v

    def add_book(self, book: Book) -> None:
        """
        Append a book to the end of the catalog.

        Raises:
            InvalidArgumentError: If book is None or not a Book
        """
        if book is None:
            raise InvalidArgumentError("Book must not be None")
        if not isinstance(book, Book):
            raise InvalidArgumentError(f"Expected a Book, got {type(book).__name__}")
        self.catalog.append(book)
        logger.debug("Added %r to %r (%d books)", book.title, self.name, len(self.catalog))

    def first_book(self) -> Book:
        """
        Return the book at the front of the catalog.

        Raises:
            CatalogIndexError: If the catalog is empty
        """
        if not self.catalog:
            raise CatalogIndexError(f"Catalog of {self.name!r} is empty")
        return self.catalog[0]

    def librarian(self, name: str) -> "Librarian":
        """Create a librarian working at this library."""
        return Librarian(self, name)


class Librarian:
    """A named librarian bound to exactly one owning Library."""

    def __init__(self, library: Library, name: str):
        if not isinstance(library, Library):
            raise InvalidArgumentError("Librarian must belong to a Library")
        self._library = library
        self._name = _require_non_blank(name, "Librarian name")

    @property
    def name(self) -> str:
        return self._name

    @property
    def library(self) -> Library:
        return self._library

    def recommend(self) -> str:
        """
        Recommend the first book in the owning library's catalog.

        Raises:
            CatalogIndexError: If the owning library's catalog is empty
        """
        book = self._library.first_book()
        logger.debug("%s recommending %r", self._name, book.title)
        return f"{self._name} at {self._library.name} recommends: {book}"

    def __repr__(self) -> str:
        return f"Librarian(name={self._name!r}, library={self._library.name!r})"
