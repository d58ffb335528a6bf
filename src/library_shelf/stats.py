"""Catalog statistics.

LibraryStats is stateless: it works on any sequence of books handed to it
and is not tied to a Library instance. All operations are single linear
passes.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from .exceptions import EmptyAverageError
from .models.book import Book, Genre

logger = logging.getLogger(__name__)


class CatalogSummary(BaseModel):
    """Aggregate view over a sequence of books."""

    total_books: int = Field(..., description="Number of books examined", ge=0)
    genre_counts: dict[Genre, int] = Field(..., description="Books per genre, zero-filled")
    average_page_count: float | None = Field(
        None, description="Mean page count, or None when there are no books"
    )


class LibraryStats:
    """Counting and averaging helpers over book sequences."""

    @staticmethod
    def count_by_genre(books: Iterable[Book], genre: Genre | str) -> int:
        """Count books whose genre exactly equals ``genre``."""
        count = 0
        for book in books:
            if book.genre == genre:
                count += 1
        return count

    @staticmethod
    def average_page_count(books: Iterable[Book]) -> float:
        """Return the mean page count.

        Raises:
            EmptyAverageError: If there are no books to average
        """
        total = 0
        count = 0
        for book in books:
            total += book.page_count
            count += 1
        if count == 0:
            raise EmptyAverageError("Cannot average page counts of zero books")
        return total / count

    @classmethod
    def genre_distribution(cls, books: Iterable[Book]) -> dict[Genre, int]:
        """Count books for every genre, including genres with no books."""
        books = list(books)
        return {genre: cls.count_by_genre(books, genre) for genre in Genre}

    @classmethod
    def summarize(cls, books: Iterable[Book]) -> CatalogSummary:
        """Build a CatalogSummary; the average is None for an empty input."""
        books = list(books)
        average = cls.average_page_count(books) if books else None
        logger.debug("Summarized %d books", len(books))
        return CatalogSummary(
            total_books=len(books),
            genre_counts=cls.genre_distribution(books),
            average_page_count=average,
        )
