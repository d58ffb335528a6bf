"""Catalog helpers used by the demo driver.

- apply_to_all: run a callable over every element of a sequence
- checkout_receipt: receipt lines for one checkout
- sort_by_page_count: in-place ordering of a catalog list
- sample_books / sample_library: the demonstration data set
"""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from .exceptions import InvalidArgumentError
from .models.book import Book, Genre
from .models.library import Library

logger = logging.getLogger(__name__)

T = TypeVar("T")


def apply_to_all(items: Iterable[T], action: Callable[[T], object]) -> None:
    """Call ``action`` on each element of ``items`` in order."""
    for item in items:
        action(item)


def checkout_receipt(library: Library, book: Book) -> list[str]:
    """Return the receipt lines for checking ``book`` out of ``library``."""
    if library is None or book is None:
        raise InvalidArgumentError("Checkout needs both a library and a book")

    def receipt() -> list[str]:
        return [
            f"Library : {library.name}",
            f"Book    : {book.title}",
            f"Year    : {book.year_published}",
        ]

    logger.debug("Checkout of %r from %r", book.title, library.name)
    return receipt()


def sort_by_page_count(books: list[Book], *, descending: bool = True) -> list[Book]:
    """Sort ``books`` in place by page count and return the same list.

    The sort is stable, so books with equal page counts keep their order.
    """
    books.sort(key=lambda book: book.page_count, reverse=descending)
    return books


def sample_books() -> list[Book]:
    """The six-book demonstration catalog."""
    return [
        Book(title="The Great Gatsby", genre=Genre.FICTION, year_published=1925, page_count=180),
        Book(title="Thinking, Fast & Slow", genre=Genre.NONFICTION, year_published=2011, page_count=499),
        Book(title="Clean Code", genre=Genre.REFERENCE, year_published=2008, page_count=431),
        Book(title="Dune", genre=Genre.FICTION, year_published=1965, page_count=412),
        Book(title="Sapiens", genre=Genre.NONFICTION, year_published=2011, page_count=443),
        Book(title="The Pragmatic Programmer", genre=Genre.REFERENCE, year_published=1999, page_count=352),
    ]


def sample_library(name: str = "BCIT Digital Library") -> Library:
    """A library seeded with ``sample_books()``."""
    return Library(name, sample_books())
