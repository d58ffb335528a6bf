"""
library-shelf: a small library catalog.

Key Components:
- models: Book, Shelf, Library and Librarian
- stats: LibraryStats counting and averaging helpers
- catalog: listing, receipt and ordering helpers plus sample data
- config: settings management with pydantic-settings
- cli: the demonstration driver
"""

__version__ = "0.1.0"

from .exceptions import (
    CatalogIndexError,
    EmptyAverageError,
    InvalidArgumentError,
    InvalidStateError,
    LibraryError,
)
from .models import Book, Genre, Librarian, Library, Shelf
from .stats import CatalogSummary, LibraryStats

__all__ = [
    "Book",
    "CatalogIndexError",
    "CatalogSummary",
    "EmptyAverageError",
    "Genre",
    "InvalidArgumentError",
    "InvalidStateError",
    "Librarian",
    "Library",
    "LibraryError",
    "LibraryStats",
    "Shelf",
    "__version__",
]
