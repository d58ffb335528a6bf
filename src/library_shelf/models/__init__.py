"""
Library-shelf domain models.

The models represent:
- Book / Genre: immutable catalog entries
- Shelf: generic container reporting its smallest and largest items
- Library: named mutable catalog of books
- Librarian: helper bound to one Library
"""

from .book import Book, Genre
from .library import Librarian, Library
from .shelf import Shelf, SupportsOrdering

__all__ = [
    "Book",
    "Genre",
    "Librarian",
    "Library",
    "Shelf",
    "SupportsOrdering",
]
