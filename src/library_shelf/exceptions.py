"""Exception hierarchy for the library-shelf package.

Every failure in this package is a precondition violation raised at the
boundary of the operation that received the bad input or state. Each error
also derives from the matching builtin so callers can catch either:

- InvalidArgumentError: malformed input (blank names, None books/items)
- InvalidStateError: query on an empty Shelf
- CatalogIndexError: "first book" lookup on an empty catalog
- EmptyAverageError: average page count of zero books
"""


class LibraryError(Exception):
    """Base exception for library-shelf errors."""


class InvalidArgumentError(LibraryError, ValueError):
    """Raised when an operation receives a missing or malformed argument."""


class InvalidStateError(LibraryError, RuntimeError):
    """Raised when an operation's preconditions are not met by current state."""


class CatalogIndexError(LibraryError, IndexError):
    """Raised when indexing into a catalog that has no such position."""


class EmptyAverageError(LibraryError, ZeroDivisionError):
    """Raised when averaging over an empty collection of books."""
