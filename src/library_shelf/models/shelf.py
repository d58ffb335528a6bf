"""
Generic min/max container.

A Shelf holds items of any type that orders itself (ints, strings, dates,
or any class implementing ``<`` and ``>``). Items are kept in insertion
order and the extremes are found by a fresh linear scan on every query, so
ties always resolve to the earliest-inserted item.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar

from ..exceptions import InvalidArgumentError, InvalidStateError

logger = logging.getLogger(__name__)


class SupportsOrdering(Protocol):
    """Structural contract for a totally ordered item type."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


class Shelf(Generic[T]):
    """
    Insertion-ordered collection reporting its smallest and largest items.

    The shelf only grows: there is no remove operation, and it never
    reorders what it holds.
    """

    def __init__(self, items: Iterable[T] | None = None):
        """Create a shelf, optionally seeded through ``add``."""
        self._items: list[T] = []
        if items is not None:
            for item in items:
                self.add(item)

    def add(self, item: T) -> None:
        """
        Append an item to the end of the shelf.

        Raises:
            InvalidArgumentError: If item is None
        """
        if item is None:
            raise InvalidArgumentError("Item must not be None")
        self._items.append(item)

    def get_smallest(self) -> T:
        """
        Return the smallest item under its natural ordering.

        Raises:
            InvalidStateError: If the shelf is empty
        """
        self._require_items()
        smallest = self._items[0]
        for item in self._items:
            if item < smallest:
                smallest = item
        logger.debug("Smallest of %d shelf items: %r", len(self._items), smallest)
        return smallest

    def get_largest(self) -> T:
        """
        Return the largest item under its natural ordering.

        Raises:
            InvalidStateError: If the shelf is empty
        """
        self._require_items()
        largest = self._items[0]
        for item in self._items:
            if item > largest:
                largest = item
        logger.debug("Largest of %d shelf items: %r", len(self._items), largest)
        return largest

    def _require_items(self) -> None:
        if not self._items:
            raise InvalidStateError("Shelf is empty")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Shelf({self._items!r})"
