#!/usr/bin/env python3
"""
Demonstration driver for library-shelf.

Walks the sample catalog through every model and helper and prints the
results to stdout. Logging goes to stderr so stdout stays readable.

Usage:
    library-shelf [--library-name NAME] [--librarian NAME] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from collections.abc import Callable
from operator import attrgetter

from .catalog import apply_to_all, checkout_receipt, sample_books, sort_by_page_count
from .config import ShelfConfig, get_config
from .exceptions import LibraryError
from .models import Book, Genre, Library, Shelf
from .stats import LibraryStats

logger = logging.getLogger(__name__)


def print_book(book: Book) -> None:
    print(book.as_row())


def _section(title: str, width: int) -> None:
    print()
    print(title)
    print("─" * width)


def run_demo(config: ShelfConfig) -> None:
    """Print every demonstration section for a freshly built sample library."""
    library = Library(config.library_name, sample_books())
    catalog = library.catalog
    width = config.separator_width

    _section("Function references", width)
    show: Callable[[Book], None] = print_book
    print("Module function (print_book):")
    show(catalog[0])

    extra_library = Library("Extra Library", [])
    add_to_extra: Callable[[Book], None] = extra_library.add_book
    add_to_extra(catalog[0])
    print("Bound method (extra_library.add_book):")
    print(f"Extra library size after add: {len(extra_library.catalog)}")

    get_title: Callable[[Book], str] = attrgetter("title")
    print("Attribute getter (attrgetter('title')):")
    print(get_title(catalog[0]))

    copier: Callable[[Book], Book] = Book.copy_of
    copied = copier(catalog[0])
    print("Alternate constructor (Book.copy_of):")
    print(f"Copy equals original: {copied == catalog[0]}")
    print(f"Copy: {copied}")

    _section("Catalog listing", width)
    apply_to_all(catalog, print_book)
    print("Titles in uppercase:")
    apply_to_all(map(str.upper, map(get_title, catalog)), print)

    _section("Shelves", width)
    page_counts: Shelf[int] = Shelf(book.page_count for book in catalog)
    print("Page counts:")
    print(f"  Smallest : {page_counts.get_smallest()}")
    print(f"  Largest  : {page_counts.get_largest()}")
    titles: Shelf[str] = Shelf(book.title for book in catalog)
    print("Titles (alphabetical):")
    print(f"  Smallest : {titles.get_smallest()}")
    print(f"  Largest  : {titles.get_largest()}")

    _section("Statistics", width)
    for genre in Genre:
        print(f"{genre.value:<10} count : {LibraryStats.count_by_genre(catalog, genre)}")
    print(f"Average pages    : {LibraryStats.average_page_count(catalog)}")

    _section("Librarian", width)
    print(library.librarian(config.librarian_name).recommend())

    _section("Checkout receipt", width)
    apply_to_all(checkout_receipt(library, library.first_book()), print)

    _section("Sorted by page count (descending)", width)
    sort_by_page_count(catalog)
    apply_to_all(catalog, print_book)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the demo driver."""
    parser = argparse.ArgumentParser(
        description="Demonstrate the library-shelf catalog models"
    )
    parser.add_argument(
        "--library-name",
        help="Override the demonstration library's name",
    )
    parser.add_argument(
        "--librarian",
        help="Override the librarian's name",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level written to stderr",
    )

    args = parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in (
            ("library_name", args.library_name),
            ("librarian_name", args.librarian),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    config = ShelfConfig.model_validate({**get_config().model_dump(), **overrides})

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        run_demo(config)
    except LibraryError:
        logger.exception("Demonstration failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
