"""Test configuration and fixtures for library-shelf.

Provides:
1. Sample books and libraries - fresh objects for every test
2. Configuration isolation - the global config is reset around each test
3. Clean environment - no LIBRARY_SHELF_* variables leak between tests
"""

import os
from collections.abc import Generator

import pytest

from library_shelf.catalog import sample_books
from library_shelf.config import ShelfConfig, reset_config
from library_shelf.models import Book, Genre, Library

# === Test Data Fixtures ===


@pytest.fixture
def gatsby() -> Book:
    """A single fiction book."""
    return Book(title="The Great Gatsby", genre=Genre.FICTION, year_published=1925, page_count=180)


@pytest.fixture
def dune() -> Book:
    """A second fiction book with more pages."""
    return Book(title="Dune", genre="Fiction", year_published=1965, page_count=412)


@pytest.fixture
def clean_code() -> Book:
    """A reference book."""
    return Book(title="Clean Code", genre="Reference", year_published=2008, page_count=431)


@pytest.fixture
def demo_books() -> list[Book]:
    """The six-book demonstration catalog."""
    return sample_books()


@pytest.fixture
def demo_library(demo_books: list[Book]) -> Library:
    """A library seeded with the demonstration catalog."""
    return Library("BCIT Digital Library", demo_books)


@pytest.fixture
def empty_library() -> Library:
    """A library with no books."""
    return Library("Empty Library", [])


# === Configuration Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide an environment without LIBRARY_SHELF_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_SHELF_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def test_config(clean_env) -> Generator[ShelfConfig, None, None]:
    """Provide a test-specific configuration."""
    reset_config()

    config = ShelfConfig(
        library_name="Test Library",
        librarian_name="Robin",
        log_level="DEBUG",
        separator_width=10,
    )

    yield config

    reset_config()


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset global configuration after each test."""
    yield
    reset_config()
