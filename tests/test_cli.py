"""Tests for the demonstration driver."""

from unittest.mock import patch

import pytest

from library_shelf.cli import main, run_demo
from library_shelf.exceptions import CatalogIndexError


class TestRunDemo:
    """Output of the demonstration sequence."""

    def test_sections_printed(self, test_config, capsys):
        run_demo(test_config)
        out = capsys.readouterr().out

        for heading in [
            "Function references",
            "Catalog listing",
            "Shelves",
            "Statistics",
            "Librarian",
            "Checkout receipt",
            "Sorted by page count (descending)",
        ]:
            assert heading in out
        assert "─" * 10 in out

    def test_values_printed(self, test_config, capsys):
        run_demo(test_config)
        out = capsys.readouterr().out

        assert "Extra library size after add: 1" in out
        assert "Copy equals original: True" in out
        assert "THE GREAT GATSBY" in out
        assert "  Smallest : 180" in out
        assert "  Largest  : 499" in out
        assert "  Smallest : Clean Code" in out
        assert "  Largest  : The Pragmatic Programmer" in out
        assert "Robin at Test Library recommends: The Great Gatsby [Fiction, 1925, 180 pages]" in out
        assert "Library : Test Library" in out

    def test_sorted_listing_is_last(self, test_config, capsys):
        run_demo(test_config)
        lines = capsys.readouterr().out.splitlines()

        assert lines[-6:] == [
            "Thinking, Fast & Slow | NonFiction | 2011 | 499 pages",
            "Sapiens | NonFiction | 2011 | 443 pages",
            "Clean Code | Reference | 2008 | 431 pages",
            "Dune | Fiction | 1965 | 412 pages",
            "The Pragmatic Programmer | Reference | 1999 | 352 pages",
            "The Great Gatsby | Fiction | 1925 | 180 pages",
        ]


class TestMain:
    """Command-line entry point."""

    def test_exit_code_zero(self, clean_env, capsys):
        assert main([]) == 0
        assert "BCIT Digital Library" in capsys.readouterr().out

    def test_flags_override_config(self, clean_env, capsys):
        assert main(["--library-name", "North Branch", "--librarian", "Kim"]) == 0

        out = capsys.readouterr().out
        assert "Kim at North Branch recommends:" in out

    def test_invalid_log_level_flag(self, clean_env):
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"])

    def test_library_error_returns_one(self, clean_env, capsys):
        with patch("library_shelf.cli.run_demo", side_effect=CatalogIndexError("empty")):
            assert main([]) == 1
