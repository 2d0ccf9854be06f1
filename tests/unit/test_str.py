"""Unit tests for the Str case conversion helpers."""

from __future__ import annotations

import pytest

from app.Support.Str import Str


class TestSnake:
    """Test suite for Str.snake."""

    @pytest.mark.parametrize("value,expected", [
        ("firstName", "first_name"),
        ("FirstName", "first_name"),
        ("first_name", "first_name"),
        ("already", "already"),
        ("first Name", "first_name"),
        ("HTMLParser", "h_t_m_l_parser"),
    ])
    def test_converts_to_snake_case(self, value: str, expected: str) -> None:
        """Test conversion of common identifier shapes."""
        assert Str.snake(value) == expected

    def test_lowercase_words_are_untouched(self) -> None:
        """Test that pure lowercase input is returned as given."""
        assert Str.snake("name") == "name"

    def test_custom_delimiter(self) -> None:
        """Test snake case with a custom delimiter."""
        assert Str.snake("fooBarBaz", "-") == "foo-bar-baz"

    def test_results_are_cached_per_delimiter(self) -> None:
        """Test that the cache keeps delimiters apart."""
        assert Str.snake("fooBar") == "foo_bar"
        assert Str.snake("fooBar", ".") == "foo.bar"


class TestStudly:
    """Test suite for Str.studly and Str.camel."""

    @pytest.mark.parametrize("value,expected", [
        ("first_name", "FirstName"),
        ("foo-bar_baz", "FooBarBaz"),
        ("fullName", "FullName"),
        ("name", "Name"),
    ])
    def test_converts_to_studly_case(self, value: str, expected: str) -> None:
        """Test conversion to studly caps."""
        assert Str.studly(value) == expected

    def test_lc_first(self) -> None:
        """Test lowering the first letter."""
        assert Str.studly("first_name", lc_first=True) == "firstName"

    @pytest.mark.parametrize("value", ["full_name", "fullName", "FullName", "full-name"])
    def test_camel_normalizes_spellings(self, value: str) -> None:
        """Test that every spelling of a name shares one camel form."""
        assert Str.camel(value) == "fullName"

    def test_round_trip_through_snake_case(self) -> None:
        """Test that snake then studly with lc_first restores camel case."""
        assert Str.studly(Str.snake("firstName"), lc_first=True) == "firstName"


class TestHelpers:
    """Test suite for the remaining string helpers."""

    def test_lcfirst_and_ucfirst(self) -> None:
        """Test first letter case changes."""
        assert Str.lcfirst("Name") == "name"
        assert Str.ucfirst("name") == "Name"
        assert Str.lcfirst("") == ""
        assert Str.ucfirst("") == ""

    def test_class_basename(self) -> None:
        """Test class basename from classes and instances."""
        class Invoice:
            pass

        assert Str.class_basename(Invoice) == "Invoice"
        assert Str.class_basename(Invoice()) == "Invoice"

    def test_flush_cache(self) -> None:
        """Test clearing cached conversions."""
        Str.snake("cachedValue")
        Str.flush_cache()
        assert Str._snake_cache == {}
        assert Str._studly_cache == {}
