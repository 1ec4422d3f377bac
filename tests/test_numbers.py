"""Tests for crumbs._internal.numbers: Max-Age parsing and rendering."""

import math

import pytest

from crumbs._internal.numbers import format_number, parse_number


class TestParseNumber:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("3600", 3600),
            (" 42 ", 42),
            ("+7", 7),
            ("-1", -1),
            ("", 0),
            ("   ", 0),
            ("1.5", 1.5),
            (".5", 0.5),
            ("2.0", 2),
            ("1e3", 1000),
            ("0x10", 16),
            ("0b11", 3),
            ("0o17", 15),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
        ],
    )
    def test_numeric(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    def test_integral_results_are_int(self) -> None:
        assert type(parse_number("2.0")) is int
        assert type(parse_number("1e3")) is int

    @pytest.mark.parametrize("text", ["abc", "12abc", "1_000", "1.2.3", "--1", "0x", "inf"])
    def test_not_a_number(self, text: str) -> None:
        assert math.isnan(parse_number(text))


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("number", "text"),
        [
            (3600, "3600"),
            (-1, "-1"),
            (0, "0"),
            (1.5, "1.5"),
            (2.0, "2"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_format(self, number: float, text: str) -> None:
        assert format_number(number) == text
