"""
Tests for form input sanitization.
"""
import pytest

from paintestimator.model.inputs import (
    InvalidInputError, format_number, parse_dimension, parse_optional_count, parse_optional_positive
)


class TestParseDimension:
    @pytest.mark.parametrize("text, expected", [
        ("3", 3.0),
        ("2.75", 2.75),
        ("  1.5 ", 1.5),
        ("2,5", 2.5),
        ("1e1", 10.0),
    ])
    def test_positive_numbers(self, text, expected):
        assert parse_dimension(text) == expected

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_is_zero(self, text):
        assert parse_dimension(text) == 0.0

    @pytest.mark.parametrize("text", ["0", "-1", "-0.5", "abc", "1.2.3", "nan", "inf", "-inf"])
    def test_rejected(self, text):
        with pytest.raises(InvalidInputError):
            parse_dimension(text)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_dimension("x")


class TestParseOptionalPositive:
    def test_empty_is_none(self):
        assert parse_optional_positive("") is None

    def test_value(self):
        assert parse_optional_positive("37.5") == 37.5

    def test_zero_rejected(self):
        with pytest.raises(InvalidInputError):
            parse_optional_positive("0")


class TestParseOptionalCount:
    def test_empty_is_none(self):
        assert parse_optional_count(" ") is None

    @pytest.mark.parametrize("text, expected", [("1", 1), ("3", 3), ("2.0", 2)])
    def test_whole_numbers(self, text, expected):
        value = parse_optional_count(text)
        assert value == expected
        assert isinstance(value, int)

    @pytest.mark.parametrize("text", ["1.5", "0", "-2", "two"])
    def test_rejected(self, text):
        with pytest.raises(InvalidInputError):
            parse_optional_count(text)


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (None, ""),
        (0, ""),
        (0.0, ""),
        (3, "3"),
        (3.0, "3"),
        (2.5, "2.5"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [0.1, 2.75, 12.0, 1.0 / 3.0])
    def test_parse_accepts_formatted(self, value):
        assert parse_dimension(format_number(value)) == value
