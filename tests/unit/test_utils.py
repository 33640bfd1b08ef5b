"""Unit tests for helper functions."""

import math

import pytest

from legacy_calculator import format_message, format_result, get_max, is_positive


class TestIsPositive:
    """Tests for is_positive."""

    def test_positive(self):
        assert is_positive(0.001)

    def test_zero_is_not_positive(self):
        assert not is_positive(0.0)
        assert not is_positive(-0.0)

    def test_negative(self):
        assert not is_positive(-1.0)

    def test_nan_is_not_positive(self):
        assert not is_positive(math.nan)


class TestGetMax:
    """Tests for get_max."""

    def test_first_larger(self):
        assert get_max(5.0, 3.0) == 5.0

    def test_second_larger(self):
        assert get_max(3.0, 5.0) == 5.0

    def test_tie_returns_second(self):
        assert math.copysign(1.0, get_max(0.0, -0.0)) == -1.0

    def test_nan_first_returns_second(self):
        assert get_max(math.nan, 1.0) == 1.0


class TestFormatMessage:
    """Tests for format_message and format_result."""

    def test_formats_value(self):
        assert format_message("Value: %.3f", 1.5) == "Value: 1.500"

    def test_none_template(self):
        assert format_message(None, 1.5) == ""

    def test_template_without_conversion_is_copied(self):
        assert format_message("hello", 1.0) == "hello"
        assert format_message("100%% done", 1.0) == "100% done"

    def test_template_with_two_conversions_rejected(self):
        with pytest.raises(TypeError):
            format_message("%f %f", 1.0)

    def test_no_length_limit(self):
        template = "y" * 500 + " %.1f"
        assert format_message(template, 2.0) == "y" * 500 + " 2.0"

    def test_format_result_two_decimals(self):
        assert format_result(15.0) == "Result: 15.00"
        assert format_result(2.5) == "Result: 2.50"
        assert format_result(-1.005) == "Result: -1.00"

    def test_format_result_non_finite(self):
        assert format_result(math.inf) == "Result: inf"
        assert format_result(-math.inf) == "Result: -inf"
