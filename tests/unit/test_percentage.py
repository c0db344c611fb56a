"""Unit tests for calculate_percentage."""

import logging

import pytest

from procalc import ErrorKind, Failure, Success, calculate_percentage, safe_calculation


class TestAdditiveContext:
    """Percent of the base, for "+" and "-"."""

    def test_fifteen_percent_of_two_hundred(self):
        assert calculate_percentage("15", "200", "+") == Success(30, "30")

    def test_subtract_context(self):
        assert calculate_percentage("25", "120", "-") == Success(30, "30")

    def test_add_percentage_to_base(self):
        amount = calculate_percentage("15", "200", "+")
        assert safe_calculation("200", "+", amount.display_value) == Success(230, "230")

    def test_discount(self):
        discount = calculate_percentage("25", "120", "+")
        assert safe_calculation("120", "-", discount.display_value) == Success(90, "90")

    def test_overflow(self):
        outcome = calculate_percentage("1e300", "1e300", "+")
        assert outcome.error_type is ErrorKind.OVERFLOW


class TestMultiplicativeContext:
    """Bare fraction, for "*" and "/"."""

    def test_twenty_five_percent_times(self):
        assert calculate_percentage("25", "50", "*") == Success(0.25, "0.25")

    def test_divide_context(self):
        assert calculate_percentage("50", "10", "/") == Success(0.5, "0.5")

    def test_multiply_by_fraction(self):
        fraction = calculate_percentage("25", "50", "*")
        assert safe_calculation("50", "*", fraction.display_value) == Success(12.5, "12.5")

    def test_tip(self):
        tip_rate = calculate_percentage("18", "85.50", "*")
        assert tip_rate.result == 0.18

        tip = safe_calculation("85.50", "*", tip_rate.display_value)
        assert tip == Success(15.39, "15.39")

        total = safe_calculation("85.50", "+", tip.display_value)
        assert total == Success(100.89, "100.89")


class TestNoPendingOperator:
    """Without an operator the percent key divides by 100."""

    @pytest.mark.parametrize("op", [None, ""])
    def test_standalone_percent(self, op):
        assert calculate_percentage("50", "", op) == Success(0.5, "0.5")


class TestInvalidInput:
    """Tests for rejected arguments."""

    def test_invalid_percent(self):
        assert calculate_percentage("abc", "200", "+") == Failure(
            ErrorKind.INVALID_INPUT, "Percentage value is invalid"
        )

    @pytest.mark.parametrize("op", ["+", "*"])
    def test_invalid_base(self, op):
        assert calculate_percentage("15", "abc", op) == Failure(
            ErrorKind.INVALID_INPUT, "Base value is invalid"
        )

    def test_missing_base_with_pending_operator(self):
        assert calculate_percentage("15", "", "+").error_message == "Base value is invalid"

    def test_invalid_operator(self):
        assert calculate_percentage("15", "200", "%") == Failure(
            ErrorKind.INVALID_INPUT, "Invalid operator"
        )

    def test_failure_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="procalc.exceptions"):
            calculate_percentage("15", "abc", "+")
        assert "calculate_percentage" in caplog.text
