"""Input validation: operand parsing, pre-calculation checks, input guards."""

from __future__ import annotations

import math
import re
from typing import TypeVar

from procalc.exceptions import CalculatorError, DivisionByZeroError, InvalidInputError
from procalc.results import ValidationResult

T = TypeVar("T", int, float)

SUPPORTED_OPERATORS = frozenset({"+", "-", "*", "/"})

# Longest operand the input guards let a caller build
MAX_INPUT_DIGITS = 15

# Optional minus, digits with at most one point, optional exponent
OPERAND_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

FIRST_NUMBER_INVALID = "First number is invalid"
SECOND_NUMBER_INVALID = "Second number is invalid"
INVALID_OPERATOR = "Invalid operator"


def parse_operand(text: object) -> float | None:
    """
    Parse a textual operand into a finite float.

    This never raises: anything that is not a string, does not match the
    operand grammar, or parses to a non-finite value yields ``None``.

    Args:
        text: The operand text, e.g. ``"-12.5"`` or ``"1.000000e+12"``

    Returns:
        The parsed value, or None if the operand is invalid
    """
    if not isinstance(text, str) or not OPERAND_PATTERN.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None

    return value


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def require_operand(text: object, reason: str) -> float:
    """Parse ``text`` or raise InvalidInputError carrying ``reason``."""
    value = parse_operand(text)
    if value is None:
        raise InvalidInputError(text, reason)
    return value


def is_valid_operator(operator: object) -> bool:
    """Whether ``operator`` is one of the four supported symbols."""
    return isinstance(operator, str) and operator in SUPPORTED_OPERATORS


def validate_operator(operator: object) -> str:
    """
    Validate an operator symbol.

    Raises:
        InvalidInputError: If the operator is not supported
    """
    if not is_valid_operator(operator):
        raise InvalidInputError(operator, INVALID_OPERATOR)
    return operator  # type: ignore[return-value]


def check_calculation_input(first: object, operator: object, second: object) -> tuple[float, float]:
    """
    Check a calculation triple and return both parsed operands.

    Checks run in a fixed order and stop at the first failure: first
    operand, operator, second operand, then division by zero.

    Returns:
        The parsed first and second operands

    Raises:
        InvalidInputError: If an operand or the operator is invalid
        DivisionByZeroError: If dividing by an operand that parses to zero
    """
    a = require_operand(first, FIRST_NUMBER_INVALID)
    validate_operator(operator)
    b = require_operand(second, SECOND_NUMBER_INVALID)

    if operator == "/" and b == 0:
        raise DivisionByZeroError(a)

    return a, b


def validate_calculation_input(first: object, operator: object, second: object) -> ValidationResult:
    """
    Report whether a calculation triple can be evaluated.

    Example:
        >>> validate_calculation_input("10", "/", "0")
        ValidationResult(is_valid=False, error='Cannot divide by zero')
    """
    try:
        check_calculation_input(first, operator, second)
    except CalculatorError as e:
        return ValidationResult.invalid(e.message)
    return ValidationResult.valid()


def can_add_digit(current: str, digit: str) -> bool:
    """Whether one more digit fits in the operand being typed."""
    if len(digit) != 1 or digit not in "0123456789":
        return False
    # A digit after an exponent would rescale the value
    if "e" in current.lower():
        return False
    return sum(ch.isdigit() for ch in current) < MAX_INPUT_DIGITS


def can_add_decimal(current: str) -> bool:
    """Whether a decimal point may be appended to ``current``."""
    return "." not in current and "e" not in current.lower()


def can_add_operator(current: str, operator: str) -> bool:
    """Whether ``operator`` may follow the operand ``current``."""
    return is_valid_operator(operator) and parse_operand(current) is not None
