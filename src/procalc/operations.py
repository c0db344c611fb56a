"""Core arithmetic operations with overflow detection.

Overflow means the result left the finite double range. Large but finite
results are returned as-is; the formatter decides how to display them.
"""

import math
from collections.abc import Callable

from procalc.exceptions import DivisionByZeroError, OverflowError
from procalc.validators import validate_number, validate_operator


def _check_finite(result: float, operation: str, a: float, b: float) -> float:
    if not math.isfinite(result):
        raise OverflowError(operation, a, b)
    return result


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result is not finite
    """
    validate_number(a)
    validate_number(b)
    return _check_finite(a + b, "addition", a, b)


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result is not finite
    """
    validate_number(a)
    validate_number(b)
    return _check_finite(a - b, "subtraction", a, b)


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result is not finite
    """
    validate_number(a)
    validate_number(b)
    return _check_finite(a * b, "multiplication", a, b)


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero and overflow protection.

    ``0 / b`` is 0 for any nonzero b; ``a / 0`` is an error even when a is 0.

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        OverflowError: If result is not finite
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return _check_finite(a / b, "division", a, b)


OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


def perform_calculation(a: float, operator: str, b: float) -> float:
    """
    Apply the operator symbol to two numbers.

    Args:
        a: Left operand
        operator: One of "+", "-", "*", "/"
        b: Right operand

    Returns:
        The raw double-precision result

    Raises:
        InvalidInputError: If an operand or the operator is invalid
        DivisionByZeroError: If dividing by zero
        OverflowError: If result is not finite
    """
    validate_operator(operator)
    return OPERATIONS[operator](a, b)
