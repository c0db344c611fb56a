"""Custom exceptions for the calculation engine.

These are raised inside the arithmetic and validation layers and caught at
the public entry points by ``reports_failures``, which turns them into
``Failure`` results.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from procalc.results import ErrorKind, Failure

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

UNKNOWN_ERROR_MESSAGE = "An unexpected error occurred"


class CalculatorError(Exception):
    """Base exception for all calculation errors."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor parses to zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: float) -> None:
        super().__init__("Cannot divide by zero", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a calculation leaves the finite floating-point range."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__("Number too large", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when an operand or operator cannot be used."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: Any, reason: str = "Invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


def reports_failures(func: Callable[P, R]) -> Callable[P, R | Failure]:
    """
    Turn exceptions raised by ``func`` into ``Failure`` results.

    Calculator errors keep their kind and message. Anything else is logged
    and reported as ``ErrorKind.UNKNOWN``.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | Failure:
        try:
            return func(*args, **kwargs)
        except CalculatorError as e:
            logger.debug("%s%r failed: %s", func.__name__, args, e)
            return Failure(e.kind, e.message)
        except Exception:
            logger.exception("Unexpected error in %s%r", func.__name__, args)
            return Failure(ErrorKind.UNKNOWN, UNKNOWN_ERROR_MESSAGE)

    return wrapper
