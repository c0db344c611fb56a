"""Result types returned by every public engine function.

A calculation either succeeds or fails, never both. The two outcomes are
separate classes so a failure has no ``result`` attribute to misread.

Example:
    >>> outcome = safe_calculation("10", "/", "4")
    >>> match outcome:
    ...     case Success(result=value):
    ...         print(value)
    ...     case Failure(error_type=kind, error_message=message):
    ...         print(kind, message)
    2.5
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from procalc.formatting import format_result, normalize_result


class ErrorKind(enum.Enum):
    """Closed set of failure categories."""

    INVALID_INPUT = "INVALID_INPUT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OVERFLOW = "OVERFLOW"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Success:
    """A computed value and its display string."""

    result: float
    display_value: str

    @classmethod
    def from_value(cls, value: float) -> Success:
        """Normalize a finite raw value and pair it with its display string."""
        result = normalize_result(value)
        return cls(result, format_result(result))

    @property
    def has_error(self) -> bool:
        return False


@dataclass(frozen=True)
class ToggledOperand:
    """A sign-toggled operand; ``result`` stays textual."""

    result: str
    display_value: str

    @property
    def has_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """A classified failure with a message safe to show verbatim."""

    error_type: ErrorKind
    error_message: str

    @property
    def has_error(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a pre-calculation check."""

    is_valid: bool
    error: str | None = None

    @classmethod
    def valid(cls) -> ValidationResult:
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error: str) -> ValidationResult:
        return cls(is_valid=False, error=error)


CalculationResult = Success | Failure
SignToggleResult = ToggledOperand | Failure
