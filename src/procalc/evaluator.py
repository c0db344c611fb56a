"""Safe evaluation of a single binary calculation."""

from __future__ import annotations

from procalc.exceptions import reports_failures
from procalc.operations import perform_calculation
from procalc.results import CalculationResult, Success
from procalc.validators import check_calculation_input


@reports_failures
def safe_calculation(first: str, operator: str, second: str) -> CalculationResult:
    """
    Evaluate ``first operator second`` without raising.

    Inputs are validated in the same order as ``validate_calculation_input``,
    so the two always agree on which triples fail.

    Args:
        first: Left operand text
        operator: One of "+", "-", "*", "/"
        second: Right operand text

    Returns:
        Success with the result and its display string, or Failure with
        INVALID_INPUT, DIVISION_BY_ZERO or OVERFLOW

    Example:
        >>> safe_calculation("5", "+", "3")
        Success(result=8.0, display_value='8')
    """
    a, b = check_calculation_input(first, operator, second)
    return Success.from_value(perform_calculation(a, operator, b))
