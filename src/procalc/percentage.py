"""Percentage resolution keyed on the pending operator.

A single percent key means different things depending on what the caller
will do with it next:

    200 + 15%  ->  15% of 200 = 30, then 200 + 30
    50 * 25%   ->  0.25, then 50 * 0.25

With no pending operator the key just divides by 100.
"""

from __future__ import annotations

from procalc.exceptions import InvalidInputError, reports_failures
from procalc.operations import divide, multiply
from procalc.results import CalculationResult, Success
from procalc.validators import INVALID_OPERATOR, is_valid_operator, require_operand

# "*" and "/" take the bare fraction
ADDITIVE_OPERATORS = frozenset({"+", "-"})

PERCENT_VALUE_INVALID = "Percentage value is invalid"
BASE_VALUE_INVALID = "Base value is invalid"


@reports_failures
def calculate_percentage(
    percent_value: str, base_value: str | None, pending_operator: str | None
) -> CalculationResult:
    """
    Resolve a percentage in the context of the pending operator.

    Args:
        percent_value: The number the percent key was pressed on
        base_value: The left operand already entered
        pending_operator: The operator waiting for a right operand, or
            None/"" if there is none

    Returns:
        Success with ``percent/100 * base`` for "+" and "-", or
        ``percent/100`` for "*", "/" and no operator; Failure otherwise
    """
    percent = require_operand(percent_value, PERCENT_VALUE_INVALID)

    if pending_operator is None or pending_operator == "":
        return Success.from_value(divide(percent, 100))

    if not is_valid_operator(pending_operator):
        raise InvalidInputError(pending_operator, INVALID_OPERATOR)

    base = require_operand(base_value, BASE_VALUE_INVALID)
    fraction = divide(percent, 100)

    if pending_operator in ADDITIVE_OPERATORS:
        return Success.from_value(multiply(fraction, base))

    return Success.from_value(fraction)
