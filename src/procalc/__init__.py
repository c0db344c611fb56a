"""
Arithmetic evaluation and result formatting for a four-function calculator.

Every public function is pure and total: failures come back as ``Failure``
values carrying an ``ErrorKind`` and a message, never as exceptions.
"""

from procalc.evaluator import safe_calculation
from procalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    OverflowError,
)
from procalc.formatting import format_result, normalize_result
from procalc.operations import add, divide, multiply, perform_calculation, subtract
from procalc.percentage import calculate_percentage
from procalc.results import (
    CalculationResult,
    ErrorKind,
    Failure,
    SignToggleResult,
    Success,
    ToggledOperand,
    ValidationResult,
)
from procalc.sign import toggle_sign
from procalc.validators import (
    can_add_decimal,
    can_add_digit,
    can_add_operator,
    is_valid_operator,
    parse_operand,
    validate_calculation_input,
    validate_number,
)

__all__ = [
    "CalculationResult",
    "CalculatorError",
    "DivisionByZeroError",
    "ErrorKind",
    "Failure",
    "InvalidInputError",
    "OverflowError",
    "SignToggleResult",
    "Success",
    "ToggledOperand",
    "ValidationResult",
    "add",
    "calculate_percentage",
    "can_add_decimal",
    "can_add_digit",
    "can_add_operator",
    "divide",
    "format_result",
    "is_valid_operator",
    "multiply",
    "normalize_result",
    "parse_operand",
    "perform_calculation",
    "safe_calculation",
    "subtract",
    "toggle_sign",
    "validate_calculation_input",
    "validate_number",
]

__version__ = "0.1.0"
