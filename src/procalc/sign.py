"""Sign inversion of a textual operand."""

from procalc.exceptions import reports_failures
from procalc.results import SignToggleResult, ToggledOperand
from procalc.validators import require_operand

INVALID_NUMBER = "Invalid number"


@reports_failures
def toggle_sign(operand: str) -> SignToggleResult:
    """
    Flip the sign of ``operand`` by adding or removing a leading minus.

    Zero never gains a minus sign, and a stray one is dropped. The text is
    otherwise kept as typed, so ``"0."`` and ``"12.50"`` survive intact.

    Example:
        >>> toggle_sign("3")
        ToggledOperand(result='-3', display_value='-3')
    """
    value = require_operand(operand, INVALID_NUMBER)

    if value == 0:
        toggled = operand.lstrip("-")
    elif operand.startswith("-"):
        toggled = operand[1:]
    else:
        toggled = "-" + operand

    return ToggledOperand(toggled, toggled)
