"""Display formatting for numeric results.

The thresholds below are a contract with the rendering layer:
magnitudes at or above ``LARGE_NUMBER_THRESHOLD`` and nonzero magnitudes
below ``SMALL_NUMBER_THRESHOLD`` are shown in scientific notation.
"""

import math
from decimal import Decimal

ERROR_DISPLAY = "Error"

LARGE_NUMBER_THRESHOLD = 1e12
SMALL_NUMBER_THRESHOLD = 1e-6
SCIENTIFIC_PRECISION = 6

# Decimal digits a double reliably round-trips
SIGNIFICANT_DIGITS = 15


def normalize_result(value: float) -> float:
    """
    Round a finite value to ``SIGNIFICANT_DIGITS`` significant digits.

    Strips binary representation noise such as ``0.1 + 0.2`` giving
    ``0.30000000000000004``. Values that would round past the largest
    double are returned unchanged.
    """
    rounded = float(f"{value:.{SIGNIFICANT_DIGITS}g}")
    if math.isinf(rounded):
        return value
    return rounded


def _scientific(number: float) -> str:
    # Unpadded exponent: 1.000000e-7, not 1.000000e-07
    mantissa, exponent = f"{number:.{SCIENTIFIC_PRECISION}e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def format_result(value: float) -> str:
    """
    Convert a number into its display string.

    Args:
        value: The number to display

    Returns:
        "Error" for non-finite or non-numeric input, scientific notation
        with six mantissa digits outside the plain band, otherwise a plain
        decimal without trailing zeros

    Example:
        >>> format_result(5.0)
        '5'
        >>> format_result(1e12)
        '1.000000e+12'
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ERROR_DISPLAY

    try:
        number = float(value)
    except OverflowError:
        return ERROR_DISPLAY

    if not math.isfinite(number):
        return ERROR_DISPLAY

    # Thresholds apply to the digits actually shown
    number = normalize_result(number)
    if number == 0:
        return "0"

    magnitude = abs(number)
    if magnitude >= LARGE_NUMBER_THRESHOLD or magnitude < SMALL_NUMBER_THRESHOLD:
        return _scientific(number)

    text = format(Decimal(f"{number:.{SIGNIFICANT_DIGITS}g}"), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
