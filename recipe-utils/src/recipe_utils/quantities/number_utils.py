import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple


def _is_number(value) -> bool:
    """Check if a value is a real number (int or float), excluding bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_fraction(numerator_str: str, denominator_str: str) -> float:
    """Parse the two halves of a fraction (e.g., '1', '2') into a float."""
    numerator = int(numerator_str)
    denominator = int(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def _reduce_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce a fraction to lowest terms (e.g., 4/8 -> 1/2)."""
    divisor = math.gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


def _format_decimal(value: float, places: int) -> str:
    """Round a float to a fixed number of places and strip trailing zeros.

    Rounding is applied to the exact binary value with halves going up, so
    ``_format_decimal(2.0049, 2)`` gives ``'2'`` and ``_format_decimal(1.2, 2)``
    gives ``'1.2'``.
    """
    exponent = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)
    return format(rounded.normalize(), "f")
