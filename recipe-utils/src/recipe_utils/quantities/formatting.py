"""Quantity formatting utilities."""

import math
from typing import Tuple

from recipe_utils.quantities.number_utils import (
    _format_decimal,
    _reduce_fraction,
    _round_half_up,
)

# --- Constants ---

# Denominators common in cooking, in search order
FRACTION_DENOMINATORS = (2, 3, 4, 8, 16)

# Largest gap allowed between a value and the fraction shown for it.
# Loose on purpose: 1.37 is shown as "1 3/8".
FRACTION_TOLERANCE = 0.035

DECIMAL_PLACES = 2

# --- Functions ---


def _closest_fraction(frac: float) -> Tuple[int, int, float]:
    """Find the candidate fraction closest to ``frac`` (0 <= frac < 1).

    Returns:
        A tuple of (numerator, denominator, error). The fraction is not reduced
        and its numerator may be 0 or equal to the denominator.
    """
    best = (0, 1, 1.0)
    for denominator in FRACTION_DENOMINATORS:
        numerator = _round_half_up(frac * denominator)
        error = abs(frac - numerator / denominator)
        # strict comparison keeps the smallest denominator on ties
        if error < best[2]:
            best = (numerator, denominator, error)
    return best


def format_quantity(value: float) -> str:
    """Format a quantity the way a cook would write it.

    Whole numbers are written without a decimal part, values close to a
    half, third, quarter, eighth or sixteenth are written as a reduced
    fraction or mixed number, and everything else is rounded to two decimals.

    Args:
        value: Quantity to format. May be negative or non-finite.

    Returns:
        The formatted quantity.

    Examples:
        >>> format_quantity(0.5)
        '1/2'
        >>> format_quantity(-1.5)
        '-1 1/2'
        >>> format_quantity(2.01)
        '2.01'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        # exact, and safe for ints too large to convert to float
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if value < 0 else ""
    abs_value = abs(value)

    if float(abs_value).is_integer():
        return sign + str(int(abs_value))

    whole = math.floor(abs_value)
    frac = abs_value - whole
    numerator, denominator, error = _closest_fraction(frac)

    if numerator != 0 and error <= FRACTION_TOLERANCE:
        numerator, denominator = _reduce_fraction(numerator, denominator)
        if whole == 0:
            return f"{sign}{numerator}/{denominator}"
        return f"{sign}{whole} {numerator}/{denominator}"

    return sign + _format_decimal(abs_value, DECIMAL_PLACES)
