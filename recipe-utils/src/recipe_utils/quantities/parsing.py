"""Quantity parsing utilities."""

import re
from typing import Callable, Tuple

from recipe_utils.quantities.models import ParsedQuantity
from recipe_utils.quantities.number_utils import _parse_fraction

# --- Constants ---

# ASCII digits only; "\b" must not treat non-ASCII letters as word characters.
# The mixed-number separator may be any whitespace, including no-break spaces.
MIXED_NUMBER_RE = re.compile(r"^([0-9]+)(?u:\s+)([0-9]+)/([0-9]+)\b", re.ASCII)
FRACTION_RE = re.compile(r"^([0-9]+)/([0-9]+)\b", re.ASCII)
DECIMAL_RE = re.compile(r"^[0-9]*\.?[0-9]+\b", re.ASCII)

# --- Functions ---


def _mixed_number(match: re.Match) -> float:
    whole, numerator, denominator = match.groups()
    return int(whole) + _parse_fraction(numerator, denominator)


def _simple_fraction(match: re.Match) -> float:
    return _parse_fraction(*match.groups())


def _decimal(match: re.Match) -> float:
    return float(match.group(0))


# Tried in order; the first rule that matches and evaluates wins
QUANTITY_GRAMMAR: Tuple[Tuple[re.Pattern, Callable[[re.Match], float]], ...] = (
    (MIXED_NUMBER_RE, _mixed_number),
    (FRACTION_RE, _simple_fraction),
    (DECIMAL_RE, _decimal),
)


def parse_quantity_string(text: str) -> ParsedQuantity:
    """Parse the leading quantity of a piece of text.

    Recognizes mixed numbers ("1 1/2"), simple fractions ("3/4") and
    decimals or integers ("2.5", ".5", "3") at the start of the trimmed text.
    A fraction with a zero denominator is not an error: that rule is skipped
    and the next one is tried, so "1/0" parses as the integer 1.

    Args:
        text: Raw text such as an ingredient line (e.g., "1 1/2 cups milk").

    Returns:
        A ParsedQuantity holding the value as a float and the exact substring
        that produced it, or a ParsedQuantity of Nones if there is no leading
        quantity.

    Examples:
        >>> parse_quantity_string("1 1/2 cups milk")
        ParsedQuantity(value=1.5, matched='1 1/2')
        >>> parse_quantity_string("Salt to taste")
        ParsedQuantity(value=None, matched=None)
    """
    text = text.strip()

    for pattern, extract in QUANTITY_GRAMMAR:
        match = pattern.match(text)
        if match is None:
            continue
        try:
            value = extract(match)
        except (ValueError, ZeroDivisionError):
            continue
        return ParsedQuantity(value=value, matched=match.group(0))

    return ParsedQuantity()
