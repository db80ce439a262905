"""Ingredient scaling utilities."""

import copy
from typing import Any

from recipe_utils.quantities.formatting import format_quantity
from recipe_utils.quantities.number_utils import _is_number
from recipe_utils.quantities.parsing import parse_quantity_string

# --- Constants ---

# Record fields holding a quantity that scales with the number of servings
SCALABLE_FIELDS = ("amount", "quantity", "value")

# --- Functions ---


def _scale_text(text: str, multiplier: float) -> str:
    parsed = parse_quantity_string(text)
    if parsed.value is None or not parsed.matched:
        return text

    scaled = format_quantity(parsed.value * multiplier)
    return text.replace(parsed.matched, scaled, 1)


def _scale_record(record: dict, multiplier: float) -> dict:
    scaled = copy.copy(record)
    for field in SCALABLE_FIELDS:
        if field in scaled and _is_number(scaled[field]):
            scaled[field] = scaled[field] * multiplier
    return scaled


def scale_ingredient(ingredient: Any, multiplier: float) -> Any:
    """Scale the quantity of an ingredient by a multiplier.

    Text ingredients have their leading quantity rewritten in place
    ("2 cups flour" x 2 -> "4 cups flour") and the rest of the line is left
    as it was. Record ingredients (dicts) are copied and their numeric
    ``amount``, ``quantity`` and ``value`` fields multiplied. The input is
    never modified; anything else, including None and text without a
    leading quantity, is returned unchanged.

    Args:
        ingredient: An ingredient line, an ingredient record, or None.
        multiplier: Scaling ratio, usually target servings / original servings.

    Returns:
        A scaled value of the same type as ``ingredient``.

    Examples:
        >>> scale_ingredient("1/2 cup sugar", 2)
        '1 cup sugar'
        >>> scale_ingredient({"amount": 2, "name": "flour"}, 3)
        {'amount': 6, 'name': 'flour'}
    """
    if isinstance(ingredient, str):
        return _scale_text(ingredient, multiplier)
    if isinstance(ingredient, dict):
        return _scale_record(ingredient, multiplier)
    return ingredient
