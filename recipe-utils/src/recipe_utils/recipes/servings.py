"""Serving size utilities."""

import re
from typing import Any, Optional

from recipe_utils.quantities.number_utils import _is_number

# Plain counts only: "4", " 2.5 ". Ranges and prose are not scalable.
SERVINGS_RE = re.compile(r"^\s*\d+(?:\.\d+)?\s*$", re.ASCII)

MIN_SERVINGS = 1


def parse_servings(servings: Any) -> Optional[float]:
    """Read a servings value as a number, or None if it is not a plain count.

    Examples:
        >>> parse_servings(" 4 ")
        4.0
        >>> parse_servings("4-6") is None
        True
    """
    if _is_number(servings):
        return float(servings)
    if isinstance(servings, str) and SERVINGS_RE.match(servings):
        return float(servings)
    return None


def servings_multiplier(original: float, target: Optional[float]) -> float:
    """Compute the ratio that scales a recipe from ``original`` to ``target`` servings.

    Args:
        original: Servings the recipe was written for.
        target: Servings wanted, or None to keep the recipe as written.

    Returns:
        ``target / original``, or 1.0 when ``target`` is None.

    Raises:
        ValueError: If ``original`` is not a positive number.
    """
    if original <= 0:
        raise ValueError(f"Original servings must be positive, got {original}")
    if target is None:
        return 1.0
    return target / original


def step_servings(current: float, delta: float) -> float:
    """Move a serving count up or down, never going below one serving."""
    return max(MIN_SERVINGS, current + delta)
