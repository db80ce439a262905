"""Whole-recipe scaling and timing utilities."""

import dataclasses
import logging
from typing import Optional

from recipe_utils.durations import format_minutes, parse_minutes
from recipe_utils.quantities import scale_ingredient
from recipe_utils.recipes.models import NutritionalInfo, Recipe
from recipe_utils.recipes.servings import parse_servings, servings_multiplier

logger = logging.getLogger(__name__)


def total_time_minutes(recipe: Recipe) -> Optional[int]:
    """Add up prep and cook time in minutes.

    A side that cannot be parsed counts as zero; if neither side parses the
    total is unknown.

    Returns:
        Total minutes, or None if neither time could be parsed.
    """
    prep = parse_minutes(recipe.prep_time)
    cook = parse_minutes(recipe.cook_time)
    if prep is None and cook is None:
        return None
    return (prep or 0) + (cook or 0)


def format_total_time(recipe: Recipe) -> str:
    """Format the recipe's total time as "Xh Ym", or "" if it is unknown."""
    return format_minutes(total_time_minutes(recipe))


def scale_recipe(recipe: Recipe, target_servings: Optional[float]) -> Recipe:
    """Scale a recipe's ingredients and nutrition totals to a serving count.

    Args:
        recipe: Recipe to scale. It is not modified.
        target_servings: Servings wanted, or None to keep the recipe as written.

    Returns:
        A new Recipe with scaled ingredient lines, ``servings`` set to the
        target and total nutrition scaled (per-serving nutrition is unchanged).
        If the recipe's own servings are not a plain count, or
        ``target_servings`` is None, the recipe itself is returned.
    """
    if target_servings is None:
        return recipe

    base = parse_servings(recipe.servings)
    if base is None or base <= 0:
        logger.debug(
            f"Not scaling {recipe.name!r}: servings {recipe.servings!r} is not a count"
        )
        return recipe

    multiplier = servings_multiplier(base, target_servings)

    nutrition = recipe.nutrition
    if nutrition is not None:
        nutrition = NutritionalInfo(
            per_serving=nutrition.per_serving,
            total=nutrition.total.scaled(multiplier),
        )

    return dataclasses.replace(
        recipe,
        ingredients=[scale_ingredient(ing, multiplier) for ing in recipe.ingredients],
        instructions=list(recipe.instructions),
        servings=target_servings,
        nutrition=nutrition,
    )
