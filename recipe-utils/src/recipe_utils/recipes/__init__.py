"""Recipe models, serving sizes and whole-recipe scaling."""

from .models import NutritionalInfo, NutritionalValues, Recipe, recipe_from_dict
from .scaling import format_total_time, scale_recipe, total_time_minutes
from .servings import parse_servings, servings_multiplier, step_servings

__all__ = [
    "Recipe",
    "NutritionalInfo",
    "NutritionalValues",
    "recipe_from_dict",
    "parse_servings",
    "servings_multiplier",
    "step_servings",
    "scale_recipe",
    "total_time_minutes",
    "format_total_time",
]
