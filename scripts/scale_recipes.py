#!/usr/bin/env python3
"""
Scale a file of recipe payloads to a serving count and write the scaled
ingredient lines, with total cooking times, to CSV.
"""

import argparse
import json
import logging
import pathlib

import numpy as np
import pandas as pd
from tqdm import tqdm

from recipe_utils.recipes import (
    format_total_time,
    recipe_from_dict,
    scale_recipe,
    total_time_minutes,
)


def load_recipes(input_path: pathlib.Path) -> list:
    """Load recipe payloads from a JSON file holding one recipe or a list of them."""
    with open(input_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    return [recipe_from_dict(item) for item in data]


def create_scaled_ingredients_table(recipes: list, target_servings=None) -> pd.DataFrame:
    """Create one row per ingredient line with its scaled counterpart.

    Args:
        recipes: Recipes to scale
        target_servings: Servings to scale to, or None to keep each recipe as written

    Returns:
        DataFrame with columns: recipe_name, servings, ingredient,
        scaled_ingredient, total_minutes, total_time
    """
    rows = []
    for recipe in tqdm(recipes, desc="Scaling recipes"):
        scaled = scale_recipe(recipe, target_servings)
        total = total_time_minutes(recipe)
        for original, scaled_ingredient in zip(recipe.ingredients, scaled.ingredients):
            rows.append(
                {
                    "recipe_name": recipe.name,
                    "servings": scaled.servings,
                    "ingredient": original,
                    "scaled_ingredient": scaled_ingredient,
                    "total_minutes": np.nan if total is None else total,
                    "total_time": format_total_time(recipe),
                }
            )

    return pd.DataFrame(
        rows,
        columns=[
            "recipe_name",
            "servings",
            "ingredient",
            "scaled_ingredient",
            "total_minutes",
            "total_time",
        ],
    )


def main():
    """Main function to scale recipes and write the ingredient table."""
    parser = argparse.ArgumentParser(
        description="Scale recipe ingredients to a serving count"
    )
    parser.add_argument(
        "input",
        type=pathlib.Path,
        help="JSON file with a recipe payload or a list of them",
    )
    parser.add_argument(
        "--servings",
        type=float,
        default=None,
        help="Target number of servings (default: keep each recipe as written)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/scaled_ingredients.csv",
        help="Output CSV file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log recipes that could not be scaled",
    )
    args = parser.parse_args()

    if not args.input.exists():
        parser.error(f"Input file not found: {args.input}")
    if args.servings is not None and args.servings <= 0:
        parser.error("--servings must be positive")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    recipes = load_recipes(args.input)
    print(f"Loaded {len(recipes)} recipes from {args.input}")

    df = create_scaled_ingredients_table(recipes, args.servings)

    output_path = pathlib.Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    print(f"Wrote {len(df)} ingredient lines to {output_path}")


if __name__ == "__main__":
    main()
