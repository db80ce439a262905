import copy

import pytest

from recipe_utils.recipes import (
    NutritionalInfo,
    NutritionalValues,
    Recipe,
    format_total_time,
    parse_servings,
    recipe_from_dict,
    scale_recipe,
    servings_multiplier,
    step_servings,
    total_time_minutes,
)
from recipe_utils.recipes import scaling


@pytest.fixture
def pancake_payload():
    return {
        "recipeName": "Buttermilk Pancakes",
        "description": "Fluffy weekend pancakes",
        "ingredients": [
            "2 cups flour",
            "1 1/2 cups buttermilk",
            "1/4 cup sugar",
            "Salt to taste",
        ],
        "instructions": ["Whisk the dry ingredients.", "Cook on a hot griddle."],
        "prepTime": "10 minutes",
        "cookTime": "20 mins",
        "servings": "4",
        "nutritionalInfo": {
            "perServing": {"calories": 350, "protein": 9, "fat": 8, "sodium": 400},
            "total": {"calories": 1400, "protein": 36, "fat": 32, "sodium": 1600},
        },
        "source": "ai-generated",
    }


@pytest.fixture
def pancakes(pancake_payload):
    return recipe_from_dict(pancake_payload)


@pytest.mark.parametrize(
    "servings, expected",
    [
        (4, 4.0),
        (2.5, 2.5),
        ("4", 4.0),
        (" 6 ", 6.0),
        ("2.5", 2.5),
        ("4-6", None),
        ("serves 4", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_servings(servings, expected):
    assert parse_servings(servings) == expected


@pytest.mark.parametrize(
    "original, target, expected",
    [
        (4, 8, 2.0),
        (4, 2, 0.5),
        (3, 3, 1.0),
        (4, None, 1.0),
    ],
)
def test_servings_multiplier(original, target, expected):
    assert servings_multiplier(original, target) == pytest.approx(expected)


@pytest.mark.parametrize("original", [0, -2])
def test_servings_multiplier_rejects_non_positive_original(original):
    with pytest.raises(ValueError):
        servings_multiplier(original, 4)


@pytest.mark.parametrize(
    "current, delta, expected",
    [(4, 1, 5), (4, -1, 3), (1, -1, 1), (2, -5, 1)],
)
def test_step_servings(current, delta, expected):
    assert step_servings(current, delta) == expected


def test_recipe_from_dict(pancakes):
    assert pancakes.name == "Buttermilk Pancakes"
    assert pancakes.prep_time == "10 minutes"
    assert pancakes.servings == "4"
    assert pancakes.source == "ai-generated"
    assert pancakes.nutrition.per_serving.calories == 350.0
    assert pancakes.nutrition.total.fiber == 0.0


def test_recipe_from_dict_defaults():
    recipe = recipe_from_dict({"recipeName": "Toast"})
    assert recipe.ingredients == []
    assert recipe.instructions == []
    assert recipe.nutrition is None
    assert recipe.source == "manual"


def test_recipe_from_dict_requires_name():
    with pytest.raises(KeyError):
        recipe_from_dict({"ingredients": ["1 egg"]})


@pytest.mark.parametrize(
    "prep_time, cook_time, expected_minutes, expected_text",
    [
        ("10 minutes", "20 mins", 30, "30m"),
        ("15 min", "1 hour", 75, "1h 15m"),
        ("1 hour", "1 hour", 120, "2h"),
        ("overnight", "45", 45, "45m"),
        (None, "30 minutes", 30, "30m"),
        (None, None, None, ""),
        ("overnight", "as needed", None, ""),
    ],
)
def test_total_time(prep_time, cook_time, expected_minutes, expected_text):
    recipe = Recipe(
        name="Stew",
        ingredients=[],
        instructions=[],
        prep_time=prep_time,
        cook_time=cook_time,
    )
    assert total_time_minutes(recipe) == expected_minutes
    assert format_total_time(recipe) == expected_text


def test_scale_recipe(pancakes):
    scaled = scale_recipe(pancakes, 8)

    assert scaled.ingredients == [
        "4 cups flour",
        "3 cups buttermilk",
        "1/2 cup sugar",
        "Salt to taste",
    ]
    assert scaled.servings == 8
    assert scaled.name == pancakes.name
    assert scaled.instructions == pancakes.instructions
    assert scaled.nutrition.total.calories == pytest.approx(2800)
    assert scaled.nutrition.per_serving == pancakes.nutrition.per_serving


def test_scale_recipe_does_not_mutate_input(pancakes):
    pancakes.ingredients.append({"amount": 2, "name": "eggs"})
    snapshot = copy.deepcopy(pancakes)

    scaled = scale_recipe(pancakes, 2)

    assert pancakes == snapshot
    assert scaled.ingredients is not pancakes.ingredients
    assert scaled.ingredients[-1] == {"amount": 1.0, "name": "eggs"}


def test_scale_recipe_scales_each_ingredient(pancakes, mocker):
    spy = mocker.spy(scaling, "scale_ingredient")

    scale_recipe(pancakes, 2)

    assert spy.call_count == len(pancakes.ingredients)
    spy.assert_any_call("2 cups flour", 0.5)


@pytest.mark.parametrize("servings", ["4-6", "a crowd", None])
def test_scale_recipe_unknown_servings(pancakes, servings):
    pancakes.servings = servings
    assert scale_recipe(pancakes, 8) is pancakes


def test_scale_recipe_without_target(pancakes):
    assert scale_recipe(pancakes, None) is pancakes


def test_nutritional_values_scaled():
    values = NutritionalValues(calories=100, protein=5, sodium=200)
    scaled = values.scaled(1.5)
    assert scaled == NutritionalValues(calories=150, protein=7.5, sodium=300)
    assert values.calories == 100


def test_scale_recipe_without_nutrition():
    recipe = Recipe(
        name="Rice",
        ingredients=["1 cup rice", "2 cups water"],
        instructions=[],
        servings=2,
        nutrition=None,
    )
    scaled = scale_recipe(recipe, 3)
    assert scaled.ingredients == ["1 1/2 cup rice", "3 cups water"]
    assert scaled.nutrition is None


def test_nutritional_info_is_frozen():
    info = NutritionalInfo(per_serving=NutritionalValues(), total=NutritionalValues())
    with pytest.raises(AttributeError):
        info.total = NutritionalValues(calories=1)
