"""Recipe data models."""

import dataclasses
from typing import Any, Dict, List, Optional, Union


@dataclasses.dataclass(frozen=True)
class NutritionalValues:
    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0  # mg

    def scaled(self, multiplier: float) -> "NutritionalValues":
        """Return a copy with every value multiplied by ``multiplier``."""
        return NutritionalValues(
            **{
                field.name: getattr(self, field.name) * multiplier
                for field in dataclasses.fields(self)
            }
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "NutritionalValues":
        if not data:
            return cls()
        names = {field.name for field in dataclasses.fields(cls)}
        return cls(**{k: float(v) for k, v in data.items() if k in names})


@dataclasses.dataclass(frozen=True)
class NutritionalInfo:
    per_serving: NutritionalValues
    total: NutritionalValues


@dataclasses.dataclass
class Recipe:
    """Dataclass for holding a recipe as authored or generated."""

    name: str
    ingredients: List[Union[str, Dict[str, Any]]]
    instructions: List[str]
    description: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    servings: Union[int, float, str, None] = None
    nutrition: Optional[NutritionalInfo] = None
    source: str = "manual"


def recipe_from_dict(data: Dict[str, Any]) -> Recipe:
    """Build a Recipe from a recipe payload as returned by the generator.

    Args:
        data: Payload with camelCase keys (``recipeName``, ``prepTime``,
              ``cookTime``, ``nutritionalInfo``...).

    Returns:
        The Recipe. Optional keys that are missing take their defaults.

    Raises:
        KeyError: If ``recipeName`` is missing.
    """
    nutrition = None
    info = data.get("nutritionalInfo")
    if info:
        nutrition = NutritionalInfo(
            per_serving=NutritionalValues.from_dict(info.get("perServing")),
            total=NutritionalValues.from_dict(info.get("total")),
        )

    return Recipe(
        name=data["recipeName"],
        ingredients=list(data.get("ingredients") or []),
        instructions=list(data.get("instructions") or []),
        description=data.get("description"),
        prep_time=data.get("prepTime"),
        cook_time=data.get("cookTime"),
        servings=data.get("servings"),
        nutrition=nutrition,
        source=data.get("source") or "manual",
    )
