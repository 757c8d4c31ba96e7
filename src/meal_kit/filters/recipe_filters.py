# src/meal_kit/filters/recipe_filters.py

"""Recipe filters.

Every filter treats an empty value, ``None`` or ``"All"`` as "no filter",
and an unrecognised range label as matching everything so a bad selection
never hides recipes.
"""

from collections.abc import Iterable
from typing import Protocol

from meal_kit.nutrition.calculator import NutritionCalculator
from meal_kit.parsers.models import Recipe

CALORIE_RANGES: dict[str, tuple[int, int | None]] = {
    "0-300": (0, 300),
    "301-600": (301, 600),
    "601-900": (601, 900),
    "901+": (901, None),
}
PREP_TIME_RANGES: dict[str, tuple[int, int | None]] = {
    "0-15 min": (0, 15),
    "16-30 min": (16, 30),
    "31-45 min": (31, 45),
    "46+ min": (46, None),
}


class RecipeFilter(Protocol):
    def matches(self, recipe: Recipe, value: str | None) -> bool: ...


def _unset(value: str | None) -> bool:
    return value is None or not value.strip() or value.strip().lower() == "all"


def _in_range(amount: int, bounds: tuple[int, int | None]) -> bool:
    low, high = bounds
    return amount >= low and (high is None or amount <= high)


class CalorieRangeFilter:
    def __init__(self, calculator: NutritionCalculator) -> None:
        self.calculator = calculator

    def matches(self, recipe: Recipe, value: str | None) -> bool:
        if _unset(value) or value not in CALORIE_RANGES:
            return True
        return _in_range(self.calculator.recipe_calories(recipe), CALORIE_RANGES[value])


class PrepTimeFilter:
    def matches(self, recipe: Recipe, value: str | None) -> bool:
        if _unset(value) or value not in PREP_TIME_RANGES:
            return True
        return _in_range(recipe.prep_time, PREP_TIME_RANGES[value])


class CuisineFilter:
    """Case-insensitive; either cuisine may contain the other."""

    def matches(self, recipe: Recipe, value: str | None) -> bool:
        if _unset(value):
            return True
        recipe_cuisine = recipe.cuisine.lower().strip()
        selected = value.lower().strip()
        return selected in recipe_cuisine or recipe_cuisine in selected


class TextSearchFilter:
    """Searches name, flavor, flavor tags, cuisine and ingredient names."""

    def matches(self, recipe: Recipe, value: str | None) -> bool:
        if value is None or not value.strip():
            return True
        needle = value.lower().strip()
        haystack = [recipe.name, recipe.flavor, *recipe.flavor_tags, recipe.cuisine]
        haystack.extend(i.name for i in recipe.ingredients)
        return any(needle in text.lower() for text in haystack)


def apply_filters(
    recipes: Iterable[Recipe],
    criteria: Iterable[tuple[RecipeFilter, str | None]],
) -> list[Recipe]:
    criteria = list(criteria)
    return [
        recipe
        for recipe in recipes
        if all(f.matches(recipe, value) for f, value in criteria)
    ]
