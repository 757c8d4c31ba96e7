# src/meal_kit/nutrition/calculator.py

import logging
import math
from collections.abc import Iterable

from meal_kit.parsers.models import Ingredient, NutritionInfo, NutritionTable, Recipe

logger = logging.getLogger(__name__)

GRAMS_PER_UNIT = {
    "ml": 1.0,
    "tablespoon": 15.0,
    "teaspoon": 5.0,
    "cup": 240.0,
}
# These roughly double in weight once cooked.
EXPANDING_WORDS = ("pasta", "noodle", "rice", "dough")


def quantity_in_grams(ingredient: Ingredient) -> float:
    grams = ingredient.quantity * GRAMS_PER_UNIT.get(ingredient.unit.lower(), 1.0)
    name = ingredient.name.lower()
    if any(word in name for word in EXPANDING_WORDS):
        grams *= 2
    return grams


class NutritionCalculator:
    """
    Recipe and meal nutrition from a per-100 g nutrition table.

    Nutrients depend on weight only. The cooking method does not scale them;
    cooked calories per unit come from ``modifiers.total_calories``.
    """

    def __init__(self, table: NutritionTable) -> None:
        self.table = table

    def for_ingredient(self, ingredient: Ingredient) -> NutritionInfo | None:
        per_100g = self.table.find(ingredient.name)
        if per_100g is None:
            logger.info("No nutrition data found for ingredient: %s", ingredient.name)
            return None

        grams = quantity_in_grams(ingredient)
        result = per_100g.multiply(grams / 100.0)
        logger.debug(
            "Ingredient %s: %.2f g, %.1f kcal", ingredient.name, grams, result.calories
        )
        return result

    def for_recipe(self, recipe: Recipe) -> NutritionInfo:
        total = NutritionInfo.zero()
        for ingredient in recipe.ingredients:
            info = self.for_ingredient(ingredient)
            if info is not None:
                total = total.add(info)
        return total

    def for_meal(self, recipes: Iterable[Recipe]) -> NutritionInfo:
        total = NutritionInfo.zero()
        for recipe in recipes:
            total = total.add(self.for_recipe(recipe))
        return total

    def recipe_calories(self, recipe: Recipe) -> int:
        # half-up, matching how calorie totals are displayed
        return math.floor(self.for_recipe(recipe).calories + 0.5)
