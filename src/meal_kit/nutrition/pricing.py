# src/meal_kit/nutrition/pricing.py

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from meal_kit.parsers.models import Ingredient, Recipe

logger = logging.getLogger(__name__)

DEFAULT_SALES_TAX_RATE = 0.0825

UNIT_MULTIPLIERS = {
    "tablespoon": 15.0,
    "teaspoon": 5.0,
    "cup": 240.0,
    "ml": 1.0,
}


def base_unit(unit: str) -> str:
    """``"tablespoon (15g)"`` -> ``"tablespoon"``."""
    paren = unit.find("(")
    return unit[:paren].strip() if paren > 0 else unit


class PriceCalculator:
    """
    Prices are per piece for countable items and per 100 g otherwise.
    """

    def ingredient_price(self, ingredient: Ingredient) -> float:
        unit = ingredient.unit.lower()
        if "piece" in unit or "egg" in unit:
            return ingredient.price_per_unit * ingredient.quantity

        multiplier = UNIT_MULTIPLIERS.get(base_unit(unit), 1.0)
        return ingredient.price_per_unit / 100.0 * ingredient.quantity * multiplier

    def recipe_price(self, recipe: Recipe) -> float:
        return sum(self.ingredient_price(i) for i in recipe.ingredients)


@dataclass(frozen=True)
class CartLine:
    key: str
    quantity: float
    price: float


@dataclass(frozen=True)
class CartSummary:
    lines: list[CartLine]
    subtotal: float
    tax: float
    total: float


class ShoppingCart:
    def __init__(
        self,
        price_calculator: PriceCalculator | None = None,
        tax_rate: float = DEFAULT_SALES_TAX_RATE,
    ) -> None:
        if tax_rate < 0:
            raise ValueError("tax_rate must be >= 0")
        self.price_calculator = price_calculator or PriceCalculator()
        self.tax_rate = tax_rate
        self._recipes: list[Recipe] = []

    def add(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)
        logger.debug("Added recipe to cart: %s", recipe.name)

    def add_all(self, recipes: Iterable[Recipe]) -> None:
        for recipe in recipes:
            self.add(recipe)

    def remove(self, name: str) -> None:
        for index, recipe in enumerate(self._recipes):
            if recipe.name == name:
                del self._recipes[index]
                logger.debug("Removed recipe from cart: %s", name)
                return
        logger.error("Cannot remove recipe, not in cart: %s", name)
        raise KeyError(f"Recipe '{name}' not in cart")

    def clear(self) -> None:
        self._recipes.clear()

    def recipes(self) -> list[Recipe]:
        return list(self._recipes)

    def is_empty(self) -> bool:
        return not self._recipes

    def consolidated(self) -> list[CartLine]:
        """One line per ``"<name> (<unit>)"`` across every recipe in the cart."""
        quantities: dict[str, float] = {}
        prices: dict[str, float] = {}
        for recipe in self._recipes:
            for ingredient in recipe.ingredients:
                key = f"{ingredient.name} ({ingredient.unit})"
                quantities[key] = quantities.get(key, 0.0) + ingredient.quantity
                prices[key] = prices.get(key, 0.0) + self.price_calculator.ingredient_price(
                    ingredient
                )
        return [CartLine(key, quantities[key], prices[key]) for key in quantities]

    def subtotal(self) -> float:
        return sum(self.price_calculator.recipe_price(r) for r in self._recipes)

    def summary(self) -> CartSummary:
        subtotal = self.subtotal()
        tax = subtotal * self.tax_rate
        return CartSummary(
            lines=self.consolidated(),
            subtotal=subtotal,
            tax=tax,
            total=subtotal + tax,
        )
