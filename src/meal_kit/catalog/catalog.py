# src/meal_kit/catalog/catalog.py

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from time import monotonic
from typing import TypeVar

from meal_kit.observability import names
from meal_kit.nutrition.pricing import DEFAULT_SALES_TAX_RATE, ShoppingCart
from meal_kit.observability.base import MetricsHook, NoOpMetricsHook
from meal_kit.parsers import (
    CalorieModifierFileParser,
    IngredientFileParser,
    NutritionFileParser,
    RecipeFileParser,
)
from meal_kit.parsers.models import (
    CalorieModifierTree,
    Ingredient,
    NutritionTable,
    Recipe,
)

from .defaults import default_calorie_modifiers, default_ingredients
from .settings import CatalogSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Catalog:
    """Everything loaded at startup, passed explicitly to its consumers."""

    ingredients: Mapping[str, list[Ingredient]] = field(default_factory=dict)
    recipes: list[Recipe] = field(default_factory=list)
    calorie_modifiers: CalorieModifierTree = field(default_factory=CalorieModifierTree)
    nutrition: NutritionTable = field(default_factory=NutritionTable)
    sales_tax_rate: float = DEFAULT_SALES_TAX_RATE

    def categories(self) -> list[str]:
        return list(self.ingredients)

    def ingredients_by_category(self, category: str) -> list[Ingredient]:
        # return a shallow copy to avoid mutation
        return list(self.ingredients.get(category.lower(), []))

    def ingredient_names(self, category: str) -> list[str]:
        return [i.name for i in self.ingredients_by_category(category)]

    def all_ingredients(self) -> list[Ingredient]:
        return [i for entries in self.ingredients.values() for i in entries]

    def ingredient_by_name(self, name: str) -> Ingredient | None:
        """Case-insensitive lookup; the match comes back with quantity 1."""
        wanted = name.lower()
        for ingredient in self.all_ingredients():
            if ingredient.name.lower() == wanted:
                return ingredient.with_quantity(1)
        logger.debug("Ingredient not found: %s", name)
        return None

    def recipe_by_name(self, name: str) -> Recipe | None:
        for recipe in self.recipes:
            if recipe.name == name:
                return recipe
        return None

    def new_cart(self) -> ShoppingCart:
        """An empty cart taxed at the configured sales tax rate."""
        return ShoppingCart(tax_rate=self.sales_tax_rate)


def _load_or(
    component: str,
    load: Callable[[], T],
    fallback: Callable[[], T],
    metrics_hook: MetricsHook,
) -> T:
    try:
        return load()
    except OSError as exc:
        logger.warning("Error loading %s, using built-in data: %s", component, exc)
        metrics_hook.increment(
            names.CATALOG_FALLBACKS_TOTAL, labels={"component": component}
        )
        return fallback()


def load_catalog(
    settings: CatalogSettings,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Catalog:
    """
    Load every catalog file named by ``settings``.

    Each file loads on its own. A missing, empty or unreadable file is
    replaced by built-in data (ingredients, calorie modifiers) or by an empty
    result (recipes, nutrition); this function never raises for data problems.
    """
    start = monotonic()
    logger.info("Loading catalog from %s", settings.data_dir)

    modifiers = _load_or(
        "calorie_modifiers",
        lambda: CalorieModifierFileParser(metrics_hook).parse(
            settings.path(settings.calorie_modifiers_file)
        ),
        default_calorie_modifiers,
        metrics_hook,
    )

    ingredient_parser = IngredientFileParser(metrics_hook)
    ingredients: dict[str, list[Ingredient]] = {}
    for category, file_name in settings.ingredient_files.items():
        ingredients[category.lower()] = _load_or(
            f"ingredients.{category}",
            lambda file_name=file_name: ingredient_parser.parse(settings.path(file_name)),
            lambda category=category: default_ingredients(category),
            metrics_hook,
        )

    recipes = _load_or(
        "recipes",
        lambda: RecipeFileParser(metrics_hook).parse(settings.path(settings.recipes_file)),
        list,
        metrics_hook,
    )
    if not recipes:
        logger.warning("No recipes were loaded")

    nutrition = _load_or(
        "nutrition",
        lambda: NutritionFileParser(metrics_hook).parse(
            settings.path(settings.nutrition_file)
        ),
        NutritionTable,
        metrics_hook,
    )

    catalog = Catalog(
        ingredients=ingredients,
        recipes=recipes,
        calorie_modifiers=modifiers,
        nutrition=nutrition,
        sales_tax_rate=settings.sales_tax_rate,
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CATALOG_LOAD_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.CATALOG_RECIPES, len(recipes))
    metrics_hook.record_gauge(names.CATALOG_INGREDIENTS, len(catalog.all_ingredients()))
    logger.info(
        "Loaded catalog: %d ingredients, %d recipes",
        len(catalog.all_ingredients()),
        len(recipes),
    )
    return catalog
