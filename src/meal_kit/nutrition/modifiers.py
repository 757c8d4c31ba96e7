# src/meal_kit/nutrition/modifiers.py

"""Calorie multiplier lookup.

Most specific scope wins:
1. ``ingredients[<lower-cased name>]``
2. the ingredient's subcategory (poultry, fish, vegetable, fruit)
3. ``categories[<category>]``
4. ``default``

The first scope that exists decides. A cooking method it does not list
means no change (1.0); lower scopes are not consulted.
"""

from meal_kit.parsers.models import CalorieModifierTree, Ingredient, ScopeKind

POULTRY_WORDS = ("chicken", "turkey")
FISH_WORDS = ("salmon", "tuna", "cod", "fish")


def subcategory_of(ingredient: Ingredient) -> str | None:
    name = ingredient.name.lower()
    if ingredient.category == "meat":
        if any(word in name for word in POULTRY_WORDS):
            return "poultry"
        if any(word in name for word in FISH_WORDS):
            return "fish"
        return None
    if ingredient.category in ("vegetable", "fruit"):
        return ingredient.category
    return None


def _scopes(ingredient: Ingredient) -> list[tuple[ScopeKind, str]]:
    scopes = [(ScopeKind.INGREDIENTS, ingredient.name.lower())]
    subcategory = subcategory_of(ingredient)
    if subcategory is not None:
        scopes.append((ScopeKind.SUBCATEGORIES, subcategory))
    scopes.append((ScopeKind.CATEGORIES, ingredient.category))
    scopes.append((ScopeKind.DEFAULT, "default"))
    return scopes


def calorie_multiplier(tree: CalorieModifierTree, ingredient: Ingredient) -> float:
    for kind, name in _scopes(ingredient):
        if tree.scope(kind, name) is None:
            continue
        value = tree.multiplier(kind, name, ingredient.cooking_method)
        return 1.0 if value is None else value
    return 1.0


def modified_calories_per_unit(
    tree: CalorieModifierTree, ingredient: Ingredient
) -> float:
    return ingredient.calories_per_unit * calorie_multiplier(tree, ingredient)


def total_calories(tree: CalorieModifierTree, ingredient: Ingredient) -> int:
    return int(modified_calories_per_unit(tree, ingredient) * ingredient.quantity)
