# src/meal_kit/catalog/defaults.py

"""Built-in data used when a catalog file cannot be read."""

from meal_kit.parsers.models import CalorieModifierTree, Ingredient

DEFAULT_CALORIE_MODIFIERS = {
    "default": {
        "default": {
            "raw": 1.0,
            "steamed": 1.0,
            "boiled": 1.0,
            "grilled": 1.2,
            "fried": 1.5,
            "deep-fried": 2.0,
            "baked": 1.1,
            "roasted": 1.2,
        }
    },
    "categories": {
        "meat": {
            "grilled": 1.3,
            "fried": 1.7,
            "sauteed": 1.4,
            "roasted": 1.3,
            "braised": 1.15,
        }
    },
}

DEFAULT_INGREDIENTS = {
    "meat": [
        Ingredient(
            "Chicken Breast", 1, "100g", 165, 4.29, "meat",
            description="Boneless, skinless chicken breast - lean protein source",
        )
    ],
    "vegetable": [
        Ingredient(
            "Broccoli", 1, "100g", 34, 1.99, "vegetable",
            description="Fresh broccoli florets - high in fiber and vitamin C",
        )
    ],
    "fruit": [
        Ingredient(
            "Apple", 1, "100g", 52, 0.99, "fruit",
            description="Fresh apple - good source of fiber and vitamin C",
        )
    ],
    "dairy": [
        Ingredient(
            "Cheddar Cheese", 1, "100g", 402, 5.49, "dairy",
            description="Aged cheddar cheese - rich in calcium and protein",
        )
    ],
    "seasoning": [
        Ingredient(
            "Salt", 1, "tsp", 0, 0.05, "seasoning",
            description="Table salt - basic flavor enhancer",
        )
    ],
}


def default_calorie_modifiers() -> CalorieModifierTree:
    return CalorieModifierTree.from_dict(DEFAULT_CALORIE_MODIFIERS)


def default_ingredients(category: str) -> list[Ingredient]:
    return list(DEFAULT_INGREDIENTS.get(category.lower(), []))
