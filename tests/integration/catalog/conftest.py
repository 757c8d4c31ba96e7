import json
from pathlib import Path

import pytest

INGREDIENTS = {
    "meat": [
        {
            "name": "Chicken Breast",
            "quantity": 1,
            "unit": "g",
            "caloriesPerUnit": 165,
            "pricePerUnit": 4.99,
            "category": "meat",
            "cookingMethod": "grilled",
        },
        {
            "name": "Salmon",
            "quantity": 1,
            "unit": "g",
            "caloriesPerUnit": 208,
            "pricePerUnit": 9.99,
            "category": "meat",
        },
    ],
    "vegetable": [
        {
            "name": "Broccoli",
            "quantity": 1,
            "unit": "g",
            "caloriesPerUnit": 34,
            "pricePerUnit": 1.99,
            "category": "vegetable",
            "cookingMethod": "steamed",
        }
    ],
    "fruit": [],
    "dairy": [],
    "seasoning": [],
}

RECIPES = [
    {
        "name": "Chicken and Broccoli",
        "flavor": "Savory",
        "flavorTags": ["healthy", "high-protein"],
        "cuisine": "American",
        "prepTime": 30,
        "ingredients": [
            dict(INGREDIENTS["meat"][0], quantity=200),
            dict(INGREDIENTS["vegetable"][0], quantity=150),
        ],
    }
]

CALORIE_MODIFIERS = {
    "default": {"raw": 1.0, "grilled": 1.2},
    "subcategories": {"fish": {"grilled": 1.1}},
    "ingredients": {"salmon": {"grilled": 1.25}},
}

NUTRITION = {
    "meat": {"Chicken Breast": {"protein": 31, "fat": 3.6, "carbohydrates": 0}},
    "vegetable": {"Broccoli": {"protein": 2.8, "fat": 0.4, "carbohydrates": 7}},
}


def write_catalog(data_dir: Path) -> None:
    """Writes one file per catalog component, pretty-printed like the shipped data."""
    for category, records in INGREDIENTS.items():
        (data_dir / f"{category}.json").write_text(json.dumps(records, indent=2))
    (data_dir / "recipes.json").write_text(json.dumps(RECIPES, indent=2))
    (data_dir / "CalorieModifier.json").write_text(json.dumps(CALORIE_MODIFIERS, indent=2))
    (data_dir / "micro_nutrition.json").write_text(json.dumps(NUTRITION, indent=2))


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    write_catalog(tmp_path)
    return tmp_path
