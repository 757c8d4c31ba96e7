import json
import logging
import re
from pathlib import Path

import pytest

from meal_kit.observability import InMemoryMetricsHook, names
from meal_kit.parsers import (
    CalorieModifierFileParser,
    EmptyContentError,
    IngredientFileParser,
    NutritionFileParser,
    RecipeFileParser,
)


def _ingredient(index: int, **overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "name": f"Ingredient {index}",
        "quantity": 100.0 + index,
        "unit": "g",
        "caloriesPerUnit": 10 * index,
        "pricePerUnit": 1.25,
        "category": "vegetable",
        "cookingMethod": "steamed",
        "description": f'Item {index}, labelled "fresh"',
    }
    data.update(overrides)
    return data


@pytest.fixture
def write(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class TestIngredientFileParser:
    @pytest.mark.parametrize("indent", [None, 2])
    def test_round_trips_every_record(self, write, indent: int | None) -> None:
        records = [_ingredient(i) for i in range(1, 6)]
        path = write("vegetable.json", json.dumps(records, indent=indent))

        ingredients = IngredientFileParser().parse(path)

        assert len(ingredients) == 5
        for ingredient, record in zip(ingredients, records):
            assert ingredient.name == record["name"]
            assert ingredient.quantity == pytest.approx(record["quantity"])
            assert ingredient.calories_per_unit == record["caloriesPerUnit"]
            assert ingredient.description == record["description"]

    def test_bad_record_is_isolated(
        self, write, caplog: pytest.LogCaptureFixture
    ) -> None:
        records = [_ingredient(1), _ingredient(2, quantity="lots"), _ingredient(3)]
        path = write("vegetable.json", json.dumps(records))
        hook = InMemoryMetricsHook()

        with caplog.at_level(logging.WARNING):
            ingredients = IngredientFileParser(hook).parse(path)

        assert [i.name for i in ingredients] == ["Ingredient 1", "Ingredient 3"]
        assert "Error parsing ingredient" in caplog.text
        assert hook.count(names.RECORDS_LOADED_TOTAL, {"kind": "ingredient"}) == 2
        assert hook.count(names.RECORDS_SKIPPED_TOTAL, {"kind": "ingredient"}) == 1
        assert len(hook.latencies[names.PARSE_DURATION]) == 1

    def test_record_missing_category_is_skipped(self, write) -> None:
        record = _ingredient(1)
        del record["category"]
        path = write("vegetable.json", json.dumps([record, _ingredient(2)]))

        ingredients = IngredientFileParser().parse(path)

        assert [i.name for i in ingredients] == ["Ingredient 2"]

    def test_trailing_comma_record_is_skipped(self, write) -> None:
        path = write("meat.json", '[{"name": "Bad JSON",}]')

        assert IngredientFileParser().parse(path) == []

    def test_empty_array(self, write) -> None:
        assert IngredientFileParser().parse(write("meat.json", "[]")) == []

    def test_object_instead_of_array(self, write) -> None:
        assert IngredientFileParser().parse(write("meat.json", "{}")) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "nonexistent.json"

        with pytest.raises(IOError, match=re.escape(str(path))):
            IngredientFileParser().parse(path)

    def test_empty_file(self, write) -> None:
        with pytest.raises(EmptyContentError):
            IngredientFileParser().parse(write("meat.json", ""))


class TestRecipeFileParser:
    def test_parses_recipe_with_ingredients(self, write) -> None:
        recipe = {
            "name": "Grilled Chicken Salad",
            "flavor": "Savory",
            "flavorTags": ["healthy", "quick", "protein-rich"],
            "cuisine": "American",
            "prepTime": 25,
            "ingredients": [
                _ingredient(1, name="Chicken Breast", category="meat", cookingMethod="grilled"),
                _ingredient(2, name="Lettuce"),
            ],
        }
        path = write("recipes.json", json.dumps([recipe], indent=2))

        recipes = RecipeFileParser().parse(path)

        assert len(recipes) == 1
        parsed = recipes[0]
        assert parsed.name == "Grilled Chicken Salad"
        assert parsed.flavor_tags == ("healthy", "quick", "protein-rich")
        assert parsed.prep_time == 25
        assert [i.name for i in parsed.ingredients] == ["Chicken Breast", "Lettuce"]
        assert parsed.ingredients[0].cooking_method == "grilled"

    def test_recipe_with_bad_ingredient_number_is_dropped(self, write) -> None:
        good = {
            "name": "Apple Slices",
            "flavor": "Sweet",
            "flavorTags": [],
            "cuisine": "American",
            "prepTime": 5,
            "ingredients": [_ingredient(1, name="Apple", category="fruit")],
        }
        bad = dict(good, name="Broken", ingredients=[_ingredient(2, caloriesPerUnit="x")])
        path = write("recipes.json", json.dumps([bad, good]))

        recipes = RecipeFileParser().parse(path)

        assert [r.name for r in recipes] == ["Apple Slices"]
        assert recipes[0].flavor_tags == ()


class TestCalorieModifierFileParser:
    def test_parses_sections(self, write) -> None:
        path = write(
            "CalorieModifier.json",
            json.dumps(
                {
                    "default": {"raw": 1.0, "cooked": 1.1},
                    "categories": {"meat": {"grilled": 1.1, "fried": 1.3}},
                },
                indent=2,
            ),
        )

        tree = CalorieModifierFileParser().parse(path)

        assert tree.multiplier("default", "default", "cooked") == pytest.approx(1.1)
        assert tree.multiplier("categories", "meat", "fried") == pytest.approx(1.3)

    def test_trailing_comma_is_tolerated(self, write) -> None:
        path = write("CalorieModifier.json", '{"categories": {"meat": {"raw": 1.0,}}}')

        tree = CalorieModifierFileParser().parse(path)

        assert tree.multiplier("categories", "meat", "raw") == pytest.approx(1.0)

    def test_empty_object(self, write) -> None:
        assert CalorieModifierFileParser().parse(write("m.json", "{}")).is_empty()

    def test_array_gives_empty_tree(self, write) -> None:
        assert CalorieModifierFileParser().parse(write("m.json", "[]")).is_empty()


class TestNutritionFileParser:
    def test_parses_categories(self, write) -> None:
        path = write(
            "micro_nutrition.json",
            '{"meat": {"Chicken Breast": {"protein": 31, "fat": 3.6, '
            '"carbohydrates": 0, "fiber": 0, "sugar": 0, "sodium": 74}}}',
        )

        table = NutritionFileParser().parse(path)

        info = table.get("meat", "Chicken Breast")
        assert info is not None
        assert info.protein == pytest.approx(31.0)
        assert info.sodium == pytest.approx(74.0)
        assert info.calories == pytest.approx(156.4)

    def test_empty_object(self, write) -> None:
        assert len(NutritionFileParser().parse(write("n.json", "{}"))) == 0

    def test_whitespace_only_file_raises(self, write) -> None:
        with pytest.raises(EmptyContentError):
            NutritionFileParser().parse(write("n.json", "  \n\t\n"))
