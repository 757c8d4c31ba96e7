import logging

import pytest

from meal_kit.parsers.builders import (
    build_calorie_modifiers,
    build_ingredient,
    build_nutrition_info,
    build_nutrition_table,
    build_recipe,
    to_float,
    to_int,
)
from meal_kit.parsers.errors import InvalidNumberFormatError
from meal_kit.parsers.models import Ingredient
from meal_kit.parsers.splitter import split_sections


@pytest.fixture
def chicken_properties() -> dict[str, str]:
    return {
        "name": " Chicken Breast ",
        "quantity": "200",
        "unit": "g",
        "caloriesPerUnit": "165",
        "pricePerUnit": "4.99",
        "category": "Meat",
    }


class TestNumbers:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("4.99", 4.99), ("-1", -1.0), ("1e3", 1000.0), (".5", 0.5), (" 200 ", 200.0)],
    )
    def test_to_float_accepts(self, raw: str, expected: float) -> None:
        assert to_float(raw, "quantity") == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["nan", "1_000", "", "0x10", "abc", "1.2.3"])
    def test_to_float_rejects(self, raw: str) -> None:
        with pytest.raises(InvalidNumberFormatError):
            to_float(raw, "quantity")

    def test_to_int_rejects_fractions(self) -> None:
        with pytest.raises(InvalidNumberFormatError) as exc_info:
            to_int("165.5", "caloriesPerUnit")

        assert exc_info.value.field == "caloriesPerUnit"
        assert exc_info.value.raw == "165.5"

    def test_invalid_number_is_a_value_error(self) -> None:
        assert issubclass(InvalidNumberFormatError, ValueError)


class TestBuildIngredient:
    def test_builds_with_defaults(self, chicken_properties: dict[str, str]) -> None:
        ingredient = build_ingredient(chicken_properties)

        assert ingredient == Ingredient(
            name="Chicken Breast",
            quantity=200.0,
            unit="g",
            calories_per_unit=165,
            price_per_unit=4.99,
            category="meat",
            cooking_method="raw",
            description="",
        )

    def test_optional_fields(self, chicken_properties: dict[str, str]) -> None:
        chicken_properties["cookingMethod"] = "Grilled"
        chicken_properties["description"] = "Lean protein"

        ingredient = build_ingredient(chicken_properties)

        assert ingredient is not None
        assert ingredient.cooking_method == "grilled"
        assert ingredient.description == "Lean protein"

    @pytest.mark.parametrize(
        "field",
        ["name", "quantity", "unit", "caloriesPerUnit", "pricePerUnit", "category"],
    )
    def test_missing_required_field_gives_none(
        self, chicken_properties: dict[str, str], field: str
    ) -> None:
        del chicken_properties[field]

        assert build_ingredient(chicken_properties) is None

    def test_does_not_mutate_input(self, chicken_properties: dict[str, str]) -> None:
        before = dict(chicken_properties)
        build_ingredient(chicken_properties)

        assert chicken_properties == before

    def test_non_numeric_quantity_raises(self, chicken_properties: dict[str, str]) -> None:
        chicken_properties["quantity"] = "lots"

        with pytest.raises(InvalidNumberFormatError, match="quantity"):
            build_ingredient(chicken_properties)

    def test_fractional_calories_raise(self, chicken_properties: dict[str, str]) -> None:
        chicken_properties["caloriesPerUnit"] = "165.5"

        with pytest.raises(InvalidNumberFormatError):
            build_ingredient(chicken_properties)

    def test_non_positive_quantity_raises(self, chicken_properties: dict[str, str]) -> None:
        chicken_properties["quantity"] = "0"

        with pytest.raises(ValueError, match="Quantity must be positive"):
            build_ingredient(chicken_properties)


class TestBuildRecipe:
    @pytest.fixture
    def recipe_properties(self) -> dict[str, str]:
        return {
            "name": "Grilled Chicken Salad",
            "flavor": "Savory",
            "flavorTags": '["healthy", "quick", "protein-rich"]',
            "cuisine": "American",
            "prepTime": "25",
            "ingredients": (
                '[{"name": "Chicken", "quantity": 200, "unit": "g", '
                '"caloriesPerUnit": 165, "pricePerUnit": 4.99, "category": "meat", '
                '"cookingMethod": "Grilled"}, {"name": "Broken"}]'
            ),
        }

    def test_builds_recipe_with_nested_ingredients(
        self, recipe_properties: dict[str, str]
    ) -> None:
        recipe = build_recipe(recipe_properties)

        assert recipe is not None
        assert recipe.flavor_tags == ("healthy", "quick", "protein-rich")
        assert recipe.prep_time == 25
        assert [i.name for i in recipe.ingredients] == ["Chicken"]
        assert recipe.ingredients[0].cooking_method == "grilled"

    def test_empty_tags_and_ingredients(self, recipe_properties: dict[str, str]) -> None:
        recipe_properties["flavorTags"] = "[]"
        recipe_properties["ingredients"] = "[]"

        recipe = build_recipe(recipe_properties)

        assert recipe is not None
        assert recipe.flavor_tags == ()
        assert recipe.ingredients == ()

    def test_missing_field_gives_none(self, recipe_properties: dict[str, str]) -> None:
        del recipe_properties["flavorTags"]

        assert build_recipe(recipe_properties) is None

    def test_bad_nested_number_raises(self, recipe_properties: dict[str, str]) -> None:
        recipe_properties["ingredients"] = (
            '[{"name": "Chicken", "quantity": "lots", "unit": "g", '
            '"caloriesPerUnit": 165, "pricePerUnit": 4.99, "category": "meat"}]'
        )

        with pytest.raises(InvalidNumberFormatError):
            build_recipe(recipe_properties)

    def test_bad_prep_time_raises(self, recipe_properties: dict[str, str]) -> None:
        recipe_properties["prepTime"] = "soon"

        with pytest.raises(InvalidNumberFormatError, match="prepTime"):
            build_recipe(recipe_properties)


class TestBuildCalorieModifiers:
    def test_builds_every_scope(self) -> None:
        sections = split_sections(
            '"default": {"raw": 1.0, "fried": 1.5}, '
            '"categories": {"meat": {"grilled": 1.3}}, '
            '"subcategories": {"fish": {"grilled": 1.1}}, '
            '"ingredients": {"salmon": {"grilled": 1.2}}'
        )

        tree = build_calorie_modifiers(sections)

        assert tree.to_dict() == {
            "default": {"default": {"raw": 1.0, "fried": 1.5}},
            "categories": {"meat": {"grilled": 1.3}},
            "subcategories": {"fish": {"grilled": 1.1}},
            "ingredients": {"salmon": {"grilled": 1.2}},
        }

    def test_bad_multiplier_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        sections = split_sections('"categories": {"meat": {"grilled": 1.3, "fried": "lots"}}')

        with caplog.at_level(logging.WARNING):
            tree = build_calorie_modifiers(sections)

        assert tree.multiplier("categories", "meat", "grilled") == pytest.approx(1.3)
        assert tree.multiplier("categories", "meat", "fried") is None
        assert "Invalid number format for method fried" in caplog.text

    def test_unknown_section_is_kept(self) -> None:
        tree = build_calorie_modifiers(split_sections('"extras": {"x": {"y": 2}}'))

        assert tree.to_dict() == {"extras": {"x": {"y": 2.0}}}
        assert tree.multiplier("extras", "x", "y") == pytest.approx(2.0)

    def test_empty_sections(self) -> None:
        assert build_calorie_modifiers({}).is_empty()


class TestBuildNutrition:
    def test_missing_and_bad_nutrients_are_zero(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            info = build_nutrition_info({"protein": "2.8", "fat": "abc"}, "Broccoli")

        assert info.protein == pytest.approx(2.8)
        assert info.fat == 0.0
        assert info.sodium == 0.0
        assert "Error parsing fat for Broccoli" in caplog.text

    def test_table_skips_non_object_entries(self) -> None:
        sections = split_sections(
            '"vegetable": {"Broccoli": {"protein": 2.8, "sodium": 33}, "Bogus": 5}'
        )

        table = build_nutrition_table(sections)

        assert len(table) == 1
        broccoli = table.get("vegetable", "Broccoli")
        assert broccoli is not None
        assert broccoli.sodium == pytest.approx(33.0)
        assert table.get("vegetable", "Bogus") is None
