# src/meal_kit/parsers/ingredient_parser.py

from collections.abc import Mapping

from .base import ArrayFileParser
from .builders import build_ingredient
from .models import Ingredient


class IngredientFileParser(ArrayFileParser[Ingredient]):
    """``[{"name": ..., "quantity": ..., ...}, ...]`` -> ingredients."""

    kind = "ingredient"

    def build_record(self, properties: Mapping[str, str]) -> Ingredient | None:
        return build_ingredient(properties)
