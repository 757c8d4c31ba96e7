# src/meal_kit/parsers/recipe_parser.py

from collections.abc import Mapping

from .base import ArrayFileParser
from .builders import build_recipe
from .models import Recipe


class RecipeFileParser(ArrayFileParser[Recipe]):
    kind = "recipe"

    def build_record(self, properties: Mapping[str, str]) -> Recipe | None:
        return build_recipe(properties)
