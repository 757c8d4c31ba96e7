# src/meal_kit/parsers/__init__.py

"""Lenient JSON data-file parsing for meal-kit.

Text flows through four stages:

    read_text / top_level      Value Reader
    split_top_level_objects,
    split_sections             Structural Splitter
    parse_flat_object          Property Extractor
    build_*                    Record Builders

The grammar is the one the data files actually use, not RFC 8259. Structural
problems shrink the result instead of raising.

Example:
    >>> from meal_kit.parsers import IngredientFileParser
    >>> ingredients = IngredientFileParser().parse("data/meat.json")
"""

from .base import ArrayFileParser, DataFileParser
from .builders import (
    build_calorie_modifiers,
    build_ingredient,
    build_nutrition_info,
    build_nutrition_table,
    build_recipe,
    to_float,
    to_int,
)
from .errors import EmptyContentError, InvalidNumberFormatError
from .ingredient_parser import IngredientFileParser
from .modifier_parser import CalorieModifierFileParser
from .models import (
    Branch,
    CalorieModifierTree,
    Ingredient,
    ModifierNode,
    NutritionInfo,
    NutritionTable,
    Recipe,
    Scalar,
    ScopeKind,
)
from .nutrition_parser import NutritionFileParser
from .properties import PropertyMap, parse_flat_object, split_scalar_array, unquote
from .reader import Shape, read_text, top_level
from .recipe_parser import RecipeFileParser
from .scanner import Scanner
from .splitter import SectionMap, split_sections, split_top_level_objects

__all__ = [
    # Stages
    "read_text",
    "top_level",
    "Shape",
    "Scanner",
    "split_top_level_objects",
    "split_sections",
    "parse_flat_object",
    "split_scalar_array",
    "unquote",
    "PropertyMap",
    "SectionMap",
    # Builders
    "build_ingredient",
    "build_recipe",
    "build_calorie_modifiers",
    "build_nutrition_info",
    "build_nutrition_table",
    "to_float",
    "to_int",
    # File parsers
    "DataFileParser",
    "ArrayFileParser",
    "IngredientFileParser",
    "RecipeFileParser",
    "CalorieModifierFileParser",
    "NutritionFileParser",
    # Records
    "Ingredient",
    "Recipe",
    "NutritionInfo",
    "NutritionTable",
    "CalorieModifierTree",
    "ModifierNode",
    "Scalar",
    "Branch",
    "ScopeKind",
    # Errors
    "EmptyContentError",
    "InvalidNumberFormatError",
]
