# src/meal_kit/parsers/modifier_parser.py

import logging

from .base import DataFileParser
from .builders import build_calorie_modifiers
from .models import CalorieModifierTree
from .reader import Shape, top_level
from .splitter import split_sections

logger = logging.getLogger(__name__)


class CalorieModifierFileParser(DataFileParser[CalorieModifierTree]):
    """
    Object with any of the sections ``default``, ``categories``,
    ``subcategories`` and ``ingredients``.
    """

    kind = "calorie_modifier"

    def parse_text(self, text: str) -> CalorieModifierTree:
        shape, body = top_level(text)
        if shape is not Shape.OBJECT:
            logger.warning("Expected a JSON object of calorie modifiers, got %s", shape.value)
            return CalorieModifierTree()
        return build_calorie_modifiers(split_sections(body))
