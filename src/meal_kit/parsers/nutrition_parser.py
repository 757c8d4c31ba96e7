# src/meal_kit/parsers/nutrition_parser.py

import logging

from .base import DataFileParser
from .builders import build_nutrition_table
from .errors import EmptyContentError
from .models import NutritionTable
from .reader import Shape, top_level
from .splitter import split_sections

logger = logging.getLogger(__name__)


class NutritionFileParser(DataFileParser[NutritionTable]):
    """category -> ingredient -> {protein, fat, carbohydrates, fiber, sugar, sodium}."""

    kind = "nutrition"

    def parse_text(self, text: str) -> NutritionTable:
        if not text.strip():
            raise EmptyContentError("Empty nutrition data")
        shape, body = top_level(text)
        if shape is not Shape.OBJECT:
            logger.warning("Expected a JSON object of nutrition data, got %s", shape.value)
            return NutritionTable()
        table = build_nutrition_table(split_sections(body))
        logger.debug("Nutrition table holds %d ingredients", len(table))
        return table
