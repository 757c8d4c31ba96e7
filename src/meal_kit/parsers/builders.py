# src/meal_kit/parsers/builders.py

"""Record Builders.

Each builder reads a ``PropertyMap`` (or ``SectionMap``) without mutating it
and returns a typed record. A missing required field yields ``None`` so the
caller can skip the record; a malformed number raises
``InvalidNumberFormatError``.
"""

import logging
import re
from collections.abc import Mapping

from .errors import InvalidNumberFormatError
from .models import (
    Branch,
    CalorieModifierTree,
    Ingredient,
    NutritionInfo,
    NutritionTable,
    Recipe,
    Scalar,
    ScopeKind,
)
from .properties import parse_flat_object, split_scalar_array
from .reader import Shape, top_level
from .splitter import split_sections, split_top_level_objects

logger = logging.getLogger(__name__)

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")

INGREDIENT_REQUIRED = (
    "name",
    "quantity",
    "unit",
    "caloriesPerUnit",
    "pricePerUnit",
    "category",
)
RECIPE_REQUIRED = (
    "name",
    "flavor",
    "flavorTags",
    "cuisine",
    "prepTime",
    "ingredients",
)
NUTRIENT_FIELDS = ("protein", "fat", "carbohydrates", "fiber", "sugar", "sodium")


def to_float(raw: str, field: str) -> float:
    text = raw.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise InvalidNumberFormatError(field, raw)
    return float(text)


def to_int(raw: str, field: str) -> int:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise InvalidNumberFormatError(field, raw)
    return int(text)


def _missing(properties: Mapping[str, str], required: tuple[str, ...]) -> list[str]:
    return [name for name in required if properties.get(name) is None]


# ---------------------------------------------------------------------------
# Ingredients and recipes
# ---------------------------------------------------------------------------


def build_ingredient(properties: Mapping[str, str]) -> Ingredient | None:
    missing = _missing(properties, INGREDIENT_REQUIRED)
    if missing:
        logger.debug("Skipping ingredient without %s", ", ".join(missing))
        return None

    return Ingredient(
        name=properties["name"],
        quantity=to_float(properties["quantity"], "quantity"),
        unit=properties["unit"],
        calories_per_unit=to_int(properties["caloriesPerUnit"], "caloriesPerUnit"),
        price_per_unit=to_float(properties["pricePerUnit"], "pricePerUnit"),
        category=properties["category"],
        cooking_method=properties.get("cookingMethod") or "raw",
        description=properties.get("description") or "",
    )


def build_ingredient_list(raw: str) -> list[Ingredient]:
    """Build the ingredients of a nested ``[{...}, ...]`` value.

    Entries missing a field are skipped; a malformed number propagates.
    """
    shape, body = top_level(raw)
    if shape is not Shape.ARRAY:
        return []

    ingredients: list[Ingredient] = []
    for member in split_top_level_objects(body):
        ingredient = build_ingredient(parse_flat_object(member))
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients


def build_recipe(properties: Mapping[str, str]) -> Recipe | None:
    missing = _missing(properties, RECIPE_REQUIRED)
    if missing:
        logger.debug("Skipping recipe without %s", ", ".join(missing))
        return None

    return Recipe(
        name=properties["name"].strip(),
        flavor=properties["flavor"].strip(),
        flavor_tags=tuple(split_scalar_array(properties["flavorTags"])),
        cuisine=properties["cuisine"].strip(),
        prep_time=to_int(properties["prepTime"], "prepTime"),
        ingredients=tuple(build_ingredient_list(properties["ingredients"])),
    )


# ---------------------------------------------------------------------------
# Calorie modifiers
# ---------------------------------------------------------------------------


def _method_branch(values: Mapping[str, str]) -> Branch:
    methods = {}
    for method, raw in values.items():
        try:
            methods[method] = Scalar(to_float(raw, method))
        except InvalidNumberFormatError:
            logger.warning("Invalid number format for method %s: %s", method, raw)
    return Branch(methods)


def _scope_branch(raw: str) -> Branch:
    shape, body = top_level(raw)
    if shape is not Shape.OBJECT:
        return Branch()
    return Branch(
        {
            name: _method_branch(parse_flat_object(methods))
            for name, methods in split_sections(body).items()
        }
    )


def build_calorie_modifiers(sections: Mapping[str, str]) -> CalorieModifierTree:
    """
    Build the modifier tree from the top-level sections of the modifier file.

    ``default`` holds method -> multiplier directly and is stored under the
    scope name ``default``; the other sections hold name -> method -> multiplier.
    """
    known = {kind.value for kind in ScopeKind}
    kinds = {}
    for section, raw in sections.items():
        if section == ScopeKind.DEFAULT.value:
            kinds[section] = Branch({"default": _method_branch(parse_flat_object(raw))})
            continue
        if section not in known:
            logger.debug("Keeping unrecognised modifier section: %s", section)
        kinds[section] = _scope_branch(raw)
    return CalorieModifierTree(Branch(kinds))


# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------


def _nutrient(values: Mapping[str, str], field: str, ingredient: str) -> float:
    raw = values.get(field)
    if raw is None:
        return 0.0
    try:
        return to_float(raw, field)
    except InvalidNumberFormatError:
        logger.warning("Error parsing %s for %s: %s", field, ingredient, raw)
        return 0.0


def build_nutrition_info(values: Mapping[str, str], ingredient: str = "") -> NutritionInfo:
    return NutritionInfo(
        **{field: _nutrient(values, field, ingredient) for field in NUTRIENT_FIELDS}
    )


def build_nutrition_table(sections: Mapping[str, str]) -> NutritionTable:
    categories = {}
    for category, raw in sections.items():
        entries = {}
        for ingredient, blob in parse_flat_object(raw).items():
            shape, _ = top_level(blob)
            if shape is not Shape.OBJECT:
                logger.warning(
                    "Skipping nutrition entry %s/%s: not an object", category, ingredient
                )
                continue
            entries[ingredient] = build_nutrition_info(parse_flat_object(blob), ingredient)
        categories[category] = entries
    return NutritionTable(categories)
