# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CalorieModifierFileParser,
    CalorieModifierTree,
    EmptyContentError,
    Ingredient,
    IngredientFileParser,
    InvalidNumberFormatError,
    NutritionFileParser,
    NutritionInfo,
    NutritionTable,
    Recipe,
    RecipeFileParser,
    ScopeKind,
    parse_flat_object,
    read_text,
    split_sections,
    split_top_level_objects,
)

# Catalog
from .catalog import Catalog, CatalogSettings, load_catalog, load_settings

# Nutrition
from .nutrition import (
    NutritionCalculator,
    PriceCalculator,
    ShoppingCart,
    UserProfile,
    calorie_multiplier,
    summarize_user,
)

# Filters
from .filters import (
    CalorieRangeFilter,
    CuisineFilter,
    PrepTimeFilter,
    TextSearchFilter,
    apply_filters,
)

__all__ = [
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CalorieModifierFileParser",
    "CalorieModifierTree",
    "EmptyContentError",
    "Ingredient",
    "IngredientFileParser",
    "InvalidNumberFormatError",
    "NutritionFileParser",
    "NutritionInfo",
    "NutritionTable",
    "Recipe",
    "RecipeFileParser",
    "ScopeKind",
    "parse_flat_object",
    "read_text",
    "split_sections",
    "split_top_level_objects",
    # Catalog
    "Catalog",
    "CatalogSettings",
    "load_catalog",
    "load_settings",
    # Nutrition
    "NutritionCalculator",
    "PriceCalculator",
    "ShoppingCart",
    "UserProfile",
    "calorie_multiplier",
    "summarize_user",
    # Filters
    "CalorieRangeFilter",
    "CuisineFilter",
    "PrepTimeFilter",
    "TextSearchFilter",
    "apply_filters",
]
