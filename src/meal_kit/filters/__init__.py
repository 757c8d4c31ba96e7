from .recipe_filters import (
    CALORIE_RANGES,
    PREP_TIME_RANGES,
    CalorieRangeFilter,
    CuisineFilter,
    PrepTimeFilter,
    RecipeFilter,
    TextSearchFilter,
    apply_filters,
)

__all__ = [
    "CALORIE_RANGES",
    "PREP_TIME_RANGES",
    "CalorieRangeFilter",
    "CuisineFilter",
    "PrepTimeFilter",
    "RecipeFilter",
    "TextSearchFilter",
    "apply_filters",
]
