from .calculator import NutritionCalculator, quantity_in_grams
from .metabolism import (
    UserProfile,
    UserSummary,
    calculate_bmr,
    calculate_tdee,
    summarize_user,
)
from .modifiers import (
    calorie_multiplier,
    modified_calories_per_unit,
    subcategory_of,
    total_calories,
)
from .pricing import CartLine, CartSummary, PriceCalculator, ShoppingCart

__all__ = [
    "NutritionCalculator",
    "quantity_in_grams",
    "calorie_multiplier",
    "modified_calories_per_unit",
    "subcategory_of",
    "total_calories",
    "PriceCalculator",
    "ShoppingCart",
    "CartLine",
    "CartSummary",
    "UserProfile",
    "UserSummary",
    "calculate_bmr",
    "calculate_tdee",
    "summarize_user",
]
