# src/meal_kit/parsers/models.py

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, TypeAlias


@dataclass(frozen=True)
class Ingredient:
    name: str
    quantity: float
    unit: str
    calories_per_unit: int
    price_per_unit: float
    category: str
    cooking_method: str = "raw"
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "unit", self.unit.strip())
        object.__setattr__(self, "category", self.category.strip().lower())
        object.__setattr__(self, "cooking_method", self.cooking_method.strip().lower())

        if not self.name:
            raise ValueError("Ingredient name cannot be empty")
        if self.quantity <= 0:
            raise ValueError("Quantity must be positive")
        if not self.unit:
            raise ValueError("Unit cannot be empty")
        if self.calories_per_unit < 0:
            raise ValueError("Calories cannot be negative")
        if self.price_per_unit < 0:
            raise ValueError("Price cannot be negative")
        if not self.category:
            raise ValueError("Category cannot be empty")
        if not self.cooking_method:
            raise ValueError("Cooking method cannot be empty")

    @property
    def total_price(self) -> float:
        return self.price_per_unit * self.quantity

    def with_quantity(self, quantity: float) -> "Ingredient":
        return replace(self, quantity=quantity)

    def with_cooking_method(self, cooking_method: str) -> "Ingredient":
        return replace(self, cooking_method=cooking_method)

    def __str__(self) -> str:
        return f"{self.quantity:.2f} {self.unit} {self.name} ({self.cooking_method})"


@dataclass(frozen=True)
class Recipe:
    name: str
    flavor: str
    flavor_tags: tuple[str, ...]
    cuisine: str
    prep_time: int  # minutes
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Recipe name cannot be empty")
        if not self.flavor.strip():
            raise ValueError("Flavor cannot be empty")
        if not self.cuisine.strip():
            raise ValueError("Cuisine cannot be empty")
        if self.prep_time <= 0:
            raise ValueError("Preparation time must be positive")


@dataclass(frozen=True)
class NutritionInfo:
    """Macro- and micronutrients; sodium in milligrams, the rest in grams."""

    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0

    @classmethod
    def zero(cls) -> "NutritionInfo":
        return cls()

    @property
    def calories(self) -> float:
        return self.protein * 4 + self.carbohydrates * 4 + self.fat * 9

    def add(self, other: "NutritionInfo") -> "NutritionInfo":
        return NutritionInfo(
            protein=self.protein + other.protein,
            fat=self.fat + other.fat,
            carbohydrates=self.carbohydrates + other.carbohydrates,
            fiber=self.fiber + other.fiber,
            sugar=self.sugar + other.sugar,
            sodium=self.sodium + other.sodium,
        )

    def multiply(self, factor: float) -> "NutritionInfo":
        return NutritionInfo(
            protein=self.protein * factor,
            fat=self.fat * factor,
            carbohydrates=self.carbohydrates * factor,
            fiber=self.fiber * factor,
            sugar=self.sugar * factor,
            sodium=self.sodium * factor,
        )


# ---------------------------------------------------------------------------
# Calorie modifiers
# ---------------------------------------------------------------------------


class ScopeKind(str, Enum):
    """Specificity level a calorie multiplier is declared at."""

    DEFAULT = "default"
    CATEGORIES = "categories"
    SUBCATEGORIES = "subcategories"
    INGREDIENTS = "ingredients"


@dataclass(frozen=True)
class Scalar:
    value: float


@dataclass(frozen=True)
class Branch:
    children: Mapping[str, "ModifierNode"] = field(default_factory=dict)

    def get(self, key: str) -> "ModifierNode | None":
        return self.children.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


ModifierNode: TypeAlias = Scalar | Branch


def _to_plain(node: ModifierNode) -> Any:
    if isinstance(node, Scalar):
        return node.value
    return {key: _to_plain(child) for key, child in node.children.items()}


@dataclass(frozen=True)
class CalorieModifierTree:
    """scope kind -> scope name -> cooking method -> multiplier."""

    root: Branch = field(default_factory=Branch)

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Mapping[str, float]]]):
        return cls(
            Branch(
                {
                    kind: Branch(
                        {
                            name: Branch(
                                {
                                    method: Scalar(float(value))
                                    for method, value in methods.items()
                                }
                            )
                            for name, methods in scopes.items()
                        }
                    )
                    for kind, scopes in data.items()
                }
            )
        )

    def scope(self, kind: ScopeKind | str, name: str) -> Branch | None:
        """Any section name works, including ones outside ``ScopeKind``."""
        key = kind.value if isinstance(kind, ScopeKind) else kind
        scopes = self.root.get(key)
        if not isinstance(scopes, Branch):
            return None
        methods = scopes.get(name)
        return methods if isinstance(methods, Branch) else None

    def multiplier(self, kind: ScopeKind | str, name: str, method: str) -> float | None:
        methods = self.scope(kind, name)
        if methods is None:
            return None
        leaf = methods.get(method)
        return leaf.value if isinstance(leaf, Scalar) else None

    def is_empty(self) -> bool:
        return len(self.root) == 0

    def to_dict(self) -> dict[str, Any]:
        return _to_plain(self.root)


# ---------------------------------------------------------------------------
# Nutrition table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NutritionTable:
    """category -> ingredient name -> nutrients per 100 g."""

    categories: Mapping[str, Mapping[str, NutritionInfo]] = field(
        default_factory=dict
    )

    def get(self, category: str, name: str) -> NutritionInfo | None:
        return self.categories.get(category, {}).get(name)

    def find(self, ingredient_name: str) -> NutritionInfo | None:
        """
        Loose lookup used by the nutrition calculator:
        - case-insensitive
        - either name may contain the other
        - first hit in category order wins
        """
        wanted = ingredient_name.strip().lower()
        if not wanted:
            return None
        for entries in self.categories.values():
            for name, info in entries.items():
                key = name.lower()
                if key in wanted or wanted in key:
                    return info
        return None

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.categories.values())
