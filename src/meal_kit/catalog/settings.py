# src/meal_kit/catalog/settings.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from meal_kit.nutrition.pricing import DEFAULT_SALES_TAX_RATE

logger = logging.getLogger(__name__)

DEFAULT_INGREDIENT_FILES = {
    "meat": "meat.json",
    "vegetable": "vegetable.json",
    "fruit": "fruit.json",
    "dairy": "dairy.json",
    "seasoning": "seasoning.json",
}


class CatalogSettings(BaseModel):
    """Where the catalog data files live.

    Immutable once loaded. File names are relative to ``data_dir``.
    """

    data_dir: Path
    ingredient_files: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_INGREDIENT_FILES)
    )
    recipes_file: str = "recipes.json"
    calorie_modifiers_file: str = "CalorieModifier.json"
    nutrition_file: str = "micro_nutrition.json"
    sales_tax_rate: float = Field(default=DEFAULT_SALES_TAX_RATE, ge=0)

    class Config:
        extra = "forbid"
        frozen = True

    def path(self, file_name: str) -> Path:
        return self.data_dir / file_name


def load_settings(file_path: str | Path) -> CatalogSettings:
    """
    Load settings from a YAML file.

    A relative ``data_dir`` is resolved against the YAML file's directory.
    """
    file_path = Path(file_path)
    logger.info("Loading catalog settings from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}

    settings = CatalogSettings(**data)
    if not settings.data_dir.is_absolute():
        settings = settings.model_copy(
            update={"data_dir": file_path.parent / settings.data_dir}
        )
    return settings
