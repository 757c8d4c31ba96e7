from .catalog import Catalog, load_catalog
from .defaults import default_calorie_modifiers, default_ingredients
from .settings import CatalogSettings, load_settings

__all__ = [
    "Catalog",
    "CatalogSettings",
    "default_calorie_modifiers",
    "default_ingredients",
    "load_catalog",
    "load_settings",
]
