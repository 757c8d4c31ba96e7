# src/meal_kit/observability/names.py

"""Standard metric names for meal-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters (labelled by record kind)
RECORDS_LOADED_TOTAL = "records_loaded_total"
RECORDS_SKIPPED_TOTAL = "records_skipped_total"


# ============================================================================
# Catalog Metrics
# ============================================================================

# Duration
CATALOG_LOAD_DURATION = "catalog_load_duration"

# Counters (labelled by component)
CATALOG_FALLBACKS_TOTAL = "catalog_fallbacks_total"

# Gauges
CATALOG_RECIPES = "catalog_recipes"
CATALOG_INGREDIENTS = "catalog_ingredients"
