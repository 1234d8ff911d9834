"""
Services module for the grocery engine.
Contains quantity parsing, identity resolution, standardization,
aggregation and categorization.
"""

from .aggregator import IngredientAggregator, aggregate
from .categorizer import categorize, categorize_items
from .identity_resolver import identity_key, resolve
from .quantity_parser import parse_quantity
from .scaling import calculate_scaling_factor, scale_quantity
from .shopping_list import build_shopping_list, standardize_ingredient
from .standardizer import IngredientStandardizer, standardize
from .unit_conversion import cups_of

__all__ = [
    "IngredientAggregator",
    "IngredientStandardizer",
    "aggregate",
    "build_shopping_list",
    "calculate_scaling_factor",
    "categorize",
    "categorize_items",
    "cups_of",
    "identity_key",
    "parse_quantity",
    "resolve",
    "scale_quantity",
    "standardize",
    "standardize_ingredient",
]
