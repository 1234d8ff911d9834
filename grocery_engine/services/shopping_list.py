"""
Shopping List Builder

Runs a batch of recipes through aggregation and categorization to produce
shopping items ready to be stored by the caller.
"""

import logging
from typing import List, Sequence

from ..schemas.grocery_schemas import Category, RawIngredient, RecipeBatch, ShoppingItem, StandardizedItem
from .aggregator import ingredient_aggregator
from .categorizer import categorize_items
from .scaling import batch_multiplier
from .standardizer import ingredient_standardizer

logger = logging.getLogger(__name__)


def standardize_ingredient(ingredient: RawIngredient) -> StandardizedItem:
    """Standardize a single recipe ingredient."""
    return ingredient_standardizer.standardize(ingredient.quantity, ingredient.unit, ingredient.name)


def build_shopping_list(
    batches: Sequence[RecipeBatch],
    categories: Sequence[Category],
) -> List[ShoppingItem]:
    """
    Build categorized shopping items from one or more recipes.

    Duplicates across recipes are merged into a single line.

    Raises:
        EmptyIngredientBatchError: if the batches hold no ingredients
    """
    scaled = [
        (ingredient, batch_multiplier(batch))
        for batch in batches
        for ingredient in batch.ingredients
    ]
    logger.info("Building shopping list from %d recipes, %d ingredients", len(batches), len(scaled))

    items = ingredient_aggregator.aggregate(scaled)
    return categorize_items(items, categories)
