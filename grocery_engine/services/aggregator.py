"""
Aggregation Engine

Groups recipe ingredients by resolved identity, sums the scaled quantities
and standardizes each group once.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.exceptions import EmptyIngredientBatchError
from ..schemas.grocery_schemas import ConversionEntry, RawIngredient, StandardizedItem
from .identity_resolver import identity_key
from .quantity_parser import parse_quantity
from .standardizer import IngredientStandardizer, ingredient_standardizer

logger = logging.getLogger(__name__)

ScaledIngredient = Tuple[RawIngredient, float]


class IngredientAggregator:
    """
    Consolidates ingredients from many recipes into one line per ingredient.

    Groups keep first-seen order. The unit of the first member represents
    the whole group; members in other units are summed as-is, without
    converting them against each other first.
    """

    def __init__(self, standardizer: Optional[IngredientStandardizer] = None):
        self.standardizer = standardizer or ingredient_standardizer

    def aggregate(self, items: Sequence[ScaledIngredient]) -> List[StandardizedItem]:
        """
        Aggregate (ingredient, serving multiplier) pairs.

        Args:
            items: Ingredients paired with the multiplier of their recipe

        Returns:
            One StandardizedItem per resolved ingredient

        Raises:
            EmptyIngredientBatchError: if items is empty
        """
        if not items:
            raise EmptyIngredientBatchError()

        groups: Dict[str, List[ScaledIngredient]] = {}
        identities: Dict[str, Optional[ConversionEntry]] = {}

        for ingredient, multiplier in items:
            key, entry = identity_key(ingredient.name)
            groups.setdefault(key, []).append((ingredient, multiplier))
            identities.setdefault(key, entry)

        results = []
        for key, members in groups.items():
            total = sum(parse_quantity(ingredient.quantity) * multiplier for ingredient, multiplier in members)
            representative_unit = members[0][0].unit

            if len({ingredient.unit for ingredient, _ in members}) > 1:
                logger.debug("Mixed units for %s, using %r", key, representative_unit)

            results.append(
                self.standardizer.standardize_resolved(total, representative_unit, identities[key], key)
            )

        logger.debug("Aggregated %d ingredients into %d items", len(items), len(results))
        return results


# Singleton instance for easy import
ingredient_aggregator = IngredientAggregator()


def aggregate(items: Sequence[ScaledIngredient]) -> List[StandardizedItem]:
    """Module-level shortcut for IngredientAggregator.aggregate."""
    return ingredient_aggregator.aggregate(items)
