"""
Serving scaling for recipes shared across several meals.
"""

import logging
import math
from typing import Union

from ..schemas.grocery_schemas import RecipeBatch
from .quantity_parser import try_parse_quantity

logger = logging.getLogger(__name__)


def calculate_scaling_factor(
    desired_servings: float,
    base_servings: float,
    is_scalable: bool = True,
) -> float:
    """
    Multiplier that turns a recipe's yield into the desired servings.

    Recipes that cannot be scaled are made in whole batches, so their
    factor is rounded up.
    """
    if base_servings <= 0:
        raise ValueError("base_servings must be positive")
    factor = desired_servings / base_servings
    return factor if is_scalable else float(math.ceil(factor))


def scale_quantity(quantity: Union[int, float, str], factor: float) -> Union[float, str]:
    """Scale a quantity; text that is not a number is returned unchanged."""
    if isinstance(quantity, (int, float)) and not isinstance(quantity, bool):
        return quantity * factor

    value = try_parse_quantity(quantity)
    if value is None:
        logger.debug("Could not scale %r, returning original", quantity)
        return quantity
    return f"{value * factor:g}"


def batch_multiplier(batch: RecipeBatch) -> float:
    """Serving multiplier of a batch, derived from servings when both are given."""
    if batch.desired_servings is not None and batch.base_servings is not None:
        return calculate_scaling_factor(batch.desired_servings, batch.base_servings, batch.is_scalable)
    return batch.servings_multiplier
