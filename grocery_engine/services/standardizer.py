"""
Standardization Engine

Decides whether a shopping quantity is shown as a weight, a count or the
original unit, and computes the rounded quantity.

Quantities are always rounded up: running short on an ingredient is worse
than buying slightly more.
"""

import logging
import math
from typing import Optional, Union

from ..core.config import settings
from ..schemas.grocery_schemas import ConversionEntry, ConversionRule, StandardizedItem
from .identity_resolver import identity_key
from .quantity_parser import Quantity, parse_quantity
from .unit_conversion import cups_of, grams_of, is_gram_unit, is_volume_unit, is_weight_unit

logger = logging.getLogger(__name__)

# Decimal places kept before rounding up, so float noise such as
# 40.000000000001 does not buy an extra gram.
ROUNDING_PRECISION = 6


def round_up(value: float) -> int:
    """Ceiling of a quantity, never below 1."""
    return max(1, math.ceil(round(value, ROUNDING_PRECISION)))


class IngredientStandardizer:
    """
    Converts quantities into shopping units using the conversion table.

    The shape of the result depends on the entry's rule:
    - weight: always grams (baking staples)
    - count: whole items or cloves
    - pass_through: grams when measured by volume, otherwise unchanged
    """

    def standardize(
        self,
        quantity: Quantity,
        unit: Optional[str],
        identity: Union[ConversionEntry, str],
    ) -> StandardizedItem:
        """
        Standardize one quantity.

        Args:
            quantity: Number or numeric text
            unit: Unit as authored, None for a count
            identity: A resolved entry, or the raw ingredient name to resolve

        Returns:
            StandardizedItem with a rounded-up quantity
        """
        if isinstance(identity, ConversionEntry):
            return self.standardize_resolved(quantity, unit, identity, identity.name)

        _, entry = identity_key(identity)
        return self.standardize_resolved(quantity, unit, entry, identity)

    def standardize_resolved(
        self,
        quantity: Quantity,
        unit: Optional[str],
        entry: Optional[ConversionEntry],
        name: str,
    ) -> StandardizedItem:
        amount = parse_quantity(quantity)

        if entry is None:
            return self._pass_through(name, amount, unit)

        rule = entry.rule
        if rule is ConversionRule.WEIGHT:
            return self._as_weight(entry, amount, unit)
        if rule is ConversionRule.COUNT:
            return self._as_count(entry, amount, unit)
        return self._as_default(entry, amount, unit)

    def weight_in_grams(
        self,
        entry: ConversionEntry,
        amount: float,
        unit: Optional[str],
    ) -> Optional[float]:
        """
        Weight of an amount in grams, or None when the unit says nothing
        about weight or volume.

        A missing unit is taken as cups.
        """
        if is_gram_unit(unit):
            return amount
        if is_weight_unit(unit):
            return grams_of(amount, unit)
        if unit is None or is_volume_unit(unit):
            return cups_of(amount, unit) * entry.density_grams_per_cup
        return None

    def _pass_through(self, name: str, amount: float, unit: Optional[str]) -> StandardizedItem:
        return StandardizedItem(
            name=name,
            quantity=round_up(amount),
            unit=unit or settings.default_count_unit,
        )

    def _as_weight(self, entry: ConversionEntry, amount: float, unit: Optional[str]) -> StandardizedItem:
        grams = self.weight_in_grams(entry, amount, unit)
        if grams is None:
            logger.debug("Unit %r has no weight for %s, passing through", unit, entry.name)
            return self._pass_through(entry.name, amount, unit)
        return StandardizedItem(name=entry.name, quantity=round_up(grams), unit="g")

    def _as_count(self, entry: ConversionEntry, amount: float, unit: Optional[str]) -> StandardizedItem:
        # Without a volume or weight unit the number is already a count
        if not (is_volume_unit(unit) or is_weight_unit(unit)):
            return StandardizedItem(name=entry.name, quantity=round_up(amount), unit=entry.default_unit)

        grams = self.weight_in_grams(entry, amount, unit)
        count = grams / entry.count_equivalent_grams
        return StandardizedItem(name=entry.name, quantity=round_up(count), unit=entry.default_unit)

    def _as_default(self, entry: ConversionEntry, amount: float, unit: Optional[str]) -> StandardizedItem:
        if is_volume_unit(unit) or is_weight_unit(unit):
            grams = self.weight_in_grams(entry, amount, unit)
            return StandardizedItem(name=entry.name, quantity=round_up(grams), unit="g")
        return StandardizedItem(
            name=entry.name,
            quantity=round_up(amount),
            unit=unit or entry.default_unit,
        )


# Singleton instance for easy import
ingredient_standardizer = IngredientStandardizer()


def standardize(
    quantity: Quantity,
    unit: Optional[str],
    identity: Union[ConversionEntry, str],
) -> StandardizedItem:
    """Module-level shortcut for IngredientStandardizer.standardize."""
    return ingredient_standardizer.standardize(quantity, unit, identity)
