"""
Unit conversion helpers over the static volume and weight tables.
"""

import re
from typing import Optional

from ..data.ingredient_conversions import GRAM_UNITS, VOLUME_TO_CUPS, WEIGHT_TO_GRAMS


def normalize_unit(unit: Optional[str]) -> Optional[str]:
    """Lower-case, trim, collapse whitespace and drop abbreviation dots ("fl. oz." -> "fl oz")."""
    if unit is None:
        return None
    normalized = re.sub(r"\s+", " ", unit.lower().replace(".", " ")).strip()
    return normalized or None


def is_volume_unit(unit: Optional[str]) -> bool:
    return normalize_unit(unit) in VOLUME_TO_CUPS


def is_weight_unit(unit: Optional[str]) -> bool:
    return normalize_unit(unit) in WEIGHT_TO_GRAMS


def is_gram_unit(unit: Optional[str]) -> bool:
    return normalize_unit(unit) in GRAM_UNITS


def cups_of(quantity: float, unit: Optional[str]) -> float:
    """
    Convert a volume to cups.

    A missing unit is taken as already being in cups; an unrecognised unit
    leaves the quantity unchanged.
    """
    normalized = normalize_unit(unit)
    if normalized is None:
        return quantity
    multiplier = VOLUME_TO_CUPS.get(normalized)
    if multiplier is None:
        return quantity
    return quantity * multiplier


def grams_of(quantity: float, unit: Optional[str]) -> Optional[float]:
    """Convert a weight to grams, or None when the unit is not a weight."""
    multiplier = WEIGHT_TO_GRAMS.get(normalize_unit(unit) or "")
    if multiplier is None:
        return None
    return quantity * multiplier
