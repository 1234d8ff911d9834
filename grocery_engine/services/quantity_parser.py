"""
Quantity Parser

Turns recipe quantities ("2", "1/2", "1 1/2", "1½", 0.75) into numbers.
Recipe text is free-form: trailing words are ignored ("2 large" is 2) and
anything unparsable becomes 1 instead of raising.
"""

import logging
import math
import re
import unicodedata
from typing import Optional, Union

logger = logging.getLogger(__name__)

Quantity = Union[int, float, str, None]

DEFAULT_QUANTITY = 1.0

_MIXED_NUMBER = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)")
_SIMPLE_FRACTION = re.compile(r"^(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)")
_DECIMAL = re.compile(r"^\d+(?:\.\d+)?")


def _vulgar_fraction_value(char: str) -> Optional[float]:
    if not unicodedata.name(char, "").startswith("VULGAR FRACTION"):
        return None
    return unicodedata.numeric(char)


def _divide(numerator: float, denominator: float) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator


def try_parse_quantity(raw: Quantity) -> Optional[float]:
    """
    Parse a quantity, returning None when it cannot be read as a number.

    Text with trailing words or a range ("2 large", "2-3", "1 1/2 cups")
    is read up to the end of its leading number.

    Args:
        raw: Number or numeric-looking text

    Returns:
        The numeric value, or None
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw if math.isfinite(raw) else None

    text = str(raw).strip().replace("⁄", "/")
    if not text:
        return None

    # "½", "1½", "1 ½"
    fraction = _vulgar_fraction_value(text[-1])
    if fraction is not None:
        whole = text[:-1].strip()
        if not whole:
            return fraction
        if whole.isdecimal():
            return int(whole) + fraction
        return None

    try:
        value = float(text)
    except ValueError:
        return _leading_number(text)
    return value if math.isfinite(value) else None


def _leading_number(text: str) -> Optional[float]:
    # "1 1/2 cups"
    mixed = _MIXED_NUMBER.match(text)
    if mixed:
        part = _divide(int(mixed.group(2)), int(mixed.group(3)))
        if part is not None:
            return int(mixed.group(1)) + part

    # "1/2 cup"
    simple = _SIMPLE_FRACTION.match(text)
    if simple:
        value = _divide(float(simple.group(1)), float(simple.group(2)))
        if value is not None:
            return value

    # "2-3", "2 large"
    leading = _DECIMAL.match(text)
    if leading:
        logger.debug("Reading %r as its leading number %s", text, leading.group(0))
        return float(leading.group(0))
    return None


def parse_quantity(raw: Quantity) -> float:
    """Parse a quantity, defaulting to 1 when it is unreadable."""
    value = try_parse_quantity(raw)
    if value is None:
        logger.warning("Unparsable quantity %r, defaulting to %s", raw, DEFAULT_QUANTITY)
        return DEFAULT_QUANTITY
    return value
