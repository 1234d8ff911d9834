"""
Ingredient Identity Resolver

Maps free-text ingredient names onto canonical conversion entries.

Resolution is exact-match only: ingredient names are short, and a partial
match such as "bell pepper" inside "pepper sauce" would corrupt shopping
quantities. The looser substring matching lives in the categorizer.
"""

import logging
import re
from typing import Dict, Optional, Tuple

from ..data.ingredient_conversions import (
    COLOR_VARIATIONS,
    CONVERSION_TABLE,
    PREPARATION_MODIFIERS,
)
from ..schemas.grocery_schemas import ConversionEntry

logger = logging.getLogger(__name__)

_MODIFIER_PATTERN = re.compile(
    r"\b(?:" + "|".join(PREPARATION_MODIFIERS) + r")\b",
    re.IGNORECASE,
)


def _build_identity_index() -> Dict[str, ConversionEntry]:
    index: Dict[str, ConversionEntry] = {}
    # Canonical names take precedence over variants
    for entry in CONVERSION_TABLE:
        index.setdefault(entry.name.lower(), entry)
    for entry in CONVERSION_TABLE:
        for variant in entry.variants:
            index.setdefault(variant.lower(), entry)
    return index


_IDENTITY_INDEX = _build_identity_index()

_SYNONYM_INDEX: Dict[str, str] = {
    variation: base
    for base, variations in COLOR_VARIATIONS.items()
    for variation in variations
}


def normalize_name(name: str) -> str:
    """Lower-case, trim and collapse internal whitespace."""
    return " ".join(name.lower().split())


def strip_modifiers(name: str) -> str:
    """Remove preparation words ("chopped", "fresh", ...) as whole words."""
    return normalize_name(_MODIFIER_PATTERN.sub(" ", name))


def base_ingredient_name(name: str) -> str:
    """Collapse colour/variety synonyms ("red bell pepper" -> "bell pepper")."""
    normalized = normalize_name(name)
    return _SYNONYM_INDEX.get(normalized, normalized)


def resolve(name: str) -> Optional[ConversionEntry]:
    """
    Look up the conversion entry for an ingredient name.

    Args:
        name: Ingredient name; only case and surrounding whitespace are ignored

    Returns:
        The entry whose name or variants equal the name, or None
    """
    return _IDENTITY_INDEX.get(normalize_name(name))


def identity_key(name: str) -> Tuple[str, Optional[ConversionEntry]]:
    """
    Resolve the grouping key for a raw ingredient name.

    Modifiers are stripped and colour synonyms collapsed only to find an
    entry. The key is the canonical entry name when one resolves, otherwise
    the normalized raw name with colour synonyms collapsed, so "fresh basil"
    and "dried basil" stay apart.
    """
    normalized = normalize_name(name)
    stripped = strip_modifiers(normalized) or normalized
    base = base_ingredient_name(stripped)

    entry = resolve(normalized) or resolve(stripped) or resolve(base)
    if entry is None:
        key = base_ingredient_name(normalized)
        logger.debug("No conversion entry for %r, grouping as %r", name, key)
        return key, None
    return entry.name, entry
