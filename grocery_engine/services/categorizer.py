"""
Categorization Engine

Places shopping items into the user's own free-text categories.

Matchers run from most to least specific and the first hit wins:
1. exact category name
2. curated overrides for well-known items
3. general grocery keywords
4. item name and category name containing one another
5. a word of the item inside a category name
6. a word of a category name inside the item
7. the user's "Other" category
An item matching none of them stays uncategorized.
"""

import logging
from typing import Callable, List, Optional, Sequence

from ..core.config import settings
from ..data.category_keywords import CATEGORY_MATCH_TERMS, COMMON_KEYWORDS, EXACT_OVERRIDES
from ..schemas.grocery_schemas import Category, ShoppingItem, StandardizedItem

logger = logging.getLogger(__name__)

Matcher = Callable[[str, Sequence[Category]], Optional[Category]]


def _category_for_type(category_type: str, categories: Sequence[Category]) -> Optional[Category]:
    """First user category whose name contains one of the type's match terms."""
    for term in CATEGORY_MATCH_TERMS.get(category_type, [category_type]):
        for category in categories:
            if term in category.name.lower():
                return category
    return None


def _significant_words(text: str) -> List[str]:
    return [word for word in text.split() if len(word) >= settings.min_match_word_length]


def match_exact_name(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for category in categories:
        if name == category.name.strip().lower():
            return category
    return None


def match_curated_override(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for item_name, category_type in EXACT_OVERRIDES.items():
        if item_name in name:
            category = _category_for_type(category_type, categories)
            if category:
                logger.debug("Override %r placed %r in %s", item_name, name, category.name)
                return category
    return None


def match_keyword(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for category_type, keywords in COMMON_KEYWORDS.items():
        for keyword in keywords:
            if keyword in name:
                category = _category_for_type(category_type, categories)
                if category:
                    logger.debug("Keyword %r placed %r in %s", keyword, name, category.name)
                    return category
    return None


def match_substring(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for category in categories:
        category_name = category.name.strip().lower()
        if category_name and (category_name in name or name in category_name):
            return category
    return None


def match_item_word(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for word in _significant_words(name):
        for category in categories:
            if word in category.name.lower():
                return category
    return None


def match_category_word(name: str, categories: Sequence[Category]) -> Optional[Category]:
    for category in categories:
        for word in _significant_words(category.name.lower()):
            if word in name:
                return category
    return None


def match_fallback(name: str, categories: Sequence[Category]) -> Optional[Category]:
    fallback = settings.fallback_category_name.lower()
    for category in categories:
        if fallback in category.name.lower():
            return category
    return None


MATCHERS: Sequence[Matcher] = (
    match_exact_name,
    match_curated_override,
    match_keyword,
    match_substring,
    match_item_word,
    match_category_word,
    match_fallback,
)


def categorize(item_name: str, categories: Sequence[Category]) -> Optional[Category]:
    """
    Find the best user category for an item.

    Args:
        item_name: Shopping item name
        categories: The user's categories, never modified

    Returns:
        The matching category, or None when nothing fits
    """
    name = " ".join(item_name.lower().split())
    if not name or not categories:
        return None

    for matcher in MATCHERS:
        category = matcher(name, categories)
        if category is not None:
            return category

    logger.debug("No category for %r", item_name)
    return None


def categorize_items(
    items: Sequence[StandardizedItem],
    categories: Sequence[Category],
) -> List[ShoppingItem]:
    """Attach a category to each standardized item."""
    return [
        ShoppingItem(
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            category=categorize(item.name, categories),
        )
        for item in items
    ]
