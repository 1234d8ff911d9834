from grocery_engine.data.ingredient_conversions import COLOR_VARIATIONS, CONVERSION_TABLE
from grocery_engine.services.identity_resolver import (
    base_ingredient_name,
    identity_key,
    resolve,
    strip_modifiers,
)


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------

def test_resolves_canonical_name():
    assert resolve("bell pepper").name == "bell pepper"


def test_resolves_variant_ignoring_case_and_whitespace():
    assert resolve("  Red Bell Pepper ").name == "bell pepper"
    assert resolve("all-purpose flour").name == "flour"


def test_resolve_is_exact_only():
    assert resolve("diced red bell peppers") is None
    assert resolve("pepper sauce") is None
    assert resolve("garlic bread") is None


def test_unknown_ingredient_is_unresolved():
    assert resolve("unknown ingredient") is None


# ---------------------------------------------------------------------------
# Name cleanup
# ---------------------------------------------------------------------------

def test_strip_modifiers_removes_whole_words():
    assert strip_modifiers("Fresh Chopped Parsley") == "parsley"
    assert strip_modifiers("dried cranberries") == "cranberries"
    assert strip_modifiers("freshly ground pepper") == "freshly ground pepper"


def test_base_ingredient_name_collapses_colours():
    assert base_ingredient_name("red bell pepper") == "bell pepper"
    assert base_ingredient_name("Green Pepper") == "pepper"
    assert base_ingredient_name("shallot") == "shallot"


def test_identity_key_strips_and_collapses():
    key, entry = identity_key("chopped red bell pepper")
    assert key == "bell pepper"
    assert entry.name == "bell pepper"


def test_identity_key_without_entry_keeps_modifiers():
    assert identity_key("Diced Green Pepper") == ("diced green pepper", None)
    assert identity_key("Exotic  Spice") == ("exotic spice", None)
    assert identity_key("Fresh Basil") == ("fresh basil", None)


def test_identity_key_without_entry_collapses_colours():
    assert identity_key("Green  Pepper") == ("pepper", None)
    assert identity_key("Red Pepper") == ("pepper", None)


def test_identity_key_keeps_name_made_only_of_modifiers():
    assert identity_key("Fresh") == ("fresh", None)


# ---------------------------------------------------------------------------
# Table consistency
# ---------------------------------------------------------------------------

def test_colour_synonyms_agree_with_conversion_variants():
    for base, variations in COLOR_VARIATIONS.items():
        entry = resolve(base)
        if entry is None:
            continue
        for variation in variations:
            assert resolve(variation) is entry, variation


def test_every_variant_groups_under_its_entry():
    for entry in CONVERSION_TABLE:
        for variant in entry.variants:
            assert identity_key(variant) == (entry.name, entry), variant
