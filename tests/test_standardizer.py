import pytest

from grocery_engine.schemas.grocery_schemas import ConversionRule, RawIngredient
from grocery_engine.services.identity_resolver import resolve
from grocery_engine.services.shopping_list import standardize_ingredient
from grocery_engine.services.standardizer import round_up, standardize


def _standardize(name, quantity, unit=None):
    item = standardize_ingredient(RawIngredient(name=name, quantity=quantity, unit=unit))
    return item.name, item.quantity, item.unit


# ---------------------------------------------------------------------------
# Weight (precise ingredients)
# ---------------------------------------------------------------------------

def test_flour_cups_convert_to_grams():
    assert _standardize("all-purpose flour", 3, "cups") == ("flour", 360, "g")


def test_sugar_tablespoons_convert_to_grams():
    assert _standardize("granulated sugar", 2, "tbsp") == ("sugar", 25, "g")


def test_grams_pass_through_for_precise_ingredient():
    assert _standardize("flour", 500, "g") == ("flour", 500, "g")


def test_other_weight_units_convert_to_grams():
    assert _standardize("flour", 1, "lb") == ("flour", 454, "g")


def test_precise_ingredient_without_unit_is_cups():
    assert _standardize("flour", 1) == ("flour", 120, "g")


def test_precise_ingredient_with_unknown_unit_passes_through():
    assert _standardize("flour", 2, "pinch") == ("flour", 2, "pinch")


def test_float_noise_does_not_round_up():
    assert _standardize("flour", "1/3", "cup") == ("flour", 40, "g")


# ---------------------------------------------------------------------------
# Count (count-preferred ingredients)
# ---------------------------------------------------------------------------

def test_garlic_tablespoons_convert_to_cloves():
    # 2 tbsp = 1/8 cup = 18.75 g at 150 g/cup; 18.75 / 5 g per clove -> 4
    assert _standardize("minced garlic", 2, "tbsp") == ("garlic", 4, "clove")


def test_half_cup_chopped_bell_pepper_is_one_pepper():
    assert _standardize("chopped bell pepper", 0.5, "cup") == ("bell pepper", 1, "whole")


def test_string_fraction_quantity():
    assert _standardize("diced onion", "1/4", "cup") == ("onion", 1, "whole")


def test_garlic_grams_convert_to_cloves():
    assert _standardize("garlic", 12, "g") == ("garlic", 3, "clove")


def test_bare_number_is_already_a_count():
    assert _standardize("onion", 3) == ("onion", 3, "whole")
    assert _standardize("red onion", "2", "pieces") == ("onion", 2, "whole")
    assert _standardize("lemon", 1.5, "whole") == ("lemon", 2, "whole")


# ---------------------------------------------------------------------------
# Neither precise nor count-preferred
# ---------------------------------------------------------------------------

def test_volume_converts_to_grams():
    assert _standardize("butter", 0.5, "cup") == ("butter", 114, "g")
    assert _standardize("rice", 1, "cup") == ("rice", 185, "g")


def test_non_volume_unit_is_kept():
    assert _standardize("butter", 2, "sticks") == ("butter", 2, "sticks")


def test_missing_unit_uses_default_unit():
    assert _standardize("butter", 3) == ("butter", 3, "g")


# ---------------------------------------------------------------------------
# Unknown ingredients
# ---------------------------------------------------------------------------

def test_unknown_ingredient_passes_through_unchanged():
    assert _standardize("exotic spice", 2, "tsp") == ("exotic spice", 2, "tsp")


def test_unknown_ingredient_without_unit_is_an_item():
    assert _standardize("saffron threads", "1/2") == ("saffron threads", 1, "item")


def test_unknown_ingredient_fraction_rounds_up():
    assert _standardize("Exotic Spice", 0.3, "cup") == ("Exotic Spice", 1, "cup")


# ---------------------------------------------------------------------------
# Rounding & direct calls
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "name, quantity, unit",
    [
        ("exotic spice", 0, "tsp"),
        ("garlic", 0.01, "tsp"),
        ("flour", "a little", "cup"),
        ("lime", 0.2, "tbsp"),
        ("carrot", 2.5, None),
    ],
)
def test_quantity_is_always_a_positive_integer(name, quantity, unit):
    _, result, _ = _standardize(name, quantity, unit)
    assert isinstance(result, int)
    assert result >= 1


def test_round_up():
    assert round_up(18.75 / 5) == 4
    assert round_up(40.000000000001) == 40
    assert round_up(0) == 1


def test_standardize_with_resolved_entry():
    item = standardize(2, "cups", resolve("flour"))
    assert (item.name, item.quantity, item.unit) == ("flour", 240, "g")


def test_conversion_rules():
    assert resolve("flour").rule is ConversionRule.WEIGHT
    assert resolve("garlic").rule is ConversionRule.COUNT
    assert resolve("butter").rule is ConversionRule.PASS_THROUGH
