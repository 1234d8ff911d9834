import pytest

from grocery_engine.core.exceptions import EmptyIngredientBatchError
from grocery_engine.schemas.grocery_schemas import RawIngredient
from grocery_engine.services.aggregator import IngredientAggregator, aggregate


def _ing(name, quantity, unit=None):
    return RawIngredient(name=name, quantity=quantity, unit=unit)


def _as_tuples(items):
    return [(item.name, item.quantity, item.unit) for item in items]


def test_colour_variants_collapse_into_one_item():
    result = aggregate([
        (_ing("red bell pepper", 0.5, "cup"), 1),
        (_ing("green bell pepper", 0.5, "cup"), 1),
    ])
    assert _as_tuples(result) == [("bell pepper", 1, "whole")]


def test_modifiers_are_stripped_before_grouping():
    result = aggregate([
        (_ing("chopped bell pepper", 0.5, "cup"), 1),
        (_ing("sliced bell pepper", 0.5, "cup"), 1),
    ])
    assert _as_tuples(result) == [("bell pepper", 1, "whole")]


def test_serving_multiplier_is_applied_before_summing():
    result = aggregate([
        (_ing("onion", "1/2", "cup"), 1),
        (_ing("diced onion", 1, "cup"), 2),
    ])
    # 2.5 cups * 160 g = 400 g / 180 g per onion
    assert _as_tuples(result) == [("onion", 3, "whole")]


def test_garlic_scaled_by_multiplier():
    result = aggregate([(_ing("minced garlic", 2, "tbsp"), 2)])
    assert _as_tuples(result) == [("garlic", 8, "clove")]


def test_first_seen_unit_represents_the_group():
    result = aggregate([
        (_ing("flour", 1, "cup"), 1),
        (_ing("all-purpose flour", 2, "tbsp"), 1),
    ])
    # Mixed units are summed as-is: 3 "cups"
    assert _as_tuples(result) == [("flour", 360, "g")]


def test_unknown_ingredients_group_by_normalized_name():
    result = aggregate([
        (_ing("Exotic Spice", 1, "tsp"), 1),
        (_ing("exotic spice", "1/2", "tsp"), 1),
    ])
    assert _as_tuples(result) == [("exotic spice", 2, "tsp")]


def test_fresh_and_dried_forms_of_unknown_ingredient_stay_separate():
    result = aggregate([
        (_ing("fresh basil", 1, "cup"), 1),
        (_ing("dried basil", 1, "tsp"), 1),
        (_ing("Fresh  Basil", 0.5, "cup"), 1),
    ])
    assert _as_tuples(result) == [("fresh basil", 2, "cup"), ("dried basil", 1, "tsp")]


def test_mixed_ingredients_keep_first_seen_order():
    result = aggregate([
        (_ing("chopped onion", 1, "cup"), 1),
        (_ing("minced garlic", 2, "tbsp"), 1),
        (_ing("all-purpose flour", 2, "cups"), 1),
        (_ing("diced onion", 1, "cup"), 1),
    ])
    assert _as_tuples(result) == [
        ("onion", 2, "whole"),
        ("garlic", 4, "clove"),
        ("flour", 240, "g"),
    ]


def test_empty_input_is_rejected():
    with pytest.raises(EmptyIngredientBatchError):
        aggregate([])


def test_empty_input_error_is_a_value_error():
    with pytest.raises(ValueError, match="empty input"):
        IngredientAggregator().aggregate([])
