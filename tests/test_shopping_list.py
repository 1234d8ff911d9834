import pytest
from pydantic import ValidationError

from grocery_engine.core.exceptions import EmptyIngredientBatchError
from grocery_engine.schemas.grocery_schemas import Category, RawIngredient, RecipeBatch
from grocery_engine.services.scaling import batch_multiplier, calculate_scaling_factor, scale_quantity
from grocery_engine.services.shopping_list import build_shopping_list

CATEGORIES = [
    Category(id="1", name="Produce", order=0),
    Category(id="2", name="Pantry", order=1),
    Category(id="3", name="Other", order=2),
]


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------

def test_scaling_factor_for_scalable_recipe():
    assert calculate_scaling_factor(6, 4, True) == 1.5


def test_scaling_factor_rounds_up_whole_batches():
    assert calculate_scaling_factor(6, 4, False) == 2.0
    assert calculate_scaling_factor(4, 4, False) == 1.0


def test_scaling_factor_requires_positive_base():
    with pytest.raises(ValueError):
        calculate_scaling_factor(4, 0)


def test_scale_quantity():
    assert scale_quantity(1.5, 2) == 3.0
    assert scale_quantity("1/2", 3) == "1.5"
    assert scale_quantity("a pinch", 2) == "a pinch"


def test_batch_multiplier_prefers_servings():
    batch = RecipeBatch(desired_servings=6, base_servings=4, is_scalable=False, servings_multiplier=5)
    assert batch_multiplier(batch) == 2.0
    assert batch_multiplier(RecipeBatch(servings_multiplier=3)) == 3


@pytest.mark.parametrize("servings", [{"desired_servings": 6}, {"base_servings": 4}])
def test_servings_must_be_given_together(servings):
    with pytest.raises(ValidationError, match="must be given together"):
        RecipeBatch(servings_multiplier=2, **servings)


# ---------------------------------------------------------------------------
# build_shopping_list
# ---------------------------------------------------------------------------

def test_builds_categorized_items_across_recipes():
    fajitas = RecipeBatch(
        name="Fajitas",
        servings_multiplier=2,
        ingredients=[
            RawIngredient(name="red bell pepper", quantity=0.5, unit="cup"),
            RawIngredient(name="green bell pepper", quantity=0.5, unit="cup"),
        ],
    )
    bread = RecipeBatch(
        name="Flatbread",
        ingredients=[
            RawIngredient(name="all-purpose flour", quantity=3, unit="cups"),
            RawIngredient(name="exotic spice", quantity=2, unit="tsp"),
        ],
    )

    items = build_shopping_list([fajitas, bread], CATEGORIES)

    assert [(i.name, i.quantity, i.unit, i.category.name) for i in items] == [
        ("bell pepper", 2, "whole", "Produce"),
        ("flour", 360, "g", "Pantry"),
        ("exotic spice", 2, "tsp", "Other"),
    ]
    assert not any(item.checked for item in items)


def test_item_without_category():
    batch = RecipeBatch(ingredients=[RawIngredient(name="zzzz widget", quantity=1)])
    items = build_shopping_list([batch], [])
    assert items[0].category is None
    assert (items[0].name, items[0].quantity, items[0].unit) == ("zzzz widget", 1, "item")


def test_empty_batches_are_rejected():
    with pytest.raises(EmptyIngredientBatchError):
        build_shopping_list([], CATEGORIES)
    with pytest.raises(EmptyIngredientBatchError):
        build_shopping_list([RecipeBatch(name="Empty")], CATEGORIES)
