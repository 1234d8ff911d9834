"""
Grocery API Endpoints

Provides endpoints for:
- Standardizing a single recipe ingredient
- Categorizing an item into the user's categories
- Building a consolidated shopping list from several recipes
"""

import logging

from fastapi import APIRouter, HTTPException

from ...core.exceptions import EmptyIngredientBatchError
from ...schemas.grocery_schemas import (
    CategorizeRequest,
    CategorizeResponse,
    RawIngredient,
    ShoppingListRequest,
    ShoppingListResponse,
    StandardizedItem,
)
from ...services.categorizer import categorize
from ...services.shopping_list import build_shopping_list, standardize_ingredient

router = APIRouter(prefix="/grocery", tags=["Grocery"])
logger = logging.getLogger(__name__)


@router.post(
    "/standardize",
    response_model=StandardizedItem,
    summary="Standardize an ingredient",
    description="""
    Convert one recipe ingredient into a shopping quantity.

    Baking staples come back in grams, produce as whole items or cloves,
    and unknown ingredients pass through with their quantity rounded up.
    """
)
async def standardize_item(ingredient: RawIngredient):
    """Standardize a single ingredient."""
    try:
        return standardize_ingredient(ingredient)
    except Exception as e:
        logger.exception("Failed standardizing %r", ingredient.name)
        raise HTTPException(status_code=500, detail=f"Error standardizing ingredient: {str(e)}")


@router.post(
    "/categorize",
    response_model=CategorizeResponse,
    summary="Categorize an item",
    description="Find the best of the supplied user categories for an item name. Returns null when none fits."
)
async def categorize_item(request: CategorizeRequest):
    """Categorize a single item."""
    try:
        return CategorizeResponse(category=categorize(request.item_name, request.categories))
    except Exception as e:
        logger.exception("Failed categorizing %r", request.item_name)
        raise HTTPException(status_code=500, detail=f"Error categorizing item: {str(e)}")


@router.post(
    "/shopping-list",
    response_model=ShoppingListResponse,
    summary="Build a shopping list",
    description="""
    Merge the ingredients of several recipes into one categorized shopping list.

    This endpoint:
    1. Scales each recipe by its serving multiplier
    2. Groups ingredients that resolve to the same item (e.g. red and green bell pepper)
    3. Standardizes each group into grams, counts or its original unit
    4. Assigns each item to one of the supplied categories

    Nothing is stored; the caller merges the result into its own list.
    """
)
async def create_shopping_list(request: ShoppingListRequest):
    """Build a consolidated shopping list."""
    try:
        items = build_shopping_list(request.recipes, request.categories)
        return ShoppingListResponse(items=items, count=len(items))
    except EmptyIngredientBatchError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Failed building shopping list")
        raise HTTPException(status_code=500, detail=f"Error building shopping list: {str(e)}")


# Health check for this router
@router.get("/health")
async def health_check():
    """Health check for the grocery service."""
    return {"status": "healthy", "service": "grocery-engine"}
