"""
Pydantic schemas for the grocery engine.
Defines the ingredient, category and shopping item models plus the
request/response bodies of the grocery API.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Enums
# =============================================================================

class ConversionRule(str, Enum):
    """How a resolved ingredient is expressed on the shopping list."""
    WEIGHT = "weight"
    COUNT = "count"
    PASS_THROUGH = "pass_through"


# =============================================================================
# Static conversion data
# =============================================================================

class ConversionEntry(BaseModel):
    """Physical conversion facts for one canonical ingredient."""
    model_config = ConfigDict(frozen=True)

    name: str
    density_grams_per_cup: float = Field(..., gt=0, description="Weight of one cup in grams")
    count_equivalent_grams: Optional[float] = Field(
        default=None, gt=0, description="Weight of one whole item or clove in grams"
    )
    default_unit: str = Field(..., description="Unit shown when converting to a count (e.g. 'whole', 'clove')")
    variants: Tuple[str, ...] = ()
    category: str = "other"
    is_precise: bool = False
    prefer_count: bool = False
    common_forms: Tuple[str, ...] = ()

    @property
    def rule(self) -> ConversionRule:
        """Precision wins over count preference."""
        if self.is_precise:
            return ConversionRule.WEIGHT
        if self.prefer_count and self.count_equivalent_grams:
            return ConversionRule.COUNT
        return ConversionRule.PASS_THROUGH


# =============================================================================
# Input Models
# =============================================================================

class RawIngredient(BaseModel):
    """Ingredient as authored in a recipe."""
    name: str = Field(..., min_length=1, description="Free-text ingredient name (e.g. 'minced garlic')")
    quantity: Union[float, str] = Field(default=1, description="Number or numeric text such as '1/2' or '1 1/2'")
    unit: Optional[str] = Field(default=None, description="Unit of measurement; null means a count")
    notes: Optional[str] = Field(default=None, description="Free-text notes, never used for matching")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return v.strip()

    @field_validator('unit')
    @classmethod
    def validate_unit(cls, v: Optional[str]) -> Optional[str]:
        """Blank units mean no unit."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "minced garlic",
                "quantity": "2",
                "unit": "tbsp",
                "notes": None
            }
        }


class Category(BaseModel):
    """User-defined shopping category."""
    id: Optional[str] = None
    name: str
    order: int = 0


class RecipeBatch(BaseModel):
    """Ingredients of one recipe plus how much of it to shop for."""
    recipe_id: Optional[str] = None
    name: Optional[str] = None
    ingredients: List[RawIngredient] = Field(default_factory=list)
    servings_multiplier: float = Field(default=1.0, gt=0, description="Multiplier applied to every quantity")
    desired_servings: Optional[float] = Field(default=None, gt=0, description="Servings to shop for")
    base_servings: Optional[float] = Field(default=None, gt=0, description="Servings the recipe yields")
    is_scalable: bool = Field(default=True, description="False rounds the multiplier up to whole batches")

    @model_validator(mode="after")
    def validate_servings(self) -> "RecipeBatch":
        """Desired and base servings only make sense together."""
        if (self.desired_servings is None) != (self.base_servings is None):
            raise ValueError("desired_servings and base_servings must be given together")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Chili",
                "desired_servings": 6,
                "base_servings": 4,
                "is_scalable": False,
                "ingredients": [
                    {"name": "diced onion", "quantity": "1/2", "unit": "cup"},
                    {"name": "minced garlic", "quantity": 2, "unit": "tbsp"}
                ]
            }
        }


class CategorizeRequest(BaseModel):
    """Request body for categorizing a single item."""
    item_name: str = Field(..., min_length=1)
    categories: List[Category] = Field(default_factory=list)


class ShoppingListRequest(BaseModel):
    """Request body for building a shopping list from recipes."""
    recipes: List[RecipeBatch]
    categories: List[Category] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "recipes": [
                    {
                        "name": "Fajitas",
                        "servings_multiplier": 2,
                        "ingredients": [
                            {"name": "red bell pepper", "quantity": 0.5, "unit": "cup"},
                            {"name": "green bell pepper", "quantity": 0.5, "unit": "cup"}
                        ]
                    }
                ],
                "categories": [
                    {"id": "c1", "name": "Produce", "order": 0},
                    {"id": "c2", "name": "Other", "order": 1}
                ]
            }
        }


# =============================================================================
# Output Models
# =============================================================================

class StandardizedItem(BaseModel):
    """Standardized quantity and unit for one ingredient or group."""
    name: str
    quantity: int = Field(..., gt=0, description="Always rounded up")
    unit: str


class ShoppingItem(StandardizedItem):
    """Shopping list line ready to be merged into the user's list."""
    category: Optional[Category] = None
    checked: bool = False


class CategorizeResponse(BaseModel):
    category: Optional[Category] = None


class ShoppingListResponse(BaseModel):
    items: List[ShoppingItem]
    count: int
