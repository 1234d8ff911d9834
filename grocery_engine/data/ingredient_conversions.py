"""
Static conversion data for shopping-list standardization.

Data Sources:
- Densities: USDA FoodData Central (weight of one cup, chopped where applicable)
- Count weights: USDA typical medium-sized item weights

Garlic is pinned at 5 g per clove and 150 g per cup, so 2 tbsp of minced
garlic comes to 18.75 g and rounds up to 4 cloves.

All tables are built once at import time and never written afterwards.
"""

from typing import Any, Dict, List, Tuple

from ..schemas.grocery_schemas import ConversionEntry

# Type alias for raw ingredient data
IngredientData = Dict[str, Any]

# Cups per unit (volume)
VOLUME_TO_CUPS: Dict[str, float] = {
    "tsp": 1 / 48,
    "teaspoon": 1 / 48,
    "teaspoons": 1 / 48,
    "tbsp": 1 / 16,
    "tablespoon": 1 / 16,
    "tablespoons": 1 / 16,
    "fl oz": 1 / 8,
    "fluid ounce": 1 / 8,
    "fluid ounces": 1 / 8,
    "cup": 1.0,
    "cups": 1.0,
    "pint": 2.0,
    "pints": 2.0,
    "quart": 4.0,
    "quarts": 4.0,
    "gallon": 16.0,
    "gallons": 16.0,
    "ml": 1 / 236.588,
    "l": 1000 / 236.588,
    "liter": 1000 / 236.588,
    "liters": 1000 / 236.588,
}

# Grams per unit (weight)
WEIGHT_TO_GRAMS: Dict[str, float] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "oz": 28.3495,
    "ounce": 28.3495,
    "ounces": 28.3495,
    "lb": 453.592,
    "lbs": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
}

GRAM_UNITS = frozenset({"g", "gram", "grams"})

# Preparation words removed before identity resolution
PREPARATION_MODIFIERS: Tuple[str, ...] = (
    "chopped", "diced", "sliced", "minced", "grated",
    "fresh", "frozen", "canned", "dried",
)


_RAW_CONVERSIONS: Dict[str, IngredientData] = {
    # =========================================================================
    # PRODUCE (count preferred)
    # =========================================================================
    "bell pepper": {
        "density_grams_per_cup": 150,     # 1 cup chopped
        "count_equivalent_grams": 150,    # 1 medium pepper
        "default_unit": "whole",
        "variants": [
            "bell peppers", "red bell pepper", "green bell pepper",
            "yellow bell pepper", "orange bell pepper", "sweet pepper",
            "chopped bell pepper", "diced bell pepper", "sliced bell pepper",
        ],
        "category": "produce",
        "prefer_count": True,
    },
    "onion": {
        "density_grams_per_cup": 160,
        "count_equivalent_grams": 180,
        "default_unit": "whole",
        "variants": [
            "onions", "yellow onion", "white onion", "red onion", "sweet onion",
            "chopped onion", "diced onion", "sliced onion",
        ],
        "category": "produce",
        "prefer_count": True,
    },
    "garlic": {
        "density_grams_per_cup": 150,
        "count_equivalent_grams": 5,      # 1 clove
        "default_unit": "clove",
        "variants": [
            "minced garlic", "chopped garlic", "crushed garlic",
            "garlic clove", "garlic cloves", "cloves garlic",
        ],
        "category": "produce",
        "prefer_count": True,
        "common_forms": ["minced", "crushed", "sliced"],
    },
    "carrot": {
        "density_grams_per_cup": 125,
        "count_equivalent_grams": 80,
        "default_unit": "whole",
        "variants": [
            "carrots", "orange carrot", "purple carrot", "yellow carrot",
            "white carrot", "chopped carrot", "diced carrot", "sliced carrot",
            "grated carrot", "shredded carrot",
        ],
        "category": "produce",
        "prefer_count": True,
    },
    "tomato": {
        "density_grams_per_cup": 180,
        "count_equivalent_grams": 125,
        "default_unit": "whole",
        "variants": [
            "tomatoes", "red tomato", "green tomato", "yellow tomato",
            "roma tomato", "plum tomato", "chopped tomato", "diced tomato",
            "sliced tomato",
        ],
        "category": "produce",
        "prefer_count": True,
    },
    "potato": {
        "density_grams_per_cup": 160,
        "count_equivalent_grams": 200,
        "default_unit": "whole",
        "variants": [
            "potatoes", "red potato", "russet potato", "white potato",
            "yellow potato", "diced potato", "chopped potato", "sliced potato",
        ],
        "category": "produce",
        "prefer_count": True,
    },
    "jalapeno pepper": {
        "density_grams_per_cup": 90,
        "count_equivalent_grams": 15,
        "default_unit": "whole",
        "variants": ["jalapeno", "jalapenos", "chopped jalapeno", "diced jalapeno", "sliced jalapeno"],
        "category": "produce",
        "prefer_count": True,
    },
    "lemon": {
        "density_grams_per_cup": 240,     # 1 cup juice
        "count_equivalent_grams": 100,    # yields 2-3 tbsp juice
        "default_unit": "whole",
        "variants": ["lemons", "lemon juice", "fresh lemon", "juice of lemon", "lemon zest"],
        "category": "produce",
        "prefer_count": True,
        "common_forms": ["juice", "zest"],
    },
    "lime": {
        "density_grams_per_cup": 240,
        "count_equivalent_grams": 60,
        "default_unit": "whole",
        "variants": ["limes", "lime juice", "fresh lime", "juice of lime", "lime zest"],
        "category": "produce",
        "prefer_count": True,
        "common_forms": ["juice", "zest"],
    },
    "celery": {
        "density_grams_per_cup": 100,
        "count_equivalent_grams": 40,     # 1 medium stalk
        "default_unit": "stalk",
        "variants": ["celery stalk", "celery stalks", "celery rib", "chopped celery", "diced celery"],
        "category": "produce",
        "prefer_count": True,
    },
    "cucumber": {
        "density_grams_per_cup": 120,
        "count_equivalent_grams": 300,
        "default_unit": "whole",
        "variants": ["cucumbers", "english cucumber", "sliced cucumber", "diced cucumber"],
        "category": "produce",
        "prefer_count": True,
    },

    # =========================================================================
    # BAKING (always by weight)
    # =========================================================================
    "flour": {
        "density_grams_per_cup": 120,
        "default_unit": "g",
        "variants": ["all-purpose flour", "all purpose flour", "white flour", "ap flour", "plain flour"],
        "category": "baking",
        "is_precise": True,
    },
    "sugar": {
        "density_grams_per_cup": 200,
        "default_unit": "g",
        "variants": ["granulated sugar", "white sugar", "caster sugar"],
        "category": "baking",
        "is_precise": True,
    },
    "brown sugar": {
        "density_grams_per_cup": 220,
        "default_unit": "g",
        "variants": ["light brown sugar", "dark brown sugar", "packed brown sugar"],
        "category": "baking",
        "is_precise": True,
    },
    "powdered sugar": {
        "density_grams_per_cup": 120,
        "default_unit": "g",
        "variants": ["confectioners sugar", "confectioners' sugar", "icing sugar"],
        "category": "baking",
        "is_precise": True,
    },
    "cocoa powder": {
        "density_grams_per_cup": 85,
        "default_unit": "g",
        "variants": ["unsweetened cocoa powder", "cocoa"],
        "category": "baking",
        "is_precise": True,
    },

    # =========================================================================
    # PANTRY & DAIRY (weight when measured by volume)
    # =========================================================================
    "butter": {
        "density_grams_per_cup": 227,
        "default_unit": "g",
        "variants": ["unsalted butter", "salted butter", "melted butter"],
        "category": "dairy",
    },
    "rice": {
        "density_grams_per_cup": 185,
        "default_unit": "g",
        "variants": ["white rice", "long grain rice", "jasmine rice", "basmati rice", "uncooked rice"],
        "category": "grains",
    },
}


CONVERSION_TABLE: Tuple[ConversionEntry, ...] = tuple(
    ConversionEntry(name=name, **data) for name, data in _RAW_CONVERSIONS.items()
)


# Colour and variety synonyms collapsed before grouping. Bases that have a
# conversion entry must list only names that entry also lists as variants.
COLOR_VARIATIONS: Dict[str, List[str]] = {
    "bell pepper": ["green bell pepper", "red bell pepper", "yellow bell pepper", "orange bell pepper"],
    "onion": ["red onion", "yellow onion", "white onion", "sweet onion"],
    "tomato": ["red tomato", "green tomato", "yellow tomato", "roma tomato"],
    "potato": ["red potato", "white potato", "yellow potato", "russet potato"],
    "carrot": ["orange carrot", "purple carrot", "yellow carrot", "white carrot"],
    "apple": ["red apple", "green apple", "yellow apple", "pink apple"],
    "cabbage": ["green cabbage", "red cabbage", "savoy cabbage", "napa cabbage"],
    "lettuce": [
        "iceberg lettuce", "romaine lettuce", "butter lettuce",
        "red leaf lettuce", "green leaf lettuce",
    ],
    "grape": ["red grape", "green grape", "black grape", "purple grape"],
    "pepper": ["green pepper", "red pepper", "yellow pepper", "orange pepper"],
    "chili": ["green chili", "red chili", "yellow chili", "orange chili"],
}
