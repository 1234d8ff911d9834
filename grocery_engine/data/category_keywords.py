"""
Keyword tables used to place shopping items into user categories.

User categories are free text, so every table here maps onto a category
*type* (produce, dairy, ...) and CATEGORY_MATCH_TERMS turns that type into
fragments searched for in the user's category names.
"""

from typing import Dict, List

# Fragments searched for (in order) inside user category names
CATEGORY_MATCH_TERMS: Dict[str, List[str]] = {
    "produce": ["produce", "vegetable", "fruit", "fresh"],
    "dairy": ["dairy", "milk", "cheese", "yogurt"],
    "meat": ["meat", "protein", "seafood", "poultry", "fish", "beef", "chicken", "eggs"],
    "bakery": ["bakery", "bread", "baked"],
    "packaged": ["packaged", "package", "pack", "pantry", "goods", "canned"],
    "spices": ["spice", "season", "spices", "seasoning", "spices and seasonings"],
    "sauces": ["sauce", "condiment", "dressing", "seasoning", "spice", "spices"],
    "frozen": ["frozen", "freezer", "cold"],
    "snacks": ["snack", "chip", "cracker", "nut"],
    "beverages": ["beverage", "drink", "water", "juice", "soda"],
}

# High-confidence matches for well-known items, checked before the general
# keywords. A hit is either the whole item name or a substring of it.
EXACT_OVERRIDES: Dict[str, str] = {
    # Pasta & grains
    "spaghetti": "packaged",
    "pasta": "packaged",
    "fettuccine": "packaged",
    "linguine": "packaged",
    "penne": "packaged",
    "rigatoni": "packaged",
    "lasagna": "packaged",
    "macaroni": "packaged",
    "orzo": "packaged",
    "noodles": "packaged",

    # Dairy & related
    "coconut milk": "packaged",
    "coconut cream": "packaged",
    "peanut butter": "packaged",
    "pecorino": "dairy",
    "pecorino romano": "dairy",
    "parmesan": "dairy",
    "cheese": "dairy",
    "cheddar": "dairy",
    "mozzarella": "dairy",
    "feta": "dairy",
    "gouda": "dairy",
    "brie": "dairy",
    "goat cheese": "dairy",
    "cream cheese": "dairy",
    "ricotta": "dairy",
    "romano": "dairy",

    # Spices & condiments
    "curry paste": "spices",
    "green curry paste": "spices",
    "red curry paste": "spices",
    "yellow curry paste": "spices",
    "palm sugar": "spices",
    "brown sugar": "spices",
    "granulated sugar": "spices",
    "black pepper": "spices",
    "peppercorn": "spices",
    "garlic powder": "spices",
    "onion powder": "spices",

    # Sauces
    "fish sauce": "sauces",
    "soy sauce": "sauces",
    "hoisin sauce": "sauces",
    "oyster sauce": "sauces",

    # Canned/packaged
    "bamboo shoots": "packaged",
    "water chestnuts": "packaged",
    "broth": "packaged",
    "stock": "packaged",

    # Meats
    "oxtail": "meat",
    "oxtails": "meat",
    "pancetta": "meat",
    "guanciale": "meat",
    "bacon": "meat",
    "prosciutto": "meat",
    "salami": "meat",
}

# General grocery keywords by category type, in priority order
COMMON_KEYWORDS: Dict[str, List[str]] = {
    "produce": [
        "vegetable", "fruit", "fresh", "produce", "pepper", "tomato", "onion",
        "lettuce", "cucumber", "carrot", "potato", "apple", "banana", "orange",
        "lemon", "lime", "herb", "basil", "cilantro", "parsley", "mint", "garlic",
        "shoots", "sprouts", "greens", "kale", "spinach", "berries", "avocado",
        "ginger", "mushroom", "eggplant", "zucchini", "squash", "cabbage", "celery",
    ],
    "dairy": [
        "milk", "cheese", "yogurt", "butter", "cream", "egg", "dairy",
        "yoghurt", "creamer", "buttermilk", "curd", "sour cream", "whipping cream",
        "pecorino", "parmesan", "romano", "mozzarella", "cheddar", "feta", "gouda",
        "brie", "ricotta", "cottage cheese", "blue cheese", "provolone", "monterey jack",
        "swiss cheese", "cream cheese", "goat cheese", "mascarpone", "havarti",
    ],
    "meat": [
        "chicken", "beef", "pork", "turkey", "lamb", "meat", "steak", "drumstick",
        "thigh", "breast", "wing", "ground", "mince", "sausage", "bacon", "ham",
        "seafood", "salmon", "tuna", "shrimp", "prawn", "crab", "lobster", "tilapia",
        "cod", "egg", "eggs", "oxtail", "pancetta", "guanciale", "prosciutto",
        "salami", "pepperoni", "chorizo", "duck", "veal", "liver", "tripe", "tongue",
        "brisket", "ribs", "chop", "roast", "fillet", "venison", "rabbit",
    ],
    "bakery": [
        "bread", "roll", "bagel", "pastry", "baked", "dough", "cake", "cookie",
        "muffin", "pie", "bun", "croissant", "loaf", "toast", "baguette",
    ],
    "packaged": [
        "canned", "jar", "dried", "pasta", "rice", "bean", "lentil", "grain", "cereal",
        "flour", "sugar", "oil", "vinegar", "sauce", "condiment", "packet", "box",
        "noodle", "mix", "soup", "broth", "stock", "coconut milk", "coconut cream",
        "canned tomato", "canned bean", "chips", "crackers", "snack", "packaged",
        "bamboo shoots", "water chestnut", "heart of palm", "artichoke heart",
        "spaghetti", "linguine", "fettuccine", "penne", "rigatoni", "macaroni",
        "lasagna", "orzo", "couscous", "quinoa", "barley", "oats", "tortilla",
        "wrap", "pita", "can", "boxed", "bottled", "tuna", "sardines", "anchovies",
    ],
    "spices": [
        "spice", "seasoning", "herb", "powder", "salt", "pepper", "curry", "cumin",
        "cinnamon", "nutmeg", "paprika", "oregano", "basil", "thyme", "rosemary",
        "chili", "garlic powder", "onion powder", "ginger powder", "bay leaf",
        "marinade", "rub", "extract", "vanilla", "chile", "cajun",
        "five spice", "za'atar", "curry paste", "masala", "cardamom",
        "star anise", "turmeric", "saffron", "mustard", "horseradish",
    ],
    "sauces": [
        "sauce", "ketchup", "mustard", "mayonnaise", "dressing", "vinaigrette",
        "soy sauce", "hot sauce", "sriracha", "hoisin", "fish sauce", "oyster sauce",
        "barbecue", "bbq", "teriyaki", "worcestershire", "chili sauce", "tabasco",
        "aioli", "salsa", "hummus", "tahini", "pesto", "relish", "maple syrup",
    ],
    "frozen": [
        "frozen", "ice", "popsicle", "ice cream", "sorbet", "gelato", "frozen yogurt",
        "frozen dinner", "frozen pizza", "frozen vegetables", "frozen fruit",
    ],
    "snacks": [
        "chip", "cracker", "snack", "nut", "candy", "chocolate", "popcorn", "pretzel",
        "granola", "energy bar", "protein bar", "trail mix", "dried fruit", "jerky",
    ],
    "beverages": [
        "drink", "juice", "water", "soda", "coffee", "tea", "beer", "wine", "alcohol",
        "liquor", "whiskey", "vodka", "rum", "tequila", "cocktail", "cider", "kombucha",
        "mineral water", "sparkling water", "soft drink", "energy drink", "milk", "smoothie",
    ],
}
