"""
Built-in calorie lookup table.

Keys are lowercase keywords matched as substrings of a food label,
values are approximate kcal per 100g. Lookup walks the table in
declaration order and stops at the first hit, so longer keywords that
contain a shorter one ("eggplant" / "egg") must come first.
"""

from types import MappingProxyType

CALORIE_TABLE = MappingProxyType({
    # Vegetables
    "eggplant": 25,
    "broccoli": 34,
    "carrot": 41,

    # Fruits
    "apple": 52,
    "banana": 89,

    # Grains, proteins
    "rice": 130,
    "chicken": 165,
    "beef": 250,
    "salmon": 208,

    # More vegetables
    "potato": 77,
    "tomato": 18,
    "cucumber": 15,
    "spinach": 23,
    "lettuce": 15,

    # More fruits
    "orange": 47,
    "grape": 67,

    # Bakery, pasta, dairy
    "bread": 265,
    "pasta": 131,
    "egg": 155,
    "milk": 42,
    "yogurt": 59,
    "cheese": 402,
})

DEFAULT_CALORIES = 100
