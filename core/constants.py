"""
Constants used throughout the people facade
"""

from typing import Any, Dict, List


# Stored document field names
FIELD_ID = "_id"
FIELD_NAME = "name"
FIELD_AGE = "age"
FIELD_FAVORITE_FOODS = "favoriteFoods"
FIELD_EMAIL = "email"

# Operation defaults
DEFAULT_ADDED_FOOD = "hamburger"
DEFAULT_UPDATED_AGE = 20
DEFAULT_CHAINED_FOOD = "burritos"
DEFAULT_CHAINED_LIMIT = 2

# Sample data used by the exercise script
SAMPLE_PERSON: Dict[str, Any] = {
    "name": "John Doe",
    "age": 25,
    "favoriteFoods": ["pizza", "pasta", "salad"],
}

SAMPLE_PEOPLE: List[Dict[str, Any]] = [
    {"name": "Alice", "age": 28, "favoriteFoods": ["sushi", "burritos", "pizza"]},
    {"name": "Bob", "age": 30, "favoriteFoods": ["burritos", "tacos"]},
    {"name": "Charlie", "age": 26, "favoriteFoods": ["hamburger", "burritos"]},
    {"name": "Mary", "age": 35, "favoriteFoods": ["salad", "pasta"]},
]
