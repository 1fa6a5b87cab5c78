"""Recipe service connectors."""

from recipe_search.connectors.base import BaseConnector, RecipeServiceError
from recipe_search.connectors.mealdb_connector import MealDBConnector

__all__ = [
    "BaseConnector",
    "RecipeServiceError",
    "MealDBConnector",
]
