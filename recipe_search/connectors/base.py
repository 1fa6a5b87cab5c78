"""
Base connector abstract class for recipe service integrations.

This module defines the abstract base class that recipe connectors implement.
It keeps the search executor independent of any one recipe API: the executor
only needs a list of RecipeSummary objects or a RecipeServiceError.

All connectors must:
- Implement the source attribute (e.g., "mealdb")
- Provide a search_by_ingredient method that normalizes results into RecipeSummary
- Raise RecipeServiceError for any transport or parsing fault
"""

from abc import ABC, abstractmethod
from typing import List

from recipe_search.models import RecipeSummary


class RecipeServiceError(RuntimeError):
    """
    Exception raised when the recipe service cannot be queried.

    This covers:
    - Network failures (DNS, connection refused, timeouts)
    - Non-2xx HTTP responses
    - Bodies that are not JSON or don't have the expected shape

    The original exception is chained as __cause__ for diagnostics.
    """
    pass


class BaseConnector(ABC):
    """
    Abstract base class for all recipe connectors.

    Attributes:
        source: String identifier for the recipe service (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def search_by_ingredient(self, ingredient: str) -> List[RecipeSummary]:
        """
        Search recipes containing an ingredient.

        Args:
            ingredient: Trimmed, non-empty ingredient text (e.g., "chicken")

        Returns:
            List of RecipeSummary objects in service order. An empty list means
            the service reported no matching recipes.

        Raises:
            RecipeServiceError: On any transport or parsing fault.
        """
        pass
