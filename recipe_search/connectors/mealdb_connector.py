"""
TheMealDB connector using its public JSON API.

This connector queries TheMealDB's filter endpoint for recipes containing an
ingredient and normalizes the response into RecipeSummary objects.

The connector:
- Calls GET {api_url}/filter.php?i={percent-encoded ingredient}
- Treats a null, missing or empty "meals" field as "no results" (empty list)
- Derives each recipe's detail link as {site_url}/meal/{idMeal}
- Wraps every transport, HTTP status and parsing fault in RecipeServiceError

No API key is needed for the public test key ("1") used in the default URL.
Base URLs and the timeout come from recipe_search.config unless passed explicitly.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from recipe_search.config import MealDBConfig
from recipe_search.models import RecipeSummary

from .base import BaseConnector, RecipeServiceError

logger = logging.getLogger(__name__)


class MealDBConnector(BaseConnector):
    """
    Connector for TheMealDB recipe service.

    Each search issues exactly one GET request. There is no retry and no caching;
    a failed request surfaces as RecipeServiceError.
    """
    source = "mealdb"

    def __init__(
        self,
        api_url: Optional[str] = None,
        site_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            api_url: JSON API base URL (optional, reads MEALDB_API_URL or uses the public default)
            site_url: Website base URL for detail links (optional, reads MEALDB_SITE_URL)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS)
        """
        self.api_url = (api_url or MealDBConfig.get_api_url()).rstrip("/")
        self.site_url = (site_url or MealDBConfig.get_site_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout_seconds()

    def build_search_url(self, ingredient: str) -> str:
        """
        Build the filter-by-ingredient URL.

        The ingredient is percent-encoded with no safe characters, so spaces
        become %20 and reserved characters like & or / can't break the query.
        """
        return f"{self.api_url}/filter.php?i={quote(ingredient, safe='')}"

    def search_by_ingredient(self, ingredient: str) -> List[RecipeSummary]:
        """
        Search TheMealDB for recipes containing an ingredient.

        Args:
            ingredient: Trimmed ingredient text (e.g., "chicken breast")

        Returns:
            List of RecipeSummary in the order returned by the service.
            Empty when the service returns {"meals": null} or no meals key.

        Raises:
            RecipeServiceError: On network errors, timeouts, non-2xx status,
                invalid JSON, or a payload that doesn't match the expected shape.
        """
        url = self.build_search_url(ingredient)
        logger.info("MealDB connector: searching for ingredient=%r", ingredient)

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise RecipeServiceError(f"Request to {url} timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else "unknown"
            raise RecipeServiceError(f"Recipe service returned HTTP {status_code} for {url}") from e
        except requests.exceptions.RequestException as e:
            raise RecipeServiceError(f"Could not reach recipe service at {url}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError subclasses ValueError
            raise RecipeServiceError(f"Recipe service returned invalid JSON for {url}") from e

        recipes = self.normalize_payload(payload)
        logger.debug("MealDB connector: ingredient=%r returned %d recipes", ingredient, len(recipes))
        return recipes

    def normalize_payload(self, payload: Any) -> List[RecipeSummary]:
        """
        Convert a decoded filter.php body into RecipeSummary objects.

        Raises:
            RecipeServiceError: If the body isn't an object, "meals" isn't a list,
                or a meal lacks idMeal/strMeal.
        """
        if not isinstance(payload, dict):
            raise RecipeServiceError(
                f"Unexpected response format from recipe service: expected an object, got {type(payload).__name__}"
            )

        meals = payload.get("meals")
        if meals is None:
            return []
        if not isinstance(meals, list):
            raise RecipeServiceError(
                f"Unexpected response format from recipe service: 'meals' is {type(meals).__name__}, expected a list"
            )

        recipes: List[RecipeSummary] = []
        for meal in meals:
            recipes.append(self._to_summary(meal))
        return recipes

    def _to_summary(self, meal: Dict[str, Any]) -> RecipeSummary:
        if not isinstance(meal, dict):
            raise RecipeServiceError(
                f"Unexpected meal entry from recipe service: {str(meal)[:100]}"
            )
        try:
            return RecipeSummary.from_meal(meal, self.site_url)
        except ValidationError as e:
            raise RecipeServiceError(
                f"Malformed meal entry from recipe service: {str(meal)[:100]}"
            ) from e
