"""
Search criteria, recipe and result-state models for Smart Recipe Ideas.

This module defines the canonical schemas used throughout the search flow.
The MealDB connector maps raw API meals into RecipeSummary; the executor
wraps outcomes in SearchResultState, which the render surface reads.

# NOTE: All models are frozen. User edits produce a new SearchCriteria and every
    executor transition produces a new SearchResultState, so a state captured by
    the UI can never change underneath it.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

NO_RESULTS_MESSAGE = "No recipes found. Try another ingredient."
REQUEST_FAILED_MESSAGE = "Something went wrong. Please try again."


class DietFilter(str, Enum):
    """Diet filter options offered in the search form."""
    ALL = "all"
    VEGETARIAN = "vegetarian"


class TimeFilter(str, Enum):
    """Preparation-time filter options offered in the search form."""
    ALL = "all"
    QUICK = "quick"


class SearchCriteria(BaseModel):
    """
    What the user asked for.

    The ingredient text is kept exactly as typed; use `query` for the
    trimmed value that is actually sent to the recipe service.
    """
    ingredient_text: str = Field(default="", description="Free-form ingredient text as typed")
    diet_filter: DietFilter = Field(default=DietFilter.ALL, description="Diet filter")
    time_filter: TimeFilter = Field(default=TimeFilter.ALL, description="Preparation time filter")

    model_config = ConfigDict(frozen=True)

    @property
    def query(self) -> str:
        """Ingredient text with surrounding whitespace removed."""
        return self.ingredient_text.strip()

    @property
    def is_blank(self) -> bool:
        """True when there is nothing to search for."""
        return not self.query


class MealRecord(BaseModel):
    """
    One entry of the `meals` array returned by filter.php.

    Field aliases match TheMealDB's JSON keys. Extra keys are ignored.
    """
    id_meal: str = Field(..., alias="idMeal", min_length=1)
    str_meal: str = Field(..., alias="strMeal")
    str_meal_thumb: Optional[str] = Field(None, alias="strMealThumb")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RecipeSummary(BaseModel):
    """Minimal per-result data needed to render a card and link to details."""
    id: str = Field(..., description="Recipe identifier, unique per result set")
    title: str = Field(..., description="Recipe title")
    thumbnail_url: str = Field("", description="URL of the recipe thumbnail image")
    detail_url: str = Field(..., description="Outbound link to the recipe page, derived from id")

    model_config = ConfigDict(frozen=True)

    @staticmethod
    def build_detail_url(recipe_id: str, site_base_url: str) -> str:
        """Derive the public detail page URL for a recipe id."""
        return f"{site_base_url.rstrip('/')}/meal/{recipe_id}"

    @classmethod
    def from_meal(cls, meal: Dict[str, Any], site_base_url: str) -> "RecipeSummary":
        """
        Build a RecipeSummary from a raw TheMealDB meal dictionary.

        Args:
            meal: Raw meal dict with idMeal, strMeal and strMealThumb keys
            site_base_url: Base URL for detail links (e.g. "https://www.themealdb.com")

        Raises:
            pydantic.ValidationError: If the meal lacks an id or title.
        """
        record = MealRecord.model_validate(meal)
        return cls(
            id=record.id_meal,
            title=record.str_meal,
            thumbnail_url=record.str_meal_thumb or "",
            detail_url=cls.build_detail_url(record.id_meal, site_base_url),
        )


class SearchStatus(str, Enum):
    """Lifecycle of a search as seen by the render surface."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class SearchResultState(BaseModel):
    """
    Outcome of the most recent search.

    Exactly one of loading / error / results is active at a time. Idle and an
    empty Success are told apart only by `has_searched`.
    """
    status: SearchStatus = SearchStatus.IDLE
    recipes: List[RecipeSummary] = Field(default_factory=list)
    message: Optional[str] = None
    criteria: Optional[SearchCriteria] = Field(None, description="Criteria the search was issued with")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def idle(cls) -> "SearchResultState":
        return cls(status=SearchStatus.IDLE)

    @classmethod
    def loading(cls, criteria: Optional[SearchCriteria] = None) -> "SearchResultState":
        return cls(status=SearchStatus.LOADING, criteria=criteria)

    @classmethod
    def success(
        cls,
        recipes: List[RecipeSummary],
        criteria: Optional[SearchCriteria] = None,
    ) -> "SearchResultState":
        return cls(status=SearchStatus.SUCCESS, recipes=list(recipes), criteria=criteria)

    @classmethod
    def failure(cls, message: str, criteria: Optional[SearchCriteria] = None) -> "SearchResultState":
        return cls(status=SearchStatus.FAILURE, message=message, criteria=criteria)

    @property
    def is_loading(self) -> bool:
        return self.status == SearchStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status == SearchStatus.FAILURE

    @property
    def is_success(self) -> bool:
        return self.status == SearchStatus.SUCCESS

    @property
    def has_searched(self) -> bool:
        """False only before the first search of the session."""
        return self.status != SearchStatus.IDLE
