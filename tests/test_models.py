"""
Tests for search criteria, recipe and result-state models.
"""

import pytest
from pydantic import ValidationError

from recipe_search.models import (
    DietFilter,
    RecipeSummary,
    SearchCriteria,
    SearchResultState,
    SearchStatus,
    TimeFilter,
)


class TestSearchCriteria:
    """Test cases for SearchCriteria."""

    def test_defaults(self):
        criteria = SearchCriteria()
        assert criteria.ingredient_text == ""
        assert criteria.diet_filter == DietFilter.ALL
        assert criteria.time_filter == TimeFilter.ALL
        assert criteria.is_blank

    def test_query_is_trimmed_but_text_kept(self):
        criteria = SearchCriteria(ingredient_text="  tomato \n")
        assert criteria.ingredient_text == "  tomato \n"
        assert criteria.query == "tomato"
        assert not criteria.is_blank

    def test_filters_from_strings(self):
        criteria = SearchCriteria(ingredient_text="egg", diet_filter="vegetarian", time_filter="quick")
        assert criteria.diet_filter is DietFilter.VEGETARIAN
        assert criteria.time_filter is TimeFilter.QUICK

    def test_unknown_filter_rejected(self):
        with pytest.raises(ValidationError):
            SearchCriteria(diet_filter="paleo")

    def test_frozen(self):
        criteria = SearchCriteria(ingredient_text="egg")
        with pytest.raises(ValidationError):
            criteria.ingredient_text = "ham"


class TestRecipeSummary:
    """Test cases for building RecipeSummary from raw meals."""

    def test_from_meal(self):
        meal = {"idMeal": "52772", "strMeal": "Teriyaki Chicken Casserole", "strMealThumb": "https://img/t.jpg"}
        recipe = RecipeSummary.from_meal(meal, "https://www.themealdb.com")
        assert recipe.id == "52772"
        assert recipe.title == "Teriyaki Chicken Casserole"
        assert recipe.thumbnail_url == "https://img/t.jpg"
        assert recipe.detail_url == "https://www.themealdb.com/meal/52772"

    def test_detail_url_is_deterministic(self):
        """Test the detail link depends only on id and site base."""
        url_a = RecipeSummary.build_detail_url("123", "https://www.themealdb.com/")
        url_b = RecipeSummary.build_detail_url("123", "https://www.themealdb.com")
        assert url_a == url_b == "https://www.themealdb.com/meal/123"

    def test_null_thumbnail(self):
        """Test a null thumbnail becomes an empty URL instead of failing the search."""
        meal = {"idMeal": "1", "strMeal": "Soup", "strMealThumb": None}
        assert RecipeSummary.from_meal(meal, "https://x").thumbnail_url == ""

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            RecipeSummary.from_meal({"strMeal": "Soup"}, "https://x")

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            RecipeSummary.from_meal({"idMeal": "", "strMeal": "Soup"}, "https://x")


class TestSearchResultState:
    """Test cases for SearchResultState constructors and flags."""

    def test_idle(self):
        state = SearchResultState.idle()
        assert state.status == SearchStatus.IDLE
        assert not state.has_searched
        assert not state.is_loading
        assert not state.is_error
        assert state.recipes == []

    def test_loading(self):
        state = SearchResultState.loading(SearchCriteria(ingredient_text="egg"))
        assert state.is_loading
        assert state.has_searched
        assert state.message is None
        assert state.recipes == []

    def test_failure(self):
        state = SearchResultState.failure("Nope")
        assert state.is_error
        assert not state.is_loading
        assert state.message == "Nope"

    def test_empty_success_differs_from_idle(self):
        state = SearchResultState.success([])
        assert state.is_success
        assert state.has_searched
        assert state != SearchResultState.idle()
