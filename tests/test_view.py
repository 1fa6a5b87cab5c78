"""
Tests for the search page view model.

This module tests build_search_view, which decides what the results area
shows (loading, error or cards) and how the theme toggle looks.
"""

import pytest

from recipe_search.models import (
    NO_RESULTS_MESSAGE,
    DietFilter,
    RecipeSummary,
    SearchCriteria,
    SearchResultState,
    TimeFilter,
)
from recipe_search.theme import ThemeState
from recipe_search.view import (
    LOADING_TEXT,
    PAGE_TITLE,
    RecipeCard,
    build_search_view,
    diet_label,
    time_label,
)


def make_recipe(recipe_id: str, title: str) -> RecipeSummary:
    return RecipeSummary(
        id=recipe_id,
        title=title,
        thumbnail_url=f"https://img.example.com/{recipe_id}.jpg",
        detail_url=f"https://www.themealdb.com/meal/{recipe_id}",
    )


CRITERIA = SearchCriteria(ingredient_text="chicken")


class TestResultsArea:
    """Exactly one of loading, error and cards is shown."""

    def test_idle_shows_nothing(self):
        view = build_search_view(SearchResultState.idle(), ThemeState(), CRITERIA)
        assert not view.show_loading
        assert view.error_message is None
        assert view.cards == []
        assert not view.show_empty_hint

    def test_loading(self):
        view = build_search_view(SearchResultState.loading(CRITERIA), ThemeState(), CRITERIA)
        assert view.show_loading
        assert view.loading_text == LOADING_TEXT == "Loading recipes..."
        assert view.error_message is None
        assert view.cards == []

    def test_failure(self):
        view = build_search_view(SearchResultState.failure(NO_RESULTS_MESSAGE), ThemeState(), CRITERIA)
        assert not view.show_loading
        assert view.error_message == NO_RESULTS_MESSAGE
        assert view.cards == []

    def test_success_one_card_per_recipe(self):
        recipes = [make_recipe("1", "Chicken Handi"), make_recipe("2", "Chicken Karaage")]
        view = build_search_view(SearchResultState.success(recipes), ThemeState(), CRITERIA)
        assert not view.show_loading
        assert view.error_message is None
        assert view.result_count == 2
        assert [c.key for c in view.cards] == ["1", "2"]
        assert not view.show_empty_hint

    def test_empty_success_shows_hint(self):
        view = build_search_view(SearchResultState.success([]), ThemeState(), CRITERIA)
        assert view.cards == []
        assert view.show_empty_hint
        assert view.error_message is None


class TestRecipeCard:
    """Test cases for card contents."""

    def test_card_fields(self):
        card = RecipeCard.from_recipe(make_recipe("52795", "Chicken Handi"))
        assert card.title == "Chicken Handi"
        assert card.image_url == "https://img.example.com/52795.jpg"
        assert card.image_alt == "Chicken Handi"
        assert card.link_url == "https://www.themealdb.com/meal/52795"
        assert card.link_label == "View Recipe"

    def test_link_opens_new_tab(self):
        card = RecipeCard.from_recipe(make_recipe("1", "Soup"))
        assert card.link_target == "_blank"
        assert "noopener" in card.link_rel


class TestThemeAndControls:
    """Test cases for the header and form values."""

    @pytest.mark.parametrize("dark, label, root_class", [
        (True, "Light Mode", "dark"),
        (False, "Dark Mode", ""),
    ])
    def test_theme_toggle(self, dark, label, root_class):
        view = build_search_view(SearchResultState.idle(), ThemeState(dark), CRITERIA)
        assert view.theme_toggle.label == label
        assert view.theme_toggle.pressed is dark
        assert view.root_class == root_class

    def test_controls_reflect_criteria(self):
        criteria = SearchCriteria(
            ingredient_text=" tomato ",
            diet_filter=DietFilter.VEGETARIAN,
            time_filter=TimeFilter.QUICK,
        )
        view = build_search_view(SearchResultState.idle(), ThemeState(), criteria)
        assert view.title == PAGE_TITLE
        assert view.ingredient_text == " tomato "
        assert view.diet_filter == DietFilter.VEGETARIAN
        assert view.time_filter == TimeFilter.QUICK

    def test_option_labels(self):
        assert diet_label(DietFilter.ALL) == "All Diets"
        assert diet_label("vegetarian") == "Vegetarian"
        assert time_label(TimeFilter.ALL) == "Any Time"
        assert time_label("quick") == "Quick Meals"
