"""
Render surface view model for the search page.

build_search_view() maps the current search state, theme and criteria to a
plain SearchView that the Streamlit page draws. It has no Streamlit dependency,
so what the user sees for each state can be checked without a browser.

Mapping:
- Loading -> loading indicator only
- Failure -> error message only
- Success -> one card per recipe (or an empty hint when filters removed everything)
- Idle    -> nothing in the results area
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from recipe_search.models import DietFilter, RecipeSummary, SearchCriteria, SearchResultState, TimeFilter
from recipe_search.theme import ThemeState

PAGE_TITLE = "Taylor's Smart Recipe Ideas"
INGREDIENT_PLACEHOLDER = "Enter an ingredient (e.g. chicken, tomato)"
LOADING_TEXT = "Loading recipes..."
LINK_LABEL = "View Recipe"
EMPTY_FILTER_HINT = "None of the recipes matched your filters. Try Any Time or All Diets."

DIET_OPTIONS: Tuple[Tuple[DietFilter, str], ...] = (
    (DietFilter.ALL, "All Diets"),
    (DietFilter.VEGETARIAN, "Vegetarian"),
)

TIME_OPTIONS: Tuple[Tuple[TimeFilter, str], ...] = (
    (TimeFilter.ALL, "Any Time"),
    (TimeFilter.QUICK, "Quick Meals"),
)


@dataclass(frozen=True)
class RecipeCard:
    """Everything needed to draw one result card."""
    key: str
    title: str
    image_url: str
    image_alt: str
    link_url: str
    link_label: str = LINK_LABEL
    # Links always open in a new tab
    link_target: str = "_blank"
    link_rel: str = "noopener noreferrer"

    @classmethod
    def from_recipe(cls, recipe: RecipeSummary) -> "RecipeCard":
        return cls(
            key=recipe.id,
            title=recipe.title,
            image_url=recipe.thumbnail_url,
            image_alt=recipe.title,
            link_url=recipe.detail_url,
        )


@dataclass(frozen=True)
class ThemeToggle:
    label: str
    color: str
    pressed: bool


@dataclass(frozen=True)
class SearchView:
    """What the search page shows for one combination of state, theme and criteria."""
    title: str
    ingredient_text: str
    diet_filter: DietFilter
    time_filter: TimeFilter
    root_class: str
    theme_toggle: ThemeToggle
    show_loading: bool = False
    loading_text: str = LOADING_TEXT
    error_message: Optional[str] = None
    cards: List[RecipeCard] = field(default_factory=list)
    show_empty_hint: bool = False

    @property
    def result_count(self) -> int:
        return len(self.cards)


def diet_label(diet_filter: DietFilter) -> str:
    return dict(DIET_OPTIONS)[DietFilter(diet_filter)]


def time_label(time_filter: TimeFilter) -> str:
    return dict(TIME_OPTIONS)[TimeFilter(time_filter)]


def build_search_view(
    state: SearchResultState,
    theme: ThemeState,
    criteria: SearchCriteria,
) -> SearchView:
    """
    Map search state, theme and criteria to the visible page content.

    Args:
        state: Current SearchResultState from the executor
        theme: Current theme (the style context)
        criteria: Current form values (shown in the controls)

    Returns:
        SearchView where at most one of show_loading, error_message and cards is set.
    """
    cards: List[RecipeCard] = []
    if state.is_success:
        cards = [RecipeCard.from_recipe(recipe) for recipe in state.recipes]

    return SearchView(
        title=PAGE_TITLE,
        ingredient_text=criteria.ingredient_text,
        diet_filter=criteria.diet_filter,
        time_filter=criteria.time_filter,
        root_class=theme.root_class,
        theme_toggle=ThemeToggle(
            label=theme.toggle_label,
            color=theme.toggle_color,
            pressed=theme.dark_enabled,
        ),
        show_loading=state.is_loading,
        error_message=state.message if state.is_error else None,
        cards=cards,
        show_empty_hint=state.is_success and not cards,
    )
