"""
Client-side result filters for recipe searches.

TheMealDB's filter.php endpoint only filters by ingredient, so the diet and
time options of the search form are applied here, after the response arrives:

- Diet: "vegetarian" keeps recipes whose title mentions "vegetarian"
  (case-insensitive). This is a title heuristic, not a dietary classification;
  a vegetable curry without the word in its title is dropped.
- Time: "quick" keeps only the first QUICK_MEAL_LIMIT recipes. The API has no
  preparation times, so result order stands in for them.

Diet is applied first, then time. Both preserve the input order.
"""

from typing import List, Sequence, Union

from recipe_search.models import DietFilter, RecipeSummary, TimeFilter

VEGETARIAN_KEYWORD = "vegetarian"

# Number of results kept by the "Quick Meals" option
QUICK_MEAL_LIMIT = 6


def is_vegetarian_title(title: str) -> bool:
    """
    Check whether a recipe title mentions "vegetarian".

    Examples:
        >>> is_vegetarian_title("Vegetarian Chilli")
        True
        >>> is_vegetarian_title("Chicken Soup")
        False
    """
    return VEGETARIAN_KEYWORD in (title or "").lower()


def filter_recipes(
    recipes: Sequence[RecipeSummary],
    diet_filter: Union[DietFilter, str] = DietFilter.ALL,
    time_filter: Union[TimeFilter, str] = TimeFilter.ALL,
) -> List[RecipeSummary]:
    """
    Apply the diet and time filters to a list of recipes.

    Args:
        recipes: Recipes in the order returned by the recipe service
        diet_filter: DietFilter member or its value ("all", "vegetarian")
        time_filter: TimeFilter member or its value ("all", "quick")

    Returns:
        New list of surviving recipes, in their original relative order.
        With both filters set to "all" the result equals the input.

    Raises:
        ValueError: If a filter value is not a known option.
    """
    diet = DietFilter(diet_filter)
    time = TimeFilter(time_filter)

    filtered = list(recipes)

    if diet == DietFilter.VEGETARIAN:
        filtered = [recipe for recipe in filtered if is_vegetarian_title(recipe.title)]

    if time == TimeFilter.QUICK:
        filtered = filtered[:QUICK_MEAL_LIMIT]

    return filtered
