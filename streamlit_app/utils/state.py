"""
Search Page State Management Module.

This module wraps Streamlit's session_state to provide a clean API for the
search page's input state: the current criteria (ingredient text, diet and time
filters), the theme flag, and the per-session SearchExecutor that holds results.

Every function takes an optional `store` mapping. Pages leave it out and get
st.session_state; tests pass a plain dict.

# NOTE: This module uses session_state, so criteria, theme and results persist
    only for the current Streamlit session. Refreshing the page starts over with
    an empty search and dark mode.
"""

from typing import Any, MutableMapping, Optional, Union

import streamlit as st

from recipe_search.models import DietFilter, SearchCriteria, TimeFilter
from recipe_search.search import SearchExecutor
from recipe_search.theme import ThemeState

# Session state keys
CRITERIA_KEY = "search_criteria"
THEME_KEY = "theme_state"
EXECUTOR_KEY = "search_executor"

Store = MutableMapping[str, Any]


def _resolve(store: Optional[Store]) -> Store:
    return st.session_state if store is None else store


def get_criteria(store: Optional[Store] = None) -> SearchCriteria:
    """
    Get the current search criteria, initializing defaults on first use.

    Returns:
        SearchCriteria with empty ingredient text and "all" filters by default
    """
    store = _resolve(store)
    if CRITERIA_KEY not in store:
        store[CRITERIA_KEY] = SearchCriteria()
    return store[CRITERIA_KEY]


def set_criteria(criteria: SearchCriteria, store: Optional[Store] = None) -> None:
    """Replace the stored criteria."""
    _resolve(store)[CRITERIA_KEY] = criteria


def _update_criteria(store: Optional[Store], **changes: Any) -> SearchCriteria:
    criteria = get_criteria(store).model_copy(update=changes)
    set_criteria(criteria, store)
    return criteria


def set_ingredient_text(text: str, store: Optional[Store] = None) -> SearchCriteria:
    """Store the ingredient text exactly as typed. Trimming happens at search time."""
    return _update_criteria(store, ingredient_text=text or "")


def set_diet_filter(diet_filter: Union[DietFilter, str], store: Optional[Store] = None) -> SearchCriteria:
    return _update_criteria(store, diet_filter=DietFilter(diet_filter))


def set_time_filter(time_filter: Union[TimeFilter, str], store: Optional[Store] = None) -> SearchCriteria:
    return _update_criteria(store, time_filter=TimeFilter(time_filter))


def get_theme(store: Optional[Store] = None) -> ThemeState:
    """
    Get the current theme, defaulting to dark mode.

    Returns:
        ThemeState for this session
    """
    store = _resolve(store)
    if THEME_KEY not in store:
        store[THEME_KEY] = ThemeState()
    return store[THEME_KEY]


def toggle_theme(store: Optional[Store] = None) -> ThemeState:
    """Flip between dark and light mode and return the new theme."""
    theme = get_theme(store).toggled()
    _resolve(store)[THEME_KEY] = theme
    return theme


def get_executor(store: Optional[Store] = None) -> SearchExecutor:
    """
    Get or create the SearchExecutor for this session.

    The same executor (and therefore the same results) is reused across reruns
    within a browser session.
    """
    store = _resolve(store)
    if EXECUTOR_KEY not in store:
        store[EXECUTOR_KEY] = SearchExecutor()
    return store[EXECUTOR_KEY]
