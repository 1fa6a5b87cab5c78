"""
Smart Recipe Ideas - Streamlit Frontend Main Entry Point.

Single search page: the user enters an ingredient, optionally picks a diet and
time filter, and gets TheMealDB recipes as cards with a thumbnail, title and a
"View Recipe" link. A light/dark toggle sits in the header (dark by default).

Run with:
    streamlit run streamlit_app/app.py

Searches run when the Search button is clicked or Enter is pressed in the
ingredient field; both submit the same form.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_search
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_search import config

import streamlit as st

from recipe_search.models import SearchResultState
from recipe_search.view import (
    DIET_OPTIONS,
    EMPTY_FILTER_HINT,
    INGREDIENT_PLACEHOLDER,
    PAGE_TITLE,
    TIME_OPTIONS,
    SearchView,
    build_search_view,
    diet_label,
    time_label,
)
from ui.feedback import show_empty_state, show_error, show_loading
from ui.layout import page_header, recipe_grid, theme_toggle_button
from ui.styles import load_global_styles
from utils.state import (
    get_criteria,
    get_executor,
    get_theme,
    set_diet_filter,
    set_ingredient_text,
    set_time_filter,
    toggle_theme,
)

config.configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="🍲",
    layout="wide",
)

theme = get_theme()
criteria = get_criteria()
executor = get_executor()

# Inject CSS for the current theme
load_global_styles(theme)

header_view = build_search_view(executor.state, theme, criteria)

title_col, toggle_col = st.columns([5, 1], vertical_alignment="center")
with title_col:
    page_header(header_view.title)
with toggle_col:
    theme_toggle_button(header_view.theme_toggle, on_click=toggle_theme)

diet_values = [value for value, _ in DIET_OPTIONS]
time_values = [value for value, _ in TIME_OPTIONS]

# Enter inside the text input submits the form, same as the Search button
with st.form("search_form", border=False):
    input_col, diet_col, time_col, button_col = st.columns([4, 2, 2, 1], vertical_alignment="bottom")
    with input_col:
        ingredient_text = st.text_input(
            "Ingredient",
            value=criteria.ingredient_text,
            placeholder=INGREDIENT_PLACEHOLDER,
            label_visibility="collapsed",
        )
    with diet_col:
        diet_choice = st.selectbox(
            "Diet",
            options=diet_values,
            index=diet_values.index(criteria.diet_filter),
            format_func=diet_label,
            label_visibility="collapsed",
        )
    with time_col:
        time_choice = st.selectbox(
            "Time",
            options=time_values,
            index=time_values.index(criteria.time_filter),
            format_func=time_label,
            label_visibility="collapsed",
        )
    with button_col:
        submitted = st.form_submit_button("Search", type="primary", width="stretch")

results_area = st.empty()


def render_results(view: SearchView) -> None:
    """Draw the results area: loading, error, empty hint or the card grid."""
    with results_area.container():
        if view.show_loading:
            show_loading(view.loading_text)
        elif view.error_message:
            show_error(view.error_message)
        elif view.show_empty_hint:
            show_empty_state("No matching recipes", EMPTY_FILTER_HINT)
        elif view.cards:
            st.markdown(f"**Found {view.result_count} recipe(s)**")
            recipe_grid(view.cards)


def on_state_change(state: SearchResultState) -> None:
    render_results(build_search_view(state, theme, get_criteria()))


# Listeners are per script run; drop the ones bound to the previous run's placeholder
executor.clear_listeners()
executor.add_listener(on_state_change)

if submitted:
    set_ingredient_text(ingredient_text)
    set_diet_filter(diet_choice)
    criteria = set_time_filter(time_choice)
    executor.search(criteria)

on_state_change(executor.state)
