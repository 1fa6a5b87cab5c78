"""
Layout primitives for the search page.

Provides the page header, the theme toggle button and the recipe card grid.
"""

from html import escape
from typing import Callable, List, Optional

import streamlit as st

from recipe_search.view import RecipeCard, ThemeToggle

# Cards per row in the results grid
GRID_COLUMNS = 3


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown(f'<h1 class="srf-title">{escape(title)}</h1>', unsafe_allow_html=True)
    if subtitle:
        st.caption(subtitle)


def theme_toggle_button(toggle: ThemeToggle, on_click: Callable[[], None]) -> None:
    """
    Render the light/dark toggle.

    The button label names the mode it switches to; its background colour
    follows the current theme.
    """
    st.markdown(
        f"""
        <style>
        .st-key-theme_toggle button {{
            background-color: {toggle.color} !important;
            color: #ffffff !important;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.button(
        toggle.label,
        key="theme_toggle",
        on_click=on_click,
        help="Switch between dark and light mode",
        width="stretch",
    )


def recipe_card_html(card: RecipeCard) -> str:
    """
    Build the HTML for one recipe card.

    Args:
        card: RecipeCard view model

    Returns:
        HTML string with thumbnail, title and an outbound link opening in a new tab
    """
    return (
        '<div class="srf-card">'
        f'<img src="{escape(card.image_url)}" alt="{escape(card.image_alt)}" class="srf-card-img">'
        f'<h2 class="srf-card-title">{escape(card.title)}</h2>'
        f'<a href="{escape(card.link_url)}" target="{card.link_target}" '
        f'rel="{card.link_rel}" class="srf-card-link">{escape(card.link_label)}</a>'
        "</div>"
    )


def recipe_grid(cards: List[RecipeCard]) -> None:
    """Render cards in a fixed-width grid, preserving their order row by row."""
    for row_start in range(0, len(cards), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS, gap="large")
        for col, card in zip(cols, cards[row_start:row_start + GRID_COLUMNS]):
            with col:
                st.markdown(recipe_card_html(card), unsafe_allow_html=True)
