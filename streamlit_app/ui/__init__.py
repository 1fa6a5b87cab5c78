"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Smart Recipe Ideas Streamlit app.
"""

from .styles import load_global_styles, build_theme_css
from .layout import page_header, recipe_grid, recipe_card_html, theme_toggle_button
from .feedback import show_error, show_empty_state, show_loading

__all__ = [
    "load_global_styles",
    "build_theme_css",
    "page_header",
    "recipe_grid",
    "recipe_card_html",
    "theme_toggle_button",
    "show_error",
    "show_empty_state",
    "show_loading",
]
