"""
Global CSS Styling for Smart Recipe Ideas.

This module provides load_global_styles() to inject the page styling for the
current theme. The theme's root class ("dark" or none) selects a palette of CSS
variables on the app container; everything else reads those variables, so the
theme flag stays a presentation-only concern.
"""

import streamlit as st

from recipe_search.theme import DARK_CLASS, ThemeState

# Palettes keyed by root class
PALETTES = {
    DARK_CLASS: {
        "bg": "#0f172a",
        "surface": "#1e293b",
        "text": "#e2e8f0",
        "muted": "#94a3b8",
        "accent": "#f97316",
        "error": "#f87171",
    },
    "": {
        "bg": "#f8fafc",
        "surface": "#ffffff",
        "text": "#0f172a",
        "muted": "#475569",
        "accent": "#ea580c",
        "error": "#dc2626",
    },
}


def build_theme_css(theme: ThemeState) -> str:
    """
    Build the <style> block for a theme.

    Args:
        theme: Current ThemeState

    Returns:
        HTML string containing a single <style> element
    """
    palette = PALETTES[theme.root_class]
    variables = "\n".join(f"            --srf-{name}: {value};" for name, value in palette.items())
    return f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        .stApp {{
{variables}
            background-color: var(--srf-bg) !important;
            color: var(--srf-text) !important;
        }}

        html, body, [class*="css"] {{
            font-family: 'Nunito', 'sans serif' !important;
        }}

        .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label {{
            color: var(--srf-text) !important;
        }}

        .srf-title {{
            text-align: center;
            font-weight: 700 !important;
            letter-spacing: 0.02em !important;
        }}

        .srf-message {{
            color: var(--srf-muted) !important;
            text-align: center;
        }}

        .srf-error {{
            color: var(--srf-error) !important;
            text-align: center;
        }}

        /* Recipe cards */
        .srf-card {{
            border-radius: 16px;
            background: var(--srf-surface);
            padding: 1rem;
            margin-bottom: 1.5rem;
            text-align: center;
        }}

        .srf-card-img {{
            width: 100%;
            border-radius: 12px;
            object-fit: cover;
            max-height: 220px;
        }}

        .srf-card-title {{
            font-size: 1.1rem !important;
            margin: 0.75rem 0 0.5rem 0 !important;
        }}

        .srf-card-link {{
            color: var(--srf-accent) !important;
            font-weight: 600;
            text-decoration: none;
        }}

        .stButton > button, .stFormSubmitButton > button {{
            border-radius: 50px !important;
            font-weight: 600 !important;
        }}
    </style>
    """


def load_global_styles(theme: ThemeState) -> None:
    """Inject the global CSS for the given theme."""
    st.markdown(build_theme_css(theme), unsafe_allow_html=True)
