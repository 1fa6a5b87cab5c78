"""
Recipe search core for Smart Recipe Ideas.

This package contains the Streamlit-independent parts of the app:
- models: search criteria, recipe summaries and result states
- connectors: recipe service integrations (TheMealDB)
- filters: client-side diet and time filters
- search: the search executor
- theme: light/dark theme state
- view: render surface view model
"""
