"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state management helpers for criteria, theme and the search executor
"""
