"""
Tests for the light/dark theme state.
"""

from recipe_search.theme import TOGGLE_COLOR_DARK, TOGGLE_COLOR_LIGHT, ThemeState


class TestThemeState:
    """Test cases for ThemeState."""

    def test_dark_by_default(self):
        theme = ThemeState()
        assert theme.dark_enabled
        assert theme.root_class == "dark"

    def test_toggle_switches_mode(self):
        light = ThemeState().toggled()
        assert not light.dark_enabled
        assert light.root_class == ""

    def test_toggle_twice_round_trips(self):
        """Test toggling twice returns the presentation flag to its original value."""
        for start in (ThemeState(True), ThemeState(False)):
            assert start.toggled().toggled() == start
            assert start.toggled().toggled().root_class == start.root_class

    def test_toggle_label_names_target_mode(self):
        assert ThemeState(True).toggle_label == "Light Mode"
        assert ThemeState(False).toggle_label == "Dark Mode"

    def test_toggle_color(self):
        assert ThemeState(True).toggle_color == TOGGLE_COLOR_DARK == "#64748b"
        assert ThemeState(False).toggle_color == TOGGLE_COLOR_LIGHT == "#0f172a"
