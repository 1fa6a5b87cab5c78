"""
Light/dark theme state.

The theme is a single boolean. Everything the page needs to present it (the
root style class, the toggle button's label and colour) is derived here so the
render surface receives one style context value and search logic never reads it.
"""

from dataclasses import dataclass

DARK_CLASS = "dark"

# Toggle button colours: slate when offering light mode, near-black when offering dark mode
TOGGLE_COLOR_DARK = "#64748b"
TOGGLE_COLOR_LIGHT = "#0f172a"


@dataclass(frozen=True)
class ThemeState:
    """Presentation theme. Dark mode is the default."""
    dark_enabled: bool = True

    def toggled(self) -> "ThemeState":
        """Return the opposite theme. Toggling twice gives back an equal state."""
        return ThemeState(dark_enabled=not self.dark_enabled)

    @property
    def root_class(self) -> str:
        """Class applied to the page root: "dark" in dark mode, empty otherwise."""
        return DARK_CLASS if self.dark_enabled else ""

    @property
    def toggle_label(self) -> str:
        """The toggle names the mode it switches to."""
        return "Light Mode" if self.dark_enabled else "Dark Mode"

    @property
    def toggle_color(self) -> str:
        return TOGGLE_COLOR_DARK if self.dark_enabled else TOGGLE_COLOR_LIGHT
