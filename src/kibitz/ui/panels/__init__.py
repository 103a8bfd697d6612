"""kibitz.ui.panels package."""
