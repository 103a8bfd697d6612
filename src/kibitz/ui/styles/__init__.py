"""kibitz.ui.styles package."""
