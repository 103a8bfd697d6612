"""kibitz.ui package."""
