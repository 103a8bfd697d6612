"""kibitz.ui.board package."""
