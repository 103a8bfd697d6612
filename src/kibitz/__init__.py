"""Kibitz — an interactive chessboard on top of python-chess and PyQt6."""

__version__ = "0.1.0"
