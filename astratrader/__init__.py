"""Screens, ASCII art, colours, styling and JSON save files for a terminal space trading game."""

__version__ = "0.1.0"