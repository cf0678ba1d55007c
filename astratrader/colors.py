"""Colour palette for the terminal interface."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not isinstance(component, int) or isinstance(component, bool):
                raise TypeError("colour components must be integers")
            if not 0 <= component <= 255:
                raise ValueError("colour components must lie in 0..255")

    def hex(self) -> str:
        """Return the colour as an upper-case ``#RRGGBB`` string."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


PRIMARY = Color(0, 255, 136)
SECONDARY = Color(0, 128, 255)
WARNING = Color(255, 204, 0)
DANGER = Color(255, 51, 51)
INFO = Color(0, 240, 255)
SUCCESS = Color(0, 255, 0)
NORMAL = Color(220, 220, 240)
DEFAULT_TEXT = Color(220, 220, 240)
DIM = Color(100, 110, 130)

HIGHLIGHT = Color(255, 255, 255)
ENERGY = Color(130, 60, 255)
SHIELD = Color(60, 170, 255)
HULL = Color(180, 180, 180)
STARS_BG = Color(5, 10, 25)