"""ASCII art and simple background animations."""

from __future__ import annotations

from enum import Enum


class ShipType(Enum):
    """Hull classes that have their own artwork."""

    SCOUT = "Scout"
    FREIGHTER = "Freighter"
    MINER = "Miner"
    FIGHTER = "Fighter"

    def __str__(self) -> str:
        return self.value


def _art(*lines: str) -> str:
    return "\n" + "\n".join(lines) + "\n"


_SHIP_ART = {
    ShipType.SCOUT: _art(
        "      __",
        "   __/  \\__",
        "  <__ oo __>",
        "     \\__/",
    ),
    ShipType.FREIGHTER: _art(
        "   ____________",
        "  |[]|[]|[]|[] |>",
        "  |____________|",
        "     ||    ||",
    ),
    ShipType.MINER: _art(
        "      _/\\_",
        "    _/ ** \\_",
        "   [__====__]",
        "     /|  |\\",
    ),
    ShipType.FIGHTER: _art(
        "        /\\",
        "     __/  \\__",
        "    /__|==|__\\",
        "       /  \\",
    ),
}

_STATION_ART = _art(
    "       _||_",
    "    __/    \\__",
    "   |  [] []  |",
    "   |__________|",
    "      ||  ||",
)

_GLYPHS = {
    "A": (" ███ ", "█   █", "█████", "█   █", "█   █"),
    "S": (" ████", "█    ", " ███ ", "    █", "████ "),
    "T": ("█████", "  █  ", "  █  ", "  █  ", "  █  "),
    "R": ("████ ", "█   █", "████ ", "█  █ ", "█   █"),
    "D": ("████ ", "█   █", "█   █", "█   █", "████ "),
    "E": ("█████", "█    ", "████ ", "█    ", "█████"),
    " ": ("   ",) * 5,
}

_TITLE_TEXT = "ASTRA TRADER"

STAR_CHARS = ("·", "★", "☆", ".", "*", "+")
PARTICLE_CHARS = ("░", "▒", "▓", "█", "▄", "▀")


def _banner(text: str) -> str:
    rows = zip(*(_GLYPHS[ch] for ch in text))
    return _art(*(" ".join(row) for row in rows))


def get_ship_art(ship_type: ShipType | str) -> str:
    """Return the artwork for a ship class."""
    return _SHIP_ART[ShipType(ship_type)]


def get_station_art() -> str:
    """Return the artwork for a space station."""
    return _STATION_ART


def get_title_art() -> str:
    """Return the banner shown on the main menu."""
    return _banner(_TITLE_TEXT)


def get_star_field(elapsed_ms: int, frame_num: int) -> list[tuple[int, int, str]]:
    """Return ``(x, y, char)`` stars for an 80x24 background, leaving the menu area clear."""
    shift = (elapsed_ms // 200) % 3
    stars = []
    for i in range(100):
        seed = (i * 13 + frame_num) % 997
        x = (seed * 7) % 80
        y = (seed * 11) % 24
        if 10 <= x < 70 and 5 <= y < 20:
            continue
        stars.append((x, y, STAR_CHARS[(x + y + shift) % len(STAR_CHARS)]))
    return stars


def get_engine_particles(elapsed_ms: int) -> list[tuple[int, int, str]]:
    """Return five ``(x, y, char)`` engine-trail particles for the given moment."""
    particles = []
    for i in range(5):
        seed = (i * 17 + elapsed_ms) % 1009
        x = max(0, 40 + seed % 5 - 2)
        y = 22 + seed % 2
        char = PARTICLE_CHARS[(elapsed_ms // 100 + i) % len(PARTICLE_CHARS)]
        particles.append((x, y, char))
    return particles