"""The one-line status bar shown above most screens."""

from __future__ import annotations

from typing import Any

from . import colors
from .style_utils import Line, Span, Style


def location_label(game: Any) -> str:
    """Return the current system name marked as docked or in space."""
    system = game.player.current_system
    state = "Docked" if game.navigation_system.is_docked(game.player) else "Space"
    return f"{system.name} ({state})"


def draw_status_bar(game: Any) -> tuple[Line, Line, Line, Line]:
    """Build the four quarters of the status bar: pilot, ship, location and time."""
    player = game.player
    ship = player.ship
    return (
        Line([
            Span(f"{player.character.name}  "),
            Span(f"Credits: {player.credits} cr", Style(fg=colors.INFO)),
        ]),
        Line([
            Span(f"{ship.name}  "),
            Span(f"Hull: {ship.hull}/{ship.max_hull}", Style(fg=colors.PRIMARY)),
        ]),
        Line([
            Span("Location: "),
            Span(location_label(game), Style(fg=colors.INFO)),
        ]),
        Line([
            Span("Time: "),
            Span(game.time_system.get_formatted_time(), Style(fg=colors.NORMAL)),
        ]),
    )