"""The navigation screen: star map plus a panel of nearby systems."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from . import colors
from .starmap import StarMap, draw_starmap
from .status_bar import location_label
from .style_utils import ALL_SIDES, Block, Line, Span, Style


def _whole_minutes(duration: Any) -> int:
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else duration
    return int(seconds) // 60


def _key_hint(key: str, label: str) -> Line:
    return Line([Span("["), Span(key, Style(fg=colors.WARNING)), Span(f"] {label}")])


def _blank() -> Line:
    return Line([Span("")])


def draw_navigation_screen(game: Any) -> tuple[StarMap, Block]:
    """Return the star map and the navigation info panel."""
    return draw_starmap(game), draw_navigation_info(game)


def draw_navigation_info(game: Any) -> Block:
    """Build the panel listing location, nearby systems and docking options."""
    player = game.player
    nav = game.navigation_system
    system = player.current_system
    docked = nav.is_docked(player)

    lines = [
        Line([Span("Current Location: "), Span(location_label(game), Style(fg=colors.INFO))]),
        Line([Span("Coordinates: "), Span(f"({system.x}, {system.y})", Style(fg=colors.INFO))]),
        _blank(),
        Line([Span("Nearby Systems:", Style(fg=colors.PRIMARY))]),
    ]

    nearby = list(game.universe.get_nearby_systems(system))
    if not nearby:
        lines.append(Line([Span("No systems in range", Style(fg=colors.WARNING))]))
    for number, other in enumerate(nearby, start=1):
        distance = nav.calculate_distance(system, other)
        minutes = _whole_minutes(nav.calculate_travel_time(distance))
        style = Style(fg=colors.NORMAL if nav.is_in_range(player, distance) else colors.DIM)
        lines.append(Line([
            Span(f"[{number}] {other.name} - ", style),
            Span(f"{distance:.1f} LY, {minutes} mins", style),
        ]))

    lines.append(_blank())

    if not system.stations:
        lines.append(Line([Span("Station: "), Span("None", Style(fg=colors.DIM))]))
    elif docked:
        lines.append(Line([Span("Station: "), Span("Docked", Style(fg=colors.INFO))]))
        lines.append(_key_hint("U", "Undock"))
        lines.append(_key_hint("T", "Station Services"))
    else:
        lines.append(Line([
            Span("Station: "),
            Span(f"{system.name} Station", Style(fg=colors.INFO)),
        ]))
        lines.append(_key_hint("D", "Dock"))

    lines.append(_blank())
    lines.append(_key_hint("M", "Main Menu"))

    return Block(
        title=Line([Span(" NAVIGATION SYSTEMS ", Style(fg=colors.PRIMARY))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.SECONDARY),
        lines=lines,
    )