"""The station services screen: station overview and the services on offer."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any

from . import colors
from .ascii_art import get_station_art
from .style_utils import (
    Block,
    Line,
    Span,
    Style,
    create_danger_block,
    create_primary_block,
)

_MARKET = "Market"
_REFUELING = "Refueling"
_FIRST_EXTRA_NUMBER = 3


def _blank() -> Line:
    return Line([Span("")])


def _key_line(key: str, rest: str) -> Line:
    return Line([Span("["), Span(key, Style(fg=colors.WARNING)), Span(rest)])


def _display_name(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


def _no_station_line() -> Line:
    return Line([Span("Error: No station data", Style(fg=colors.DANGER))])


def list_services(station: Any, ship: Any) -> list[tuple[str, str, str]]:
    """Return ``(number, service, status)`` rows for a station's services.

    The market is always number 1 and refuelling number 2 when offered; any
    other services follow from number 3 in the station's own order.
    """
    services = list(station.services)
    rows = []
    if _MARKET in services:
        rows.append(("1", _MARKET, "Available"))
    if _REFUELING in services:
        current, capacity = ship.current_fuel, ship.fuel_capacity
        status = f"Available ({current}/{capacity})" if current < capacity else "Tank Full"
        rows.append(("2", _REFUELING, status))
    extras = (service for service in services if service not in (_MARKET, _REFUELING))
    for number, service in enumerate(extras, start=_FIRST_EXTRA_NUMBER):
        rows.append((str(number), service, "Available"))
    return rows


def _first_station(game: Any) -> Any:
    stations = list(game.player.current_system.stations)
    return stations[0] if stations else None


def _not_docked() -> Block:
    return replace(create_danger_block("STATION ACCESS DENIED"), lines=(
        Line([Span("You must be docked at a station to access services", Style(fg=colors.WARNING))]),
        _blank(),
        Line([
            Span("Press ["),
            Span("M", Style(fg=colors.WARNING)),
            Span("] to return to the main menu"),
        ]),
    ))


def _station_visual(station: Any) -> Block:
    lines = [Line([Span(text)]) for text in get_station_art().splitlines()]
    if station is None:
        lines.append(_no_station_line())
    else:
        lines.extend([
            Line([Span("Name: "), Span(station.name, Style(fg=colors.PRIMARY))]),
            Line([Span("Type: "), Span(_display_name(station.station_type), Style(fg=colors.INFO))]),
            Line([Span("Status: "), Span("Docked", Style(fg=colors.SUCCESS))]),
        ])
    return replace(create_primary_block("STATION"), lines=tuple(lines))


def _station_services(station: Any, ship: Any) -> Block:
    block = create_primary_block("AVAILABLE SERVICES")
    if station is None:
        return replace(block, lines=(_no_station_line(),))
    header_style = Style(fg=colors.INFO)
    lines = [Line([Span(text, header_style) for text in ("#", "Service", "Status")])]
    lines.extend(Line([Span(cell) for cell in row]) for row in list_services(station, ship))
    lines.extend([
        Line([Span("Select a service by number:", Style(fg=colors.INFO))]),
        _blank(),
        Line([
            Span("["),
            Span("2", Style(fg=colors.WARNING)),
            Span("] Refuel your ship - "),
            Span("25 credits per unit", Style(fg=colors.PRIMARY)),
        ]),
        _blank(),
        _key_line("M", "] Main Menu"),
    ])
    return replace(block, lines=tuple(lines))


def draw_station_services_screen(game: Any) -> tuple[Block, ...]:
    """Return the station panel and the services panel, or a notice when not docked."""
    if not game.navigation_system.is_docked(game.player):
        return (_not_docked(),)
    station = _first_station(game)
    return _station_visual(station), _station_services(station, game.player.ship)