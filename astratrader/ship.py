"""The ship screen: artwork on one side, specifications on the other."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from . import colors
from .ascii_art import get_ship_art
from .style_utils import Block, Line, Span, Style, create_info_block, create_primary_block


def _stat(label: str, value: str, color: Any) -> Line:
    return Line([Span(label, Style(fg=colors.DIM)), Span(value, Style(fg=color))])


def _blank() -> Line:
    return Line([Span("")])


def _ship_visual(game: Any) -> Block:
    ship = game.player.ship
    block = create_primary_block(f"VESSEL: {ship.name}")
    lines = [
        _stat("Class: ", str(ship.ship_type), colors.PRIMARY),
        _blank(),
        *(Line([Span(text)]) for text in get_ship_art(ship.ship_type).splitlines()),
        _blank(),
        Line([Span("["), Span("M", Style(fg=colors.WARNING)), Span("] Main Menu")]),
    ]
    return replace(block, lines=tuple(lines))


def _ship_stats(game: Any) -> Block:
    ship = game.player.ship
    used = game.player.inventory.used_capacity()
    block = create_info_block("TECHNICAL SPECIFICATIONS")
    lines = [
        _stat("Hull: ", f"{ship.hull}/{ship.max_hull}", colors.PRIMARY),
        _stat("Shield: ", f"{ship.shield}/{ship.max_shield}", colors.INFO),
        _stat("Cargo Capacity: ", f"{used}/{ship.cargo_capacity} units", colors.NORMAL),
        _blank(),
        _stat("Speed: ", f"{ship.speed} m/s", colors.NORMAL),
        _stat("Jump Range: ", f"{ship.jump_range} LY", colors.NORMAL),
        _blank(),
        _stat("Weapons: ", f"{ship.weapon_power}", colors.DANGER),
        _stat("Mining Power: ", f"{ship.mining_power}", colors.WARNING),
    ]
    return replace(block, lines=tuple(lines))


def draw_ship_screen(game: Any) -> tuple[Block, Block]:
    """Return the ship's artwork panel and its specifications panel."""
    return _ship_visual(game), _ship_stats(game)