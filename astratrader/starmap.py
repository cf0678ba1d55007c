"""The star map showing nearby systems and the ship's jump range."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from . import colors
from .colors import Color
from .style_utils import ALL_SIDES, Block, Line, Span, Style

CIRCLE_COLOR = Color(50, 50, 180)
_PADDING = 2.0
_CIRCLE_POINTS = 60
_VIEW_FACTOR = 1.5
_LABEL_OFFSET = 0.5


@dataclass(frozen=True)
class MapMarker:
    """A system drawn as a coloured dot, optionally labelled with its name."""

    x: float
    y: float
    color: Color
    label: str | None = None

    @property
    def label_position(self) -> tuple[float, float]:
        """Where the label is printed, just below the dot."""
        return (self.x, self.y - _LABEL_OFFSET)


@dataclass(frozen=True)
class StarMap:
    """Everything needed to paint the star map."""

    block: Block
    x_bounds: tuple[float, float]
    y_bounds: tuple[float, float]
    range_circle: tuple[tuple[float, float], ...]
    circle_color: Color
    markers: tuple[MapMarker, ...]


def _range_circle(cx: float, cy: float, radius: float) -> tuple[tuple[float, float], ...]:
    return tuple(
        (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
        for angle in (i * 2.0 * math.pi / _CIRCLE_POINTS for i in range(_CIRCLE_POINTS))
    )


def draw_starmap(game: Any) -> StarMap:
    """Lay out the star map around the player's current system."""
    player = game.player
    nav = game.navigation_system
    current = player.current_system
    jump_range = float(player.ship.jump_range)
    systems = list(game.universe.get_all_systems())

    cx, cy = float(current.x), float(current.y)
    min_x, max_x = cx - jump_range - _PADDING, cx + jump_range + _PADDING
    min_y, max_y = cy - jump_range - _PADDING, cy + jump_range + _PADDING

    for system in systems:
        if nav.calculate_distance(current, system) <= jump_range * _VIEW_FACTOR:
            min_x = min(min_x, system.x - _PADDING)
            max_x = max(max_x, system.x + _PADDING)
            min_y = min(min_y, system.y - _PADDING)
            max_y = max(max_y, system.y + _PADDING)

    markers = []
    for system in systems:
        in_range = nav.calculate_distance(current, system) <= jump_range
        is_current = system.id == current.id
        if is_current:
            color = colors.PRIMARY
        elif in_range:
            color = colors.INFO if system.stations else colors.NORMAL
        else:
            color = colors.DIM
        label = system.name if is_current or in_range else None
        markers.append(MapMarker(float(system.x), float(system.y), color, label))

    block = Block(
        title=Line([Span(" STELLAR CARTOGRAPHY ", Style(fg=colors.PRIMARY))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.SECONDARY),
    )
    return StarMap(
        block=block,
        x_bounds=(min_x, max_x),
        y_bounds=(min_y, max_y),
        range_circle=_range_circle(cx, cy, jump_range),
        circle_color=CIRCLE_COLOR,
        markers=tuple(markers),
    )