"""The mining screen: resource fields, active operations and equipment."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from . import colors
from .style_utils import ALL_SIDES, Block, Line, Span, Style


def _titled_block(title: str, title_color: colors.Color, lines: Iterable[Line]) -> Block:
    return Block(
        title=Line([Span(f" {title} ", Style(fg=title_color))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.SECONDARY),
        lines=tuple(lines),
    )


def describe_resources(resources: Any) -> str:
    """Name the first two resources of a field, noting how many more there are."""
    if isinstance(resources, Mapping):
        names = list(resources)
    else:
        names = [name for name, _ in resources]
    text = ", ".join(names[:2])
    if len(names) > 2:
        text = f"{text} (+{len(names) - 2})"
    return text


def _no_resources() -> Block:
    return _titled_block("MINING SCAN RESULTS", colors.WARNING, [
        Line([Span("No mineable resources in this system", Style(fg=colors.WARNING))]),
        Line([Span("")]),
        Line([Span("Press ["), Span("M", Style(fg=colors.WARNING)), Span("] to return to the main menu")]),
    ])


def _resource_fields(fields: list[Any]) -> Block:
    header_style = Style(fg=colors.INFO)
    rows = [Line([
        Span(text, header_style)
        for text in ("#", "Field Type", "Size", "Resources", "Required Level")
    ])]
    for number, field in enumerate(fields, start=1):
        rows.append(Line([
            Span(str(number)),
            Span(str(field.field_type)),
            Span(str(field.size)),
            Span(describe_resources(field.resources)),
            Span(str(field.field_type.required_mining_level())),
        ]))
    return _titled_block("DETECTED RESOURCE FIELDS", colors.PRIMARY, rows)


def _active_operations(game: Any) -> Block:
    operations = list(game.mining_system.get_mining_status())
    if operations:
        lines = [Line([Span(op)]) for op in operations]
    else:
        lines = [Line([
            Span("No active mining operations. Press "),
            Span("1-9", Style(fg=colors.WARNING)),
            Span(" to start mining a resource field."),
        ])]
    return _titled_block("ACTIVE MINING OPERATIONS", colors.SUCCESS, lines)


def _equipment(game: Any) -> Block:
    player = game.player
    return _titled_block("MINING EQUIPMENT", colors.WARNING, [Line([
        Span("Mining Power: "),
        Span(str(player.ship.mining_power), Style(fg=colors.INFO)),
        Span(" | Mining Level: "),
        Span(str(player.skills.get_mining_level()), Style(fg=colors.INFO)),
        Span(" | Press "),
        Span("S", Style(fg=colors.WARNING)),
        Span(" to stop mining"),
    ])])


def draw_mining_screen(game: Any) -> tuple[Block, ...]:
    """Return the mining panels, or a single notice when nothing can be mined here."""
    system = game.player.current_system
    fields = list(game.mining_system.get_resources_for_system(system.id))
    if not fields:
        return (_no_resources(),)
    return _resource_fields(fields), _active_operations(game), _equipment(game)