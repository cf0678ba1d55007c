"""The crafting screen: blueprints, their ingredients and cargo space."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from enum import Enum
from typing import Any

from . import colors
from .style_utils import (
    Block,
    Line,
    Span,
    Style,
    create_danger_block,
    create_info_block,
    create_primary_block,
)


class BlueprintRarity(Enum):
    """How rare a blueprint is."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    VERY_RARE = "VeryRare"
    EXCEPTIONAL = "Exceptional"
    LEGENDARY = "Legendary"

    def label(self) -> str:
        """Return the human-readable name."""
        return "Very Rare" if self is BlueprintRarity.VERY_RARE else self.value


def _rarity(value: Any) -> BlueprintRarity:
    if isinstance(value, BlueprintRarity):
        return value
    return BlueprintRarity(getattr(value, "value", value))


def _back_to_menu() -> Line:
    return Line([Span("Press ["), Span("M", Style(fg=colors.WARNING)), Span("] to return to the main menu")])


def _message(block: Block, text: str) -> Block:
    return replace(block, lines=(
        Line([Span(text, Style(fg=colors.WARNING))]),
        Line([Span("")]),
        _back_to_menu(),
    ))


def _blueprints_table(blueprints: list[Any]) -> Block:
    block = create_primary_block("AVAILABLE SCHEMATICS")
    header_style = Style(fg=colors.INFO)
    rows = [Line([Span("#", header_style), Span("Blueprint", header_style), Span("Rarity", header_style)])]
    for number, blueprint in enumerate(blueprints, start=1):
        rows.append(Line([
            Span(str(number)),
            Span(blueprint.name),
            Span(_rarity(blueprint.rarity).label()),
        ]))
    return replace(block, lines=tuple(rows))


def _ingredient_pairs(items: Any) -> list[tuple[str, int]]:
    if isinstance(items, Mapping):
        return list(items.items())
    return list(items)


def _ingredient_lines(game: Any) -> list[Line]:
    crafting = game.crafting_system
    if crafting.get_selected_blueprint_index() is None:
        return [Line([Span("Select a blueprint to see ingredients")])]
    blueprint = crafting.get_selected_blueprint()
    if blueprint is None:
        return [Line([Span("Blueprint data not found")])]
    recipe = crafting.recipes.get(blueprint.recipe_id)
    if recipe is None:
        return [Line([Span("Recipe data not found for this blueprint")])]

    lines = [
        Line([Span(f"Blueprint: {blueprint.name}", Style(fg=colors.PRIMARY))]),
        Line([Span("Requires:")]),
    ]
    inventory = game.player.inventory
    for name, amount in _ingredient_pairs(recipe.input_items):
        owned = inventory.get_item_quantity(name)
        style = Style(fg=colors.PRIMARY if owned >= amount else colors.DANGER)
        lines.append(Line([
            Span(f"- {name} x "),
            Span(f"{amount} ({owned}/{amount})", style),
        ]))
    lines.append(Line([Span("")]))
    lines.append(Line([
        Span("Rarity: "),
        Span(_rarity(blueprint.rarity).value, Style(fg=colors.INFO)),
    ]))
    return lines


def _player_info(game: Any) -> Block:
    block = create_primary_block("FABRICATION STATION")
    used = game.player.inventory.used_capacity()
    line = Line([
        Span("Cargo: "),
        Span(f"{used}/{game.player.ship.cargo_capacity}", Style(fg=colors.INFO)),
        Span("    ["),
        Span("M", Style(fg=colors.WARNING)),
        Span("] Main Menu"),
    ])
    return replace(block, lines=(line,))


def draw_crafting_screen(game: Any) -> tuple[Block, ...]:
    """Return the panels of the crafting screen.

    A single message panel when not docked or without blueprints; otherwise the
    blueprint table, the selected blueprint's ingredients and the cargo panel.
    """
    if not game.navigation_system.is_docked(game.player):
        return (_message(
            create_danger_block("FABRICATION ACCESS DENIED"),
            "You must be docked at a station to access crafting",
        ),)

    blueprints = list(game.crafting_system.get_available_blueprints())
    if not blueprints:
        return (_message(create_info_block("FABRICATION SCHEMATICS"), "No blueprints available"),)

    ingredients = replace(create_info_block("REQUIRED COMPONENTS"), lines=tuple(_ingredient_lines(game)))
    return _blueprints_table(blueprints), ingredients, _player_info(game)