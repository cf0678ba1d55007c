"""The animated main menu."""

from __future__ import annotations

from typing import Any

from . import colors
from .ascii_art import get_engine_particles, get_star_field, get_title_art
from .screen import GameScreen
from .style_utils import ALL_SIDES, Block, BorderType, Line, Span, Style

MENU_ANIMATION_SPEED = 150
BLINK_SPEED = 500

_OPTIONS = (
    ("[N]", "Navigation", GameScreen.NAVIGATION),
    ("[M]", "Market", GameScreen.MARKET),
    ("[S]", "Ship", GameScreen.SHIP),
    ("[R]", "Mining", GameScreen.MINING),
    ("[C]", "Crafting", GameScreen.CRAFTING),
    ("[I]", "Inventory", GameScreen.INVENTORY),
    ("[P]", "Character Profile", GameScreen.CHARACTER),
    ("[H]", "Help", GameScreen.HELP),
    ("[Q]", "Quit", GameScreen.QUIT),
)


def _item_colors(index: int, selected: bool, elapsed_ms: int) -> tuple[colors.Color, colors.Color]:
    if selected:
        cycle = MENU_ANIMATION_SPEED * 4
        phase = (elapsed_ms + index * MENU_ANIMATION_SPEED) % cycle
        if (phase // MENU_ANIMATION_SPEED) % 2 == 0:
            return colors.HIGHLIGHT, colors.PRIMARY
        return colors.PRIMARY, colors.HIGHLIGHT
    if elapsed_ms % (BLINK_SPEED * 2) < BLINK_SPEED:
        return colors.SECONDARY, colors.NORMAL
    return colors.INFO, colors.DIM


def get_animated_menu_items(current_screen: GameScreen, elapsed_ms: int) -> list[Line]:
    """Build the menu entries, coloured for the given moment of the animation."""
    items = []
    for index, (key, text, screen) in enumerate(_OPTIONS):
        key_color, text_color = _item_colors(index, screen == current_screen, elapsed_ms)
        items.append(Line([
            Span(key, Style(fg=key_color, bold=True)),
            Span(" "),
            Span(text, Style(fg=text_color)),
        ]))
    return items


def draw_main_menu(
    game: Any, elapsed_ms: int
) -> tuple[list[tuple[int, int, str]], str, list[tuple[int, int, str]], Block, Block]:
    """Return the star field, title art, engine particles, menu block and status block."""
    stars = get_star_field(elapsed_ms, game.animation_frame)
    particles = get_engine_particles(elapsed_ms)

    menu_block = Block(
        title=Line([Span(" COMMAND CONSOLE ", Style(fg=colors.PRIMARY))]),
        border_type=BorderType.DOUBLE,
        borders=ALL_SIDES,
        border_style=Style(fg=colors.SECONDARY),
        lines=get_animated_menu_items(game.current_screen, elapsed_ms),
    )

    player = game.player
    commander_info = (
        f"Commander: {player.character.name} | Ship: {player.ship.name} | "
        f"Credits: {player.credits} | Location: {player.current_system.name} | "
        f"Time: {game.time_system.get_formatted_time()}"
    )
    status_block = Block(
        borders=frozenset({"top"}),
        border_style=Style(fg=colors.DIM),
        title_alignment="center",
        lines=[Line([Span(commander_info, Style(fg=colors.INFO))])],
    )
    return stars, get_title_art(), particles, menu_block, status_block