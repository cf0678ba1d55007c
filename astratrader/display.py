"""Top-level layout: picks the screen to draw and frames it with status and messages."""

from __future__ import annotations

import time
from typing import Any

from . import colors
from .character_creation import draw_character_creation
from .character_info import draw_character_info
from .crafting import draw_crafting_screen
from .help import draw_help
from .inventory import draw_inventory
from .main_menu import draw_main_menu
from .market import draw_market_screen
from .mining import draw_mining_screen
from .navigation import draw_navigation_screen
from .orders import draw_orders_screen
from .screen import GameScreen
from .ship import draw_ship_screen
from .station_services import draw_station_services_screen
from .status_bar import draw_status_bar
from .style_utils import ALL_SIDES, Block, Line, Span, Style


def _screen_of(game: Any) -> GameScreen:
    value = game.current_screen
    if isinstance(value, GameScreen):
        return value
    return GameScreen(getattr(value, "value", value))


def _elapsed_ms(game: Any) -> int:
    last_update = getattr(game, "last_update", None)
    if last_update is None:
        return 0
    return max(0, int((time.monotonic() - last_update) * 1000))


def draw_quit_screen(game: Any) -> Block:
    """Build the quit confirmation panel."""
    return Block(
        title=Line([Span(" QUIT ", Style(fg=colors.DANGER))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DANGER),
        lines=(
            Line([Span("Are you sure you want to quit?", Style(fg=colors.WARNING))]),
            Line([Span("")]),
            Line([
                Span("Press ["),
                Span("Y", Style(fg=colors.PRIMARY)),
                Span("] to confirm or ["),
                Span("N", Style(fg=colors.DANGER)),
                Span("] to cancel"),
            ]),
        ),
    )


def draw_message_area(game: Any) -> Block:
    """Build the communications panel showing the game's latest message."""
    message = getattr(game, "message", None)
    line = Line([Span(message, Style(fg=colors.INFO))]) if message is not None else Line([Span("")])
    return Block(
        title=Line([Span(" COMMS ", Style(fg=colors.INFO))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DIM),
        lines=(line,),
    )


_SCREEN_DRAWERS = {
    GameScreen.NAVIGATION: draw_navigation_screen,
    GameScreen.MARKET: draw_market_screen,
    GameScreen.SHIP: draw_ship_screen,
    GameScreen.MINING: draw_mining_screen,
    GameScreen.CRAFTING: draw_crafting_screen,
    GameScreen.INVENTORY: draw_inventory,
    GameScreen.CHARACTER: draw_character_info,
    GameScreen.ORDERS: draw_orders_screen,
    GameScreen.STATION_SERVICES: draw_station_services_screen,
    GameScreen.HELP: draw_help,
    GameScreen.QUIT: draw_quit_screen,
}


def draw(game: Any) -> tuple[Any, Any, Block | None]:
    """Return ``(status_bar, content, message_area)`` for the current screen.

    The main menu and character creation take the whole terminal, so their
    status bar and message area are ``None``.
    """
    screen = _screen_of(game)
    if screen is GameScreen.MAIN_MENU:
        return None, draw_main_menu(game, _elapsed_ms(game)), None
    if screen is GameScreen.CHARACTER_CREATION:
        return None, draw_character_creation(game), None
    content = _SCREEN_DRAWERS[screen](game)
    return draw_status_bar(game), content, draw_message_area(game)