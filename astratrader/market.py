"""The market screen: trading mode, merchandise, finances and market info."""

from __future__ import annotations

import struct
from collections.abc import Mapping
from dataclasses import replace
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

_SELL_FACTOR = 0.9
_U32_MAX = 2**32 - 1

_TREND_ARROWS = {
    "Skyrocketing": "▲▲▲",
    "Rising": "▲▲",
    "Increasing": "▲",
    "Stable": "◆",
    "Decreasing": "▼",
    "Falling": "▼▼",
    "Plummeting": "▼▼▼",
}
_DEFAULT_ARROW = "◆"

# Placeholder market details shown in buy mode.
_MARKET_TYPE = "Trading Hub"
_TAX_RATE = 5


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def trend_arrow(trend: str | None) -> str:
    """Return the arrow glyphs for a price trend name; unknown trends are stable."""
    if trend is None:
        return _DEFAULT_ARROW
    return _TREND_ARROWS.get(trend, _DEFAULT_ARROW)


def sell_price(value: int) -> int:
    """Return the price a market pays for an item worth ``value`` (90%, truncated)."""
    if value < 0:
        raise ValueError("item value must not be negative")
    product = _f32(_f32(float(value)) * _f32(_SELL_FACTOR))
    return min(int(product), _U32_MAX)


def _back_to_menu() -> Line:
    return Line([Span("Press ["), Span("M", Style(fg=colors.WARNING)), Span("] to return to the main menu")])


def _not_docked() -> Block:
    return replace(create_danger_block("MARKET ACCESS DENIED"), lines=(
        Line([Span("You must be docked at a station to access the market", Style(fg=colors.WARNING))]),
        Line([Span("")]),
        _back_to_menu(),
    ))


def _mode_block(buy: bool) -> Block:
    line = Line([
        Span("["),
        Span("B", Style(fg=colors.PRIMARY if buy else colors.WARNING)),
        Span("] Buy Items    ["),
        Span("S", Style(fg=colors.WARNING if buy else colors.PRIMARY)),
        Span("] Sell Items    ["),
        Span("M", Style(fg=colors.WARNING)),
        Span("] Main Menu"),
    ])
    return replace(create_primary_block("TRADING CONSOLE"), lines=(line,))


def _pairs(items: Any) -> list[tuple[Any, int]]:
    if isinstance(items, Mapping):
        return list(items.items())
    return list(items)


def _market_items(game: Any, buy: bool) -> list[tuple[Any, int]]:
    if buy:
        system = game.player.current_system
        return _pairs(game.universe.get_market_items_for_system(system.id))
    return _pairs(game.player.inventory.items)


def _trend_text(game: Any, name: str) -> str:
    info = game.trading_system.get_price_trend_info(name)
    if info is None:
        return _DEFAULT_ARROW
    _, trend = info
    return trend_arrow(trend)


def _items_block(game: Any, buy: bool) -> Block:
    block = create_primary_block("AVAILABLE MERCHANDISE" if buy else "CARGO MANIFEST")
    items = _market_items(game, buy)
    if not items:
        message = "No items available for purchase" if buy else "Your cargo hold is empty"
        return replace(block, lines=(Line([Span(message, Style(fg=colors.DIM))]),))

    header_style = Style(fg=colors.INFO)
    headings = ("#", "Item", "Quantity", "Price", "Trend") if buy else ("#", "Item", "Quantity", "Sell Price")
    rows = [Line([Span(text, header_style) for text in headings])]
    for number, (item, quantity) in enumerate(items, start=1):
        price = item.value if buy else sell_price(item.value)
        cells = [str(number), item.name, str(quantity), f"{price} cr"]
        if buy:
            cells.append(_trend_text(game, item.name))
        rows.append(Line([Span(cell) for cell in cells]))
    return replace(block, lines=tuple(rows))


def _cargo_text(game: Any) -> str:
    return f"{game.player.inventory.used_capacity()}/{game.player.ship.cargo_capacity}"


def _player_info(game: Any) -> Block:
    line = Line([
        Span("Credits: "),
        Span(f"{game.player.credits} cr", Style(fg=colors.INFO)),
        Span("    Cargo: "),
        Span(_cargo_text(game), Style(fg=colors.INFO)),
    ])
    return replace(create_info_block("FINANCIAL STATUS"), lines=(line,))


def _comms(game: Any, buy: bool) -> Block:
    if buy:
        line = Line([
            Span("Market Type: "),
            Span(_MARKET_TYPE, Style(fg=colors.INFO)),
            Span("  |  Tax Rate: "),
            Span(f"{_TAX_RATE}%", Style(fg=colors.INFO)),
            Span("  |  Press ["),
            Span("1-9", Style(fg=colors.PRIMARY)),
            Span("] to buy an item"),
        ])
    else:
        line = Line([
            Span("SELLING FROM CARGO: "),
            Span(f"{_cargo_text(game)} units", Style(fg=colors.INFO)),
            Span("  |  Press ["),
            Span("1-9", Style(fg=colors.PRIMARY)),
            Span("] to sell an item"),
        ])
    return replace(create_info_block("MARKET INFO"), lines=(line,))


def draw_market_screen(game: Any) -> tuple[Block, ...]:
    """Return the market panels, or a single notice when the ship is not docked.

    The panels are the trading mode, the item table, the financial status and
    the market information.
    """
    if not game.navigation_system.is_docked(game.player):
        return (_not_docked(),)
    buy = game.trading_system.is_buy_mode()
    return _mode_block(buy), _items_block(game, buy), _player_info(game), _comms(game, buy)