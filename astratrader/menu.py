"""A simple bordered menu of key/label pairs."""

from __future__ import annotations

from typing import Iterable

from . import colors
from .style_utils import ALL_SIDES, Block, Line, Span, Style


def draw_menu(title: str, items: Iterable[tuple[str, str]]) -> Block:
    """Build a block listing ``[key] label`` for each item."""
    lines = [
        Line([Span("["), Span(key, Style(fg=colors.WARNING)), Span("] "), Span(label)])
        for key, label in items
    ]
    return Block(title=Line([Span(title)]), borders=ALL_SIDES, lines=lines)