"""The inventory screen."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from . import colors
from .style_utils import Block, Line, Span, Style, create_primary_block


def draw_inventory(game: Any) -> Block:
    """Build the cargo manifest panel."""
    block = create_primary_block("CARGO MANIFEST")
    line = Line([
        Span("Cargo manifest interface available in future update", Style(fg=colors.INFO)),
    ])
    return replace(block, lines=(line,))