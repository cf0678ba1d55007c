"""The help screen."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from . import colors
from .style_utils import Block, Line, Span, Style, create_primary_block


def draw_help(game: Any) -> Block:
    """Build the command manual panel."""
    block = create_primary_block("COMMAND MANUAL")
    line = Line([
        Span("Command reference database available in future update", Style(fg=colors.INFO)),
    ])
    return replace(block, lines=(line,))