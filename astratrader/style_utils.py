"""Styled text primitives and the themed blocks used across screens."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from . import colors
from .colors import Color

ALL_SIDES = frozenset({"top", "right", "bottom", "left"})
NO_SIDES: frozenset[str] = frozenset()

_ANIMATION_STEP = 0.2
_ANIMATION_FRAMES = 8
_GAUGE_WIDTH = 10


@dataclass(frozen=True)
class Style:
    """Foreground colour and weight of a piece of text."""

    fg: Color | None = None
    bold: bool = False


@dataclass(frozen=True)
class Span:
    """A run of text in a single style."""

    text: str
    style: Style = Style()


@dataclass(frozen=True)
class Line:
    """A line of styled spans."""

    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "spans", tuple(self.spans))

    def plain(self) -> str:
        """Return the text of the line without styling."""
        return "".join(span.text for span in self.spans)


class BorderType(Enum):
    """How a block's border is drawn."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"


@dataclass(frozen=True)
class Block:
    """A bordered, titled panel holding lines of text."""

    title: Line | None = None
    title_alignment: str = "left"
    border_type: BorderType = BorderType.PLAIN
    borders: frozenset[str] = NO_SIDES
    border_style: Style = Style()
    lines: tuple[Line, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "borders", frozenset(self.borders))
        unknown = self.borders - ALL_SIDES
        if unknown:
            raise ValueError(f"unknown border sides: {sorted(unknown)}")

    def plain_lines(self) -> list[str]:
        """Return the title (if any) followed by the body lines, as plain text."""
        body = [line.plain() for line in self.lines]
        return [self.title.plain(), *body] if self.title is not None else body


class AnimationClock:
    """An eight-frame counter that advances at most every 200 ms."""

    def __init__(self) -> None:
        self.counter = 0
        self.last_update: float | None = None

    def tick(self, now: float) -> int:
        """Advance the counter if enough time has passed since the last step."""
        if self.last_update is None:
            self.last_update = now
        elif now - self.last_update >= _ANIMATION_STEP:
            self.counter = (self.counter + 1) % _ANIMATION_FRAMES
            self.last_update = now
        return self.counter


_CLOCK = AnimationClock()


def update_animation() -> int:
    """Advance the shared animation clock and return its frame."""
    return _CLOCK.tick(time.monotonic())


def _border_char(counter: int) -> str:
    return ("═", "≡", "≣", "≡")[counter % 4]


def create_sci_fi_title(title: str, status: str | None = None) -> Line:
    """Build an animated title line, optionally followed by a status."""
    char = _border_char(update_animation())
    spans = [
        Span(f" {char} ", Style(fg=colors.INFO)),
        Span(f" {title} ", Style(fg=colors.PRIMARY, bold=True)),
        Span(f" {char} ", Style(fg=colors.INFO)),
    ]
    if status is not None:
        spans.append(Span(" | ", Style(fg=colors.DIM)))
        spans.append(Span(status, Style(fg=colors.WARNING)))
    return Line(spans)


def _themed_block(title: str, border_type: BorderType, border_color: Color) -> Block:
    update_animation()
    return Block(
        title=create_sci_fi_title(title),
        title_alignment="center",
        border_type=border_type,
        borders=ALL_SIDES,
        border_style=Style(fg=border_color),
    )


def create_primary_block(title: str) -> Block:
    """A rounded block with the primary theme."""
    return _themed_block(title, BorderType.ROUNDED, colors.SECONDARY)


def create_info_block(title: str) -> Block:
    """A rounded block with the information theme."""
    return _themed_block(title, BorderType.ROUNDED, colors.INFO)


def create_danger_block(title: str) -> Block:
    """A double-bordered block with the danger theme."""
    return _themed_block(title, BorderType.DOUBLE, colors.DANGER)


def create_status_bar(title: str) -> Block:
    """A block bordered only above and below, with a dim title."""
    return Block(
        title=Line([Span(f" {title} ", Style(fg=colors.DIM))]),
        borders=frozenset({"top", "bottom"}),
        border_style=Style(fg=colors.DIM),
    )


def format_menu_option(key: str, label: str, is_selected: bool) -> Line:
    """Render ``[key] label`` with the key highlighted."""
    key_color = colors.PRIMARY if is_selected else colors.WARNING
    return Line([
        Span("["),
        Span(str(key), Style(fg=key_color)),
        Span("] "),
        Span(label, Style(fg=colors.NORMAL)),
    ])


def _filled_cells(current: int, maximum: int) -> int:
    if maximum == 0:
        return 0 if current == 0 else _GAUGE_WIDTH
    # round half away from zero, as the gauge has always done
    return min(_GAUGE_WIDTH, math.floor(current / maximum * _GAUGE_WIDTH + 0.5))


def create_gauge_text(label: str, current: int, maximum: int, color: Color) -> Line:
    """Render a ten-cell gauge such as ``Hull: █████░░░░░ 50/100``."""
    if current < 0 or maximum < 0:
        raise ValueError("gauge values must not be negative")
    filled = _filled_cells(current, maximum)
    bar = "█" * filled + "░" * (_GAUGE_WIDTH - filled)
    return Line([
        Span(f"{label}: ", Style(fg=colors.DIM)),
        Span(bar, Style(fg=color)),
        Span(f" {current}/{maximum}", Style(fg=colors.NORMAL)),
    ])


def lines_from(texts: Iterable[str]) -> tuple[Line, ...]:
    """Wrap plain strings as unstyled lines."""
    return tuple(Line([Span(text)]) for text in texts)