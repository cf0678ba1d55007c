"""The character information screen with its four tabs."""

from __future__ import annotations

from enum import Enum
from typing import Any

from . import colors
from .style_utils import ALL_SIDES, Block, Line, Span, Style

_TAB_TITLES = ("Skills", "Reputation", "Assets", "Background")
_SHIP_VALUE = 50000
_DEFAULT_BACKGROUND = "You are a space trader seeking fortune among the stars."

_HEADING = Style(fg=colors.PRIMARY, bold=True)


class CharacterInfoTab(Enum):
    """A tab of the character information screen."""

    SKILLS = 0
    REPUTATION = 1
    ASSETS = 2
    BACKGROUND = 3

    def index(self) -> int:
        """Return the tab's position."""
        return self.value

    @classmethod
    def from_index(cls, index: int) -> "CharacterInfoTab":
        """Return the tab at ``index``, falling back to the skills tab."""
        try:
            return cls(index)
        except ValueError:
            return cls.SKILLS


def _tab_block(title: str, lines: list[Line]) -> Block:
    return Block(
        title=Line([Span(f" {title} ", Style(fg=colors.INFO))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.DIM),
        lines=tuple(lines),
    )


def _blank() -> Line:
    return Line([Span("")])


def _display_name(value: Any) -> str:
    return str(value.value) if isinstance(value, Enum) else str(value)


def _skills_tab(game: Any) -> Block:
    lines = []
    for skill in game.player.skills.skills:
        progress = skill.get_progress_to_next_level()
        lines.append(Line([Span(f"{skill.category}: Level {skill.level}", _HEADING)]))
        lines.append(Line([
            Span(f"Progress: {progress:.1f}% | Points: {skill.points}", Style(fg=colors.INFO)),
        ]))
        lines.append(_blank())
    return _tab_block("SKILLS", lines)


def _reputation_tab(game: Any) -> Block:
    neutral = Style(fg=colors.INFO)
    return _tab_block("REPUTATION", [
        Line([Span("Faction Relations:", _HEADING)]),
        _blank(),
        Line([Span("United Trade Federation: "), Span("Neutral", neutral)]),
        Line([Span("Mining Consortium: "), Span("Friendly", Style(fg=colors.SUCCESS))]),
        Line([Span("Galactic Security Force: "), Span("Neutral", neutral)]),
        Line([Span("Scientific Academy: "), Span("Neutral", neutral)]),
    ])


def _assets_tab(game: Any) -> Block:
    player = game.player
    info = Style(fg=colors.INFO)
    success = Style(fg=colors.SUCCESS)
    return _tab_block("ASSETS", [
        Line([Span("Financial Assets:", _HEADING)]),
        Line([Span("Credits: "), Span(str(player.credits), success)]),
        _blank(),
        Line([Span("Ships:", _HEADING)]),
        Line([Span("Current Ship: "), Span(player.ship.name, info)]),
        Line([Span("Ship Type: "), Span(_display_name(player.ship.ship_type), info)]),
        Line([Span("Ship Value: "), Span("50,000 credits (estimated)", success)]),
        _blank(),
        Line([
            Span("Total Net Worth:", _HEADING),
            Span(f" {player.credits + _SHIP_VALUE} credits", Style(fg=colors.SUCCESS, bold=True)),
        ]),
    ])


def _background_tab(game: Any) -> Block:
    character = game.player.character
    storyline = character.active_storyline
    storyline_name = storyline.name if storyline is not None else "No active storyline"
    background = storyline.background if storyline is not None and storyline.background else _DEFAULT_BACKGROUND
    info = Style(fg=colors.INFO)
    return _tab_block("BACKGROUND", [
        Line([Span(f"Commander: {character.name}", _HEADING)]),
        Line([Span("Faction: "), Span(str(character.faction), info)]),
        Line([Span("Storyline: "), Span(storyline_name, info)]),
        _blank(),
        Line([Span("Background:", _HEADING)]),
        _blank(),
        Line([Span(background)]),
    ])


_TAB_DRAWERS = {
    CharacterInfoTab.SKILLS: _skills_tab,
    CharacterInfoTab.REPUTATION: _reputation_tab,
    CharacterInfoTab.ASSETS: _assets_tab,
    CharacterInfoTab.BACKGROUND: _background_tab,
}


def _tabs(selected: int) -> Block:
    spans = []
    for index, title in enumerate(_TAB_TITLES):
        if index:
            spans.append(Span(" │ ", Style(fg=colors.DIM)))
        style = _HEADING if index == selected else Style(fg=colors.PRIMARY)
        spans.append(Span(title, style))
    return Block(borders=frozenset({"bottom"}), lines=(Line(spans),))


def _footer() -> Block:
    key = Style(fg=colors.PRIMARY)
    return Block(
        borders=frozenset({"top"}),
        title_alignment="center",
        lines=(Line([
            Span("Press ["),
            Span("1", key),
            Span("-"),
            Span("4", key),
            Span("] to switch tabs, ["),
            Span("M", key),
            Span("] to return to main menu"),
        ]),),
    )


def draw_character_info(game: Any) -> tuple[Block, Block, Block, Block]:
    """Return the outer frame, the tab bar, the active tab's panel and the footer."""
    frame = Block(
        title=Line([Span(" CHARACTER INFORMATION ", Style(fg=colors.PRIMARY))]),
        borders=ALL_SIDES,
        border_style=Style(fg=colors.PRIMARY),
    )
    selected = game.character_info_tab
    content = _TAB_DRAWERS[CharacterInfoTab.from_index(selected)](game)
    return frame, _tabs(selected), content, _footer()