"""The character creation screen: name, faction, storyline and confirmation."""

from __future__ import annotations

from typing import Any, Iterable

from . import colors
from .style_utils import ALL_SIDES, Block, BorderType, Line, Span, Style

FACTION_NAMES = ("Traders", "Miners", "Military", "Scientists")
FACTION_DESCRIPTIONS = (
    "Masters of commerce who control galactic trade routes and economies.",
    "Experts in resource extraction, operating in the harshest environments.",
    "Protectors of human space, maintaining order and security.",
    "Innovators who push the boundaries of technology and exploration.",
)
FACTION_SHIP_CLASSES = ("Merchant Vessel", "Mining Barge", "Corvette", "Research Ship")

STORYLINE_NAMES = (
    ("Commerce Pioneer", "Smuggler's Run", "Galactic Entrepreneur"),
    ("Elite Prospector", "Master Refiner", "Asteroid Baron"),
    ("System Defense", "Special Operations", "Fleet Commander"),
    ("Research Pioneer", "Galactic Explorer", "Biotechnology Expert"),
)
STORYLINE_DESCRIPTIONS = (
    (
        "Establish trade routes throughout the galaxy and become a wealthy merchant.",
        "Master the art of moving goods through dangerous territories for higher profits.",
        "Build your own trading empire by investing in stations and infrastructure.",
    ),
    (
        "Discover and claim the richest mining locations in the galaxy.",
        "Specialize in processing raw materials into high-value refined goods.",
        "Control the asteroid belts and establish mining operations throughout the system.",
    ),
    (
        "Protect civilian shipping lanes from pirates and other threats.",
        "Undertake covert missions in rival territories and hostile zones.",
        "Lead a squadron of ships to maintain galactic peace and order.",
    ),
    (
        "Discover new technologies by studying cosmic phenomena and artifacts.",
        "Chart unexplored regions of space and document new discoveries.",
        "Research alien biology and develop enhancements for human survival in space.",
    ),
)

_SELECTED = Style(fg=colors.PRIMARY, bold=True)
_UNSELECTED = Style(fg=colors.DIM)


def _text_block(text: str, style: Style) -> Block:
    """A borderless block holding each line of ``text`` in one style."""
    return Block(lines=tuple(Line([Span(part, style)]) for part in text.split("\n")))


def _framed(lines: Iterable[Line]) -> Block:
    return Block(
        border_type=BorderType.ROUNDED,
        borders=ALL_SIDES,
        border_style=Style(fg=colors.SECONDARY),
        lines=tuple(lines),
    )


def _prompt(text: str) -> Block:
    return _text_block(text, Style(fg=colors.SECONDARY))


def _instructions(text: str) -> Block:
    return _text_block(text, Style(fg=colors.INFO))


def _options(entries: Iterable[str], selected: int) -> Block:
    return Block(lines=tuple(
        Line([Span(text, _SELECTED if index == selected else _UNSELECTED)])
        for index, text in enumerate(entries)
    ))


def _name_stage(game: Any) -> tuple[Block, Block, Block]:
    return (
        _prompt("Enter your character name:"),
        _framed([Line([Span(game.character_name, Style(fg=colors.PRIMARY))])]),
        _instructions(
            "Type your character name and press Enter to continue\n"
            "Backspace to delete characters"
        ),
    )


def _faction_stage(game: Any) -> tuple[Block, Block, Block]:
    entries = (
        f"{number}. {name} - {description}  (Ship: {ship})"
        for number, (name, description, ship) in enumerate(
            zip(FACTION_NAMES, FACTION_DESCRIPTIONS, FACTION_SHIP_CLASSES), start=1
        )
    )
    return (
        _prompt("Select your faction:"),
        _options(entries, game.selected_faction),
        _instructions("Press 1-4 to select a faction\nBackspace to return to name entry"),
    )


def _storyline_stage(game: Any) -> tuple[Block, Block, Block]:
    faction = game.selected_faction
    faction_name = FACTION_NAMES[faction]
    entries = (
        f"{number}. {name} - {description}"
        for number, (name, description) in enumerate(
            zip(STORYLINE_NAMES[faction], STORYLINE_DESCRIPTIONS[faction]), start=1
        )
    )
    return (
        _prompt(f"Select your {faction_name} storyline:"),
        _options(entries, game.selected_storyline),
        _instructions(
            "Press 1-3 to select a storyline\nBackspace to return to faction selection"
        ),
    )


def _confirm_stage(game: Any) -> tuple[Block, Block, Block]:
    faction = game.selected_faction
    storyline = game.selected_storyline
    label = Style(fg=colors.INFO)
    blank = Line([Span("")])
    summary = [
        Line([Span("Name: ", label), Span(game.character_name, _SELECTED)]),
        blank,
        Line([Span("Faction: ", label), Span(FACTION_NAMES[faction], _SELECTED)]),
        Line([
            Span("Starting Ship: ", label),
            Span(FACTION_SHIP_CLASSES[faction], Style(fg=colors.SECONDARY)),
        ]),
        blank,
        Line([Span("Storyline: ", label), Span(STORYLINE_NAMES[faction][storyline], _SELECTED)]),
        Line([
            Span("Description: ", label),
            Span(STORYLINE_DESCRIPTIONS[faction][storyline], Style(fg=colors.SECONDARY)),
        ]),
    ]
    return (
        _prompt("Confirm your character:"),
        _framed(summary),
        _instructions(
            "Press Y to confirm and start game\nPress N to start over\n"
            "Backspace to return to storyline selection"
        ),
    )


_STAGES = {
    0: _name_stage,
    1: _faction_stage,
    2: _storyline_stage,
    3: _confirm_stage,
}


def draw_character_creation(game: Any) -> tuple[Block, ...]:
    """Return the title, prompt, content and instruction panels for the current stage.

    An unknown stage yields only the title and an error panel.
    """
    title = _text_block("CHARACTER CREATION", _SELECTED)
    stage = _STAGES.get(game.creation_stage)
    if stage is None:
        error = _text_block(
            "Error in character creation process. Please restart the game.",
            Style(fg=colors.DANGER),
        )
        return title, error
    return (title, *stage(game))