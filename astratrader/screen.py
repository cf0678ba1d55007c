"""The screens the game can show."""

from __future__ import annotations

from enum import Enum


class GameScreen(Enum):
    """A top-level screen of the interface."""

    MAIN_MENU = "MainMenu"
    CHARACTER_CREATION = "CharacterCreation"
    NAVIGATION = "Navigation"
    MARKET = "Market"
    SHIP = "Ship"
    MINING = "Mining"
    CRAFTING = "Crafting"
    INVENTORY = "Inventory"
    CHARACTER = "Character"
    ORDERS = "Orders"
    STATION_SERVICES = "StationServices"
    HELP = "Help"
    QUIT = "Quit"

    def uses_full_screen(self) -> bool:
        """Whether the screen takes the whole terminal, without status bar or message area."""
        return self in (GameScreen.MAIN_MENU, GameScreen.CHARACTER_CREATION)