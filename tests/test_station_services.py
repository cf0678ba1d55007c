from types import SimpleNamespace

import pytest

from astratrader.ascii_art import get_station_art
from astratrader.station_services import draw_station_services_screen, list_services


class _Nav:
    def __init__(self, docked):
        self.docked = docked

    def is_docked(self, player):
        return self.docked


def _ship(current=50, capacity=100):
    return SimpleNamespace(current_fuel=current, fuel_capacity=capacity)


def _station(services, name="Alpha Hub", station_type="Trading"):
    return SimpleNamespace(name=name, station_type=station_type, services=services)


def _game(stations, docked=True, ship=None):
    system = SimpleNamespace(name="Sol", stations=stations)
    player = SimpleNamespace(current_system=system, ship=ship or _ship())
    return SimpleNamespace(player=player, navigation_system=_Nav(docked))


def test_list_services_numbers_market_refuel_and_extras():
    rows = list_services(_station(["Repair", "Market", "Refueling", "Shipyard"]), _ship(50, 100))
    assert rows == [
        ("1", "Market", "Available"),
        ("2", "Refueling", "Available (50/100)"),
        ("3", "Repair", "Available"),
        ("4", "Shipyard", "Available"),
    ]


def test_list_services_full_tank():
    rows = list_services(_station(["Refueling"]), _ship(100, 100))
    assert rows == [("2", "Refueling", "Tank Full")]


def test_list_services_extras_start_at_three_without_market():
    rows = list_services(_station(["Repair"]), _ship())
    assert rows == [("3", "Repair", "Available")]


def test_list_services_empty():
    assert list_services(_station([]), _ship()) == []


def test_not_docked_shows_single_notice():
    panels = draw_station_services_screen(_game([_station(["Market"])], docked=False))
    assert len(panels) == 1
    plain = panels[0].plain_lines()
    assert "STATION ACCESS DENIED" in plain[0]
    assert plain[1] == "You must be docked at a station to access services"
    assert plain[3] == "Press [M] to return to the main menu"


def test_docked_station_visual_lists_details():
    visual, _ = draw_station_services_screen(_game([_station(["Market"])]))
    body = [line.plain() for line in visual.lines]
    art = get_station_art().splitlines()
    assert body[: len(art)] == art
    assert body[len(art):] == ["Name: Alpha Hub", "Type: Trading", "Status: Docked"]


def test_docked_services_table_and_details():
    _, services = draw_station_services_screen(_game([_station(["Market", "Refueling"])]))
    assert [span.text for span in services.lines[0].spans] == ["#", "Service", "Status"]
    body = [line.plain() for line in services.lines]
    assert body[1] == "1MarketAvailable"
    assert body[2] == "2RefuelingAvailable (50/100)"
    assert "[2] Refuel your ship - 25 credits per unit" in body
    assert body[-1] == "[M] Main Menu"


@pytest.mark.parametrize("index", [0, 1])
def test_missing_station_reports_error(index):
    panels = draw_station_services_screen(_game([]))
    assert panels[index].lines[-1].plain() == "Error: No station data"