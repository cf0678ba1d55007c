import math
from dataclasses import dataclass, field
from datetime import timedelta
from types import SimpleNamespace

from astratrader import colors
from astratrader.navigation import draw_navigation_info, draw_navigation_screen
from astratrader.starmap import StarMap


@dataclass
class FakeSystem:
    id: str
    name: str
    x: int
    y: int
    stations: list = field(default_factory=list)


class FakeNav:
    def __init__(self, docked):
        self.docked = docked

    def is_docked(self, player):
        return self.docked

    def calculate_distance(self, a, b):
        return math.hypot(a.x - b.x, a.y - b.y)

    def calculate_travel_time(self, distance):
        return timedelta(seconds=distance * 60)

    def is_in_range(self, player, distance):
        return distance <= player.ship.jump_range


class FakeUniverse:
    def __init__(self, systems):
        self.systems = systems

    def get_all_systems(self):
        return list(self.systems)

    def get_nearby_systems(self, system):
        return [s for s in self.systems if s.id != system.id]


def make_game(docked=True, stations=("Alpha Station",), others=()):
    alpha = FakeSystem("a", "Alpha", 0, 0, list(stations))
    player = SimpleNamespace(current_system=alpha, ship=SimpleNamespace(jump_range=10))
    return SimpleNamespace(
        player=player,
        navigation_system=FakeNav(docked),
        universe=FakeUniverse([alpha, *others]),
    )


def texts(block):
    return [line.plain() for line in block.lines]


def test_location_and_coordinates():
    lines = texts(draw_navigation_info(make_game(docked=True)))
    assert lines[0] == "Current Location: Alpha (Docked)"
    assert lines[1] == "Coordinates: (0, 0)"
    assert lines[3] == "Nearby Systems:"


def test_no_nearby_systems():
    assert "No systems in range" in texts(draw_navigation_info(make_game()))


def test_nearby_system_line():
    beta = FakeSystem("b", "Beta", 3, 4)
    lines = texts(draw_navigation_info(make_game(others=[beta])))
    assert "[1] Beta - 5.0 LY, 5 mins" in lines


def test_out_of_range_system_is_dim():
    far = FakeSystem("f", "Far", 50, 0)
    near = FakeSystem("n", "Near", 1, 0)
    block = draw_navigation_info(make_game(others=[near, far]))
    near_line = next(l for l in block.lines if l.plain().startswith("[1] Near"))
    far_line = next(l for l in block.lines if l.plain().startswith("[2] Far"))
    assert near_line.spans[0].style.fg == colors.NORMAL
    assert far_line.spans[0].style.fg == colors.DIM


def test_docked_station_options():
    lines = texts(draw_navigation_info(make_game(docked=True)))
    assert "Station: Docked" in lines
    assert "[U] Undock" in lines
    assert "[T] Station Services" in lines
    assert "[D] Dock" not in lines


def test_undocked_station_options():
    lines = texts(draw_navigation_info(make_game(docked=False)))
    assert lines[0] == "Current Location: Alpha (Space)"
    assert "Station: Alpha Station" in lines
    assert "[D] Dock" in lines
    assert "[U] Undock" not in lines


def test_no_station():
    lines = texts(draw_navigation_info(make_game(stations=())))
    assert "Station: None" in lines
    assert "[D] Dock" not in lines


def test_ends_with_main_menu_hint():
    assert texts(draw_navigation_info(make_game()))[-1] == "[M] Main Menu"


def test_title():
    block = draw_navigation_info(make_game())
    assert block.title.plain() == " NAVIGATION SYSTEMS "


def test_screen_combines_map_and_panel():
    game = make_game()
    star_map, panel = draw_navigation_screen(game)
    assert isinstance(star_map, StarMap)
    assert panel == draw_navigation_info(game)