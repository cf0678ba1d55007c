import pytest

from astratrader.ascii_art import (
    PARTICLE_CHARS,
    STAR_CHARS,
    ShipType,
    get_engine_particles,
    get_ship_art,
    get_star_field,
    get_station_art,
    get_title_art,
)


def test_every_ship_has_distinct_art():
    arts = {get_ship_art(ship) for ship in ShipType}
    assert len(arts) == len(ShipType)
    assert all(art.strip() for art in arts)


def test_ship_art_accepts_value_name():
    assert get_ship_art("Scout") == get_ship_art(ShipType.SCOUT)


def test_unknown_ship_rejected():
    with pytest.raises(ValueError):
        get_ship_art("Battleship")


def test_station_and_title_art():
    assert "|__________|" in get_station_art()
    assert "█" in get_title_art()


def test_title_art_rows_have_equal_width():
    rows = [row for row in get_title_art().split("\n") if row]
    assert len(rows) == 5
    assert len({len(row) for row in rows}) == 1


def test_star_field_stays_out_of_menu_area():
    for frame in (0, 7, 123):
        stars = get_star_field(0, frame)
        assert 0 < len(stars) <= 100
        for x, y, char in stars:
            assert 0 <= x < 80 and 0 <= y < 24
            assert not (10 <= x < 70 and 5 <= y < 20)
            assert char in STAR_CHARS


def test_star_field_positions_do_not_depend_on_time():
    early = get_star_field(0, 5)
    later = get_star_field(200, 5)
    assert [(x, y) for x, y, _ in early] == [(x, y) for x, y, _ in later]
    assert [c for _, _, c in early] != [c for _, _, c in later]


def test_star_field_first_stars_pinned():
    stars = get_star_field(0, 0)
    assert stars[0] == (0, 0, "·")
    assert stars[1] == (11, 23, "*")


def test_engine_particles_bounds():
    for elapsed in (0, 99, 1234, 987654):
        particles = get_engine_particles(elapsed)
        assert len(particles) == 5
        for x, y, char in particles:
            assert 38 <= x <= 42
            assert y in (22, 23)
            assert char in PARTICLE_CHARS


def test_engine_particles_chars_start_at_first():
    chars = [c for _, _, c in get_engine_particles(0)]
    assert chars == list(PARTICLE_CHARS[:5])