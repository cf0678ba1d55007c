from types import SimpleNamespace

import pytest

from astratrader import colors
from astratrader.character_info import CharacterInfoTab, draw_character_info


class FakeSkill:
    def __init__(self, category, level, points, progress):
        self.category = category
        self.level = level
        self.points = points
        self._progress = progress

    def get_progress_to_next_level(self):
        return self._progress


def make_game(tab=0, credits=0, storyline=None):
    character = SimpleNamespace(name="Vega", faction="Traders", active_storyline=storyline)
    ship = SimpleNamespace(name="Dawn", ship_type="Scout")
    skills = SimpleNamespace(skills=[FakeSkill("Mining", 3, 10, 42.5)])
    player = SimpleNamespace(character=character, ship=ship, skills=skills, credits=credits)
    return SimpleNamespace(player=player, character_info_tab=tab)


@pytest.mark.parametrize("tab", list(CharacterInfoTab))
def test_index_round_trip(tab):
    assert CharacterInfoTab.from_index(tab.index()) is tab


def test_from_index_out_of_range_falls_back_to_skills():
    assert CharacterInfoTab.from_index(4) is CharacterInfoTab.SKILLS
    assert CharacterInfoTab.from_index(-1) is CharacterInfoTab.SKILLS


def test_frame_and_footer():
    frame, _, _, footer = draw_character_info(make_game())
    assert frame.plain_lines() == [" CHARACTER INFORMATION "]
    assert footer.plain_lines() == ["Press [1-4] to switch tabs, [M] to return to main menu"]


def test_tabs_highlight_selected():
    _, tabs, _, _ = draw_character_info(make_game(tab=2))
    spans = [s for s in tabs.lines[0].spans if s.text.strip() != "│"]
    assert [s.text for s in spans] == ["Skills", "Reputation", "Assets", "Background"]
    assert [s.style.bold for s in spans] == [False, False, True, False]


def test_skills_tab():
    _, _, content, _ = draw_character_info(make_game(tab=0))
    lines = content.plain_lines()
    assert lines[0] == " SKILLS "
    assert lines[1] == "Mining: Level 3"
    assert lines[2] == "Progress: 42.5% | Points: 10"


def test_reputation_tab():
    _, _, content, _ = draw_character_info(make_game(tab=1))
    lines = content.plain_lines()
    assert "Mining Consortium: Friendly" in lines
    assert "United Trade Federation: Neutral" in lines


def test_assets_tab_net_worth():
    _, _, content, _ = draw_character_info(make_game(tab=2, credits=0))
    lines = content.plain_lines()
    assert "Current Ship: Dawn" in lines
    assert "Ship Type: Scout" in lines
    assert lines[-1] == "Total Net Worth: 50000 credits"
    assert content.lines[-1].spans[1].style.fg == colors.SUCCESS


def test_background_tab_without_storyline():
    _, _, content, _ = draw_character_info(make_game(tab=3))
    lines = content.plain_lines()
    assert "Commander: Vega" in lines
    assert "Storyline: No active storyline" in lines
    assert lines[-1] == "You are a space trader seeking fortune among the stars."


def test_background_tab_with_storyline():
    story = SimpleNamespace(name="Smuggler's Run", background="Born on a freighter.")
    _, _, content, _ = draw_character_info(make_game(tab=3, storyline=story))
    lines = content.plain_lines()
    assert "Storyline: Smuggler's Run" in lines
    assert lines[-1] == "Born on a freighter."


def test_empty_storyline_background_uses_default():
    story = SimpleNamespace(name="Asteroid Baron", background="")
    _, _, content, _ = draw_character_info(make_game(tab=3, storyline=story))
    assert content.plain_lines()[-1] == "You are a space trader seeking fortune among the stars."


def test_unknown_tab_shows_skills():
    _, _, content, _ = draw_character_info(make_game(tab=9))
    assert content.plain_lines()[0] == " SKILLS "