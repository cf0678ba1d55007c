from astratrader import colors
from astratrader.menu import draw_menu
from astratrader.style_utils import ALL_SIDES


def test_menu_lines():
    block = draw_menu("Options", [("N", "Navigate"), ("Q", "Quit")])
    assert block.plain_lines() == ["Options", "[N] Navigate", "[Q] Quit"]
    assert block.borders == ALL_SIDES


def test_menu_keys_highlighted():
    block = draw_menu("Options", [("M", "Market")])
    key_span = block.lines[0].spans[1]
    assert key_span.text == "M"
    assert key_span.style.fg == colors.WARNING
    assert block.lines[0].spans[3].style.fg is None


def test_empty_menu():
    assert draw_menu("Empty", []).plain_lines() == ["Empty"]