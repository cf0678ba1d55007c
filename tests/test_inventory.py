from astratrader import colors
from astratrader.inventory import draw_inventory


def test_inventory_panel():
    block = draw_inventory(None)
    assert "CARGO MANIFEST" in block.title.plain()
    assert block.plain_lines()[1:] == ["Cargo manifest interface available in future update"]
    assert block.lines[0].spans[0].style.fg == colors.INFO
    assert block.border_style.fg == colors.SECONDARY