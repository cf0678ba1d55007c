# astratrader

The presentation layer of a terminal space trading game. It builds the
content of every screen (main menu, navigation, market, mining, crafting,
orders, ship, station services, help, inventory, character creation and
character profile) as plain data: styled `Line`s grouped into `Block`s. It
also supplies the ASCII art, the colour palette, helpers for storing
monotonic instants in JSON, and saving and loading of game state.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building blocks

- `astratrader.colors` – the `Color` dataclass (`Color(r, g, b)`, with
  `hex()` giving `#RRGGBB`) and the palette constants `PRIMARY`,
  `SECONDARY`, `WARNING`, `DANGER`, `INFO`, `SUCCESS`, `NORMAL`,
  `DEFAULT_TEXT`, `DIM`, `HIGHLIGHT`, `ENERGY`, `SHIELD`, `HULL` and
  `STARS_BG`.
- `astratrader.style_utils` – `Style`, `Span`, `Line` (`plain()` returns the
  unstyled text), `BorderType` and `Block` (`plain_lines()` returns the title
  and body as plain strings); the themed blocks `create_primary_block`,
  `create_info_block`, `create_danger_block` and `create_status_bar`;
  `create_sci_fi_title`, `format_menu_option` and `create_gauge_text`; and
  `AnimationClock`, an eight-frame counter stepping at most every 200 ms,
  with `update_animation()` advancing a shared one.
- `astratrader.ascii_art` – `ShipType` and `get_ship_art`,
  `get_station_art`, `get_title_art`, plus the background animations
  `get_star_field(elapsed_ms, frame_num)` and
  `get_engine_particles(elapsed_ms)`, which return `(x, y, char)` tuples.
- `astratrader.screen` – the `GameScreen` enum; `uses_full_screen()` is true
  for the main menu and character creation.
- `astratrader.menu` – `draw_menu(title, items)` for a block of
  `[key] label` entries.

```python
from astratrader.ascii_art import ShipType, get_ship_art, get_title_art
from astratrader.colors import PRIMARY
from astratrader.style_utils import create_gauge_text, format_menu_option

print(get_title_art())
print(get_ship_art(ShipType.SCOUT))

gauge = create_gauge_text("Hull", 75, 100, PRIMARY)
print(gauge.plain())          # Hull: ████████░░ 75/100

option = format_menu_option("N", "Navigation", True)
print(option.plain())         # [N] Navigation
```

## Screens

Each screen is a function taking a game object and returning its panels:

| Module | Function |
| --- | --- |
| `main_menu` | `draw_main_menu(game, elapsed_ms)`, `get_animated_menu_items(current_screen, elapsed_ms)` |
| `navigation` | `draw_navigation_screen(game)`, `draw_navigation_info(game)` |
| `starmap` | `draw_starmap(game)` returning a `StarMap` of `MapMarker`s |
| `status_bar` | `draw_status_bar(game)`, `location_label(game)` |
| `market` | `draw_market_screen(game)`, `trend_arrow(trend)`, `sell_price(value)` |
| `orders` | `draw_orders_screen(game)`, with `OrderType` and `OrderStatus` |
| `mining` | `draw_mining_screen(game)`, `describe_resources(resources)` |
| `crafting` | `draw_crafting_screen(game)`, with `BlueprintRarity` |
| `ship` | `draw_ship_screen(game)` |
| `station_services` | `draw_station_services_screen(game)`, `list_services(station, ship)` |
| `character_creation` | `draw_character_creation(game)` |
| `character_info` | `draw_character_info(game)`, with `CharacterInfoTab` |
| `help`, `inventory` | `draw_help(game)`, `draw_inventory(game)` |

`astratrader.display.draw(game)` picks the screen for `game.current_screen`
and returns `(status_bar, content, message_area)`. The main menu and
character creation fill the whole terminal, so for them the status bar and
message area are `None`. `draw_quit_screen(game)` and
`draw_message_area(game)` build the quit confirmation and the panel showing
`game.message`.

The game object is duck-typed: the screens read attributes such as
`game.player` (with `character`, `ship`, `inventory`, `skills`, `credits`
and `current_system`), `game.navigation_system`, `game.trading_system`,
`game.mining_system`, `game.crafting_system`, `game.universe` and
`game.time_system`.

## Saving and loading

```python
from astratrader.save_load import save_game, load_game

save_game({"credits": 1000}, "savegame.json")
state = load_game("savegame.json")
```

Both default to `savegame.json` in the current directory. `save_game` writes
indented JSON; `load_game` raises `FileNotFoundError` when there is no save
file and `ValueError` when it is not valid JSON.

`astratrader.serialization` stores a `time.monotonic()` instant as the
`[seconds, nanoseconds]` elapsed since it (`serialize_instant`,
`serialize_optional_instant`) and rebuilds it relative to the moment of
loading (`deserialize_instant`, `deserialize_optional_instant`).

## What this package does not do

It does not draw to a terminal, read the keyboard or run a game loop: the
screens return data for a front end to render. It has no game model of its
own (players, ships, markets, the universe), no networking, and no command to
run.