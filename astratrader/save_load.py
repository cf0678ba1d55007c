"""Saving and loading game state as pretty-printed JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

SAVE_FILE = "savegame.json"


def save_game(state: Any, path: str | Path = SAVE_FILE) -> None:
    """Write ``state`` to ``path`` as indented JSON."""
    serialized = json.dumps(state, indent=2, ensure_ascii=False)
    Path(path).write_text(serialized, encoding="utf-8")


def load_game(path: str | Path = SAVE_FILE) -> Any:
    """Read game state from ``path``.

    Raises FileNotFoundError when there is no save file and ValueError when
    its content is not valid JSON.
    """
    save_path = Path(path)
    if not save_path.exists():
        raise FileNotFoundError("Save file not found")
    return json.loads(save_path.read_text(encoding="utf-8"))