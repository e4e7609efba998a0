"""Plain-text save files.

Layout, one token group per line::

    player name
    hp hp_max mp mp_max
    attack defense
    level exp gold
    row column
    inventory count
    item name            \\ repeated
    type_tag value qty   / inventory count times

The format carries no version marker; loading is the exact inverse of
saving. The world map is not stored.
"""

import os
from dataclasses import dataclass
from typing import Iterator, Optional

from ..core.data.data_structures import Vector2
from ..core.data.game_enums import ItemType
from .entities.inventory import Inventory, Item
from .entities.player import Player


class SaveFileError(ValueError):
    """Raised when a save file exists but cannot be parsed."""


@dataclass
class SaveData:
    """Contents of a save file."""
    player: Player
    items: list[Item]


def format_save(player: Player, inventory: Inventory) -> str:
    """Render the save-file text for ``player`` and ``inventory``."""
    lines = [
        player.name,
        f"{player.hp} {player.hp_max} {player.mp} {player.mp_max}",
        f"{player.attack} {player.defense}",
        f"{player.level} {player.exp} {player.gold}",
        f"{player.position.y} {player.position.x}",
        f"{len(inventory)}",
    ]
    for item in inventory:
        lines.append(item.name)
        lines.append(f"{item.item_type.value} {item.value} {item.quantity}")
    return "\n".join(lines) + "\n"


def save_game(path: str, player: Player, inventory: Inventory) -> None:
    """Write the session to ``path``. Raises OSError if it cannot be written."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(format_save(player, inventory))


class _LineReader:
    """Sequential access to save-file lines with line-numbered errors."""

    def __init__(self, text: str):
        # Only "\n" ends a line; names may contain any other break character
        self._lines: Iterator[str] = (line.removesuffix("\r") for line in text.split("\n"))
        self.line_number = 0

    def text(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise SaveFileError(f"Unexpected end of file after line {self.line_number}") from None
        self.line_number += 1
        return line

    def ints(self, count: int) -> list[int]:
        line = self.text()
        tokens = line.split()
        if len(tokens) != count:
            raise SaveFileError(
                f"Line {self.line_number}: expected {count} numbers, got {line!r}"
            )
        try:
            return [int(token) for token in tokens]
        except ValueError:
            raise SaveFileError(
                f"Line {self.line_number}: expected {count} numbers, got {line!r}"
            ) from None


def parse_save(text: str, map_size: Optional[int] = None) -> SaveData:
    """Parse save-file text. Raises SaveFileError on malformed content."""
    reader = _LineReader(text)

    name = reader.text()
    if not name:
        raise SaveFileError("Line 1: player name is empty")
    hp, hp_max, mp, mp_max = reader.ints(4)
    attack, defense = reader.ints(2)
    level, exp, gold = reader.ints(3)
    row, column = reader.ints(2)

    if not (0 <= hp <= hp_max and 0 <= mp <= mp_max):
        raise SaveFileError("HP/MP outside [0, max]")
    if level < 1 or exp < 0 or gold < 0:
        raise SaveFileError("Level must be >= 1; exp and gold must be >= 0")
    if map_size is not None and not (0 <= row < map_size and 0 <= column < map_size):
        raise SaveFileError(f"Position ({row},{column}) is outside the map")

    (count,) = reader.ints(1)
    if count < 0:
        raise SaveFileError("Inventory count must be >= 0")

    items = []
    for _ in range(count):
        item_name = reader.text()
        type_tag, value, quantity = reader.ints(3)
        try:
            item_type = ItemType(type_tag)
        except ValueError:
            raise SaveFileError(
                f"Line {reader.line_number}: unknown item type {type_tag}"
            ) from None
        if quantity < 1:
            raise SaveFileError(f"Line {reader.line_number}: quantity must be >= 1")
        items.append(Item(item_name, item_type, value, quantity))

    player = Player(
        name=name,
        hp=hp,
        hp_max=hp_max,
        mp=mp,
        mp_max=mp_max,
        attack=attack,
        defense=defense,
        level=level,
        exp=exp,
        gold=gold,
        position=Vector2(row, column),
    )
    return SaveData(player=player, items=items)


def load_game(path: str, map_size: Optional[int] = None) -> Optional[SaveData]:
    """Read a save file.

    Returns:
        The saved player and items, or None if ``path`` does not exist
    """
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return parse_save(text, map_size)
