"""Session context shared by every rule.

A :class:`GameSession` bundles all mutable state of one play-through. The
encounter, combat and progression managers receive it explicitly instead of
reaching for module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from ..core.config_loader import GameConfig
from ..core.data.game_enums import GamePhase
from ..core.random_utils import create_rng
from .entities.inventory import Inventory, Item
from .entities.player import Player
from .map import GameMap


@dataclass
class GameSession:
    """Everything one running game owns."""

    config: GameConfig
    player: Player
    inventory: Inventory
    game_map: GameMap
    rng: np.random.Generator
    phase: GamePhase = GamePhase.EXPLORING
    turn: int = 0
    save_path: Optional[str] = field(default=None)

    @classmethod
    def new_game(
        cls,
        player_name: str,
        config: GameConfig,
        rng: Optional[np.random.Generator] = None,
    ) -> GameSession:
        """Create a level 1 character at the village with the starting items."""
        rng = rng if rng is not None else create_rng(config.rng_seed)
        game_map = GameMap.generate(config, rng)
        player = Player.create(player_name, config.starting, config.village_position)
        inventory = Inventory(config.inventory_max_entries)
        for name, quantity in config.starting.items:
            inventory.add(Item.from_catalog(name, quantity))
        return cls(config, player, inventory, game_map, rng)

    @classmethod
    def restore(
        cls,
        player: Player,
        items: list[Item],
        config: GameConfig,
        rng: Optional[np.random.Generator] = None,
    ) -> GameSession:
        """Rebuild a session from loaded data. The world map is regenerated."""
        rng = rng if rng is not None else create_rng(config.rng_seed)
        game_map = GameMap.generate(config, rng)
        inventory = Inventory(config.inventory_max_entries)
        inventory.replace_contents(items)
        return cls(config, player, inventory, game_map, rng)

    def advance_turn(self) -> int:
        self.turn += 1
        return self.turn

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.VICTORY, GamePhase.GAME_OVER, GamePhase.QUIT)
