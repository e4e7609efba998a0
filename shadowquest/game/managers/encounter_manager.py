"""
Exploration and encounter system.

Validates player movement on the world grid and decides whether a move
triggers a random encounter, and against which enemy species.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from ...core.data.data_structures import DIRECTION_OFFSETS
from ...core.data.game_enums import (
    Direction,
    EnemyType,
    TerrainType,
    FINAL_BOSS,
    HIGH_TIER_ENEMIES,
    LOW_TIER_ENEMIES,
)
from ...core.events import LogMessage, PlayerMoved
from ...core.random_utils import percent_chance, random_int
from ..entities.enemy import Enemy, create_enemy

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager
    from ..session import GameSession


@dataclass
class MoveResult:
    """Outcome of a movement attempt."""
    moved: bool
    encounter: Optional[Enemy] = None
    reason: str = ""


def choose_enemy_type(terrain: TerrainType, rng: np.random.Generator) -> EnemyType:
    """Pick the species for an encounter on ``terrain``.

    The boss room always yields the final boss, the dungeon a random
    high-tier enemy and every other tile a random low-tier enemy.
    """
    if terrain == TerrainType.BOSS_ROOM:
        return FINAL_BOSS
    tier = HIGH_TIER_ENEMIES if terrain == TerrainType.DUNGEON else LOW_TIER_ENEMIES
    return tier[random_int(rng, 0, len(tier) - 1)]


class EncounterManager:
    """Moves the player and rolls random encounters."""

    def __init__(self, event_manager: "EventManager"):
        self.event_manager = event_manager

    def _emit_log(
        self,
        session: "GameSession",
        message: str,
        category: str = "MOVEMENT",
        level: str = "INFO",
    ) -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=session.turn,
                message=message,
                category=category,
                level=level,
                source="EncounterManager"
            ),
            source="EncounterManager"
        )

    def attempt_move(self, session: "GameSession", direction: Direction) -> MoveResult:
        """Try to move one tile in ``direction``.

        Out-of-bounds and water targets leave the position unchanged and never
        roll for an encounter.
        """
        player = session.player
        game_map = session.game_map
        target = player.position + DIRECTION_OFFSETS[direction]

        if not game_map.is_valid_position(target):
            self._emit_log(session, "You can't go that way!")
            return MoveResult(moved=False, reason="out_of_bounds")

        tile = game_map.get_tile(target)
        if not tile.can_enter():
            self._emit_log(session, f"You can't walk on {tile.name.lower()}!")
            return MoveResult(moved=False, reason="blocked")

        from_position = player.position
        player.position = target
        self._emit_log(session, f"You moved to ({target.y},{target.x})")
        self.event_manager.publish(
            PlayerMoved(
                turn=session.turn,
                from_position=from_position,
                to_position=target,
                terrain=tile.terrain_type,
            ),
            source="EncounterManager"
        )

        if tile.is_safe:
            return MoveResult(moved=True)

        return MoveResult(moved=True, encounter=self.roll_encounter(session, tile.terrain_type))

    def roll_encounter(self, session: "GameSession", terrain: TerrainType) -> Optional[Enemy]:
        """Roll the encounter chance and create the enemy on success."""
        if not percent_chance(session.rng, session.config.encounter_chance):
            return None
        self._emit_log(session, "!!! ENEMY ENCOUNTER !!!", category="BATTLE")
        return create_enemy(choose_enemy_type(terrain, session.rng))
