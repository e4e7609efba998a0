"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Vector2 grid coordinates and direction offsets
- game_enums.py: Centralized enums for terrain, enemies, items and combat
- game_info.py: Static game data and lookup tables
"""

from .data_structures import Vector2, DIRECTION_OFFSETS
from .game_enums import (
    TerrainType,
    EnemyType,
    ItemType,
    Direction,
    CombatAction,
    CombatState,
    CombatOutcome,
    GamePhase,
    LOW_TIER_ENEMIES,
    HIGH_TIER_ENEMIES,
    FINAL_BOSS,
    TERRAIN_NAMES,
    ENEMY_NAMES,
)
from .game_info import (
    BaseInfo,
    TerrainInfo,
    EnemyStats,
    EnemyInfo,
    ItemInfo,
    TERRAIN_DATA,
    ENEMY_DATA,
    ITEM_CATALOG,
)

__all__ = [
    "Vector2",
    "DIRECTION_OFFSETS",
    "TerrainType",
    "EnemyType",
    "ItemType",
    "Direction",
    "CombatAction",
    "CombatState",
    "CombatOutcome",
    "GamePhase",
    "LOW_TIER_ENEMIES",
    "HIGH_TIER_ENEMIES",
    "FINAL_BOSS",
    "TERRAIN_NAMES",
    "ENEMY_NAMES",
    "BaseInfo",
    "TerrainInfo",
    "EnemyStats",
    "EnemyInfo",
    "ItemInfo",
    "TERRAIN_DATA",
    "ENEMY_DATA",
    "ITEM_CATALOG",
]
