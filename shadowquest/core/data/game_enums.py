"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class TerrainType(Enum):
    """Types of terrain on the world map."""
    GRASS = 0
    FOREST = 1
    MOUNTAIN = 2
    WATER = 3
    VILLAGE = 4
    DUNGEON = 5
    BOSS_ROOM = 6


class EnemyType(Enum):
    """Enemy species. SHADOW_LORD is the unique final boss."""
    SLIME = 0
    GOBLIN = 1
    WOLF = 2
    SKELETON = 3
    TROLL = 4
    DRAGON = 5
    SHADOW_LORD = 6


class ItemType(Enum):
    """Item kinds. Values double as the save-file type tag."""
    HEALTH_POTION = 0
    MANA_POTION = 1
    SWORD = 2
    SHIELD = 3
    ARMOR = 4


class Direction(Enum):
    """Movement directions keyed by their input letter."""
    NORTH = "w"
    WEST = "a"
    SOUTH = "s"
    EAST = "d"

    @classmethod
    def from_key(cls, key: str) -> "Direction":
        """Parse a W/A/S/D key (case-insensitive). Raises ValueError otherwise."""
        return cls(key.strip().lower())


class CombatAction(Enum):
    """Choices available on the combat menu."""
    ATTACK = 1
    USE_ITEM = 2
    FLEE = 3


class CombatState(Enum):
    """States of a single combat encounter."""
    CHOOSING_ACTION = auto()
    PLAYER_ATTACKING = auto()
    ENEMY_RETALIATING = auto()
    VICTORY = auto()
    DEFEAT = auto()
    FLED = auto()


class CombatOutcome(Enum):
    """Terminal result handed back to the session loop."""
    VICTORY = auto()
    DEFEAT = auto()
    FLED = auto()


# Enemy tiers used to bias encounter selection by terrain
LOW_TIER_ENEMIES = (EnemyType.SLIME, EnemyType.GOBLIN, EnemyType.WOLF)
HIGH_TIER_ENEMIES = (EnemyType.SKELETON, EnemyType.TROLL, EnemyType.DRAGON)
FINAL_BOSS = EnemyType.SHADOW_LORD

# Convenience mappings for display
TERRAIN_NAMES = {
    TerrainType.GRASS: "Grass",
    TerrainType.FOREST: "Forest",
    TerrainType.MOUNTAIN: "Mountain",
    TerrainType.WATER: "Water",
    TerrainType.VILLAGE: "Village",
    TerrainType.DUNGEON: "Dungeon",
    TerrainType.BOSS_ROOM: "Boss Room",
}

ENEMY_NAMES = {
    EnemyType.SLIME: "Slime",
    EnemyType.GOBLIN: "Goblin",
    EnemyType.WOLF: "Wolf",
    EnemyType.SKELETON: "Skeleton",
    EnemyType.TROLL: "Troll",
    EnemyType.DRAGON: "Dragon",
    EnemyType.SHADOW_LORD: "Shadow Lord",
}


class GamePhase(Enum):
    """High level phases of a play session."""
    EXPLORING = auto()
    COMBAT = auto()
    VICTORY = auto()
    GAME_OVER = auto()
    QUIT = auto()
