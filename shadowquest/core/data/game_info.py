"""Standardized Info classes for game entities.

This module provides a consistent pattern for storing static information
about game entities (terrain, enemies, items). Terrain and enemies share a
display name and map symbol through BaseInfo.
The lookup tables are built once at import time and exposed as read-only
mappings.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .game_enums import (
    EnemyType,
    ItemType,
    TerrainType,
    ENEMY_NAMES,
    TERRAIN_NAMES,
)


@dataclass(frozen=True)
class BaseInfo:
    """Base class for all game entity info classes."""
    name: str
    symbol: str


@dataclass(frozen=True)
class TerrainInfo(BaseInfo):
    """Static information about terrain types."""
    blocks_movement: bool = False
    safe: bool = False


@dataclass(frozen=True)
class EnemyStats:
    """Base statistics for an enemy species."""
    hp_max: int
    attack: int
    defense: int
    exp_reward: int
    gold_reward: int


@dataclass(frozen=True)
class EnemyInfo(BaseInfo):
    """Static information about an enemy species."""
    base_stats: EnemyStats


@dataclass(frozen=True)
class ItemInfo:
    """Catalog entry for an item that can appear in the world."""
    name: str
    item_type: ItemType
    value: int


TERRAIN_DATA: Mapping[TerrainType, TerrainInfo] = MappingProxyType({
    TerrainType.GRASS: TerrainInfo(TERRAIN_NAMES[TerrainType.GRASS], "."),
    TerrainType.FOREST: TerrainInfo(TERRAIN_NAMES[TerrainType.FOREST], "T"),
    TerrainType.MOUNTAIN: TerrainInfo(TERRAIN_NAMES[TerrainType.MOUNTAIN], "^"),
    TerrainType.WATER: TerrainInfo(
        TERRAIN_NAMES[TerrainType.WATER], "~", blocks_movement=True
    ),
    TerrainType.VILLAGE: TerrainInfo(
        TERRAIN_NAMES[TerrainType.VILLAGE], "V", safe=True
    ),
    TerrainType.DUNGEON: TerrainInfo(TERRAIN_NAMES[TerrainType.DUNGEON], "D"),
    TerrainType.BOSS_ROOM: TerrainInfo(TERRAIN_NAMES[TerrainType.BOSS_ROOM], "B"),
})

# stats: hp, attack, defense, exp, gold
ENEMY_DATA: Mapping[EnemyType, EnemyInfo] = MappingProxyType({
    EnemyType.SLIME: EnemyInfo(
        ENEMY_NAMES[EnemyType.SLIME], "s", EnemyStats(30, 5, 2, 10, 5)
    ),
    EnemyType.GOBLIN: EnemyInfo(
        ENEMY_NAMES[EnemyType.GOBLIN], "g", EnemyStats(50, 8, 4, 20, 10)
    ),
    EnemyType.WOLF: EnemyInfo(
        ENEMY_NAMES[EnemyType.WOLF], "w", EnemyStats(70, 12, 5, 30, 15)
    ),
    EnemyType.SKELETON: EnemyInfo(
        ENEMY_NAMES[EnemyType.SKELETON], "k", EnemyStats(100, 15, 8, 50, 25)
    ),
    EnemyType.TROLL: EnemyInfo(
        ENEMY_NAMES[EnemyType.TROLL], "t", EnemyStats(150, 20, 12, 80, 40)
    ),
    EnemyType.DRAGON: EnemyInfo(
        ENEMY_NAMES[EnemyType.DRAGON], "d", EnemyStats(300, 35, 20, 200, 100)
    ),
    EnemyType.SHADOW_LORD: EnemyInfo(
        ENEMY_NAMES[EnemyType.SHADOW_LORD], "L", EnemyStats(500, 50, 30, 500, 500)
    ),
})

ITEM_CATALOG: Mapping[str, ItemInfo] = MappingProxyType({
    info.name: info
    for info in (
        ItemInfo("Health Potion", ItemType.HEALTH_POTION, 50),
        ItemInfo("Mana Potion", ItemType.MANA_POTION, 30),
        ItemInfo("Iron Sword", ItemType.SWORD, 5),
        ItemInfo("Wooden Shield", ItemType.SHIELD, 3),
        ItemInfo("Leather Armor", ItemType.ARMOR, 3),
        ItemInfo("Steel Sword", ItemType.SWORD, 10),
        ItemInfo("Iron Shield", ItemType.SHIELD, 6),
        ItemInfo("Chain Mail", ItemType.ARMOR, 6),
        ItemInfo("Magic Staff", ItemType.SWORD, 8),
        ItemInfo("Holy Armor", ItemType.ARMOR, 12),
    )
})
