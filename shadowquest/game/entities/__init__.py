"""Game entities: the player, enemies and inventory items."""

from .player import Player
from .enemy import Enemy, create_enemy
from .inventory import Inventory, Item

__all__ = [
    "Player",
    "Enemy",
    "create_enemy",
    "Inventory",
    "Item",
]
