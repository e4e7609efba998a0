"""Manager systems for game logic coordination.

This package contains the manager classes that apply the game rules to a
session context and report results through the event-driven architecture.
"""

from .encounter_manager import EncounterManager, MoveResult, choose_enemy_type
from .inventory_manager import InventoryManager
from .log_manager import LogCategory, LogLevel, LogManager
from .progression_manager import (
    ProgressionManager,
    apply_experience,
    experience_floor,
    experience_threshold,
)

__all__ = [
    "EncounterManager",
    "MoveResult",
    "choose_enemy_type",
    "InventoryManager",
    "LogCategory",
    "LogLevel",
    "LogManager",
    "ProgressionManager",
    "apply_experience",
    "experience_floor",
    "experience_threshold",
]
