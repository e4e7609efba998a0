"""Event system for publisher-subscriber communication.

This package contains the complete event-driven architecture:
- event_manager.py: Publisher-subscriber event routing and coordination
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager
from .events import (
    GameEvent,
    EventType,
    GameStarted,
    GameEnded,
    GameSaved,
    GameLoaded,
    PlayerMoved,
    EncounterTriggered,
    DamageDealt,
    EnemyDefeated,
    PlayerDefeated,
    PlayerFled,
    ItemUsed,
    ItemAcquired,
    PlayerLeveledUp,
    VictoryAchieved,
    LogMessage,
    DebugMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "GameEvent",
    "EventType",
    "GameStarted",
    "GameEnded",
    "GameSaved",
    "GameLoaded",
    "PlayerMoved",
    "EncounterTriggered",
    "DamageDealt",
    "EnemyDefeated",
    "PlayerDefeated",
    "PlayerFled",
    "ItemUsed",
    "ItemAcquired",
    "PlayerLeveledUp",
    "VictoryAchieved",
    "LogMessage",
    "DebugMessage",
    "LogSaveRequested",
]
