"""Game events and their types.

This module defines all game events that managers can subscribe to.

Event Design Principles:
- Events are immutable dataclasses
- All events include the session turn counter at the time they happened
- Events use proper enums instead of magic strings where the domain has them
- Keep event types focused and avoid over-granular events
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..data.game_enums import EnemyType, TerrainType

if TYPE_CHECKING:
    from ..data.data_structures import Vector2


class EventType(Enum):
    """Types of game events that managers can subscribe to."""
    # Session Events
    GAME_STARTED = auto()
    GAME_ENDED = auto()
    GAME_SAVED = auto()
    GAME_LOADED = auto()

    # Exploration Events
    PLAYER_MOVED = auto()
    ENCOUNTER_TRIGGERED = auto()

    # Combat Events
    DAMAGE_DEALT = auto()
    ENEMY_DEFEATED = auto()
    PLAYER_DEFEATED = auto()
    PLAYER_FLED = auto()

    # Inventory and Progression Events
    ITEM_USED = auto()
    ITEM_ACQUIRED = auto()
    PLAYER_LEVELED_UP = auto()
    VICTORY_ACHIEVED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class GameStarted(GameEvent):
    """Event emitted when a session begins, fresh or loaded."""
    player_name: str
    loaded: bool = False

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.GAME_STARTED)


@dataclass(frozen=True)
class GameEnded(GameEvent):
    """Event emitted when the session loop stops."""
    reason: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_ENDED)


@dataclass(frozen=True)
class GameSaved(GameEvent):
    """Event emitted after the session was written to disk."""
    path: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_SAVED)


@dataclass(frozen=True)
class GameLoaded(GameEvent):
    """Event emitted after a save file was read back."""
    path: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.GAME_LOADED)


@dataclass(frozen=True)
class PlayerMoved(GameEvent):
    """Event emitted when the player moves to a new tile."""
    from_position: "Vector2"
    to_position: "Vector2"
    terrain: TerrainType

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_MOVED)


@dataclass(frozen=True)
class EncounterTriggered(GameEvent):
    """Event emitted when a random encounter starts."""
    enemy_type: EnemyType
    position: "Vector2"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ENCOUNTER_TRIGGERED)


@dataclass(frozen=True)
class DamageDealt(GameEvent):
    """Event emitted for every hit landed in combat."""
    attacker_name: str
    target_name: str
    damage: int
    target_hp: int
    target_hp_max: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DAMAGE_DEALT)


@dataclass(frozen=True)
class EnemyDefeated(GameEvent):
    """Event emitted when the player wins a fight."""
    enemy_type: EnemyType
    exp_reward: int
    gold_reward: int
    dropped_item: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ENEMY_DEFEATED)


@dataclass(frozen=True)
class PlayerDefeated(GameEvent):
    """Event emitted when the player's HP reaches zero."""
    enemy_type: EnemyType

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_DEFEATED)


@dataclass(frozen=True)
class PlayerFled(GameEvent):
    """Event emitted on a successful escape."""
    enemy_type: EnemyType

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_FLED)


@dataclass(frozen=True)
class ItemUsed(GameEvent):
    """Event emitted when a consumable takes effect."""
    item_name: str
    amount: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ITEM_USED)


@dataclass(frozen=True)
class ItemAcquired(GameEvent):
    """Event emitted when an item is added to the inventory."""
    item_name: str
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ITEM_ACQUIRED)


@dataclass(frozen=True)
class PlayerLeveledUp(GameEvent):
    """Event emitted once per level gained."""
    new_level: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PLAYER_LEVELED_UP)


@dataclass(frozen=True)
class VictoryAchieved(GameEvent):
    """Event emitted when the victory condition is met."""
    level: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.VICTORY_ACHIEVED)


# Logging Events
@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: str
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log should be written to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
