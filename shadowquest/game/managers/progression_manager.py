"""
Progression system for experience, leveling and the victory condition.

Experience is treated as a running total: leaving level ``n`` requires a
total of ``exp_per_level * n``. ``Player.exp`` stores the part of that total
earned inside the current level, so the final level and stats depend only on
how much experience was granted overall, not on how it was split.
"""
from typing import TYPE_CHECKING

from ...core.events import LogMessage, PlayerLeveledUp, VictoryAchieved

if TYPE_CHECKING:
    from ...core.config_loader import LevelUpDeltas
    from ...core.events.event_manager import EventManager
    from ..entities.player import Player
    from ..session import GameSession


def experience_threshold(level: int, exp_per_level: int = 100) -> int:
    """Running total of experience required to leave ``level``."""
    return exp_per_level * level


def experience_floor(level: int, exp_per_level: int = 100) -> int:
    """Running total of experience at which ``level`` was reached."""
    return exp_per_level * (level - 1)


def apply_level_up(player: "Player", deltas: "LevelUpDeltas") -> None:
    """Raise the level by one, grow stats and fully restore HP/MP."""
    player.level += 1
    player.hp_max += deltas.hp
    player.mp_max += deltas.mp
    player.attack += deltas.attack
    player.defense += deltas.defense
    player.restore()


def apply_experience(
    player: "Player",
    amount: int,
    deltas: "LevelUpDeltas",
    exp_per_level: int = 100,
) -> int:
    """Add experience and apply every level-up it earns.

    Returns:
        Number of levels gained (0 if none)
    """
    if amount < 0:
        raise ValueError("Experience amount must be non-negative")

    total = experience_floor(player.level, exp_per_level) + player.exp + amount
    levels_gained = 0
    while total >= experience_threshold(player.level, exp_per_level):
        apply_level_up(player, deltas)
        levels_gained += 1
    player.exp = total - experience_floor(player.level, exp_per_level)
    return levels_gained


class ProgressionManager:
    """Applies experience gains and checks the victory condition."""

    def __init__(self, event_manager: "EventManager"):
        self.event_manager = event_manager

    def _emit_log(self, session: "GameSession", message: str, level: str = "INFO") -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=session.turn,
                message=message,
                category="PROGRESSION",
                level=level,
                source="ProgressionManager"
            ),
            source="ProgressionManager"
        )

    def gain_experience(self, session: "GameSession", amount: int) -> int:
        """Grant experience to the session's player. Returns levels gained."""
        config = session.config
        player = session.player
        levels_gained = apply_experience(player, amount, config.level_up, config.exp_per_level)

        if levels_gained:
            deltas = config.level_up
            first_new_level = player.level - levels_gained + 1
            for new_level in range(first_new_level, player.level + 1):
                self.event_manager.publish(
                    PlayerLeveledUp(turn=session.turn, new_level=new_level),
                    source="ProgressionManager"
                )
                self._emit_log(session, "*** LEVEL UP! ***")
                self._emit_log(session, f"You are now level {new_level}!")
                self._emit_log(
                    session,
                    f"HP +{deltas.hp}, MP +{deltas.mp}, ATK +{deltas.attack}, DEF +{deltas.defense}"
                )
        return levels_gained

    def check_victory(self, session: "GameSession") -> bool:
        """True when the player stands on the boss room at the victory level.

        Reaching the tile at a sufficient level counts as beating the final
        boss; the outcome of any fight there is not consulted.
        """
        player = session.player
        return (
            player.position == session.game_map.boss_room_position
            and player.level >= session.config.victory_level
        )

    def announce_victory(self, session: "GameSession") -> None:
        self.event_manager.publish(
            VictoryAchieved(turn=session.turn, level=session.player.level),
            source="ProgressionManager"
        )
        self._emit_log(session, "You defeated the Shadow Lord!")
