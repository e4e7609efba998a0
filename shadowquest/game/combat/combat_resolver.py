"""
Combat resolution system for a single player-versus-enemy encounter.

This module runs the attack / use item / flee state machine and applies
damage, rewards and item drops. It never ends the process: the terminal
outcome is returned to the caller, which decides what a defeat means.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from ...core.data.game_enums import CombatAction, CombatOutcome, CombatState, GamePhase
from ...core.events import (
    DamageDealt,
    EncounterTriggered,
    EnemyDefeated,
    LogMessage,
    PlayerDefeated,
    PlayerFled,
)
from ...core.random_utils import percent_chance
from ..entities.inventory import Item
from .battle_calculator import BattleCalculator

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager
    from ..entities.enemy import Enemy
    from ..managers.inventory_manager import InventoryManager
    from ..managers.progression_manager import ProgressionManager
    from ..session import GameSession


TERMINAL_STATES = {
    CombatState.VICTORY: CombatOutcome.VICTORY,
    CombatState.DEFEAT: CombatOutcome.DEFEAT,
    CombatState.FLED: CombatOutcome.FLED,
}


@dataclass
class Combat:
    """State of one encounter."""
    enemy: "Enemy"
    state: CombatState = CombatState.CHOOSING_ACTION
    rounds: int = 0
    damage_dealt: int = 0
    damage_taken: int = 0
    dropped_items: list[str] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def outcome(self) -> Optional[CombatOutcome]:
        return TERMINAL_STATES.get(self.state)


# Callback returning the chosen action and, for USE_ITEM, the inventory index
# (None to cancel)
ActionChooser = Callable[[Combat], tuple[CombatAction, Optional[int]]]


class CombatResolver:
    """Handles combat execution, damage application and rewards."""

    def __init__(
        self,
        event_manager: "EventManager",
        progression_manager: "ProgressionManager",
        inventory_manager: "InventoryManager",
    ):
        self.event_manager = event_manager
        self.progression_manager = progression_manager
        self.inventory_manager = inventory_manager

    def _emit_log(
        self,
        session: "GameSession",
        message: str,
        category: str = "BATTLE",
        level: str = "INFO",
    ) -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=session.turn,
                message=message,
                category=category,
                level=level,
                source="CombatResolver"
            ),
            source="CombatResolver"
        )

    def start(self, session: "GameSession", enemy: "Enemy") -> Combat:
        """Open an encounter against ``enemy``."""
        session.phase = GamePhase.COMBAT
        self.event_manager.publish(
            EncounterTriggered(
                turn=session.turn,
                enemy_type=enemy.enemy_type,
                position=session.player.position,
            ),
            source="CombatResolver"
        )
        self._emit_log(session, f"A {enemy.name} appears!")
        self._emit_log(
            session,
            f"HP: {enemy.hp} | ATK: {enemy.attack} | DEF: {enemy.defense}"
        )
        return Combat(enemy=enemy)

    def resolve(
        self,
        session: "GameSession",
        enemy: "Enemy",
        choose_action: ActionChooser,
    ) -> CombatOutcome:
        """Run the encounter until it reaches a terminal state.

        Args:
            session: The session context the fight mutates
            enemy: Freshly created opponent
            choose_action: Called once per decision with the live combat state

        Returns:
            VICTORY, DEFEAT or FLED
        """
        combat = self.start(session, enemy)
        while not combat.is_over:
            action, item_index = choose_action(combat)
            self.perform(session, combat, action, item_index)
        outcome = combat.outcome
        assert outcome is not None
        return outcome

    def perform(
        self,
        session: "GameSession",
        combat: Combat,
        action: CombatAction,
        item_index: Optional[int] = None,
    ) -> CombatState:
        """Apply one player decision and return the resulting state."""
        if combat.is_over:
            raise ValueError(f"Combat already ended with {combat.state.name}")

        if action == CombatAction.ATTACK:
            self._attack_round(session, combat)
        elif action == CombatAction.USE_ITEM:
            self._use_item(session, combat, item_index)
        elif action == CombatAction.FLEE:
            self._attempt_flee(session, combat)

        if combat.is_over and session.phase == GamePhase.COMBAT:
            session.phase = GamePhase.EXPLORING
        return combat.state

    def _attack_round(self, session: "GameSession", combat: Combat) -> None:
        combat.rounds += 1
        combat.state = CombatState.PLAYER_ATTACKING
        self._player_attack(session, combat)

        if not combat.enemy.is_alive:
            self._victory(session, combat)
            return

        self._enemy_retaliates(session, combat)

    def _use_item(self, session: "GameSession", combat: Combat, item_index: Optional[int]) -> None:
        # Using an item never costs the player their turn
        if item_index is not None:
            self.inventory_manager.use_item(session, item_index)
        combat.state = CombatState.CHOOSING_ACTION

    def _attempt_flee(self, session: "GameSession", combat: Combat) -> None:
        enemy = combat.enemy
        if enemy.is_final_boss:
            # No roll: escape is impossible
            self._emit_log(session, f"You cannot flee from the {enemy.name}!")
            combat.state = CombatState.CHOOSING_ACTION
            return

        if percent_chance(session.rng, session.config.flee_chance):
            self._emit_log(session, "You successfully fled!")
            combat.state = CombatState.FLED
            self.event_manager.publish(
                PlayerFled(turn=session.turn, enemy_type=enemy.enemy_type),
                source="CombatResolver"
            )
            return

        self._emit_log(session, "You couldn't escape!")
        self._enemy_retaliates(session, combat)

    def _enemy_retaliates(self, session: "GameSession", combat: Combat) -> None:
        combat.state = CombatState.ENEMY_RETALIATING
        self._enemy_attack(session, combat)

        if not session.player.is_alive:
            self._defeat(session, combat)
        else:
            combat.state = CombatState.CHOOSING_ACTION

    def _player_attack(self, session: "GameSession", combat: Combat) -> int:
        player, enemy = session.player, combat.enemy
        damage = BattleCalculator.roll_damage(
            player.attack, enemy.defense, session.config.player_damage_variance, session.rng
        )
        enemy.change_hp(-damage)
        combat.damage_dealt += damage

        self._emit_log(session, f"You attack the {enemy.name} for {damage} damage!")
        self._emit_log(session, f"{enemy.name} HP: {enemy.hp}/{enemy.hp_max}")
        self.event_manager.publish(
            DamageDealt(
                turn=session.turn,
                attacker_name=player.name,
                target_name=enemy.name,
                damage=damage,
                target_hp=enemy.hp,
                target_hp_max=enemy.hp_max,
            ),
            source="CombatResolver"
        )
        return damage

    def _enemy_attack(self, session: "GameSession", combat: Combat) -> int:
        player, enemy = session.player, combat.enemy
        damage = BattleCalculator.roll_damage(
            enemy.attack, player.defense, session.config.enemy_damage_variance, session.rng
        )
        player.change_hp(-damage)
        combat.damage_taken += damage

        self._emit_log(session, f"The {enemy.name} attacks you for {damage} damage!")
        self._emit_log(session, f"Your HP: {player.hp}/{player.hp_max}")
        self.event_manager.publish(
            DamageDealt(
                turn=session.turn,
                attacker_name=enemy.name,
                target_name=player.name,
                damage=damage,
                target_hp=player.hp,
                target_hp_max=player.hp_max,
            ),
            source="CombatResolver"
        )
        return damage

    def _victory(self, session: "GameSession", combat: Combat) -> None:
        enemy = combat.enemy
        combat.state = CombatState.VICTORY

        self._emit_log(session, f"You defeated the {enemy.name}!")
        self._emit_log(
            session,
            f"Gained {enemy.exp_reward} EXP and {enemy.gold_reward} gold!"
        )
        session.player.change_gold(enemy.gold_reward)
        self.progression_manager.gain_experience(session, enemy.exp_reward)

        dropped_item = None
        if percent_chance(session.rng, session.config.drop_chance):
            drop = Item.from_catalog(session.config.drop_item, 1)
            dropped_item = drop.name
            combat.dropped_items.append(drop.name)
            # The drop is announced even when the inventory has no room for it
            self._emit_log(session, f"The enemy dropped a {drop.name}!")
            self.inventory_manager.acquire(session, drop)

        self.event_manager.publish(
            EnemyDefeated(
                turn=session.turn,
                enemy_type=enemy.enemy_type,
                exp_reward=enemy.exp_reward,
                gold_reward=enemy.gold_reward,
                dropped_item=dropped_item,
            ),
            source="CombatResolver"
        )

    def _defeat(self, session: "GameSession", combat: Combat) -> None:
        combat.state = CombatState.DEFEAT
        session.phase = GamePhase.GAME_OVER
        self._emit_log(session, "You have been defeated...")
        self.event_manager.publish(
            PlayerDefeated(turn=session.turn, enemy_type=combat.enemy.enemy_type),
            source="CombatResolver"
        )
