"""
Main game orchestration class.

This module coordinates the managers and the renderer, running the title
menu, the exploration loop and combat encounters while delegating the
rules themselves to specialized manager classes.
"""

from typing import Optional, TypeVar

import numpy as np

from ..core.config_loader import GameConfig, get_game_config
from ..core.data.game_enums import CombatAction, CombatOutcome, GamePhase
from ..core.events.event_manager import EventManager
from ..core.events.events import (
    GameEnded,
    GameLoaded,
    GameSaved,
    GameStarted,
    LogMessage,
    LogSaveRequested,
)
from ..core.renderer import Renderer
from .combat.battle_calculator import BattleCalculator
from .combat.combat_resolver import Combat, CombatResolver
from .entities.enemy import Enemy
from .managers.encounter_manager import EncounterManager
from .managers.inventory_manager import InventoryManager
from .managers.log_manager import LogManager
from .managers.progression_manager import ProgressionManager
from .persistence import SaveFileError, load_game, save_game
from .session import GameSession


TManager = TypeVar("TManager")

MAIN_MENU_OPTIONS = ["New Game", "Load Game", "Exit"]
ACTION_MENU_OPTIONS = ["Move (W/A/S/D)", "View Stats", "Inventory", "Rest", "Save Game", "Quit"]
COMBAT_MENU_OPTIONS = ["Attack", "Use Item", "Flee"]


class Game:
    """Main game orchestrator that coordinates all game systems."""

    def __init__(
        self,
        renderer: Renderer,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
        debug: bool = False,
    ):
        self.renderer = renderer
        self.config = config or get_game_config()
        self.rng = rng
        self.debug = debug
        self.session: Optional[GameSession] = None
        self.running = False

        # Event system
        self.event_manager = EventManager(enable_debug_logging=debug)

        # Managers - will be initialized in initialize()
        self._log_manager: Optional[LogManager] = None
        self._encounter_manager: Optional[EncounterManager] = None
        self._inventory_manager: Optional[InventoryManager] = None
        self._progression_manager: Optional[ProgressionManager] = None
        self._combat_resolver: Optional[CombatResolver] = None

    def _require_manager(self, manager: Optional[TManager], name: str) -> TManager:
        """Return the manager if initialized, otherwise raise a helpful error."""
        if manager is None:
            raise RuntimeError(f"{name} not initialized. Call initialize() first.")
        return manager

    @property
    def log_manager(self) -> LogManager:
        return self._require_manager(self._log_manager, "LogManager")

    @property
    def encounter_manager(self) -> EncounterManager:
        return self._require_manager(self._encounter_manager, "EncounterManager")

    @property
    def inventory_manager(self) -> InventoryManager:
        return self._require_manager(self._inventory_manager, "InventoryManager")

    @property
    def progression_manager(self) -> ProgressionManager:
        return self._require_manager(self._progression_manager, "ProgressionManager")

    @property
    def combat_resolver(self) -> CombatResolver:
        return self._require_manager(self._combat_resolver, "CombatResolver")

    def _ensure_session(self) -> GameSession:
        if self.session is None:
            raise RuntimeError("No active session. Start or load a game first.")
        return self.session

    def initialize(self) -> None:
        """Initialize the renderer and all manager systems."""
        self.renderer.start()

        self._log_manager = LogManager(event_manager=self.event_manager)
        self.event_manager.set_debug_callback(self.log_manager.debug)
        if self.debug:
            self.log_manager.toggle_debug()

        self._encounter_manager = EncounterManager(self.event_manager)
        self._inventory_manager = InventoryManager(self.event_manager)
        self._progression_manager = ProgressionManager(self.event_manager)
        self._combat_resolver = CombatResolver(
            self.event_manager,
            progression_manager=self.progression_manager,
            inventory_manager=self.inventory_manager,
        )
        self.running = True

    def _emit_log(
        self, message: str, category: str = "SYSTEM", level: str = "INFO"
    ) -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(
                turn=self.session.turn if self.session else 0,
                message=message,
                category=category,
                level=level,
                source="Game",
            ),
            source="Game",
        )

    def flush_messages(self) -> None:
        """Deliver queued events and print whatever they logged."""
        self.event_manager.process_events()
        self.renderer.show_messages(self.log_manager.pop_unread())

    def run(self) -> None:
        """Title menu followed by the session loop."""
        self.initialize()
        try:
            if self.main_menu():
                self.play()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        self.running = False
        if self.debug:
            self.event_manager.publish(
                LogSaveRequested(turn=self.session.turn if self.session else 0),
                source="Game",
            )
        self.flush_messages()
        self.event_manager.shutdown()
        self.renderer.stop()

    def main_menu(self) -> bool:
        """Show the title menu. Returns False if the player chose to exit."""
        self.renderer.render_title()
        self.renderer.render_menu("MAIN MENU", MAIN_MENU_OPTIONS)
        choice = self.renderer.prompt_int("\nChoice: ", 1, len(MAIN_MENU_OPTIONS))

        if choice == 1:
            self.start_new_game()
        elif choice == 2:
            filename = self.renderer.prompt_text("Enter save file name: ")
            self.load_saved_game(filename)
        else:
            return False
        return True

    def start_new_game(self) -> GameSession:
        """Create a character and a fresh world."""
        self.renderer.show_text("\n=== CHARACTER CREATION ===")
        name = self.renderer.prompt_text("Enter your name: ")
        self.session = GameSession.new_game(name, self.config, self.rng)

        self._emit_log(f"Welcome, {name}!")
        self._emit_log("Your adventure begins!")
        self.event_manager.publish(GameStarted(turn=0, player_name=name), source="Game")
        self.flush_messages()
        return self.session

    def load_saved_game(self, path: str) -> GameSession:
        """Load ``path``, falling back to a new game if it is missing or corrupt."""
        try:
            data = load_game(path, map_size=self.config.map_size)
        except SaveFileError as e:
            self._emit_log(f"Error: Save file is corrupt ({e})", "PERSISTENCE", "ERROR")
            data = None
        else:
            if data is None:
                self._emit_log("Error: Save file not found!", "PERSISTENCE", "WARNING")

        if data is None:
            self._emit_log("Starting new game...", "PERSISTENCE")
            self.flush_messages()
            return self.start_new_game()

        self.session = GameSession.restore(data.player, data.items, self.config, self.rng)
        self.session.save_path = path
        self._emit_log("Game loaded successfully!", "PERSISTENCE")
        self._emit_log(f"Welcome back, {data.player.name}!")
        self.event_manager.publish(GameLoaded(turn=0, path=path), source="Game")
        self.event_manager.publish(
            GameStarted(turn=0, player_name=data.player.name, loaded=True), source="Game"
        )
        self.flush_messages()
        return self.session

    def play(self) -> None:
        """Exploration loop until victory, defeat or quit."""
        session = self._ensure_session()
        session.phase = GamePhase.EXPLORING

        while not session.is_over:
            self.renderer.render_map(session.game_map, session.player)
            self.renderer.render_stats(session.player)
            self.renderer.render_menu("ACTIONS", ACTION_MENU_OPTIONS)
            choice = self.renderer.prompt_int("\nChoice: ", 1, len(ACTION_MENU_OPTIONS))

            session.advance_turn()
            self.handle_action(choice)
            self.check_victory()
            self.flush_messages()

        self.event_manager.publish(
            GameEnded(turn=session.turn, reason=session.phase.name), source="Game"
        )
        self.flush_messages()

    def handle_action(self, choice: int) -> None:
        """Dispatch one in-session menu choice (1-6)."""
        session = self._ensure_session()

        if choice == 1:
            direction = self.renderer.prompt_direction("Direction (W/A/S/D): ")
            result = self.encounter_manager.attempt_move(session, direction)
            if result.encounter is not None:
                self.run_combat(result.encounter)
        elif choice == 2:
            self.renderer.render_stats(session.player)
        elif choice == 3:
            self.open_inventory()
        elif choice == 4:
            session.player.restore()
            self._emit_log("You rest and recover your HP and MP!")
        elif choice == 5:
            filename = self.renderer.prompt_text("Enter save file name: ")
            self.save(filename)
        elif choice == 6:
            session.phase = GamePhase.QUIT
            self._emit_log("Quitting game.")

    def open_inventory(self) -> None:
        session = self._ensure_session()
        self.renderer.render_inventory(session.inventory)
        if not len(session.inventory):
            return
        item_choice = self.renderer.prompt_int(
            "\nUse item? (0 for no, or item number): ", 0, len(session.inventory)
        )
        if item_choice > 0:
            self.inventory_manager.use_item(session, item_choice - 1)

    def save(self, path: str) -> bool:
        session = self._ensure_session()
        try:
            save_game(path, session.player, session.inventory)
        except OSError as e:
            self._emit_log(f"Error: Could not create save file! ({e})", "PERSISTENCE", "ERROR")
            return False

        session.save_path = path
        self._emit_log(f"Game saved to {path}!", "PERSISTENCE")
        self.event_manager.publish(GameSaved(turn=session.turn, path=path), source="Game")
        return True

    def run_combat(self, enemy: Enemy) -> CombatOutcome:
        """Fight ``enemy`` and interpret the outcome for the session."""
        session = self._ensure_session()
        outcome = self.combat_resolver.resolve(session, enemy, self._choose_combat_action)
        self.flush_messages()

        if outcome == CombatOutcome.DEFEAT:
            self.renderer.render_banner(["GAME OVER", "You have been defeated..."])
        return outcome

    def _choose_combat_action(self, combat: Combat) -> tuple[CombatAction, Optional[int]]:
        """Combat menu callback used by the resolver."""
        session = self._ensure_session()
        self.flush_messages()

        forecast = BattleCalculator.calculate_forecast(session.player, combat.enemy, session.config)
        self.renderer.render_combat_header(combat.enemy, forecast)
        self.renderer.render_menu("COMBAT", COMBAT_MENU_OPTIONS)
        action = CombatAction(
            self.renderer.prompt_int("\nChoice: ", 1, len(COMBAT_MENU_OPTIONS))
        )

        if action != CombatAction.USE_ITEM:
            return action, None

        self.renderer.render_inventory(session.inventory)
        if not len(session.inventory):
            return action, None
        item_choice = self.renderer.prompt_int(
            "Use which item? (0 to cancel): ", 0, len(session.inventory)
        )
        return action, (item_choice - 1 if item_choice > 0 else None)

    def check_victory(self) -> bool:
        """End the session with a victory banner if the condition is met."""
        session = self._ensure_session()
        if session.phase != GamePhase.EXPLORING:
            return False
        if not self.progression_manager.check_victory(session):
            return False

        session.phase = GamePhase.VICTORY
        self.progression_manager.announce_victory(session)
        self.flush_messages()
        self.renderer.render_banner(["CONGRATULATIONS!", "You defeated the Shadow Lord!"])
        return True
