from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from .data.game_enums import Direction

if TYPE_CHECKING:
    from ..game.combat.battle_calculator import BattleForecast
    from ..game.entities.enemy import Enemy
    from ..game.entities.inventory import Inventory
    from ..game.entities.player import Player
    from ..game.managers.log_manager import LogMessage
    from ..game.map import GameMap


@dataclass
class RendererConfig:
    width: int = 40
    title: str = "SHADOW QUEST"
    subtitle: str = "A Terminal RPG Adventure"
    show_log_categories: bool = False


class Renderer(ABC):
    """Menu-driven front end: draws game state and reads validated input."""

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()
        self._running = False

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def cleanup(self) -> None:
        pass

    @abstractmethod
    def render_title(self) -> None:
        pass

    @abstractmethod
    def render_map(self, game_map: "GameMap", player: "Player") -> None:
        pass

    @abstractmethod
    def render_stats(self, player: "Player") -> None:
        pass

    @abstractmethod
    def render_inventory(self, inventory: "Inventory") -> None:
        pass

    @abstractmethod
    def render_combat_header(self, enemy: "Enemy", forecast: "BattleForecast") -> None:
        pass

    @abstractmethod
    def render_menu(self, title: str, options: Sequence[str]) -> None:
        pass

    @abstractmethod
    def render_banner(self, lines: Sequence[str]) -> None:
        pass

    @abstractmethod
    def show_messages(self, messages: Sequence["LogMessage"]) -> None:
        pass

    @abstractmethod
    def show_text(self, text: str) -> None:
        pass

    @abstractmethod
    def prompt_int(self, prompt: str, low: int, high: int) -> int:
        """Read an integer in [low, high], reprompting until one is entered."""
        pass

    @abstractmethod
    def prompt_text(self, prompt: str) -> str:
        """Read a non-empty line, reprompting on empty input."""
        pass

    @abstractmethod
    def prompt_direction(self, prompt: str) -> Direction:
        """Read one of W/A/S/D, reprompting until one is entered."""
        pass

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self.initialize()

    def stop(self) -> None:
        self._running = False
        self.cleanup()
