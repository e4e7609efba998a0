"""Player character entity."""

from dataclasses import dataclass, field

from ...core.config_loader import StartingStats
from ...core.data.data_structures import Vector2


@dataclass
class Player:
    """The player's character sheet and map position.

    HP and MP are kept within [0, max] by the ``change_*`` helpers; an HP of
    zero is the defeat state.
    """
    name: str
    hp: int
    hp_max: int
    mp: int
    mp_max: int
    attack: int
    defense: int
    level: int = 1
    exp: int = 0
    gold: int = 0
    position: Vector2 = field(default_factory=lambda: Vector2(0, 0))

    @classmethod
    def create(cls, name: str, stats: StartingStats, position: Vector2) -> "Player":
        """Create a level 1 character from the starting stat block."""
        return cls(
            name=name,
            hp=stats.hp,
            hp_max=stats.hp,
            mp=stats.mp,
            mp_max=stats.mp,
            attack=stats.attack,
            defense=stats.defense,
            gold=stats.gold,
            position=position,
        )

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def change_hp(self, amount: int) -> int:
        """Add ``amount`` HP (negative for damage), clamp, return new HP."""
        self.hp = max(0, min(self.hp_max, self.hp + amount))
        return self.hp

    def change_mp(self, amount: int) -> int:
        """Add ``amount`` MP, clamp, return new MP."""
        self.mp = max(0, min(self.mp_max, self.mp + amount))
        return self.mp

    def change_gold(self, amount: int) -> int:
        """Modify gold. Never goes negative."""
        self.gold = max(0, self.gold + amount)
        return self.gold

    def restore(self) -> None:
        """Fully restore HP and MP."""
        self.hp = self.hp_max
        self.mp = self.mp_max
