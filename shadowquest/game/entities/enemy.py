"""Enemy entity and the per-encounter enemy factory."""

from dataclasses import dataclass

from ...core.data.game_enums import EnemyType, FINAL_BOSS
from ...core.data.game_info import ENEMY_DATA


@dataclass
class Enemy:
    """A single opponent. Lives only for the duration of one encounter."""
    name: str
    enemy_type: EnemyType
    hp: int
    hp_max: int
    attack: int
    defense: int
    exp_reward: int
    gold_reward: int

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def is_final_boss(self) -> bool:
        return self.enemy_type == FINAL_BOSS

    def change_hp(self, amount: int) -> int:
        """Add ``amount`` HP (negative for damage), clamp, return new HP."""
        self.hp = max(0, min(self.hp_max, self.hp + amount))
        return self.hp


def create_enemy(enemy_type: EnemyType) -> Enemy:
    """Create a fresh enemy at full HP from the static stat table."""
    info = ENEMY_DATA[enemy_type]
    stats = info.base_stats
    return Enemy(
        name=info.name,
        enemy_type=enemy_type,
        hp=stats.hp_max,
        hp_max=stats.hp_max,
        attack=stats.attack,
        defense=stats.defense,
        exp_reward=stats.exp_reward,
        gold_reward=stats.gold_reward,
    )
