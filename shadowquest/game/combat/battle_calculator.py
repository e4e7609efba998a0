"""
Battle calculation system for damage rolls and forecasting.

This module holds the damage formula shared by both sides of a fight and
provides forecasts so the UI can show damage ranges without affecting game
state.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ...core.random_utils import random_int

if TYPE_CHECKING:
    from ...core.config_loader import GameConfig
    from ..entities.enemy import Enemy
    from ..entities.player import Player


@dataclass(frozen=True)
class BattleForecast:
    """Expected damage ranges for one exchange of blows."""
    player_min_damage: int
    player_max_damage: int
    enemy_min_damage: int
    enemy_max_damage: int


class BattleCalculator:
    """Damage formula: max(1, attack - defense // 2) plus uniform variance."""

    @staticmethod
    def base_damage(attack: int, defense: int) -> int:
        """Damage before variance. Always at least 1."""
        return max(1, attack - defense // 2)

    @staticmethod
    def damage_range(attack: int, defense: int, variance: tuple[int, int]) -> tuple[int, int]:
        """Inclusive (min, max) final damage for the given variance span."""
        base = BattleCalculator.base_damage(attack, defense)
        low, high = variance
        return (max(0, base + low), max(0, base + high))

    @staticmethod
    def roll_damage(
        attack: int,
        defense: int,
        variance: tuple[int, int],
        rng: np.random.Generator,
    ) -> int:
        """Roll final damage. Negative variance can reduce a hit to zero, never below."""
        base = BattleCalculator.base_damage(attack, defense)
        low, high = variance
        return max(0, base + random_int(rng, low, high))

    @staticmethod
    def calculate_forecast(player: "Player", enemy: "Enemy", config: "GameConfig") -> BattleForecast:
        """Calculate damage ranges for both sides of a fight."""
        player_min, player_max = BattleCalculator.damage_range(
            player.attack, enemy.defense, config.player_damage_variance
        )
        enemy_min, enemy_max = BattleCalculator.damage_range(
            enemy.attack, player.defense, config.enemy_damage_variance
        )
        return BattleForecast(player_min, player_max, enemy_min, enemy_max)
