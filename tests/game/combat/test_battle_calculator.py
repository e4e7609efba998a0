"""
Unit tests for the BattleCalculator damage formula and forecasts.
"""
import numpy as np
import pytest

from shadowquest.core.config_loader import GameConfig
from shadowquest.core.data.game_enums import EnemyType
from shadowquest.game.combat.battle_calculator import BattleCalculator, BattleForecast
from shadowquest.game.entities.enemy import create_enemy


class TestBaseDamage:
    """Test max(1, attack - defense // 2)."""

    @pytest.mark.parametrize("attack,defense,expected", [
        (10, 2, 9),
        (10, 5, 8),
        (5, 5, 3),
        (5, 30, 1),
        (0, 0, 1),
    ])
    def test_base_damage(self, attack, defense, expected):
        assert BattleCalculator.base_damage(attack, defense) == expected


class TestDamageRange:
    """Test inclusive final damage ranges."""

    def test_player_range(self):
        assert BattleCalculator.damage_range(10, 2, (-2, 5)) == (7, 14)

    def test_range_never_negative(self):
        assert BattleCalculator.damage_range(5, 30, (-2, 3)) == (0, 4)

    def test_rolls_stay_inside_range(self):
        rng = np.random.default_rng(11)
        rolls = {BattleCalculator.roll_damage(10, 2, (-2, 5), rng) for _ in range(500)}

        assert min(rolls) >= 7
        assert max(rolls) <= 14
        # 500 rolls over 8 outcomes should hit every value
        assert rolls == set(range(7, 15))

    def test_weak_attacker_can_deal_zero(self):
        rng = np.random.default_rng(3)
        rolls = {BattleCalculator.roll_damage(1, 40, (-2, 3), rng) for _ in range(300)}

        assert min(rolls) == 0
        assert max(rolls) == 4


class TestForecast:
    """Test forecasts for the combat header."""

    def test_forecast_against_slime(self, session):
        forecast = BattleCalculator.calculate_forecast(
            session.player, create_enemy(EnemyType.SLIME), GameConfig()
        )

        assert forecast == BattleForecast(7, 14, 1, 6)

    def test_forecast_does_not_change_state(self, session):
        enemy = create_enemy(EnemyType.GOBLIN)
        BattleCalculator.calculate_forecast(session.player, enemy, GameConfig())

        assert enemy.hp == enemy.hp_max
        assert session.player.hp == session.player.hp_max
