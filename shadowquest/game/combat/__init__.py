"""Combat system for damage calculation and encounter resolution.

This package contains:
- battle_calculator.py: Damage formula, rolls and forecasts
- combat_resolver.py: Attack / use item / flee state machine for one encounter
"""

from .battle_calculator import BattleCalculator, BattleForecast
from .combat_resolver import Combat, CombatResolver

__all__ = [
    "BattleCalculator",
    "BattleForecast",
    "Combat",
    "CombatResolver",
]
