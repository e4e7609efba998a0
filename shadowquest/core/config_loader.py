"""Game configuration loader for data-driven rules.

This module loads the designer-tunable numbers (map size, terrain weights,
encounter/flee/drop chances, damage variance, leveling deltas, starting
stats) from a YAML file so they are defined externally rather than
hardcoded in the rules. Every key is optional and falls back to the
built-in default.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .data.data_structures import Vector2
from .data.game_enums import TerrainType
from .data.game_info import ITEM_CATALOG


@dataclass(frozen=True)
class LevelUpDeltas:
    """Stat increases applied on every level-up."""
    hp: int = 20
    mp: int = 10
    attack: int = 3
    defense: int = 2


@dataclass(frozen=True)
class StartingStats:
    """Stats given to a freshly created character."""
    hp: int = 100
    mp: int = 50
    attack: int = 10
    defense: int = 5
    gold: int = 50
    items: tuple[tuple[str, int], ...] = (("Health Potion", 3),)


@dataclass(frozen=True)
class GameConfig:
    """Container for all tunable game rules."""
    map_size: int = 10
    # Percent weights drawn cumulatively in this order
    terrain_weights: tuple[tuple[TerrainType, int], ...] = (
        (TerrainType.GRASS, 50),
        (TerrainType.FOREST, 25),
        (TerrainType.MOUNTAIN, 10),
        (TerrainType.WATER, 15),
    )
    village_position: Vector2 = Vector2(5, 5)
    dungeon_position: Vector2 = Vector2(0, 0)
    boss_room_position: Vector2 = Vector2(9, 9)

    encounter_chance: int = 30
    flee_chance: int = 50
    drop_chance: int = 40
    drop_item: str = "Health Potion"
    player_damage_variance: tuple[int, int] = (-2, 5)
    enemy_damage_variance: tuple[int, int] = (-2, 3)

    exp_per_level: int = 100
    victory_level: int = 5
    level_up: LevelUpDeltas = field(default_factory=LevelUpDeltas)

    starting: StartingStats = field(default_factory=StartingStats)
    inventory_max_entries: int = 20
    rng_seed: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ValueError if any value is outside its allowed range."""
        if self.map_size < 1:
            raise ValueError("world.size must be >= 1")
        weights = [weight for _, weight in self.terrain_weights]
        if any(weight < 0 for weight in weights) or sum(weights) != 100:
            raise ValueError("world.terrain_weights must be non-negative and sum to 100")
        for label, position in (
            ("village", self.village_position),
            ("dungeon", self.dungeon_position),
            ("boss_room", self.boss_room_position),
        ):
            if not (0 <= position.y < self.map_size and 0 <= position.x < self.map_size):
                raise ValueError(f"world.{label} {position.to_tuple()} is outside the map")
        for label, chance in (
            ("encounters.chance", self.encounter_chance),
            ("combat.flee_chance", self.flee_chance),
            ("combat.drop_chance", self.drop_chance),
        ):
            if not 0 <= chance <= 100:
                raise ValueError(f"{label} must be between 0 and 100")
        for label, (low, high) in (
            ("combat.player_variance", self.player_damage_variance),
            ("combat.enemy_variance", self.enemy_damage_variance),
        ):
            if low > high:
                raise ValueError(f"{label} min must be <= max")
        if self.exp_per_level < 1:
            raise ValueError("progression.exp_per_level must be >= 1")
        if self.inventory_max_entries < 1:
            raise ValueError("inventory.max_entries must be >= 1")
        if self.drop_item not in ITEM_CATALOG:
            raise ValueError(f"combat.drop_item {self.drop_item!r} is not a known item")
        for name, quantity in self.starting.items:
            if name not in ITEM_CATALOG:
                raise ValueError(f"player.starting_items {name!r} is not a known item")
            if quantity < 1:
                raise ValueError(f"player.starting_items {name!r} quantity must be >= 1")
        if len({name for name, _ in self.starting.items}) > self.inventory_max_entries:
            raise ValueError("player.starting_items has more entries than inventory.max_entries")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameConfig":
        """Build a config from parsed YAML, keeping defaults for missing keys."""
        defaults = cls()
        world = data.get("world") or {}
        encounters = data.get("encounters") or {}
        combat = data.get("combat") or {}
        progression = data.get("progression") or {}
        player = data.get("player") or {}
        inventory = data.get("inventory") or {}

        terrain_weights = defaults.terrain_weights
        if "terrain_weights" in world:
            if not isinstance(world["terrain_weights"], dict):
                raise ValueError("world.terrain_weights must map terrain names to weights")
            try:
                terrain_weights = tuple(
                    (TerrainType[str(name).upper()], int(weight))
                    for name, weight in world["terrain_weights"].items()
                )
            except KeyError as e:
                raise ValueError(f"Unknown terrain in world.terrain_weights: {e}") from e

        def position(key: str, default: Vector2) -> Vector2:
            value = world.get(key)
            return Vector2.from_list(value) if value is not None else default

        def span(section: dict, key: str, default: tuple[int, int]) -> tuple[int, int]:
            value = section.get(key)
            if value is None:
                return default
            return (int(value[0]), int(value[1]))

        level_up_data = progression.get("level_up") or {}
        level_up = LevelUpDeltas(
            hp=int(level_up_data.get("hp", defaults.level_up.hp)),
            mp=int(level_up_data.get("mp", defaults.level_up.mp)),
            attack=int(level_up_data.get("attack", defaults.level_up.attack)),
            defense=int(level_up_data.get("defense", defaults.level_up.defense)),
        )

        items = defaults.starting.items
        if "starting_items" in player:
            entries = player["starting_items"] or []
            if not isinstance(entries, list) or not all(
                isinstance(entry, dict) and "name" in entry for entry in entries
            ):
                raise ValueError("player.starting_items must be a list of {name, quantity} entries")
            items = tuple(
                (str(entry["name"]), int(entry.get("quantity", 1)))
                for entry in entries
            )
        starting = StartingStats(
            hp=int(player.get("hp", defaults.starting.hp)),
            mp=int(player.get("mp", defaults.starting.mp)),
            attack=int(player.get("attack", defaults.starting.attack)),
            defense=int(player.get("defense", defaults.starting.defense)),
            gold=int(player.get("gold", defaults.starting.gold)),
            items=items,
        )

        seed = data.get("rng_seed", defaults.rng_seed)

        return cls(
            map_size=int(world.get("size", defaults.map_size)),
            terrain_weights=terrain_weights,
            village_position=position("village", defaults.village_position),
            dungeon_position=position("dungeon", defaults.dungeon_position),
            boss_room_position=position("boss_room", defaults.boss_room_position),
            encounter_chance=int(encounters.get("chance", defaults.encounter_chance)),
            flee_chance=int(combat.get("flee_chance", defaults.flee_chance)),
            drop_chance=int(combat.get("drop_chance", defaults.drop_chance)),
            drop_item=str(combat.get("drop_item", defaults.drop_item)),
            player_damage_variance=span(combat, "player_variance", defaults.player_damage_variance),
            enemy_damage_variance=span(combat, "enemy_variance", defaults.enemy_damage_variance),
            exp_per_level=int(progression.get("exp_per_level", defaults.exp_per_level)),
            victory_level=int(progression.get("victory_level", defaults.victory_level)),
            level_up=level_up,
            starting=starting,
            inventory_max_entries=int(inventory.get("max_entries", defaults.inventory_max_entries)),
            rng_seed=int(seed) if seed is not None else None,
        )


class GameConfigLoader:
    """Loader for the game rules file with caching and fallbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_default_config_path()
        self._cached_config: Optional[GameConfig] = None

    def _find_default_config_path(self) -> str:
        """Find assets/config/game.yaml by walking up from this package."""
        current_dir = Path(__file__).parent
        for _ in range(5):  # Limit search depth
            config_path = current_dir / "assets" / "config" / "game.yaml"
            if config_path.exists():
                return str(config_path)
            current_dir = current_dir.parent

        # Fallback: assume it's in the project root
        return "assets/config/game.yaml"

    def load_config(self, force_reload: bool = False) -> GameConfig:
        """Load the game configuration, using cache if available.

        A missing file or unparsable YAML falls back to the built-in
        defaults. Values that parse but break a rule raise ValueError.
        """
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        config_file = Path(self.config_path)
        if not config_file.exists():
            print(f"Warning: Game config file not found: {config_file}, using defaults")
            self._cached_config = GameConfig()
            return self._cached_config

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            print(f"Error parsing game config {config_file}: {e}")
            print("Using default configuration")
            self._cached_config = GameConfig()
            return self._cached_config

        self._cached_config = GameConfig.from_dict(config_data)
        return self._cached_config


# Global loader instance for easy access
_default_loader = GameConfigLoader()


def get_game_config(force_reload: bool = False) -> GameConfig:
    """Get the default game configuration."""
    return _default_loader.load_config(force_reload)
