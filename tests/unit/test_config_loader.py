"""
Unit tests for the YAML game rules loader.
"""
import pytest

from shadowquest.core.config_loader import GameConfig, GameConfigLoader, StartingStats
from shadowquest.core.data.data_structures import Vector2
from shadowquest.core.data.game_enums import TerrainType


class TestGameConfigDefaults:
    """Test the built-in rule values."""

    def test_defaults(self):
        config = GameConfig()

        assert config.map_size == 10
        assert config.encounter_chance == 30
        assert config.flee_chance == 50
        assert config.drop_chance == 40
        assert config.player_damage_variance == (-2, 5)
        assert config.enemy_damage_variance == (-2, 3)
        assert config.exp_per_level == 100
        assert config.victory_level == 5
        assert config.inventory_max_entries == 20
        assert config.starting.items == (("Health Potion", 3),)

    def test_weights_must_sum_to_100(self):
        with pytest.raises(ValueError):
            GameConfig(terrain_weights=((TerrainType.GRASS, 60), (TerrainType.WATER, 30)))

    def test_special_positions_must_be_on_the_map(self):
        with pytest.raises(ValueError):
            GameConfig(map_size=5)

    @pytest.mark.parametrize("field_name", ["encounter_chance", "flee_chance", "drop_chance"])
    def test_chances_are_percentages(self, field_name):
        with pytest.raises(ValueError):
            GameConfig(**{field_name: 101})

    def test_variance_must_be_ordered(self):
        with pytest.raises(ValueError):
            GameConfig(player_damage_variance=(5, -2))

    def test_drop_item_must_be_in_catalog(self):
        with pytest.raises(ValueError, match="drop_item"):
            GameConfig(drop_item="Elixir")

    def test_starting_items_must_be_in_catalog(self):
        with pytest.raises(ValueError, match="Elixir"):
            GameConfig(starting=StartingStats(items=(("Elixir", 1),)))

    def test_starting_item_quantity_must_be_positive(self):
        with pytest.raises(ValueError):
            GameConfig(starting=StartingStats(items=(("Mana Potion", 0),)))

    def test_starting_items_must_fit_inventory(self):
        starting = StartingStats(items=(("Health Potion", 3), ("Mana Potion", 2)))

        with pytest.raises(ValueError):
            GameConfig(starting=starting, inventory_max_entries=1)


class TestGameConfigFromDict:
    """Test building rules from parsed YAML."""

    def test_empty_dict_gives_defaults(self):
        assert GameConfig.from_dict({}) == GameConfig()

    def test_partial_override(self):
        config = GameConfig.from_dict({
            "encounters": {"chance": 0},
            "combat": {"player_variance": [0, 0]},
            "world": {"village": [4, 6]},
        })

        assert config.encounter_chance == 0
        assert config.player_damage_variance == (0, 0)
        assert config.village_position == Vector2(4, 6)
        assert config.flee_chance == 50

    def test_terrain_weights(self):
        config = GameConfig.from_dict({
            "world": {"terrain_weights": {"grass": 100, "water": 0}}
        })

        assert config.terrain_weights == ((TerrainType.GRASS, 100), (TerrainType.WATER, 0))

    def test_unknown_terrain(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"world": {"terrain_weights": {"lava": 100}}})

    def test_starting_items(self):
        config = GameConfig.from_dict({
            "player": {"starting_items": [{"name": "Mana Potion", "quantity": 2}]}
        })

        assert config.starting.items == (("Mana Potion", 2),)

    def test_terrain_weights_as_list(self):
        with pytest.raises(ValueError, match="terrain_weights"):
            GameConfig.from_dict({"world": {"terrain_weights": [["grass", 100]]}})

    @pytest.mark.parametrize("entries", [
        {"name": "Mana Potion"},
        ["Mana Potion"],
        [{"quantity": 2}],
    ])
    def test_malformed_starting_items(self, entries):
        with pytest.raises(ValueError, match="starting_items"):
            GameConfig.from_dict({"player": {"starting_items": entries}})

    def test_unknown_starting_item(self):
        with pytest.raises(ValueError):
            GameConfig.from_dict({"player": {"starting_items": [{"name": "Elixir"}]}})


class TestGameConfigLoader:
    """Test file loading, caching and fallbacks."""

    def test_missing_file_uses_defaults(self, tmp_path):
        loader = GameConfigLoader(str(tmp_path / "missing.yaml"))

        assert loader.load_config() == GameConfig()

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("world: [unclosed\n", encoding="utf-8")

        assert GameConfigLoader(str(path)).load_config() == GameConfig()

    def test_loads_values(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("encounters:\n  chance: 75\nrng_seed: 12\n", encoding="utf-8")

        config = GameConfigLoader(str(path)).load_config()

        assert config.encounter_chance == 75
        assert config.rng_seed == 12

    def test_out_of_range_value_raises(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("combat:\n  flee_chance: 150\n", encoding="utf-8")

        with pytest.raises(ValueError):
            GameConfigLoader(str(path)).load_config()

    def test_unknown_drop_item_raises_at_load(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("combat:\n  drop_item: Elixir\n", encoding="utf-8")

        with pytest.raises(ValueError, match="drop_item"):
            GameConfigLoader(str(path)).load_config()

    def test_config_is_cached(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("encounters:\n  chance: 10\n", encoding="utf-8")
        loader = GameConfigLoader(str(path))
        first = loader.load_config()

        path.write_text("encounters:\n  chance: 90\n", encoding="utf-8")

        assert loader.load_config() is first
        assert loader.load_config(force_reload=True).encounter_chance == 90

    def test_bundled_config_matches_defaults(self):
        assert GameConfigLoader().load_config() == GameConfig()
