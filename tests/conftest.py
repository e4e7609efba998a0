"""
Basic test fixtures for the Shadow Quest test suite.

Provides a small hand-built world, a session factory and scripted random
generators so rolls in combat and exploration tests are deterministic.
"""

import sys
import os
from unittest.mock import Mock

import numpy as np
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from shadowquest.core.config_loader import GameConfig
from shadowquest.core.data.data_structures import Vector2
from shadowquest.core.data.game_enums import TerrainType
from shadowquest.core.events.event_manager import EventManager
from shadowquest.game.entities.inventory import Inventory, Item
from shadowquest.game.entities.player import Player
from shadowquest.game.map import GameMap
from shadowquest.game.session import GameSession


G = TerrainType.GRASS
F = TerrainType.FOREST
W = TerrainType.WATER

# D . . . .
# . . ~ . .
# . . V . .
# . . . T .
# . . . . B
SMALL_WORLD_ROWS = [
    [G, G, G, G, G],
    [G, G, W, G, G],
    [G, G, G, G, G],
    [G, G, G, F, G],
    [G, G, G, G, G],
]


def scripted_rng(*values):
    """Generator stand-in whose ``integers`` calls return ``values`` in order.

    A percent roll consumes one value compared against the chance; a
    damage roll consumes one value used directly as the variance.
    """
    rng = Mock(spec=np.random.Generator)
    rng.integers.side_effect = list(values)
    return rng


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def mock_event_manager():
    """Event manager double that records publish calls."""
    event_manager = Mock(spec=EventManager)
    event_manager.publish = Mock()
    event_manager.subscribe = Mock()
    return event_manager


@pytest.fixture
def small_config():
    """Default rules on a 5x5 world."""
    return GameConfig(
        map_size=5,
        village_position=Vector2(2, 2),
        dungeon_position=Vector2(0, 0),
        boss_room_position=Vector2(4, 4),
    )


@pytest.fixture
def small_map(small_config):
    """Hand-built 5x5 world with water north of the village."""
    game_map = GameMap.from_rows(
        SMALL_WORLD_ROWS,
        village_position=small_config.village_position,
        dungeon_position=small_config.dungeon_position,
        boss_room_position=small_config.boss_room_position,
    )
    game_map.place_special_tiles()
    return game_map


@pytest.fixture
def session_factory(small_config, small_map):
    """Build sessions on the small world with a chosen rng and player tweaks."""

    def _create(rng=None, position=None, **player_overrides):
        player = Player.create("Hero", small_config.starting, small_config.village_position)
        for attribute, value in player_overrides.items():
            setattr(player, attribute, value)
        if position is not None:
            player.position = position

        inventory = Inventory(small_config.inventory_max_entries)
        inventory.add(Item.from_catalog("Health Potion", 3))

        return GameSession(
            config=small_config,
            player=player,
            inventory=inventory,
            game_map=small_map,
            rng=rng if rng is not None else np.random.default_rng(7),
        )

    return _create


@pytest.fixture
def session(session_factory):
    """A fresh level 1 session standing on the village."""
    return session_factory()


@pytest.fixture
def sample_vector():
    """Create a sample Vector2 for testing."""
    return Vector2(2, 3)
