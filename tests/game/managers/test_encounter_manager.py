"""
Unit tests for movement validation and random encounters.
"""
import pytest

from shadowquest.core.data.data_structures import Vector2
from shadowquest.core.data.game_enums import (
    Direction,
    EnemyType,
    TerrainType,
    HIGH_TIER_ENEMIES,
    LOW_TIER_ENEMIES,
)
from shadowquest.core.events.events import EventType
from shadowquest.game.managers.encounter_manager import EncounterManager, choose_enemy_type
from tests.conftest import scripted_rng


@pytest.fixture
def encounters(event_manager):
    return EncounterManager(event_manager)


class TestMovement:
    """Test movement rules on the small world."""

    def test_move_onto_water_is_refused(self, encounters, session_factory):
        session = session_factory(rng=scripted_rng())

        result = encounters.attempt_move(session, Direction.NORTH)

        assert not result.moved
        assert result.reason == "blocked"
        assert session.player.position == Vector2(2, 2)
        session.rng.integers.assert_not_called()

    def test_move_off_map_is_refused(self, encounters, session_factory):
        session = session_factory(rng=scripted_rng(), position=Vector2(0, 4))

        result = encounters.attempt_move(session, Direction.EAST)

        assert not result.moved
        assert result.reason == "out_of_bounds"
        assert session.player.position == Vector2(0, 4)
        session.rng.integers.assert_not_called()

    def test_move_then_no_encounter(self, encounters, session_factory, event_manager):
        moved = []
        event_manager.subscribe(EventType.PLAYER_MOVED, moved.append)
        session = session_factory(rng=scripted_rng(30))

        result = encounters.attempt_move(session, Direction.SOUTH)
        event_manager.process_events()

        assert result.moved
        assert result.encounter is None
        assert session.player.position == Vector2(3, 2)
        assert moved[0].from_position == Vector2(2, 2)
        assert moved[0].terrain == TerrainType.GRASS

    def test_move_then_encounter(self, encounters, session_factory):
        # encounter roll 29 < 30, species index 1
        session = session_factory(rng=scripted_rng(29, 1))

        result = encounters.attempt_move(session, Direction.WEST)

        assert result.moved
        assert result.encounter is not None
        assert result.encounter.enemy_type == EnemyType.GOBLIN

    def test_village_never_rolls(self, encounters, session_factory):
        session = session_factory(rng=scripted_rng(), position=Vector2(3, 2))

        result = encounters.attempt_move(session, Direction.NORTH)

        assert result.moved
        assert result.encounter is None
        session.rng.integers.assert_not_called()

    def test_boss_room_spawns_shadow_lord(self, encounters, session_factory):
        session = session_factory(rng=scripted_rng(0), position=Vector2(3, 4))

        result = encounters.attempt_move(session, Direction.SOUTH)

        assert result.encounter.enemy_type == EnemyType.SHADOW_LORD
        assert session.rng.integers.call_count == 1

    def test_dungeon_spawns_high_tier(self, encounters, session_factory):
        session = session_factory(rng=scripted_rng(0, 2), position=Vector2(0, 1))

        result = encounters.attempt_move(session, Direction.WEST)

        assert result.encounter.enemy_type == EnemyType.DRAGON


class TestChooseEnemyType:
    """Test species selection by terrain."""

    @pytest.mark.parametrize("terrain", [
        TerrainType.GRASS,
        TerrainType.FOREST,
        TerrainType.MOUNTAIN,
    ])
    def test_low_tier_on_open_ground(self, terrain):
        for index in range(3):
            assert choose_enemy_type(terrain, scripted_rng(index)) == LOW_TIER_ENEMIES[index]

    def test_high_tier_in_dungeon(self):
        for index in range(3):
            assert choose_enemy_type(TerrainType.DUNGEON, scripted_rng(index)) == HIGH_TIER_ENEMIES[index]

    def test_boss_room_without_roll(self):
        rng = scripted_rng()

        assert choose_enemy_type(TerrainType.BOSS_ROOM, rng) == EnemyType.SHADOW_LORD
        rng.integers.assert_not_called()
