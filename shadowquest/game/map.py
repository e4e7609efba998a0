from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

import numpy as np

from ..core.config_loader import GameConfig
from ..core.data.data_structures import Vector2
from ..core.data.game_enums import TerrainType
from .tile import Tile


def generate_grid(
    size: int,
    weights: Sequence[tuple[TerrainType, int]],
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw a size x size terrain grid.

    Each cell independently rolls an integer in [1, 100] and takes the first
    terrain whose cumulative percent weight reaches the roll, so with the
    default weights a roll <= 50 is grass, <= 75 forest, <= 85 mountain and
    anything above is water.
    """
    terrains = np.array([terrain.value for terrain, _ in weights], dtype=np.uint8)
    cumulative = np.cumsum([weight for _, weight in weights])
    rolls = rng.integers(1, 101, size=(size, size))
    indices = np.searchsorted(cumulative, rolls, side="left")
    # Guard against weights summing below the roll range
    indices = np.minimum(indices, len(terrains) - 1)
    return terrains[indices]


@dataclass
class GameMap:
    """Square world grid of terrain tags indexed as tiles[y, x]."""
    size: int
    tiles: np.ndarray = field(init=False)
    village_position: Vector2 = field(default_factory=lambda: Vector2(5, 5))
    dungeon_position: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    boss_room_position: Vector2 = field(default_factory=lambda: Vector2(9, 9))

    def __post_init__(self):
        # uint8 is enough for the seven terrain values
        self.tiles = np.full((self.size, self.size), TerrainType.GRASS.value, dtype=np.uint8)

    @classmethod
    def generate(cls, config: GameConfig, rng: np.random.Generator) -> "GameMap":
        """Generate a random world and place the three special locations."""
        game_map = cls(
            config.map_size,
            village_position=config.village_position,
            dungeon_position=config.dungeon_position,
            boss_room_position=config.boss_room_position,
        )
        game_map.tiles = generate_grid(config.map_size, config.terrain_weights, rng)
        game_map.place_special_tiles()
        return game_map

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[TerrainType]], **positions: Vector2) -> "GameMap":
        """Build a map from explicit terrain rows (must be square)."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Map rows must form a square grid")
        game_map = cls(size, **positions)
        game_map.tiles = np.array(
            [[terrain.value for terrain in row] for row in rows], dtype=np.uint8
        )
        return game_map

    def place_special_tiles(self) -> None:
        """Overwrite the village, dungeon and boss room cells."""
        self.set_tile(self.village_position, TerrainType.VILLAGE)
        self.set_tile(self.dungeon_position, TerrainType.DUNGEON)
        self.set_tile(self.boss_room_position, TerrainType.BOSS_ROOM)

    def is_valid_position(self, position: Vector2) -> bool:
        return 0 <= position.y < self.size and 0 <= position.x < self.size

    def get_terrain_type(self, position: Vector2) -> Optional[TerrainType]:
        """Get terrain type directly from the array (faster than get_tile)."""
        if self.is_valid_position(position):
            return TerrainType(int(self.tiles[position.y, position.x]))
        return None

    def get_tile(self, position: Vector2) -> Tile:
        """Get tile at position. Position must be valid (call is_valid_position first)."""
        assert self.is_valid_position(position), f"Invalid position: {position}"
        return Tile(position, TerrainType(int(self.tiles[position.y, position.x])))

    def set_tile(self, position: Vector2, terrain_type: TerrainType) -> None:
        if self.is_valid_position(position):
            self.tiles[position.y, position.x] = terrain_type.value

    def is_passable(self, position: Vector2) -> bool:
        """In bounds and not blocking (water)."""
        if not self.is_valid_position(position):
            return False
        return self.get_tile(position).can_enter()

    def count_terrain(self, terrain_type: TerrainType) -> int:
        return int(np.count_nonzero(self.tiles == terrain_type.value))

    def iter_rows(self) -> Iterator[list[TerrainType]]:
        """Yield each row as a list of terrain types, top to bottom."""
        for row in self.tiles:
            yield [TerrainType(int(value)) for value in row]
