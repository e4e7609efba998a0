from dataclasses import dataclass

from ..core.data.data_structures import Vector2
from ..core.data.game_enums import TerrainType
from ..core.data.game_info import TERRAIN_DATA


@dataclass
class Tile:
    position: Vector2
    terrain_type: TerrainType

    def __post_init__(self):
        self._info = TERRAIN_DATA[self.terrain_type]

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def symbol(self) -> str:
        return self._info.symbol

    @property
    def blocks_movement(self) -> bool:
        return self._info.blocks_movement

    @property
    def is_safe(self) -> bool:
        """Safe tiles never roll random encounters."""
        return self._info.safe

    def can_enter(self) -> bool:
        """Check if the player can step onto this tile."""
        return not self.blocks_movement
