"""Grid coordinate primitives.

Positions use (y, x) ordering for direct alignment with 2D array access
patterns: the first component is the row, the second the column. This
matches ``array[y, x]`` indexing on the world map and the "row column"
line of the save file.
"""

from dataclasses import dataclass

from .game_enums import Direction


@dataclass(frozen=True)
class Vector2:
    """2D vector for grid coordinates (row, column)."""
    y: int
    x: int

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        return Vector2(self.y + other.y, self.x + other.x)

    def __repr__(self) -> str:
        return f"Vector2({self.y}, {self.x})"

    @classmethod
    def from_list(cls, coords: list[int]) -> "Vector2":
        """Create Vector2 from coordinate list (y, x order)."""
        if len(coords) < 2:
            raise ValueError("List must contain at least 2 elements")
        return cls(int(coords[0]), int(coords[1]))

    def to_tuple(self) -> tuple[int, int]:
        """Convert to coordinate tuple (y, x order)."""
        return (self.y, self.x)


# North decreases the row, west decreases the column
DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.NORTH: Vector2(-1, 0),
    Direction.SOUTH: Vector2(1, 0),
    Direction.WEST: Vector2(0, -1),
    Direction.EAST: Vector2(0, 1),
}
