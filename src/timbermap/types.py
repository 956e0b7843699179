"""Coordinate value types shared by the generator and the map document."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class Vector2(BaseModel, frozen=True):
    """Immutable 2D tile coordinate.

    Serialized with the game's PascalCase keys: ``{"X": .., "Y": ..}``.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    x: int
    y: int

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"


class Vector3(Vector2, frozen=True):
    """Tile coordinate plus a layer (elevation) component.

    Extends Vector2 so the three components serialize side by side as
    ``{"X": .., "Y": .., "Z": ..}``.
    """

    z: int

    @classmethod
    def from_vector2(cls, position: Vector2, z: int) -> "Vector3":
        """Lift a planar coordinate to the given layer."""
        return cls(x=position.x, y=position.y, z=z)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __repr__(self) -> str:
        return f"Vector3(x={self.x}, y={self.y}, z={self.z})"
