"""Fixed-size 2D grid over a flat row-major buffer.

The game stores every per-tile layer (heights, water depths, outflows,
moisture) as one space-separated string of cell values. ``Grid`` keeps the
cells in that same order so encoding is a single join.
"""

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import NDArray
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import OutOfRangeError

T = TypeVar("T")

# Key of the single field a grid is encoded under
ARRAY_FIELD = "Array"


class Grid(Generic[T]):
    """Width x height cells addressed by (x, y), index = y * width + x.

    The size is fixed at construction; ``get`` and ``set`` raise
    ``OutOfRangeError`` for coordinates outside ``[0, width) x [0, height)``.
    """

    def __init__(self, width: int, height: int, cells: list[T]):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if len(cells) != width * height:
            raise ValueError(
                f"Grid of {width}x{height} needs {width * height} cells, got {len(cells)}"
            )
        self._width = width
        self._height = height
        self._cells = cells

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Grid[T]":
        """Create a grid with every cell set to ``value``."""
        return cls(width, height, [value] * (width * height))

    @classmethod
    def from_array(cls, array: NDArray[Any]) -> "Grid[Any]":
        """Create a grid from a 2D array of shape (height, width)."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        height, width = array.shape
        return cls(width, height, array.reshape(-1).tolist())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfRangeError(x, y, self._width, self._height)
        return y * self._width + x

    def get(self, x: int, y: int) -> T:
        """Return the value at (x, y)."""
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        """Store ``value`` at (x, y)."""
        self._cells[self._index(x, y)] = value

    def to_array(self) -> NDArray[Any]:
        """Return the cells as a (height, width) numpy array."""
        return np.array(self._cells).reshape(self._height, self._width)

    def encode(self) -> dict[str, str]:
        """Encode as the game's ``{"Array": "v0 v1 ..."}`` object.

        Cells are written row-major using each value's ``str()``, separated
        by single spaces with no trailing separator.
        """
        return {ARRAY_FIELD: " ".join(str(value) for value in self._cells)}

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Grids are built by the generator, never parsed; only serialization matters
        return core_schema.is_instance_schema(
            Grid,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda grid: grid.encode(),
                info_arg=False,
                return_schema=core_schema.dict_schema(
                    core_schema.str_schema(), core_schema.str_schema()
                ),
            ),
        )
