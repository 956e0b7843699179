"""Starting location placement."""

from ..grid import Grid
from ..types import Vector3
from .config import GeneratorConfig, MapOptions


def find_start(
    options: MapOptions,
    topology: Grid[int],
    config: GeneratorConfig | None = None,
) -> Vector3:
    """Pick the colony's starting tile.

    Always the map center on the base layer; the terrain height there is
    not consulted.

    Args:
        options: Map size and seed.
        topology: Generated heightmap.
        config: Generation config providing the base layer.

    Returns:
        Starting coordinate.
    """
    # TODO: search outwards from the center for a flat area at base_layer
    config = config or GeneratorConfig()
    return Vector3(x=options.width // 2, y=options.height // 2, z=config.base_layer)
