"""Water source placement along the map border.

Each edge is scanned for a flat, low stretch of tiles (a "streak"). The
first stretch long enough on an edge becomes a row of water sources.
"""

from enum import Enum

import structlog

from ..exceptions import SourceNotFoundError
from ..grid import Grid
from ..types import Vector2, Vector3
from .config import GeneratorConfig, MapOptions

logger = structlog.get_logger()


class Edge(str, Enum):
    """Map edges, in the order they are scanned."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def edge_cells(edge: Edge, width: int, height: int) -> list[Vector2]:
    """List the tiles of an edge in scan order.

    Top and bottom run left to right, left and right run top to bottom.
    """
    if edge == Edge.TOP:
        return [Vector2(x=i, y=0) for i in range(width)]
    if edge == Edge.BOTTOM:
        return [Vector2(x=i, y=height - 1) for i in range(width)]
    if edge == Edge.LEFT:
        return [Vector2(x=0, y=i) for i in range(height)]
    return [Vector2(x=width - 1, y=i) for i in range(height)]


def find_edge_source(
    topology: Grid[int],
    cells: list[Vector2],
    max_elevation: int,
    min_streak: int,
) -> list[Vector3] | None:
    """Find the first streak of equal, low tiles along ``cells``.

    A tile extends the current streak when it has the same elevation as the
    previous tile and that elevation is at most ``max_elevation``. The first
    streak reaching ``min_streak`` tiles is returned as soon as it ends,
    even if a longer one follows.

    Args:
        topology: Terrain heightmap.
        cells: Tiles to scan, in order.
        max_elevation: Highest elevation a streak may sit at.
        min_streak: Minimum streak length.

    Returns:
        Streak tiles at the streak elevation, or None if no streak qualifies.

    Raises:
        OutOfRangeError: If a cell lies outside the topology.
    """
    last_elevation = -1
    streak = 0

    def completed(end: int) -> list[Vector3] | None:
        if streak < min_streak:
            return None
        return [
            Vector3.from_vector2(cell, last_elevation)
            for cell in cells[end - streak : end]
        ]

    for i, cell in enumerate(cells):
        elevation = topology.get(cell.x, cell.y)
        if elevation <= max_elevation and elevation == last_elevation:
            streak += 1
        else:
            found = completed(i)
            if found is not None:
                return found
            streak = 1
        last_elevation = elevation

    # Streak running into the last cell
    return completed(len(cells))


def find_sources(
    options: MapOptions,
    topology: Grid[int],
    config: GeneratorConfig | None = None,
) -> list[Vector3]:
    """Locate water sources on the map border.

    Edges are tried top, bottom, left, right. The first edge with a streak
    starts the result and the next edge with a streak is appended to it,
    after which the search stops: at most two edges contribute.

    Args:
        options: Map size and seed.
        topology: Terrain heightmap.
        config: Generation config (elevation ceiling and streak length).

    Returns:
        Source coordinates, never empty.

    Raises:
        SourceNotFoundError: If no edge has a qualifying streak.
        OutOfRangeError: If the topology is smaller than ``options``.
    """
    config = config or GeneratorConfig()
    max_elevation = config.max_source_elevation
    min_streak = config.sources.min_streak

    sources: list[Vector3] | None = None

    for edge in Edge:
        cells = edge_cells(edge, options.width, options.height)
        found = find_edge_source(topology, cells, max_elevation, min_streak)
        if found is None:
            logger.debug("edge_source_missing", edge=edge.value)
            continue

        logger.debug(
            "edge_source_found",
            edge=edge.value,
            length=len(found),
            elevation=found[0].z,
        )
        if sources is None:
            sources = found
            continue
        sources = sources + found
        break

    if sources is None:
        raise SourceNotFoundError()

    logger.info("sources_located", count=len(sources))
    return sources
