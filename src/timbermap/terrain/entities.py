"""Conversion of located features into map entities."""

import uuid
from collections.abc import Callable, Sequence
from uuid import UUID

import structlog

from ..document import (
    BlockObject,
    Entity,
    StartingLocationComponents,
    StartingLocationEntity,
    WaterSourceComponents,
    WaterSourceEntity,
    WaterSourceStrength,
)
from ..types import Vector3

logger = structlog.get_logger()

IdSource = Callable[[], UUID]

DEFAULT_SOURCE_STRENGTH = 8


def make_starting_location(start: Vector3, entity_id: UUID) -> StartingLocationEntity:
    """Create the starting location entity at ``start``."""
    return StartingLocationEntity(
        id=entity_id,
        components=StartingLocationComponents(
            block_object=BlockObject(coordinates=start),
        ),
    )


def make_water_source(
    coordinates: Vector3,
    entity_id: UUID,
    strength: int = DEFAULT_SOURCE_STRENGTH,
) -> WaterSourceEntity:
    """Create a water source running at full ``strength``."""
    return WaterSourceEntity(
        id=entity_id,
        components=WaterSourceComponents(
            block_object=BlockObject(coordinates=coordinates),
            water_source=WaterSourceStrength(
                specified_strength=strength,
                current_strength=strength,
            ),
        ),
    )


def generate_entities(
    start: Vector3,
    sources: Sequence[Vector3],
    id_source: IdSource = uuid.uuid4,
    strength: int = DEFAULT_SOURCE_STRENGTH,
) -> list[Entity]:
    """Build the entity list: the starting location, then one source per tile.

    Args:
        start: Starting location coordinate.
        sources: Water source coordinates.
        id_source: Returns a fresh identifier per call.
        strength: Specified and current strength of each water source.

    Returns:
        ``1 + len(sources)`` entities.
    """
    entities: list[Entity] = [make_starting_location(start, id_source())]
    for source in sources:
        entities.append(make_water_source(source, id_source(), strength))

    logger.debug("entities_generated", count=len(entities), sources=len(sources))
    return entities
