"""Timberborn map document schema.

Models mirror the layout of ``world.json`` inside a Timberborn map archive.
Field names are snake_case in Python and serialize to the game's PascalCase
keys through the alias generator.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_pascal

from .grid import Grid
from .types import Vector2, Vector3

GAME_VERSION = "0.2.9.1-0b5fdc2-sm"

# Timestamps carry no timezone and no sub-second part
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class DocumentModel(BaseModel, frozen=True):
    """Base for every block of the map document."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class TemplateID(str, Enum):
    """Entity template names understood by the game."""

    STARTING_LOCATION = "StartingLocation"
    SLOPE = "Slope"
    WATER_SOURCE = "WaterSource"
    BARRIER = "Barrier"
    UNDERGROUND_RUINS = "UndergroundRuins"
    RUIN_COLUMN_H8 = "RuinColumnH8"
    BIRCH = "Birch"
    BLUEBERRY_BUSH = "BlueberryBush"


class Outflow(DocumentModel):
    """Water flowing out of a tile in each of the four directions."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def __str__(self) -> str:
        return f"{self.a}:{self.b}:{self.c}:{self.d}"


# Components


class BlockObject(DocumentModel):
    coordinates: Vector3


class WaterSourceStrength(DocumentModel):
    specified_strength: int
    current_strength: int


class DryObject(DocumentModel):
    is_dry: bool = False


class StartingLocationComponents(DocumentModel):
    block_object: BlockObject


class WaterSourceComponents(DocumentModel):
    block_object: BlockObject
    water_source: WaterSourceStrength


class BarrierComponents(DocumentModel):
    block_object: BlockObject


class SlopeComponents(DocumentModel):
    block_object: BlockObject


class DryBlockComponents(DocumentModel):
    """Components of natural objects that can dry out (ruins, plants)."""

    block_object: BlockObject
    dry_object: DryObject = Field(default_factory=DryObject)


# Entities


class BaseEntity(DocumentModel):
    id: UUID

    @property
    def coordinates(self) -> Vector3:
        """Tile the entity is placed on."""
        return self.components.block_object.coordinates  # type: ignore[attr-defined]


class StartingLocationEntity(BaseEntity):
    template: Literal[TemplateID.STARTING_LOCATION] = TemplateID.STARTING_LOCATION
    components: StartingLocationComponents


class WaterSourceEntity(BaseEntity):
    template: Literal[TemplateID.WATER_SOURCE] = TemplateID.WATER_SOURCE
    components: WaterSourceComponents


class BarrierEntity(BaseEntity):
    template: Literal[TemplateID.BARRIER] = TemplateID.BARRIER
    components: BarrierComponents


class SlopeEntity(BaseEntity):
    template: Literal[TemplateID.SLOPE] = TemplateID.SLOPE
    components: SlopeComponents


class UndergroundRuinsEntity(BaseEntity):
    template: Literal[TemplateID.UNDERGROUND_RUINS] = TemplateID.UNDERGROUND_RUINS
    components: DryBlockComponents


class RuinColumnEntity(BaseEntity):
    template: Literal[TemplateID.RUIN_COLUMN_H8] = TemplateID.RUIN_COLUMN_H8
    components: DryBlockComponents


class BirchEntity(BaseEntity):
    template: Literal[TemplateID.BIRCH] = TemplateID.BIRCH
    components: DryBlockComponents


class BlueberryBushEntity(BaseEntity):
    template: Literal[TemplateID.BLUEBERRY_BUSH] = TemplateID.BLUEBERRY_BUSH
    components: DryBlockComponents


Entity = Annotated[
    Union[
        StartingLocationEntity,
        WaterSourceEntity,
        BarrierEntity,
        SlopeEntity,
        UndergroundRuinsEntity,
        RuinColumnEntity,
        BirchEntity,
        BlueberryBushEntity,
    ],
    Field(discriminator="template"),
]


# Singletons


class MapSize(DocumentModel):
    size: Vector2


class TerrainMap(DocumentModel):
    heights: Grid[int]


class SavedCameraState(DocumentModel):
    target: Vector3
    zoom_level: int
    horizontal_angle: int
    vertical_angle: int


class CameraStateRestorer(DocumentModel):
    saved_camera_state: SavedCameraState


class WaterMap(DocumentModel):
    water_depths: Grid[int]
    outflows: Grid[Outflow]


class SoilMoistureSimulator(DocumentModel):
    moisture_levels: Grid[int]


class Singletons(DocumentModel):
    map_size: MapSize
    terrain_map: TerrainMap
    camera_state_restorer: CameraStateRestorer
    water_map: WaterMap
    soil_moisture_simulator: SoilMoistureSimulator


class MapDocument(DocumentModel):
    """Complete contents of ``world.json``."""

    game_version: str = GAME_VERSION
    timestamp: datetime
    singletons: Singletons
    entities: list[Entity] = Field(default_factory=list)

    @field_serializer("timestamp")
    def _serialize_timestamp(self, timestamp: datetime) -> str:
        return timestamp.strftime(TIMESTAMP_FORMAT)
