"""Main map generation orchestration."""

import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import IO

import structlog

from ..archive import encode_document, save_archive, write_archive
from ..document import (
    CameraStateRestorer,
    Entity,
    MapDocument,
    MapSize,
    Outflow,
    SavedCameraState,
    Singletons,
    SoilMoistureSimulator,
    TerrainMap,
    WaterMap,
)
from ..grid import Grid
from ..types import Vector2, Vector3
from .config import GeneratorConfig, MapOptions
from .entities import IdSource, generate_entities
from .noise import NoiseSource, PerlinNoise
from .sources import find_sources
from .start import find_start
from .topology import generate_topology

logger = structlog.get_logger()

Clock = Callable[[], datetime]
NoiseFactory = Callable[[int], NoiseSource]


@dataclass(frozen=True)
class SingletonDefaults:
    """Initial state of the map subsystems the generator does not compute."""

    camera_target: Vector3 = field(default_factory=lambda: Vector3(x=0, y=0, z=0))
    zoom_level: int = 0
    horizontal_angle: int = 30
    vertical_angle: int = 70
    water_depth: int = 0
    outflow: Outflow = field(default_factory=Outflow)
    moisture: int = 0

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "SingletonDefaults":
        return cls(
            zoom_level=config.camera.zoom_level,
            horizontal_angle=config.camera.horizontal_angle,
            vertical_angle=config.camera.vertical_angle,
        )

    def build(self, options: MapOptions, topology: Grid[int]) -> Singletons:
        """Assemble the singleton block around a generated heightmap."""
        width, height = topology.width, topology.height
        return Singletons(
            map_size=MapSize(size=Vector2(x=options.width, y=options.height)),
            terrain_map=TerrainMap(heights=topology),
            camera_state_restorer=CameraStateRestorer(
                saved_camera_state=SavedCameraState(
                    target=self.camera_target,
                    zoom_level=self.zoom_level,
                    horizontal_angle=self.horizontal_angle,
                    vertical_angle=self.vertical_angle,
                ),
            ),
            water_map=WaterMap(
                water_depths=Grid.filled(width, height, self.water_depth),
                outflows=Grid.filled(width, height, self.outflow),
            ),
            soil_moisture_simulator=SoilMoistureSimulator(
                moisture_levels=Grid.filled(width, height, self.moisture),
            ),
        )


class GenerationResult:
    """Result of map generation with the intermediate findings."""

    def __init__(
        self,
        topology: Grid[int],
        start: Vector3,
        sources: list[Vector3],
        entities: list[Entity],
        document: MapDocument,
    ):
        self.topology = topology
        self.start = start
        self.sources = sources
        self.entities = entities
        self.document = document


class Generator:
    """Generates Timberborn maps.

    The noise source, identifier source and clock are injectable so that
    everything except entity ids and the timestamp can be reproduced.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        noise_factory: NoiseFactory | None = None,
        id_source: IdSource = uuid.uuid4,
        clock: Clock = datetime.now,
    ):
        self.config = config or GeneratorConfig()
        self.noise_factory = noise_factory or self._perlin
        self.id_source = id_source
        self.clock = clock

    def _perlin(self, seed: int) -> NoiseSource:
        topology = self.config.topology
        return PerlinNoise(
            seed,
            alpha=topology.alpha,
            beta=topology.beta,
            octaves=topology.octaves,
        )

    def build(self, options: MapOptions) -> GenerationResult:
        """Run the whole pipeline and keep the intermediate results.

        Args:
            options: Map size and seed.

        Returns:
            GenerationResult holding the finished document.

        Raises:
            SourceNotFoundError: If no water sources can be placed.
            OutOfRangeError: On an internal grid indexing error.
        """
        logger.info(
            "generating_map",
            width=options.width,
            height=options.height,
            seed=options.seed,
        )
        start_time = time.perf_counter()

        topology = generate_topology(
            options, self.config.topology, self.noise_factory(options.seed)
        )
        start = find_start(options, topology, self.config)
        sources = find_sources(options, topology, self.config)
        entities = generate_entities(
            start, sources, self.id_source, self.config.sources.strength
        )

        defaults = SingletonDefaults.from_config(self.config)
        document = MapDocument(
            game_version=self.config.game_version,
            timestamp=self.clock(),
            singletons=defaults.build(options, topology),
            entities=entities,
        )

        logger.info(
            "map_generated",
            entities=len(entities),
            sources=len(sources),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return GenerationResult(
            topology=topology,
            start=start,
            sources=sources,
            entities=entities,
            document=document,
        )

    def generate_map(self, options: MapOptions) -> MapDocument:
        """Generate the map document for ``options``."""
        return self.build(options).document

    def generate(
        self,
        sink: IO[bytes],
        options: MapOptions,
        compressed: bool = True,
    ) -> None:
        """Generate a map and write it to ``sink`` as a zip archive.

        Nothing is written to ``sink`` if generation or encoding fails.

        Args:
            sink: Writable binary stream.
            options: Map size and seed.
            compressed: Deflate the archive member.
        """
        payload = encode_document(self.generate_map(options))
        write_archive(sink, payload, compressed=compressed)

    def generate_and_save(
        self,
        path: Path,
        options: MapOptions,
        compressed: bool = True,
    ) -> MapDocument:
        """Generate a map and save the archive to ``path``.

        Args:
            path: Output file; parent directories are created.
            options: Map size and seed.
            compressed: Deflate the archive member.

        Returns:
            The generated document.
        """
        document = self.generate_map(options)
        payload = encode_document(document)

        path.parent.mkdir(parents=True, exist_ok=True)
        save_archive(path, payload, compressed=compressed)
        return document
