"""Procedural map generation package.

Builds the terrain heightmap from noise, places the starting location and
border water sources, and assembles the map document.
"""

from .config import GeneratorConfig, MapOptions, load_config
from .entities import generate_entities
from .generator import GenerationResult, Generator, SingletonDefaults
from .noise import NoiseSource, PerlinNoise
from .sources import Edge, find_edge_source, find_sources
from .start import find_start
from .topology import generate_topology

__all__ = [
    "Edge",
    "GenerationResult",
    "Generator",
    "GeneratorConfig",
    "MapOptions",
    "NoiseSource",
    "PerlinNoise",
    "SingletonDefaults",
    "find_edge_source",
    "find_sources",
    "find_start",
    "generate_entities",
    "generate_topology",
    "load_config",
]
