"""Heightmap synthesis from coherent noise."""

import math

import numpy as np
import structlog
from numpy.typing import NDArray

from ..grid import Grid
from .config import MapOptions, TopologyConfig
from .noise import NoiseSource, PerlinNoise

logger = structlog.get_logger()


def noise_bound(octaves: int) -> float:
    """Magnitude the summed noise is assumed to stay within."""
    return math.sqrt(octaves) / 2


def heights_from_noise(
    raw: NDArray[np.float64],
    max_height: int,
    octaves: int,
) -> NDArray[np.int64]:
    """Map raw noise samples to integer terrain layers.

    Args:
        raw: Noise samples, nominally within +/- ``noise_bound(octaves)``.
        max_height: Highest terrain layer.
        octaves: Octave count the samples were produced with.

    Returns:
        Integer layers in [0, max_height].
    """
    bound = noise_bound(octaves)
    normalized = (raw + bound) / (bound * 2)
    # Half away from zero; negative values end up clamped to 0 either way
    heights = np.floor(normalized * max_height + 0.5)
    return np.clip(heights, 0, max_height).astype(np.int64)


def generate_topology(
    options: MapOptions,
    config: TopologyConfig | None = None,
    noise: NoiseSource | None = None,
) -> Grid[int]:
    """Generate the terrain heightmap.

    The noise field is sampled so its pattern repeats roughly every
    ``dimension / ratio`` tiles along each axis.

    Args:
        options: Map size and seed.
        config: Noise parameters (defaults if omitted).
        noise: Noise source; a ``PerlinNoise`` seeded with ``options.seed``
            if omitted.

    Returns:
        Grid of terrain layers in [0, config.max_height].
    """
    config = config or TopologyConfig()
    if noise is None:
        noise = PerlinNoise(
            options.seed,
            alpha=config.alpha,
            beta=config.beta,
            octaves=config.octaves,
        )

    x_period = max(options.width // config.ratio, 1)
    y_period = max(options.height // config.ratio, 1)

    ys, xs = np.meshgrid(
        np.arange(options.height), np.arange(options.width), indexing="ij"
    )
    raw = noise.noise2d(xs / x_period, ys / y_period)
    heights = heights_from_noise(np.asarray(raw), config.max_height, config.octaves)

    topology = Grid.from_array(heights)

    logger.info(
        "topology_generated",
        width=options.width,
        height=options.height,
        seed=options.seed,
        min_height=int(heights.min()),
        max_height=int(heights.max()),
        mean_height=round(float(heights.mean()), 2),
    )
    return topology
