"""Noise generation for heightmaps.

Provides classic 2D gradient (Perlin) noise with fractal octave summation,
evaluated over whole numpy coordinate arrays at once.
"""

from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

_TABLE_SIZE = 256
_TABLE_MASK = _TABLE_SIZE - 1

# Seeds are signed 64-bit; numpy wants a non-negative integer
_SEED_MASK = (1 << 64) - 1

# Unit lattice gradients; sqrt is correctly rounded, so the table is
# bit-identical across platforms
_DIRECTIONS = np.array(
    [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1)],
    dtype=np.float64,
)
_UNIT_DIRECTIONS = _DIRECTIONS / np.sqrt((_DIRECTIONS**2).sum(axis=1))[:, None]


class NoiseSource(Protocol):
    """Anything that can sample a continuous 2D noise field."""

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        ...


def _s_curve(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cubic Hermite easing, 3t^2 - 2t^3."""
    return t * t * (3.0 - 2.0 * t)


class PerlinNoise:
    """Seeded 2D Perlin noise summed over several octaves.

    Each octave samples the same lattice at ``beta`` times the previous
    frequency and contributes ``1 / alpha`` of the previous amplitude.
    """

    def __init__(
        self,
        seed: int,
        alpha: float = 1.8,
        beta: float = 2.1,
        octaves: int = 3,
    ):
        """Build the gradient and permutation tables for ``seed``.

        Args:
            seed: Any integer; equal seeds give identical fields.
            alpha: Amplitude divisor between octaves.
            beta: Frequency multiplier between octaves.
            octaves: Number of noise layers to sum.
        """
        self.alpha = alpha
        self.beta = beta
        self.octaves = octaves

        rng = np.random.default_rng(seed & _SEED_MASK)
        self._gradients = _UNIT_DIRECTIONS[rng.integers(0, len(_UNIT_DIRECTIONS), _TABLE_SIZE)]

        # Doubled so lookups of index + 1 never wrap
        permutation = rng.permutation(_TABLE_SIZE)
        self._permutation = np.concatenate([permutation, permutation])

    def _corner(
        self,
        xi: NDArray[np.int64],
        yi: NDArray[np.int64],
        dx: NDArray[np.float64],
        dy: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Dot product of a lattice gradient with the offset to the sample."""
        gradient = self._gradients[self._permutation[self._permutation[xi] + yi]]
        return gradient[..., 0] * dx + gradient[..., 1] * dy

    def _octave(
        self, x: NDArray[np.float64], y: NDArray[np.float64]
    ) -> NDArray[np.float64]:
        """Single octave of gradient noise, roughly in [-0.7, 0.7]."""
        x_floor = np.floor(x)
        y_floor = np.floor(y)
        fx = x - x_floor
        fy = y - y_floor
        xi = x_floor.astype(np.int64) & _TABLE_MASK
        yi = y_floor.astype(np.int64) & _TABLE_MASK

        n00 = self._corner(xi, yi, fx, fy)
        n10 = self._corner(xi + 1, yi, fx - 1.0, fy)
        n01 = self._corner(xi, yi + 1, fx, fy - 1.0)
        n11 = self._corner(xi + 1, yi + 1, fx - 1.0, fy - 1.0)

        sx = _s_curve(fx)
        sy = _s_curve(fy)
        bottom = n00 + sx * (n10 - n00)
        top = n01 + sx * (n11 - n01)
        return bottom + sy * (top - bottom)

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample the fractal noise field.

        Args:
            x: X coordinates (any shape broadcastable against ``y``).
            y: Y coordinates.

        Returns:
            Noise values with the broadcast shape of the inputs.
        """
        x, y = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
        )
        result = np.zeros(x.shape, dtype=np.float64)

        scale = 1.0
        for _ in range(self.octaves):
            result += self._octave(x, y) / scale
            scale *= self.alpha
            x = x * self.beta
            y = y * self.beta

        return result
