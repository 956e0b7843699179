"""Shared test fixtures for map generation tests."""

import itertools
import uuid
from collections.abc import Callable
from datetime import datetime

import numpy as np
import pytest
import structlog
from numpy.typing import ArrayLike, NDArray

from timbermap.grid import Grid
from timbermap.terrain.config import MapOptions


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo global structlog configuration made by a test (e.g. cli.main)."""
    yield
    structlog.reset_defaults()


class ConstantNoise:
    """Noise source returning the same value everywhere."""

    def __init__(self, value: float):
        self.value = value
        self.calls: list[tuple[NDArray[np.float64], NDArray[np.float64]]] = []

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        x, y = np.broadcast_arrays(np.asarray(x, float), np.asarray(y, float))
        self.calls.append((x, y))
        return np.full(x.shape, self.value, dtype=np.float64)


@pytest.fixture
def constant_noise() -> Callable[[float], ConstantNoise]:
    """Factory for noise sources with a fixed value."""
    return ConstantNoise


@pytest.fixture
def low_noise_factory() -> Callable[..., ConstantNoise]:
    """Noise factory flattening the whole map to layer 0.

    Every border is one long streak, so sources are always found.
    """
    return lambda seed, **kwargs: ConstantNoise(-1.0)


@pytest.fixture
def high_noise_factory() -> Callable[..., ConstantNoise]:
    """Noise factory raising the whole map to the top layer (no sources)."""
    return lambda seed, **kwargs: ConstantNoise(1.0)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock always returning 2022-03-14 15:09:26.535."""
    return lambda: datetime(2022, 3, 14, 15, 9, 26, 535000)


@pytest.fixture
def sequential_ids() -> Callable[[], uuid.UUID]:
    """Id source producing UUIDs 1, 2, 3, ..."""
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def options_16() -> MapOptions:
    """16x16 map with seed 42."""
    return MapOptions(width=16, height=16, seed=42)


@pytest.fixture
def make_topology() -> Callable[[list[list[int]]], Grid[int]]:
    """Factory building a topology grid from rows of heights (y outer)."""

    def _make(rows: list[list[int]]) -> Grid[int]:
        return Grid.from_array(np.array(rows, dtype=np.int64))

    return _make
