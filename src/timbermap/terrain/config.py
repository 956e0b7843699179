"""Map generation options and configuration models."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from ..document import GAME_VERSION

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class MapOptions(BaseModel, frozen=True):
    """Per-run inputs: map size and seed."""

    width: int = Field(gt=0, description="Map width in tiles")
    height: int = Field(gt=0, description="Map height in tiles")
    seed: int = Field(ge=INT64_MIN, le=INT64_MAX, description="Noise seed (signed 64-bit)")


class TopologyConfig(BaseModel):
    """Heightmap noise parameters."""

    max_height: int = Field(default=16, description="Highest terrain layer")
    ratio: int = Field(
        default=4, description="Noise pattern repeats about every dimension/ratio tiles"
    )
    octaves: int = Field(default=3, description="Number of noise octaves")
    alpha: float = Field(default=1.8, description="Amplitude divisor per octave")
    beta: float = Field(default=2.1, description="Frequency multiplier per octave")


class SourceConfig(BaseModel):
    """Border water source detection parameters."""

    min_streak: int = Field(
        default=5, description="Minimum run of equal low tiles to place sources"
    )
    strength: int = Field(default=8, description="Initial strength of placed sources")


class CameraConfig(BaseModel):
    """Initial camera pose stored in the map."""

    zoom_level: int = Field(default=0, description="Camera zoom level")
    horizontal_angle: int = Field(default=30, description="Camera horizontal angle")
    vertical_angle: int = Field(default=70, description="Camera vertical angle")


class GeneratorConfig(BaseModel):
    """Complete map generation configuration."""

    game_version: str = Field(
        default=GAME_VERSION, description="Game version tag written into the map"
    )
    base_layer: int = Field(
        default=4, description="Layer of the starting location; sources sit below it"
    )

    topology: TopologyConfig = Field(default_factory=TopologyConfig)
    sources: SourceConfig = Field(default_factory=SourceConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)

    @property
    def max_source_elevation(self) -> int:
        """Highest elevation a border streak may sit at to hold water sources."""
        return self.base_layer - 1


def load_config(config_path: Path) -> GeneratorConfig:
    """Load generator configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed GeneratorConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return GeneratorConfig.model_validate(data)
