"""Simulation configuration.

A single frozen :class:`SimulationConfig` carries every tunable constant of
the core: grid/pixel scale, camera smoothing, the chunked terrain layout and
the noise rescaling. ``DEFAULT_CONFIG`` holds the design values.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from grid_explorer.components import Position


@dataclass(frozen=True)
class SimulationConfig:
    """Tunable constants.

    Attributes:
        tile_size (float): Pixel size of one grid tile (rendering scale).
        camera_decay (float): Exponential smoothing constant ``k`` of the camera.
        chunk_size (int): Edge length of a terrain chunk in tiles.
        chunk_min (int): First chunk index (inclusive) on each axis.
        chunk_max (int): Last chunk index (exclusive) on each axis.
        noise_scale (float): Tile coordinates are divided by this before sampling.
        score_scale (float): Multiplier applied to the raw noise value.
        score_offset (float): Offset added after scaling.
        wall_threshold (float): A tile becomes a wall iff its score exceeds this.
        player_start (Position): Spawn coordinate; never a wall.
        required_layers (tuple[str, ...]): Layers a level must expose.
        seed (int | None): Fixed terrain seed; ``None`` draws one lazily.
    """

    tile_size: float = 16.0
    camera_decay: float = 5.0
    chunk_size: int = 16
    chunk_min: int = -2
    chunk_max: int = 2
    noise_scale: float = 16.0
    score_scale: float = 16.0
    score_offset: float = 8.0
    wall_threshold: float = 4.8
    player_start: Position = field(default_factory=lambda: Position(0, 0))
    required_layers: Tuple[str, ...] = ("Entities", "Collisions")
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.camera_decay <= 0:
            raise ValueError(f"camera_decay must be positive, got {self.camera_decay}")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.chunk_min >= self.chunk_max:
            raise ValueError(
                f"Empty chunk range: [{self.chunk_min}, {self.chunk_max})"
            )
        if self.noise_scale <= 0:
            raise ValueError(f"noise_scale must be positive, got {self.noise_scale}")
        if self.seed is not None and not 0 <= self.seed < 2**32:
            raise ValueError(f"seed must be a 32-bit unsigned value, got {self.seed}")


DEFAULT_CONFIG = SimulationConfig()
