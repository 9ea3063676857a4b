"""Procedural terrain generation.

Walls are placed by sampling a seeded gradient noise field over a chunked
coordinate space:

* The world spans chunk indices ``[chunk_min, chunk_max)`` on both axes, each
  chunk ``chunk_size`` tiles wide; a tile's absolute coordinate is
  ``chunk * chunk_size + offset`` with ``offset`` in
  ``[-chunk_size // 2, chunk_size - chunk_size // 2)``.
* Each tile is scored as ``noise(seed, x / noise_scale, y / noise_scale) *
  score_scale + score_offset`` and becomes a wall iff the score exceeds
  ``wall_threshold``.
* The spawn coordinate never becomes a wall.

Output is a pure function of ``(seed, coordinate)``. The level index is
validated but does not feed the field, so every level of a session shares the
same terrain.
"""

import logging
import random
from dataclasses import replace
from typing import Iterable, Optional, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import pmap, pset
from pyrsistent.typing import PMap, PSet

from grid_explorer.components import Position, Wall
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.entity import Entity, new_entity_id
from grid_explorer.errors import InvariantViolation
from grid_explorer.state import State, WorldGenerationState
from grid_explorer.types import EntityID, TileKind
from grid_explorer.utils.noise import noise_field

logger = logging.getLogger(__name__)

TerrainTile = Tuple[Position, TileKind]


def ensure_seed(
    world: WorldGenerationState, config: SimulationConfig = DEFAULT_CONFIG
) -> WorldGenerationState:
    """Return ``world`` with a seed, drawing one only if none was assigned yet."""
    if world.seed is not None:
        return world
    if config.seed is not None:
        seed = config.seed
    else:
        seed = random.SystemRandom().getrandbits(32)
    logger.info("Assigned terrain seed %d", seed)
    return replace(world, seed=seed)


def chunk_axis(config: SimulationConfig = DEFAULT_CONFIG) -> npt.NDArray[np.int64]:
    """Absolute tile coordinates covered by the chunk range along one axis."""
    half = config.chunk_size // 2
    chunks = np.arange(config.chunk_min, config.chunk_max, dtype=np.int64)
    offsets = np.arange(-half, config.chunk_size - half, dtype=np.int64)
    return (chunks[:, None] * config.chunk_size + offsets[None, :]).ravel()


def terrain_scores(
    seed: int, config: SimulationConfig = DEFAULT_CONFIG
) -> Tuple[npt.NDArray[np.int64], npt.NDArray[np.int64], npt.NDArray[np.float64]]:
    """Score every tile of the chunk range.

    Returns:
        tuple: Flat ``xs``, ``ys`` tile coordinates and their ``scores``.
    """
    axis = chunk_axis(config)
    xs, ys = np.meshgrid(axis, axis, indexing="xy")
    xs = xs.ravel()
    ys = ys.ravel()
    raw = noise_field(seed, xs / config.noise_scale, ys / config.noise_scale)
    return xs, ys, raw * config.score_scale + config.score_offset


def generate_terrain(
    seed: int,
    level_index: int,
    config: SimulationConfig = DEFAULT_CONFIG,
    spawn: Optional[Position] = None,
) -> PSet[TerrainTile]:
    """Generate the wall set of a level.

    Args:
        seed (int): 32-bit terrain seed.
        level_index (int): Requested level; must be non-negative.
        config (SimulationConfig): Chunk layout and scoring constants.
        spawn (Position | None): Coordinate kept free of walls. Defaults to
            ``config.player_start``.

    Returns:
        PSet[tuple[Position, TileKind]]: Every wall tile of the chunk range.

    Raises:
        InvariantViolation: If ``level_index`` is negative.
    """
    if level_index < 0:
        raise InvariantViolation(f"Level index must be non-negative, got {level_index}")
    if spawn is None:
        spawn = config.player_start

    xs, ys, scores = terrain_scores(seed, config)
    mask = scores > config.wall_threshold
    candidates = (Position(int(x), int(y)) for x, y in zip(xs[mask], ys[mask]))
    walls = pset((pos, TileKind.WALL) for pos in candidates if pos != spawn)
    logger.debug(
        "Generated %d wall(s) for level %d with seed %d", len(walls), level_index, seed
    )
    return walls


def place_walls(state: State, coordinates: Iterable[Position]) -> State:
    """Replace every wall entity in ``state`` with walls at ``coordinates``.

    Previously placed walls are despawned first, so activating a new level
    never accumulates terrain. Duplicate coordinates produce a single wall.
    New ids are allocated in coordinate order.
    """
    state_entity = state.entity
    state_position = state.position
    for eid in state.wall:
        state_entity = state_entity.discard(eid)
        state_position = state_position.discard(eid)

    state_wall: PMap[EntityID, Wall] = pmap()
    for pos in sorted(set(coordinates), key=lambda p: (p.y, p.x)):
        eid = new_entity_id()
        state_entity = state_entity.set(eid, Entity())
        state_wall = state_wall.set(eid, Wall())
        state_position = state_position.set(eid, pos)

    return replace(
        state,
        entity=state_entity,
        wall=state_wall,
        position=state_position,
    )
