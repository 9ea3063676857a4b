"""Level lifecycle gate.

A small polled state machine that decides when the requested level may be
generated and activated::

    IDLE -> AWAITING_ASSETS -> GENERATING -> ACTIVE

``WorldGenerationState.generated`` records whether terrain for the requested
level is in place. :func:`request_level` clears it when the request moves
away from the loaded level and restores it when the request comes back.

* ``IDLE``/``ACTIVE`` -> ``AWAITING_ASSETS`` while ``generated`` is false.
* ``AWAITING_ASSETS`` -> ``GENERATING`` once every asset handle of the
    requested level reports ``LOADED``. ``FAILED`` blocks exactly like a
    pending load; there is no retry counter, backoff or timeout, the gate
    simply polls again on the next tick.
* ``GENERATING`` -> ``ACTIVE`` runs terrain generation once and then sets
    ``current_level``, ``generated``, ``map_loaded`` and ``collisions_loaded``
    together.
* Any phase -> ``ACTIVE`` when ``generated`` holds again, i.e. the request
    went back to the level that is already placed.

At most one transition happens per call. A :class:`ConfigurationError` while
generating aborts the attempt (back to ``IDLE``) until the level is requested
again; an :class:`InvariantViolation` propagates to the caller.
"""

import logging
from dataclasses import replace
from typing import List, Sequence, Set

from grid_explorer.components import Position
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.errors import AssetNotReady, ConfigurationError, InvariantViolation
from grid_explorer.levels.data import AssetReadiness, LevelSource, check_level_index
from grid_explorer.levels.spawn import place_movables, spawn_player, spawn_point
from grid_explorer.levels.terrain import ensure_seed, generate_terrain, place_walls
from grid_explorer.state import State
from grid_explorer.types import LifecyclePhase, LoadState

logger = logging.getLogger(__name__)

COLLISIONS_LAYER = "Collisions"


def request_level(state: State, level_index: int) -> State:
    """Ask for ``level_index`` to become the active level.

    Re-requesting a level whose activation was aborted makes it eligible
    again.

    Raises:
        InvariantViolation: If ``level_index`` is negative.
    """
    if level_index < 0:
        raise InvariantViolation(f"Level index must be non-negative, got {level_index}")
    world = state.world
    generated = level_index == world.current_level and state.lifecycle.map_loaded
    return replace(
        state,
        world=replace(world, requested_level=level_index, generated=generated),
        lifecycle=replace(state.lifecycle, aborted_level=None),
    )


def needs_generation(state: State) -> bool:
    """True while terrain for the requested level has not been placed."""
    return not state.world.generated


def is_ready(state: State) -> bool:
    """True when the requested level is active."""
    return state.lifecycle.phase == LifecyclePhase.ACTIVE and not needs_generation(state)


def require_loaded(assets: AssetReadiness, handles: Sequence[str]) -> None:
    """Raise :class:`AssetNotReady` for the first handle not yet ``LOADED``."""
    for handle in handles:
        load_state = assets.load_state(handle)
        if load_state != LoadState.LOADED:
            raise AssetNotReady(handle, load_state)


def occupied_coordinates(state: State) -> Set[Position]:
    """Coordinates held by players and movables."""
    return {
        state.position[eid]
        for store in (state.player, state.movable)
        for eid in store
        if eid in state.position
    }


def _transition(state: State, phase: LifecyclePhase) -> State:
    logger.info(
        "Level %d: %s -> %s", state.world.requested_level, state.lifecycle.phase, phase
    )
    return replace(state, lifecycle=replace(state.lifecycle, phase=phase))


def activate_level(
    state: State, levels: LevelSource, config: SimulationConfig = DEFAULT_CONFIG
) -> State:
    """Generate and place the requested level, then mark it active.

    Movables and the player are placed before the walls. No wall is placed on
    a coordinate they occupy, so a player carried over from an earlier level
    never ends up inside regenerated terrain.

    Raises:
        ConfigurationError: If the level lacks a required layer.
        InvariantViolation: If the level index or a tile index is out of range.
    """
    level_index = state.world.requested_level
    level = levels.get_level(level_index)
    level.require_layers(config.required_layers)

    world = ensure_seed(state.world, config)
    assert world.seed is not None
    spawn = spawn_point(level, config)
    terrain = generate_terrain(world.seed, level_index, config, spawn=spawn)

    wall_positions: List[Position] = [pos for pos, _ in terrain]
    collisions = level.layers.get(COLLISIONS_LAYER)
    if collisions is not None:
        wall_positions.extend(level.to_world(tile) for tile in sorted(collisions.tiles))

    state = place_movables(state, level)
    state = spawn_player(state, spawn, config)
    occupied = occupied_coordinates(state)
    state = place_walls(state, (pos for pos in wall_positions if pos not in occupied))

    logger.info(
        "Activated level %d (%s) with %d wall(s)",
        level_index,
        level.identifier,
        len(state.wall),
    )
    return replace(
        state,
        world=replace(world, current_level=level_index, generated=True),
        lifecycle=replace(
            state.lifecycle,
            phase=LifecyclePhase.ACTIVE,
            map_loaded=True,
            collisions_loaded=True,
        ),
    )


def lifecycle_system(
    state: State,
    assets: AssetReadiness,
    levels: LevelSource,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> State:
    """Advance the lifecycle gate by at most one transition.

    Args:
        state (State): Current state.
        assets (AssetReadiness): Polled for the requested level's handles.
        levels (LevelSource): Provides level data when generating.
        config (SimulationConfig): Generation constants.

    Returns:
        State: State after the (possibly empty) transition.

    Raises:
        InvariantViolation: On an out-of-range level index or malformed level data.
    """
    lifecycle = state.lifecycle
    requested = state.world.requested_level

    if lifecycle.phase in (LifecyclePhase.IDLE, LifecyclePhase.ACTIVE):
        if not needs_generation(state):
            if lifecycle.phase == LifecyclePhase.IDLE:
                # An aborted switch left the previous level in place.
                return _transition(state, LifecyclePhase.ACTIVE)
            return state
        if lifecycle.aborted_level == requested:
            return state
        check_level_index(requested, levels.level_count)
        return _transition(state, LifecyclePhase.AWAITING_ASSETS)

    if not needs_generation(state):
        # The request went back to the level that is already in place.
        return _transition(state, LifecyclePhase.ACTIVE)

    if lifecycle.phase == LifecyclePhase.AWAITING_ASSETS:
        try:
            require_loaded(assets, assets.handles_for(requested))
        except AssetNotReady as e:
            logger.debug("Level %d still waiting: %s", requested, e)
            return state
        return _transition(state, LifecyclePhase.GENERATING)

    if lifecycle.phase == LifecyclePhase.GENERATING:
        try:
            return activate_level(state, levels, config)
        except ConfigurationError as e:
            logger.error("Aborting activation of level %d: %s", requested, e)
            return replace(
                state,
                lifecycle=replace(
                    lifecycle, phase=LifecyclePhase.IDLE, aborted_level=requested
                ),
            )

    raise ValueError(f"Unknown lifecycle phase: {lifecycle.phase}")
