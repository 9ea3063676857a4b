"""Per-tick orchestration.

This module wires the systems together for one fixed simulation tick. The
exported :func:`step` is pure: it returns a *new*
:class:`grid_explorer.state.State`.

Ordering:

1. ``lifecycle_system`` makes at most one level lifecycle transition (which
    may place new terrain).
2. ``movement_system`` resolves this tick's direction against the occupancy
    of the state left by step 1.
3. ``camera_system`` smooths the rendered camera toward the (possibly just
    moved) camera anchor.
4. The turn counter is bumped.
"""

from dataclasses import replace

from grid_explorer.actions import DirectionInput, resolve_direction
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.levels.data import AssetReadiness, LevelSource
from grid_explorer.state import State
from grid_explorer.systems.camera import camera_system
from grid_explorer.systems.lifecycle import lifecycle_system
from grid_explorer.systems.movement import movement_system


def step(
    state: State,
    inputs: DirectionInput,
    dt: float,
    assets: AssetReadiness,
    levels: LevelSource,
    config: SimulationConfig = DEFAULT_CONFIG,
) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable state.
        inputs (DirectionInput): Directions newly pressed this tick.
        dt (float): Seconds since the previous tick (camera smoothing only).
        assets (AssetReadiness): Asset load-state provider.
        levels (LevelSource): Level data provider.
        config (SimulationConfig): Simulation constants.

    Returns:
        State: Next state snapshot; ``last_move`` holds this tick's outcome.

    Raises:
        InvariantViolation: If level data is out of range or malformed.
    """
    state = lifecycle_system(state, assets, levels, config)
    state = movement_system(state, resolve_direction(inputs))
    state = camera_system(state, dt, config)
    return replace(state, turn=state.turn + 1)
