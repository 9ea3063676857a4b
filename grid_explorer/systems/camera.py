"""Camera follower system.

Smooths each camera anchor's :class:`RenderedPosition` toward its grid target
``tile_size * position`` with per-axis exponential smoothing::

    rendered = rendered * (1 - k * dt) + target * k * dt

This decouples visual motion from discrete logical ticks. For a stationary
target and ``k * dt`` in ``(0, 1)`` the distance to the target shrinks by the
factor ``1 - k * dt`` every frame, so it decreases strictly and monotonically
toward zero. Larger steps are clamped to a factor of ``1`` (snap to target)
so a long frame never overshoots.
"""

from dataclasses import replace

from grid_explorer.components import Position, RenderedPosition
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.state import State


def camera_target(pos: Position, tile_size: float) -> RenderedPosition:
    """Return the pixel position a grid coordinate renders at."""
    return RenderedPosition(pos.x * tile_size, pos.y * tile_size)


def smooth_toward(
    rendered: RenderedPosition, target: RenderedPosition, factor: float
) -> RenderedPosition:
    """Blend ``rendered`` toward ``target`` by ``factor`` (clamped to ``[0, 1]``)."""
    factor = min(max(factor, 0.0), 1.0)
    return RenderedPosition(
        rendered.x * (1.0 - factor) + target.x * factor,
        rendered.y * (1.0 - factor) + target.y * factor,
    )


def camera_system(
    state: State, dt: float, config: SimulationConfig = DEFAULT_CONFIG
) -> State:
    """Advance the smoothed rendered position of every camera anchor.

    Args:
        state (State): Current state.
        dt (float): Seconds elapsed since the previous rendering tick.
        config (SimulationConfig): Supplies ``tile_size`` and ``camera_decay``.

    Returns:
        State: State with updated ``rendered_position`` entries. Anchors that
        have no rendered position yet start exactly at their target.
    """
    rendered_position = state.rendered_position
    factor = config.camera_decay * dt
    for eid in state.camera_anchor:
        pos = state.position.get(eid)
        if pos is None:
            continue
        target = camera_target(pos, config.tile_size)
        rendered = rendered_position.get(eid)
        if rendered is None:
            rendered_position = rendered_position.set(eid, target)
        else:
            rendered_position = rendered_position.set(
                eid, smooth_toward(rendered, target, factor)
            )
    return replace(state, rendered_position=rendered_position)
