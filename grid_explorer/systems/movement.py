"""Player movement system.

Resolves one direction per tick for every player:

1. Players are visited in ascending id order. A player whose starting
    coordinate was already used by an earlier player this tick is skipped, so
    shared occupants are never shifted twice.
2. Each remaining player attempts a push (see :mod:`grid_explorer.systems.push`);
    the occupancy index is derived from the state as left by the previous
    player.
3. If at least one player moved, every camera anchor shifts by the same
    delta once.

A push against a wall is a normal outcome (``MoveOutcome.BLOCKED``) and leaves
the state untouched, so repeating it is idempotent.
"""

from dataclasses import replace
from typing import Optional, Set, Tuple

from grid_explorer.actions import (
    DIRECTION_VECTORS,
    Direction,
    DirectionInput,
    resolve_direction,
)
from grid_explorer.components import Position
from grid_explorer.state import State
from grid_explorer.systems.push import push_system
from grid_explorer.types import MoveOutcome


def direction_delta(direction: Direction) -> Position:
    """Return the unit vector for ``direction``."""
    return Position(*DIRECTION_VECTORS[direction])


def camera_anchor_system(state: State, delta: Position) -> State:
    """Shift every camera anchor by ``delta``."""
    position = state.position
    for eid in state.camera_anchor:
        pos = position.get(eid)
        if pos is not None:
            position = position.set(eid, pos + delta)
    return replace(state, position=position)


def movement_system(state: State, direction: Optional[Direction]) -> State:
    """Resolve ``direction`` for all players and record the outcome.

    Args:
        state (State): Current state.
        direction (Direction | None): Direction honored this tick.

    Returns:
        State: New state with updated positions and ``last_move`` set.
    """
    if direction is None:
        return replace(state, last_move=MoveOutcome.NO_OP)

    delta = direction_delta(direction)
    visited_starts: Set[Position] = set()
    moved = False
    blocked = False

    for player_id in sorted(state.player.keys()):
        start = state.position.get(player_id)
        if start is None or start in visited_starts:
            continue
        visited_starts.add(start)

        pushed_state = push_system(state, player_id, delta)
        if pushed_state is state:
            blocked = True
        else:
            moved = True
            state = pushed_state

    if moved:
        state = camera_anchor_system(state, delta)
        outcome = MoveOutcome.MOVED
    elif blocked:
        outcome = MoveOutcome.BLOCKED
    else:
        outcome = MoveOutcome.NO_OP
    return replace(state, last_move=outcome)


def attempt_move(state: State, inputs: DirectionInput) -> Tuple[State, MoveOutcome]:
    """Resolve this tick's direction input against ``state``.

    Only the highest priority newly pressed direction (left, right, down, up)
    is honored. With nothing pressed this returns ``NO_OP`` without touching
    the occupancy index.

    Returns:
        tuple[State, MoveOutcome]: Next state and the movement outcome.
    """
    state = movement_system(state, resolve_direction(inputs))
    return state, state.last_move
