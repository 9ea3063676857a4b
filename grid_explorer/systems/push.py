"""Push-chain resolution.

A player moving by ``delta`` pushes the contiguous run of movable entities
directly ahead of it. The run is found by stepping ``start + delta``,
``start + 2 * delta``... through the movable half of the occupancy index. The
first coordinate that holds no movable decides the outcome: a wall there
aborts the whole move, anything else lets the player and the run shift by one
tile together.
"""

from dataclasses import replace
from typing import List, Optional

from grid_explorer.components import Position
from grid_explorer.state import State
from grid_explorer.types import EntityID
from grid_explorer.utils.ecs import OccupancyIndex, build_occupancy_index


def scan_push_chain(
    index: OccupancyIndex, start: Position, delta: Position
) -> Optional[List[EntityID]]:
    """Collect the movables ahead of ``start`` in the direction ``delta``.

    Args:
        index (OccupancyIndex): Occupancy of the current snapshot.
        start (Position): Coordinate of the pushing entity.
        delta (Position): Unit direction vector.

    Returns:
        list[EntityID] | None: Chain members nearest first (possibly empty), or
        ``None`` if a wall sits right behind the chain.
    """
    chain: List[EntityID] = []
    current = start + delta
    while current in index.movable:
        chain.append(index.movable[current])
        current = current + delta
    if current in index.immovable:
        return None
    return chain


def push_system(state: State, eid: EntityID, delta: Position) -> State:
    """Move ``eid`` by ``delta``, pushing any chain of movables ahead of it.

    Args:
        state (State): Current immutable state.
        eid (EntityID): Entity initiating the move (must have a position).
        delta (Position): Unit direction vector.

    Returns:
        State: Updated state if the move succeeds; the very same ``state``
        object if it is blocked (or ``eid`` has no position).
    """
    current_pos = state.position.get(eid)
    if current_pos is None:
        return state

    chain = scan_push_chain(build_occupancy_index(state), current_pos, delta)
    if chain is None:
        return state  # Push not possible

    # Destinations are free after the shift: the scan proved the run contiguous.
    new_position = state.position.set(eid, current_pos + delta)
    for pushed_id in chain:
        new_position = new_position.set(pushed_id, state.position[pushed_id] + delta)

    return replace(state, position=new_position)
