"""ECS convenience queries and the per-pass occupancy index.

The occupancy index maps grid coordinates to occupants, split into a
``movable`` half (from ``Movable`` entities) and an ``immovable`` half (from
``Wall`` entities). It is derived from a ``State`` snapshot and never stored
on it.

Performance: the index is cached on the persistent (hashable) stores it
is built from. Any new ``State`` whose positions or tags changed produces a
distinct key, so a stale index is never returned.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Mapping, Optional

from grid_explorer.components import Position
from grid_explorer.state import State
from grid_explorer.types import EntityID, OccupantKind, TileKind


@dataclass(frozen=True)
class OccupancyIndex:
    """Coordinate lookups for one resolution pass.

    Attributes:
        movable: Coordinate to the movable entity occupying it.
        immovable: Coordinate to the wall occupying it.
    """

    movable: Mapping[Position, EntityID]
    immovable: Mapping[Position, EntityID]


@dataclass(frozen=True)
class Occupant:
    """Result of :func:`query_occupant`."""

    kind: OccupantKind
    entity_id: EntityID


def _coordinate_map(
    position_store: Mapping[EntityID, Position],
    tag_store: Mapping[EntityID, object],
) -> Dict[Position, EntityID]:
    index: Dict[Position, EntityID] = {}
    # Lowest id wins when two tagged entities share a coordinate.
    for eid in sorted(tag_store.keys()):
        pos = position_store.get(eid)
        if pos is not None and pos not in index:
            index[pos] = eid
    return index


@lru_cache(maxsize=64)
def _occupancy_index(
    position_store: Mapping[EntityID, Position],
    movable_store: Mapping[EntityID, object],
    wall_store: Mapping[EntityID, object],
) -> OccupancyIndex:
    return OccupancyIndex(
        movable=_coordinate_map(position_store, movable_store),
        immovable=_coordinate_map(position_store, wall_store),
    )


def build_occupancy_index(state: State) -> OccupancyIndex:
    """Return the occupancy index for ``state``."""
    return _occupancy_index(state.position, state.movable, state.wall)


def query_occupant(state: State, pos: Position) -> Optional[Occupant]:
    """Return who occupies ``pos``: a movable, a wall, or ``None``.

    Movables are reported before walls if both somehow share a tile.
    """
    index = build_occupancy_index(state)
    if pos in index.movable:
        return Occupant(OccupantKind.MOVABLE, index.movable[pos])
    if pos in index.immovable:
        return Occupant(OccupantKind.IMMOVABLE, index.immovable[pos])
    return None


def tile_kinds(state: State) -> Dict[Position, TileKind]:
    """Classify every occupied coordinate for renderers.

    Players are drawn over movables, movables over walls.
    """
    kinds: Dict[Position, TileKind] = {}
    for store, kind in (
        (state.wall, TileKind.WALL),
        (state.movable, TileKind.MOVABLE),
        (state.player, TileKind.PLAYER),
    ):
        for eid in store:
            pos = state.position.get(eid)
            if pos is not None:
                kinds[pos] = kind
    return kinds
