from grid_explorer.components import Position
from grid_explorer.types import OccupantKind, TileKind
from grid_explorer.utils.ecs import build_occupancy_index, query_occupant, tile_kinds
from tests.test_utils import make_grid_state


def test_occupancy_index_splits_movable_and_immovable() -> None:
    state, ids = make_grid_state(movable_positions=[(1, 0)], wall_positions=[(2, 0)])
    index = build_occupancy_index(state)
    assert dict(index.movable) == {Position(1, 0): ids["movable_ids"][0]}
    assert dict(index.immovable) == {Position(2, 0): ids["wall_ids"][0]}


def test_shared_coordinate_keeps_lowest_id() -> None:
    state, ids = make_grid_state(movable_positions=[(1, 0), (1, 0)])
    index = build_occupancy_index(state)
    assert index.movable[Position(1, 0)] == min(ids["movable_ids"])


def test_query_occupant() -> None:
    state, ids = make_grid_state(movable_positions=[(1, 0)], wall_positions=[(2, 0)])
    movable = query_occupant(state, Position(1, 0))
    wall = query_occupant(state, Position(2, 0))
    assert movable is not None
    assert movable.kind == OccupantKind.MOVABLE
    assert movable.entity_id == ids["movable_ids"][0]
    assert wall is not None
    assert wall.kind == OccupantKind.IMMOVABLE
    assert query_occupant(state, Position(0, 0)) is None


def test_tile_kinds() -> None:
    state, _ = make_grid_state(
        movable_positions=[(1, 0)], wall_positions=[(2, 0)], camera_at=None
    )
    assert tile_kinds(state) == {
        Position(0, 0): TileKind.PLAYER,
        Position(1, 0): TileKind.MOVABLE,
        Position(2, 0): TileKind.WALL,
    }
