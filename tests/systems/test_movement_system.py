from typing import Tuple

import pytest

from grid_explorer.actions import Direction, DirectionInput
from grid_explorer.components import Position
from grid_explorer.state import State
from grid_explorer.systems.movement import attempt_move, movement_system
from grid_explorer.types import EntityID, MoveOutcome
from tests.test_utils import make_grid_state


def test_push_into_open_space() -> None:
    state, ids = make_grid_state(movable_positions=[(1, 0)])
    new_state, outcome = attempt_move(state, DirectionInput(right=True))
    assert outcome == MoveOutcome.MOVED
    assert new_state.position[ids["player_ids"][0]] == Position(1, 0)
    assert new_state.position[ids["movable_ids"][0]] == Position(2, 0)


def test_push_blocked_by_wall() -> None:
    state, ids = make_grid_state(movable_positions=[(1, 0)], wall_positions=[(2, 0)])
    new_state, outcome = attempt_move(state, DirectionInput(right=True))
    assert outcome == MoveOutcome.BLOCKED
    assert new_state.position == state.position


def test_blocked_push_is_idempotent() -> None:
    state, _ = make_grid_state(movable_positions=[(1, 0)], wall_positions=[(2, 0)])
    once, _ = attempt_move(state, DirectionInput(right=True))
    twice, outcome = attempt_move(once, DirectionInput(right=True))
    assert outcome == MoveOutcome.BLOCKED
    assert twice.position == state.position


@pytest.mark.parametrize(
    "direction, delta",
    [
        (Direction.LEFT, (-1, 0)),
        (Direction.RIGHT, (1, 0)),
        (Direction.DOWN, (0, -1)),
        (Direction.UP, (0, 1)),
    ],
)
@pytest.mark.parametrize("chain_length", [0, 1, 2, 5])
def test_unobstructed_chain_shifts_by_delta(
    direction: Direction, delta: Tuple[int, int], chain_length: int
) -> None:
    dx, dy = delta
    movables = [(dx * i, dy * i) for i in range(1, chain_length + 1)]
    state, ids = make_grid_state(movable_positions=movables)
    new_state = movement_system(state, direction)
    assert new_state.last_move == MoveOutcome.MOVED
    for eid in ids["player_ids"] + ids["movable_ids"]:
        old = state.position[eid]
        assert new_state.position[eid] == Position(old.x + dx, old.y + dy)


@pytest.mark.parametrize("chain_length", [0, 1, 3])
def test_wall_after_chain_blocks_everyone(chain_length: int) -> None:
    movables = [(0, i) for i in range(1, chain_length + 1)]
    state, ids = make_grid_state(
        movable_positions=movables, wall_positions=[(0, chain_length + 1)]
    )
    new_state = movement_system(state, Direction.UP)
    assert new_state.last_move == MoveOutcome.BLOCKED
    assert new_state.position == state.position


def test_no_input_is_noop_without_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(state: State, eid: EntityID, delta: Position) -> State:
        raise AssertionError("push resolution must not run without input")

    monkeypatch.setattr("grid_explorer.systems.movement.push_system", fail)
    state, _ = make_grid_state(movable_positions=[(1, 0)])
    new_state, outcome = attempt_move(state, DirectionInput())
    assert outcome == MoveOutcome.NO_OP
    assert new_state.position == state.position


def test_priority_left_wins_over_right() -> None:
    state, ids = make_grid_state()
    new_state, _ = attempt_move(state, DirectionInput(left=True, right=True, up=True))
    assert new_state.position[ids["player_ids"][0]] == Position(-1, 0)


def test_camera_anchor_shifts_when_player_moves() -> None:
    state, ids = make_grid_state(camera_at=(0, 0))
    new_state = movement_system(state, Direction.DOWN)
    assert ids["camera_id"] is not None
    assert new_state.position[ids["camera_id"]] == Position(0, -1)


def test_camera_anchor_stays_when_blocked() -> None:
    state, ids = make_grid_state(wall_positions=[(0, -1)], camera_at=(0, 0))
    new_state = movement_system(state, Direction.DOWN)
    assert ids["camera_id"] is not None
    assert new_state.position[ids["camera_id"]] == Position(0, 0)


def test_camera_anchor_shifts_once_for_several_players() -> None:
    state, ids = make_grid_state(player_positions=[(0, 0), (0, 5)], camera_at=(3, 3))
    new_state = movement_system(state, Direction.RIGHT)
    assert ids["camera_id"] is not None
    assert new_state.position[ids["camera_id"]] == Position(4, 3)


def test_players_sharing_a_start_are_processed_once() -> None:
    state, ids = make_grid_state(
        player_positions=[(0, 0), (0, 0)], movable_positions=[(1, 0)]
    )
    first, second = ids["player_ids"]
    new_state = movement_system(state, Direction.RIGHT)
    assert new_state.position[first] == Position(1, 0)
    assert new_state.position[second] == Position(0, 0)
    # The shared occupant is shifted exactly once.
    assert new_state.position[ids["movable_ids"][0]] == Position(2, 0)


def test_one_player_blocked_another_moves() -> None:
    state, ids = make_grid_state(
        player_positions=[(0, 0), (0, 5)], wall_positions=[(1, 0)]
    )
    blocked, free = ids["player_ids"]
    new_state = movement_system(state, Direction.RIGHT)
    assert new_state.last_move == MoveOutcome.MOVED
    assert new_state.position[blocked] == Position(0, 0)
    assert new_state.position[free] == Position(1, 5)


def test_no_players_is_noop() -> None:
    state, _ = make_grid_state(player_positions=[], camera_at=None)
    assert movement_system(state, Direction.UP).last_move == MoveOutcome.NO_OP
