from typing import Dict, List, Optional, Sequence, Tuple, TypedDict

from pyrsistent import pmap, pset, pvector

from grid_explorer.components import (
    CameraAnchor,
    Movable,
    Player,
    Position,
    RenderedPosition,
    Wall,
)
from grid_explorer.entity import Entity
from grid_explorer.levels.data import EntityInstance, Layer, LevelData
from grid_explorer.state import State
from grid_explorer.types import EntityID


class GridEntities(TypedDict):
    player_ids: List[EntityID]
    movable_ids: List[EntityID]
    wall_ids: List[EntityID]
    camera_id: Optional[EntityID]


def make_grid_state(
    player_positions: Sequence[Tuple[int, int]] = ((0, 0),),
    movable_positions: Sequence[Tuple[int, int]] = (),
    wall_positions: Sequence[Tuple[int, int]] = (),
    camera_at: Optional[Tuple[int, int]] = (0, 0),
    rendered_at: Optional[Tuple[float, float]] = None,
) -> Tuple[State, GridEntities]:
    """Build a State with players, movables, walls and a camera anchor.

    Ids are assigned in that order starting at 1.
    """
    pos: Dict[EntityID, Position] = {}
    entity: Dict[EntityID, Entity] = {}
    player: Dict[EntityID, Player] = {}
    movable: Dict[EntityID, Movable] = {}
    wall: Dict[EntityID, Wall] = {}
    camera_anchor: Dict[EntityID, CameraAnchor] = {}
    rendered: Dict[EntityID, RenderedPosition] = {}

    def add(xy: Tuple[int, int]) -> EntityID:
        eid: EntityID = len(pos) + 1
        pos[eid] = Position(*xy)
        entity[eid] = Entity()
        return eid

    player_ids: List[EntityID] = []
    for xy in player_positions:
        eid = add(xy)
        player[eid] = Player()
        player_ids.append(eid)

    movable_ids: List[EntityID] = []
    for xy in movable_positions:
        eid = add(xy)
        movable[eid] = Movable()
        movable_ids.append(eid)

    wall_ids: List[EntityID] = []
    for xy in wall_positions:
        eid = add(xy)
        wall[eid] = Wall()
        wall_ids.append(eid)

    camera_id: Optional[EntityID] = None
    if camera_at is not None:
        camera_id = add(camera_at)
        camera_anchor[camera_id] = CameraAnchor()
        if rendered_at is not None:
            rendered[camera_id] = RenderedPosition(*rendered_at)

    state = State(
        entity=pmap(entity),
        player=pmap(player),
        movable=pmap(movable),
        wall=pmap(wall),
        camera_anchor=pmap(camera_anchor),
        position=pmap(pos),
        rendered_position=pmap(rendered),
    )
    return state, GridEntities(
        player_ids=player_ids,
        movable_ids=movable_ids,
        wall_ids=wall_ids,
        camera_id=camera_id,
    )


def make_level(
    identifier: str = "Level_0",
    width: int = 8,
    height: int = 8,
    player: Optional[Tuple[int, int]] = (0, 0),
    movables: Sequence[Tuple[int, int]] = (),
    collisions: Sequence[Tuple[int, int]] = (),
    layer_names: Sequence[str] = ("Entities", "Collisions"),
) -> LevelData:
    """Build level data; grid indices are in layer space (y grows downward)."""
    instances: List[EntityInstance] = []
    if player is not None:
        instances.append(EntityInstance("Player", player))
    instances.extend(EntityInstance("Movable", xy) for xy in movables)

    layers: Dict[str, Layer] = {}
    if "Entities" in layer_names:
        layers["Entities"] = Layer("Entities", entities=pvector(instances))
    if "Collisions" in layer_names:
        layers["Collisions"] = Layer("Collisions", tiles=pset(collisions))
    for name in layer_names:
        layers.setdefault(name, Layer(name))
    return LevelData(identifier, width, height, layers=pmap(layers))
