"""Entity spawning from a level's ``"Entities"`` layer.

The player and its camera anchor are created once per session at the
``"Player"`` instance of the first activated level (or at
``config.player_start`` when the layer has none) and persist across level
changes. Movables (``"Movable"`` instances) belong to a level and are
replaced whenever a level is activated.
"""

import logging
from dataclasses import replace
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_explorer.components import (
    CameraAnchor,
    Experience,
    Health,
    Movable,
    Name,
    Player,
    Position,
)
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.entity import Entity, new_entity_id
from grid_explorer.levels.data import LevelData
from grid_explorer.state import State
from grid_explorer.systems.camera import camera_target
from grid_explorer.types import EntityID

logger = logging.getLogger(__name__)

ENTITIES_LAYER = "Entities"
PLAYER_IDENTIFIER = "Player"
MOVABLE_IDENTIFIER = "Movable"

DEFAULT_PLAYER_NAME = "Player1"
DEFAULT_PLAYER_HEALTH = 100.0


def spawn_point(
    level: Optional[LevelData], config: SimulationConfig = DEFAULT_CONFIG
) -> Position:
    """Return the player spawn coordinate for ``level``."""
    if level is not None:
        layer = level.layers.get(ENTITIES_LAYER)
        if layer is not None:
            instance = layer.find_entity(PLAYER_IDENTIFIER)
            if instance is not None:
                return level.to_world(instance.grid)
    return config.player_start


def spawn_player(
    state: State, position: Position, config: SimulationConfig = DEFAULT_CONFIG
) -> State:
    """Create the player and a camera anchor on ``position``, once per session."""
    if state.spawned:
        return state

    player_id = new_entity_id()
    camera_id = new_entity_id()
    logger.info("Spawning player %d at %s", player_id, position)
    return replace(
        state,
        entity=state.entity.set(player_id, Entity()).set(camera_id, Entity()),
        player=state.player.set(player_id, Player()),
        camera_anchor=state.camera_anchor.set(camera_id, CameraAnchor()),
        position=state.position.set(player_id, position).set(camera_id, position),
        rendered_position=state.rendered_position.set(
            camera_id, camera_target(position, config.tile_size)
        ),
        health=state.health.set(player_id, Health(hp=DEFAULT_PLAYER_HEALTH)),
        name=state.name.set(player_id, Name(name=DEFAULT_PLAYER_NAME)),
        experience=state.experience.set(player_id, Experience(xp=0.0)),
        spawned=True,
    )


def place_movables(state: State, level: LevelData) -> State:
    """Replace every movable in ``state`` with the level's ``"Movable"`` instances."""
    state_entity = state.entity
    state_position = state.position
    for eid in state.movable:
        state_entity = state_entity.discard(eid)
        state_position = state_position.discard(eid)

    state_movable: PMap[EntityID, Movable] = pmap()
    layer = level.layers.get(ENTITIES_LAYER)
    if layer is not None:
        for instance in layer.entities:
            if instance.identifier != MOVABLE_IDENTIFIER:
                continue
            eid = new_entity_id()
            state_entity = state_entity.set(eid, Entity())
            state_movable = state_movable.set(eid, Movable())
            state_position = state_position.set(eid, level.to_world(instance.grid))

    return replace(
        state,
        entity=state_entity,
        movable=state_movable,
        position=state_position,
    )
