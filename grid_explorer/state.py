"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole simulation snapshot at a single tick, together with the two small
records it embeds: :class:`WorldGenerationState` (seed and level indices)
and :class:`LevelLifecycle` (the readiness gate). All systems are pure
functions that take a previous ``State`` plus inputs and return a *new*
``State``; nothing is mutated in place, so a tick's reads and writes are
explicit in each system's signature.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* Capability tags (``player``, ``wall``, ``movable``, ``camera_anchor``) are
    disjoint. A player is never also movable.
* Occupancy lookups are *not* stored here; they are derived from the current
    snapshot on demand (see :mod:`grid_explorer.utils.ecs`).
"""

from dataclasses import dataclass
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
    RenderedPosition,
    Wall,
)
from grid_explorer.entity import Entity
from grid_explorer.types import EntityID, LifecyclePhase, MoveOutcome


@dataclass(frozen=True)
class WorldGenerationState:
    """Terrain generation bookkeeping.

    Attributes:
        seed (int | None): 32-bit terrain seed, assigned at most once and then
            reused for every level.
        current_level (int): Level whose terrain is currently placed.
        requested_level (int): Level the game wants active.
        generated (bool): True while ``requested_level`` is the level whose
            terrain is placed. Cleared when a different level is requested.
    """

    seed: Optional[int] = None
    current_level: int = 0
    requested_level: int = 0
    generated: bool = False


@dataclass(frozen=True)
class LevelLifecycle:
    """Readiness gate flags.

    Attributes:
        phase (LifecyclePhase): Current gate phase.
        map_loaded (bool): Level data for ``current_level`` is in place.
        collisions_loaded (bool): Collision walls for ``current_level`` are in place.
        aborted_level (int | None): Level whose activation failed with a
            configuration error; not retried until requested again.
    """

    phase: LifecyclePhase = LifecyclePhase.IDLE
    map_loaded: bool = False
    collisions_loaded: bool = False
    aborted_level: Optional[int] = None


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        entity (PMap[EntityID, Entity]): Registry of live entities.
        player (PMap[EntityID, Player]): Entities driven by direction input.
        wall (PMap[EntityID, Wall]): Immovable entities.
        movable (PMap[EntityID, Movable]): Pushable entities.
        camera_anchor (PMap[EntityID, CameraAnchor]): Entities the camera follows.
        position (PMap[EntityID, Position]): Logical grid coordinate.
        rendered_position (PMap[EntityID, RenderedPosition]): Smoothed render position.
        health (PMap[EntityID, Health]): Data-only player marker.
        name (PMap[EntityID, Name]): Data-only player marker.
        experience (PMap[EntityID, Experience]): Data-only player marker.
        world (WorldGenerationState): Seed and level indices.
        lifecycle (LevelLifecycle): Level readiness gate.
        spawned (bool): True once the player has been spawned for the session.
        turn (int): Tick counter (0-based).
        last_move (MoveOutcome): Outcome of the most recent movement pass.
    """

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    ## Capabilities
    player: PMap[EntityID, Player] = pmap()
    wall: PMap[EntityID, Wall] = pmap()
    movable: PMap[EntityID, Movable] = pmap()
    camera_anchor: PMap[EntityID, CameraAnchor] = pmap()
    ## Spatial
    position: PMap[EntityID, Position] = pmap()
    rendered_position: PMap[EntityID, RenderedPosition] = pmap()
    ## Markers
    health: PMap[EntityID, Health] = pmap()
    name: PMap[EntityID, Name] = pmap()
    experience: PMap[EntityID, Experience] = pmap()

    # Level
    world: WorldGenerationState = WorldGenerationState()
    lifecycle: LevelLifecycle = LevelLifecycle()
    spawned: bool = False

    # Status
    turn: int = 0
    last_move: MoveOutcome = MoveOutcome.NO_OP
