"""Entity registry marker and id allocation.

Every live entity has an :class:`Entity` entry in ``State.entity``; its
components live in the other stores under the same id.

Ids come from a single counter shared by the session. They grow
monotonically and are never handed out twice, so when a level change
despawns the previous wall batch and places a new one, the new walls can
never collide with ids still held by the player, its camera anchor or a
stale reference to a despawned wall.
"""

import itertools
from dataclasses import dataclass

from grid_explorer.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry entry."""


_session_ids = itertools.count()


def new_entity_id() -> EntityID:
    """Allocate the next session entity id."""
    return next(_session_ids)
