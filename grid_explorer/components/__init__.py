"""grid_explorer.components
=================================

Aggregate import surface for all ECS component dataclasses used by the
simulation core.

Components are immutable ``@dataclass`` value objects; they carry no behavior
beyond their fields and are transformed by the systems in
:mod:`grid_explorer.systems`. Downstream code can import them from a single
place, e.g.::

    from grid_explorer.components import Position, Wall, Movable

"""

from .properties import CameraAnchor
from .properties import Experience
from .properties import Health
from .properties import Movable
from .properties import Name
from .properties import Player
from .properties import Position
from .properties import RenderedPosition
from .properties import Wall

__all__ = [
    "CameraAnchor",
    "Experience",
    "Health",
    "Movable",
    "Name",
    "Player",
    "Position",
    "RenderedPosition",
    "Wall",
]
