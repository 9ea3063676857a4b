"""Property component aggregates.

This module re-exports the components that define an entity: its grid
:class:`Position`, its capability tag (:class:`Player`, :class:`Wall`,
:class:`Movable`, :class:`CameraAnchor`), the render-only
:class:`RenderedPosition`, and the data-only player markers
(:class:`Health`, :class:`Name`, :class:`Experience`).

All properties are immutable dataclasses; replacing an entry in the owning
``State`` store is how state changes are expressed between ticks.
"""

from .camera_anchor import CameraAnchor
from .experience import Experience
from .health import Health
from .movable import Movable
from .name import Name
from .player import Player
from .position import Position
from .rendered_position import RenderedPosition
from .wall import Wall

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
