"""Common type aliases and enumerations.

Enumerations here are shared by the movement resolver, the terrain generator
and the level lifecycle gate. They are string enums so they read well in logs
and test failure output.
"""

from enum import StrEnum, auto

EntityID = int


class TileKind(StrEnum):
    """Classification emitted for a grid coordinate (consumed by renderers)."""

    WALL = auto()
    MOVABLE = auto()
    PLAYER = auto()


class OccupantKind(StrEnum):
    """Which half of the occupancy index an occupant was found in."""

    MOVABLE = auto()
    IMMOVABLE = auto()


class MoveOutcome(StrEnum):
    """Result of a single movement resolution pass."""

    NO_OP = auto()
    MOVED = auto()
    BLOCKED = auto()


class LoadState(StrEnum):
    """Load state reported by an external asset handle."""

    NOT_LOADED = auto()
    LOADING = auto()
    LOADED = auto()
    FAILED = auto()


class LifecyclePhase(StrEnum):
    """Phases of the level lifecycle gate."""

    IDLE = auto()
    AWAITING_ASSETS = auto()
    GENERATING = auto()
    ACTIVE = auto()
