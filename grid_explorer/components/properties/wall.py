"""Wall component.

Marks an immovable entity. Walls end push chains: a chain whose next free
coordinate holds a wall is aborted as a whole.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Wall:
    """Marker (no data)."""

    pass
