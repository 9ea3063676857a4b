"""Position component.

Immutable integer grid coordinates, the only position representation used by
game logic. Stored in ``State.position`` keyed by entity id. World space is
y-up; level layers (y-down) are converted on load.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (grows to the right).
        y: Row index (grows upward).
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)
