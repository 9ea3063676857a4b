"""Direction enumerations and per-tick input resolution.

Input polling happens outside the core; what arrives here is an already
debounced "pressed this tick" flag per direction. Only one direction is
honored per tick, picked by ``DIRECTION_PRIORITY``.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, Optional, Tuple


class Direction(StrEnum):
    """Cardinal movement directions."""

    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    UP = auto()


DIRECTION_PRIORITY = [Direction.LEFT, Direction.RIGHT, Direction.DOWN, Direction.UP]

# World space is y-up.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.UP: (0, 1),
}


@dataclass(frozen=True)
class DirectionInput:
    """Newly pressed direction flags for one tick.

    Attributes:
        left: Left pressed this tick.
        right: Right pressed this tick.
        down: Down pressed this tick.
        up: Up pressed this tick.
    """

    left: bool = False
    right: bool = False
    down: bool = False
    up: bool = False

    def pressed(self, direction: Direction) -> bool:
        return bool(getattr(self, direction.value))


def resolve_direction(inputs: DirectionInput) -> Optional[Direction]:
    """Return the highest priority pressed direction, or ``None``."""
    for direction in DIRECTION_PRIORITY:
        if inputs.pressed(direction):
            return direction
    return None
