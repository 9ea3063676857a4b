"""Player marker component.

Presence of :class:`Player` designates an entity driven by direction input.
A player is never also :class:`Movable`; other players do not push it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Marker (no fields)."""

    pass
