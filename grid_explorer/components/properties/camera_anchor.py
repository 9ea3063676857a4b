"""Camera anchor marker component.

The camera anchor shares the player's grid motion (it shifts by the same
delta whenever a player moves) and is what the camera follower smooths the
rendered view toward.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CameraAnchor:
    """Marker (no fields)."""

    pass
