"""Rendered position component.

Continuous, render-only position of an entity. Never read by game logic; the
camera follower smooths it toward ``tile_size * Position`` every frame.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedPosition:
    """World-space position in pixels.

    Attributes:
        x: Horizontal pixel coordinate.
        y: Vertical pixel coordinate.
    """

    x: float
    y: float
