from dataclasses import dataclass


@dataclass(frozen=True)
class Movable:
    """Marker indicating the entity can be displaced by a player's movement.

    Movables form push chains: a contiguous run of movables ahead of the
    player moves together by one tile when the tile beyond the run is not a
    wall.
    """

    pass
