from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Hit points carried by the player.

    Attributes:
        hp:
            Current hit points. No system in the core reads or changes this;
            it exists for collaborators (HUD, future combat rules).
    """

    hp: float
