from dataclasses import dataclass


@dataclass(frozen=True)
class Experience:
    """Accumulated experience points."""

    xp: float
