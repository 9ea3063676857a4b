from dataclasses import dataclass


@dataclass(frozen=True)
class Name:
    """Display name of an entity."""

    name: str
