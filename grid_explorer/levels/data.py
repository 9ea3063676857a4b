"""Resolved level data and asset readiness.

Levels arrive already parsed: a tile-grid size plus named layers. The
``"Entities"`` layer carries authored entity instances and the
``"Collisions"`` layer carries blocked tile indices. Tile indices are in layer
space (y grows downward) and are converted to world coordinates on load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol, Sequence, Tuple

from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from grid_explorer.components import Position
from grid_explorer.errors import ConfigurationError, InvariantViolation
from grid_explorer.types import LoadState

# Layer tile index (x, y), y grows downward
TileIndex = Tuple[int, int]


@dataclass(frozen=True)
class EntityInstance:
    """An authored entity placed in a layer.

    Attributes:
        identifier: Entity definition name, e.g. ``"Player"``.
        grid: Tile index in layer space.
    """

    identifier: str
    grid: TileIndex


@dataclass(frozen=True)
class Layer:
    """A named layer of a level.

    Attributes:
        identifier: Layer name.
        entities: Authored entity instances (the ``"Entities"`` layer).
        tiles: Occupied tile indices (the ``"Collisions"`` layer).
    """

    identifier: str
    entities: PVector[EntityInstance] = field(default_factory=pvector)
    tiles: PSet[TileIndex] = field(default_factory=pset)

    def find_entity(self, identifier: str) -> Optional[EntityInstance]:
        """Return the first instance named ``identifier``, if any."""
        for instance in self.entities:
            if instance.identifier == identifier:
                return instance
        return None


@dataclass(frozen=True)
class LevelData:
    """Resolved level asset as exposed by a :class:`LevelSource`.

    Attributes:
        identifier: Level name, used in log and error messages.
        width: Tile-grid width.
        height: Tile-grid height.
        layers: Layers by name.
    """

    identifier: str
    width: int
    height: int
    layers: PMap[str, Layer] = field(default_factory=pmap)

    def layer(self, name: str) -> Layer:
        """Return the layer called ``name``.

        Raises:
            ConfigurationError: If the level does not define it.
        """
        found = self.layers.get(name)
        if found is None:
            raise ConfigurationError(
                f"Level {self.identifier!r} has no {name!r} layer"
            )
        return found

    def require_layers(self, names: Sequence[str]) -> None:
        for name in names:
            self.layer(name)

    def to_world(self, index: TileIndex) -> Position:
        """Convert a layer tile index to a world grid coordinate (y flipped).

        Raises:
            InvariantViolation: If ``index`` lies outside the tile grid.
        """
        x, y = index
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvariantViolation(
                f"Malformed tile index {(x, y)} for level {self.identifier!r} "
                f"of size {self.width}x{self.height}"
            )
        return Position(x, -y)


class LevelSource(Protocol):
    """Provides resolved level data by index."""

    @property
    def level_count(self) -> int: ...

    def get_level(self, index: int) -> LevelData: ...


class AssetReadiness(Protocol):
    """Non-blocking load-state queries for asset handles."""

    def handles_for(self, level_index: int) -> Sequence[str]: ...

    def load_state(self, handle: str) -> LoadState: ...


def check_level_index(index: int, level_count: int) -> None:
    """Raise :class:`InvariantViolation` unless ``0 <= index < level_count``."""
    if not 0 <= index < level_count:
        raise InvariantViolation(
            f"Level index {index} out of range for {level_count} level(s)"
        )


class InMemoryLevelSource:
    """Level source backed by a list of already resolved levels."""

    def __init__(self, levels: Sequence[LevelData]) -> None:
        self._levels = list(levels)

    @property
    def level_count(self) -> int:
        return len(self._levels)

    def get_level(self, index: int) -> LevelData:
        check_level_index(index, self.level_count)
        return self._levels[index]


class StaticAssets:
    """Asset readiness table updated by the loader as loads progress.

    Unknown handles report ``NOT_LOADED``.
    """

    def __init__(
        self,
        handles: Mapping[int, Sequence[str]],
        states: Optional[Mapping[str, LoadState]] = None,
    ) -> None:
        self._handles: Dict[int, Tuple[str, ...]] = {
            level: tuple(names) for level, names in handles.items()
        }
        self._states: Dict[str, LoadState] = dict(states or {})

    def handles_for(self, level_index: int) -> Sequence[str]:
        return self._handles.get(level_index, ())

    def load_state(self, handle: str) -> LoadState:
        return self._states.get(handle, LoadState.NOT_LOADED)

    def set_state(self, handle: str, load_state: LoadState) -> None:
        self._states[handle] = load_state
