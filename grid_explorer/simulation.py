"""Stateful wrapper around the pure simulation core.

:class:`Simulation` holds the current :class:`State` together with the
external collaborators (asset readiness and level data) and exposes the
operations the game shell calls: ``request_level``, ``attempt_move``,
``query_occupant``, ``is_ready`` and ``tick``.

Usage:

``sim = Simulation(assets=StaticAssets({0: ["map"]}), levels=InMemoryLevelSource([level]))``

The wrapper is single-threaded; every call replaces ``sim.state`` with the
next immutable snapshot.
"""

import logging
from typing import Optional

from grid_explorer.actions import DirectionInput
from grid_explorer.components import Position
from grid_explorer.config import DEFAULT_CONFIG, SimulationConfig
from grid_explorer.levels.data import AssetReadiness, LevelSource
from grid_explorer.state import State
from grid_explorer.step import step
from grid_explorer.systems import lifecycle
from grid_explorer.systems.movement import attempt_move
from grid_explorer.types import MoveOutcome
from grid_explorer.utils.ecs import Occupant, query_occupant

logger = logging.getLogger(__name__)


class Simulation:
    """Simulation context for one game session."""

    def __init__(
        self,
        assets: AssetReadiness,
        levels: LevelSource,
        config: SimulationConfig = DEFAULT_CONFIG,
        initial_state: Optional[State] = None,
    ) -> None:
        """Create the session.

        Arguments:
            assets: Asset load-state provider polled by the lifecycle gate.
            levels: Level data provider.
            config: Simulation constants.
            initial_state: Starting snapshot; an empty ``State`` by default.
        """
        self.assets = assets
        self.levels = levels
        self.config = config
        self.state = initial_state if initial_state is not None else State()

    def request_level(self, level_index: int) -> None:
        logger.info("Level %d requested", level_index)
        self.state = lifecycle.request_level(self.state, level_index)

    def attempt_move(self, inputs: DirectionInput) -> MoveOutcome:
        self.state, outcome = attempt_move(self.state, inputs)
        return outcome

    def query_occupant(self, pos: Position) -> Optional[Occupant]:
        return query_occupant(self.state, pos)

    def is_ready(self) -> bool:
        return lifecycle.is_ready(self.state)

    def tick(self, inputs: DirectionInput, dt: float) -> MoveOutcome:
        """Run one full simulation tick and return its movement outcome."""
        self.state = step(
            self.state, inputs, dt, self.assets, self.levels, self.config
        )
        return self.state.last_move
