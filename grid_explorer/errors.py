"""Exception taxonomy of the simulation core.

Blocked pushes are not errors; they surface as ``MoveOutcome.BLOCKED``.
"""


class GridExplorerError(Exception):
    """Base class for simulation core errors."""


class ConfigurationError(GridExplorerError):
    """Loaded level data lacks something generation needs (e.g. a named layer).

    Fatal for the current level attempt only. The lifecycle gate aborts the
    attempt and waits for the level to be requested again.
    """


class AssetNotReady(GridExplorerError):
    """An asset handle has not reported ``LOADED`` yet (or reported ``FAILED``).

    Expected and non-fatal; the lifecycle gate re-checks on the next tick.
    """

    def __init__(self, handle: str, load_state: str) -> None:
        super().__init__(f"Asset {handle!r} is not ready ({load_state})")
        self.handle = handle
        self.load_state = load_state


class InvariantViolation(GridExplorerError):
    """Corrupted or out-of-range level data. There is no recovery path."""
