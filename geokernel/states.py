from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class CleanState:
    """Public fields agree with the last applied snapshot."""

    snapshot: tuple


@dataclass(frozen=True)
class DirtyState:
    """Public fields diverged; the snapshot holds their current values."""

    snapshot: tuple


class ChangeTracker:
    """
    Watches a group of public fields through a snapshot factory.

    The tracker starts clean and becomes dirty when a fresh snapshot differs
    from the applied one. A dirty state is retaken on every refresh, so it
    always holds the latest field values. It returns to clean only through
    mark_clean, after its owner has rebuilt whatever depends on the fields.
    """

    def __init__(self, snapshot_factory: Callable[[], tuple]):
        self._snapshot_factory = snapshot_factory
        self._state = CleanState(self._snapshot_factory())

    @property
    def state(self) -> CleanState | DirtyState:
        return self._state

    def refresh(self) -> CleanState | DirtyState:
        snapshot = self._snapshot_factory()

        if isinstance(self._state, DirtyState) or snapshot != self._state.snapshot:
            self._state = DirtyState(snapshot)

        return self._state

    def mark_clean(self) -> None:
        self._state = CleanState(self._snapshot_factory())
