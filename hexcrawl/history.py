"""Bounded undo/redo over whole-map snapshots."""

import logging
from typing import Optional

from hexcrawl import config
from hexcrawl.schemas import MapData


logger = logging.getLogger(__name__)


def clamp_history_size(size: int) -> int:
    return max(config.MIN_HISTORY_SIZE, min(config.MAX_HISTORY_SIZE, int(size)))


class MapHistory:
    """Snapshot history: past, present and future map states.

    Callers choose what counts as one step by choosing when to call
    save(), e.g. once per flood fill rather than once per hex.
    """

    def __init__(
        self,
        present: Optional[MapData] = None,
        max_history_size: int = config.DEFAULT_MAX_HISTORY_SIZE,
    ):
        self.past: list[MapData] = []
        self.present: Optional[MapData] = present
        self.future: list[MapData] = []
        self.max_history_size = clamp_history_size(max_history_size)

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def save(self, snapshot: MapData) -> None:
        """Record a new present. Any redo states are discarded."""
        if self.present is not None:
            self.past.append(self.present)
            self._trim_past()
        self.present = snapshot
        self.future = []

    def undo(self) -> Optional[MapData]:
        """Step back. Returns the new present, None if nothing to undo."""
        if not self.past:
            return None

        previous = self.past.pop()
        if self.present is not None:
            self.future.insert(0, self.present)
            self._trim_future()
        self.present = previous
        return self.present

    def redo(self) -> Optional[MapData]:
        """Step forward. Returns the new present, None if nothing to redo."""
        if not self.future:
            return None

        following = self.future.pop(0)
        if self.present is not None:
            self.past.append(self.present)
            self._trim_past()
        self.present = following
        return self.present

    def clear(self) -> None:
        """Drop undo and redo states, keep the present."""
        self.past = []
        self.future = []

    def reset(self, present: Optional[MapData]) -> None:
        """Start over from a new present, e.g. after loading a map."""
        self.present = present
        self.clear()

    def set_max_history_size(self, size: int) -> None:
        """Clamp to [1, 100] and trim both stacks from their oldest ends."""
        self.max_history_size = clamp_history_size(size)
        self._trim_past()
        self._trim_future()
        logger.debug("History bound set to %d", self.max_history_size)

    def _trim_past(self) -> None:
        # Oldest past states sit at the front
        overflow = len(self.past) - self.max_history_size
        if overflow > 0:
            del self.past[:overflow]

    def _trim_future(self) -> None:
        # Furthest redo states sit at the back
        del self.future[self.max_history_size:]
