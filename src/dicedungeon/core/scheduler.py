"""Pending phase transitions driven by a manual clock."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PendingTransition:
    """A continuation scheduled to run once the clock reaches ``due_at``."""

    due_at: float
    sequence: int
    generation: int
    label: str
    callback: Callable[[], None] = field(compare=False)


class Scheduler:
    """
    Single-threaded queue of delayed continuations.

    Every transition is stamped with the run generation current at scheduling
    time. When the run is reset the generation moves on, and any transition
    still queued from the old generation is dropped instead of executed.
    """

    def __init__(self, current_generation: Callable[[], int]) -> None:
        self._current_generation = current_generation
        self._queue: List[PendingTransition] = []
        self._sequence = 0
        self.now = 0.0

    def call_later(self, delay: float, callback: Callable[[], None], *, label: str = "") -> PendingTransition:
        """Schedule ``callback`` to run ``delay`` seconds from now."""
        self._sequence += 1
        transition = PendingTransition(
            due_at=self.now + max(0.0, delay),
            sequence=self._sequence,
            generation=self._current_generation(),
            label=label or getattr(callback, "__name__", "transition"),
            callback=callback,
        )
        self._queue.append(transition)
        self._queue.sort(key=lambda item: (item.due_at, item.sequence))
        return transition

    def pending(self) -> List[PendingTransition]:
        """Return queued transitions in execution order."""
        return list(self._queue)

    def next_delay(self) -> float | None:
        """Return seconds until the next queued transition, or None when idle."""
        if not self._queue:
            return None
        return max(0.0, self._queue[0].due_at - self.now)

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every transition that became due."""
        target = self.now + max(0.0, seconds)
        executed = 0
        while self._queue and self._queue[0].due_at <= target:
            transition = self._queue.pop(0)
            self.now = max(self.now, transition.due_at)
            if self._run(transition):
                executed += 1
        self.now = target
        return executed

    def run_until_idle(self, max_steps: int = 10_000) -> int:
        """Run queued transitions (including ones they schedule) until none remain."""
        executed = 0
        steps = 0
        while self._queue and steps < max_steps:
            steps += 1
            transition = self._queue.pop(0)
            self.now = max(self.now, transition.due_at)
            if self._run(transition):
                executed += 1
        return executed

    def cancel(self, transition: PendingTransition) -> bool:
        """Remove a queued transition; returns False if it already ran or was never queued."""
        if transition in self._queue:
            self._queue.remove(transition)
            return True
        return False

    def clear(self) -> None:
        """Discard all queued transitions."""
        self._queue.clear()

    def _run(self, transition: PendingTransition) -> bool:
        if transition.generation != self._current_generation():
            logger.debug(
                "Dropping stale transition '%s' (generation %s, current %s)",
                transition.label,
                transition.generation,
                self._current_generation(),
            )
            return False
        logger.debug("Running transition '%s' at t=%.2f", transition.label, self.now)
        transition.callback()
        return True
