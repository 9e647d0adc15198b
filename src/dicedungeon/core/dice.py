"""Dice roll service with asynchronous completion."""
from __future__ import annotations

import logging
from typing import Callable

from dicedungeon.core.rng import RNG
from dicedungeon.core.scheduler import PendingTransition, Scheduler

logger = logging.getLogger(__name__)


class Dice:
    """Rolls a single die and reports the value to a continuation once the roll settles."""

    def __init__(self, rng: RNG, scheduler: Scheduler, *, sides: int = 10, roll_delay: float = 0.0) -> None:
        if sides < 2:
            raise ValueError("A die needs at least two sides.")
        self._rng = rng
        self._scheduler = scheduler
        self.sides = sides
        self.roll_delay = roll_delay
        self.value: int | None = None
        self._pending: PendingTransition | None = None

    @property
    def is_rolling(self) -> bool:
        return self._pending is not None

    def roll(self, on_complete: Callable[[int], None]) -> bool:
        """
        Start a roll and deliver the result to ``on_complete`` after ``roll_delay``.

        Only one roll may be in flight; a second request while rolling is ignored
        and returns False.
        """
        if self._pending is not None:
            logger.info("Ignoring roll request: a roll is already in flight.")
            return False

        result = self._rng.randint(1, self.sides)

        def _settle() -> None:
            self._pending = None
            self.value = result
            logger.debug("Dice settled on %s", result)
            on_complete(result)

        self._pending = self._scheduler.call_later(self.roll_delay, _settle, label="dice_roll")
        return True

    def reset(self) -> None:
        """Clear the displayed value and forget any roll still settling."""
        if self._pending is not None:
            self._scheduler.cancel(self._pending)
        self._pending = None
        self.value = None
