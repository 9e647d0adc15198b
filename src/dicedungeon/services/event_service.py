"""Resolves the choices offered by exploration events."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from dicedungeon.core.dice import Dice
from dicedungeon.core.pacing import Pacing
from dicedungeon.core.rng import RNG
from dicedungeon.domain.defs import BalanceDef, EventDef
from dicedungeon.domain.state import RunStore
from dicedungeon.services.progression_service import ProgressionService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EventOutcome:
    """What an event choice did, for display."""

    event_id: str
    choice: str
    messages: List[str]
    roll: int | None = None


class EventService:
    """Applies heal, trap and treasure choices, then hands the finished event to progression."""

    def __init__(
        self,
        store: RunStore,
        dice: Dice,
        rng: RNG,
        progression: ProgressionService,
        balance: BalanceDef,
        pacing: Pacing,
    ) -> None:
        self._store = store
        self._dice = dice
        self._rng = rng
        self._progression = progression
        self._balance = balance
        self._pacing = pacing
        self.last_outcome: EventOutcome | None = None

    def start_event(self, event: EventDef) -> None:
        self.last_outcome = None
        self._store.set_mode("event", event=event)

    def choose(self, choice: str) -> bool:
        """Apply ``choice`` to the active event. Invalid choices are ignored."""
        store = self._store
        event = store.mode.event
        if store.mode.name != "event" or event is None:
            logger.info("Ignoring event choice '%s': no active event.", choice)
            return False
        if store.player is None:
            logger.info("Ignoring event choice '%s': no player.", choice)
            return False
        if choice not in event.choices:
            logger.info("Ignoring unknown choice '%s' for event '%s'.", choice, event.id)
            return False
        if self._dice.is_rolling:
            logger.info("Ignoring event choice '%s' while the dice are rolling.", choice)
            return False

        if event.event_type == "trap" and choice == "roll":
            return self._dice.roll(lambda value: self._resolve_trap_roll(event, value))

        messages: List[str] = []
        if event.event_type == "heal" and choice == "accept":
            amount = self._roll_value(event)
            store.heal("player", amount)
            messages.append(f"You recovered {amount} HP!")
        elif event.event_type == "trap":
            messages.append("You carefully went around the trap.")
        elif event.event_type == "treasure" and choice == "open":
            amount = self._roll_value(event)
            store.add_gold(amount)
            messages.append(f"You found {amount} gold in the chest!")
        elif event.event_type == "treasure":
            messages.append("You left the chest alone.")
        else:
            messages.append("You move on.")

        self._complete(event, choice, messages, delay=self._pacing.event_complete)
        return True

    def _resolve_trap_roll(self, event: EventDef, value: int) -> None:
        if value >= self._balance.trap_threshold:
            messages = [f"You rolled {value} and dodged the trap!"]
        else:
            damage = self._roll_value(event)
            self._store.damage("player", damage)
            messages = [f"You rolled {value} and took {damage} damage from the trap!"]
        self._complete(event, "roll", messages, delay=self._pacing.trap_complete, roll=value)

    def _complete(self, event: EventDef, choice: str, messages: List[str], *, delay: float, roll: int | None = None) -> None:
        store = self._store
        self.last_outcome = EventOutcome(event_id=event.id, choice=choice, messages=messages, roll=roll)
        store.mode.event = None
        if store.player is not None and store.player.stats.hp <= 0:
            messages.append("You collapse... Game over.")
            self._progression.on_player_defeated()
            return
        self._progression.on_event_resolved(delay=delay)

    def _roll_value(self, event: EventDef) -> int:
        return self._rng.randint(event.value_min, event.value_max)
