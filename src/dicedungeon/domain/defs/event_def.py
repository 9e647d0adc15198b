"""Exploration event definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

EVENT_CHOICES = {
    "heal": ("accept", "decline"),
    "trap": ("roll", "avoid"),
    "treasure": ("open", "ignore"),
}


@dataclass(slots=True)
class EventDef:
    """A non-combat encounter offering a small set of choices."""

    id: str
    name: str
    description: str
    event_type: str
    value_min: int
    value_max: int

    @property
    def choices(self) -> Tuple[str, ...]:
        return EVENT_CHOICES.get(self.event_type, ())
