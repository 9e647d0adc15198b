"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores the combat stats shared by the player and enemies.

    ``defense`` is a percentage damage reduction.
    """

    max_hp: int
    hp: int
    attack: int
    luck: int
    defense: int = 0

    def clamp_hp(self, value: int) -> int:
        """Return ``value`` clamped into ``[0, max_hp]``."""
        return max(0, min(self.max_hp, int(value)))
