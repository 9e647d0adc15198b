"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats


@dataclass(slots=True)
class EnemyInstance:
    """Represents a spawned enemy ready for combat."""

    id: str
    monster_id: str
    name: str
    element: str
    stats: Stats
    rank: str = "normal"

    @property
    def is_boss(self) -> bool:
        return self.rank != "normal"
