"""Monster definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class MonsterDef:
    """Stat block for a monster, mini-boss or boss."""

    id: str
    name: str
    element: str
    hp: int
    attack: int
    luck: int
    defense_reduction: int
    rank: str = "normal"

    @property
    def is_boss(self) -> bool:
        return self.rank != "normal"
