"""Player class definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ClassDef:
    """Defines the starting stats and element for a playable class."""

    id: str
    name: str
    element: str
    base_hp: int
    base_attack: int
    base_luck: int
    defense_reduction: int
    description: str = ""
