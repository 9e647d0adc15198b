"""Card (skill) definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CardDef:
    """A skill card usable in combat.

    ``hits`` is the number of independent strikes; each strike rolls its own
    dodge check. The status flags are applied once per use when at least one
    strike lands.
    """

    id: str
    name: str
    class_id: str | None
    damage: int
    element: str
    hits: int = 1
    rarity: str = "common"
    stun: bool = False
    poison: bool = False
    freeze: bool = False
    description: str = ""

    @property
    def inflicts(self) -> tuple[str, ...]:
        flags = (("stun", self.stun), ("poison", self.poison), ("freeze", self.freeze))
        return tuple(kind for kind, enabled in flags if enabled)
