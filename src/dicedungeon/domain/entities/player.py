"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dicedungeon.domain.defs import ArtifactDef, CardDef

from .stats import Stats


@dataclass(slots=True)
class Player:
    """The run's single adventurer."""

    id: str
    name: str
    class_id: str
    element: str
    stats: Stats
    equipped_skills: List[CardDef] = field(default_factory=list)
    skill_inventory: List[CardDef] = field(default_factory=list)
    artifacts: List[ArtifactDef] = field(default_factory=list)

    def owns_artifact(self, artifact_id: str) -> bool:
        return any(artifact.id == artifact_id for artifact in self.artifacts)

    def find_card(self, card_id: str) -> CardDef | None:
        for card in self.skill_inventory:
            if card.id == card_id:
                return card
        return None
