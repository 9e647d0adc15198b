"""Damage and defense transforms driven by owned artifacts."""
from __future__ import annotations

from typing import Sequence

from dicedungeon.domain.combat_models import Combatant
from dicedungeon.domain.defs import ArtifactDef, CardDef


def damage_with_artifacts(
    base_damage: float,
    skill: CardDef,
    artifacts: Sequence[ArtifactDef],
    defender: Combatant | None = None,
) -> float:
    """Apply flat bonuses first, then every applicable percentage bonus."""
    damage = float(base_damage)
    damage += sum(artifact.value for artifact in artifacts if artifact.effect == "damage_flat")

    percent = 0
    for artifact in artifacts:
        if artifact.effect == "damage_percent":
            percent += artifact.value
        elif artifact.effect == "element_damage" and artifact.element == skill.element:
            percent += artifact.value
        elif artifact.effect == "boss_damage" and defender is not None and defender.is_boss:
            percent += artifact.value
    return max(0.0, damage * (100 + percent) / 100)


def defense_with_artifacts(
    incoming_damage: float,
    artifacts: Sequence[ArtifactDef],
    base_reduction: int = 0,
) -> float:
    """Subtract flat reductions, then apply percentage reductions (capped at 100%).

    ``base_reduction`` is the defender's own defense percent; it adds to the
    artifact percentages rather than compounding with them.
    """
    damage = float(incoming_damage)
    damage -= sum(artifact.value for artifact in artifacts if artifact.effect == "defense_flat")
    percent = max(0, base_reduction) + sum(
        artifact.value for artifact in artifacts if artifact.effect == "defense_percent"
    )
    percent = min(100, percent)
    return max(0.0, damage * (100 - percent) / 100)
