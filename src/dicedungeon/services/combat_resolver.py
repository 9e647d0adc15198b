"""Resolves a single skill use, one independent hit at a time."""
from __future__ import annotations

import logging
from typing import List, Sequence

from dicedungeon.core.rng import RNG
from dicedungeon.domain import formulas
from dicedungeon.domain.artifact_effects import damage_with_artifacts, defense_with_artifacts
from dicedungeon.domain.combat_models import AttackOutcome, Combatant
from dicedungeon.domain.defs import ArtifactDef, BalanceDef, CardDef
from dicedungeon.domain.state import RunStore
from dicedungeon.services.errors import InvalidSkillError

logger = logging.getLogger(__name__)

_STATUS_MESSAGES = {
    "stun": "{name} is stunned! (cannot act for {turns} turn(s))",
    "poison": "{name} is poisoned! ({turns} turn(s))",
    "freeze": "{name} is frozen! (cannot act for {turns} turn(s))",
}


def basic_attack_skill(attacker: Combatant) -> CardDef:
    """The plain strike an enemy uses: attack-stat damage in its own element, one hit, no effects."""
    return CardDef(
        id="basic_attack",
        name="Attack",
        class_id=None,
        damage=attacker.stats.attack,
        element=attacker.element,
    )


class CombatResolver:
    """Computes attack outcomes and applies inflicted status effects through the store."""

    def __init__(self, store: RunStore, rng: RNG, balance: BalanceDef) -> None:
        self._store = store
        self._rng = rng
        self._balance = balance

    def resolve_attack(
        self,
        attacker: Combatant,
        defender: Combatant,
        skill: CardDef,
        is_player_attacking: bool,
        artifacts: Sequence[ArtifactDef] = (),
    ) -> AttackOutcome:
        """
        Resolve every hit of ``skill`` against ``defender``.

        Each hit rolls its own dodge check and computes its own damage, so a
        multi-hit skill may land some hits and miss others. Status effects
        are applied once, and only if at least one hit landed. HP is not
        touched here; the caller applies ``total_damage``.
        """
        hits = 1 if skill.hits is None else skill.hits
        if hits < 1:
            raise InvalidSkillError(f"Skill '{skill.id}' must have at least one hit (got {hits}).")

        total_damage = 0
        hits_landed = 0
        messages: List[str] = []
        rate = formulas.dodge_rate(defender.stats.luck, self._balance)

        for hit in range(1, hits + 1):
            if formulas.is_dodged(rate, self._rng):
                messages.append(f"Hit {hit}/{hits}: {defender.display_name} dodged!")
                continue

            damage, multiplier = self._hit_damage(attacker, defender, skill, is_player_attacking, artifacts)
            total_damage += damage
            hits_landed += 1

            line = f"Hit {hit}/{hits}: {damage} damage"
            if multiplier > 1:
                line += " (It's super effective!)"
            elif multiplier < 1:
                line += " (It's not very effective...)"
            messages.append(line)

        inflicted: tuple[str, ...] = ()
        status_lines: List[str] = []
        if hits_landed > 0:
            inflicted = skill.inflicts
            for kind in inflicted:
                turns = self._balance.status_durations[kind]
                self._store.inflict_status(defender.side, kind, turns)
                status_lines.append(_STATUS_MESSAGES[kind].format(name=defender.display_name, turns=turns))

        if hits_landed == 0:
            summary = f"{skill.name}: all hits missed!"
        elif hits > 1:
            summary = f"{skill.name}: {hits_landed}/{hits} hits, {total_damage} total damage!"
        else:
            summary = f"{skill.name}: {total_damage} damage!"

        logger.debug(
            "%s -> %s with %s: %s/%s hits, %s damage",
            attacker.display_name,
            defender.display_name,
            skill.id,
            hits_landed,
            hits,
            total_damage,
        )
        return AttackOutcome(
            any_hit=hits_landed > 0,
            total_damage=total_damage,
            hits_landed=hits_landed,
            hits_attempted=hits,
            per_hit_messages=messages,
            summary=summary,
            inflicted=inflicted,
            status_messages=status_lines,
        )

    def _hit_damage(
        self,
        attacker: Combatant,
        defender: Combatant,
        skill: CardDef,
        is_player_attacking: bool,
        artifacts: Sequence[ArtifactDef],
    ) -> tuple[int, float]:
        damage: float = skill.damage
        if is_player_attacking:
            damage = damage_with_artifacts(damage, skill, artifacts, defender)
        else:
            damage += formulas.attack_bonus(attacker.stats.attack, self._balance)

        multiplier = formulas.elemental_multiplier(skill.element or attacker.element, defender.element, self._balance)
        damage *= multiplier

        # The player defends through one transform that folds in its own defense.
        if defender.side == "player":
            damage = defense_with_artifacts(damage, artifacts, defender.stats.defense)
        else:
            damage = formulas.apply_defense(damage, defender.stats.defense)
        return formulas.final_damage(damage), multiplier
