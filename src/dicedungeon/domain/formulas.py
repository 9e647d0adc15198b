"""Pure combat and reward formulas parameterised by the balance table."""
from __future__ import annotations

import math

from dicedungeon.core.rng import RNG
from dicedungeon.domain.defs import BalanceDef


def dodge_rate(luck: int, balance: BalanceDef) -> float:
    """Percent chance to dodge a single hit; never below the base and never reaching 100."""
    rate = balance.dodge_base + max(0, luck) * balance.dodge_per_luck
    return max(0.0, min(rate, balance.dodge_cap, 99.0))


def is_dodged(rate: float, rng: RNG) -> bool:
    return rng.chance(rate)


def elemental_multiplier(attacker_element: str | None, defender_element: str | None, balance: BalanceDef) -> float:
    """Look up the matchup multiplier; pairs missing from the chart are neutral."""
    if not attacker_element or not defender_element:
        return 1.0
    return balance.elemental_chart.get((attacker_element, defender_element), 1.0)


def attack_bonus(attack: int, balance: BalanceDef) -> int:
    return max(0, attack) // balance.attack_bonus_divisor


def apply_defense(damage: float, reduction: int) -> float:
    """Reduce damage by ``reduction`` percent (clamped to 0..100)."""
    reduction = max(0, min(100, reduction))
    return max(0.0, damage * (100 - reduction) / 100)


def final_damage(damage: float) -> int:
    return max(0, math.floor(damage))


def gold_reward(kills: int, is_boss: bool, balance: BalanceDef) -> int:
    gold = max(0, kills) * balance.gold_per_kill
    if is_boss:
        gold *= balance.boss_gold_multiplier
    return gold


def stage_type(stage: int, balance: BalanceDef) -> str:
    """Classify a stage as ``boss``, ``mini_boss`` or ``normal``."""
    if stage >= balance.stages_per_layer:
        return "boss"
    if stage == balance.mini_boss_stage:
        return "mini_boss"
    return "normal"
