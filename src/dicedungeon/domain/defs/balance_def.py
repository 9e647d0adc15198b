"""Game balance tables."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(slots=True)
class BalanceDef:
    """Tunable numbers consumed by the formulas and the progression engine."""

    dice_sides: int = 10
    dodge_base: float = 10.0
    dodge_per_luck: float = 1.0
    dodge_cap: float = 75.0
    elemental_chart: Dict[Tuple[str, str], float] = field(default_factory=dict)
    attack_bonus_divisor: int = 5
    gold_per_kill: int = 10
    boss_gold_multiplier: int = 3
    artifact_drop_chance_boss: float = 60.0
    artifact_drop_chance_normal: float = 10.0
    status_durations: Dict[str, int] = field(
        default_factory=lambda: {"stun": 1, "poison": 3, "freeze": 2}
    )
    poison_damage: int = 3
    stages_per_layer: int = 10
    mini_boss_stage: int = 5
    combat_chance: float = 70.0
    trap_threshold: int = 6
    hand_size: int = 4
    reward_card_count: int = 3
    card_reward_every: int = 3
    artifact_offer_count: int = 3
