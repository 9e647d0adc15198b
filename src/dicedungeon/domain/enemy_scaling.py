"""Layer-based enemy stat scaling."""
from __future__ import annotations

from dicedungeon.domain.entities import Stats

# Added once per layer past the first.
HP_PER_LAYER = 15
ATTACK_PER_LAYER = 2
LUCK_PER_LAYER = 1


def scale_enemy_stats(base: Stats, *, layer: int) -> Stats:
    level = max(0, layer - 1)
    max_hp = base.max_hp + (HP_PER_LAYER * level)
    return Stats(
        max_hp=max_hp,
        hp=max_hp,
        attack=base.attack + (ATTACK_PER_LAYER * level),
        luck=base.luck + (LUCK_PER_LAYER * level),
        defense=base.defense,
    )
