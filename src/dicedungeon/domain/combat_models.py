"""Combat domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from dicedungeon.core.types import Side
from dicedungeon.domain.entities import EnemyInstance, Player, Stats

CombatPhase = Literal[
    "player_ready",
    "player_skipped",
    "player_acting",
    "enemy_ready",
    "enemy_skipped",
    "enemy_acting",
    "combat_won",
    "combat_lost",
]


@dataclass(slots=True)
class Combatant:
    """Common combat view over the player or an enemy.

    ``stats`` is the entity's own Stats object, so HP changes made through a
    combatant are visible on the entity.
    """

    side: Side
    display_name: str
    element: str
    stats: Stats
    is_boss: bool = False

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    @classmethod
    def from_player(cls, player: Player) -> "Combatant":
        return cls(side="player", display_name=player.name, element=player.element, stats=player.stats)

    @classmethod
    def from_enemy(cls, enemy: EnemyInstance) -> "Combatant":
        return cls(
            side="enemy",
            display_name=enemy.name,
            element=enemy.element,
            stats=enemy.stats,
            is_boss=enemy.is_boss,
        )


@dataclass(slots=True)
class AttackOutcome:
    """Result of one skill use, possibly spanning several hits."""

    any_hit: bool
    total_damage: int
    hits_landed: int
    hits_attempted: int
    per_hit_messages: List[str] = field(default_factory=list)
    summary: str = ""
    inflicted: tuple[str, ...] = ()
    status_messages: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CombatSession:
    """State of one fight from its first turn to a win, a loss or a flight."""

    enemy: EnemyInstance
    log: List[str] = field(default_factory=list)
    current_turn: int = 1
    is_player_turn: bool = True
    phase: CombatPhase = "player_ready"

    @property
    def is_over(self) -> bool:
        return self.phase in ("combat_won", "combat_lost")
