"""Presentation pacing delays between phases, in seconds."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Pacing:
    """Delays applied before scheduled phase transitions.

    None of these affect outcomes; tests and the instant CLI mode use zeros.
    """

    roll: float = 0.6
    player_to_enemy: float = 1.5
    skip: float = 1.0
    enemy_to_player: float = 1.0
    reward_screen: float = 3.0
    event_complete: float = 1.0
    trap_complete: float = 2.0
    defeat_reset: float = 2.0

    @classmethod
    def instant(cls) -> "Pacing":
        return cls(
            roll=0.0,
            player_to_enemy=0.0,
            skip=0.0,
            enemy_to_player=0.0,
            reward_screen=0.0,
            event_complete=0.0,
            trap_complete=0.0,
            defeat_reset=0.0,
        )
