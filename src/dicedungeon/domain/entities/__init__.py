"""Runtime entity exports."""

from .enemy import EnemyInstance
from .player import Player
from .stats import Stats

__all__ = [
    "EnemyInstance",
    "Player",
    "Stats",
]
