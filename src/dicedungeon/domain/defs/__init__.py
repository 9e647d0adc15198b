"""Domain definition exports."""

from .artifact_def import ArtifactDef
from .balance_def import BalanceDef
from .card_def import CardDef
from .class_def import ClassDef
from .event_def import EVENT_CHOICES, EventDef
from .monster_def import MonsterDef

__all__ = [
    "ArtifactDef",
    "BalanceDef",
    "CardDef",
    "ClassDef",
    "EVENT_CHOICES",
    "EventDef",
    "MonsterDef",
]
