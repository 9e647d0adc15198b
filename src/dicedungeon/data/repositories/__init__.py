"""Repository exports."""

from .artifacts_repo import ArtifactsRepository
from .balance_repo import BalanceRepository
from .cards_repo import CardsRepository
from .classes_repo import ClassesRepository
from .events_repo import EventsRepository
from .monsters_repo import MonstersRepository

__all__ = [
    "ArtifactsRepository",
    "BalanceRepository",
    "CardsRepository",
    "ClassesRepository",
    "EventsRepository",
    "MonstersRepository",
]
