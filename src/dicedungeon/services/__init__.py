"""Service layer exports."""

from .combat_resolver import CombatResolver, basic_attack_skill
from .controllers import RunController, TurnController, build_run_controller
from .encounter_service import Encounter, EncounterService
from .errors import FactoryError, InvalidSkillError
from .event_service import EventOutcome, EventService
from .progression_service import ProgressionService
from .reward_service import RewardService

__all__ = [
    "CombatResolver",
    "Encounter",
    "EncounterService",
    "EventOutcome",
    "EventService",
    "FactoryError",
    "InvalidSkillError",
    "ProgressionService",
    "RewardService",
    "RunController",
    "TurnController",
    "basic_attack_skill",
    "build_run_controller",
]
