"""Chooses what waits at the next stage: a fight or an event."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import EventsRepository, MonstersRepository
from dicedungeon.domain import formulas
from dicedungeon.domain.defs import BalanceDef, EventDef
from dicedungeon.domain.entities import EnemyInstance
from dicedungeon.services.errors import FactoryError
from dicedungeon.services.factories import create_enemy_instance

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Encounter:
    """Outcome of an encounter roll."""

    kind: Literal["combat", "event"]
    stage_type: str
    enemy: EnemyInstance | None = None
    event: EventDef | None = None


class EncounterService:
    """Rolls encounters and generates the monster or event behind them."""

    def __init__(
        self,
        monsters_repo: MonstersRepository,
        events_repo: EventsRepository,
        rng: RNG,
        balance: BalanceDef,
    ) -> None:
        self._monsters_repo = monsters_repo
        self._events_repo = events_repo
        self._rng = rng
        self._balance = balance

    def stage_type(self, stage: int) -> str:
        return formulas.stage_type(stage, self._balance)

    def should_start_combat(self) -> bool:
        return self._rng.chance(self._balance.combat_chance)

    def decide_next_encounter(self, stage: int, layer: int = 1) -> Encounter:
        """Roll combat versus event for ``stage``; boss stages field a boss of the matching rank."""
        stage_type = self.stage_type(stage)
        if self.should_start_combat():
            enemy = self.generate_enemy(stage_type, layer=layer)
            logger.debug("Stage %s (%s): combat against %s", stage, stage_type, enemy.name)
            return Encounter(kind="combat", stage_type=stage_type, enemy=enemy)
        event = self.generate_event()
        logger.debug("Stage %s (%s): event %s", stage, stage_type, event.id)
        return Encounter(kind="event", stage_type=stage_type, event=event)

    def generate_enemy(self, stage_type: str, *, layer: int = 1) -> EnemyInstance:
        if stage_type == "normal":
            pool = self._monsters_repo.normals()
        else:
            pool = self._monsters_repo.by_rank(stage_type) or self._monsters_repo.by_rank("boss")
        if not pool:
            raise FactoryError(f"No monsters available for stage type '{stage_type}'.")
        monster = self._rng.choice(pool)
        return create_enemy_instance(monster.id, self._monsters_repo, self._rng, layer=layer)

    def generate_event(self) -> EventDef:
        events = self._events_repo.all()
        if not events:
            raise FactoryError("No events are defined.")
        return self._rng.choice(events)
