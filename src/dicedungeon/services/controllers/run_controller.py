"""Top-level run mode state machine."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from dicedungeon.core.dice import Dice
from dicedungeon.core.pacing import Pacing
from dicedungeon.core.rng import RNG
from dicedungeon.core.scheduler import Scheduler
from dicedungeon.core.types import GameMode
from dicedungeon.data.repositories import (
    ArtifactsRepository,
    BalanceRepository,
    CardsRepository,
    ClassesRepository,
    EventsRepository,
    MonstersRepository,
)
from dicedungeon.domain.defs import BalanceDef, ClassDef
from dicedungeon.domain.state import RunStore
from dicedungeon.services.combat_resolver import CombatResolver
from dicedungeon.services.controllers.turn_controller import TurnController
from dicedungeon.services.encounter_service import EncounterService
from dicedungeon.services.errors import FactoryError
from dicedungeon.services.event_service import EventService
from dicedungeon.services.factories import create_player_from_class_id
from dicedungeon.services.progression_service import ProgressionService
from dicedungeon.services.reward_service import RewardService

logger = logging.getLogger(__name__)

_MENU_CONFIRMABLE: tuple[GameMode, ...] = (
    "character_select",
    "exploring",
    "combat",
    "event",
    "card_reward",
    "artifact_select",
    "artifact_inventory",
    "skill_inventory",
)


class RunController:
    """
    UI-agnostic entry point for every player intent.

    Each intent checks that it is legal in the current mode and returns False
    without touching state when it is not. While a return to menu awaits
    confirmation, only confirm and cancel are accepted. Mode changes made by the turn
    controller and the progression service flow back through the same store.
    """

    def __init__(
        self,
        store: RunStore,
        scheduler: Scheduler,
        dice: Dice,
        classes_repo: ClassesRepository,
        cards_repo: CardsRepository,
        turns: TurnController,
        progression: ProgressionService,
        events: EventService,
        balance: BalanceDef,
        rng: RNG,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.dice = dice
        self.turns = turns
        self.progression = progression
        self.events = events
        self.balance = balance
        self._classes_repo = classes_repo
        self._cards_repo = cards_repo
        self._rng = rng

    @property
    def mode(self) -> GameMode:
        return self.store.mode.name

    # -----------------------
    # Menu and character select
    # -----------------------
    def start_new_run(self) -> bool:
        if self._awaiting_confirmation("start_new_run"):
            return False
        if self.mode != "menu":
            return self._ignore("start_new_run")
        self.store.set_mode("character_select")
        return True

    def available_classes(self) -> list[ClassDef]:
        return self._classes_repo.all()

    def select_character(self, class_id: str) -> bool:
        if self._awaiting_confirmation("select_character"):
            return False
        if self.mode != "character_select":
            return self._ignore("select_character")
        try:
            player = create_player_from_class_id(
                class_id,
                self._classes_repo,
                self._cards_repo,
                self._rng,
                hand_size=self.balance.hand_size,
            )
        except FactoryError as exc:
            logger.info("Ignoring character selection: %s", exc)
            return False
        self.store.set_player(player, class_id)
        if not self.progression.offer_starting_artifacts():
            self.store.set_mode("exploring")
        return True

    # -----------------------
    # Exploring
    # -----------------------
    def proceed(self) -> bool:
        """Advance into whatever waits at the current stage."""
        if self._awaiting_confirmation("proceed"):
            return False
        if self.mode != "exploring" or self.store.player is None:
            return self._ignore("proceed")
        encounter = self.progression.decide_next_encounter()
        if encounter.kind == "combat" and encounter.enemy is not None:
            return self.turns.start_combat(encounter.enemy) is not None
        if encounter.event is not None:
            self.events.start_event(encounter.event)
            return True
        return False

    def open_skill_inventory(self) -> bool:
        if self._awaiting_confirmation("open_skill_inventory"):
            return False
        if self.mode != "exploring":
            return self._ignore("open_skill_inventory")
        self.store.set_mode("skill_inventory")
        return True

    def open_artifact_inventory(self) -> bool:
        if self._awaiting_confirmation("open_artifact_inventory"):
            return False
        if self.mode != "exploring":
            return self._ignore("open_artifact_inventory")
        self.store.set_mode("artifact_inventory")
        return True

    def close_inventory(self) -> bool:
        if self._awaiting_confirmation("close_inventory"):
            return False
        if self.mode not in ("skill_inventory", "artifact_inventory"):
            return self._ignore("close_inventory")
        self.store.set_mode("exploring")
        return True

    def equip_skills(self, card_ids: Sequence[str]) -> bool:
        """Replace the hand with 1..hand_size distinct owned cards, then return to exploring."""
        if self._awaiting_confirmation("equip_skills"):
            return False
        player = self.store.player
        if self.mode != "skill_inventory" or player is None:
            return self._ignore("equip_skills")
        if not card_ids or len(card_ids) > self.balance.hand_size or len(set(card_ids)) != len(card_ids):
            logger.info("Ignoring equip: hand must hold 1-%s distinct cards.", self.balance.hand_size)
            return False
        cards = [player.find_card(card_id) for card_id in card_ids]
        if any(card is None for card in cards):
            logger.info("Ignoring equip: not every card is owned.")
            return False
        self.store.equip_skills([card for card in cards if card is not None])
        self.store.set_mode("exploring")
        return True

    # -----------------------
    # Combat and events
    # -----------------------
    def select_skill(self, skill_id: str) -> bool:
        if self._awaiting_confirmation("select_skill"):
            return False
        return self.turns.select_skill(skill_id)

    def choose_event(self, choice: str) -> bool:
        if self._awaiting_confirmation("choose_event"):
            return False
        return self.events.choose(choice)

    # -----------------------
    # Rewards
    # -----------------------
    def select_card(self, card_id: str) -> bool:
        if self._awaiting_confirmation("select_card"):
            return False
        return self.progression.select_card(card_id)

    def skip_card_reward(self) -> bool:
        if self._awaiting_confirmation("skip_card_reward"):
            return False
        return self.progression.skip_card_reward()

    def select_artifact(self, artifact_id: str) -> bool:
        if self._awaiting_confirmation("select_artifact"):
            return False
        return self.progression.select_artifact(artifact_id)

    def skip_artifact(self) -> bool:
        if self._awaiting_confirmation("skip_artifact"):
            return False
        return self.progression.skip_artifact()

    # -----------------------
    # Return to menu
    # -----------------------
    def request_return_to_menu(self) -> bool:
        """First step of leaving the run; nothing is discarded until confirmed."""
        if self._awaiting_confirmation("request_return_to_menu"):
            return False
        if self.mode not in _MENU_CONFIRMABLE or self.dice.is_rolling:
            return self._ignore("request_return_to_menu")
        self.store.set_menu_confirmation(True)
        return True

    def cancel_return_to_menu(self) -> bool:
        if not self.store.pending_menu_confirmation:
            return self._ignore("cancel_return_to_menu")
        self.store.set_menu_confirmation(False)
        return True

    def confirm_return_to_menu(self) -> bool:
        """Discard the run, including any combat in progress, and go back to the menu."""
        if not self.store.pending_menu_confirmation:
            return self._ignore("confirm_return_to_menu")
        self.progression.reset_run()
        return True

    def _awaiting_confirmation(self, intent: str) -> bool:
        """While a return to menu is pending only confirm and cancel are accepted."""
        if not self.store.pending_menu_confirmation:
            return False
        logger.info("Ignoring intent '%s': return to menu awaits confirmation.", intent)
        return True

    def _ignore(self, intent: str) -> bool:
        logger.info("Ignoring intent '%s' in mode '%s'.", intent, self.mode)
        return False


def build_run_controller(
    *,
    rng: RNG | None = None,
    pacing: Pacing | None = None,
    base_path: Path | str | None = None,
    balance: BalanceDef | None = None,
) -> RunController:
    """Wire repositories, services and controllers around a fresh store."""
    rng = rng or RNG()
    pacing = pacing or Pacing()
    classes_repo = ClassesRepository(base_path=base_path)
    cards_repo = CardsRepository(classes_repo=classes_repo, base_path=base_path)
    artifacts_repo = ArtifactsRepository(classes_repo=classes_repo, base_path=base_path)
    monsters_repo = MonstersRepository(base_path=base_path)
    events_repo = EventsRepository(base_path=base_path)
    balance = balance or BalanceRepository(base_path=base_path).get_balance()

    store = RunStore()
    scheduler = Scheduler(lambda: store.generation)
    dice = Dice(rng, scheduler, sides=balance.dice_sides, roll_delay=pacing.roll)
    encounters = EncounterService(monsters_repo, events_repo, rng, balance)
    rewards = RewardService(cards_repo, artifacts_repo, rng, balance)
    progression = ProgressionService(store, scheduler, dice, encounters, rewards, balance, pacing)
    resolver = CombatResolver(store, rng, balance)
    turns = TurnController(store, resolver, scheduler, dice, progression, balance, pacing)
    events = EventService(store, dice, rng, progression, balance, pacing)
    return RunController(
        store=store,
        scheduler=scheduler,
        dice=dice,
        classes_repo=classes_repo,
        cards_repo=cards_repo,
        turns=turns,
        progression=progression,
        events=events,
        balance=balance,
        rng=rng,
    )
