"""Run progression: rewards, card cadence and stage/layer advancement."""
from __future__ import annotations

import logging

from dicedungeon.core.dice import Dice
from dicedungeon.core.pacing import Pacing
from dicedungeon.core.scheduler import Scheduler
from dicedungeon.domain.defs import BalanceDef
from dicedungeon.domain.entities import EnemyInstance
from dicedungeon.domain.state import RunStore
from dicedungeon.services.encounter_service import Encounter, EncounterService
from dicedungeon.services.reward_service import RewardService

logger = logging.getLogger(__name__)


class ProgressionService:
    """
    Folds finished combats and events into the run counters and picks the next mode.

    ``total_turns`` goes up by exactly one per finished combat or event. The
    card reward cadence is decided right after that increment; when an
    artifact drop pre-empts the flow, the decision is carried in the
    artifact-select mode and applied once the artifact is resolved.
    """

    def __init__(
        self,
        store: RunStore,
        scheduler: Scheduler,
        dice: Dice,
        encounters: EncounterService,
        rewards: RewardService,
        balance: BalanceDef,
        pacing: Pacing,
    ) -> None:
        self._store = store
        self._scheduler = scheduler
        self._dice = dice
        self._encounters = encounters
        self._rewards = rewards
        self._balance = balance
        self._pacing = pacing

    # -----------------------
    # Encounters
    # -----------------------
    def decide_next_encounter(self) -> Encounter:
        self._dice.reset()
        progress = self._store.progress
        return self._encounters.decide_next_encounter(progress.current_stage, progress.current_layer)

    # -----------------------
    # Completion hooks
    # -----------------------
    def on_combat_won(self, enemy: EnemyInstance) -> None:
        store = self._store
        is_boss = enemy.is_boss
        gold = self._rewards.gold_reward(is_boss)
        store.append_log(f"You defeated {enemy.name}!")
        store.append_log(f"You gained {gold} gold!")
        store.add_gold(gold)
        store.increment_kills()
        total_turns = store.increment_total_turns()
        card_reward_due = self._rewards.is_card_reward_due(total_turns)
        logger.debug("Combat won (boss=%s): total_turns=%s card_reward_due=%s", is_boss, total_turns, card_reward_due)

        if self._rewards.should_drop_artifact(is_boss) and store.player is not None:
            offered = self._rewards.artifact_drop(store.player.class_id, store.player.artifacts, is_boss)
            if offered:
                store.append_log("You found an artifact!")
                store.append_log("=== Combat over ===")

                def _open_artifact_select() -> None:
                    store.clear_status()
                    store.set_mode(
                        "artifact_select",
                        offered_artifacts=tuple(offered),
                        artifact_context="drop",
                        card_reward_due=card_reward_due,
                    )

                self._scheduler.call_later(self._pacing.reward_screen, _open_artifact_select, label="artifact_drop")
                return

        store.append_log("=== Combat over ===")

        def _leave_combat() -> None:
            store.clear_status()
            self._finish_action(card_reward_due)

        self._scheduler.call_later(self._pacing.reward_screen, _leave_combat, label="combat_won")

    def on_event_resolved(self, *, delay: float | None = None) -> None:
        """Count the finished event and schedule the cadence or stage step."""
        total_turns = self._store.increment_total_turns()
        card_reward_due = self._rewards.is_card_reward_due(total_turns)
        logger.debug("Event resolved: total_turns=%s card_reward_due=%s", total_turns, card_reward_due)

        def _leave_event() -> None:
            self._dice.reset()
            self._finish_action(card_reward_due)

        wait = self._pacing.event_complete if delay is None else delay
        self._scheduler.call_later(wait, _leave_event, label="event_resolved")

    def on_player_defeated(self) -> None:
        """Schedule the run reset that follows a defeat."""
        self._scheduler.call_later(self._pacing.defeat_reset, self.reset_run, label="defeat_reset")

    # -----------------------
    # Rewards
    # -----------------------
    def offer_starting_artifacts(self) -> bool:
        player = self._store.player
        if player is None:
            return False
        offered = self._rewards.starting_artifacts(player.class_id)
        if not offered:
            return False
        self._store.set_mode("artifact_select", offered_artifacts=tuple(offered), artifact_context="start")
        return True

    def select_artifact(self, artifact_id: str) -> bool:
        mode = self._store.mode
        if mode.name != "artifact_select":
            logger.info("Ignoring artifact selection outside artifact_select mode.")
            return False
        chosen = next((artifact for artifact in mode.offered_artifacts if artifact.id == artifact_id), None)
        if chosen is None:
            logger.info("Ignoring selection of artifact '%s' that was not offered.", artifact_id)
            return False
        self._store.add_artifact(chosen)
        self._resolve_artifact_select()
        return True

    def skip_artifact(self) -> bool:
        if self._store.mode.name != "artifact_select":
            logger.info("Ignoring artifact skip outside artifact_select mode.")
            return False
        self._resolve_artifact_select()
        return True

    def select_card(self, card_id: str) -> bool:
        mode = self._store.mode
        if mode.name != "card_reward":
            logger.info("Ignoring card selection outside card_reward mode.")
            return False
        chosen = next((card for card in mode.offered_cards if card.id == card_id), None)
        if chosen is None:
            logger.info("Ignoring selection of card '%s' that was not offered.", card_id)
            return False
        self._store.add_card(chosen)
        self._store.set_mode("exploring")
        return True

    def skip_card_reward(self) -> bool:
        if self._store.mode.name != "card_reward":
            logger.info("Ignoring card reward skip outside card_reward mode.")
            return False
        self._store.set_mode("exploring")
        return True

    # -----------------------
    # Lifecycle
    # -----------------------
    def reset_run(self) -> None:
        self._dice.reset()
        self._store.reset_run()

    def _resolve_artifact_select(self) -> None:
        mode = self._store.mode
        if mode.artifact_context == "drop":
            self._finish_action(mode.card_reward_due)
        else:
            self._store.set_mode("exploring")

    def _finish_action(self, card_reward_due: bool) -> None:
        """Either open the card reward or advance one stage and return to exploring."""
        store = self._store
        if card_reward_due and store.player is not None:
            offered = self._rewards.card_reward_offer(store.player.class_id, store.player.skill_inventory)
            if offered:
                store.set_mode("card_reward", offered_cards=tuple(offered))
                return
        layer_cleared = store.advance_stage(self._balance.stages_per_layer)
        if layer_cleared:
            logger.debug("Layer cleared; now on layer %s", store.progress.current_layer)
        store.set_mode("exploring")
