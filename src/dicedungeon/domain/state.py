"""Run-wide state held in a single store mutated through named intents."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Tuple

from dicedungeon.core.types import GameMode, Side, StatusKind
from dicedungeon.domain import status_effects
from dicedungeon.domain.combat_models import CombatSession
from dicedungeon.domain.defs import ArtifactDef, CardDef, EventDef
from dicedungeon.domain.entities import Player, Stats
from dicedungeon.domain.status_effects import StatusEffects

logger = logging.getLogger(__name__)

ArtifactContext = Literal["start", "drop"]


@dataclass
class RunProgress:
    """Counters that live for one run.

    ``total_turns`` counts completed combats and events and drives the card
    reward cadence; it is unrelated to the in-combat turn counter.
    """

    current_stage: int = 1
    current_layer: int = 1
    total_turns: int = 0
    kill_count: int = 0
    gold: int = 0


@dataclass(slots=True)
class ActiveMode:
    """The active screen plus the payload that screen needs."""

    name: GameMode
    session: CombatSession | None = None
    event: EventDef | None = None
    offered_cards: Tuple[CardDef, ...] = ()
    offered_artifacts: Tuple[ArtifactDef, ...] = ()
    artifact_context: ArtifactContext | None = None
    card_reward_due: bool = False


@dataclass(slots=True)
class StoreEvent:
    """Base store change notification."""


@dataclass(slots=True)
class ModeChangedEvent(StoreEvent):
    previous: GameMode
    current: GameMode


@dataclass(slots=True)
class HpChangedEvent(StoreEvent):
    side: Side
    hp: int
    max_hp: int


@dataclass(slots=True)
class CombatLogEvent(StoreEvent):
    line: str


@dataclass(slots=True)
class StatusChangedEvent(StoreEvent):
    side: Side
    effects: dict


@dataclass(slots=True)
class ProgressChangedEvent(StoreEvent):
    field_name: str
    value: int


@dataclass(slots=True)
class InventoryChangedEvent(StoreEvent):
    kind: Literal["card", "artifact", "equipped"]
    item_ids: Tuple[str, ...]


@dataclass(slots=True)
class RunResetEvent(StoreEvent):
    generation: int


StoreListener = Callable[[StoreEvent], None]


class RunStore:
    """
    Owns every piece of mutable run state.

    Services read snapshots from the store and change it only through the
    intent methods below; each intent publishes a StoreEvent so an observing
    presentation layer can re-render.
    """

    def __init__(self) -> None:
        self.player: Player | None = None
        self.selected_class_id: str | None = None
        self.progress = RunProgress()
        self.mode = ActiveMode(name="menu")
        self.player_status = StatusEffects()
        self.enemy_status = StatusEffects()
        self.pending_menu_confirmation = False
        self.generation = 0
        self._listeners: List[StoreListener] = []

    # -----------------------
    # Observation
    # -----------------------
    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener; the returned callable unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, event: StoreEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    @property
    def session(self) -> CombatSession | None:
        return self.mode.session

    def status_for(self, side: Side) -> StatusEffects:
        return self.player_status if side == "player" else self.enemy_status

    def stats_for(self, side: Side) -> Stats | None:
        if side == "player":
            return self.player.stats if self.player else None
        session = self.mode.session
        return session.enemy.stats if session else None

    # -----------------------
    # Mode
    # -----------------------
    def set_mode(self, name: GameMode, **payload) -> None:
        """Switch screens. The new mode carries only the payload passed here.

        Any pending return-to-menu confirmation belongs to the old screen and
        is dropped.
        """
        previous = self.mode.name
        self.pending_menu_confirmation = False
        self.mode = ActiveMode(name=name, **payload)
        logger.debug("Mode %s -> %s", previous, name)
        self._publish(ModeChangedEvent(previous=previous, current=name))

    def set_menu_confirmation(self, pending: bool) -> None:
        self.pending_menu_confirmation = pending

    # -----------------------
    # Combatants
    # -----------------------
    def set_player(self, player: Player | None, class_id: str | None = None) -> None:
        self.player = player
        self.selected_class_id = class_id if player is not None else None

    def set_hp(self, side: Side, value: int) -> int | None:
        """Set HP for a side, clamped into ``[0, max_hp]``. Returns the stored value."""
        stats = self.stats_for(side)
        if stats is None:
            logger.info("Ignoring set_hp for %s: no such combatant.", side)
            return None
        stats.hp = stats.clamp_hp(value)
        self._publish(HpChangedEvent(side=side, hp=stats.hp, max_hp=stats.max_hp))
        return stats.hp

    def damage(self, side: Side, amount: int) -> int | None:
        stats = self.stats_for(side)
        if stats is None:
            return None
        return self.set_hp(side, stats.hp - max(0, amount))

    def heal(self, side: Side, amount: int) -> int | None:
        stats = self.stats_for(side)
        if stats is None:
            return None
        return self.set_hp(side, stats.hp + max(0, amount))

    def heal_to_full(self) -> None:
        if self.player is not None:
            self.set_hp("player", self.player.stats.max_hp)

    # -----------------------
    # Combat log
    # -----------------------
    def append_log(self, line: str) -> None:
        session = self.mode.session
        if session is None:
            logger.info("Dropping log line outside combat: %s", line)
            return
        session.log.append(line)
        self._publish(CombatLogEvent(line=line))

    def clear_log(self) -> None:
        if self.mode.session is not None:
            self.mode.session.log.clear()

    # -----------------------
    # Status effects
    # -----------------------
    def inflict_status(self, side: Side, kind: StatusKind, duration: int) -> None:
        effects = self.status_for(side)
        status_effects.inflict(effects, kind, duration)
        self._publish(StatusChangedEvent(side=side, effects=effects.as_dict()))

    def decay_status(self, side: Side) -> None:
        effects = self.status_for(side)
        status_effects.decay(effects)
        self._publish(StatusChangedEvent(side=side, effects=effects.as_dict()))

    def clear_status(self) -> None:
        self.player_status = StatusEffects()
        self.enemy_status = StatusEffects()

    # -----------------------
    # Progress
    # -----------------------
    def add_gold(self, amount: int) -> None:
        self.progress.gold = max(0, self.progress.gold + amount)
        self._publish(ProgressChangedEvent(field_name="gold", value=self.progress.gold))

    def increment_kills(self) -> None:
        self.progress.kill_count += 1
        self._publish(ProgressChangedEvent(field_name="kill_count", value=self.progress.kill_count))

    def increment_total_turns(self) -> int:
        self.progress.total_turns += 1
        self._publish(ProgressChangedEvent(field_name="total_turns", value=self.progress.total_turns))
        return self.progress.total_turns

    def advance_stage(self, stages_per_layer: int) -> bool:
        """Move to the next stage. Returns True when the step completed a layer.

        Completing a layer restores the player to full HP and starts the next
        layer at stage 1.
        """
        progress = self.progress
        if progress.current_stage >= stages_per_layer:
            self.heal_to_full()
            progress.current_layer += 1
            progress.current_stage = 1
            self._publish(ProgressChangedEvent(field_name="current_layer", value=progress.current_layer))
            self._publish(ProgressChangedEvent(field_name="current_stage", value=progress.current_stage))
            return True
        progress.current_stage += 1
        self._publish(ProgressChangedEvent(field_name="current_stage", value=progress.current_stage))
        return False

    # -----------------------
    # Inventories
    # -----------------------
    def add_card(self, card: CardDef) -> None:
        if self.player is None or self.player.find_card(card.id) is not None:
            return
        self.player.skill_inventory.append(card)
        self._publish(InventoryChangedEvent(kind="card", item_ids=(card.id,)))

    def equip_skills(self, cards: List[CardDef]) -> None:
        if self.player is None:
            return
        self.player.equipped_skills = list(cards)
        self._publish(InventoryChangedEvent(kind="equipped", item_ids=tuple(card.id for card in cards)))

    def add_artifact(self, artifact: ArtifactDef) -> None:
        if self.player is None or self.player.owns_artifact(artifact.id):
            return
        self.player.artifacts.append(artifact)
        self._publish(InventoryChangedEvent(kind="artifact", item_ids=(artifact.id,)))

    # -----------------------
    # Lifecycle
    # -----------------------
    def bump_generation(self) -> int:
        """Invalidate every continuation scheduled under the current generation."""
        self.generation += 1
        return self.generation

    def reset_run(self) -> None:
        """Discard the run and return to the menu."""
        self.bump_generation()
        self.player = None
        self.selected_class_id = None
        self.progress = RunProgress()
        self.clear_status()
        self.pending_menu_confirmation = False
        logger.debug("Run reset (generation %s)", self.generation)
        self._publish(RunResetEvent(generation=self.generation))
        self.set_mode("menu")
