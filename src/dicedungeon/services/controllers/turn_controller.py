"""Alternating player/enemy turns inside one combat session."""
from __future__ import annotations

import logging

from dicedungeon.core.dice import Dice
from dicedungeon.core.pacing import Pacing
from dicedungeon.core.scheduler import Scheduler
from dicedungeon.core.types import Side
from dicedungeon.domain.combat_models import AttackOutcome, Combatant, CombatSession
from dicedungeon.domain.defs import BalanceDef, CardDef
from dicedungeon.domain.entities import EnemyInstance
from dicedungeon.domain.state import RunStore
from dicedungeon.domain.status_effects import is_incapacitated
from dicedungeon.services.combat_resolver import CombatResolver, basic_attack_skill
from dicedungeon.services.progression_service import ProgressionService

logger = logging.getLogger(__name__)


class TurnController:
    """
    Drives a combat session through its phases.

    player_ready -> player_skipped | player_acting -> enemy_ready ->
    enemy_skipped | enemy_acting -> player_ready | combat_won | combat_lost

    Every phase that ends (taken or skipped) advances the turn counter once
    and decays the status effects of the side that just had the phase, so a
    one-turn stun blocks exactly one action. Phase changes after an action
    are scheduled through the Scheduler and are dropped if the run was reset
    in the meantime.

    This controller does NOT render anything; the combat log in the store is
    the only output.
    """

    def __init__(
        self,
        store: RunStore,
        resolver: CombatResolver,
        scheduler: Scheduler,
        dice: Dice,
        progression: ProgressionService,
        balance: BalanceDef,
        pacing: Pacing,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._scheduler = scheduler
        self._dice = dice
        self._progression = progression
        self._balance = balance
        self._pacing = pacing

    # -----------------------
    # Session lifecycle
    # -----------------------
    def start_combat(self, enemy: EnemyInstance) -> CombatSession | None:
        store = self._store
        if store.player is None:
            logger.info("Cannot start combat without a player.")
            return None
        session = CombatSession(enemy=enemy)
        store.clear_status()
        store.set_mode("combat", session=session)
        store.append_log("=== Combat start ===")
        store.append_log(f"You face {enemy.name}!")
        self._enter_player_ready()
        return session

    def can_select_skill(self) -> bool:
        session = self._store.session
        return (
            self._store.mode.name == "combat"
            and session is not None
            and self._store.player is not None
            and session.phase == "player_ready"
            and session.is_player_turn
            and not self._dice.is_rolling
        )

    def select_skill(self, skill_id: str) -> bool:
        """Use an equipped skill. Returns False (and changes nothing) for an invalid intent."""
        if not self.can_select_skill():
            logger.info("Ignoring skill selection '%s': not the player's move.", skill_id)
            return False
        player = self._store.player
        assert player is not None
        skill = next((card for card in player.equipped_skills if card.id == skill_id), None)
        if skill is None:
            logger.info("Ignoring skill selection '%s': not equipped.", skill_id)
            return False
        if skill.hits is not None and skill.hits < 1:
            logger.info("Ignoring skill selection '%s': invalid hit count %s.", skill_id, skill.hits)
            return False

        session = self._store.session
        assert session is not None
        session.phase = "player_acting"
        started = self._dice.roll(lambda value: self._resolve_player_action(skill, value))
        if not started:
            session.phase = "player_ready"
        return started

    # -----------------------
    # Player phases
    # -----------------------
    def _enter_player_ready(self) -> None:
        session = self._active_session()
        if session is None:
            return
        session.is_player_turn = True
        session.phase = "player_ready"
        logger.debug("Turn %s: player ready", session.current_turn)
        if is_incapacitated(self._store.player_status):
            session.phase = "player_skipped"
            self._store.append_log(f"[Turn {session.current_turn}] You cannot act this turn!")
            if self._close_phase("player"):
                self._schedule(self._pacing.skip, self._enter_enemy_ready, "enemy_phase")

    def _resolve_player_action(self, skill: CardDef, roll: int) -> None:
        session = self._active_session()
        store = self._store
        if session is None or store.player is None:
            return
        store.append_log(f"[Turn {session.current_turn}] You use {skill.name}! (rolled {roll})")
        outcome = self._resolver.resolve_attack(
            Combatant.from_player(store.player),
            Combatant.from_enemy(session.enemy),
            skill,
            True,
            store.player.artifacts,
        )
        self._log_outcome(skill, outcome)
        if outcome.total_damage > 0:
            store.damage("enemy", outcome.total_damage)
        if session.enemy.stats.hp <= 0:
            self._win(session)
            return
        if self._close_phase("player"):
            self._schedule(self._pacing.player_to_enemy, self._enter_enemy_ready, "enemy_phase")

    # -----------------------
    # Enemy phases
    # -----------------------
    def _enter_enemy_ready(self) -> None:
        session = self._active_session()
        store = self._store
        if session is None or store.player is None:
            return
        if session.enemy.stats.hp <= 0 or store.player.stats.hp <= 0:
            return
        session.is_player_turn = False
        session.phase = "enemy_ready"
        logger.debug("Turn %s: enemy ready", session.current_turn)

        if is_incapacitated(store.enemy_status):
            session.phase = "enemy_skipped"
            store.append_log(f"[Turn {session.current_turn}] {session.enemy.name} cannot act this turn!")
        else:
            session.phase = "enemy_acting"
            store.append_log(f"[Turn {session.current_turn}] {session.enemy.name} attacks!")
            attacker = Combatant.from_enemy(session.enemy)
            skill = basic_attack_skill(attacker)
            outcome = self._resolver.resolve_attack(
                attacker,
                Combatant.from_player(store.player),
                skill,
                False,
                store.player.artifacts,
            )
            self._log_outcome(skill, outcome)
            if outcome.total_damage > 0:
                store.damage("player", outcome.total_damage)
            if store.player.stats.hp <= 0:
                self._lose(session)
                return

        if self._close_phase("enemy"):
            self._schedule(self._pacing.enemy_to_player, self._enter_player_ready, "player_phase")

    # -----------------------
    # Helpers
    # -----------------------
    def _close_phase(self, side: Side) -> bool:
        """
        End the phase of ``side``: poison tick, turn counter, decay.

        Returns False when poison ended the fight.
        """
        store = self._store
        session = store.session
        assert session is not None
        if store.status_for(side).poison > 0:
            stats = store.stats_for(side)
            name = "You" if side == "player" else session.enemy.name
            damage = self._balance.poison_damage
            store.damage(side, damage)
            store.append_log(f"{name} took {damage} poison damage.")
            if stats is not None and stats.hp <= 0:
                if side == "enemy":
                    self._win(session)
                else:
                    self._lose(session)
                return False
        session.current_turn += 1
        store.decay_status(side)
        return True

    def _log_outcome(self, skill: CardDef, outcome: AttackOutcome) -> None:
        store = self._store
        if outcome.hits_attempted > 1:
            store.append_log(f"{skill.name} ({outcome.hits_attempted} consecutive hits):")
            for line in outcome.per_hit_messages:
                store.append_log(f"  - {line}")
        store.append_log(outcome.summary)
        for line in outcome.status_messages:
            store.append_log(line)

    def _win(self, session: CombatSession) -> None:
        session.phase = "combat_won"
        logger.debug("Combat won against %s", session.enemy.name)
        self._progression.on_combat_won(session.enemy)

    def _lose(self, session: CombatSession) -> None:
        session.phase = "combat_lost"
        self._store.append_log("Game over...")
        self._store.append_log("=== Combat over ===")
        logger.debug("Combat lost against %s", session.enemy.name)
        self._progression.on_player_defeated()

    def _active_session(self) -> CombatSession | None:
        session = self._store.session
        if self._store.mode.name != "combat" or session is None or session.is_over:
            return None
        return session

    def _schedule(self, delay: float, callback, label: str) -> None:
        self._scheduler.call_later(delay, callback, label=label)
