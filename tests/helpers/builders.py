from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from dicedungeon.core.pacing import Pacing
from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import BalanceRepository
from dicedungeon.domain.defs import BalanceDef, CardDef
from dicedungeon.domain.entities import EnemyInstance, Player, Stats
from dicedungeon.services.controllers import RunController, build_run_controller


class ScriptedRNG(RNG):
    """RNG whose ``random`` and ``randint`` draws can be queued up front.

    Once a queue is empty the seeded generator takes over again.
    """

    def __init__(self, randoms: Iterable[float] = (), ints: Iterable[int] = (), seed: int = 7) -> None:
        super().__init__(seed)
        self.randoms = list(randoms)
        self.ints = list(ints)

    def random(self) -> float:
        if self.randoms:
            return self.randoms.pop(0)
        return super().random()

    def randint(self, a: int, b: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return super().randint(a, b)


# Draws for RNG.chance: HIT never passes a dodge check, DODGE always does.
HIT = 0.99
DODGE = 0.0


def shipped_balance(**overrides) -> BalanceDef:
    return replace(BalanceRepository().get_balance(), **overrides)


def make_card(
    card_id: str = "test_strike",
    *,
    damage: int = 10,
    element: str = "neutral",
    hits: int = 1,
    **flags,
) -> CardDef:
    return CardDef(
        id=card_id,
        name=card_id.replace("_", " ").title(),
        class_id="warrior",
        damage=damage,
        element=element,
        hits=hits,
        **flags,
    )


def make_player(
    *,
    hp: int = 100,
    max_hp: int = 100,
    attack: int = 10,
    luck: int = 0,
    defense: int = 0,
    element: str = "neutral",
    cards: Iterable[CardDef] | None = None,
) -> Player:
    hand = list(cards) if cards is not None else [make_card()]
    return Player(
        id="player_1",
        name="Hero",
        class_id="warrior",
        element=element,
        stats=Stats(max_hp=max_hp, hp=hp, attack=attack, luck=luck, defense=defense),
        equipped_skills=list(hand),
        skill_inventory=list(hand),
    )


def make_enemy(
    *,
    hp: int = 100,
    attack: int = 8,
    luck: int = 0,
    defense: int = 0,
    element: str = "neutral",
    rank: str = "normal",
    name: str = "Slime",
) -> EnemyInstance:
    return EnemyInstance(
        id="enemy_1",
        monster_id=name.lower(),
        name=name,
        element=element,
        stats=Stats(max_hp=hp, hp=hp, attack=attack, luck=luck, defense=defense),
        rank=rank,
    )


def build_controller(rng: RNG | None = None, pacing: Pacing | None = None) -> RunController:
    return build_run_controller(rng=rng or ScriptedRNG(), pacing=pacing or Pacing.instant())


def start_fight(controller: RunController, player: Player, enemy: EnemyInstance) -> None:
    controller.store.set_player(player, player.class_id)
    controller.turns.start_combat(enemy)
