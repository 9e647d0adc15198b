"""Factory for creating enemy instances from monster definitions."""
from __future__ import annotations

from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import MonstersRepository
from dicedungeon.domain.enemy_scaling import scale_enemy_stats
from dicedungeon.domain.entities import EnemyInstance, Stats
from dicedungeon.services.errors import FactoryError

from .id_factory import make_instance_id


def create_enemy_instance(
    monster_id: str,
    monsters_repo: MonstersRepository,
    rng: RNG,
    *,
    layer: int = 1,
) -> EnemyInstance:
    """Instantiate a monster at full HP, scaled for the current layer."""
    try:
        monster_def = monsters_repo.get(monster_id)
    except KeyError as exc:
        raise FactoryError(f"Monster '{monster_id}' not found.") from exc

    base = Stats(
        max_hp=monster_def.hp,
        hp=monster_def.hp,
        attack=monster_def.attack,
        luck=monster_def.luck,
        defense=monster_def.defense_reduction,
    )
    return EnemyInstance(
        id=make_instance_id("enemy", rng),
        monster_id=monster_def.id,
        name=monster_def.name,
        element=monster_def.element,
        stats=scale_enemy_stats(base, layer=layer),
        rank=monster_def.rank,
    )
