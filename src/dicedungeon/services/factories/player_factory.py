"""Factory for creating the player from a class definition."""
from __future__ import annotations

from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import CardsRepository, ClassesRepository
from dicedungeon.domain.entities import Player, Stats
from dicedungeon.services.errors import FactoryError

from .id_factory import make_instance_id


def create_player_from_class_id(
    class_id: str,
    classes_repo: ClassesRepository,
    cards_repo: CardsRepository,
    rng: RNG,
    *,
    hand_size: int,
    name: str | None = None,
) -> Player:
    """Instantiate a full-HP player holding the class's first common cards."""
    try:
        class_def = classes_repo.get(class_id)
    except KeyError as exc:
        raise FactoryError(f"Class '{class_id}' not found.") from exc

    starter_cards = [card for card in cards_repo.for_class(class_id) if card.rarity == "common"][:hand_size]
    if not starter_cards:
        raise FactoryError(f"Class '{class_id}' has no common cards to start with.")

    stats = Stats(
        max_hp=class_def.base_hp,
        hp=class_def.base_hp,
        attack=class_def.base_attack,
        luck=class_def.base_luck,
        defense=class_def.defense_reduction,
    )
    return Player(
        id=make_instance_id("player", rng),
        name=name or class_def.name,
        class_id=class_id,
        element=class_def.element,
        stats=stats,
        equipped_skills=list(starter_cards),
        skill_inventory=list(starter_cards),
    )
