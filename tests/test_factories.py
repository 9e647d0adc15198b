import pytest

from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import CardsRepository, ClassesRepository, MonstersRepository
from dicedungeon.services.errors import FactoryError
from dicedungeon.services.factories import create_enemy_instance, create_player_from_class_id


def test_player_starts_with_first_common_cards() -> None:
    classes_repo = ClassesRepository()
    player = create_player_from_class_id("warrior", classes_repo, CardsRepository(classes_repo), RNG(1), hand_size=4)

    assert player.stats.hp == player.stats.max_hp == 120
    assert player.stats.defense == 15
    assert player.element == "earth"
    assert [card.id for card in player.equipped_skills] == [
        "warrior_bash",
        "warrior_double_cut",
        "warrior_rock_smash",
        "warrior_slash",
    ]
    assert player.skill_inventory == player.equipped_skills
    assert player.artifacts == []


def test_unknown_class_raises() -> None:
    classes_repo = ClassesRepository()
    with pytest.raises(FactoryError):
        create_player_from_class_id("bard", classes_repo, CardsRepository(classes_repo), RNG(1), hand_size=4)


def test_enemy_instance_at_full_hp() -> None:
    enemy = create_enemy_instance("slime", MonstersRepository(), RNG(2))

    assert enemy.name == "Slime"
    assert enemy.stats.hp == enemy.stats.max_hp == 40
    assert not enemy.is_boss


def test_enemy_scales_with_layer() -> None:
    enemy = create_enemy_instance("slime", MonstersRepository(), RNG(2), layer=3)

    assert enemy.stats.max_hp == 70
    assert enemy.stats.hp == 70
    assert enemy.stats.attack == 10
    assert enemy.stats.luck == 2


def test_unknown_monster_raises() -> None:
    with pytest.raises(FactoryError):
        create_enemy_instance("dragonling", MonstersRepository(), RNG(2))
