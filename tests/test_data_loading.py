import json
from pathlib import Path

import pytest

from dicedungeon.data.errors import DataLoadError, DataReferenceError, DataValidationError
from dicedungeon.data.repositories import (
    ArtifactsRepository,
    BalanceRepository,
    CardsRepository,
    ClassesRepository,
    EventsRepository,
    MonstersRepository,
)

_CLASSES = {
    "warrior": {
        "name": "Warrior",
        "element": "earth",
        "base_hp": 120,
        "base_attack": 12,
        "base_luck": 3,
        "defense_reduction": 15,
    }
}


def test_shipped_definitions_load() -> None:
    classes_repo = ClassesRepository()

    assert {class_def.id for class_def in classes_repo.all()} == {"warrior", "mage", "rogue"}
    assert len(CardsRepository(classes_repo).for_class("rogue")) >= 4
    assert MonstersRepository().by_rank("boss")
    assert MonstersRepository().by_rank("mini_boss")
    assert {event.event_type for event in EventsRepository().all()} == {"heal", "trap", "treasure"}
    assert ArtifactsRepository(classes_repo).for_class("mage")


def test_shipped_balance_table() -> None:
    balance = BalanceRepository().get_balance()

    assert balance.stages_per_layer == 10
    assert balance.card_reward_every == 3
    assert balance.elemental_chart[("water", "fire")] == 1.5
    assert balance.status_durations == {"stun": 1, "freeze": 2, "poison": 3}


def test_every_class_has_enough_starting_commons() -> None:
    classes_repo = ClassesRepository()
    cards_repo = CardsRepository(classes_repo)
    hand_size = BalanceRepository().get_balance().hand_size

    for class_def in classes_repo.all():
        commons = [card for card in cards_repo.for_class(class_def.id) if card.rarity == "common"]
        assert len(commons) >= hand_size, class_def.id


def test_cards_repo_rejects_unknown_class(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "classes.json", _CLASSES)
    _write_json(
        definitions_dir / "cards.json",
        {
            "ghost_card": {
                "name": "Ghost",
                "class_id": "necromancer",
                "damage": 5,
                "element": "dark",
                "rarity": "common",
            }
        },
    )
    repo = CardsRepository(base_path=definitions_dir)
    with pytest.raises(DataReferenceError):
        repo.all()


def test_cards_repo_rejects_zero_hits(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "classes.json", _CLASSES)
    _write_json(
        definitions_dir / "cards.json",
        {
            "limp_card": {
                "name": "Limp",
                "class_id": "warrior",
                "damage": 5,
                "element": "neutral",
                "rarity": "common",
                "hits": 0,
            }
        },
    )
    repo = CardsRepository(base_path=definitions_dir)
    with pytest.raises(DataValidationError):
        repo.all()


def test_validation_rejects_unknown_field(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    payload = dict(_CLASSES)
    payload["warrior"] = dict(_CLASSES["warrior"], mana=10)
    _write_json(definitions_dir / "classes.json", payload)

    with pytest.raises(DataValidationError):
        ClassesRepository(base_path=definitions_dir).all()


def test_events_repo_rejects_inverted_range(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "events.json",
        {
            "bad_spring": {
                "name": "Bad Spring",
                "description": "",
                "type": "heal",
                "value_min": 20,
                "value_max": 5,
            }
        },
    )
    with pytest.raises(DataValidationError):
        EventsRepository(base_path=definitions_dir).all()


def test_artifact_element_only_for_element_damage(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "classes.json", _CLASSES)
    _write_json(
        definitions_dir / "artifacts.json",
        {
            "odd_ring": {
                "name": "Odd Ring",
                "description": "",
                "rarity": "common",
                "effect": "damage_flat",
                "value": 2,
                "element": "fire",
            }
        },
    )
    with pytest.raises(DataValidationError):
        ArtifactsRepository(base_path=definitions_dir).all()


def test_balance_rejects_certain_dodge(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    shipped = json.loads((_shipped_definitions() / "balance.json").read_text(encoding="utf-8"))
    shipped["dodge_cap"] = 100
    _write_json(definitions_dir / "balance.json", shipped)

    with pytest.raises(DataValidationError):
        BalanceRepository(base_path=definitions_dir).get_balance()


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        MonstersRepository(base_path=tmp_path).all()


def test_top_level_list_is_rejected(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "events.json").write_text("[]", encoding="utf-8")

    with pytest.raises(DataValidationError):
        EventsRepository(base_path=definitions_dir).all()


def test_broken_json_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "events.json").write_text("{oops", encoding="utf-8")

    with pytest.raises(DataLoadError):
        EventsRepository(base_path=definitions_dir).all()


def test_get_missing_raises_key_error() -> None:
    with pytest.raises(KeyError):
        MonstersRepository().get("missing_monster")


def _shipped_definitions() -> Path:
    from dicedungeon.data import paths

    return paths.get_definitions_path()


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_json(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
