from dicedungeon.core.pacing import Pacing
from dicedungeon.domain.entities import Stats
from dicedungeon.domain.status_effects import StatusEffects
from dicedungeon.presentation.cli import app
from dicedungeon.presentation.cli.app import _build_confirm_entries, _build_mode_entries, drain_scheduler
from dicedungeon.presentation.cli.render import format_hp_bar, format_status

from tests.helpers.builders import ScriptedRNG, build_controller, make_enemy, make_player, start_fight


def _labels(entries) -> list[str]:
    return [label for label, _ in entries]


def test_main_menu_offers_start_and_quit() -> None:
    controller = build_controller()
    labels = _labels(_build_mode_entries(controller, {"pacing_mode": "paced"}))

    assert labels[0] == "Start New Run"
    assert "Quit" in labels
    assert "Return to Main Menu" not in labels


def test_exploring_menu_entries() -> None:
    controller = build_controller()
    controller.start_new_run()
    controller.select_character("rogue")
    controller.skip_artifact()
    labels = _labels(_build_mode_entries(controller, {}))

    assert labels == [
        "Proceed",
        "Skill Inventory",
        "Artifact Inventory",
        "Return to Main Menu",
    ]


def test_combat_menu_lists_equipped_cards_and_flee() -> None:
    controller = build_controller()
    start_fight(controller, make_player(), make_enemy())
    labels = _labels(_build_mode_entries(controller, {}))

    assert labels[0].startswith("Test Strike")
    assert labels[-1] == "Flee (abandons the run)"


def test_combat_menu_empty_while_rolling() -> None:
    controller = build_controller(pacing=Pacing())
    start_fight(controller, make_player(), make_enemy())
    controller.select_skill("test_strike")

    assert _build_mode_entries(controller, {}) == []


def test_confirm_entries_drive_confirmation() -> None:
    controller = build_controller()
    controller.start_new_run()
    controller.request_return_to_menu()
    entries = _build_confirm_entries(controller)

    entries[1][1]()
    assert controller.store.pending_menu_confirmation is False
    assert controller.mode == "character_select"


def test_drain_scheduler_sleeps_through_delays() -> None:
    controller = build_controller(ScriptedRNG(), pacing=Pacing())
    start_fight(controller, make_player(), make_enemy())
    controller.select_skill("test_strike")
    slept = []

    drain_scheduler(controller, sleep=slept.append)

    assert slept[0] == Pacing().roll
    assert controller.scheduler.next_delay() is None


def test_run_mode_once_applies_selected_option(monkeypatch) -> None:
    controller = build_controller()
    monkeypatch.setattr("builtins.input", lambda _prompt: "1")

    assert app._run_mode_once(controller, {"pacing_mode": "instant"}) is True
    assert controller.mode == "character_select"


def test_run_mode_once_quits(monkeypatch) -> None:
    controller = build_controller()
    monkeypatch.setattr("builtins.input", lambda _prompt: "3")

    assert app._run_mode_once(controller, {"pacing_mode": "instant"}) is False


def test_format_hp_bar_and_status() -> None:
    assert format_hp_bar(Stats(max_hp=100, hp=50, attack=1, luck=0), width=10) == "[#####-----] 50/100"
    assert format_status(StatusEffects()) == ""
    assert format_status(StatusEffects(stun=1, poison=2)) == "STUN(1) POISON(2)"
