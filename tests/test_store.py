from dicedungeon.domain.combat_models import CombatSession
from dicedungeon.domain.state import (
    CombatLogEvent,
    HpChangedEvent,
    ModeChangedEvent,
    RunResetEvent,
    RunStore,
)

from tests.helpers.builders import make_enemy, make_player


def test_hp_is_clamped_to_bounds() -> None:
    store = RunStore()
    store.set_player(make_player(hp=50), "warrior")

    assert store.set_hp("player", 500) == 100
    assert store.damage("player", 250) == 0
    assert store.heal("player", 30) == 30


def test_enemy_hp_requires_active_session() -> None:
    store = RunStore()
    assert store.set_hp("enemy", 10) is None

    store.set_mode("combat", session=CombatSession(enemy=make_enemy(hp=40)))
    assert store.damage("enemy", 15) == 25


def test_listeners_receive_events_until_unsubscribed() -> None:
    store = RunStore()
    store.set_player(make_player(), "warrior")
    received = []
    unsubscribe = store.subscribe(received.append)

    store.set_mode("exploring")
    store.damage("player", 5)
    unsubscribe()
    store.damage("player", 5)

    assert [type(event) for event in received] == [ModeChangedEvent, HpChangedEvent]
    assert received[0].previous == "menu"
    assert received[0].current == "exploring"


def test_log_lines_only_recorded_during_combat() -> None:
    store = RunStore()
    received = []
    store.subscribe(received.append)

    store.append_log("nobody hears this")
    store.set_mode("combat", session=CombatSession(enemy=make_enemy()))
    store.append_log("=== Combat start ===")

    assert store.session.log == ["=== Combat start ==="]
    assert [event.line for event in received if isinstance(event, CombatLogEvent)] == ["=== Combat start ==="]


def test_mode_switch_drops_previous_payload() -> None:
    store = RunStore()
    store.set_mode("combat", session=CombatSession(enemy=make_enemy()))
    store.set_mode("exploring")

    assert store.session is None


def test_artifacts_are_unique() -> None:
    from dicedungeon.data.repositories import ArtifactsRepository

    ring = ArtifactsRepository().get("iron_ring")
    store = RunStore()
    store.set_player(make_player(), "warrior")

    store.add_artifact(ring)
    store.add_artifact(ring)
    assert len(store.player.artifacts) == 1


def test_advance_stage_wraps_layer() -> None:
    store = RunStore()
    store.set_player(make_player(hp=10), "warrior")
    store.progress.current_stage = 9

    assert store.advance_stage(10) is False
    assert store.progress.current_stage == 10
    assert store.advance_stage(10) is True
    assert store.progress.current_stage == 1
    assert store.progress.current_layer == 2
    assert store.player.stats.hp == 100


def test_reset_run_clears_everything_and_bumps_generation() -> None:
    store = RunStore()
    store.set_player(make_player(), "warrior")
    store.add_gold(40)
    store.inflict_status("player", "poison", 3)
    store.set_menu_confirmation(True)
    received = []
    store.subscribe(received.append)

    store.reset_run()

    assert store.player is None
    assert store.selected_class_id is None
    assert store.progress.gold == 0
    assert store.player_status.poison == 0
    assert store.pending_menu_confirmation is False
    assert store.generation == 1
    assert store.mode.name == "menu"
    assert isinstance(received[0], RunResetEvent)


def test_owned_cards_are_not_added_twice() -> None:
    store = RunStore()
    store.set_player(make_player(), "warrior")

    store.add_card(store.player.skill_inventory[0])
    assert [card.id for card in store.player.skill_inventory] == ["test_strike"]


def test_mode_switch_drops_pending_menu_confirmation() -> None:
    store = RunStore()
    store.set_mode("exploring")
    store.set_menu_confirmation(True)

    store.set_mode("combat", session=CombatSession(enemy=make_enemy()))
    assert store.pending_menu_confirmation is False
