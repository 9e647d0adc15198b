"""Console-driven UI loop for Dice Dungeon."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Tuple

from dicedungeon.domain.state import CombatLogEvent, ModeChangedEvent, StoreEvent
from dicedungeon.presentation.cli import config
from dicedungeon.presentation.cli.render import (
    debug_enabled,
    format_hp_bar,
    format_status,
    render_bullet_lines,
    render_heading,
    render_menu,
)
from dicedungeon.services.controllers import RunController, build_run_controller

MenuEntry = Tuple[str, Callable[[], object]]
_QUIT = "quit"


def main() -> None:
    """Start the interactive CLI session."""
    if debug_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    options = config.load_config()
    controller = build_run_controller(pacing=config.pacing_for(options))
    controller.store.subscribe(_print_store_event)
    print("=== Dice Dungeon ===")
    while _run_mode_once(controller, options):
        pass
    print("Goodbye!")


def _print_store_event(event: StoreEvent) -> None:
    if isinstance(event, CombatLogEvent):
        print(event.line)
    elif isinstance(event, ModeChangedEvent) and debug_enabled():
        print(f"[mode] {event.previous} -> {event.current}")


def _run_mode_once(controller: RunController, options: dict) -> bool:
    """Render the active mode, apply one chosen intent and let pending phases play out."""
    if controller.store.pending_menu_confirmation:
        title = "Abandon this run? Progress will not be saved."
        entries = _build_confirm_entries(controller)
    else:
        title = _render_mode_view(controller)
        entries = _build_mode_entries(controller, options)
    if not entries:
        drain_scheduler(controller)
        return True
    render_menu(title, [label for label, _ in entries])
    index = _prompt_choice(len(entries))
    result = entries[index][1]()
    if result == _QUIT:
        return False
    drain_scheduler(controller)
    return True


def drain_scheduler(controller: RunController, sleep: Callable[[float], None] = time.sleep) -> None:
    """Run every scheduled transition, sleeping through the pacing delays."""
    scheduler = controller.scheduler
    delay = scheduler.next_delay()
    while delay is not None:
        if delay > 0:
            sleep(delay)
        scheduler.advance(delay)
        delay = scheduler.next_delay()


def _build_confirm_entries(controller: RunController) -> List[MenuEntry]:
    return [
        ("Yes, return to the main menu", controller.confirm_return_to_menu),
        ("No, keep playing", controller.cancel_return_to_menu),
    ]


def _build_mode_entries(controller: RunController, options: dict) -> List[MenuEntry]:
    store = controller.store
    mode = store.mode
    entries: List[MenuEntry] = []

    if mode.name == "menu":
        pacing_label = "Instant" if options.get("pacing_mode") == "instant" else "Paced"
        entries.append(("Start New Run", controller.start_new_run))
        entries.append((f"Pacing: {pacing_label} (takes effect next launch)", lambda: _toggle_pacing(options)))
        entries.append(("Quit", lambda: _QUIT))
        return entries

    if mode.name == "character_select":
        for class_def in controller.available_classes():
            entries.append(
                (
                    f"{class_def.name} [{class_def.element}] HP {class_def.base_hp} - {class_def.description}",
                    lambda class_id=class_def.id: controller.select_character(class_id),
                )
            )
    elif mode.name == "exploring":
        entries.append(("Proceed", controller.proceed))
        entries.append(("Skill Inventory", controller.open_skill_inventory))
        entries.append(("Artifact Inventory", controller.open_artifact_inventory))
    elif mode.name == "combat":
        if not controller.turns.can_select_skill() or store.player is None:
            return []
        for card in store.player.equipped_skills:
            entries.append((_card_label(card), lambda card_id=card.id: controller.select_skill(card_id)))
        entries.append(("Flee (abandons the run)", controller.request_return_to_menu))
        return entries
    elif mode.name == "event":
        if mode.event is None:
            return []
        for choice in mode.event.choices:
            entries.append((choice.title(), lambda choice=choice: _choose_event(controller, choice)))
    elif mode.name == "card_reward":
        for card in mode.offered_cards:
            entries.append((_card_label(card), lambda card_id=card.id: controller.select_card(card_id)))
        entries.append(("Skip", controller.skip_card_reward))
        return entries
    elif mode.name == "artifact_select":
        for artifact in mode.offered_artifacts:
            entries.append(
                (
                    f"{artifact.name} ({artifact.rarity}) - {artifact.description}",
                    lambda artifact_id=artifact.id: controller.select_artifact(artifact_id),
                )
            )
        entries.append(("Skip", controller.skip_artifact))
        return entries
    elif mode.name == "skill_inventory":
        entries.append(("Choose Equipped Cards", lambda: _prompt_equip(controller)))
        entries.append(("Back", controller.close_inventory))
    elif mode.name == "artifact_inventory":
        entries.append(("Back", controller.close_inventory))

    entries.append(("Return to Main Menu", controller.request_return_to_menu))
    return entries


def _render_mode_view(controller: RunController) -> str:
    store = controller.store
    mode = store.mode
    player = store.player
    progress = store.progress

    if mode.name == "menu":
        return "Main Menu"
    if mode.name == "character_select":
        return "Choose Your Class"
    if mode.name == "exploring" and player is not None:
        render_heading(f"Layer {progress.current_layer} - Stage {progress.current_stage}")
        print(f"{player.name} HP {format_hp_bar(player.stats)}")
        print(
            f"Gold {progress.gold} | Kills {progress.kill_count} | "
            f"Actions {progress.total_turns} | Artifacts {len(player.artifacts)}"
        )
        return "What next?"
    if mode.name == "combat" and mode.session is not None and player is not None:
        session = mode.session
        enemy = session.enemy
        render_heading(f"Combat - Turn {session.current_turn}")
        print(f"You     {format_hp_bar(player.stats)} {format_status(store.player_status)}")
        print(f"{enemy.name:<7} {format_hp_bar(enemy.stats)} {format_status(store.enemy_status)}")
        if controller.dice.value is not None:
            print(f"Dice: {controller.dice.value}")
        return "Choose a card"
    if mode.name == "event":
        if mode.event is not None:
            render_heading(mode.event.name)
            print(mode.event.description)
        return "Your choice"
    if mode.name == "card_reward":
        return f"Card Reward ({progress.total_turns} actions completed)"
    if mode.name == "artifact_select":
        return "Starting Artifact" if mode.artifact_context == "start" else "Artifact Found"
    if mode.name == "skill_inventory" and player is not None:
        render_heading("Skill Inventory")
        equipped = {card.id for card in player.equipped_skills}
        for idx, card in enumerate(player.skill_inventory, start=1):
            marker = "*" if card.id in equipped else " "
            print(f"{marker}{idx}. {_card_label(card)}")
        return f"Equip up to {controller.balance.hand_size} cards"
    if mode.name == "artifact_inventory" and player is not None:
        render_heading("Artifacts")
        if not player.artifacts:
            print("(none)")
        render_bullet_lines(f"{artifact.name}: {artifact.description}" for artifact in player.artifacts)
        return "Artifacts"
    return mode.name


def _card_label(card) -> str:
    parts = [f"{card.name} [{card.element}] {card.damage} dmg"]
    if card.hits > 1:
        parts.append(f"x{card.hits}")
    parts.extend(kind for kind in card.inflicts)
    return " ".join(parts)


def _choose_event(controller: RunController, choice: str) -> bool:
    accepted = controller.choose_event(choice)
    drain_scheduler(controller)
    outcome = controller.events.last_outcome
    if accepted and outcome is not None:
        if outcome.roll is not None:
            print(f"Dice: {outcome.roll}")
        render_bullet_lines(outcome.messages)
    return accepted


def _prompt_equip(controller: RunController) -> bool:
    player = controller.store.player
    if player is None:
        return False
    raw = input("Card numbers separated by commas: ").strip()
    card_ids: List[str] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            index = int(part) - 1
        except ValueError:
            print(f"'{part}' is not a number.")
            return False
        if not 0 <= index < len(player.skill_inventory):
            print(f"There is no card {part}.")
            return False
        card_ids.append(player.skill_inventory[index].id)
    if not controller.equip_skills(card_ids):
        print(f"Pick between 1 and {controller.balance.hand_size} different cards.")
        return False
    return True


def _toggle_pacing(options: dict) -> None:
    options["pacing_mode"] = "paced" if options.get("pacing_mode") == "instant" else "instant"
    config.save_config(options)


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
