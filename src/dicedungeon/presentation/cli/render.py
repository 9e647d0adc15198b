"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from dicedungeon.domain.entities import Stats
from dicedungeon.domain.status_effects import StatusEffects

_STATUS_ICONS = {"stun": "STUN", "freeze": "FROZEN", "poison": "POISON"}


def debug_enabled() -> bool:
    """Return True only when DICEDUNGEON_DEBUG is explicitly set to '1'."""
    return os.getenv("DICEDUNGEON_DEBUG") == "1"


def format_hp_bar(stats: Stats, width: int = 20) -> str:
    """Return a fixed-width HP bar such as ``[#####-----] 50/100``."""
    if stats.max_hp <= 0:
        filled = 0
    else:
        filled = round(width * stats.hp / stats.max_hp)
    filled = max(0, min(width, filled))
    return f"[{'#' * filled}{'-' * (width - filled)}] {stats.hp}/{stats.max_hp}"


def format_status(effects: StatusEffects) -> str:
    active = effects.active()
    if not active:
        return ""
    return " ".join(f"{_STATUS_ICONS[kind]}({turns})" for kind, turns in active.items())


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")
