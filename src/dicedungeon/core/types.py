"""Shared type aliases for the core and domain layers."""
from typing import Literal

GameMode = Literal[
    "menu",
    "character_select",
    "exploring",
    "combat",
    "event",
    "card_reward",
    "artifact_select",
    "artifact_inventory",
    "skill_inventory",
]

Element = Literal["neutral", "fire", "water", "earth", "light", "dark"]

ELEMENTS: tuple[Element, ...] = ("neutral", "fire", "water", "earth", "light", "dark")

StatusKind = Literal["stun", "freeze", "poison"]

STATUS_KINDS: tuple[StatusKind, ...] = ("stun", "freeze", "poison")

Side = Literal["player", "enemy"]

Rarity = Literal["common", "rare", "epic"]

MonsterRank = Literal["normal", "mini_boss", "boss"]

__all__ = [
    "ELEMENTS",
    "Element",
    "GameMode",
    "MonsterRank",
    "Rarity",
    "STATUS_KINDS",
    "Side",
    "StatusKind",
]
