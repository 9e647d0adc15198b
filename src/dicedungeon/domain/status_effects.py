"""Per-side status effect counters."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from dicedungeon.core.types import STATUS_KINDS, StatusKind

INCAPACITATING: tuple[StatusKind, ...] = ("stun", "freeze")


@dataclass(slots=True)
class StatusEffects:
    """Remaining turns for each effect kind on one side; 0 means inactive."""

    stun: int = 0
    freeze: int = 0
    poison: int = 0

    def get(self, kind: StatusKind) -> int:
        return getattr(self, kind)

    def as_dict(self) -> Dict[str, int]:
        return {kind: self.get(kind) for kind in STATUS_KINDS}

    def active(self) -> Dict[str, int]:
        return {kind: turns for kind, turns in self.as_dict().items() if turns > 0}


def inflict(effects: StatusEffects, kind: StatusKind, duration: int) -> None:
    """Set ``kind`` to ``duration`` turns. Reapplying resets the timer instead of stacking."""
    if kind not in STATUS_KINDS:
        raise ValueError(f"Unknown status effect '{kind}'.")
    setattr(effects, kind, max(0, int(duration)))


def is_incapacitated(effects: StatusEffects) -> bool:
    """A stunned or frozen side cannot act on its turn."""
    return any(effects.get(kind) > 0 for kind in INCAPACITATING)


def decay(effects: StatusEffects) -> None:
    """Tick every active counter down by one, never below zero."""
    for kind in STATUS_KINDS:
        turns = effects.get(kind)
        if turns > 0:
            setattr(effects, kind, turns - 1)
