"""Balance table repository."""
from __future__ import annotations

from typing import Dict, Tuple

from dicedungeon.core.types import STATUS_KINDS
from dicedungeon.data.errors import DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.domain.defs import BalanceDef

_INT_FIELDS = {
    "dice_sides": 2,
    "attack_bonus_divisor": 1,
    "gold_per_kill": 0,
    "boss_gold_multiplier": 1,
    "poison_damage": 0,
    "stages_per_layer": 1,
    "mini_boss_stage": 1,
    "trap_threshold": 1,
    "hand_size": 1,
    "reward_card_count": 1,
    "card_reward_every": 1,
    "artifact_offer_count": 1,
}
_PERCENT_FIELDS = (
    "dodge_base",
    "dodge_per_luck",
    "dodge_cap",
    "artifact_drop_chance_boss",
    "artifact_drop_chance_normal",
    "combat_chance",
)


class BalanceRepository(RepositoryBase[BalanceDef]):
    """Loads the single balance table from ``balance.json``."""

    KEY = "default"

    def __init__(self, base_path=None) -> None:
        super().__init__("balance.json", base_path)

    def get_balance(self) -> BalanceDef:
        return self.get(self.KEY)

    def _build(self, raw: dict[str, object]) -> Dict[str, BalanceDef]:
        context = "balance"
        self._assert_exact_fields(
            raw,
            set(_INT_FIELDS) | set(_PERCENT_FIELDS) | {"elemental_chart", "status_durations"},
            context,
        )
        values: Dict[str, object] = {}
        for name, minimum in _INT_FIELDS.items():
            values[name] = self._require_int(raw[name], f"{context} {name}", minimum=minimum)
        for name in _PERCENT_FIELDS:
            number = self._require_number(raw[name], f"{context} {name}")
            if not 0 <= number <= 100:
                raise DataValidationError(f"{context} {name} must be within [0, 100].")
            values[name] = number
        if values["dodge_cap"] >= 100:
            raise DataValidationError(f"{context} dodge_cap must be below 100.")
        if values["mini_boss_stage"] >= values["stages_per_layer"]:
            raise DataValidationError(f"{context} mini_boss_stage must come before the boss stage.")

        values["elemental_chart"] = self._build_chart(raw["elemental_chart"], f"{context} elemental_chart")
        durations = self._require_mapping(raw["status_durations"], f"{context} status_durations")
        self._assert_exact_fields(durations, set(STATUS_KINDS), f"{context} status_durations")
        values["status_durations"] = {
            kind: self._require_int(durations[kind], f"{context} status_durations {kind}", minimum=1)
            for kind in STATUS_KINDS
        }
        return {self.KEY: BalanceDef(**values)}

    def _build_chart(self, value: object, context: str) -> Dict[Tuple[str, str], float]:
        chart: Dict[Tuple[str, str], float] = {}
        attackers = self._require_mapping(value, context)
        for attacker, row in attackers.items():
            self._require_element(attacker, f"{context} attacker")
            defenders = self._require_mapping(row, f"{context} '{attacker}'")
            for defender, multiplier in defenders.items():
                self._require_element(defender, f"{context} '{attacker}' defender")
                number = self._require_number(multiplier, f"{context} '{attacker}'->'{defender}'")
                if number <= 0:
                    raise DataValidationError(f"{context} multipliers must be positive.")
                chart[(attacker, defender)] = number
        return chart
