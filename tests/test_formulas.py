from dicedungeon.domain import formulas

from tests.helpers.builders import shipped_balance


def test_dodge_rate_grows_with_luck_and_caps() -> None:
    balance = shipped_balance()

    assert formulas.dodge_rate(0, balance) == 10
    assert formulas.dodge_rate(12, balance) == 22
    assert formulas.dodge_rate(500, balance) == 75


def test_dodge_rate_never_reaches_certainty() -> None:
    balance = shipped_balance(dodge_base=99, dodge_cap=99.5)
    assert formulas.dodge_rate(50, balance) < 100


def test_elemental_multipliers() -> None:
    balance = shipped_balance()

    assert formulas.elemental_multiplier("fire", "earth", balance) == 1.5
    assert formulas.elemental_multiplier("fire", "water", balance) == 0.75
    assert formulas.elemental_multiplier("fire", "light", balance) == 1.0
    assert formulas.elemental_multiplier("neutral", "dark", balance) == 1.0
    assert formulas.elemental_multiplier(None, "dark", balance) == 1.0


def test_attack_bonus_uses_integer_division() -> None:
    balance = shipped_balance()

    assert formulas.attack_bonus(4, balance) == 0
    assert formulas.attack_bonus(14, balance) == 2


def test_apply_defense_reduces_by_percent() -> None:
    assert formulas.apply_defense(20, 15) == 17
    assert formulas.apply_defense(20, 150) == 0
    assert formulas.final_damage(7.9) == 7


def test_gold_reward_boss_multiplier() -> None:
    balance = shipped_balance()

    assert formulas.gold_reward(1, False, balance) == 10
    assert formulas.gold_reward(1, True, balance) == 30


def test_stage_types() -> None:
    balance = shipped_balance()

    assert formulas.stage_type(1, balance) == "normal"
    assert formulas.stage_type(5, balance) == "mini_boss"
    assert formulas.stage_type(10, balance) == "boss"
