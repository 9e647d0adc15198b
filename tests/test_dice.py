from dicedungeon.core.dice import Dice
from dicedungeon.core.scheduler import Scheduler

from tests.helpers.builders import ScriptedRNG


def _make_dice(*ints: int, delay: float = 0.6) -> tuple[Dice, Scheduler]:
    scheduler = Scheduler(lambda: 0)
    return Dice(ScriptedRNG(ints=ints), scheduler, sides=10, roll_delay=delay), scheduler


def test_roll_reports_value_after_delay() -> None:
    dice, scheduler = _make_dice(7)
    results = []

    assert dice.roll(results.append) is True
    assert dice.is_rolling
    assert results == []

    scheduler.advance(0.6)
    assert results == [7]
    assert dice.value == 7
    assert not dice.is_rolling


def test_second_roll_while_rolling_is_ignored() -> None:
    dice, scheduler = _make_dice(3, 9)
    results = []

    dice.roll(results.append)
    assert dice.roll(results.append) is False

    scheduler.run_until_idle()
    assert results == [3]


def test_reset_cancels_pending_roll() -> None:
    dice, scheduler = _make_dice(4)
    results = []
    dice.roll(results.append)

    dice.reset()
    scheduler.run_until_idle()

    assert results == []
    assert dice.value is None
    assert not dice.is_rolling


def test_real_rolls_stay_within_sides() -> None:
    from dicedungeon.core.rng import RNG

    scheduler = Scheduler(lambda: 0)
    dice = Dice(RNG(11), scheduler, sides=6)
    results = []
    for _ in range(30):
        dice.roll(results.append)
        scheduler.run_until_idle()

    assert all(1 <= value <= 6 for value in results)
