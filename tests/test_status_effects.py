import pytest

from dicedungeon.domain.status_effects import StatusEffects, decay, inflict, is_incapacitated


def test_reinflicting_overwrites_instead_of_stacking() -> None:
    effects = StatusEffects()
    inflict(effects, "poison", 3)
    decay(effects)
    inflict(effects, "poison", 3)

    assert effects.poison == 3


@pytest.mark.parametrize("turns", [0, 1, 2, 3, 5])
def test_decay_never_goes_negative(turns: int) -> None:
    effects = StatusEffects()
    inflict(effects, "freeze", 2)
    for _ in range(turns):
        decay(effects)

    assert effects.freeze == max(0, 2 - turns)


def test_stun_and_freeze_incapacitate_but_poison_does_not() -> None:
    assert not is_incapacitated(StatusEffects(poison=3))
    assert is_incapacitated(StatusEffects(stun=1))
    assert is_incapacitated(StatusEffects(freeze=2))


def test_active_lists_only_running_effects() -> None:
    effects = StatusEffects(stun=1, poison=0, freeze=2)
    assert effects.active() == {"stun": 1, "freeze": 2}


def test_unknown_effect_is_rejected() -> None:
    with pytest.raises(ValueError):
        inflict(StatusEffects(), "burn", 2)
