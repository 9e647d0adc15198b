from dicedungeon.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]
    choices_a = [rng_a.choice(["a", "b", "c"]) for _ in range(5)]
    choices_b = [rng_b.choice(["a", "b", "c"]) for _ in range(5)]

    assert ints_a == ints_b
    assert floats_a == floats_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_chance_extremes() -> None:
    rng = RNG(3)
    assert not any(rng.chance(0) for _ in range(50))
    assert all(rng.chance(100) for _ in range(50))


def test_sample_caps_at_population_size() -> None:
    rng = RNG(5)
    picked = rng.sample(["a", "b"], 5)
    assert sorted(picked) == ["a", "b"]


def test_choice_rejects_empty_sequence() -> None:
    import pytest

    with pytest.raises(ValueError):
        RNG(1).choice([])
