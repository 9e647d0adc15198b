def test_import_dicedungeon_package() -> None:
    import importlib

    module = importlib.import_module("dicedungeon")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from dicedungeon.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_entry_point() -> None:
    from dicedungeon.main import main

    assert callable(main)
