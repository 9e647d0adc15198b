from pathlib import Path

from dicedungeon.core.pacing import Pacing
from dicedungeon.presentation.cli import config


def test_missing_config_uses_paced_default(tmp_path: Path) -> None:
    assert config.load_config(tmp_path / "config.json") == {"pacing_mode": "paced"}


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config.save_config({"pacing_mode": "instant"}, path)

    assert config.load_config(path) == {"pacing_mode": "instant"}


def test_invalid_config_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert config.load_config(path)["pacing_mode"] == "paced"

    path.write_text('{"pacing_mode": "turbo"}', encoding="utf-8")
    assert config.load_config(path)["pacing_mode"] == "paced"


def test_pacing_for_modes() -> None:
    assert config.pacing_for({"pacing_mode": "instant"}) == Pacing.instant()
    assert config.pacing_for({"pacing_mode": "paced"}) == Pacing()


def test_default_config_path_under_user_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.os, "name", "posix")
    monkeypatch.setattr(config.Path, "home", lambda: tmp_path)

    assert config.get_default_config_path() == tmp_path / ".config" / "dicedungeon" / "config.json"
