"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from dicedungeon.core.pacing import Pacing

_DEFAULT_PACING_MODE = "paced"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "DiceDungeon"
        return Path.home() / "DiceDungeon"
    return Path.home() / ".config" / "dicedungeon"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_pacing_mode(value: object) -> str:
    return "instant" if value == "instant" else _DEFAULT_PACING_MODE


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {"pacing_mode": _DEFAULT_PACING_MODE}
    if not isinstance(raw, dict):
        return {"pacing_mode": _DEFAULT_PACING_MODE}
    return {"pacing_mode": _normalize_pacing_mode(raw.get("pacing_mode"))}


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"pacing_mode": _normalize_pacing_mode(config.get("pacing_mode"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def pacing_for(config: Dict[str, str]) -> Pacing:
    """Map the stored pacing mode onto phase delays."""
    if _normalize_pacing_mode(config.get("pacing_mode")) == "instant":
        return Pacing.instant()
    return Pacing()
