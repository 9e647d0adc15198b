"""Reads definition tables from disk."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_definition_table(path: Path) -> dict[str, object]:
    """Return the top-level object of a definition file.

    Missing or unparsable files raise DataLoadError; any other top-level
    JSON value raises DataValidationError.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path} (line {exc.lineno}): {exc.msg}") from exc

    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected a top-level object in {path}, got {type(raw).__name__}.")
    return raw
