"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .run_controller import RunController, build_run_controller
from .turn_controller import TurnController

__all__ = [
    "RunController",
    "TurnController",
    "build_run_controller",
]
