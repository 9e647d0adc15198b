"""Artifact definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ArtifactDef:
    """A passive modifier owned by the player."""

    id: str
    name: str
    description: str
    rarity: str
    effect: str
    value: int
    class_id: str | None = None
    element: str | None = None
