"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy_instance
from .id_factory import make_instance_id
from .player_factory import create_player_from_class_id

__all__ = [
    "create_enemy_instance",
    "create_player_from_class_id",
    "make_instance_id",
]
