"""Exploration events repository."""
from __future__ import annotations

from typing import Dict

from dicedungeon.data.errors import DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.domain.defs import EVENT_CHOICES, EventDef


class EventsRepository(RepositoryBase[EventDef]):
    """Loads heal, trap and treasure events."""

    def __init__(self, base_path=None) -> None:
        super().__init__("events.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EventDef]:
        events: Dict[str, EventDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Event IDs must be strings.")
            context = f"event '{raw_id}'"
            event_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                event_data,
                {"name", "description", "type", "value_min", "value_max"},
                context,
            )
            value_min = self._require_int(event_data["value_min"], f"{context} value_min", minimum=0)
            value_max = self._require_int(event_data["value_max"], f"{context} value_max", minimum=0)
            if value_max < value_min:
                raise DataValidationError(f"{context} value_max must be >= value_min.")
            events[raw_id] = EventDef(
                id=raw_id,
                name=self._require_str(event_data["name"], f"{context} name"),
                description=self._require_str(event_data["description"], f"{context} description"),
                event_type=self._require_literal(event_data["type"], tuple(EVENT_CHOICES), f"{context} type"),
                value_min=value_min,
                value_max=value_max,
            )
        return events
