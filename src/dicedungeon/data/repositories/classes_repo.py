"""Classes repository."""
from __future__ import annotations

from typing import Dict

from dicedungeon.data.errors import DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads playable class definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Class IDs must be strings.")
            context = f"class '{raw_id}'"
            class_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                class_data,
                {"name", "element", "base_hp", "base_attack", "base_luck", "defense_reduction"},
                context,
                optional_fields={"description"},
            )
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"{context} name"),
                element=self._require_element(class_data["element"], f"{context} element"),
                base_hp=self._require_int(class_data["base_hp"], f"{context} base_hp", minimum=1),
                base_attack=self._require_int(class_data["base_attack"], f"{context} base_attack", minimum=0),
                base_luck=self._require_int(class_data["base_luck"], f"{context} base_luck", minimum=0),
                defense_reduction=self._require_int(
                    class_data["defense_reduction"], f"{context} defense_reduction", minimum=0
                ),
                description=self._require_str(class_data.get("description", ""), f"{context} description"),
            )
        return classes
