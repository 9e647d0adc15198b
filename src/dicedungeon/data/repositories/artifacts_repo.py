"""Artifacts repository."""
from __future__ import annotations

from typing import Dict, List

from dicedungeon.data.errors import DataReferenceError, DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.data.repositories.cards_repo import VALID_RARITIES
from dicedungeon.data.repositories.classes_repo import ClassesRepository
from dicedungeon.domain.defs import ArtifactDef

VALID_EFFECTS = (
    "damage_flat",
    "damage_percent",
    "element_damage",
    "boss_damage",
    "defense_flat",
    "defense_percent",
)


class ArtifactsRepository(RepositoryBase[ArtifactDef]):
    """Loads the artifact catalogue."""

    def __init__(self, classes_repo: ClassesRepository | None = None, base_path=None) -> None:
        super().__init__("artifacts.json", base_path)
        self._classes_repo = classes_repo or ClassesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArtifactDef]:
        class_ids = {class_def.id for class_def in self._classes_repo.all()}
        artifacts: Dict[str, ArtifactDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Artifact IDs must be strings.")
            context = f"artifact '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "description", "rarity", "effect", "value"},
                context,
                optional_fields={"class_id", "element"},
            )
            class_id = self._require_optional_str(data.get("class_id"), f"{context} class_id")
            if class_id is not None and class_id not in class_ids:
                raise DataReferenceError(f"{context} references missing class '{class_id}'.")
            effect = self._require_literal(data["effect"], VALID_EFFECTS, f"{context} effect")
            element = data.get("element")
            if effect == "element_damage":
                element = self._require_element(element, f"{context} element")
            elif element is not None:
                raise DataValidationError(f"{context} element is only valid for element_damage artifacts.")
            artifacts[raw_id] = ArtifactDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                description=self._require_str(data["description"], f"{context} description"),
                rarity=self._require_literal(data["rarity"], VALID_RARITIES, f"{context} rarity"),
                effect=effect,
                value=self._require_int(data["value"], f"{context} value", minimum=0),
                class_id=class_id,
                element=element,
            )
        return artifacts

    def for_class(self, class_id: str) -> List[ArtifactDef]:
        """Return artifacts restricted to the class."""
        return [artifact for artifact in self.all() if artifact.class_id == class_id]

    def available_to(self, class_id: str | None) -> List[ArtifactDef]:
        """Return generic artifacts plus those restricted to the class."""
        return [artifact for artifact in self.all() if artifact.class_id in (None, class_id)]
