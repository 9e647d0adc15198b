"""Cards repository with class reference validation."""
from __future__ import annotations

from typing import Dict, List

from dicedungeon.data.errors import DataReferenceError, DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.data.repositories.classes_repo import ClassesRepository
from dicedungeon.domain.defs import CardDef

VALID_RARITIES = ("common", "rare", "epic")


class CardsRepository(RepositoryBase[CardDef]):
    """Loads skill cards and ensures their owning class exists."""

    def __init__(self, classes_repo: ClassesRepository | None = None, base_path=None) -> None:
        super().__init__("cards.json", base_path)
        self._classes_repo = classes_repo or ClassesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CardDef]:
        class_ids = {class_def.id for class_def in self._classes_repo.all()}
        cards: Dict[str, CardDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Card IDs must be strings.")
            context = f"card '{raw_id}'"
            card_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                card_data,
                {"name", "class_id", "damage", "element", "rarity"},
                context,
                optional_fields={"hits", "stun", "poison", "freeze", "description"},
            )
            class_id = self._require_optional_str(card_data["class_id"], f"{context} class_id")
            if class_id is not None and class_id not in class_ids:
                raise DataReferenceError(f"{context} references missing class '{class_id}'.")
            cards[raw_id] = CardDef(
                id=raw_id,
                name=self._require_str(card_data["name"], f"{context} name"),
                class_id=class_id,
                damage=self._require_int(card_data["damage"], f"{context} damage", minimum=0),
                element=self._require_element(card_data["element"], f"{context} element"),
                hits=self._require_int(card_data.get("hits", 1), f"{context} hits", minimum=1),
                rarity=self._require_literal(card_data["rarity"], VALID_RARITIES, f"{context} rarity"),
                stun=self._require_bool(card_data.get("stun", False), f"{context} stun"),
                poison=self._require_bool(card_data.get("poison", False), f"{context} poison"),
                freeze=self._require_bool(card_data.get("freeze", False), f"{context} freeze"),
                description=self._require_str(card_data.get("description", ""), f"{context} description"),
            )
        return cards

    def for_class(self, class_id: str) -> List[CardDef]:
        """Return the card pool for a class, sorted by id."""
        return [card for card in self.all() if card.class_id == class_id]
