"""Monsters repository."""
from __future__ import annotations

from typing import Dict, List

from dicedungeon.data.errors import DataValidationError
from dicedungeon.data.repositories.base import RepositoryBase
from dicedungeon.domain.defs import MonsterDef

VALID_RANKS = ("normal", "mini_boss", "boss")


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads and validates monster and boss definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("monsters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterDef]:
        monsters: Dict[str, MonsterDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Monster IDs must be strings.")
            context = f"monster '{raw_id}'"
            monster_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                monster_data,
                {"name", "element", "hp", "attack", "luck", "rank"},
                context,
                optional_fields={"defense_reduction"},
            )
            monsters[raw_id] = MonsterDef(
                id=raw_id,
                name=self._require_str(monster_data["name"], f"{context} name"),
                element=self._require_element(monster_data["element"], f"{context} element"),
                hp=self._require_int(monster_data["hp"], f"{context} hp", minimum=1),
                attack=self._require_int(monster_data["attack"], f"{context} attack", minimum=0),
                luck=self._require_int(monster_data["luck"], f"{context} luck", minimum=0),
                defense_reduction=self._require_int(
                    monster_data.get("defense_reduction", 0), f"{context} defense_reduction", minimum=0
                ),
                rank=self._require_literal(monster_data["rank"], VALID_RANKS, f"{context} rank"),
            )
        return monsters

    def normals(self) -> List[MonsterDef]:
        return [monster for monster in self.all() if monster.rank == "normal"]

    def by_rank(self, rank: str) -> List[MonsterDef]:
        return [monster for monster in self.all() if monster.rank == rank]
