"""Gold, artifact and card reward generation."""
from __future__ import annotations

from typing import List, Sequence

from dicedungeon.core.rng import RNG
from dicedungeon.data.repositories import ArtifactsRepository, CardsRepository
from dicedungeon.domain import formulas
from dicedungeon.domain.defs import ArtifactDef, BalanceDef, CardDef

_RARITY_ORDER = {"epic": 0, "rare": 1, "common": 2}


class RewardService:
    """Builds reward offers from the card pools and the artifact catalogue."""

    def __init__(
        self,
        cards_repo: CardsRepository,
        artifacts_repo: ArtifactsRepository,
        rng: RNG,
        balance: BalanceDef,
    ) -> None:
        self._cards_repo = cards_repo
        self._artifacts_repo = artifacts_repo
        self._rng = rng
        self._balance = balance

    def gold_reward(self, is_boss: bool) -> int:
        return formulas.gold_reward(1, is_boss, self._balance)

    def is_card_reward_due(self, total_turns: int) -> bool:
        return total_turns > 0 and total_turns % self._balance.card_reward_every == 0

    def card_reward_offer(self, class_id: str, owned: Sequence[CardDef] = ()) -> List[CardDef]:
        """Distinct random cards from the class pool that the player does not own yet."""
        owned_ids = {card.id for card in owned}
        pool = [card for card in self._cards_repo.for_class(class_id) if card.id not in owned_ids]
        return self._rng.sample(pool, self._balance.reward_card_count)

    def starting_artifacts(self, class_id: str) -> List[ArtifactDef]:
        """Offer class artifacts first, topped up with generic common ones."""
        count = self._balance.artifact_offer_count
        offer = self._rng.sample(self._artifacts_repo.for_class(class_id), count)
        if len(offer) < count:
            generic = [
                artifact
                for artifact in self._artifacts_repo.available_to(None)
                if artifact.rarity == "common"
            ]
            offer.extend(self._rng.sample(generic, count - len(offer)))
        return offer

    def should_drop_artifact(self, is_boss: bool) -> bool:
        chance = (
            self._balance.artifact_drop_chance_boss if is_boss else self._balance.artifact_drop_chance_normal
        )
        return self._rng.chance(chance)

    def artifact_drop(self, class_id: str, owned: Sequence[ArtifactDef], is_boss: bool) -> List[ArtifactDef]:
        """Up to ``artifact_offer_count`` unowned artifacts; bosses offer the rarest first."""
        owned_ids = {artifact.id for artifact in owned}
        candidates = [
            artifact for artifact in self._artifacts_repo.available_to(class_id) if artifact.id not in owned_ids
        ]
        count = self._balance.artifact_offer_count
        if is_boss:
            self._rng.shuffle(candidates)
            candidates.sort(key=lambda artifact: _RARITY_ORDER.get(artifact.rarity, len(_RARITY_ORDER)))
            return candidates[:count]
        return self._rng.sample(candidates, count)
