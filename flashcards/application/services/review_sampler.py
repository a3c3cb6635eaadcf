"""
Review sampler: builds a bounded, randomized review queue.

Candidates are sorted by last_seen_at (never seen first) and cut down to a
pool of the most overdue cards; the pool is shuffled and the queue is taken
from its head. A card is only eligible if it is among the pool, but which
pool cards appear and in what order is random.
"""

import random
from typing import List, Optional, Sequence

from flashcards.application.record_store import RecordStore
from flashcards.domain_core.entities.card import Card
from flashcards.domain_core.validators.card_validators import CardValidators
from flashcards.infra.config.logging_config import get_logger

POOL_MULTIPLIER = 4
MIN_POOL_SIZE = 20


def pool_size_for(candidate_count: int, requested_count: int) -> int:
    requested = max(1, requested_count)
    return min(candidate_count, max(requested * POOL_MULTIPLIER, MIN_POOL_SIZE))


def build_review_queue(
    candidates: Sequence[Card],
    requested_count: int,
    rng: Optional[random.Random] = None,
) -> List[Card]:
    """Pure queue construction over a snapshot of candidate cards."""
    if not candidates:
        return []

    requested = max(1, requested_count)
    rng = rng or random.Random()

    # sorted() is stable, so ties keep their store order
    by_recency = sorted(candidates, key=lambda card: card.last_seen_at or 0)
    pool = by_recency[: pool_size_for(len(by_recency), requested)]
    rng.shuffle(pool)

    return pool[: min(requested, len(pool))]


class ReviewSampler:
    def __init__(self, record_store: RecordStore, rng: Optional[random.Random] = None):
        self.record_store = record_store
        self._rng = rng or random.Random()
        self._log = get_logger("review.sampler")

    async def sample(
        self, requested_count: int, deck_id: Optional[int] = None
    ) -> List[Card]:
        """
        Sample a review queue from one deck, or from every deck when deck_id is None.

        requested_count below 1 is treated as 1.
        """
        if deck_id is not None:
            candidates = await self.record_store.list_cards_by_deck(deck_id)
        else:
            candidates = await self.record_store.list_all_cards()

        reviewable = [card for card in candidates if CardValidators.is_reviewable(card)]
        queue = build_review_queue(reviewable, requested_count, self._rng)

        self._log.info(
            "review.sampled",
            deck_id=deck_id,
            requested=requested_count,
            candidates=len(reviewable),
            pool=pool_size_for(len(reviewable), requested_count),
            queued=len(queue),
        )
        return queue
