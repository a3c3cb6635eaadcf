"""
Review session: walks a sampled queue and records each dismissal.
"""

from typing import Callable, List, Optional, Tuple

from flashcards.application.clock import now_ms
from flashcards.application.record_store import RecordStore
from flashcards.application.services.review_sampler import ReviewSampler
from flashcards.domain_core.entities.card import Card
from flashcards.domain_core.exceptions import CardNotFoundError
from flashcards.domain_core.services.interval_scheduler import (
    ReviewOutcome,
    schedule_review,
)
from flashcards.infra.config.logging_config import bound_context, get_logger


class ReviewSession:
    """
    A single pass over a review queue.

    The queue is fixed once sampled; reroll() samples a new one. Cards are
    snapshots and are never mutated here; outcomes are written through the
    record store.
    """

    def __init__(
        self,
        record_store: RecordStore,
        sampler: ReviewSampler,
        requested_count: int,
        deck_id: Optional[int] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.record_store = record_store
        self.sampler = sampler
        self.requested_count = max(1, requested_count)
        self.deck_id = deck_id
        self._clock = clock
        self._queue: List[Card] = []
        self._position = 0
        self._outcomes: List[ReviewOutcome] = []
        self._log = get_logger("review.session")

    @classmethod
    async def review_all(
        cls,
        record_store: RecordStore,
        sampler: ReviewSampler,
        deck_id: Optional[int] = None,
        clock: Callable[[], int] = now_ms,
    ) -> "ReviewSession":
        """A session sized to every card in scope, so the whole pool is queued."""
        total = await record_store.count_cards(deck_id)
        return cls(record_store, sampler, max(total, 1), deck_id=deck_id, clock=clock)

    async def start(self) -> List[Card]:
        with bound_context(deck_id=self.deck_id):
            self._queue = await self.sampler.sample(self.requested_count, self.deck_id)
            self._position = 0
            self._outcomes = []
            self._log.info("review.start", queued=len(self._queue))
        return list(self._queue)

    async def reroll(self) -> List[Card]:
        self._log.info("review.reroll", abandoned_at=self._position)
        return await self.start()

    @property
    def queue(self) -> List[Card]:
        return list(self._queue)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Optional[Card]:
        if self._position < len(self._queue):
            return self._queue[self._position]
        return None

    @property
    def remaining(self) -> int:
        return len(self._queue) - self._position

    @property
    def is_finished(self) -> bool:
        return self.current is None

    @property
    def progress(self) -> Tuple[int, int]:
        """1-based position of the current card and the queue length."""
        return min(self._position + 1, len(self._queue)), len(self._queue)

    @property
    def outcomes(self) -> List[ReviewOutcome]:
        return list(self._outcomes)

    async def dismiss(
        self, remembered: bool = True, now: Optional[int] = None
    ) -> Optional[ReviewOutcome]:
        """
        Record the outcome for the current card and advance.

        A card deleted since sampling is dropped and None is returned. Any
        other failure propagates and the session stays on the same card.
        """
        card = self.current
        if card is None:
            return None

        now = self._clock() if now is None else now
        outcome = schedule_review(card, now, remembered)

        try:
            await self.record_store.record_review(
                card.id, now, outcome.interval_days, outcome.due_at
            )
        except CardNotFoundError:
            self._log.warning("review.card_gone", card_id=card.id)
            self._position += 1
            return None

        self._outcomes.append(outcome)
        self._position += 1
        self._log.info(
            "review.dismiss",
            card_id=card.id,
            remembered=remembered,
            interval_days=outcome.interval_days,
        )
        return outcome
