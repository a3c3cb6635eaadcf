"""
Unit tests for the review session flow.
"""

import pytest
import structlog
from unittest.mock import AsyncMock

from flashcards.application.services.review_session import ReviewSession
from flashcards.domain_core.entities.card import DAY_MS
from flashcards.domain_core.exceptions import StorageError


@pytest.fixture
async def seeded(memory_store, now):
    deck = await memory_store.create_deck("Bio", now)
    cards = await memory_store.add_cards(deck.id, [b"a", b"b", b"c"], now)
    return deck, cards


class TestReviewSession:
    @pytest.mark.asyncio
    async def test_start_fills_queue(self, memory_store, sampler, seeded):
        deck, cards = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)

        queue = await session.start()

        assert len(queue) == 3
        assert session.position == 0
        assert session.progress == (1, 3)
        assert session.current.id == queue[0].id
        assert session.is_finished is False

    @pytest.mark.asyncio
    async def test_dismiss_records_outcome(self, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)
        await session.start()
        first = session.current

        outcome = await session.dismiss(remembered=True, now=now + 1_000)

        assert outcome.card_id == first.id
        assert outcome.interval_days == 2
        stored = await memory_store.get_card(first.id)
        assert stored.last_seen_at == now + 1_000
        assert stored.interval_days == 2
        assert stored.due_at == now + 1_000 + 2 * DAY_MS
        assert session.position == 1
        assert session.remaining == 2

    @pytest.mark.asyncio
    async def test_forgotten_resets_interval(self, backend, memory_store, sampler, seeded, now):
        deck, cards = seeded
        for card in cards:
            backend.cards[card.id].interval_days = 32
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)
        await session.start()
        first = session.current

        await session.dismiss(remembered=False, now=now + 5)

        stored = await memory_store.get_card(first.id)
        assert stored.interval_days == 1
        assert stored.due_at == now + 5 + DAY_MS

    @pytest.mark.asyncio
    async def test_queue_is_fixed_while_advancing(self, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)
        queue = await session.start()

        seen = []
        while not session.is_finished:
            seen.append(session.current.id)
            await session.dismiss(now=now + len(seen))

        assert seen == [c.id for c in queue]
        assert session.current is None
        assert await session.dismiss() is None
        assert len(session.outcomes) == 3

    @pytest.mark.asyncio
    async def test_deleted_card_is_dropped(self, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)
        await session.start()
        gone = session.current
        await memory_store.delete_card(gone.id)

        result = await session.dismiss(now=now + 1)

        assert result is None
        assert session.position == 1
        assert session.outcomes == []

    @pytest.mark.asyncio
    async def test_storage_failure_keeps_position(self, backend, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)
        await session.start()
        backend.fail_on.add("card.record_review")

        with pytest.raises(StorageError) as exc_info:
            await session.dismiss(now=now + 1)

        assert exc_info.value.operation == "record_review"
        assert session.position == 0

    @pytest.mark.asyncio
    async def test_reroll_resets(self, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 2, deck_id=deck.id)
        await session.start()
        await session.dismiss(now=now + 1)

        queue = await session.reroll()

        assert len(queue) == 2
        assert session.position == 0
        assert session.outcomes == []

    @pytest.mark.asyncio
    async def test_uses_clock_when_now_missing(self, memory_store, sampler, seeded, now):
        deck, _ = seeded
        session = ReviewSession(
            memory_store, sampler, 1, deck_id=deck.id, clock=lambda: now + 777
        )
        await session.start()

        outcome = await session.dismiss()

        assert outcome.last_seen_at == now + 777

    @pytest.mark.asyncio
    async def test_non_positive_count_is_clamped(self, memory_store):
        sampler = AsyncMock()
        sampler.sample.return_value = []
        session = ReviewSession(memory_store, sampler, 0)

        await session.start()

        sampler.sample.assert_awaited_once_with(1, None)
        assert session.progress == (0, 0)
        assert session.is_finished is True

    @pytest.mark.asyncio
    async def test_deck_context_is_not_left_bound(self, memory_store, sampler, seeded):
        deck, _ = seeded
        session = ReviewSession(memory_store, sampler, 10, deck_id=deck.id)

        await session.start()

        assert "deck_id" not in structlog.contextvars.get_contextvars()


class TestReviewAll:
    @pytest.mark.asyncio
    async def test_queues_every_card_in_deck(self, memory_store, sampler, now):
        deck = await memory_store.create_deck("Bio", now)
        cards = await memory_store.add_cards(
            deck.id, [b"img%d" % i for i in range(30)], now
        )

        session = await ReviewSession.review_all(memory_store, sampler, deck_id=deck.id)
        queue = await session.start()

        assert session.requested_count == 30
        assert sorted(c.id for c in queue) == sorted(c.id for c in cards)
        assert session.progress == (1, 30)

    @pytest.mark.asyncio
    async def test_fixed_count_session_is_smaller(self, memory_store, sampler, now):
        deck = await memory_store.create_deck("Bio", now)
        await memory_store.add_cards(deck.id, [b"img%d" % i for i in range(30)], now)

        queue = await ReviewSession(memory_store, sampler, 10, deck_id=deck.id).start()

        assert len(queue) == 10

    @pytest.mark.asyncio
    async def test_all_decks_when_unscoped(self, memory_store, sampler, now):
        bio = await memory_store.create_deck("Bio", now)
        chem = await memory_store.create_deck("Chem", now)
        await memory_store.add_cards(bio.id, [b"b%d" % i for i in range(25)], now)
        await memory_store.add_cards(chem.id, [b"c%d" % i for i in range(5)], now)

        session = await ReviewSession.review_all(memory_store, sampler)
        queue = await session.start()

        assert len(queue) == 30
        assert {c.deck_id for c in queue} == {bio.id, chem.id}

    @pytest.mark.asyncio
    async def test_scoped_to_one_deck(self, memory_store, sampler, now):
        bio = await memory_store.create_deck("Bio", now)
        chem = await memory_store.create_deck("Chem", now)
        await memory_store.add_cards(bio.id, [b"b%d" % i for i in range(25)], now)
        await memory_store.add_cards(chem.id, [b"c%d" % i for i in range(5)], now)

        session = await ReviewSession.review_all(memory_store, sampler, deck_id=chem.id)
        queue = await session.start()

        assert len(queue) == 5
        assert {c.deck_id for c in queue} == {chem.id}

    @pytest.mark.asyncio
    async def test_empty_deck_gives_empty_queue(self, memory_store, sampler, now):
        deck = await memory_store.create_deck("Bio", now)

        session = await ReviewSession.review_all(memory_store, sampler, deck_id=deck.id)

        assert session.requested_count == 1
        assert await session.start() == []
        assert session.is_finished is True
