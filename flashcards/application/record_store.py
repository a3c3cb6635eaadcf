"""
Record store adapter: deck/card operations over the durable record store.

Every call opens its own unit of work, so each operation is one transaction
and no deck or card state is cached between calls.

Two concurrent record_review() calls for the same card race and the last
write wins. A human reviews one card at a time, so this is accepted.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional, Sequence

from flashcards.application.ports import UnitOfWorkPort
from flashcards.domain_core.entities.card import Card
from flashcards.domain_core.entities.deck import Deck
from flashcards.domain_core.exceptions import (
    CardNotFoundError,
    DeckNotFoundError,
    StorageError,
)
from flashcards.domain_core.validators.card_validators import CardValidators
from flashcards.domain_core.validators.deck_validators import DeckValidators
from flashcards.infra.config.logging_config import get_logger

UnitOfWorkFactory = Callable[[], UnitOfWorkPort]


class RecordStore:
    def __init__(self, uow_factory: UnitOfWorkFactory):
        self._uow_factory = uow_factory
        self._log = get_logger("record_store")

    @asynccontextmanager
    async def _transaction(
        self, operation: str, entity_id: Optional[int] = None
    ) -> AsyncIterator[UnitOfWorkPort]:
        try:
            async with self._uow_factory() as uow:
                yield uow
        except StorageError as exc:
            self._log.error(
                "store.failure",
                operation=operation,
                entity_id=entity_id,
                error=exc.reason,
            )
            raise StorageError(operation, exc.reason, entity_id=entity_id) from exc

    # ---------- decks ----------

    async def create_deck(self, name: str, now: int) -> Deck:
        deck = Deck(name=DeckValidators.validate_deck_name(name), created_at=now)
        async with self._transaction("create_deck") as uow:
            deck = await uow.deck_repo.create(deck)
            await uow.commit()
        self._log.info("deck.created", deck_id=deck.id)
        return deck

    async def get_deck(self, deck_id: int) -> Optional[Deck]:
        async with self._transaction("get_deck", deck_id) as uow:
            return await uow.deck_repo.get_by_id(deck_id)

    async def list_decks(self) -> List[Deck]:
        async with self._transaction("list_decks") as uow:
            return await uow.deck_repo.list_all()

    async def delete_deck(self, deck_id: int) -> None:
        """Delete a deck and all of its cards in a single transaction."""
        async with self._transaction("delete_deck", deck_id) as uow:
            if await uow.deck_repo.get_by_id(deck_id) is None:
                raise DeckNotFoundError(deck_id)

            removed = await uow.card_repo.delete_by_deck(deck_id)
            await uow.deck_repo.delete(deck_id)
            await uow.commit()

        self._log.info("deck.deleted", deck_id=deck_id, cards_removed=removed)

    # ---------- cards ----------

    async def add_cards(
        self, deck_id: int, images: Sequence[bytes], now: int
    ) -> List[Card]:
        """Create one fresh card per front image, all sharing created_at."""
        fronts = [CardValidators.validate_front_image(image) for image in images]
        cards = [Card.new(deck_id, front, now) for front in fronts]

        async with self._transaction("add_cards", deck_id) as uow:
            if await uow.deck_repo.get_by_id(deck_id) is None:
                raise DeckNotFoundError(deck_id)
            if cards:
                cards = await uow.card_repo.create_many(cards)
            await uow.commit()

        self._log.info("cards.added", deck_id=deck_id, count=len(cards))
        return cards

    async def assign_back_images(self, deck_id: int, images: Sequence[bytes]) -> int:
        """
        Pair back images with the deck's cards, oldest card first.

        Images beyond the card count are discarded; cards beyond the image
        count are left unchanged. Returns how many cards were assigned.
        """
        backs = [CardValidators.validate_back_image(image) for image in images]

        async with self._transaction("assign_back_images", deck_id) as uow:
            if await uow.deck_repo.get_by_id(deck_id) is None:
                raise DeckNotFoundError(deck_id)

            ordered = await uow.card_repo.list_by_deck(deck_id)
            assigned = min(len(ordered), len(backs))
            for card, back in zip(ordered[:assigned], backs[:assigned]):
                await uow.card_repo.set_back_image(card.id, back)
            await uow.commit()

        self._log.info(
            "cards.back_assigned",
            deck_id=deck_id,
            assigned=assigned,
            discarded=len(backs) - assigned,
        )
        return assigned

    async def delete_card(self, card_id: int) -> None:
        async with self._transaction("delete_card", card_id) as uow:
            deleted = await uow.card_repo.delete(card_id)
            await uow.commit()

        if not deleted:
            self._log.info("card.delete.absent", card_id=card_id)

    async def get_card(self, card_id: int) -> Optional[Card]:
        async with self._transaction("get_card", card_id) as uow:
            return await uow.card_repo.get_by_id(card_id)

    async def list_cards_by_deck(self, deck_id: int) -> List[Card]:
        async with self._transaction("list_cards_by_deck", deck_id) as uow:
            return await uow.card_repo.list_by_deck(deck_id)

    async def list_all_cards(self) -> List[Card]:
        async with self._transaction("list_all_cards") as uow:
            return await uow.card_repo.list_all()

    async def list_due_cards(self, now: int, deck_id: Optional[int] = None) -> List[Card]:
        async with self._transaction("list_due_cards", deck_id) as uow:
            return await uow.card_repo.list_due(now, deck_id)

    async def count_cards(self, deck_id: Optional[int] = None) -> int:
        async with self._transaction("count_cards", deck_id) as uow:
            return await uow.card_repo.count(deck_id)

    async def record_review(
        self, card_id: int, now: int, updated_interval: int, updated_due_at: int
    ) -> None:
        interval = CardValidators.validate_interval_days(updated_interval)

        async with self._transaction("record_review", card_id) as uow:
            updated = await uow.card_repo.record_review(
                card_id, now, interval, updated_due_at
            )
            if not updated:
                raise CardNotFoundError(card_id)
            await uow.commit()
