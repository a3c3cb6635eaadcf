"""
Card repository for data access operations.
"""

from typing import List, Optional, Sequence

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flashcards.application.ports import CardRepositoryPort
from flashcards.data.models.card_model import CardModel
from flashcards.domain_core.entities.card import Card
from flashcards.infra.config.logging_config import get_logger


class CardRepository(CardRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.card")

    async def create_many(self, cards: Sequence[Card]) -> List[Card]:
        """Insert cards in the given order and fill in their IDs."""
        models = [
            CardModel(
                deck_id=card.deck_id,
                front_image=card.front_image,
                back_image=card.back_image,
                interval_days=card.interval_days,
                due_at=card.due_at,
                created_at=card.created_at,
                last_seen_at=card.last_seen_at,
            )
            for card in cards
        ]
        # Add one by one so autoincrement IDs follow the input order
        for model in models:
            self.session.add(model)
            await self.session.flush()

        for card, model in zip(cards, models):
            card.id = model.id

        if cards:
            self._log.info("card.create_many", deck_id=cards[0].deck_id, count=len(cards))
        return list(cards)

    async def get_by_id(self, card_id: int) -> Optional[Card]:
        result = await self.session.execute(
            select(CardModel).where(CardModel.id == card_id)
        )
        card_model = result.scalar_one_or_none()
        if not card_model:
            self._log.info("card.get.not_found", card_id=card_id)
            return None
        return self._to_entity(card_model)

    async def list_by_deck(self, deck_id: int) -> List[Card]:
        """Get all cards of a deck, oldest first."""
        result = await self.session.execute(
            select(CardModel)
            .where(CardModel.deck_id == deck_id)
            .order_by(CardModel.created_at, CardModel.id)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("card.list", deck_id=deck_id, count=len(items))
        return items

    async def list_all(self) -> List[Card]:
        """Get every card in the collection, oldest first."""
        result = await self.session.execute(
            select(CardModel).order_by(CardModel.created_at, CardModel.id)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("card.list_all", count=len(items))
        return items

    async def list_due(self, now: int, deck_id: Optional[int] = None) -> List[Card]:
        """Get cards whose due time has passed, earliest due first."""
        query = select(CardModel).where(CardModel.due_at <= now)
        if deck_id is not None:
            query = query.where(CardModel.deck_id == deck_id)
        result = await self.session.execute(
            query.order_by(CardModel.due_at, CardModel.id)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("card.list_due", deck_id=deck_id, count=len(items))
        return items

    async def count(self, deck_id: Optional[int] = None) -> int:
        query = select(func.count(CardModel.id))
        if deck_id is not None:
            query = query.where(CardModel.deck_id == deck_id)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def set_back_image(self, card_id: int, back_image: bytes) -> bool:
        result = await self.session.execute(
            update(CardModel)
            .where(CardModel.id == card_id)
            .values(back_image=back_image)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def record_review(
        self, card_id: int, now: int, interval_days: int, due_at: int
    ) -> bool:
        """Write review results in one statement; last_seen_at never moves back."""
        result = await self.session.execute(
            update(CardModel)
            .where(CardModel.id == card_id)
            .values(
                last_seen_at=case(
                    (CardModel.last_seen_at > now, CardModel.last_seen_at),
                    else_=now,
                ),
                interval_days=interval_days,
                due_at=due_at,
            )
            .execution_options(synchronize_session=False)
        )
        updated = result.rowcount > 0
        self._log.info(
            "card.record_review",
            card_id=card_id,
            interval_days=interval_days,
            updated=updated,
        )
        return updated

    async def delete(self, card_id: int) -> bool:
        result = await self.session.execute(
            delete(CardModel).where(CardModel.id == card_id)
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount > 0
        self._log.info("card.delete", card_id=card_id, deleted=deleted)
        return deleted

    async def delete_by_deck(self, deck_id: int) -> int:
        result = await self.session.execute(
            delete(CardModel).where(CardModel.deck_id == deck_id)
            .execution_options(synchronize_session=False)
        )
        self._log.info("card.delete_by_deck", deck_id=deck_id, count=result.rowcount)
        return result.rowcount

    def _to_entity(self, model: CardModel) -> Card:
        """Convert SQLAlchemy model to domain entity."""
        return Card(
            id=model.id,
            deck_id=model.deck_id,
            front_image=model.front_image,
            back_image=model.back_image,
            interval_days=model.interval_days,
            due_at=model.due_at,
            created_at=model.created_at,
            last_seen_at=model.last_seen_at or 0,
        )
