"""
Deck repository for data access operations.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashcards.application.ports import DeckRepositoryPort
from flashcards.data.models.deck_model import DeckModel
from flashcards.domain_core.entities.deck import Deck
from flashcards.infra.config.logging_config import get_logger


class DeckRepository(DeckRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.deck")

    async def create(self, deck: Deck) -> Deck:
        """Create a new deck."""
        deck_model = DeckModel(name=deck.name, created_at=deck.created_at)

        self.session.add(deck_model)
        await self.session.flush()  # Get the ID without committing

        deck.id = deck_model.id
        self._log.info("deck.create", deck_id=deck.id)
        return deck

    async def get_by_id(self, deck_id: int) -> Optional[Deck]:
        """Get deck by ID."""
        result = await self.session.execute(
            select(DeckModel).where(DeckModel.id == deck_id)
        )
        deck_model = result.scalar_one_or_none()

        if not deck_model:
            self._log.info("deck.get.not_found", deck_id=deck_id)
            return None

        return self._to_entity(deck_model)

    async def list_all(self) -> List[Deck]:
        """Get all decks, newest first."""
        result = await self.session.execute(
            select(DeckModel).order_by(DeckModel.created_at.desc(), DeckModel.id.desc())
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("deck.list", count=len(items))
        return items

    async def delete(self, deck_id: int) -> bool:
        """Delete a deck."""
        result = await self.session.execute(
            delete(DeckModel).where(DeckModel.id == deck_id)
            .execution_options(synchronize_session=False)
        )
        deleted = result.rowcount > 0
        self._log.info("deck.delete", deck_id=deck_id, deleted=deleted)
        return deleted

    def _to_entity(self, model: DeckModel) -> Deck:
        """Convert SQLAlchemy model to domain entity."""
        return Deck(id=model.id, name=model.name, created_at=model.created_at)
