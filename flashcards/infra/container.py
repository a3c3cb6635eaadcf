"""Dependency injection container"""

import random
from typing import Optional

from flashcards.application.ports import ImageCodecPort
from flashcards.application.record_store import RecordStore
from flashcards.application.services.card_import import CardImportService
from flashcards.application.services.review_sampler import ReviewSampler
from flashcards.application.services.review_session import ReviewSession
from flashcards.data.unit_of_work import SqlAlchemyUnitOfWork
from flashcards.infra.config.logging_config import get_logger, setup_logging
from flashcards.infra.config.settings import Settings, get_settings
from flashcards.infra.database import Database


class Container:
    """Wires the record store, sampler and import service to one database."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        codec: Optional[ImageCodecPort] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self._codec = codec
        self._rng = rng
        self._database: Optional[Database] = None
        self._record_store: Optional[RecordStore] = None
        self._sampler: Optional[ReviewSampler] = None
        self._card_import: Optional[CardImportService] = None
        self._log = get_logger("container")

    async def startup(self) -> None:
        """Configure logging, open the database and make sure the schema exists."""
        setup_logging(self.settings)
        database = self.database()
        await database.initialize()
        await database.create_schema()
        self._log.info("container.started", environment=self.settings.environment)

    async def shutdown(self) -> None:
        if self._database is not None:
            await self._database.close()

    def database(self) -> Database:
        if self._database is None:
            self._database = Database(
                self.settings.database_url, echo=self.settings.debug_sql
            )
        return self._database

    def record_store(self) -> RecordStore:
        if self._record_store is None:
            database = self.database()
            self._record_store = RecordStore(
                lambda: SqlAlchemyUnitOfWork(database.session_factory())
            )
        return self._record_store

    def review_sampler(self) -> ReviewSampler:
        if self._sampler is None:
            self._sampler = ReviewSampler(self.record_store(), rng=self._rng)
        return self._sampler

    def card_import(self) -> CardImportService:
        if self._card_import is None:
            if self._codec is None:
                raise RuntimeError("No image codec configured for card import")
            self._card_import = CardImportService(
                self.record_store(), self._codec, self.settings
            )
        return self._card_import

    def review_session(
        self, requested_count: Optional[int] = None, deck_id: Optional[int] = None
    ) -> ReviewSession:
        count = (
            requested_count
            if requested_count is not None
            else self.settings.review_default_count
        )
        return ReviewSession(
            self.record_store(), self.review_sampler(), count, deck_id=deck_id
        )

    async def review_all_session(self, deck_id: Optional[int] = None) -> ReviewSession:
        """Session that queues every reviewable card in the deck, or in all decks."""
        return await ReviewSession.review_all(
            self.record_store(), self.review_sampler(), deck_id=deck_id
        )
