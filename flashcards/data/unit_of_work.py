"""
Unit of Work pattern implementation for transaction boundaries.

Each unit owns one AsyncSession, so every adapter call runs in its own
transaction and nothing is cached between calls.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashcards.application.ports import UnitOfWorkPort
from flashcards.data.repositories.card_repository import CardRepository
from flashcards.data.repositories.deck_repository import DeckRepository
from flashcards.domain_core.exceptions import StorageError
from flashcards.infra.config.logging_config import get_logger


class SqlAlchemyUnitOfWork(UnitOfWorkPort):
    """
    Unit of Work backed by a SQLAlchemy async session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._committed = False
        self._log = get_logger("uow")

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        """Open a session and begin the transaction."""
        self.session = self._session_factory()
        self._committed = False
        try:
            await self.session.begin()
        except SQLAlchemyError as exc:
            await self.session.close()
            raise StorageError("begin", str(exc)) from exc
        self.deck_repo = DeckRepository(self.session)
        self.card_repo = CardRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back anything not committed, then release the session."""
        try:
            if exc_type is not None or not self._committed:
                await self.rollback()
        finally:
            await self.session.close()
            self.session = None

        if exc_val is not None and isinstance(exc_val, SQLAlchemyError):
            self._log.error("uow.store_failure", error=str(exc_val))
            raise StorageError("transaction", str(exc_val)) from exc_val

    async def commit(self) -> None:
        """
        Commit the transaction.

        This makes all changes within the transaction permanent.
        """
        await self.session.commit()
        self._committed = True

    async def rollback(self) -> None:
        """
        Rollback the transaction.

        This discards all changes made within the transaction.
        """
        await self.session.rollback()

    @property
    def is_committed(self) -> bool:
        """Check if the transaction has been committed."""
        return self._committed
