"""
Database engine and session management for the durable record store.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from flashcards.data.models.base import Base
from flashcards.infra.config.logging_config import get_logger


class Database:
    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._log = get_logger("db")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    async def initialize(self) -> None:
        self._log.info("db.initialize", url=self.database_url)
        engine_kwargs = {"echo": self.echo, "future": True}
        if self.is_sqlite and ":memory:" in self.database_url:
            # A single shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self.engine = create_async_engine(self.database_url, **engine_kwargs)

        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_fks)

        self.async_session_maker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        self._log.info("db.initialized")

    async def create_schema(self) -> None:
        """Create the decks and cards tables if they do not exist."""
        if not self.engine:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self._log.info("db.schema_created")

    async def close(self) -> None:
        if self.engine:
            self._log.info("db.close")
            await self.engine.dispose()
            self.engine = None
            self.async_session_maker = None

    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if not self.async_session_maker:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self.async_session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.session_factory()() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def health_check(self) -> bool:
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            self._log.error("db.health_check_failed", error=str(e))
            return False


def _enable_sqlite_fks(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
