"""Global test configuration and fixtures."""

import os
import random

import pytest
import pytest_asyncio

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_FORMAT"] = "console"

from flashcards.application.record_store import RecordStore
from flashcards.application.services.review_sampler import ReviewSampler
from flashcards.data.unit_of_work import SqlAlchemyUnitOfWork
from flashcards.infra.config.settings import Settings
from flashcards.infra.database import Database
from tests._helpers.fakes import FakeImageCodec, FakeUnitOfWork, InMemoryBackend

T0 = 1_700_000_000_000


@pytest.fixture
def now() -> int:
    return T0


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        IMAGE_MAX_SIDE=1280,
        IMAGE_QUALITY=0.82,
        REVIEW_DEFAULT_COUNT=10,
    )


# Database fixtures
@pytest_asyncio.fixture
async def database():
    """In-memory SQLite database with the schema created."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.initialize()
    await db.create_schema()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def sql_store(database) -> RecordStore:
    return RecordStore(lambda: SqlAlchemyUnitOfWork(database.session_factory()))


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def memory_store(backend) -> RecordStore:
    return RecordStore(lambda: FakeUnitOfWork(backend))


@pytest_asyncio.fixture(params=["sqlite", "memory"])
async def store(request):
    """Record store backed by SQLite and by the in-memory fake in turn."""
    if request.param == "memory":
        backend = InMemoryBackend()
        yield RecordStore(lambda: FakeUnitOfWork(backend))
        return

    db = Database("sqlite+aiosqlite:///:memory:")
    await db.initialize()
    await db.create_schema()
    yield RecordStore(lambda: SqlAlchemyUnitOfWork(db.session_factory()))
    await db.close()


@pytest.fixture
def sampler(memory_store, rng) -> ReviewSampler:
    return ReviewSampler(memory_store, rng=rng)


@pytest.fixture
def codec() -> FakeImageCodec:
    return FakeImageCodec()


# ---------- PYTEST CONFIGURATION ----------


def pytest_configure(config):
    """Configure pytest with custom settings."""
    markers = [
        "unit: Unit tests (fast, isolated)",
        "integration: Integration tests (real SQLite database)",
    ]

    for marker in markers:
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
