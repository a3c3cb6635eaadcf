"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from the durable record store and the image codec.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from flashcards.domain_core.entities.card import Card
from flashcards.domain_core.entities.deck import Deck


class DeckRepositoryPort(ABC):
    """Abstract repository interface for Deck operations."""

    @abstractmethod
    async def create(self, deck: Deck) -> Deck:
        """Create a new deck and assign its ID."""
        pass

    @abstractmethod
    async def get_by_id(self, deck_id: int) -> Optional[Deck]:
        """Get deck by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Deck]:
        """Get all decks, newest first."""
        pass

    @abstractmethod
    async def delete(self, deck_id: int) -> bool:
        """Delete a deck."""
        pass


class CardRepositoryPort(ABC):
    """Abstract repository interface for Card operations."""

    @abstractmethod
    async def create_many(self, cards: Sequence[Card]) -> List[Card]:
        """Insert cards in order and assign their IDs."""
        pass

    @abstractmethod
    async def get_by_id(self, card_id: int) -> Optional[Card]:
        """Get card by ID."""
        pass

    @abstractmethod
    async def list_by_deck(self, deck_id: int) -> List[Card]:
        """Get all cards of a deck ordered by created_at, then ID."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Card]:
        """Get all cards ordered by created_at, then ID."""
        pass

    @abstractmethod
    async def list_due(self, now: int, deck_id: Optional[int] = None) -> List[Card]:
        """Get cards with due_at <= now, earliest due first."""
        pass

    @abstractmethod
    async def count(self, deck_id: Optional[int] = None) -> int:
        """Count cards, optionally within one deck."""
        pass

    @abstractmethod
    async def set_back_image(self, card_id: int, back_image: bytes) -> bool:
        """Set a card's back image."""
        pass

    @abstractmethod
    async def record_review(
        self, card_id: int, now: int, interval_days: int, due_at: int
    ) -> bool:
        """Write review results; last_seen_at becomes max(last_seen_at, now)."""
        pass

    @abstractmethod
    async def delete(self, card_id: int) -> bool:
        """Delete a card."""
        pass

    @abstractmethod
    async def delete_by_deck(self, deck_id: int) -> int:
        """Delete every card of a deck."""
        pass


class UnitOfWorkPort(ABC):
    """
    One store transaction with access to the repositories inside it.

    Leaving the context without commit() rolls back. Store failures surface
    as StorageError.
    """

    deck_repo: DeckRepositoryPort
    card_repo: CardRepositoryPort

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWorkPort":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass


class ImageCodecPort(ABC):
    """Abstract interface for image normalization."""

    @abstractmethod
    async def normalize(self, raw_image: bytes, max_side: int, quality: float) -> bytes:
        """Decode, fit within max_side on the longer dimension, and re-encode."""
        pass
