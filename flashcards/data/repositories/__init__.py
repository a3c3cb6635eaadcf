"""Repository exports."""

from .card_repository import CardRepository
from .deck_repository import DeckRepository

__all__ = ["CardRepository", "DeckRepository"]
