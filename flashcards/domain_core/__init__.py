"""
Domain core - deck/card entities, validation rules and the spacing policy.

Nothing in this package performs I/O or holds mutable state of its own.
"""

from .entities import Card, Deck, EncodedImage
from .exceptions import (
    CardNotFoundError,
    DeckNotFoundError,
    FlashcardsError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .validators import CardValidators, DeckValidators, is_reviewable, validate_deck_name

__all__ = [
    "Card",
    "Deck",
    "EncodedImage",
    "FlashcardsError",
    "ValidationError",
    "NotFoundError",
    "DeckNotFoundError",
    "CardNotFoundError",
    "StorageError",
    "CardValidators",
    "DeckValidators",
    "is_reviewable",
    "validate_deck_name",
]
