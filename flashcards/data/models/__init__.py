"""SQLAlchemy model exports."""

from .base import Base
from .card_model import CardModel
from .deck_model import DeckModel

__all__ = ["Base", "CardModel", "DeckModel"]
