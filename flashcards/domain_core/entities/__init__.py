"""Domain entities exports."""

from .card import Card, EncodedImage
from .deck import Deck

__all__ = ["Card", "Deck", "EncodedImage"]
