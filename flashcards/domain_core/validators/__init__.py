"""Domain validators exports."""

from .card_validators import CardValidators, is_reviewable
from .deck_validators import DeckValidators, validate_deck_name

__all__ = ["CardValidators", "DeckValidators", "is_reviewable", "validate_deck_name"]
