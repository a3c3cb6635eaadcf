"""
Domain validators for deck-related business rules.
"""

from flashcards.domain_core.exceptions import ValidationError


class DeckValidators:
    @staticmethod
    def validate_deck_name(name: str) -> str:
        """Return the trimmed deck name, rejecting empty or blank input."""
        if name is None or not isinstance(name, str):
            raise ValidationError("Deck name must be text", field="name")

        trimmed = name.strip()
        if not trimmed:
            raise ValidationError("Deck name cannot be empty", field="name")

        return trimmed


validate_deck_name = DeckValidators.validate_deck_name
