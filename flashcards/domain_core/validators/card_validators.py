"""
Domain validators for card-related business rules.
"""

from flashcards.domain_core.entities.card import (
    MAX_INTERVAL_DAYS,
    MIN_INTERVAL_DAYS,
    Card,
    EncodedImage,
)
from flashcards.domain_core.exceptions import ValidationError


class CardValidators:
    @staticmethod
    def is_reviewable(card: Card) -> bool:
        """A card can be reviewed only once it has a non-empty front image."""
        return bool(card.front_image)

    @staticmethod
    def validate_front_image(image: EncodedImage) -> bytes:
        if image is None:
            raise ValidationError("Card front image is required", field="front_image")
        if not isinstance(image, (bytes, bytearray, memoryview)):
            raise ValidationError(
                "Card front image must be encoded bytes", field="front_image"
            )
        if len(image) == 0:
            raise ValidationError("Card front image cannot be empty", field="front_image")
        return bytes(image)

    @staticmethod
    def validate_back_image(image: EncodedImage) -> EncodedImage:
        if image is None:
            return None
        if not isinstance(image, (bytes, bytearray, memoryview)) or len(image) == 0:
            raise ValidationError(
                "Card back image must be non-empty encoded bytes", field="back_image"
            )
        return bytes(image)

    @staticmethod
    def validate_interval_days(days: int) -> int:
        if isinstance(days, bool) or not isinstance(days, int):
            raise ValidationError("Interval must be a whole number of days", field="interval_days")
        if not MIN_INTERVAL_DAYS <= days <= MAX_INTERVAL_DAYS:
            raise ValidationError(
                f"Interval must be between {MIN_INTERVAL_DAYS} and {MAX_INTERVAL_DAYS} days",
                field="interval_days",
            )
        return days


is_reviewable = CardValidators.is_reviewable
