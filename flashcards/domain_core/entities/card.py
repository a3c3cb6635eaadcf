"""
Card domain entity with core review rules.
"""

from dataclasses import dataclass
from typing import Optional

# Normalized image bytes produced by the image codec, or None when absent.
EncodedImage = Optional[bytes]

MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 365
DAY_MS = 86_400_000


@dataclass
class Card:
    deck_id: int
    front_image: EncodedImage
    created_at: int
    due_at: int
    back_image: EncodedImage = None
    interval_days: int = MIN_INTERVAL_DAYS
    last_seen_at: int = 0
    id: Optional[int] = None

    @classmethod
    def new(cls, deck_id: int, front_image: bytes, now: int) -> "Card":
        """Business rule: fresh cards start at the minimum interval, never seen."""
        return cls(
            deck_id=deck_id,
            front_image=front_image,
            created_at=now,
            due_at=now + MIN_INTERVAL_DAYS * DAY_MS,
            interval_days=MIN_INTERVAL_DAYS,
            last_seen_at=0,
        )

    @property
    def has_back(self) -> bool:
        return bool(self.back_image)

    @property
    def never_seen(self) -> bool:
        return not self.last_seen_at

    def is_due(self, now: int) -> bool:
        return self.due_at <= now
