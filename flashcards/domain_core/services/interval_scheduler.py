"""
Interval scheduler: the entire spacing policy.

A successful recall doubles the interval (capped at one year); a lapse resets
it to one day. There are no ease factors or per-card difficulty.
"""

from dataclasses import dataclass

from flashcards.domain_core.entities.card import (
    DAY_MS,
    MAX_INTERVAL_DAYS,
    MIN_INTERVAL_DAYS,
    Card,
)


@dataclass(frozen=True)
class ReviewOutcome:
    card_id: int
    remembered: bool
    interval_days: int
    due_at: int
    last_seen_at: int


def next_interval(current_interval_days: int, remembered: bool) -> int:
    if not remembered:
        return MIN_INTERVAL_DAYS

    doubled = int(round(current_interval_days * 2))
    return min(max(doubled, MIN_INTERVAL_DAYS), MAX_INTERVAL_DAYS)


def compute_due_at(now_ms: int, interval_days: int) -> int:
    return now_ms + interval_days * DAY_MS


def schedule_review(card: Card, now_ms: int, remembered: bool) -> ReviewOutcome:
    """Compute the values a dismissal writes back, without touching the card."""
    interval = next_interval(card.interval_days, remembered)
    return ReviewOutcome(
        card_id=card.id,
        remembered=remembered,
        interval_days=interval,
        due_at=compute_due_at(now_ms, interval),
        last_seen_at=max(card.last_seen_at or 0, now_ms),
    )
