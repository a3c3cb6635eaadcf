"""
Domain services - pure spacing policy.
"""

from .interval_scheduler import (
    ReviewOutcome,
    compute_due_at,
    next_interval,
    schedule_review,
)

__all__ = ["ReviewOutcome", "compute_due_at", "next_interval", "schedule_review"]
