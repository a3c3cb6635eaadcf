"""
Application services for review sessions and card import.
"""

from .card_import import CardImportService
from .review_sampler import ReviewSampler, build_review_queue, pool_size_for
from .review_session import ReviewSession

__all__ = [
    "CardImportService",
    "ReviewSampler",
    "ReviewSession",
    "build_review_queue",
    "pool_size_for",
]
