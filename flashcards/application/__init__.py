"""
Application layer - record store adapter and review orchestration.

This package coordinates domain entities and the durable record store to
build review queues, record review outcomes and import card images.
"""

from .ports import (
    CardRepositoryPort,
    DeckRepositoryPort,
    ImageCodecPort,
    UnitOfWorkPort,
)
from .record_store import RecordStore
from .services import CardImportService, ReviewSampler, ReviewSession

__all__ = [
    "CardRepositoryPort",
    "DeckRepositoryPort",
    "ImageCodecPort",
    "UnitOfWorkPort",
    "RecordStore",
    "CardImportService",
    "ReviewSampler",
    "ReviewSession",
]
