"""
Card import: runs raw images through the image codec before storing them.
"""

from typing import List, Optional, Sequence

from flashcards.application.clock import now_ms
from flashcards.application.ports import ImageCodecPort
from flashcards.application.record_store import RecordStore
from flashcards.domain_core.entities.card import Card
from flashcards.infra.config.logging_config import bound_context, get_logger
from flashcards.infra.config.settings import Settings, get_settings


class CardImportService:
    def __init__(
        self,
        record_store: RecordStore,
        codec: ImageCodecPort,
        settings: Optional[Settings] = None,
    ):
        self.record_store = record_store
        self.codec = codec
        self.settings = settings or get_settings()
        self._log = get_logger("import")

    async def _normalize_all(self, raw_images: Sequence[bytes]) -> List[bytes]:
        return [
            await self.codec.normalize(
                raw, self.settings.image_max_side, self.settings.image_quality
            )
            for raw in raw_images
        ]

    async def import_front_images(
        self, deck_id: int, raw_images: Sequence[bytes], now: Optional[int] = None
    ) -> List[Card]:
        """Create one card per raw image, in the order given."""
        with bound_context(deck_id=deck_id):
            fronts = await self._normalize_all(raw_images)
            cards = await self.record_store.add_cards(
                deck_id, fronts, now_ms() if now is None else now
            )
            self._log.info("import.front", count=len(cards))
        return cards

    async def assign_back_images(self, deck_id: int, raw_images: Sequence[bytes]) -> int:
        """Assign back images to the deck's cards, oldest card first."""
        with bound_context(deck_id=deck_id):
            # Images past the card count would be discarded, so skip encoding them
            card_count = await self.record_store.count_cards(deck_id)
            backs = await self._normalize_all(list(raw_images)[:card_count])
            assigned = await self.record_store.assign_back_images(deck_id, backs)
            self._log.info(
                "import.back", assigned=assigned, supplied=len(raw_images)
            )
        return assigned
