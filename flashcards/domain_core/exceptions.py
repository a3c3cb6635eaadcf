from typing import Optional


class FlashcardsError(Exception):
    pass


class ValidationError(FlashcardsError, ValueError):
    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(FlashcardsError):
    entity = "Record"

    def __init__(self, entity_id: int) -> None:
        super().__init__(f"{self.entity} with ID {entity_id} not found")
        self.entity_id = entity_id


class DeckNotFoundError(NotFoundError):
    entity = "Deck"


class CardNotFoundError(NotFoundError):
    entity = "Card"


class StorageError(FlashcardsError):
    def __init__(
        self, operation: str, reason: str, entity_id: Optional[int] = None
    ) -> None:
        target = f" on {entity_id}" if entity_id is not None else ""
        super().__init__(f"Storage failure during {operation}{target}: {reason}")
        self.operation = operation
        self.reason = reason
        self.entity_id = entity_id
