"""
SQLAlchemy model for Deck entity.
"""

from sqlalchemy import BigInteger, Column, Integer, String
from sqlalchemy.orm import relationship

from flashcards.data.models.base import Base


class DeckModel(Base):
    __tablename__ = "decks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    created_at = Column(BigInteger, nullable=False, index=True)

    # Relationships
    cards = relationship(
        "CardModel",
        back_populates="deck",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<DeckModel(id={self.id}, name='{self.name}')>"
