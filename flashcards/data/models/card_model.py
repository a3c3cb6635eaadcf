"""
SQLAlchemy model for Card entity.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Integer,
    LargeBinary,
)
from sqlalchemy.orm import relationship

from flashcards.data.models.base import Base


class CardModel(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    deck_id = Column(
        Integer,
        ForeignKey("decks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    front_image = Column(LargeBinary, nullable=False)
    back_image = Column(LargeBinary, nullable=True)
    interval_days = Column(Integer, nullable=False, default=1)
    due_at = Column(BigInteger, nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False, index=True)
    last_seen_at = Column(BigInteger, nullable=False, default=0, index=True)

    deck = relationship("DeckModel", back_populates="cards")

    __table_args__ = (
        CheckConstraint(
            "interval_days BETWEEN 1 AND 365", name="ck_cards_interval_days"
        ),
    )

    def __repr__(self) -> str:
        return f"<CardModel(id={self.id}, deck_id={self.deck_id}, interval={self.interval_days})>"
