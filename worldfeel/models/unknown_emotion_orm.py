"""
SQLAlchemy ORM model for the 'unknown_emotions' table.
"""

from sqlalchemy import BigInteger, CheckConstraint, Column, Index, Integer, String
from sqlalchemy import TIMESTAMP
from sqlalchemy.sql import func

from .base import Base


class UnknownEmotionORM(Base):
    """
    Words that reached the color lookup without a mapping, kept for curation.

    Attributes:
        id (int): Primary key, auto-incrementing.
        word (str): The lowercased word, unique.
        count (int): Number of times the word was seen.
        first_seen_at (datetime): First sighting.
        last_seen_at (datetime): Most recent sighting.
    """
    __tablename__ = "unknown_emotions"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    word = Column(String(50), nullable=False)
    count = Column(Integer, nullable=False, default=1)
    first_seen_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    last_seen_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("uq_unknown_emotions_word", "word", unique=True),
        Index("idx_unknown_emotions_last_seen_at", "last_seen_at"),
        CheckConstraint("count >= 1", name="ck_unknown_emotions_count_positive"),
    )

    def __repr__(self) -> str:
        return f"<UnknownEmotionORM(word='{self.word}', count={self.count})>"
