"""
SQLAlchemy ORM model for the 'submissions' table.
"""

from sqlalchemy import BigInteger, Column, Index, Text, String
from sqlalchemy import TIMESTAMP

from .base import Base


class SubmissionORM(Base):
    """
    SQLAlchemy ORM model representing one visitor's word for the current day.

    Attributes:
        id (int): Primary key, auto-incrementing.
        word (str): Canonical emotion key, lowercase letters only.
        identity_hash (str): Day-salted SHA-256 of the caller's network address.
        device_token (str, optional): Client-supplied device identifier.
        created_at (datetime): Creation instant; never changed by edits.
        expires_at (datetime): Instant after which the record is no longer active.
        updated_at (datetime, optional): Instant of the last in-place edit.
    """
    __tablename__ = "submissions"

    id = Column(BigInteger, primary_key=True, autoincrement=True, comment="Surrogate key.")
    word = Column(String(20), nullable=False, comment="Canonical emotion key.")
    identity_hash = Column(String(64), nullable=False, comment="Day-salted hash of the caller's network address.")
    device_token = Column(Text, nullable=True, comment="Optional client-supplied device identifier.")
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, comment="Creation instant, immutable.")
    expires_at = Column(TIMESTAMP(timezone=True), nullable=False, comment="Expiry instant (created_at + retention).")
    updated_at = Column(TIMESTAMP(timezone=True), nullable=True, comment="Last in-place edit.")

    __table_args__ = (
        # One record per identity hash; the hash itself rotates daily.
        Index("uq_submissions_identity_hash", "identity_hash", unique=True),
        Index("idx_submissions_identity_device", "identity_hash", "device_token"),
        Index("idx_submissions_device_token", "device_token"),
        Index("idx_submissions_expires_at", "expires_at"),
        Index("idx_submissions_word_expires_at", "word", "expires_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<SubmissionORM(id={self.id}, word='{self.word}', "
            f"identity_hash='{(self.identity_hash or '')[:8]}...', created_at='{self.created_at}')>"
        )
