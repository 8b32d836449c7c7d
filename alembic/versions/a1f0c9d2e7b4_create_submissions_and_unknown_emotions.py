"""create submissions and unknown_emotions tables

Revision ID: a1f0c9d2e7b4
Revises:
Create Date: 2025-08-18 10:12:00.000000

Reads filter on `expires_at`, and the expiry sweeper deletes by it, so both
tables get the indexes those queries need. The unique index on
`identity_hash` serialises concurrent first submissions from one identity.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1f0c9d2e7b4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "submissions",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False, comment="Surrogate key."),
        sa.Column("word", sa.String(length=20), nullable=False, comment="Canonical emotion key."),
        sa.Column("identity_hash", sa.String(length=64), nullable=False, comment="Day-salted hash of the caller's network address."),
        sa.Column("device_token", sa.Text(), nullable=True, comment="Optional client-supplied device identifier."),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False, comment="Creation instant, immutable."),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False, comment="Expiry instant (created_at + retention)."),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True, comment="Last in-place edit."),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("uq_submissions_identity_hash", "submissions", ["identity_hash"], unique=True)
    op.create_index("idx_submissions_identity_device", "submissions", ["identity_hash", "device_token"])
    op.create_index("idx_submissions_device_token", "submissions", ["device_token"])
    op.create_index("idx_submissions_expires_at", "submissions", ["expires_at"])
    op.create_index("idx_submissions_word_expires_at", "submissions", ["word", "expires_at"])

    op.create_table(
        "unknown_emotions",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("word", sa.String(length=50), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("first_seen_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("last_seen_at", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("count >= 1", name="ck_unknown_emotions_count_positive"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("uq_unknown_emotions_word", "unknown_emotions", ["word"], unique=True)
    op.create_index("idx_unknown_emotions_last_seen_at", "unknown_emotions", ["last_seen_at"])


def downgrade() -> None:
    op.drop_index("idx_unknown_emotions_last_seen_at", table_name="unknown_emotions")
    op.drop_index("uq_unknown_emotions_word", table_name="unknown_emotions")
    op.drop_table("unknown_emotions")

    op.drop_index("idx_submissions_word_expires_at", table_name="submissions")
    op.drop_index("idx_submissions_expires_at", table_name="submissions")
    op.drop_index("idx_submissions_device_token", table_name="submissions")
    op.drop_index("idx_submissions_identity_device", table_name="submissions")
    op.drop_index("uq_submissions_identity_hash", table_name="submissions")
    op.drop_table("submissions")
