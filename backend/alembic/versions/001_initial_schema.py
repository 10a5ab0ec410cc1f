"""Initial schema — matches.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "matches",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("owner_id", sa.BigInteger, nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("player_deck", sa.Text, nullable=False),
        sa.Column("opponent_deck", sa.Text, nullable=False),
        sa.Column("win", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("reason", sa.Text, nullable=False, server_default=""),
        sa.Column("used_sideboard", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("played_first", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("starting_hand_size", sa.Integer, nullable=False, server_default="0"),
        sa.Column("lands_in_opener", sa.Integer, nullable=False, server_default="0"),
        sa.Column("opponent_name", sa.Text, nullable=False, server_default=""),
        sa.Column("notes", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_matches_owner_id", "matches", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_matches_owner_id", table_name="matches")
    op.drop_table("matches")
