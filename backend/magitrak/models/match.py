"""Match ORM — persists one played game per row.

Invariants:
    - id is an opaque 32-char hex string assigned by the repository, never by clients
    - owner_id is indexed: list-by-owner is the only non-key query
    - date stored in UTC; SQLite drops tzinfo, so readers re-attach UTC
    - Column widths cover every value schemas/match.py admits (BIGINT owner, TEXT names)

Design Decisions:
    - String id over UUID column: the id is opaque on the wire and in the domain
    - Nullable-free columns with defaults: mirrors MatchRecord, no tri-state booleans
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import BigInteger, String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from magitrak.db.base import Base


def new_match_id() -> str:
    return uuid.uuid4().hex


class Match(Base):
    """One competitive-game match outcome owned by a single user."""
    __tablename__ = "matches"

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=new_match_id,
    )
    owner_id: Mapped[int] = mapped_column(
        BigInteger, nullable=False, index=True,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    player_deck: Mapped[str] = mapped_column(Text, nullable=False)
    opponent_deck: Mapped[str] = mapped_column(Text, nullable=False)
    win: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False, default="")
    used_sideboard: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    played_first: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    starting_hand_size: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    lands_in_opener: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    opponent_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
