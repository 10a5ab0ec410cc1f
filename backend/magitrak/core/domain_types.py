"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MatchId wraps the opaque store-assigned string — never minted by callers
    - OwnerId wraps the integer user identity
    - Identity is the resolved session value; absence is modelled as None, never a sentinel id
    - MatchRecord is immutable once built (frozen dataclass)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - MatchRecord as frozen dataclass: core stays independent of Pydantic and SQLAlchemy
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MatchId = NewType("MatchId", str)
OwnerId = NewType("OwnerId", int)


# ─── Value Types ─────────────────────────────────────────────────

# Zero timestamp emitted by clients that serialize an unset date
ZERO_TIMESTAMP = datetime(1, 1, 1, tzinfo=timezone.utc)

DELETE_ACKNOWLEDGEMENT = "delete success!"

# Owner ids are stored as signed 64-bit integers
OWNER_ID_MIN = -(2**63)
OWNER_ID_MAX = 2**63 - 1


@dataclass(frozen=True)
class Identity:
    """Authenticated session identity."""
    owner_id: OwnerId


@dataclass(frozen=True)
class MatchRecord:
    """One played game, owned by exactly one user."""
    owner_id: OwnerId
    date: datetime | None
    player_deck: str
    opponent_deck: str
    win: bool = False
    reason: str = ""
    used_sideboard: bool = False
    played_first: bool = False
    starting_hand_size: int = 0
    lands_in_opener: int = 0
    opponent_name: str = ""
    notes: str = ""
    id: MatchId | None = None

    def with_id(self, match_id: MatchId) -> "MatchRecord":
        """Copy of this record carrying the store-assigned id."""
        return replace(self, id=match_id)
