"""Match Schemas — Pydantic models for the match API boundary.

Invariants:
    - Wire names are camelCase (ownerId, playerDeck, ...); snake_case accepted on input
    - MatchCreate never carries an id: the store assigns it
    - Required-field completeness is NOT checked here — validate_match owns that rule,
      so an empty deck reaches the validator and is reported by field name
    - Dates leave this layer in UTC; naive timestamps are read as UTC, and an instant
      outside the representable UTC range is malformed input
    - Integers are bounded to their column width (owner id 64-bit, counts 32-bit)
    - A JSON null on a text field means "not sent" and becomes ""

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for the whole record
    - One response type per operation: created-id, record, list of records
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from magitrak.core.domain_types import (
    OWNER_ID_MAX, OWNER_ID_MIN, MatchId, MatchRecord, OwnerId,
)

OwnerIdField = Annotated[int, Field(ge=OWNER_ID_MIN, le=OWNER_ID_MAX)]
CountField = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class _MatchFields(BaseModel):
    """Shared match fields — camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    owner_id: OwnerIdField
    date: datetime | None = None
    player_deck: str = ""
    opponent_deck: str = ""
    win: bool = False
    reason: str = ""
    used_sideboard: bool = False
    played_first: bool = False
    starting_hand_size: CountField = 0
    lands_in_opener: CountField = 0
    opponent_name: str = ""
    notes: str = ""

    @field_validator(
        "player_deck", "opponent_deck", "reason", "opponent_name", "notes",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("date")
    @classmethod
    def to_utc(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        try:
            return v.astimezone(timezone.utc)
        except OverflowError:
            raise ValueError("date is outside the representable UTC range")


class MatchCreate(_MatchFields):
    """Match submission — body of POST /match."""

    def to_record(self) -> MatchRecord:
        return MatchRecord(
            owner_id=OwnerId(self.owner_id),
            date=self.date,
            player_deck=self.player_deck,
            opponent_deck=self.opponent_deck,
            win=self.win,
            reason=self.reason,
            used_sideboard=self.used_sideboard,
            played_first=self.played_first,
            starting_hand_size=self.starting_hand_size,
            lands_in_opener=self.lands_in_opener,
            opponent_name=self.opponent_name,
            notes=self.notes,
        )


class MatchResponse(_MatchFields):
    """Full stored match, including its id."""
    id: str

    @classmethod
    def from_record(cls, record: MatchRecord) -> "MatchResponse":
        return cls(
            id=record.id,
            owner_id=record.owner_id,
            date=record.date,
            player_deck=record.player_deck,
            opponent_deck=record.opponent_deck,
            win=record.win,
            reason=record.reason,
            used_sideboard=record.used_sideboard,
            played_first=record.played_first,
            starting_hand_size=record.starting_hand_size,
            lands_in_opener=record.lands_in_opener,
            opponent_name=record.opponent_name,
            notes=record.notes,
        )


class MatchCreatedResponse(BaseModel):
    """Create response — {"MatchId": "..."}."""
    model_config = ConfigDict(populate_by_name=True)

    match_id: MatchId = Field(alias="MatchId", min_length=1)
