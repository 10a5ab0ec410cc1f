"""Match Validation — field completeness checks before persistence.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every failing field is reported, not just the first
    - date is unset when None or equal to the zero timestamp

Design Decisions:
    - find_missing_fields returns a list, validate_match raises: callers that only
      need the check (tests, future batch import) avoid exception handling
"""

from datetime import datetime, timezone

from magitrak.core.domain_types import MatchRecord, ZERO_TIMESTAMP
from magitrak.core.errors import MatchValidationError, ErrorContext


def is_unset_date(value: datetime | None) -> bool:
    if value is None:
        return True
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value == ZERO_TIMESTAMP


def find_missing_fields(record: MatchRecord) -> list[str]:
    """Return wire names of required fields that are missing or empty."""
    missing = []
    if is_unset_date(record.date):
        missing.append("date")
    if not record.player_deck or not record.player_deck.strip():
        missing.append("playerDeck")
    if not record.opponent_deck or not record.opponent_deck.strip():
        missing.append("opponentDeck")
    return missing


def validate_match(record: MatchRecord) -> None:
    """Raise MatchValidationError naming every incomplete field."""
    missing = find_missing_fields(record)
    if missing:
        raise MatchValidationError(
            missing, ErrorContext(owner_id=record.owner_id),
        )
