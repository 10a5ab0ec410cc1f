"""Ownership Authorization — compares record ownership against the session identity.

Invariants:
    - Pure equality on owner ids, no IO
    - Mismatch always raises OwnershipMismatchError (400), both at creation and at read/delete
"""

from magitrak.core.domain_types import MatchId, OwnerId
from magitrak.core.errors import OwnershipMismatchError, ErrorContext


def is_owner(session_owner_id: OwnerId, record_owner_id: OwnerId) -> bool:
    return session_owner_id == record_owner_id


def authorize_owner(
    session_owner_id: OwnerId,
    record_owner_id: OwnerId,
    match_id: MatchId | None = None,
) -> None:
    """Raise OwnershipMismatchError unless the session owns the record."""
    if not is_owner(session_owner_id, record_owner_id):
        raise OwnershipMismatchError(
            ErrorContext(owner_id=session_owner_id, match_id=match_id),
        )
