"""Match Handlers — create, get_one, delete, list_all.

Invariants:
    - Every operation resolves the session first; None → UnauthenticatedError (401)
    - create: validate → authorize submitted owner → store create (exactly one write)
    - get_one/delete: fetch → NotFound if absent → authorize fetched owner
    - delete writes exactly once, and only after the ownership check passes
    - list_all is scoped by query to the session owner (no per-record check)
    - No retries; store failures propagate as StoreFailureError

Design Decisions:
    - Identity passed in explicitly, never read from ambient request state
    - Depends on the MatchRepository protocol only: tests run against an in-memory fake
    - Another owner's record answers OwnershipMismatchError (400), not 404: existing
      clients rely on it even though it discloses existence
"""

import logging

from magitrak.core.authorize_owner import authorize_owner
from magitrak.core.domain_types import (
    DELETE_ACKNOWLEDGEMENT, Identity, MatchId, MatchRecord, OwnerId,
)
from magitrak.core.errors import (
    ErrorContext, ResourceNotFoundError, StoreFailureError, UnauthenticatedError,
)
from magitrak.core.repository_protocols import MatchRepository
from magitrak.core.validate_match import validate_match

logger = logging.getLogger(__name__)


def require_identity(identity: Identity | None, operation: str) -> OwnerId:
    """Unwrap the session identity or raise UnauthenticatedError."""
    if identity is None:
        logger.debug(f"No valid session for match {operation} request")
        raise UnauthenticatedError()
    return identity.owner_id


class MatchHandlers:
    """Match pipeline orchestration over a MatchRepository."""

    def __init__(self, repository: MatchRepository):
        self.repository = repository

    async def create(
        self, identity: Identity | None, record: MatchRecord,
    ) -> MatchId:
        """Validate, authorize and store a new match. Returns the assigned id."""
        owner_id = require_identity(identity, "create")
        validate_match(record)
        authorize_owner(owner_id, record.owner_id)
        match_id = await self.repository.create(record)
        logger.info(
            "Match created",
            extra={"match_id": match_id, "owner_id": owner_id},
        )
        return match_id

    async def get_one(
        self, identity: Identity | None, match_id: MatchId,
    ) -> MatchRecord:
        owner_id = require_identity(identity, "get")
        return await self._fetch_owned(owner_id, match_id)

    async def delete(self, identity: Identity | None, match_id: MatchId) -> str:
        """Delete an owned match. Returns the literal acknowledgement."""
        owner_id = require_identity(identity, "delete")
        await self._fetch_owned(owner_id, match_id)
        if not await self.repository.delete_by_id(match_id):
            raise StoreFailureError(
                "no row removed", "delete",
                ErrorContext(owner_id=owner_id, match_id=match_id),
            )
        logger.info(
            "Match deleted",
            extra={"match_id": match_id, "owner_id": owner_id},
        )
        return DELETE_ACKNOWLEDGEMENT

    async def list_all(self, identity: Identity | None) -> list[MatchRecord]:
        owner_id = require_identity(identity, "list")
        return await self.repository.list_by_owner(owner_id)

    async def _fetch_owned(
        self, owner_id: OwnerId, match_id: MatchId,
    ) -> MatchRecord:
        record = await self.repository.fetch_by_id(match_id)
        if record is None:
            raise ResourceNotFoundError(
                "Match", match_id,
                ErrorContext(owner_id=owner_id, match_id=match_id),
            )
        authorize_owner(owner_id, record.owner_id, match_id)
        return record
