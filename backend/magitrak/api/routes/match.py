"""Match Routes — HTTP surface for creating, reading, listing and deleting matches.

Invariants:
    - Routes contain no business logic: parse → MatchHandlers → typed response
    - Request bodies validated by Pydantic before the handler runs (400 on malformed input)
    - Every route passes the resolved Identity (or None) explicitly to the handler
"""

from fastapi import APIRouter, Depends

from magitrak.api.dependencies import get_identity, get_match_handlers
from magitrak.core.domain_types import Identity, MatchId
from magitrak.schemas.match import (
    MatchCreate, MatchCreatedResponse, MatchResponse,
)
from magitrak.services.handle_match import MatchHandlers

router = APIRouter(prefix="/api/v1/match", tags=["match"])


@router.post("", response_model=MatchCreatedResponse)
async def create_match(
    body: MatchCreate,
    identity: Identity | None = Depends(get_identity),
    handlers: MatchHandlers = Depends(get_match_handlers),
):
    """Store a new match for the session owner."""
    match_id = await handlers.create(identity, body.to_record())
    return MatchCreatedResponse(match_id=match_id)


@router.get("", response_model=list[MatchResponse])
async def list_matches(
    identity: Identity | None = Depends(get_identity),
    handlers: MatchHandlers = Depends(get_match_handlers),
):
    """All matches owned by the session, newest first."""
    records = await handlers.list_all(identity)
    return [MatchResponse.from_record(r) for r in records]


@router.get("/{match_id}", response_model=MatchResponse)
async def get_match(
    match_id: str,
    identity: Identity | None = Depends(get_identity),
    handlers: MatchHandlers = Depends(get_match_handlers),
):
    record = await handlers.get_one(identity, MatchId(match_id))
    return MatchResponse.from_record(record)


@router.delete("/{match_id}", response_model=str)
async def delete_match(
    match_id: str,
    identity: Identity | None = Depends(get_identity),
    handlers: MatchHandlers = Depends(get_match_handlers),
):
    """Delete a match owned by the session."""
    return await handlers.delete(identity, MatchId(match_id))
