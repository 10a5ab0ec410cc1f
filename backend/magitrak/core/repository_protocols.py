"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - fetch_by_id returns None for "not found"; every other failure raises
      StoreFailureError, so callers can tell the two apart without string matching
"""

from typing import Protocol

from magitrak.core.domain_types import Identity, MatchId, MatchRecord, OwnerId


class MatchRepository(Protocol):
    """Contract for match record persistence — implemented by shell."""
    async def create(self, record: MatchRecord) -> MatchId: ...
    async def fetch_by_id(self, match_id: MatchId) -> MatchRecord | None: ...
    async def delete_by_id(self, match_id: MatchId) -> bool: ...
    async def list_by_owner(self, owner_id: OwnerId) -> list[MatchRecord]: ...


class SessionProvider(Protocol):
    """Contract for resolving an inbound request to an identity."""
    def resolve_identity(self, request: object) -> Identity | None: ...
