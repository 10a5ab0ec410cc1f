"""Route Dependencies — session identity and match handler wiring.

Invariants:
    - get_identity never raises: absence is passed on as None, the handler decides
    - One SqlMatchRepository per request, bound to the request's AsyncSession
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from magitrak.config import get_settings
from magitrak.core.domain_types import Identity
from magitrak.core.repository_protocols import SessionProvider
from magitrak.infrastructure.database import get_db
from magitrak.infrastructure.match_repository import SqlMatchRepository
from magitrak.infrastructure.session_provider import CookieSessionProvider
from magitrak.services.handle_match import MatchHandlers


def get_identity(request: Request) -> Identity | None:
    """FastAPI dependency resolving the session identity (or None)."""
    provider: SessionProvider = CookieSessionProvider(
        get_settings().session_user_key,
    )
    return provider.resolve_identity(request)


def get_match_handlers(db: AsyncSession = Depends(get_db)) -> MatchHandlers:
    return MatchHandlers(SqlMatchRepository(db))
