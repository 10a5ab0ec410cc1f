"""Cookie Session Provider — resolves a request to an Identity via Starlette's signed session.

Invariants:
    - Returns None (never raises) when there is no session or no usable user id
    - Booleans, non-integer values and ids outside the signed 64-bit range are
      treated as "no session"
    - Never modifies the session contents; creating a session belongs to the auth layer

Design Decisions:
    - SessionMiddleware (itsdangerous-signed cookie) over a server-side store:
      the auth layer shares the signing secret, no extra infrastructure
"""

import logging

from starlette.requests import Request

from magitrak.core.domain_types import (
    OWNER_ID_MAX, OWNER_ID_MIN, Identity, OwnerId,
)

logger = logging.getLogger(__name__)


class CookieSessionProvider:
    """SessionProvider reading the user id from request.session."""

    def __init__(self, user_key: str = "user_id"):
        self.user_key = user_key

    def resolve_identity(self, request: Request) -> Identity | None:
        if "session" not in request.scope:
            return None
        raw = request.session.get(self.user_key)
        if raw is None or isinstance(raw, bool):
            return None
        try:
            owner_id = int(raw)
        except (TypeError, ValueError):
            logger.warning(
                f"Ignoring session with non-integer {self.user_key}: {raw!r}",
                extra={"path": request.url.path},
            )
            return None
        if not OWNER_ID_MIN <= owner_id <= OWNER_ID_MAX:
            logger.warning(
                f"Ignoring session with out-of-range {self.user_key}: {owner_id}",
                extra={"path": request.url.path},
            )
            return None
        return Identity(owner_id=OwnerId(owner_id))
