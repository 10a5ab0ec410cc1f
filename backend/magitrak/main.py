"""Magitrak API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MagitrakError → structured JSON responses
    - CORS and session cookie configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SessionMiddleware decodes the cookie and re-signs it on every response that
      carries a session, so each request refreshes the cookie for session_max_age_seconds;
      the auth layer creates it
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from magitrak.api.error_handlers import register_error_handlers
from magitrak.infrastructure.database import init_db, close_db
from magitrak.infrastructure.observability import setup_logging
from magitrak.config import get_settings
from magitrak.api.routes import health, match

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(settings)
    logger.info("Magitrak API started")
    yield
    await close_db()
    logger.info("Magitrak API shutting down")


app = FastAPI(
    title="Magitrak API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age_seconds,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.include_router(health.router)
app.include_router(match.router)

register_error_handlers(app)
