"""Movie Magic API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MovieMagicError → JSON {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - External collaborators built in the lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Catalog router registered last: its /{media_type}/{tmdb_id} pattern would
      otherwise capture resource paths
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import (
    catalog, comments, favorites, health, likes, profiles, reviews, watchlist,
)
from app.config import get_settings
from app.infrastructure.catalog_client import CatalogClient
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.identity_client import FirebaseIdentityVerifier
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.catalog = CatalogClient(
        api_key=settings.tmdb_api_key,
        base_url=settings.tmdb_base_url,
        timeout_seconds=settings.tmdb_timeout_seconds,
        default_language=settings.default_language,
    )
    app.state.identity_verifier = FirebaseIdentityVerifier(
        api_key=settings.identity_api_key,
        base_url=settings.identity_base_url,
        timeout_seconds=settings.identity_timeout_seconds,
    )
    logger.info("Movie Magic API started")
    yield
    logger.info("Movie Magic API shutting down")
    await app.state.catalog.aclose()
    await app.state.identity_verifier.aclose()
    await app.state.db_manager.dispose()


app = FastAPI(
    title="Movie Magic API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(reviews.router)
app.include_router(comments.router)
app.include_router(likes.router)
app.include_router(favorites.router)
app.include_router(watchlist.router)
app.include_router(profiles.router)
app.include_router(catalog.router)

register_error_handlers(app)
