"""Request Dependencies — injected collaborators and the authentication gate.

Invariants:
    - Collaborators (session manager, catalog, identity verifier) live on app.state,
      built by the lifespan; tests replace them via app.dependency_overrides
    - require_subject raises UnauthorizedError for every failure mode, uniformly
    - A protected route resolves require_subject before touching the store

Design Decisions:
    - Dependencies over module singletons: every external client is swappable per app
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.credentials import extract_bearer_token
from app.core.domain_types import Subject
from app.core.errors import UnauthorizedError
from app.core.repository_protocols import CatalogGateway, IdentityVerifier
from app.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


def _state_attr(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized")
    return value


def get_db_manager(request: Request) -> DatabaseSessionManager:
    return _state_attr(request, "db_manager")


async def get_db(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with manager.session() as session:
        yield session


def get_catalog(request: Request) -> CatalogGateway:
    return _state_attr(request, "catalog")


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return _state_attr(request, "identity_verifier")


async def _verify_header(
    authorization: str | None, verifier: IdentityVerifier, path: str,
) -> Subject:
    token = extract_bearer_token(authorization)
    try:
        if token is None:
            raise UnauthorizedError("missing or malformed Authorization header")
        return await verifier.verify(token)
    except UnauthorizedError as e:
        logger.warning(
            f"Authentication failed: {e.reason}",
            extra={"error_code": e.code, "path": path},
        )
        raise


async def require_subject(
    request: Request,
    authorization: str | None = Header(None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Subject:
    """Authentication gate for protected routes."""
    return await _verify_header(authorization, verifier, request.url.path)


async def optional_subject(
    request: Request,
    authorization: str | None = Header(None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Subject | None:
    """Subject when a credential is presented; None when the header is absent or blank.

    A presented-but-invalid credential is still a 401.
    """
    if not authorization or not authorization.strip():
        return None
    return await _verify_header(authorization, verifier, request.url.path)
