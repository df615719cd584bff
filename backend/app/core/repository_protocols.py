"""Boundary Protocols — contracts between the API layer and external collaborators.

Invariants:
    - Routes depend on these Protocols, never on concrete clients
    - Implementations are constructed in the lifespan and injected via FastAPI dependencies

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: every implementation does network IO
"""

from typing import Protocol

from app.core.catalog_query import SearchFilters
from app.core.domain_types import MediaKind, Subject


class IdentityVerifier(Protocol):
    """Contract for bearer credential verification — implemented by infrastructure."""
    async def verify(self, token: str) -> Subject: ...


class CatalogGateway(Protocol):
    """Contract for the read-only media catalog — implemented by infrastructure."""
    async def search(
        self, text: str, kind: MediaKind, page: int, filters: SearchFilters,
    ) -> dict: ...
    async def details(
        self, kind: MediaKind, tmdb_id: int, language: str | None,
    ) -> dict: ...
    async def similar(
        self, kind: MediaKind, tmdb_id: int, page: int, language: str | None,
    ) -> dict: ...
