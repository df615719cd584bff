"""TMDb Catalog Client — async relay to the external media catalog with error mapping.

Invariants:
    - Every request carries the api_key query parameter
    - Responses are relayed verbatim (decoded JSON, never reshaped)
    - No caching, no retries: one upstream call per inbound request
    - All failures (status >= 400, timeout, transport, bad JSON) mapped to CatalogUpstreamError

Design Decisions:
    - Parameter translation lives in core/catalog_query.py; this class only does IO
    - One pooled httpx.AsyncClient per process, closed by the lifespan
    - transport injectable: tests pass httpx.MockTransport
"""

import logging

import httpx

from app.core.catalog_query import (
    SearchFilters,
    build_details_params,
    build_search_params,
    build_similar_params,
)
from app.core.domain_types import MediaKind
from app.core.errors import CatalogUpstreamError

logger = logging.getLogger(__name__)


class CatalogClient:
    """Translates catalog requests and relays TMDb responses."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.themoviedb.org/3",
        timeout_seconds: float = 10.0,
        default_language: str = "en-US",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.default_language = default_language
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    async def search(
        self, text: str, kind: MediaKind, page: int, filters: SearchFilters,
    ) -> dict:
        params = build_search_params(
            text, kind, page, filters, self.default_language,
        )
        return await self._get(f"/search/{kind.value}", params)

    async def details(
        self, kind: MediaKind, tmdb_id: int, language: str | None,
    ) -> dict:
        params = build_details_params(language, self.default_language)
        return await self._get(f"/{kind.value}/{tmdb_id}", params)

    async def similar(
        self, kind: MediaKind, tmdb_id: int, page: int, language: str | None,
    ) -> dict:
        params = build_similar_params(page, language, self.default_language)
        return await self._get(f"/{kind.value}/{tmdb_id}/similar", params)

    async def _get(self, endpoint: str, params: dict) -> dict:
        try:
            response = await self.client.get(
                endpoint, params={"api_key": self.api_key, **params},
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"Catalog returned {status_code} for {endpoint}",
                extra={"upstream_status": status_code, "path": endpoint},
            )
            raise CatalogUpstreamError(
                f"Catalog request failed with status code {status_code}",
                upstream_status=status_code,
            )
        except httpx.TimeoutException:
            logger.error(f"Catalog timeout for {endpoint}", extra={"path": endpoint})
            raise CatalogUpstreamError("Catalog request timed out")
        except httpx.HTTPError as e:
            logger.error(
                f"Catalog transport error for {endpoint}: {e}",
                extra={"path": endpoint},
            )
            raise CatalogUpstreamError(f"Catalog request failed: {e}")
        except ValueError as e:
            logger.error(f"Catalog returned invalid JSON for {endpoint}: {e}")
            raise CatalogUpstreamError("Catalog returned an invalid response")

    async def aclose(self) -> None:
        await self.client.aclose()
