"""Catalog Routes — search, details and similar titles relayed from TMDb.

Invariants:
    - No authentication: the catalog is public read-only data
    - Query params validated here; translation happens in core/catalog_query.py
    - Upstream failures surface as 500 (CatalogUpstreamError), never retried
    - The media_type path segment only matches "movie" or "tv"; any other
      segment falls through to the resource routers (404/405)

Design Decisions:
    - Registered last in main.py: /{media_type}/{tmdb_id} must not shadow resource routes
    - Custom Starlette path convertor instead of a validated str: a non-catalog
      path never reaches this router, so it is not reported as a 400
"""

from fastapi import APIRouter, Depends, Query
from starlette.convertors import Convertor, register_url_convertor

from app.api.dependencies import get_catalog
from app.core.catalog_query import SearchFilters
from app.core.domain_types import MediaKind
from app.core.repository_protocols import CatalogGateway


class MediaKindConvertor(Convertor):
    regex = "|".join(kind.value for kind in MediaKind)

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value) -> str:
        return MediaKind(value).value


register_url_convertor("media_kind", MediaKindConvertor())

router = APIRouter(prefix="/api/v1", tags=["catalog"])

_GENRE_IDS_PATTERN = r"^\s*\d+\s*(,\s*\d+\s*)*$"
_LANGUAGE_PATTERN = r"^[a-z]{2}(-[A-Z]{2})?$"


@router.get("/search")
async def search(
    query: str = Query(..., min_length=1, max_length=500),
    media_type: MediaKind = Query(MediaKind.MOVIE, alias="type"),
    page: int = Query(1, ge=1, le=500),
    genre_ids: str | None = Query(None, pattern=_GENRE_IDS_PATTERN),
    year: int | None = Query(None, ge=1800, le=2200),
    year_from: int | None = Query(None, ge=1800, le=2200),
    year_to: int | None = Query(None, ge=1800, le=2200),
    min_rating: float | None = Query(None, ge=0, le=10),
    language: str | None = Query(None, pattern=_LANGUAGE_PATTERN),
    catalog: CatalogGateway = Depends(get_catalog),
):
    """Free-text search with optional genre, year, rating and locale filters."""
    filters = SearchFilters(
        genre_ids=genre_ids,
        year=year,
        year_from=year_from,
        year_to=year_to,
        min_rating=min_rating,
        language=language,
    )
    return await catalog.search(query, media_type, page, filters)


@router.get("/{media_type:media_kind}/{tmdb_id}")
async def details(
    media_type: MediaKind,
    tmdb_id: int,
    language: str | None = Query(None, pattern=_LANGUAGE_PATTERN),
    catalog: CatalogGateway = Depends(get_catalog),
):
    """Item metadata enriched with credits, videos and images."""
    return await catalog.details(media_type, tmdb_id, language)


@router.get("/{media_type:media_kind}/{tmdb_id}/similar")
async def similar(
    media_type: MediaKind,
    tmdb_id: int,
    page: int = Query(1, ge=1, le=500),
    language: str | None = Query(None, pattern=_LANGUAGE_PATTERN),
    catalog: CatalogGateway = Depends(get_catalog),
):
    return await catalog.similar(media_type, tmdb_id, page, language)
