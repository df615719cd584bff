"""Catalog Query Translation — maps inbound filters onto TMDb query parameters.

Invariants:
    - Pure functions: no IO, no async, no HTTP client
    - Exact year wins over year_from/year_to (range keys never emitted alongside it)
    - Year range bounds are inclusive: Jan 1 of year_from, Dec 31 of year_to
    - Genre ids become one match-any-of constraint ("|" is TMDb's OR separator)
    - Locale always present in output — falls back to the configured default
    - Details requests always bundle credits, videos and images

Design Decisions:
    - Release-date keys depend on media kind: movies use primary_release_*,
      shows use first_air_date* (TMDb names them differently)
    - SearchFilters as frozen dataclass: the route builds it once, translation reads it
"""

from dataclasses import dataclass

from app.core.domain_types import MediaKind

DETAILS_APPEND = "credits,videos,images"
GENRE_ANY_SEPARATOR = "|"

_YEAR_KEYS = {
    MediaKind.MOVIE: (
        "primary_release_year",
        "primary_release_date.gte",
        "primary_release_date.lte",
    ),
    MediaKind.SHOW: (
        "first_air_date_year",
        "first_air_date.gte",
        "first_air_date.lte",
    ),
}


@dataclass(frozen=True)
class SearchFilters:
    """Optional narrowing applied on top of a free-text search."""
    genre_ids: str | None = None
    year: int | None = None
    year_from: int | None = None
    year_to: int | None = None
    min_rating: float | None = None
    language: str | None = None


def _genre_constraint(genre_ids: str) -> str | None:
    ids = [part.strip() for part in genre_ids.split(",") if part.strip()]
    if not ids:
        return None
    return GENRE_ANY_SEPARATOR.join(ids)


def _year_params(kind: MediaKind, filters: SearchFilters) -> dict:
    exact_key, from_key, to_key = _YEAR_KEYS[kind]
    if filters.year is not None:
        return {exact_key: filters.year}
    params = {}
    if filters.year_from is not None:
        params[from_key] = f"{filters.year_from:04d}-01-01"
    if filters.year_to is not None:
        params[to_key] = f"{filters.year_to:04d}-12-31"
    return params


def build_search_params(
    text: str,
    kind: MediaKind,
    page: int,
    filters: SearchFilters,
    default_language: str,
) -> dict:
    """Translate a search request into TMDb /search/{kind} query params."""
    params: dict = {"query": text, "page": page}
    if filters.genre_ids:
        genres = _genre_constraint(filters.genre_ids)
        if genres:
            params["with_genres"] = genres
    params.update(_year_params(kind, filters))
    if filters.min_rating is not None:
        params["vote_average.gte"] = filters.min_rating
    params["language"] = filters.language or default_language
    return params


def build_details_params(language: str | None, default_language: str) -> dict:
    """Details always come back enriched in a single round trip."""
    return {
        "append_to_response": DETAILS_APPEND,
        "language": language or default_language,
    }


def build_similar_params(
    page: int, language: str | None, default_language: str,
) -> dict:
    return {"language": language or default_language, "page": page}
