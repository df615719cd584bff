"""Catalog Query Translation — tests for pure search/details/similar param building.

Tests cover:
    - exact year wins over a year range
    - year range bounds are inclusive whole years
    - show searches use first_air_date keys
    - genre ids joined as one match-any-of constraint
    - locale falls back to the configured default
    - details always bundle credits, videos and images
"""

from app.core.catalog_query import (
    DETAILS_APPEND,
    SearchFilters,
    build_details_params,
    build_search_params,
    build_similar_params,
)
from app.core.domain_types import MediaKind


def _search(filters=None, kind=MediaKind.MOVIE, page=1):
    return build_search_params(
        "dune", kind, page, filters or SearchFilters(), "en-US",
    )


# ─── build_search_params ─────────────────────────────────────────

def test_plain_search_carries_text_page_and_default_locale():
    params = _search(page=3)
    assert params == {"query": "dune", "page": 3, "language": "en-US"}


def test_exact_year_wins_over_range():
    params = _search(SearchFilters(year=2021, year_from=2000, year_to=2010))
    assert params["primary_release_year"] == 2021
    assert "primary_release_date.gte" not in params
    assert "primary_release_date.lte" not in params


def test_year_range_is_inclusive_of_whole_years():
    params = _search(SearchFilters(year_from=2010, year_to=2015))
    assert params["primary_release_date.gte"] == "2010-01-01"
    assert params["primary_release_date.lte"] == "2015-12-31"
    assert "primary_release_year" not in params


def test_open_ended_year_range_emits_one_bound():
    params = _search(SearchFilters(year_to=1999))
    assert params["primary_release_date.lte"] == "1999-12-31"
    assert "primary_release_date.gte" not in params


def test_show_search_uses_first_air_date_keys():
    params = _search(
        SearchFilters(year_from=2010, year_to=2015), kind=MediaKind.SHOW,
    )
    assert params["first_air_date.gte"] == "2010-01-01"
    assert params["first_air_date.lte"] == "2015-12-31"
    assert not any(k.startswith("primary_release") for k in params)


def test_show_exact_year_key():
    params = _search(SearchFilters(year=2019), kind=MediaKind.SHOW)
    assert params["first_air_date_year"] == 2019


def test_genre_ids_become_match_any_constraint():
    params = _search(SearchFilters(genre_ids="28, 12,878"))
    assert params["with_genres"] == "28|12|878"


def test_blank_genre_ids_are_dropped():
    params = _search(SearchFilters(genre_ids=" , "))
    assert "with_genres" not in params


def test_min_rating_maps_to_vote_average_floor():
    params = _search(SearchFilters(min_rating=7.5))
    assert params["vote_average.gte"] == 7.5


def test_explicit_language_overrides_default():
    params = _search(SearchFilters(language="pt-BR"))
    assert params["language"] == "pt-BR"


# ─── build_details_params / build_similar_params ─────────────────

def test_details_always_appends_credits_videos_images():
    params = build_details_params(None, "en-US")
    assert params == {"append_to_response": DETAILS_APPEND, "language": "en-US"}
    assert DETAILS_APPEND == "credits,videos,images"


def test_details_language_override():
    assert build_details_params("fr-FR", "en-US")["language"] == "fr-FR"


def test_similar_params_default_locale_and_page():
    assert build_similar_params(2, None, "en-US") == {"language": "en-US", "page": 2}
