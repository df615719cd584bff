"""Catalog client — outbound request shape and upstream failure mapping.

Invariants:
    - api_key attached to every request
    - decoded JSON relayed untouched
    - status >= 400, timeouts, transport errors and bad JSON → CatalogUpstreamError
"""

import httpx
import pytest

from app.core.catalog_query import SearchFilters
from app.core.domain_types import MediaKind
from app.core.errors import CatalogUpstreamError
from app.infrastructure.catalog_client import CatalogClient


def _client(handler) -> CatalogClient:
    return CatalogClient(
        api_key="k-123",
        base_url="https://catalog.test/3/",
        default_language="en-US",
        transport=httpx.MockTransport(handler),
    )


async def test_search_hits_kind_path_with_api_key():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"results": [{"id": 1}]})

    client = _client(handler)
    body = await client.search("alien", MediaKind.MOVIE, 1, SearchFilters(year=1979))
    await client.aclose()

    assert body == {"results": [{"id": 1}]}
    assert seen[0].url.path == "/3/search/movie"
    assert seen[0].url.params["api_key"] == "k-123"
    assert seen[0].url.params["primary_release_year"] == "1979"


async def test_details_requests_appended_sections():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"id": 1399})

    client = _client(handler)
    await client.details(MediaKind.SHOW, 1399, None)
    await client.aclose()

    assert seen[0].url.path == "/3/tv/1399"
    assert seen[0].url.params["append_to_response"] == "credits,videos,images"
    assert seen[0].url.params["language"] == "en-US"


async def test_similar_path_and_page():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"page": 2})

    client = _client(handler)
    await client.similar(MediaKind.MOVIE, 603, 2, "de-DE")
    await client.aclose()

    assert seen[0].url.path == "/3/movie/603/similar"
    assert seen[0].url.params["page"] == "2"
    assert seen[0].url.params["language"] == "de-DE"


@pytest.mark.parametrize("status_code", [401, 404, 429, 503])
async def test_error_status_maps_to_upstream_error(status_code):
    client = _client(lambda request: httpx.Response(status_code, json={}))
    with pytest.raises(CatalogUpstreamError) as exc_info:
        await client.details(MediaKind.MOVIE, 1, None)
    await client.aclose()
    assert exc_info.value.context.upstream_status == status_code


async def test_timeout_maps_to_upstream_error():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    client = _client(handler)
    with pytest.raises(CatalogUpstreamError, match="timed out"):
        await client.similar(MediaKind.MOVIE, 1, 1, None)
    await client.aclose()


async def test_transport_error_maps_to_upstream_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler)
    with pytest.raises(CatalogUpstreamError):
        await client.search("x", MediaKind.MOVIE, 1, SearchFilters())
    await client.aclose()


async def test_invalid_json_maps_to_upstream_error():
    client = _client(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(CatalogUpstreamError, match="invalid response"):
        await client.details(MediaKind.MOVIE, 1, None)
    await client.aclose()
