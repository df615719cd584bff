"""Identity verifier — accounts:lookup contract and uniform rejection."""

import json

import httpx
import pytest

from app.core.errors import UnauthorizedError
from app.infrastructure.identity_client import FirebaseIdentityVerifier


def _verifier(handler) -> FirebaseIdentityVerifier:
    return FirebaseIdentityVerifier(
        api_key="fb-key",
        base_url="https://identity.test",
        transport=httpx.MockTransport(handler),
    )


async def test_verify_returns_local_id():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"users": [{"localId": "uid-42"}]})

    verifier = _verifier(handler)
    subject = await verifier.verify("id-token")
    await verifier.aclose()

    assert subject == "uid-42"
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v1/accounts:lookup"
    assert seen[0].url.params["key"] == "fb-key"
    assert json.loads(seen[0].content) == {"idToken": "id-token"}


@pytest.mark.parametrize("response", [
    httpx.Response(400, json={"error": {"message": "INVALID_ID_TOKEN"}}),
    httpx.Response(200, json={"users": []}),
    httpx.Response(200, json={}),
    httpx.Response(200, json={"users": [{"email": "a@b.c"}]}),
    httpx.Response(200, json={"users": 5}),
    httpx.Response(200, json={"users": {"localId": "x"}}),
    httpx.Response(200, json=["not", "an", "object"]),
    httpx.Response(200, content=b"not json"),
])
async def test_rejections_raise_unauthorized(response):
    verifier = _verifier(lambda request: response)
    with pytest.raises(UnauthorizedError) as exc_info:
        await verifier.verify("id-token")
    await verifier.aclose()
    assert exc_info.value.http_status == 401
    assert exc_info.value.message == "Unauthorized"


async def test_provider_unreachable_is_unauthorized():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    verifier = _verifier(handler)
    with pytest.raises(UnauthorizedError, match="Unauthorized"):
        await verifier.verify("id-token")
    await verifier.aclose()
