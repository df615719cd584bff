"""Identity Verifier — resolves a Firebase ID token to its account id via Identity Toolkit.

Invariants:
    - verify() returns a non-empty Subject or raises UnauthorizedError — nothing else
    - Every failure mode (rejected token, provider down, odd payload) looks identical to callers
    - The failure reason is kept on the error for logging only

Design Decisions:
    - accounts:lookup over local JWT checks: the provider validates signature and expiry,
      this service holds no signing keys
    - No retries: a failed verification fails the request immediately
"""

import logging

import httpx

from app.core.domain_types import Subject
from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/v1/accounts:lookup"


class FirebaseIdentityVerifier:
    """Verifies ID tokens against the Identity Toolkit REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://identitytoolkit.googleapis.com",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    async def verify(self, token: str) -> Subject:
        try:
            response = await self.client.post(
                LOOKUP_PATH,
                params={"key": self.api_key},
                json={"idToken": token},
            )
        except httpx.HTTPError as e:
            raise UnauthorizedError(f"identity provider unreachable: {e}")

        if response.status_code != 200:
            raise UnauthorizedError(
                f"identity provider rejected token ({response.status_code})",
            )
        return _subject_from_lookup(response)

    async def aclose(self) -> None:
        await self.client.aclose()


def _subject_from_lookup(response: httpx.Response) -> Subject:
    try:
        users = response.json().get("users") or []
    except (ValueError, AttributeError):
        raise UnauthorizedError("identity provider returned invalid JSON")
    if not isinstance(users, list):
        raise UnauthorizedError("unexpected lookup payload")
    if not users or not isinstance(users[0], dict):
        raise UnauthorizedError("no account for token")
    local_id = users[0].get("localId")
    if not local_id:
        raise UnauthorizedError("account has no localId")
    return Subject(str(local_id))
