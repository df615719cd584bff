"""Test doubles and helpers shared by route tests."""

from datetime import datetime, timedelta, timezone

import httpx

from app.core.domain_types import Subject
from app.core.errors import UnauthorizedError

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic timestamps for ordering tests."""
    return BASE_TIME + timedelta(minutes=minutes)


def auth(name: str) -> dict:
    return {"Authorization": f"Bearer {name}-token"}


class FakeIdentityVerifier:
    """Accepts "<name>-token" for every name in known; rejects everything else."""

    def __init__(self, known: tuple[str, ...] = ("alice", "bob", "carol")):
        self.known = set(known)
        self.calls: list[str] = []

    async def verify(self, token: str) -> Subject:
        self.calls.append(token)
        name = token.removesuffix("-token")
        if not token.endswith("-token") or name not in self.known:
            raise UnauthorizedError("unknown token")
        return Subject(name)


class CatalogStub:
    """Records outbound catalog requests and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: dict = {"page": 1, "results": [], "total_results": 0}
        self.raise_exc: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_exc is not None:
            raise self.raise_exc
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]
