"""Bearer Credentials — extraction of the token from an Authorization header.

Invariants:
    - Pure function: no IO, never raises
    - Scheme match is case-insensitive ("Bearer", "bearer")
    - Returns None for a missing header, a wrong scheme, or an empty token
"""

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    token = token.strip()
    return token or None
