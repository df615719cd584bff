"""Authentication gate — every protected route answers 401 and leaves the store untouched.

Invariants:
    - Missing, blank, non-bearer and unknown credentials are all rejected with 401
    - The 401 body is the fixed "Unauthorized" envelope
    - No row is created, changed or deleted by a rejected request
"""

import pytest
from sqlalchemy import select

from app.models.comment import Comment
from app.models.favorite import Favorite
from app.models.like import Like
from app.models.profile import Profile
from app.models.review import Review
from app.models.watchlist_entry import WatchlistEntry

PROTECTED_ROUTES = [
    ("POST", "/api/v1/reviews", {"tmdb_id": 9, "type": "movie", "rating": 5, "review_text": "x"}),
    ("PUT", "/api/v1/reviews/{review}", {"rating": 1}),
    ("DELETE", "/api/v1/reviews/{review}", None),
    ("POST", "/api/v1/comments", {"review_id": "{review}", "comment_text": "x"}),
    ("PUT", "/api/v1/comments/{comment}", {"comment_text": "x"}),
    ("DELETE", "/api/v1/comments/{comment}", None),
    ("GET", "/api/v1/likes?review_id={review}", None),
    ("POST", "/api/v1/likes", {"review_id": "{review}"}),
    ("DELETE", "/api/v1/likes?review_id={review}", None),
    ("POST", "/api/v1/favorites", {"tmdb_id": 9, "type": "tv"}),
    ("GET", "/api/v1/favorites", None),
    ("DELETE", "/api/v1/favorites/{favorite}", None),
    ("POST", "/api/v1/watchlist", {"tmdb_id": 9, "type": "movie"}),
    ("GET", "/api/v1/watchlist", None),
    ("PUT", "/api/v1/watchlist/{entry}", {"status": "watched"}),
    ("DELETE", "/api/v1/watchlist/{entry}", None),
    ("PUT", "/api/v1/profiles/me", {"bio": "x"}),
]

REJECTED_HEADERS = [
    {},
    {"Authorization": ""},
    {"Authorization": "Basic YWxpY2U6cHc="},
    {"Authorization": "Bearer mallory-token"},
]

SNAPSHOT_MODELS = (Review, Comment, Like, Favorite, WatchlistEntry, Profile)


@pytest.fixture
async def owned_ids(seed):
    review = await seed(Review(user_id="alice", tmdb_id=1, type="movie", rating=7, review_text="ok"))
    comment, favorite, entry, _, _ = await seed(
        Comment(review_id=review.id, user_id="alice", comment_text="hi"),
        Favorite(user_id="alice", tmdb_id=2, type="tv"),
        WatchlistEntry(user_id="alice", tmdb_id=3, type="movie"),
        Like(review_id=review.id, user_id="alice"),
        Profile(user_id="alice", bio="original"),
    )
    return {"review": review.id, "comment": comment.id, "favorite": favorite.id, "entry": entry.id}


@pytest.fixture
def snapshot(test_session_factory):
    """Every column of every row, per table."""
    async def _snapshot():
        rows = {}
        async with test_session_factory() as session:
            for model in SNAPSHOT_MODELS:
                result = await session.execute(select(model))
                columns = [c.key for c in model.__table__.columns]
                rows[model.__tablename__] = sorted(
                    tuple(str(getattr(obj, col)) for col in columns)
                    for obj in result.scalars().all()
                )
        return rows
    return _snapshot


def _fill_path(path: str, ids: dict) -> str:
    return path.format(**ids)


def _fill_body(body: dict | None, ids: dict) -> dict | None:
    if body is None:
        return None
    # "{review}" placeholders in bodies stand for the seeded review's integer id
    return {k: ids["review"] if v == "{review}" else v for k, v in body.items()}


@pytest.mark.parametrize("headers", REJECTED_HEADERS, ids=["none", "blank", "basic", "unknown"])
@pytest.mark.parametrize(
    "method,path,body", PROTECTED_ROUTES,
    ids=[f"{m} {p.split('?')[0]}" for m, p, _ in PROTECTED_ROUTES],
)
async def test_protected_route_rejects_without_valid_credential(
    client, owned_ids, snapshot, method, path, body, headers,
):
    before = await snapshot()

    res = await client.request(
        method, _fill_path(path, owned_ids), json=_fill_body(body, owned_ids), headers=headers,
    )

    assert res.status_code == 401
    assert res.json()["error"] == "Unauthorized"
    assert res.json()["code"] == "UNAUTHORIZED"
    assert await snapshot() == before
