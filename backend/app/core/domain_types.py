"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Subject wraps the identity provider's account id — compared by equality only
    - Rating is bounded RATING_MIN–RATING_MAX inclusive
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - MediaKind values use the catalog's own path segments ("movie", "tv")
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Subject = NewType("Subject", str)


# ─── Value Bounds ────────────────────────────────────────────────

RATING_MIN = 1
RATING_MAX = 10


# ─── Enums ───────────────────────────────────────────────────────

class MediaKind(str, Enum):
    """Catalog media kinds. SHOW is "tv" in the catalog's dialect."""
    MOVIE = "movie"
    SHOW = "tv"


class WatchStatus(str, Enum):
    """Watchlist entry states — the only mutable watchlist field."""
    WANT = "want"
    WATCHING = "watching"
    WATCHED = "watched"


class ResourceKind(str, Enum):
    """Owned annotation resources — used in errors and log records."""
    REVIEW = "Review"
    COMMENT = "Comment"
    LIKE = "Like"
    FAVORITE = "Favorite"
    WATCHLIST_ENTRY = "WatchlistEntry"
    PROFILE = "Profile"
