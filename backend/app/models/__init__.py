"""ORM Models — SQLAlchemy declarative models for all annotation resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every owned model stores its owner in user_id (the verified subject)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/migrations
"""

from app.models.review import Review  # noqa: F401
from app.models.comment import Comment  # noqa: F401
from app.models.like import Like  # noqa: F401
from app.models.favorite import Favorite  # noqa: F401
from app.models.watchlist_entry import WatchlistEntry  # noqa: F401
from app.models.profile import Profile  # noqa: F401
