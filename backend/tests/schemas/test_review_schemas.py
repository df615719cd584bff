"""Review schemas — rating bounds, text stripping, owner never accepted from payload.

Invariants:
    - rating is a strict integer in 1..10
    - review_text stripped; blank is rejected
    - ReviewUpdate needs at least one field; changes() omits unset ones
"""

import pytest
from pydantic import ValidationError

from app.core.domain_types import MediaKind
from app.schemas.reviews import ReviewCreate, ReviewUpdate


def _create(**overrides):
    data = {"tmdb_id": 550, "type": "movie", "rating": 8, "review_text": "Great"}
    data.update(overrides)
    return ReviewCreate(**data)


# --- ReviewCreate -------------------------------------------------------------

def test_review_create_accepts_valid_payload():
    review = _create()
    assert review.type == MediaKind.MOVIE
    assert review.rating == 8


@pytest.mark.parametrize("rating", [1, 10])
def test_rating_bounds_are_inclusive(rating):
    assert _create(rating=rating).rating == rating


@pytest.mark.parametrize("rating", [0, 11, -3])
def test_rating_out_of_range_rejected(rating):
    with pytest.raises(ValidationError):
        _create(rating=rating)


@pytest.mark.parametrize("rating", [7.5, "7"])
def test_rating_is_not_coerced(rating):
    with pytest.raises(ValidationError):
        _create(rating=rating)


def test_review_text_is_stripped():
    assert _create(review_text="  nice  ").review_text == "nice"


def test_blank_review_text_rejected():
    with pytest.raises(ValidationError):
        _create(review_text="   ")


def test_unknown_media_type_rejected():
    with pytest.raises(ValidationError):
        _create(type="podcast")


def test_payload_user_id_is_ignored():
    review = _create(user_id="mallory")
    assert not hasattr(review, "user_id")


# --- ReviewUpdate -------------------------------------------------------------

def test_update_requires_a_field():
    with pytest.raises(ValidationError):
        ReviewUpdate()


def test_update_changes_only_set_fields():
    assert ReviewUpdate(rating=4).changes() == {"rating": 4}
