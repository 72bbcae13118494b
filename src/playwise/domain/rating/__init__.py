"""Rating domain - star-rating groups for catalog tracks."""

from .groups import (
    MAX_RATING,
    MIN_RATING,
    RATING_VALUES,
    InvalidRatingError,
    RatingGroups,
    is_valid_rating,
)

__all__ = [
    "MAX_RATING",
    "MIN_RATING",
    "RATING_VALUES",
    "InvalidRatingError",
    "RatingGroups",
    "is_valid_rating",
]
