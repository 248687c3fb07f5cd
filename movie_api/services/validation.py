"""
Field validation for movies and reviews.

Each validator returns the full list of ``(field, message)`` violations
instead of stopping at the first one. An empty list means the input is valid.
"""

from datetime import date
from typing import List, Optional

from movie_api.services.inputs import MovieInput, ReviewInput
from movie_api.services.exceptions import Violation

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 100
USERNAME_MAX_LENGTH = 50
COMMENT_MAX_LENGTH = 500
RATING_MIN = 1
RATING_MAX = 10


def validate_review(review: ReviewInput, prefix: str = "") -> List[Violation]:
    """
    Check the fields of a review.

    Args:
        review: Submitted review data
        prefix: Prepended to field names, e.g. "reviews[0]."

    Returns:
        List of (field, message) pairs
    """
    violations: List[Violation] = []

    if review.username is None or not review.username.strip():
        violations.append((f"{prefix}username", "must not be blank"))
    elif len(review.username) > USERNAME_MAX_LENGTH:
        violations.append(
            (f"{prefix}username", f"must be at most {USERNAME_MAX_LENGTH} characters")
        )

    if review.comment is None or not review.comment.strip():
        violations.append((f"{prefix}comment", "must not be blank"))
    elif len(review.comment) > COMMENT_MAX_LENGTH:
        violations.append(
            (f"{prefix}comment", f"must be at most {COMMENT_MAX_LENGTH} characters")
        )

    if review.rating is None or not (RATING_MIN <= review.rating <= RATING_MAX):
        violations.append(
            (f"{prefix}rating", f"must be between {RATING_MIN} and {RATING_MAX}")
        )

    return violations


def validate_movie(
    movie: MovieInput,
    today: Optional[date] = None,
    prefix: str = "",
) -> List[Violation]:
    """
    Check the fields of a movie and of every review it carries.

    Args:
        movie: Submitted movie data
        today: Reference date for the release date check (default: today)
        prefix: Prepended to field names, e.g. "[2]."

    Returns:
        List of (field, message) pairs
    """
    today = today or date.today()
    violations: List[Violation] = []

    if movie.title is None or not (TITLE_MIN_LENGTH <= len(movie.title) <= TITLE_MAX_LENGTH):
        violations.append(
            (
                f"{prefix}title",
                f"length must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters",
            )
        )

    if movie.release_date is not None and movie.release_date > today:
        violations.append((f"{prefix}releaseDate", "must not be in the future"))

    if movie.age_rating < 0:
        violations.append((f"{prefix}ageRating", "must not be negative"))

    for index, review in enumerate(movie.reviews):
        violations.extend(validate_review(review, prefix=f"{prefix}reviews[{index}]."))

    return violations
