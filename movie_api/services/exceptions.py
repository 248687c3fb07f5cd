"""
Exceptions raised by the movie and review services.

Routers translate these into HTTP status codes.
"""

from typing import List, Tuple

Violation = Tuple[str, str]


class MovieApiError(Exception):
    """Base class for service errors."""


class ValidationError(MovieApiError):
    """One or more field constraints were violated."""

    def __init__(self, violations: List[Violation], entity: str = "Movie"):
        self.violations = list(violations)
        summary = "; ".join(f"{field} {message}" for field, message in self.violations)
        super().__init__(f"{entity} validation failed: {summary}")

    def to_detail(self) -> dict:
        """Response body fragment listing every violation."""
        return {
            "message": str(self),
            "errors": [{"field": field, "message": message} for field, message in self.violations],
        }


class NotFoundError(MovieApiError):
    """A referenced entity does not exist."""


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id):
        self.movie_id = movie_id
        super().__init__(f"Movie with ID {movie_id} not found.")


class ReviewNotFoundError(NotFoundError):
    def __init__(self, review_id):
        self.review_id = review_id
        super().__init__(f"Review with ID {review_id} not found.")


class LinkageError(MovieApiError):
    """A review was submitted without a resolvable movie reference."""

    def __init__(self, message: str = "Review must be linked to a movie"):
        super().__init__(message)
