"""
Service layer: validation and CRUD orchestration for movies and reviews.
"""

from movie_api.services.exceptions import (
    MovieApiError,
    ValidationError,
    NotFoundError,
    MovieNotFoundError,
    ReviewNotFoundError,
    LinkageError,
)
from movie_api.services.movie_service import MovieService
from movie_api.services.review_service import ReviewService

__all__ = [
    'MovieApiError',
    'ValidationError',
    'NotFoundError',
    'MovieNotFoundError',
    'ReviewNotFoundError',
    'LinkageError',
    'MovieService',
    'ReviewService',
]
