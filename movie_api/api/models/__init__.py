"""
Pydantic schemas for API request/response validation.
"""

from movie_api.api.models.movie import MovieCreate, MovieResponse
from movie_api.api.models.review import MovieRef, ReviewCreate, ReviewResponse

__all__ = [
    "MovieCreate",
    "MovieResponse",
    "MovieRef",
    "ReviewCreate",
    "ReviewResponse",
]
