"""
API route handlers.
"""

from movie_api.api.routers import movies, reviews, system

__all__ = ["movies", "reviews", "system"]
