"""
Pydantic schemas for Review API.
"""

from pydantic import BaseModel, Field


class MovieRef(BaseModel):
    """Reference to the movie a review belongs to. Only the id is used."""

    id: int | None = None


class ReviewCreate(BaseModel):
    """
    Request body for creating or updating a review.

    Field constraints are checked by the review service so that every
    violation is reported together.
    """

    id: int | None = None
    username: str | None = None
    comment: str | None = None
    rating: int | None = None
    movie: MovieRef | None = None


class ReviewResponse(BaseModel):
    """Response model for review."""

    id: int
    username: str
    comment: str
    rating: int
    movie_id: int = Field(..., alias="movieId")

    class Config:
        from_attributes = True
        populate_by_name = True
