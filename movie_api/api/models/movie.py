"""
Pydantic schemas for Movie API.
"""

from datetime import date

from pydantic import BaseModel, Field

from movie_api.api.models.review import ReviewCreate, ReviewResponse


class MovieCreate(BaseModel):
    """Request body for creating or replacing a movie."""

    title: str | None = None
    genre: str | None = None
    release_date: date | None = Field(None, alias="releaseDate")
    age_rating: int = Field(0, alias="ageRating")
    average_rating: float = Field(0.0, alias="averageRating")
    recommended: bool = False
    reviews: list[ReviewCreate] = Field(default_factory=list)

    class Config:
        populate_by_name = True


class MovieResponse(BaseModel):
    """Response model for a single movie with its reviews."""

    id: int
    title: str
    genre: str | None
    release_date: date | None = Field(..., alias="releaseDate")
    age_rating: int = Field(..., alias="ageRating")
    average_rating: float = Field(..., alias="averageRating")
    recommended: bool
    reviews: list[ReviewResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
        populate_by_name = True
