"""
Shapes of the movie and review data the services accept.

Any object with these attributes works: the API's pydantic request models,
or plain objects built by scripts and tests.
"""

from datetime import date
from typing import Optional, Protocol, Sequence


class MovieRefInput(Protocol):
    id: Optional[int]


class ReviewInput(Protocol):
    id: Optional[int]
    username: Optional[str]
    comment: Optional[str]
    rating: Optional[int]
    movie: Optional[MovieRefInput]


class MovieInput(Protocol):
    title: Optional[str]
    genre: Optional[str]
    release_date: Optional[date]
    age_rating: int
    average_rating: float
    recommended: bool
    reviews: Sequence[ReviewInput]
