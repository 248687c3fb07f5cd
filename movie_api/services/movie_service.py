"""
Movie service: validation and persistence of movies and their reviews.

A movie owns its reviews. Creating a movie stores its initial reviews in the
same transaction, and updating a movie replaces its review list; reviews
that are no longer listed are deleted.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from movie_api.database import crud
from movie_api.database.models import Movie, Review
from movie_api.services.inputs import MovieInput, ReviewInput
from movie_api.services.exceptions import MovieNotFoundError, ValidationError
from movie_api.services.validation import validate_movie

logger = logging.getLogger(__name__)


def _build_review(data: ReviewInput) -> Review:
    # Client ids are never used for new rows
    return Review(username=data.username, comment=data.comment, rating=data.rating)


def _build_movie(data: MovieInput) -> Movie:
    return Movie(
        title=data.title,
        genre=data.genre,
        release_date=data.release_date,
        age_rating=data.age_rating,
        average_rating=data.average_rating,
        recommended=data.recommended,
        reviews=[_build_review(review) for review in data.reviews],
    )


class MovieService:
    """CRUD orchestration for movies."""

    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[Movie]:
        logger.info("Listing all movies")
        return crud.get_movies(self.session)

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        logger.info("Getting movie %s", movie_id)
        return crud.get_movie(self.session, movie_id)

    def exists_by_id(self, movie_id: int) -> bool:
        logger.info("Checking whether movie %s exists", movie_id)
        return crud.movie_exists(self.session, movie_id)

    def list_by_recommended(self, recommended: bool) -> List[Movie]:
        logger.info("Listing movies with recommended=%s", recommended)
        return crud.get_movies_by_recommended(self.session, recommended)

    def list_by_genre(self, genre: str) -> List[Movie]:
        logger.info("Listing movies whose genre contains %r", genre)
        return crud.get_movies_by_genre(self.session, genre)

    def create(self, data: MovieInput, today: Optional[date] = None) -> Movie:
        """
        Validate and persist a movie with its initial reviews.

        Raises:
            ValidationError: If any field of the movie or its reviews is invalid
        """
        logger.info("Creating movie %r", data.title)
        violations = validate_movie(data, today=today)
        if violations:
            logger.warning("Rejected movie %r: %s", data.title, violations)
            raise ValidationError(violations)
        return crud.create_movie(self.session, _build_movie(data))

    def create_batch(self, items: Sequence[MovieInput], today: Optional[date] = None) -> List[Movie]:
        """
        Validate every movie first, then persist all of them in one transaction.

        Nothing is written when any movie is invalid. Field names in the
        raised error are prefixed with the movie's position, e.g. ``[1].title``.

        Raises:
            ValidationError: If at least one movie is invalid
        """
        logger.info("Creating %d movies", len(items))
        violations = []
        for index, data in enumerate(items):
            violations.extend(validate_movie(data, today=today, prefix=f"[{index}]."))
        if violations:
            logger.warning("Rejected movie batch: %s", violations)
            raise ValidationError(violations)
        return crud.create_movies(self.session, [_build_movie(data) for data in items])

    def update(self, movie_id: int, data: MovieInput, today: Optional[date] = None) -> Movie:
        """
        Replace every field of a movie, including its review list.

        Each submitted review that carries the id of an existing review is
        moved to this movie and overwritten; any other submitted review is
        created. Reviews attached before the update and not submitted again
        are deleted.

        Raises:
            ValidationError: If the new data is invalid
            MovieNotFoundError: If no movie has the given id
        """
        logger.info("Updating movie %s", movie_id)
        violations = validate_movie(data, today=today)
        if violations:
            logger.warning("Rejected update of movie %s: %s", movie_id, violations)
            raise ValidationError(violations)

        movie = crud.get_movie(self.session, movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)

        movie.title = data.title
        movie.genre = data.genre
        movie.release_date = data.release_date
        movie.age_rating = data.age_rating
        movie.average_rating = data.average_rating
        movie.recommended = data.recommended

        reviews = []
        for review_data in data.reviews:
            review = None
            if review_data.id is not None:
                review = crud.get_review(self.session, review_data.id)
            if review is None:
                review = _build_review(review_data)
            else:
                review.username = review_data.username
                review.comment = review_data.comment
                review.rating = review_data.rating
            reviews.append(review)

        removed = crud.replace_movie_reviews(self.session, movie, reviews)
        if removed:
            logger.info("Removing reviews %s no longer listed on movie %s", removed, movie_id)
        return crud.save_movie(self.session, movie)

    def delete_by_id(self, movie_id: int) -> None:
        logger.info("Deleting movie %s", movie_id)
        crud.delete_movie(self.session, movie_id)

    def delete_by_release_date_before(self, cutoff: date) -> int:
        logger.info("Deleting movies released before %s", cutoff)
        deleted = crud.delete_movies_released_before(self.session, cutoff)
        logger.info("Deleted %d movies released before %s", deleted, cutoff)
        return deleted

    def delete_all(self) -> None:
        logger.info("Deleting all movies")
        crud.delete_all_movies(self.session)
