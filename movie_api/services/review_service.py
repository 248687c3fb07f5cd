"""
Review service: linking reviews to movies and persisting them.

Every review must point at an existing movie. The link is checked against
the movie store before anything is written.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from movie_api.database import crud
from movie_api.database.models import Movie, Review
from movie_api.services.inputs import ReviewInput
from movie_api.services.exceptions import (
    LinkageError,
    MovieNotFoundError,
    ReviewNotFoundError,
    ValidationError,
)
from movie_api.services.validation import validate_review

logger = logging.getLogger(__name__)


class ReviewService:
    """CRUD orchestration for reviews."""

    def __init__(self, session: Session):
        self.session = session

    def list_all(self) -> List[Review]:
        logger.info("Listing all reviews")
        return crud.get_reviews(self.session)

    def list_by_movie_id(self, movie_id: int) -> List[Review]:
        logger.info("Listing reviews of movie %s", movie_id)
        return crud.get_reviews_by_movie(self.session, movie_id)

    def get_by_id(self, review_id: int) -> Optional[Review]:
        logger.info("Getting review %s", review_id)
        return crud.get_review(self.session, review_id)

    def _attach_movie(self, data: ReviewInput) -> Movie:
        """
        Resolve the movie a submitted review refers to.

        Returns:
            The persisted Movie, which replaces the submitted reference

        Raises:
            LinkageError: If the review has no movie reference or its id is empty
            MovieNotFoundError: If the referenced movie does not exist
        """
        if data.movie is None or not data.movie.id:
            raise LinkageError()
        movie = crud.get_movie(self.session, data.movie.id)
        if movie is None:
            raise MovieNotFoundError(data.movie.id)
        return movie

    def _check_fields(self, data: ReviewInput, prefix: str = "") -> None:
        violations = validate_review(data, prefix=prefix)
        if violations:
            logger.warning("Rejected review by %r: %s", data.username, violations)
            raise ValidationError(violations, entity="Review")

    def create(self, data: ReviewInput) -> Review:
        """
        Link a review to its movie and persist it.

        Raises:
            LinkageError, MovieNotFoundError, ValidationError
        """
        logger.info("Creating review by %r", data.username)
        movie = self._attach_movie(data)
        self._check_fields(data)
        review = Review(
            username=data.username,
            comment=data.comment,
            rating=data.rating,
            movie_id=movie.id,
        )
        return crud.create_review(self.session, review)

    def create_batch(self, items: Sequence[ReviewInput]) -> List[Review]:
        """
        Check every review in order and persist them together.

        The first failing review aborts the batch; nothing is written.
        """
        logger.info("Creating %d reviews", len(items))
        reviews = []
        for index, data in enumerate(items):
            movie = self._attach_movie(data)
            self._check_fields(data, prefix=f"[{index}].")
            reviews.append(Review(
                username=data.username,
                comment=data.comment,
                rating=data.rating,
                movie_id=movie.id,
            ))
        return crud.create_reviews(self.session, reviews)

    def update(self, review_id: int, data: ReviewInput) -> Review:
        """
        Overwrite a review's fields and optionally move it to another movie.

        Without a movie reference in ``data`` the review keeps its movie.

        Raises:
            ReviewNotFoundError: If no review has the given id
            LinkageError, MovieNotFoundError, ValidationError
        """
        logger.info("Updating review %s", review_id)
        review = crud.get_review(self.session, review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)

        movie = self._attach_movie(data) if data.movie is not None else None
        self._check_fields(data)

        review.username = data.username
        review.comment = data.comment
        review.rating = data.rating
        if movie is not None:
            review.movie_id = movie.id
        return crud.save_review(self.session, review)

    def delete_by_id(self, review_id: int) -> None:
        """
        Raises:
            ReviewNotFoundError: If no review has the given id
        """
        logger.info("Deleting review %s", review_id)
        if not crud.review_exists(self.session, review_id):
            raise ReviewNotFoundError(review_id)
        crud.delete_review(self.session, review_id)

    def delete_all_reviews(self) -> None:
        logger.info("Deleting all reviews")
        crud.delete_all_reviews(self.session)
