"""
CRUD operations for Movie and Review models.

This module is the persistence layer used by the services. Functions that
write commit once, so each call is a single transaction.
"""

from datetime import date
from typing import List, Optional, Sequence
from sqlalchemy import func, select, delete
from sqlalchemy.orm import Session

from movie_api.database.models import Movie, Review


# ==================== MOVIE CRUD OPERATIONS ====================

def create_movie(session: Session, movie: Movie) -> Movie:
    """
    Persist a new movie together with any reviews attached to it.

    Args:
        session: Database session
        movie: Transient Movie object

    Returns:
        Created Movie object with its assigned id
    """
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def create_movies(session: Session, movies: Sequence[Movie]) -> List[Movie]:
    """
    Persist several movies in one transaction.

    Args:
        session: Database session
        movies: Transient Movie objects

    Returns:
        Created Movie objects in input order
    """
    session.add_all(movies)
    session.commit()
    for movie in movies:
        session.refresh(movie)
    return list(movies)


def get_movie(session: Session, movie_id: int) -> Optional[Movie]:
    """
    Get a movie by ID.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        Movie object or None if not found
    """
    return session.query(Movie).filter(Movie.id == movie_id).first()


def movie_exists(session: Session, movie_id: int) -> bool:
    """Check whether a movie with the given ID exists."""
    return session.query(func.count(Movie.id)).filter(Movie.id == movie_id).scalar() > 0


def get_movies(session: Session) -> List[Movie]:
    """Get all movies ordered by ID."""
    return session.query(Movie).order_by(Movie.id).all()


def get_movies_by_recommended(session: Session, recommended: bool) -> List[Movie]:
    """
    Get movies with the given recommendation flag.

    Args:
        session: Database session
        recommended: Flag value to match exactly

    Returns:
        List of Movie objects
    """
    return session.query(Movie).filter(
        Movie.recommended == recommended
    ).order_by(Movie.id).all()


def get_movies_by_genre(session: Session, genre: str) -> List[Movie]:
    """
    Get movies whose genre contains the given text, ignoring case.

    Args:
        session: Database session
        genre: Substring to search for; "%" and "_" match literally

    Returns:
        List of Movie objects
    """
    return session.query(Movie).filter(
        Movie.genre.icontains(genre, autoescape=True)
    ).order_by(Movie.id).all()


def get_movie_count(session: Session) -> int:
    """Get total count of movies."""
    return session.query(func.count(Movie.id)).scalar()


def save_movie(session: Session, movie: Movie) -> Movie:
    """
    Commit pending changes to a persistent movie.

    Args:
        session: Database session
        movie: Movie loaded from this session and modified in place

    Returns:
        Refreshed Movie object
    """
    session.commit()
    session.refresh(movie)
    return movie


def replace_movie_reviews(session: Session, movie: Movie, reviews: List[Review]) -> List[int]:
    """
    Make ``reviews`` the complete review list of ``movie``.

    Reviews attached before the call and missing from ``reviews`` are
    deleted. Nothing is committed; follow with ``save_movie``.

    Args:
        session: Database session
        movie: Persistent Movie object
        reviews: New membership; existing reviews are re-attached, new ones created

    Returns:
        IDs of the deleted reviews
    """
    old_ids = {review.id for review in movie.reviews}
    new_ids = {review.id for review in reviews if review.id is not None}
    orphan_ids = old_ids - new_ids

    for review in list(movie.reviews):
        if review.id in orphan_ids:
            session.delete(review)

    movie.reviews = list(reviews)
    return sorted(orphan_ids)


def delete_movie(session: Session, movie_id: int) -> bool:
    """
    Delete a movie and its reviews.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        True if movie was deleted, False if not found
    """
    movie = get_movie(session, movie_id)
    if movie:
        session.delete(movie)
        session.commit()
        return True
    return False


def delete_movies_released_before(session: Session, cutoff: date) -> int:
    """
    Delete every movie released strictly before ``cutoff`` and its reviews.

    Args:
        session: Database session
        cutoff: First release date that is kept

    Returns:
        Number of movies deleted
    """
    movie_ids = select(Movie.id).where(Movie.release_date < cutoff)
    session.execute(
        delete(Review).where(Review.movie_id.in_(movie_ids)),
        execution_options={"synchronize_session": False},
    )
    result = session.execute(
        delete(Movie).where(Movie.release_date < cutoff),
        execution_options={"synchronize_session": False},
    )
    session.commit()
    session.expire_all()
    return result.rowcount


def delete_all_movies(session: Session) -> int:
    """
    Delete every movie and every review.

    Returns:
        Number of movies deleted
    """
    session.execute(delete(Review), execution_options={"synchronize_session": False})
    result = session.execute(delete(Movie), execution_options={"synchronize_session": False})
    session.commit()
    session.expire_all()
    return result.rowcount


# ==================== REVIEW CRUD OPERATIONS ====================

def create_review(session: Session, review: Review) -> Review:
    """
    Persist a new review.

    Args:
        session: Database session
        review: Transient Review object with movie_id set

    Returns:
        Created Review object
    """
    session.add(review)
    session.commit()
    session.refresh(review)
    return review


def create_reviews(session: Session, reviews: Sequence[Review]) -> List[Review]:
    """
    Persist several reviews in one transaction.

    Args:
        session: Database session
        reviews: Transient Review objects with movie_id set

    Returns:
        Created Review objects in input order
    """
    session.add_all(reviews)
    session.commit()
    for review in reviews:
        session.refresh(review)
    return list(reviews)


def get_review(session: Session, review_id: int) -> Optional[Review]:
    """
    Get a review by ID.

    Args:
        session: Database session
        review_id: Review ID

    Returns:
        Review object or None if not found
    """
    return session.query(Review).filter(Review.id == review_id).first()


def review_exists(session: Session, review_id: int) -> bool:
    """Check whether a review with the given ID exists."""
    return session.query(func.count(Review.id)).filter(Review.id == review_id).scalar() > 0


def get_reviews(session: Session) -> List[Review]:
    """Get all reviews ordered by ID."""
    return session.query(Review).order_by(Review.id).all()


def get_reviews_by_movie(session: Session, movie_id: int) -> List[Review]:
    """
    Get all reviews for a specific movie.

    Args:
        session: Database session
        movie_id: Movie ID

    Returns:
        List of Review objects
    """
    return session.query(Review).filter(
        Review.movie_id == movie_id
    ).order_by(Review.id).all()


def get_review_count(session: Session) -> int:
    """Get total count of reviews."""
    return session.query(func.count(Review.id)).scalar()


def save_review(session: Session, review: Review) -> Review:
    """Commit pending changes to a persistent review."""
    session.commit()
    session.refresh(review)
    return review


def delete_review(session: Session, review_id: int) -> bool:
    """
    Delete a review.

    Args:
        session: Database session
        review_id: Review ID

    Returns:
        True if review was deleted, False if not found
    """
    review = get_review(session, review_id)
    if review:
        session.delete(review)
        session.commit()
        return True
    return False


def delete_all_reviews(session: Session) -> int:
    """
    Delete every review.

    Returns:
        Number of reviews deleted
    """
    result = session.execute(delete(Review), execution_options={"synchronize_session": False})
    session.commit()
    session.expire_all()
    return result.rowcount
