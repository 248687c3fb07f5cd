"""
FastAPI dependency injection for database session and services.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from movie_api.api.config import get_database_path
from movie_api.database.connection import get_db_manager
from movie_api.services.movie_service import MovieService
from movie_api.services.review_service import ReviewService


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_manager = get_db_manager(db_path=get_database_path())
    with db_manager.session_scope() as session:
        yield session


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    """Movie service bound to the request's session."""
    return MovieService(db)


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    """Review service bound to the request's session."""
    return ReviewService(db)
