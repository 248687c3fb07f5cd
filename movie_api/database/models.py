"""
SQLAlchemy ORM models for the movie review database.

This module defines the Movie and Review tables. A movie owns its reviews:
deleting a movie deletes its reviews, and a review removed from a movie's
collection is deleted rather than left without a movie.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy import (
    Integer, String, Float, Boolean, Date, ForeignKey,
    CheckConstraint, Index
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing movie information.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title (2 to 100 characters)
        genre: Free-text genre
        release_date: Release date, never in the future
        age_rating: Minimum viewer age (non-negative)
        average_rating: Caller-supplied average rating
        recommended: Recommendation flag
        reviews: Reviews owned by this movie, ordered by id
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    genre: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    release_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    age_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    recommended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Reviews only store the movie's id, so the ownership is one-directional
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        cascade="all, delete-orphan",
        order_by="Review.id",
    )

    __table_args__ = (
        CheckConstraint("age_rating >= 0", name='check_age_rating'),
        Index('idx_movies_genre', 'genre'),
        Index('idx_movies_release_date', 'release_date'),
        Index('idx_movies_recommended', 'recommended'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', release_date={self.release_date})>"


class Review(Base):
    """
    Review table storing user reviews of movies.

    Attributes:
        id: Primary key, auto-incremented
        username: Author name (max 50 characters)
        comment: Review text (max 500 characters)
        rating: Rating value (1 to 10)
        movie_id: Foreign key to movies table
    """
    __tablename__ = 'reviews'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    comment: Mapped[str] = mapped_column(String(500), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('movies.id', ondelete='CASCADE'),
        nullable=False
    )

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 10", name='check_rating_range'),
        Index('idx_reviews_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, movie_id={self.movie_id}, username='{self.username}', rating={self.rating})>"
