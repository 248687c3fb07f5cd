"""
Unit tests for movie and review field validation.
"""

from datetime import date, timedelta

from movie_api.api.models import MovieCreate, ReviewCreate
from movie_api.services.validation import validate_movie, validate_review

TODAY = date(2024, 6, 1)


def fields(violations):
    return [field for field, _ in violations]


class TestValidateMovie:

    def test_valid_movie(self):
        movie = MovieCreate(title="Up", release_date=TODAY, age_rating=0)
        assert validate_movie(movie, today=TODAY) == []

    def test_title_too_short(self):
        violations = validate_movie(MovieCreate(title="A"), today=TODAY)
        assert fields(violations) == ["title"]
        assert "between 2 and 100" in violations[0][1]

    def test_title_too_long(self):
        assert fields(validate_movie(MovieCreate(title="x" * 101), today=TODAY)) == ["title"]

    def test_missing_title(self):
        assert fields(validate_movie(MovieCreate(), today=TODAY)) == ["title"]

    def test_release_date_in_future(self):
        movie = MovieCreate(title="Soon", release_date=TODAY + timedelta(days=1))
        assert fields(validate_movie(movie, today=TODAY)) == ["releaseDate"]

    def test_release_date_may_be_missing(self):
        assert validate_movie(MovieCreate(title="Undated"), today=TODAY) == []

    def test_negative_age_rating(self):
        movie = MovieCreate(title="Kids", age_rating=-1)
        assert fields(validate_movie(movie, today=TODAY)) == ["ageRating"]

    def test_collects_every_violation(self):
        movie = MovieCreate(
            title="A",
            release_date=TODAY + timedelta(days=30),
            age_rating=-5,
            reviews=[ReviewCreate(username="", comment="ok", rating=11)],
        )

        assert fields(validate_movie(movie, today=TODAY)) == [
            "title",
            "releaseDate",
            "ageRating",
            "reviews[0].username",
            "reviews[0].rating",
        ]

    def test_prefix(self):
        assert fields(validate_movie(MovieCreate(title="A"), today=TODAY, prefix="[3].")) == ["[3].title"]


class TestValidateReview:

    def test_valid_review(self):
        review = ReviewCreate(username="alice", comment="Loved it", rating=10)
        assert validate_review(review) == []

    def test_blank_fields(self):
        review = ReviewCreate(username="   ", comment="", rating=5)
        assert fields(validate_review(review)) == ["username", "comment"]

    def test_length_limits(self):
        review = ReviewCreate(username="u" * 51, comment="c" * 501, rating=5)
        assert fields(validate_review(review)) == ["username", "comment"]

    def test_length_limits_inclusive(self):
        review = ReviewCreate(username="u" * 50, comment="c" * 500, rating=1)
        assert validate_review(review) == []

    def test_rating_range(self):
        assert fields(validate_review(ReviewCreate(username="a", comment="b", rating=0))) == ["rating"]
        assert fields(validate_review(ReviewCreate(username="a", comment="b", rating=11))) == ["rating"]
        assert fields(validate_review(ReviewCreate(username="a", comment="b"))) == ["rating"]
