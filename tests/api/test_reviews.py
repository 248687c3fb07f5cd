"""
API tests for review endpoints.

Uses FastAPI TestClient against the app with an in-memory database.
"""

import pytest

from conftest import ADMIN, USER


@pytest.fixture
def movie_id(client, movie_payload):
    r = client.post("/api/movies", json=movie_payload, auth=ADMIN)
    assert r.status_code == 200
    return r.json()["id"]


def review_payload(movie_id, **overrides):
    payload = {"username": "alice", "comment": "Loved it", "rating": 9, "movie": {"id": movie_id}}
    payload.update(overrides)
    return payload


def create_review(client, payload):
    r = client.post("/api/reviews", json=payload, auth=ADMIN)
    assert r.status_code == 200
    return r.json()


class TestReviewReads:
    """Tests for GET /api/reviews and GET /api/reviews/{id}."""

    def test_list_reviews(self, client, movie_id):
        create_review(client, review_payload(movie_id))

        r = client.get("/api/reviews", auth=USER)
        assert r.status_code == 200
        data = r.json()
        assert len(data) == 1
        assert data[0]["movieId"] == movie_id
        assert "movie" not in data[0]

    def test_list_reviews_by_movie(self, client, movie_id, movie_payload):
        other = client.post("/api/movies", json={**movie_payload, "title": "Other"}, auth=ADMIN).json()
        create_review(client, review_payload(movie_id, username="a"))
        create_review(client, review_payload(other["id"], username="b"))

        r = client.get(f"/api/reviews?movieId={other['id']}", auth=USER)
        assert r.status_code == 200
        assert [rv["username"] for rv in r.json()] == ["b"]

    def test_get_review(self, client, movie_id):
        review = create_review(client, review_payload(movie_id))

        r = client.get(f"/api/reviews/{review['id']}", auth=USER)
        assert r.status_code == 200
        assert r.json()["comment"] == "Loved it"

    def test_get_review_not_found(self, client):
        assert client.get("/api/reviews/999999", auth=USER).status_code == 404

    def test_movie_lists_its_reviews(self, client, movie_id):
        review = create_review(client, review_payload(movie_id))

        movie = client.get(f"/api/movies/{movie_id}", auth=USER).json()
        assert [rv["id"] for rv in movie["reviews"]] == [review["id"]]


class TestReviewWrites:
    """Tests for POST, PUT and DELETE under /api/reviews."""

    def test_create_without_movie(self, client):
        r = client.post("/api/reviews", json={"username": "a", "comment": "b", "rating": 5}, auth=ADMIN)
        assert r.status_code == 400
        assert "linked to a movie" in r.json()["detail"]
        assert client.get("/api/reviews", auth=USER).json() == []

    def test_create_with_unknown_movie(self, client):
        r = client.post("/api/reviews", json=review_payload(999), auth=ADMIN)
        assert r.status_code == 400
        assert "Movie with ID 999 not found." == r.json()["detail"]

    def test_create_invalid_fields(self, client, movie_id):
        r = client.post("/api/reviews", json=review_payload(movie_id, rating=11), auth=ADMIN)
        assert r.status_code == 400
        assert [e["field"] for e in r.json()["detail"]["errors"]] == ["rating"]

    def test_batch(self, client, movie_id):
        r = client.post(
            "/api/reviews/batch",
            json=[review_payload(movie_id, username="a"), review_payload(movie_id, username="b")],
            auth=ADMIN,
        )
        assert r.status_code == 200
        assert [rv["username"] for rv in r.json()] == ["a", "b"]

    def test_batch_all_or_nothing(self, client, movie_id):
        r = client.post(
            "/api/reviews/batch",
            json=[review_payload(movie_id), review_payload(999)],
            auth=ADMIN,
        )
        assert r.status_code == 400
        assert client.get("/api/reviews", auth=USER).json() == []

    def test_update_review(self, client, movie_id):
        review = create_review(client, review_payload(movie_id))

        r = client.put(
            f"/api/reviews/{review['id']}",
            json={"username": "bob", "comment": "Changed my mind", "rating": 3},
            auth=ADMIN,
        )
        assert r.status_code == 200
        data = r.json()
        assert data["username"] == "bob"
        assert data["rating"] == 3
        assert data["movieId"] == movie_id

    def test_update_review_not_found(self, client, movie_id):
        r = client.put("/api/reviews/999999", json=review_payload(movie_id), auth=ADMIN)
        assert r.status_code == 404

    def test_update_review_unknown_movie(self, client, movie_id):
        review = create_review(client, review_payload(movie_id))

        r = client.put(f"/api/reviews/{review['id']}", json=review_payload(999), auth=ADMIN)
        assert r.status_code == 400

    def test_delete_review(self, client, movie_id):
        review = create_review(client, review_payload(movie_id))

        assert client.delete(f"/api/reviews/{review['id']}", auth=ADMIN).status_code == 204
        assert client.get(f"/api/reviews/{review['id']}", auth=USER).status_code == 404
        assert client.get(f"/api/movies/{movie_id}", auth=USER).status_code == 200

    def test_delete_review_not_found(self, client):
        assert client.delete("/api/reviews/999999", auth=ADMIN).status_code == 404

    def test_delete_all_reviews(self, client, movie_id):
        create_review(client, review_payload(movie_id))

        assert client.delete("/api/reviews", auth=ADMIN).status_code == 204
        assert client.delete("/api/reviews", auth=ADMIN).status_code == 204
        assert client.get("/api/reviews", auth=USER).json() == []
        assert client.get(f"/api/movies/{movie_id}", auth=USER).json()["reviews"] == []
