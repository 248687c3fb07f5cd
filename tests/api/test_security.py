"""
API tests for authentication and role checks.
"""

import pytest

from conftest import ADMIN, USER


class TestAuthentication:
    """Unauthenticated or wrongly authenticated calls are rejected."""

    @pytest.mark.parametrize("method,path", [
        ("get", "/api/movies"),
        ("get", "/api/movies/1"),
        ("get", "/api/reviews"),
        ("post", "/api/movies"),
        ("delete", "/api/movies/1"),
        ("delete", "/api/reviews"),
    ])
    def test_without_credentials(self, client, method, path):
        r = client.request(method, path)
        assert r.status_code == 401
        assert r.headers["www-authenticate"] == "Basic"

    def test_wrong_password(self, client):
        r = client.get("/api/movies", auth=(USER[0], "nope"))
        assert r.status_code == 401

    def test_unknown_user(self, client):
        r = client.get("/api/movies", auth=("mallory", USER[1]))
        assert r.status_code == 401

    def test_open_endpoints(self, client):
        assert client.get("/").status_code == 200
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"


class TestRoles:
    """Reads need any account; writes need the admin role."""

    def test_user_can_read(self, client):
        assert client.get("/api/movies", auth=USER).status_code == 200
        assert client.get("/api/reviews", auth=USER).status_code == 200

    @pytest.mark.parametrize("method,path", [
        ("post", "/api/movies"),
        ("post", "/api/movies/batch"),
        ("put", "/api/movies/1"),
        ("delete", "/api/movies/1"),
        ("delete", "/api/movies/filter/releaseDate?date=2021-01-01"),
        ("delete", "/api/movies"),
        ("post", "/api/reviews"),
        ("post", "/api/reviews/batch"),
        ("put", "/api/reviews/1"),
        ("delete", "/api/reviews/1"),
        ("delete", "/api/reviews"),
    ])
    def test_user_cannot_write(self, client, method, path):
        r = client.request(method, path, json={}, auth=USER)
        assert r.status_code == 403

    def test_admin_can_write(self, client, movie_payload):
        r = client.post("/api/movies", json=movie_payload, auth=ADMIN)
        assert r.status_code == 200
        assert client.delete("/api/movies", auth=ADMIN).status_code == 204
