"""
Fixtures for API tests.

The app's database dependency is pointed at a fresh in-memory SQLite
database for every test.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movie_api.api.dependencies import get_db
from movie_api.api.main import app
from movie_api.database.models import Base

USER = ("user", "user-secret")
ADMIN = ("admin", "admin-secret")


@pytest.fixture
def engine():
    """In-memory engine shared across TestClient threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine, monkeypatch):
    """TestClient with test credentials and the in-memory database."""
    monkeypatch.setenv("API_USER_NAME", USER[0])
    monkeypatch.setenv("API_USER_PASSWORD", USER[1])
    monkeypatch.setenv("API_ADMIN_NAME", ADMIN[0])
    monkeypatch.setenv("API_ADMIN_PASSWORD", ADMIN[1])

    TestingSession = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def movie_payload():
    return {
        "title": "Inception",
        "genre": "Sci-Fi",
        "releaseDate": "2010-07-16",
        "ageRating": 12,
        "averageRating": 8.8,
        "recommended": True,
    }
