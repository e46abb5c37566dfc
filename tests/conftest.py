"""Shared pytest fixtures.

Each test gets a fresh application bound to an in-memory SQLite
database, so tests never touch a developer's local database file.
"""
import pytest

from exercise_tracker import create_app, db

TEST_CONFIG = {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"}


@pytest.fixture
def app():
    app = create_app(dict(TEST_CONFIG))
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(client):
    """Create a user through the API and return the response body."""
    def _make_user(username: str = "alice") -> dict:
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 201
        return response.get_json()
    return _make_user


@pytest.fixture
def add_exercise(client):
    """Post an exercise for ``user_id`` and return the response."""
    def _add_exercise(user_id: str, **fields):
        return client.post(f"/api/users/{user_id}/exercises", json=fields)
    return _add_exercise
