"""Fixtures for API tests against a fresh in-memory database."""

import pytest
from fastapi.testclient import TestClient

from api import app
from SmartRecipe.database import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def reset_database():
    """Recreate every table for each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def generate_payload():
    return {
        "ingredients": "eggs, tomatoes",
        "meal_type": "BREAKFAST",
        "cuisine": "Italian",
        "cooking_time": "UNDER_30",
        "complexity": "beginner",
    }


@pytest.fixture
def make_recipe(client, generate_payload):
    """Generate and store a recipe, returning the response data."""
    def _make(user_id=1, **overrides):
        payload = {**generate_payload, **overrides}
        response = client.post("/api/recipes/generate", json=payload, headers={"X-USER-ID": str(user_id)})
        assert response.status_code == 200, response.text
        return response.json()["data"]
    return _make
