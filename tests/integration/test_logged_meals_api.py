"""API tests for the logged-meal history."""

import pytest


def log_meal(client, title="Italian Breakfast", email="cook@example.com", logged_at=None, **extra):
    payload = {
        "user_email": email,
        "recipe_title": title,
        "ingredients": "eggs, tomatoes",
        "cooking_time": "UNDER_30",
        "content": "🍳 BREAKFAST RECIPE",
        **extra,
    }
    if logged_at:
        payload["logged_at"] = logged_at
    return client.post("/api/logged-meals", json=payload)


class TestLoggedMeals:

    def test_log_defaults_logged_at(self, client):
        response = log_meal(client)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] > 0
        assert data["logged_at"] is not None

    def test_list_newest_first_for_user_only(self, client):
        old = log_meal(client, "Mexican Lunch", logged_at="2024-05-01T12:00:00").json()["data"]
        new = log_meal(client, "Indian Dinner", logged_at="2024-05-02T19:00:00").json()["data"]
        log_meal(client, "Other Person", email="someone@example.com")

        meals = client.get("/api/logged-meals", params={"user_email": "cook@example.com"}).json()["data"]

        assert [m["id"] for m in meals] == [new["id"], old["id"]]

    def test_search_title_ignores_case(self, client):
        log_meal(client, "Italian Breakfast", logged_at="2024-05-01T08:00:00")
        log_meal(client, "Italian Dinner", logged_at="2024-05-03T20:00:00")
        log_meal(client, "Mexican Lunch")

        found = client.get("/api/logged-meals/search", params={
            "user_email": "cook@example.com", "recipe_title": "ITALIAN",
        }).json()["data"]

        assert [m["recipe_title"] for m in found] == ["Italian Dinner", "Italian Breakfast"]

    @pytest.mark.parametrize("field,value", [
        ("user_email", "nobody"),
        ("recipe_title", "  "),
        ("content", ""),
    ])
    def test_invalid_meals_are_rejected(self, client, field, value):
        assert log_meal(client, **{field: value}).status_code == 422
