"""API tests for recipe generation, CRUD and search."""

import pytest

from api import app
from SmartRecipe import utils_time
from SmartRecipe.database import RecipeRequestEntity, User
from SmartRecipe.routers.recipes import get_random_source


class TestGenerateRecipe:

    def test_generate_stores_request_and_recipe(self, client, make_recipe, db_session):
        data = make_recipe(user_id=3)

        assert data["recipe_title"] == "Italian Breakfast"
        assert data["content"].startswith("🍳 BREAKFAST RECIPE")
        assert "   1. Crack and whisk the eggs in a bowl, season with salt and pepper" in data["content"]
        assert data["prep_time_minutes"] <= 25
        assert data["servings"] in {"2-4 servings", "4-6 servings"}

        stored = client.get(f"/api/recipes/{data['recipe_id']}").json()["data"]
        assert stored["content"] == data["content"]
        assert stored["request_id"] == data["request_id"]
        assert stored["user_id"] == 3

        request_row = db_session.query(RecipeRequestEntity).filter_by(id=data["request_id"]).one()
        assert request_row.cuisine == "Italian"
        assert request_row.meal_type == "BREAKFAST"

    def test_generated_on_matches_stored_created_at(self, client, make_recipe, monkeypatch):
        monkeypatch.setattr(utils_time, "APP_TIMEZONE", "Pacific/Kiritimati")
        data = make_recipe()

        stored = client.get(f"/api/recipes/{data['recipe_id']}").json()["data"]
        stamp = stored["created_at"][:16].replace("T", " ")

        assert data["content"].splitlines()[1] == f"⏰ Generated on: {stamp}"

    def test_unknown_user_becomes_demo_user(self, make_recipe, db_session):
        make_recipe(user_id=42)

        user = db_session.query(User).filter_by(id=42).one()
        assert user.username == "demo_user_42"
        assert user.email == "demo42@example.com"

    def test_random_source_can_be_injected(self, client, generate_payload, low_rng):
        app.dependency_overrides[get_random_source] = lambda: low_rng

        response = client.post("/api/recipes/generate", json=generate_payload, headers={"X-USER-ID": "1"})

        data = response.json()["data"]
        assert data["prep_time_minutes"] == 23
        assert data["servings"] == "2-4 servings"
        assert data["calories"] == "~500 kcal"

    def test_complexity_casing_is_kept(self, make_recipe):
        data = make_recipe(complexity="Advanced")

        assert "📊 Difficulty: Advanced" in data["content"]
        assert "Plate beautifully with garnishes and arrange ingredients artistically" in data["content"]

    def test_user_header_is_required(self, client, generate_payload):
        response = client.post("/api/recipes/generate", json=generate_payload)

        assert response.status_code == 422

    @pytest.mark.parametrize("field,value", [
        ("ingredients", "   "),
        ("ingredients", ""),
        ("cuisine", " "),
        ("meal_type", "BRUNCH"),
        ("cooking_time", "SOON"),
        ("complexity", "expert"),
    ])
    def test_invalid_requests_are_rejected(self, client, generate_payload, field, value):
        payload = {**generate_payload, field: value}

        response = client.post("/api/recipes/generate", json=payload, headers={"X-USER-ID": "1"})

        assert response.status_code == 422


class TestRecipeCrud:

    def test_create_update_delete(self, client):
        created = client.post("/api/recipes", json={
            "user_id": 5,
            "recipe_title": "Toast",
            "content": "Toast the bread.",
        })
        assert created.status_code == 200
        recipe_id = created.json()["data"]["id"]

        updated = client.put(f"/api/recipes/{recipe_id}", json={"content": "Toast the bread twice."})
        assert updated.status_code == 200
        assert updated.json()["data"]["content"] == "Toast the bread twice."
        assert updated.json()["data"]["recipe_title"] == "Toast"

        assert client.delete(f"/api/recipes/{recipe_id}").status_code == 200
        assert client.get(f"/api/recipes/{recipe_id}").status_code == 404
        assert client.delete(f"/api/recipes/{recipe_id}").status_code == 404

    def test_create_with_missing_request_is_404(self, client):
        response = client.post("/api/recipes", json={"user_id": 1, "request_id": 99, "content": "x"})

        assert response.status_code == 404

    def test_update_missing_recipe_is_404(self, client):
        assert client.put("/api/recipes/999", json={"content": "x"}).status_code == 404

    @pytest.mark.parametrize("payload", [
        {"content": None},
        {"content": "   "},
        {"user_id": None},
    ])
    def test_update_rejects_null_required_fields(self, client, make_recipe, payload):
        recipe_id = make_recipe()["recipe_id"]

        response = client.put(f"/api/recipes/{recipe_id}", json=payload)

        assert response.status_code == 422
        assert client.get(f"/api/recipes/{recipe_id}").json()["data"]["content"].startswith("🍳")

    def test_update_with_missing_request_is_404(self, client, make_recipe):
        data = make_recipe()

        response = client.put(f"/api/recipes/{data['recipe_id']}", json={"request_id": 999})

        assert response.status_code == 404
        assert client.get(f"/api/recipes/{data['recipe_id']}").json()["data"]["request_id"] == data["request_id"]

    def test_update_to_new_user_creates_demo_user(self, client, make_recipe, db_session):
        recipe_id = make_recipe()["recipe_id"]

        response = client.put(f"/api/recipes/{recipe_id}", json={"user_id": 77})

        assert response.status_code == 200
        assert response.json()["data"]["user_id"] == 77
        assert db_session.query(User).filter_by(id=77).one().username == "demo_user_77"

    def test_list_and_user_recipes(self, client, make_recipe):
        first = make_recipe(user_id=1)
        second = make_recipe(user_id=1, meal_type="DINNER")
        make_recipe(user_id=2)

        assert len(client.get("/api/recipes").json()["data"]) == 3

        mine = client.get("/api/recipes/user/1").json()["data"]
        assert [r["id"] for r in mine] == [second["recipe_id"], first["recipe_id"]]

        limited = client.get("/api/recipes/user/1", params={"limit": 1}).json()["data"]
        assert len(limited) == 1


class TestRecipeRequests:

    def test_request_crud(self, client, generate_payload):
        created = client.post("/api/recipes/requests", json={**generate_payload, "user_id": 4})
        assert created.status_code == 200
        request_id = created.json()["data"]["id"]

        assert client.get(f"/api/recipes/requests/{request_id}").json()["data"]["cuisine"] == "Italian"
        assert len(client.get("/api/recipes/requests").json()["data"]) == 1
        assert len(client.get("/api/recipes/user/4/requests").json()["data"]) == 1

        updated = client.put(f"/api/recipes/requests/{request_id}", json={**generate_payload, "user_id": 4, "cuisine": "Indian"})
        assert updated.json()["data"]["cuisine"] == "Indian"

        assert client.delete(f"/api/recipes/requests/{request_id}").status_code == 200
        assert client.get(f"/api/recipes/requests/{request_id}").status_code == 404

    def test_deleting_request_keeps_recipe(self, client, make_recipe):
        data = make_recipe()

        client.delete(f"/api/recipes/requests/{data['request_id']}")

        recipe = client.get(f"/api/recipes/{data['recipe_id']}").json()["data"]
        assert recipe["request_id"] is None


class TestRecipeSearch:

    @pytest.fixture
    def recipes(self, make_recipe):
        eggs = make_recipe(user_id=1)
        chicken = make_recipe(
            user_id=1,
            ingredients="Chicken, rice",
            meal_type="DINNER",
            cuisine="Mexican",
            cooking_time="OVER_60",
            complexity="advanced",
        )
        make_recipe(user_id=2)
        return eggs, chicken

    def test_ingredient_search_is_case_insensitive_substring(self, client, recipes):
        eggs, chicken = recipes

        found = client.get("/api/recipes/user/1/search", params={"ingredient": "TOMAT"}).json()["data"]

        assert [r["id"] for r in found] == [eggs["recipe_id"]]

    @pytest.mark.parametrize("path", [
        "meal-type/dinner",
        "cuisine/MEXICAN",
        "complexity/Advanced",
        "cooking-time/over_60",
    ])
    def test_filters_ignore_case(self, client, recipes, path):
        eggs, chicken = recipes

        found = client.get(f"/api/recipes/user/1/{path}").json()["data"]

        assert [r["id"] for r in found] == [chicken["recipe_id"]]

    def test_filters_are_scoped_to_user(self, client, recipes):
        found = client.get("/api/recipes/user/2/cuisine/italian").json()["data"]

        assert len(found) == 1
        assert found[0]["user_id"] == 2


class TestOperationalRoutes:

    def test_static_routes_are_not_shadowed(self, client):
        assert client.get("/api/recipes/health").json()["message"] == "Recipe service is healthy! 🍳"
        assert client.get("/api/recipes/requests").status_code == 200
        assert client.get("/api/recipes/reviews/recent").status_code == 200

    def test_check_env_hides_values(self, client):
        data = client.get("/api/recipes/check-env").json()["data"]

        assert data["database_url_configured"] is True
        assert all(isinstance(value, bool) for value in data.values())

    def test_root_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
