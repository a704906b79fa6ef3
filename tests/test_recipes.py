"""Recipe catalog API tests."""

from conftest import create_recipe

from tender.models.meal_plan import MealPlanEntry
from tender.models.recipe import LikedRecipe


def test_create_recipe(client, auth_headers):
    """Test creating a recipe with an ingredient list."""
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={
            "name": "Pasta Carbonara",
            "description": "Classic Italian pasta",
            "cookTime": 25,
            "cuisine": "Italian",
            "ingredients": ["350g spaghetti", "3 eggs", "50g parmesan, grated"],
            "sourceUrl": "https://example.com/carbonara",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Pasta Carbonara"
    assert data["cook_time"] == 25
    assert data["cuisine"] == "italian"
    assert data["ingredients"] == ["350g spaghetti", "3 eggs", "50g parmesan, grated"]
    assert data["source_link"] == "https://example.com/carbonara"
    assert data["created_by"] == auth_headers.user_id
    assert data["likes_count"] == 0


def test_create_recipe_defaults(client, auth_headers):
    data = create_recipe(client, auth_headers, name="Toast", ingredients="bread, butter")
    assert data["servings"] == 4
    assert data["difficulty"] == "medium"
    assert data["emoji"] == "🍽️"
    assert data["ingredients"] == ["bread", "butter"]
    assert data["dietary_overrides"] == []


def test_create_recipe_requires_name(client, auth_headers):
    response = client.post(
        "/api/v1/recipes", headers=auth_headers, json={"name": "   ", "ingredients": ["salt"]}
    )
    assert response.status_code == 422

    response = client.post("/api/v1/recipes", headers=auth_headers, json={"ingredients": ["salt"]})
    assert response.status_code == 422


def test_create_recipe_requires_auth(client):
    response = client.post("/api/v1/recipes", json={"name": "Anonymous"})
    assert response.status_code == 401


def test_list_recipes_is_public(client, auth_headers):
    """Test listing the catalog without logging in."""
    first = create_recipe(client, auth_headers, name="First")
    second = create_recipe(client, auth_headers, name="Second")

    response = client.get("/api/v1/recipes")
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [first["id"], second["id"]]


def test_get_recipe(client, auth_headers):
    """Test getting a specific recipe."""
    recipe = create_recipe(client, auth_headers, ingredients=["2 cups flour"])

    response = client.get(f"/api/v1/recipes/{recipe['id']}")
    assert response.status_code == 200
    assert response.json()["ingredients"] == ["2 cups flour"]


def test_get_recipe_not_found(client):
    response = client.get("/api/v1/recipes/99999")
    assert response.status_code == 404


def test_list_created_recipes(client, auth_headers, other_auth_headers):
    mine = create_recipe(client, auth_headers, name="Mine")
    create_recipe(client, other_auth_headers, name="Theirs")

    response = client.get("/api/v1/recipes/user/created", headers=auth_headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [mine["id"]]


def test_update_recipe(client, auth_headers):
    recipe = create_recipe(client, auth_headers, name="Draft", description="Old")

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}",
        headers=auth_headers,
        json={"name": "Final", "ingredients": ["1 leek", "2 potatoes"], "servings": 2},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Final"
    assert data["description"] == "Old"
    assert data["servings"] == 2
    assert data["ingredients"] == ["1 leek", "2 potatoes"]


def test_update_recipe_dietary_overrides(client, auth_headers):
    recipe = create_recipe(client, auth_headers)

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}",
        headers=auth_headers,
        json={"dietary_overrides": ["vegan"]},
    )
    assert response.status_code == 200
    assert response.json()["dietary_overrides"] == ["vegan"]

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}",
        headers=auth_headers,
        json={"dietary_overrides": ["carnivore"]},
    )
    assert response.status_code == 422


def test_update_recipe_blank_name_rejected(client, auth_headers):
    recipe = create_recipe(client, auth_headers)
    response = client.put(
        f"/api/v1/recipes/{recipe['id']}", headers=auth_headers, json={"name": ""}
    )
    assert response.status_code == 422


def test_update_recipe_by_other_user_forbidden(client, auth_headers, other_auth_headers):
    recipe = create_recipe(client, auth_headers)
    response = client.put(
        f"/api/v1/recipes/{recipe['id']}", headers=other_auth_headers, json={"name": "Stolen"}
    )
    assert response.status_code == 403


def test_update_missing_recipe(client, auth_headers):
    response = client.put("/api/v1/recipes/99999", headers=auth_headers, json={"name": "X"})
    assert response.status_code == 404


def test_admin_can_edit_any_recipe(client, auth_headers, other_auth_headers):
    recipe = create_recipe(client, auth_headers)
    client.post("/api/v1/admin/promote", headers=other_auth_headers, json={})

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}", headers=other_auth_headers, json={"name": "Moderated"}
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Moderated"


def test_delete_recipe_cascades(client, auth_headers, other_auth_headers, db):
    recipe = create_recipe(client, auth_headers)
    client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=other_auth_headers)
    client.post(
        "/api/v1/mealplan",
        headers=auth_headers,
        json={"recipe_id": recipe["id"], "date": "2026-04-01", "meal_type": "lunch"},
    )

    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/v1/recipes/{recipe['id']}").status_code == 404
    assert db.query(LikedRecipe).filter_by(recipe_id=recipe["id"]).count() == 0
    assert db.query(MealPlanEntry).filter_by(recipe_id=recipe["id"]).count() == 0


def test_delete_recipe_by_other_user_forbidden(client, auth_headers, other_auth_headers):
    recipe = create_recipe(client, auth_headers)
    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=other_auth_headers)
    assert response.status_code == 403
    assert client.get(f"/api/v1/recipes/{recipe['id']}").status_code == 200
