"""Discovery feed and like/dislike tests."""

import random

from conftest import create_recipe

from tender.models.recipe import DislikedRecipe, LikedRecipe, Recipe
from tender.models.user import User, UserDietary
from tender.services.auth import get_password_hash
from tender.services.discovery import DEFAULT_DISCOVER_LIMIT, DiscoveryService, coerce_limit

BEEF_STIR_FRY = "500g beef strips,1 bell pepper,1 cup broccoli,2 tbsp soy sauce"
CAESAR_SALAD = "2 romaine hearts,50g parmesan,1 cup croutons,1/3 cup caesar dressing,1 lemon"
FRUIT_SALAD = "1 apple,1 banana,1 orange"


def make_user(db, email="swiper@example.com", dietary=()) -> User:
    user = User(
        email=email,
        password_hash=get_password_hash("password123"),
        first_name="Swipe",
        last_name="Right",
    )
    user.dietary_entries = [UserDietary(dietary=label) for label in dietary]
    db.add(user)
    db.commit()
    return user


def make_recipe(db, name, ingredients, overrides=None) -> Recipe:
    recipe = Recipe(name=name, ingredients=ingredients, dietary_overrides=overrides)
    db.add(recipe)
    db.commit()
    return recipe


def names(recipes) -> set[str]:
    return {recipe.name for recipe in recipes}


def test_coerce_limit():
    assert coerce_limit(None) == DEFAULT_DISCOVER_LIMIT
    assert coerce_limit("abc") == DEFAULT_DISCOVER_LIMIT
    assert coerce_limit("0") == DEFAULT_DISCOVER_LIMIT
    assert coerce_limit(-3) == DEFAULT_DISCOVER_LIMIT
    assert coerce_limit("5") == 5
    assert coerce_limit(500, maximum=50) == 50
    assert coerce_limit(None, default=7) == 7


def test_discover_filters_by_dietary(db):
    user = make_user(db, dietary=["vegetarian"])
    make_recipe(db, "Beef Stir Fry", BEEF_STIR_FRY)
    make_recipe(db, "Caesar Salad", CAESAR_SALAD)

    result = DiscoveryService(db, random.Random(1)).discover(user.id)
    assert names(result) == {"Caesar Salad"}


def test_discover_without_restrictions_returns_everything(db):
    user = make_user(db)
    make_recipe(db, "Beef Stir Fry", BEEF_STIR_FRY)
    make_recipe(db, "Caesar Salad", CAESAR_SALAD)

    result = DiscoveryService(db, random.Random(1)).discover(user.id)
    assert names(result) == {"Beef Stir Fry", "Caesar Salad"}


def test_discover_combines_restrictions(db):
    user = make_user(db, dietary=["vegetarian", "dairy-free"])
    make_recipe(db, "Beef Stir Fry", BEEF_STIR_FRY)
    make_recipe(db, "Caesar Salad", CAESAR_SALAD)
    make_recipe(db, "Fruit Salad", FRUIT_SALAD)

    result = DiscoveryService(db, random.Random(1)).discover(user.id)
    assert names(result) == {"Fruit Salad"}


def test_discover_excludes_liked_and_disliked(db):
    user = make_user(db)
    liked = make_recipe(db, "Liked", FRUIT_SALAD)
    disliked = make_recipe(db, "Disliked", FRUIT_SALAD)
    make_recipe(db, "Fresh", FRUIT_SALAD)

    service = DiscoveryService(db, random.Random(1))
    service.like(user.id, liked.id)
    service.dislike(user.id, disliked.id)

    assert names(service.discover(user.id)) == {"Fresh"}


def test_discover_respects_limit(db):
    user = make_user(db)
    for i in range(8):
        make_recipe(db, f"Recipe {i}", FRUIT_SALAD)

    result = DiscoveryService(db, random.Random(1)).discover(user.id, limit=3)
    assert len(result) == 3
    assert len(names(result)) == 3


def test_discover_order_comes_from_rng(db):
    user = make_user(db)
    for i in range(10):
        make_recipe(db, f"Recipe {i}", FRUIT_SALAD)

    first = [r.id for r in DiscoveryService(db, random.Random(42)).discover(user.id)]
    again = [r.id for r in DiscoveryService(db, random.Random(42)).discover(user.id)]
    assert first == again
    assert sorted(first) == sorted(r.id for r in db.query(Recipe).all())


def test_discover_shuffles_feed(db):
    user = make_user(db, dietary=["vegetarian"])
    make_recipe(db, "Beef Stir Fry", BEEF_STIR_FRY)
    for i in range(10):
        make_recipe(db, f"Recipe {i}", FRUIT_SALAD)
    pool = sorted(r.id for r in db.query(Recipe).filter(Recipe.name != "Beef Stir Fry").all())

    orders = [
        [r.id for r in DiscoveryService(db, random.Random(seed)).discover(user.id)]
        for seed in range(5)
    ]

    for order in orders:
        assert sorted(order) == pool
    assert len({tuple(order) for order in orders}) > 1
    assert any(order != pool for order in orders)


def test_discover_uses_injected_rng(db):
    class RecordingRandom(random.Random):
        def __init__(self):
            super().__init__(0)
            self.shuffled = []

        def shuffle(self, x):
            self.shuffled.append(list(x))
            x.reverse()

    user = make_user(db)
    for i in range(4):
        make_recipe(db, f"Recipe {i}", FRUIT_SALAD)
    rng = RecordingRandom()

    result = [r.id for r in DiscoveryService(db, rng).discover(user.id)]

    assert len(rng.shuffled) == 1
    ids_before = [recipe.id for recipe, _ in rng.shuffled[0]]
    assert result == list(reversed(ids_before))


def test_discover_invalid_limit_uses_default(db):
    user = make_user(db)
    for i in range(12):
        make_recipe(db, f"Recipe {i}", FRUIT_SALAD)
    service = DiscoveryService(db, random.Random(1))

    for limit in (0, -1, None):
        assert len(service.discover(user.id, limit=limit)) == DEFAULT_DISCOVER_LIMIT
    assert len(service.discover(user.id)) == DEFAULT_DISCOVER_LIMIT


def test_discover_unknown_user_sees_unrestricted_catalog(db):
    make_recipe(db, "Beef Stir Fry", BEEF_STIR_FRY)
    result = DiscoveryService(db, random.Random(1)).discover(999999)
    assert names(result) == {"Beef Stir Fry"}


def test_discover_empty_catalog(db):
    user = make_user(db, dietary=["vegan"])
    assert DiscoveryService(db).discover(user.id) == []


def test_dietary_override_allows_recipe(db):
    user = make_user(db, dietary=["vegetarian"])
    # "Impossible beef" trips the keyword match but has been checked by hand
    make_recipe(db, "Plant Burger", "1 impossible beef patty,1 bun", overrides=["vegetarian"])

    assert names(DiscoveryService(db, random.Random(1)).discover(user.id)) == {"Plant Burger"}


def test_dietary_override_only_lifts_its_own_label(db):
    user = make_user(db, dietary=["vegetarian", "gluten-free"])
    make_recipe(
        db, "Plant Burger", "1 impossible beef patty,2 slices bread", overrides=["vegetarian"]
    )

    assert DiscoveryService(db, random.Random(1)).discover(user.id) == []


def test_like_then_dislike_moves_reaction(db):
    user = make_user(db)
    recipe = make_recipe(db, "Caesar Salad", CAESAR_SALAD)
    service = DiscoveryService(db)

    assert service.reaction(user.id, recipe.id) == "unseen"
    assert service.like(user.id, recipe.id) is True
    assert service.reaction(user.id, recipe.id) == "liked"

    assert service.dislike(user.id, recipe.id) is True
    assert service.reaction(user.id, recipe.id) == "disliked"
    assert db.query(LikedRecipe).filter_by(user_id=user.id).count() == 0

    service.like(user.id, recipe.id)
    assert service.reaction(user.id, recipe.id) == "liked"
    assert db.query(DislikedRecipe).filter_by(user_id=user.id).count() == 0


def test_like_is_idempotent(db):
    user = make_user(db)
    recipe = make_recipe(db, "Caesar Salad", CAESAR_SALAD)
    service = DiscoveryService(db)

    service.like(user.id, recipe.id)
    service.like(user.id, recipe.id)
    assert db.query(LikedRecipe).filter_by(user_id=user.id, recipe_id=recipe.id).count() == 1


def test_unlike_returns_recipe_to_feed(db):
    user = make_user(db)
    recipe = make_recipe(db, "Caesar Salad", CAESAR_SALAD)
    service = DiscoveryService(db)

    service.like(user.id, recipe.id)
    assert service.discover(user.id) == []
    service.unlike(user.id, recipe.id)
    assert service.reaction(user.id, recipe.id) == "unseen"
    assert names(service.discover(user.id)) == {"Caesar Salad"}


def test_reaction_to_missing_recipe_is_ignored(db):
    user = make_user(db)
    service = DiscoveryService(db)
    assert service.like(user.id, 12345) is False
    assert service.dislike(user.id, 12345) is False
    assert db.query(LikedRecipe).count() == 0


def test_discover_endpoint(client, auth_headers):
    client.put("/api/v1/users/profile", headers=auth_headers, json={"dietary": ["vegetarian"]})
    create_recipe(client, auth_headers, name="Beef Stir Fry", ingredients=BEEF_STIR_FRY)
    salad = create_recipe(client, auth_headers, name="Caesar Salad", ingredients=CAESAR_SALAD)

    response = client.get("/api/v1/recipes/discover", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [r["name"] for r in data] == ["Caesar Salad"]
    assert data[0]["id"] == salad["id"]


def test_discover_endpoint_bad_limit_uses_default(client, auth_headers):
    for i in range(12):
        create_recipe(client, auth_headers, name=f"Recipe {i}")

    for limit in ("abc", "-1", "0"):
        response = client.get(f"/api/v1/recipes/discover?limit={limit}", headers=auth_headers)
        assert response.status_code == 200
        assert len(response.json()) == 10

    response = client.get("/api/v1/recipes/discover?limit=4", headers=auth_headers)
    assert len(response.json()) == 4


def test_discover_requires_auth(client):
    assert client.get("/api/v1/recipes/discover").status_code == 401


def test_like_dislike_endpoints(client, auth_headers):
    recipe = create_recipe(client, auth_headers)

    response = client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=auth_headers)
    assert response.json() == {"success": True}
    liked = client.get("/api/v1/recipes/user/liked", headers=auth_headers).json()
    assert [r["id"] for r in liked] == [recipe["id"]]
    assert liked[0]["likes_count"] == 1

    client.post(f"/api/v1/recipes/{recipe['id']}/dislike", headers=auth_headers)
    assert client.get("/api/v1/recipes/user/liked", headers=auth_headers).json() == []
    assert client.get("/api/v1/recipes/discover", headers=auth_headers).json() == []


def test_unlike_endpoint(client, auth_headers):
    recipe = create_recipe(client, auth_headers)
    client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=auth_headers)

    response = client.delete(f"/api/v1/recipes/{recipe['id']}/like", headers=auth_headers)
    assert response.status_code == 200
    discovered = client.get("/api/v1/recipes/discover", headers=auth_headers).json()
    assert [r["id"] for r in discovered] == [recipe["id"]]


def test_like_missing_recipe_acknowledged(client, auth_headers):
    response = client.post("/api/v1/recipes/999999/like", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/v1/recipes/user/liked", headers=auth_headers).json() == []


def test_likes_count_across_users(client, auth_headers, other_auth_headers):
    recipe = create_recipe(client, auth_headers)
    client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=auth_headers)
    client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=other_auth_headers)

    response = client.get(f"/api/v1/recipes/{recipe['id']}")
    assert response.json()["likes_count"] == 2

    client.delete(f"/api/v1/recipes/{recipe['id']}/like", headers=other_auth_headers)
    response = client.get(f"/api/v1/recipes/{recipe['id']}")
    assert response.json()["likes_count"] == 1


def test_reaction_endpoint(client, auth_headers):
    recipe = create_recipe(client, auth_headers)
    url = f"/api/v1/recipes/{recipe['id']}/reaction"

    response = client.get(url, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"recipe_id": recipe["id"], "reaction": "unseen"}

    client.post(f"/api/v1/recipes/{recipe['id']}/like", headers=auth_headers)
    assert client.get(url, headers=auth_headers).json()["reaction"] == "liked"

    client.post(f"/api/v1/recipes/{recipe['id']}/dislike", headers=auth_headers)
    assert client.get(url, headers=auth_headers).json()["reaction"] == "disliked"

    assert client.get(url).status_code == 401
