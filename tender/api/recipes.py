"""Recipe catalog and discovery API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tender.api.dependencies import get_current_user, get_discovery_service, get_recipe_service
from tender.config import get_settings
from tender.models.user import User
from tender.schemas.common import SuccessResponse
from tender.schemas.recipe import ReactionResponse, RecipeCreate, RecipeResponse, RecipeUpdate
from tender.services.discovery import DiscoveryService, coerce_limit
from tender.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """The full catalog. No login needed."""
    return service.list_catalog()


@router.get("/discover", response_model=list[RecipeResponse])
def discover_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DiscoveryService, Depends(get_discovery_service)],
    limit: Annotated[str | None, Query()] = None,
):
    """Unseen recipes that fit the user's dietary restrictions, in random order."""
    settings = get_settings()
    count = coerce_limit(
        limit, default=settings.discover_default_limit, maximum=settings.discover_max_limit
    )
    return service.discover(current_user.id, count)


@router.get("/user/created", response_model=list[RecipeResponse])
def list_created_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Recipes the current user authored."""
    return service.list_created_by(current_user.id)


@router.get("/user/liked", response_model=list[RecipeResponse])
def list_liked_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Recipes the current user liked, newest like first."""
    return service.list_liked_by(current_user.id)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a recipe by ID."""
    recipe = service.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    data: RecipeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Add a recipe to the catalog."""
    return service.create(current_user.id, data)


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    data: RecipeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Update a recipe. Only its creator or an admin may."""
    recipe = service.get_editable(recipe_id, current_user)
    return service.update(recipe, data)


@router.delete("/{recipe_id}", response_model=SuccessResponse)
def delete_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe. Only its creator or an admin may."""
    recipe = service.get_editable(recipe_id, current_user)
    service.delete(recipe)
    return SuccessResponse()


@router.post("/{recipe_id}/like", response_model=SuccessResponse)
def like_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DiscoveryService, Depends(get_discovery_service)],
):
    service.like(current_user.id, recipe_id)
    return SuccessResponse()


@router.post("/{recipe_id}/dislike", response_model=SuccessResponse)
def dislike_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DiscoveryService, Depends(get_discovery_service)],
):
    service.dislike(current_user.id, recipe_id)
    return SuccessResponse()


@router.delete("/{recipe_id}/like", response_model=SuccessResponse)
def unlike_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DiscoveryService, Depends(get_discovery_service)],
):
    """Remove a like; the recipe can be discovered again."""
    service.unlike(current_user.id, recipe_id)
    return SuccessResponse()


@router.get("/{recipe_id}/reaction", response_model=ReactionResponse)
def get_reaction(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[DiscoveryService, Depends(get_discovery_service)],
):
    """Whether the current user liked, disliked or hasn't seen a recipe."""
    return ReactionResponse(
        recipe_id=recipe_id, reaction=service.reaction(current_user.id, recipe_id)
    )
