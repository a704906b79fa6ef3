"""Recipe discovery: the swipe feed and the like/dislike state machine.

Each (user, recipe) pair is unseen, liked or disliked. Liking removes a
dislike and vice versa; unliking returns the recipe to unseen so it can be
discovered again. Discovery only ever offers unseen recipes that are safe for
the user's current dietary restrictions, in a fresh random order per call.
"""

import logging
import random

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tender.models.recipe import DislikedRecipe, LikedRecipe, Recipe
from tender.models.user import User, UserDietary
from tender.schemas.recipe import RecipeResponse
from tender.services.dietary import resolve_exclusions, violates_dietary
from tender.services.recipe_service import likes_count_column

logger = logging.getLogger(__name__)

DEFAULT_DISCOVER_LIMIT = 10


def coerce_limit(
    value: int | str | None,
    default: int = DEFAULT_DISCOVER_LIMIT,
    maximum: int | None = None,
) -> int:
    """Parse a requested page size, falling back to the default when invalid."""
    try:
        limit = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if limit <= 0:
        return default
    if maximum is not None:
        limit = min(limit, maximum)
    return limit


class DiscoveryService:
    """Service for discovery and like/dislike transitions."""

    def __init__(self, db: Session, rng: random.Random | None = None):
        self.db = db
        # SystemRandom by default so the feed order cannot be predicted
        self.rng = rng or random.SystemRandom()

    def get_restrictions(self, user_id: int) -> set[str]:
        """Dietary labels for a user. Unknown users have none."""
        rows = self.db.query(UserDietary.dietary).filter(UserDietary.user_id == user_id).all()
        return {dietary for (dietary,) in rows}

    def discover(self, user_id: int, limit: int | None = None) -> list[RecipeResponse]:
        """Random slice of unseen recipes that fit the user's restrictions."""
        limit = coerce_limit(limit)
        restrictions = self.get_restrictions(user_id)
        excluded = resolve_exclusions(restrictions)

        liked_ids = select(LikedRecipe.recipe_id).where(LikedRecipe.user_id == user_id)
        disliked_ids = select(DislikedRecipe.recipe_id).where(DislikedRecipe.user_id == user_id)
        candidates = (
            self.db.query(Recipe, likes_count_column())
            .filter(Recipe.id.not_in(liked_ids), Recipe.id.not_in(disliked_ids))
            .order_by(Recipe.id)
            .all()
        )

        # Overridden labels are dropped per recipe; cache exclusions by override set
        exclusions_by_override: dict[frozenset[str], set[str]] = {frozenset(): excluded}
        allowed = []
        for recipe, likes_count in candidates:
            overrides = frozenset(recipe.dietary_overrides or ()) & restrictions
            if overrides not in exclusions_by_override:
                exclusions_by_override[overrides] = resolve_exclusions(restrictions - overrides)
            if not violates_dietary(recipe.ingredients, exclusions_by_override[overrides]):
                allowed.append((recipe, likes_count))

        self.rng.shuffle(allowed)
        logger.debug(
            f"Discovery for user {user_id}: {len(candidates)} unseen, "
            f"{len(allowed)} allowed, returning {min(limit, len(allowed))}"
        )
        return [RecipeResponse.from_recipe(recipe, count) for recipe, count in allowed[:limit]]

    def _pair_exists(self, user_id: int, recipe_id: int) -> bool:
        recipe = self.db.query(Recipe.id).filter(Recipe.id == recipe_id).first()
        user = self.db.query(User.id).filter(User.id == user_id).first()
        return recipe is not None and user is not None

    def _set_reaction(self, user_id: int, recipe_id: int, keep, drop) -> bool:
        """Record `keep` for the pair and remove any `drop` row. Idempotent."""
        if not self._pair_exists(user_id, recipe_id):
            logger.info(f"Ignoring reaction by user {user_id} to missing recipe {recipe_id}")
            return False

        self.db.query(drop).filter(drop.user_id == user_id, drop.recipe_id == recipe_id).delete(
            synchronize_session=False
        )
        existing = (
            self.db.query(keep).filter(keep.user_id == user_id, keep.recipe_id == recipe_id).first()
        )
        if existing is None:
            self.db.add(keep(user_id=user_id, recipe_id=recipe_id))
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent request recorded the same reaction first
            self.db.rollback()
            self.db.query(drop).filter(
                drop.user_id == user_id, drop.recipe_id == recipe_id
            ).delete(synchronize_session=False)
            self.db.commit()
        return True

    def like(self, user_id: int, recipe_id: int) -> bool:
        """Mark a recipe liked, clearing any dislike."""
        return self._set_reaction(user_id, recipe_id, keep=LikedRecipe, drop=DislikedRecipe)

    def dislike(self, user_id: int, recipe_id: int) -> bool:
        """Mark a recipe disliked, clearing any like."""
        return self._set_reaction(user_id, recipe_id, keep=DislikedRecipe, drop=LikedRecipe)

    def unlike(self, user_id: int, recipe_id: int) -> None:
        """Remove a like so the recipe becomes discoverable again."""
        self.db.query(LikedRecipe).filter(
            LikedRecipe.user_id == user_id, LikedRecipe.recipe_id == recipe_id
        ).delete(synchronize_session=False)
        self.db.commit()

    def reaction(self, user_id: int, recipe_id: int) -> str:
        """Current state of the pair: "liked", "disliked" or "unseen"."""
        if (
            self.db.query(LikedRecipe.id)
            .filter(LikedRecipe.user_id == user_id, LikedRecipe.recipe_id == recipe_id)
            .first()
        ):
            return "liked"
        if (
            self.db.query(DislikedRecipe.id)
            .filter(DislikedRecipe.user_id == user_id, DislikedRecipe.recipe_id == recipe_id)
            .first()
        ):
            return "disliked"
        return "unseen"
