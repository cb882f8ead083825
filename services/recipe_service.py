from typing import List
import logging

from sqlalchemy.orm import Session

from repositories import RecipeRepository
from domain.models import Recipe
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("weekplanner.recipe")


class RecipeService:
    """Recipe lookups used by the week planner."""

    def __init__(self, db: Session):
        self.db: Session = db
        self.recipes = RecipeRepository(db)

    def get_recipe_by_id(self, recipe_id: str) -> Recipe:
        """
        Get a recipe by ID.

        Raises:
            NotFoundError: If no recipe with this ID exists
        """
        recipe = self.recipes.get_by_id(str(recipe_id))
        if recipe is None:
            logger.info("Recipe %s not found", recipe_id)
            raise NotFoundError(
                f"Recipe {recipe_id} not found",
                details={"recipe_id": str(recipe_id)},
                code="RECIPE_NOT_FOUND",
            )
        return recipe

    def create_recipe(self, name: str) -> Recipe:
        name = (name or "").strip()
        if not name:
            raise ServiceValidationError("Recipe name must not be empty")

        recipe = self.recipes.create_recipe(name)
        logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
        return recipe

    def list_recipes(self, skip: int = 0, limit: int = 100) -> List[Recipe]:
        return self.recipes.list_by_name(skip=skip, limit=limit)
