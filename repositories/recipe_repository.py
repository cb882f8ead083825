"""
Recipe Repository - Data access layer for recipe operations
"""

from typing import List

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def create_recipe(self, name: str) -> Recipe:
        """Create and persist a recipe"""
        return self.create(Recipe(name=name))

    def list_by_name(self, skip: int = 0, limit: int = 100) -> List[Recipe]:
        """List recipes ordered by name"""
        return (
            self.db.query(Recipe)
            .order_by(Recipe.name, Recipe.id)
            .offset(skip)
            .limit(limit)
            .all()
        )
