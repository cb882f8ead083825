"""Services package - Business logic layer"""

from services.recipe_service import RecipeService
from services.week_service import WeekService

__all__ = [
    "RecipeService",
    "WeekService",
]
