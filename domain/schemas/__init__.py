"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import RecipeCreate, RecipeResponse
from domain.schemas.week_schemas import (
    WeekData,
    WeekRecipeBody,
    WeekDayResponse,
    DeleteResult,
)

__all__ = [
    "RecipeCreate",
    "RecipeResponse",
    "WeekData",
    "WeekRecipeBody",
    "WeekDayResponse",
    "DeleteResult",
]
